import sys
from pathlib import Path

import pytest

# Garante a raiz do projeto (onde ficam parsers/, core/...) no sys.path
ROOT = Path(__file__).resolve().parents[1]
root_str = str(ROOT)
if root_str not in sys.path:
    sys.path.insert(0, root_str)

from core.layout import LAYOUT_REGISTROS  # noqa: E402
from parsers.efd_contribuicoes import parse_efd_text  # noqa: E402

CNPJ_MATRIZ = "11111111000191"
CNPJ_FILIAL = "22222222000191"


def linha(reg: str, **valores: str) -> str:
    """Monta "|REG|...|" com exatamente os campos do leiaute."""
    layout = LAYOUT_REGISTROS[reg]
    desconhecidos = set(valores) - set(layout)
    assert not desconhecidos, desconhecidos
    return "|" + "|".join([reg] + [valores.get(c, "") for c in layout[1:]]) + "|"


CONTAGEM_9900 = [
    ("0000", 1), ("0001", 1), ("0110", 1), ("0140", 2), ("0150", 2), ("0200", 2),
    ("0205", 1), ("0990", 1), ("A001", 1), ("A010", 1), ("A100", 1), ("A170", 1),
    ("A990", 1), ("C001", 1), ("C010", 2), ("C100", 3), ("C170", 4), ("C990", 1),
    ("D001", 1), ("D990", 1), ("M001", 1), ("M200", 1), ("M600", 1), ("M990", 1),
    ("1001", 1), ("1990", 1), ("9001", 1), ("9900", 30), ("9990", 1), ("9999", 1),
]

LINHAS_EFD = [
    # bloco 0 (linhas 0-10)
    linha("0000", COD_VER="006", TIPO_ESCRIT="0", DT_INI="01012024", DT_FIN="31012024",
          NOME="EMPRESA TESTE LTDA", CNPJ=CNPJ_MATRIZ, UF="SP", COD_MUN="3550308", IND_NAT_PJ="00", IND_ATIV="0"),
    linha("0001", IND_MOV="0"),
    linha("0110", COD_INC_TRIB="1", IND_APRO_CRED="1", IND_REG_CUM=""),
    linha("0140", COD_EST="MATRIZ", NOME="MATRIZ SAO PAULO", CNPJ=CNPJ_MATRIZ, UF="SP", COD_MUN="3550308"),
    linha("0150", COD_PART="P1", NOME="FORNECEDOR UM", COD_PAIS="01058", CNPJ="33333333000191"),
    linha("0200", COD_ITEM="ITEM1", DESCR_ITEM="PRODUTO UM", UNID_INV="UN", TP_ITEM="00"),
    linha("0205", COD_ANT_ITEM="ANT1", DT_INI_ALT="01012023", DT_FIM_ALT="31122023"),
    linha("0140", COD_EST="FILIAL", NOME="FILIAL CAMPINAS", CNPJ=CNPJ_FILIAL, UF="SP", COD_MUN="3509502"),
    linha("0150", COD_PART="P2", NOME="FORNECEDOR DOIS", COD_PAIS="01058", CNPJ="44444444000191"),
    linha("0200", COD_ITEM="ITEM2", DESCR_ITEM="PRODUTO DOIS", UNID_INV="KG", TP_ITEM="00"),
    linha("0990", QTD_LIN_0="11"),
    # bloco A (11-15)
    linha("A001", IND_MOV="0"),
    linha("A010", CNPJ=CNPJ_MATRIZ),
    linha("A100", IND_OPER="1", IND_EMIT="0", COD_PART="P1", COD_SIT="00", NUM_DOC="10",
          DT_DOC="05012024", VL_DOC="1.000,00"),
    linha("A170", NUM_ITEM="1", COD_ITEM="ITEM1", DESCR_COMPL="SERVICO DE MANUTENCAO", VL_ITEM="1.000,00",
          CST_PIS="01", VL_BC_PIS="1.000,00", ALIQ_PIS="1,65", VL_PIS="16,50"),
    linha("A990", QTD_LIN_A="5"),
    # bloco C (16-26)
    linha("C001", IND_MOV="0"),
    linha("C010", CNPJ=CNPJ_MATRIZ, IND_ESCRI="2"),
    linha("C100", IND_OPER="0", IND_EMIT="1", COD_PART="P1", COD_MOD="55", COD_SIT="00", NUM_DOC="100",
          VL_DOC="1.500,00"),
    linha("C170", NUM_ITEM="1", COD_ITEM="ITEM1", VL_ITEM="1.000,00", CFOP="1102", VL_ICMS="180,00",
          CST_PIS="50", VL_BC_PIS="1.000,00", ALIQ_PIS="1,65", VL_PIS="16,50",
          CST_COFINS="50", VL_BC_COFINS="1.000,00", ALIQ_COFINS="7,60", VL_COFINS="76,00"),
    linha("C170", NUM_ITEM="2", COD_ITEM="ITEM1", VL_ITEM="500,00", CFOP="1102", VL_ICMS="90,00",
          CST_PIS="50", VL_BC_PIS="500,00", ALIQ_PIS="1,65", VL_PIS="8,25",
          CST_COFINS="50", VL_BC_COFINS="500,00", ALIQ_COFINS="7,60", VL_COFINS="38,00"),
    linha("C100", IND_OPER="1", IND_EMIT="0", COD_PART="P1", COD_MOD="55", COD_SIT="00", NUM_DOC="200",
          VL_DOC="2.000,00"),
    linha("C170", NUM_ITEM="1", COD_ITEM="ITEM1", VL_ITEM="2.000,00", CFOP="5102", VL_IPI="100,00",
          CST_PIS="01", VL_BC_PIS="2.000,00", ALIQ_PIS="1,65", VL_PIS="33,00",
          CST_COFINS="01", VL_BC_COFINS="2.000,00", ALIQ_COFINS="7,60", VL_COFINS="152,00"),
    linha("C010", CNPJ=CNPJ_FILIAL, IND_ESCRI="2"),
    linha("C100", IND_OPER="0", IND_EMIT="1", COD_PART="P2", COD_MOD="55", COD_SIT="00", NUM_DOC="300",
          VL_DOC="300,00"),
    linha("C170", NUM_ITEM="1", COD_ITEM="ITEM2", VL_ITEM="300,00", CFOP="1403",
          CST_PIS="50", VL_BC_PIS="300,00", ALIQ_PIS="1,65", VL_PIS="4,95",
          CST_COFINS="50", VL_BC_COFINS="300,00", ALIQ_COFINS="7,60", VL_COFINS="22,80"),
    linha("C990", QTD_LIN_C="11"),
    # bloco D sem movimento (27-28)
    linha("D001", IND_MOV="1"),
    linha("D990", QTD_LIN_D="2"),
    # bloco M (29-32)
    linha("M001", IND_MOV="0"),
    linha("M200", VL_TOT_CONT_NC_PER="33,00", VL_TOT_CRED_DESC="29,70", VL_TOT_CRED_DESC_ANT="0,00",
          VL_TOT_CONT_NC_DEV="0,00", VL_RET_NC="0,00", VL_OUT_DED_NC="0,00", VL_CONT_NC_REC="3,30",
          VL_TOT_CONT_CUM_PER="0,00", VL_RET_CUM="0,00", VL_OUT_DED_CUM="0,00", VL_CONT_CUM_REC="0,00",
          VL_TOT_CONT_REC="3,30"),
    linha("M600", VL_TOT_CONT_NC_PER="152,00", VL_TOT_CRED_DESC="136,80", VL_TOT_CRED_DESC_ANT="0,00",
          VL_TOT_CONT_NC_DEV="0,00", VL_RET_NC="0,00", VL_OUT_DED_NC="0,00", VL_CONT_NC_REC="15,20",
          VL_TOT_CONT_CUM_PER="0,00", VL_RET_CUM="0,00", VL_OUT_DED_CUM="0,00", VL_CONT_CUM_REC="0,00",
          VL_TOT_CONT_REC="15,20"),
    linha("M990", QTD_LIN_M="4"),
    # bloco 1 (33-34)
    linha("1001", IND_MOV="1"),
    linha("1990", QTD_LIN_1="2"),
    # bloco 9 (35-67)
    linha("9001", IND_MOV="0"),
    *[linha("9900", REG_BLC=reg, QTD_REG_BLC=str(qtd)) for reg, qtd in CONTAGEM_9900],
    linha("9990", QTD_LIN_9="33"),
    linha("9999", QTD_LIN="68"),
]

EFD_TEXTO = "\n".join(LINHAS_EFD) + "\n"


@pytest.fixture
def efd_texto() -> str:
    return EFD_TEXTO


@pytest.fixture
def documento():
    return parse_efd_text(EFD_TEXTO)


def por_ordem(documento, ordem: int):
    """Registro que veio da linha ``ordem`` (0-based) do arquivo."""
    for lista in documento.registros.values():
        for r in lista:
            if r.ordem == ordem:
                return r
    raise LookupError(ordem)
