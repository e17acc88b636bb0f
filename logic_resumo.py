# logic_resumo.py
import logging
from typing import Callable, Optional

import pandas as pd

from core.layout import campos_do_registro
from schemas.registro import Registro, Registros
from schemas.resumo import ENTRADA, SAIDA, ResumoOperacao, ResumoTributo, Resumos
from utils import AVISO_A_CADA, parse_numero_br

logger = logging.getLogger(__name__)

REG_DOCUMENTO = "C100"
REG_ITEM_DOCUMENTO = "C170"
REG_CONSOLIDACAO_PIS = "M200"
REG_CONSOLIDACAO_COFINS = "M600"

# Rótulos dos campos de consolidação (M200 e M600 têm o mesmo leiaute)
DESCRICAO_CONSOLIDACAO = {
    "VL_TOT_CONT_NC_PER": "Total Contribuição Não Cumulativa",
    "VL_TOT_CRED_DESC": "Total Crédito Descontado",
    "VL_TOT_CRED_DESC_ANT": "Total Crédito Descontado Anterior",
    "VL_TOT_CONT_NC_DEV": "Total Contribuição Não Cumulativa Devolvida",
    "VL_RET_NC": "Retenções Não Cumulativas",
    "VL_OUT_DED_NC": "Outras Deduções Não Cumulativas",
    "VL_CONT_NC_REC": "Contribuição Não Cumulativa a Recolher",
    "VL_TOT_CONT_CUM_PER": "Total Contribuição Cumulativa",
    "VL_RET_CUM": "Retenções Cumulativas",
    "VL_OUT_DED_CUM": "Outras Deduções Cumulativas",
    "VL_CONT_CUM_REC": "Contribuição Cumulativa a Recolher",
    "VL_TOT_CONT_REC": "Total Contribuição a Recolher",
}

COLUNAS_OPERACOES = [
    "Direção", "CFOP", "CST PIS/COFINS", "Alíq. PIS", "Alíq. COFINS",
    "Valor Total", "ICMS", "ICMS ST", "IPI", "BC PIS/COFINS", "PIS", "COFINS",
]


def _chave_ordenacao(linha: ResumoOperacao):
    return (linha.cfop, linha.cst_pis, linha.cst_cofins, linha.aliq_pis, linha.aliq_cofins)


def _acumular_item(mapa: dict, direcao: str, item: Registro):
    cst_pis = item.valor("CST_PIS") or "N/A"
    cst_cofins = item.valor("CST_COFINS") or "N/A"
    aliq_pis = parse_numero_br(item.valor("ALIQ_PIS"))
    aliq_cofins = parse_numero_br(item.valor("ALIQ_COFINS"))
    cfop = item.valor("CFOP") or "N/A"

    chave = (direcao, cfop, cst_pis, cst_cofins, aliq_pis, aliq_cofins)
    linha = mapa.get(chave)
    if linha is None:
        linha = ResumoOperacao(
            direcao=direcao,
            cfop=cfop,
            cst_pis=cst_pis,
            cst_cofins=cst_cofins,
            aliq_pis=aliq_pis,
            aliq_cofins=aliq_cofins,
        )
        mapa[chave] = linha

    linha.vlr_tot += parse_numero_br(item.valor("VL_ITEM"))
    linha.vlr_icms += parse_numero_br(item.valor("VL_ICMS"))
    linha.vlr_st += parse_numero_br(item.valor("VL_ICMS_ST"))
    linha.vlr_ipi += parse_numero_br(item.valor("VL_IPI"))
    linha.vlr_pis += parse_numero_br(item.valor("VL_PIS"))
    linha.vlr_cofins += parse_numero_br(item.valor("VL_COFINS"))
    linha.vlr_bc_pis_cof += parse_numero_br(item.valor("VL_BC_PIS")) + parse_numero_br(item.valor("VL_BC_COFINS"))


def _achatar_consolidacao(registro: Optional[Registro]) -> tuple[ResumoTributo, ...]:
    """Cada campo do M200/M600 (menos o REG) vira (atributo, valor)."""
    if registro is None:
        return ()
    layout = campos_do_registro(registro.reg) or ()
    return tuple(
        ResumoTributo(
            atributo=nome,
            descricao=DESCRICAO_CONSOLIDACAO.get(nome, nome),
            valor=parse_numero_br(registro.valor(nome)),
        )
        for nome in layout[1:]
    )


def recalculate_summaries(
    registros: Registros,
    ao_progredir: Optional[Callable[[int, int], None]] = None,
) -> Resumos:
    """
    Recalcula os resumos a partir dos registros:
      - operações (C170 agrupado por direção/CFOP/CST/alíquotas do C100 pai);
      - apuração de PIS (M200) e COFINS (M600), só o primeiro de cada.
    Nunca levanta erro: falta de registro = resumo vazio.
    """
    documentos = {r.id: r for r in registros.get(REG_DOCUMENTO) or ()}
    itens = registros.get(REG_ITEM_DOCUMENTO) or []

    mapa: dict[tuple, ResumoOperacao] = {}
    sem_documento = 0
    for i, item in enumerate(itens):
        if ao_progredir is not None and i % AVISO_A_CADA == 0:
            ao_progredir(i, len(itens))
        documento = documentos.get(item.parent_id)
        if documento is None:
            sem_documento += 1
            continue
        direcao = ENTRADA if documento.valor("IND_OPER") == "0" else SAIDA
        _acumular_item(mapa, direcao, item)

    if ao_progredir is not None:
        ao_progredir(len(itens), len(itens))

    if sem_documento:
        logger.debug("%d itens %s sem %s pai ficaram fora do resumo", sem_documento, REG_ITEM_DOCUMENTO, REG_DOCUMENTO)

    linhas = sorted(mapa.values(), key=_chave_ordenacao)
    pis = (registros.get(REG_CONSOLIDACAO_PIS) or [None])[0]
    cofins = (registros.get(REG_CONSOLIDACAO_COFINS) or [None])[0]

    return Resumos(
        operacoes_entradas=tuple(op for op in linhas if op.direcao == ENTRADA),
        operacoes_saidas=tuple(op for op in linhas if op.direcao == SAIDA),
        tributo_pis=_achatar_consolidacao(pis),
        tributo_cofins=_achatar_consolidacao(cofins),
    )


# ---------- DataFrames para as telas e para o Excel ----------

def _operacoes_to_frame(linhas) -> pd.DataFrame:
    rows = [
        [
            op.direcao, op.cfop, op.cst_pis_cof, float(op.aliq_pis), float(op.aliq_cofins),
            float(op.vlr_tot), float(op.vlr_icms), float(op.vlr_st), float(op.vlr_ipi),
            float(op.vlr_bc_pis_cof), float(op.vlr_pis), float(op.vlr_cofins),
        ]
        for op in linhas
    ]
    return pd.DataFrame(rows, columns=COLUNAS_OPERACOES)


def _tributo_to_frame(linhas) -> pd.DataFrame:
    rows = [[t.atributo, t.descricao, float(t.valor)] for t in linhas]
    return pd.DataFrame(rows, columns=["Atributo", "Descrição", "Valor"])


def resumos_to_frames(resumos: Resumos) -> dict[str, pd.DataFrame]:
    """Um DataFrame por resumo, na ordem das abas da tela."""
    return {
        "Entradas": _operacoes_to_frame(resumos.operacoes_entradas),
        "Saidas": _operacoes_to_frame(resumos.operacoes_saidas),
        "Apuracao_PIS": _tributo_to_frame(resumos.tributo_pis),
        "Apuracao_COFINS": _tributo_to_frame(resumos.tributo_cofins),
    }


def registros_to_frame(registros: Registros, reg: str) -> pd.DataFrame:
    """
    Registros de um tipo em formato de grade: coluna "_id" + campos do leiaute.
    """
    layout = list(campos_do_registro(reg) or ())
    cols = ["_id"] + layout
    lista = registros.get(reg) or []
    if not lista:
        return pd.DataFrame(columns=cols)
    rows = [[r.id] + [r.valor(c) for c in layout] for r in lista]
    return pd.DataFrame(rows, columns=cols)
