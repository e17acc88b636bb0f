from dataclasses import dataclass
from decimal import Decimal

ZERO = Decimal("0")

ENTRADA = "ENTRADA"
SAIDA = "SAIDA"


@dataclass
class ResumoOperacao:
    # chave de agrupamento
    direcao: str          # ENTRADA | SAIDA (IND_OPER do C100)
    cfop: str
    cst_pis: str
    cst_cofins: str
    aliq_pis: Decimal
    aliq_cofins: Decimal

    # totais acumulados dos C170
    vlr_tot: Decimal = ZERO
    vlr_icms: Decimal = ZERO
    vlr_st: Decimal = ZERO
    vlr_ipi: Decimal = ZERO
    vlr_bc_pis_cof: Decimal = ZERO
    vlr_pis: Decimal = ZERO
    vlr_cofins: Decimal = ZERO

    @property
    def cst_pis_cof(self) -> str:
        return f"{self.cst_pis}/{self.cst_cofins}"


@dataclass(frozen=True)
class ResumoTributo:
    atributo: str         # nome do campo no M200/M600
    descricao: str
    valor: Decimal


@dataclass(frozen=True)
class Resumos:
    operacoes_entradas: tuple[ResumoOperacao, ...] = ()
    operacoes_saidas: tuple[ResumoOperacao, ...] = ()
    tributo_pis: tuple[ResumoTributo, ...] = ()
    tributo_cofins: tuple[ResumoTributo, ...] = ()
