# logic_edicao.py
"""
Edições sobre os registros (inserir, alterar, excluir).

Todas as funções devolvem um NOVO dicionário de registros; as listas de
entrada não são alteradas. Depois de qualquer edição os resumos devem
ser recalculados por completo (recalculate_summaries).
"""
import logging
from collections import deque
from typing import Iterable, Optional

from core.estrutura import (
    BLOCOS_GLOBAIS,
    REG_ESTABELECIMENTO,
    REG_ITEM,
    REG_PARTICIPANTE,
    SUFIXO_CONTEXTO_CNPJ,
    bloco_do_registro,
    eh_abertura_de_bloco,
)
from core.layout import campos_do_registro
from schemas.registro import Registro, Registros

logger = logging.getLogger(__name__)


class RegistroDesconhecido(KeyError):
    """REG fora do leiaute da EFD Contribuições."""


class TipoRegistroJaExiste(ValueError):
    """O documento já tem uma lista para este REG."""


class LoteInvalido(ValueError):
    """REG sem colagem em lote, ou texto colado sem nenhuma linha."""


# Colunas esperadas na colagem em lote (uma linha por registro, separadas por TAB).
# "CNPJ" fora do leiaute (F100/F120) e "CNPJ_F010" (F600) dizem o estabelecimento dono.
CAMPOS_LOTE = {
    "0500": ("DT_ALT", "COD_NAT_CC", "IND_CTA", "NIVEL", "COD_CTA", "NOME_CTA", "COD_CTA_REF", "CNPJ_EST"),
    "F010": ("CNPJ",),
    "F100": (
        "IND_OPER", "COD_PART", "COD_ITEM", "DT_OPER", "VL_OPER", "CST_PIS", "VL_BC_PIS", "ALIQ_PIS",
        "VL_PIS", "CST_COFINS", "VL_BC_COFINS", "ALIQ_COFINS", "VL_COFINS", "NAT_BC_CRED",
        "IND_ORIG_CRED", "COD_CTA", "COD_CCUS", "DESC_DOC_OPER", "CNPJ",
    ),
    "F120": (
        "NAT_BC_CRED", "IDENT_BEM_IMOB", "IND_ORIG_CRED", "IND_UTIL_BEM_IMOB", "VL_OPER_DEP", "VL_EXC_BC",
        "CST_PIS", "VL_BC_PIS", "ALIQ_PIS", "VL_PIS", "CST_COFINS", "VL_BC_COFINS", "ALIQ_COFINS",
        "VL_COFINS", "COD_CTA", "COD_CCUS", "DESCR_BEM", "CNPJ",
    ),
    "F200": (
        "UNID_IMOB", "TP_UNID_IMOB", "IDENT_EMP", "DESC_UNID_IMOB", "NUM_CONT", "CPF_CNPJ_ADQU",
        "DT_OPER_COMP", "VL_UNID_IMOB_AT", "VL_TOT_REC", "VL_REC_ACUM", "VL_COMP_AJUS_UNID", "COD_ITEM",
        "CST_PIS", "VL_BC_PIS", "ALIQ_PIS", "VL_PIS", "CST_COFINS", "VL_BC_COFINS", "ALIQ_COFINS",
        "VL_COFINS", "IND_NAT_EMP", "INF_COMPL",
    ),
    "F600": (
        "IND_NAT_RET", "DT_RET", "VL_BC_RET", "VL_RET", "COD_REC", "IND_NAT_REC", "CNPJ",
        "VL_RET_PIS", "VL_RET_COFINS", "IND_DEC", "CNPJ_F010",
    ),
    "F700": ("IND_ORI_DED", "IND_NAT_DED", "VL_DED_PIS", "VL_DED_COFINS", "VL_BC_OPER", "CNPJ", "INF_COMPL"),
    "1300": ("IND_NAT_RET", "PR_REC_RET", "VL_RET_APU", "VL_RET_DED", "VL_RET_PER", "VL_RET_DCOMP", "SLD_RET"),
}

SEPARADOR_LOTE = "\t"


def novo_registro(
    reg: str,
    valores: Optional[dict] = None,
    parent_id: Optional[int] = None,
    cnpj: Optional[str] = None,
) -> Registro:
    """
    Registro criado pelo usuário: todos os campos do leiaute (vazios por
    padrão) e sem ``ordem``, para o exportador achar a posição dele.
    """
    layout = campos_do_registro(reg)
    if layout is None:
        raise RegistroDesconhecido(reg)
    valores = valores or {}
    campos = {nome: ("" if valores.get(nome) is None else str(valores.get(nome))) for nome in layout}
    campos["REG"] = reg
    return Registro(reg=reg, campos=campos, parent_id=parent_id, cnpj=cnpj)


def atualizar_registros(registros: Registros, reg: str, lista_atualizada: list[Registro]) -> Registros:
    """
    Junta a lista editada de um REG com a atual, pelo id:
      - id já existente: troca pela versão editada (mesma posição);
      - id novo: entra no fim da lista.
    """
    atualizados = {r.id: r for r in lista_atualizada}
    atuais = registros.get(reg) or []
    ids_atuais = {r.id for r in atuais}

    mesclados = [atualizados.get(r.id, r) for r in atuais]
    adicionados = [r for r in lista_atualizada if r.id not in ids_atuais]

    novo = dict(registros)
    novo[reg] = mesclados + adicionados
    return novo


def _descendentes(registros: Registros, raiz: int) -> set[int]:
    filhos_por_pai: dict[int, list[int]] = {}
    for lista in registros.values():
        for r in lista:
            if r.parent_id is not None:
                filhos_por_pai.setdefault(r.parent_id, []).append(r.id)

    ids = {raiz}
    fila = deque([raiz])
    while fila:
        atual = fila.popleft()
        for filho in filhos_por_pai.get(atual, ()):
            if filho not in ids:
                ids.add(filho)
                fila.append(filho)
    return ids


def excluir_registros(registros: Registros, ids: Iterable[int]) -> Registros:
    """Exclui os registros e, em cascata, todos os seus descendentes."""
    apagar: set[int] = set()
    for rid in ids:
        apagar |= _descendentes(registros, rid)

    novo: Registros = {}
    for reg, lista in registros.items():
        mantidos = [r for r in lista if r.id not in apagar]
        if mantidos:
            novo[reg] = mantidos
    if apagar:
        logger.debug("Excluídos %d registros (com filhos)", len(apagar))
    return novo


def excluir_registro(registros: Registros, registro: Registro) -> Registros:
    return excluir_registros(registros, [registro.id])


def criar_tipo_registro(registros: Registros, reg: str) -> Registros:
    if campos_do_registro(reg) is None:
        raise RegistroDesconhecido(reg)
    if reg in registros:
        raise TipoRegistroJaExiste(f"O registro {reg} já existe no rascunho.")
    novo = dict(registros)
    novo[reg] = []
    return novo


def _dono_do_lote(reg: str, valores: dict, layout: tuple, cnpj: Optional[str]) -> Optional[str]:
    if bloco_do_registro(reg) in BLOCOS_GLOBAIS:
        return None
    if reg.endswith(SUFIXO_CONTEXTO_CNPJ) and valores.get("CNPJ"):
        return valores["CNPJ"]
    for coluna in ("CNPJ", "CNPJ_F010"):
        if coluna not in layout and valores.get(coluna):
            return valores[coluna]
    return cnpj


def adicionar_em_lote(
    registros: Registros,
    reg: str,
    texto: str,
    cnpj: Optional[str] = None,
) -> Registros:
    """
    Colagem de planilha: cada linha não vazia do ``texto`` vira um registro
    novo de ``reg``, com as colunas de CAMPOS_LOTE[reg] separadas por TAB.
    Colunas faltando ficam vazias; sobrando são ignoradas.
    """
    colunas = CAMPOS_LOTE.get(reg)
    if colunas is None:
        raise LoteInvalido(f"O registro {reg} não aceita adição em lote.")
    layout = campos_do_registro(reg)

    novos = []
    for linha in (texto or "").splitlines():
        if not linha.strip():
            continue
        partes = linha.split(SEPARADOR_LOTE)
        valores = {col: (partes[i] if i < len(partes) else "") for i, col in enumerate(colunas)}
        novos.append(novo_registro(reg, valores, cnpj=_dono_do_lote(reg, valores, layout, cnpj)))

    if not novos:
        raise LoteInvalido("Nenhum dado para adicionar.")

    logger.debug("Lote de %s: %d registros novos", reg, len(novos))
    return atualizar_registros(registros, reg, novos)


def aplicar_edicoes_tabela(
    registros: Registros,
    reg: str,
    linhas: list[dict],
    ids_visiveis: Iterable[int],
    cnpj: Optional[str] = None,
) -> Registros:
    """
    Aplica o conteúdo de uma grade editável (uma linha = um registro do REG):
      - linha com "_id": atualiza os campos daquele registro;
      - linha sem "_id": registro novo (com o CNPJ informado);
      - id que estava visível e sumiu da grade: exclusão em cascata.

    ``cnpj`` informado indica grade filtrada por estabelecimento: nela o
    IND_MOV das aberturas de bloco é o recalculado pelo filtro e não volta
    para o rascunho.
    """
    layout = campos_do_registro(reg)
    if layout is None:
        raise RegistroDesconhecido(reg)

    por_id = {r.id: r for r in registros.get(reg) or []}
    editados: list[Registro] = []
    ids_na_grade: set[int] = set()

    for linha in linhas:
        valores = {k: v for k, v in linha.items() if k in layout and k != "REG"}
        rid = linha.get("_id")
        if rid is not None and int(rid) in por_id:
            rid = int(rid)
            ids_na_grade.add(rid)
            alteracoes = {k: ("" if v is None else str(v)) for k, v in valores.items()}
            if cnpj is not None and eh_abertura_de_bloco(reg):
                alteracoes.pop("IND_MOV", None)
            editados.append(por_id[rid].com_campos(**alteracoes))
        else:
            editados.append(novo_registro(reg, valores, cnpj=cnpj))

    novo = atualizar_registros(registros, reg, editados)
    apagados = [rid for rid in ids_visiveis if rid in por_id and rid not in ids_na_grade]
    if apagados:
        novo = excluir_registros(novo, apagados)
    return novo


def listar_estabelecimentos(registros: Registros) -> list[tuple[str, str]]:
    """(CNPJ, NOME) de cada 0140, sem repetir CNPJ."""
    vistos = set()
    saida = []
    for r in registros.get(REG_ESTABELECIMENTO) or []:
        cnpj = r.valor("CNPJ")
        if cnpj and cnpj not in vistos:
            vistos.add(cnpj)
            saida.append((cnpj, r.valor("NOME")))
    return saida


def tipo_visivel_no_filtro(registros: Registros, reg: str) -> bool:
    """O seletor de CNPJ faz sentido para este REG?"""
    lista = registros.get(reg)
    if not lista:
        return False
    if reg in (REG_PARTICIPANTE, REG_ITEM, REG_ESTABELECIMENTO):
        return True
    return any(r.cnpj is not None for r in lista)
