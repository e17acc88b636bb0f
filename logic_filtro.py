# logic_filtro.py
import logging
from typing import Optional

from core.estrutura import (
    BLOCOS_COM_ABERTURA,
    IND_MOV_COM_DADOS,
    IND_MOV_SEM_DADOS,
    REG_ITEM,
    REG_PARTICIPANTE,
    reg_abertura,
    reg_encerramento,
)
from logic_resumo import recalculate_summaries
from schemas.documento_efd import DocumentoEfd
from schemas.registro import Registros

logger = logging.getLogger(__name__)

TODOS_ESTABELECIMENTOS = "all"


def _codigos_relevantes(registros: Registros, cnpj: str) -> tuple[set[str], set[str]]:
    """COD_ITEM e COD_PART usados pelos registros do estabelecimento."""
    itens: set[str] = set()
    participantes: set[str] = set()
    for lista in registros.values():
        for r in lista:
            if r.cnpj != cnpj:
                continue
            if r.valor("COD_ITEM"):
                itens.add(r.valor("COD_ITEM"))
            if r.valor("COD_PART"):
                participantes.add(r.valor("COD_PART"))
    return itens, participantes


def _remover_filhos_orfaos(filtrados: Registros, removidos: set[int]) -> Registros:
    """Tira os registros cujo pai saiu no filtro (ex.: 0205 de um 0200 removido)."""
    while True:
        novos_removidos = set()
        for reg, lista in filtrados.items():
            for r in lista:
                if r.parent_id is not None and r.parent_id in removidos:
                    novos_removidos.add(r.id)
        if not novos_removidos:
            return {reg: lista for reg, lista in filtrados.items() if lista}
        removidos = novos_removidos
        filtrados = {
            reg: [r for r in lista if r.id not in novos_removidos]
            for reg, lista in filtrados.items()
        }


def project_cnpj(documento: DocumentoEfd, cnpj: Optional[str]) -> DocumentoEfd:
    """
    Reduz o documento a um estabelecimento (CNPJ).

    - 0150 / 0200 ficam só com os participantes / itens usados pelo CNPJ;
    - os demais registros ficam se forem globais (sem CNPJ) ou do CNPJ;
    - o IND_MOV de cada abertura de bloco (X001) é recalculado;
    - os resumos são refeitos sobre o que sobrou.

    ``cnpj`` None ou "all" devolve os mesmos registros, com resumos recalculados.
    """
    registros = documento.registros
    if not cnpj or cnpj == TODOS_ESTABELECIMENTOS:
        return DocumentoEfd(registros=registros, resumos=recalculate_summaries(registros))

    itens, participantes = _codigos_relevantes(registros, cnpj)

    filtrados: Registros = {}
    removidos: set[int] = set()
    for reg, lista in registros.items():
        if not lista:
            continue
        if reg == REG_PARTICIPANTE:
            mantidos = [r for r in lista if r.valor("COD_PART") in participantes]
        elif reg == REG_ITEM:
            mantidos = [r for r in lista if r.valor("COD_ITEM") in itens]
        else:
            mantidos = [r for r in lista if r.cnpj is None or r.cnpj == cnpj]
        if len(mantidos) != len(lista):
            ids_mantidos = {r.id for r in mantidos}
            removidos.update(r.id for r in lista if r.id not in ids_mantidos)
        filtrados[reg] = mantidos

    filtrados = _remover_filhos_orfaos(filtrados, removidos)

    for bloco in BLOCOS_COM_ABERTURA:
        abertura = reg_abertura(bloco)
        originais = registros.get(abertura)
        if not originais:
            continue
        encerramento = reg_encerramento(bloco)
        tem_dados = any(
            reg.startswith(bloco) and reg not in (abertura, encerramento)
            for reg in filtrados
        )
        base = (filtrados.get(abertura) or originais)[0]
        ind_mov = IND_MOV_COM_DADOS if tem_dados else IND_MOV_SEM_DADOS
        filtrados[abertura] = [base.com_campos(IND_MOV=ind_mov)]

    logger.info(
        "Filtro CNPJ %s: %d de %d registros",
        cnpj,
        sum(len(v) for v in filtrados.values()),
        documento.total_registros,
    )
    return DocumentoEfd(registros=filtrados, resumos=recalculate_summaries(filtrados))
