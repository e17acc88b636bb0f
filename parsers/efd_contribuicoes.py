import logging
from typing import Callable, Optional

from core.estrutura import (
    BLOCOS_GLOBAIS,
    PAI_DO_REGISTRO,
    REG_ESTABELECIMENTO,
    SUFIXO_CONTEXTO_CNPJ,
    aceita_filho,
    bloco_do_registro,
    eh_abertura_de_bloco,
    eh_encerramento_de_bloco,
    pode_ter_filhos,
)
from core.layout import DELIMITADOR, campos_do_registro
from logic_resumo import recalculate_summaries
from schemas.documento_efd import DocumentoEfd
from schemas.registro import Registro, Registros
from utils import AVISO_A_CADA

logger = logging.getLogger(__name__)


class EntradaVazia(ValueError):
    """O texto do arquivo está vazio (ou só tem espaços)."""


def _separar_campos(linha: str) -> list[str] | None:
    """
    "|C100|0|1|...|" -> ["C100", "0", "1", ...]
    Só linhas que começam com o delimitador são registros.
    """
    if not linha.startswith(DELIMITADOR):
        return None
    partes = linha.split(DELIMITADOR)[1:]
    # remove o "" do delimitador final, preservando vazios internos
    if partes and partes[-1] == "":
        partes = partes[:-1]
    if not partes or not partes[0]:
        return None
    return partes


def _montar_campos(layout: tuple[str, ...], valores: list[str]) -> dict[str, str]:
    # campos faltando viram "", campos a mais são ignorados
    return {nome: (valores[i] if i < len(valores) else "") for i, nome in enumerate(layout)}


def _estabelecimento(reg: str, campos: dict[str, str], cnpj_atual: Optional[str]):
    """
    Decide o CNPJ dono do registro e o novo contexto de CNPJ.
    Retorna (cnpj_do_registro, cnpj_atual).
    """
    if reg == REG_ESTABELECIMENTO:
        # 0140 declara o estabelecimento: é dono de si mesmo, sem abrir contexto
        return campos.get("CNPJ") or None, None

    bloco = bloco_do_registro(reg)
    if bloco in BLOCOS_GLOBAIS or eh_abertura_de_bloco(reg):
        return None, None
    if eh_encerramento_de_bloco(reg):
        return None, cnpj_atual
    if reg.endswith(SUFIXO_CONTEXTO_CNPJ):
        cnpj = campos.get("CNPJ") or None
        return cnpj, cnpj
    return cnpj_atual, cnpj_atual


def parse_efd_text(
    texto: str,
    ao_progredir: Optional[Callable[[int, int], None]] = None,
) -> DocumentoEfd:
    """
    Lê o TXT da EFD Contribuições e monta o documento:
      - registros agrupados por REG, na ordem do arquivo;
      - pai de cada registro (pilha de pais candidatos + HIERARQUIA_REGISTROS);
      - CNPJ dono (contexto aberto pelos registros X010 / 0140);
      - resumos já calculados.

    Linhas malformadas ou de REG desconhecido são puladas.
    ``ao_progredir(linha_atual, total_linhas)`` é chamado a cada AVISO_A_CADA linhas.
    """
    if not texto or not texto.strip():
        raise EntradaVazia("O arquivo EFD está vazio.")

    linhas = texto.splitlines()
    total = len(linhas)

    registros: Registros = {}
    pilha: list[tuple[str, int]] = []     # (REG, id) dos pais candidatos
    cnpj_atual: Optional[str] = None
    desconhecidos = 0
    orfaos = 0

    for indice, linha in enumerate(linhas):
        if ao_progredir is not None and indice % AVISO_A_CADA == 0:
            ao_progredir(indice, total)

        valores = _separar_campos(linha)
        if valores is None:
            continue

        reg = valores[0]
        layout = campos_do_registro(reg)
        if layout is None:
            desconhecidos += 1
            logger.debug("Linha %d: registro %s fora do leiaute, ignorado", indice + 1, reg)
            continue

        while pilha and not aceita_filho(pilha[-1][0], reg):
            pilha.pop()
        parent_id = pilha[-1][1] if pilha else None
        if parent_id is None and reg in PAI_DO_REGISTRO:
            orfaos += 1
            logger.debug("Linha %d: %s sem %s antes dele", indice + 1, reg, PAI_DO_REGISTRO[reg])

        campos = _montar_campos(layout, valores)
        cnpj, cnpj_atual = _estabelecimento(reg, campos, cnpj_atual)

        registro = Registro(
            reg=reg,
            campos=campos,
            parent_id=parent_id,
            cnpj=cnpj,
            ordem=indice,
        )
        registros.setdefault(reg, []).append(registro)

        if pode_ter_filhos(reg):
            pilha.append((reg, registro.id))

    if ao_progredir is not None:
        ao_progredir(total, total)

    logger.info(
        "EFD lida: %d registros em %d tipos (%d desconhecidos, %d órfãos)",
        sum(len(v) for v in registros.values()), len(registros), desconhecidos, orfaos,
    )

    # o progresso informado é só o das linhas; o resumo tem o seu próprio
    resumos = recalculate_summaries(registros)
    return DocumentoEfd(registros=registros, resumos=resumos)
