# logic_exportar.py
"""
Gravação do TXT da EFD Contribuições a partir dos registros (editados ou não).

Registros lidos do arquivo voltam na ordem original. Registros criados na
edição (sem ``ordem``) entram por heurística:

  1. filho de alguém: logo depois do último pai/irmão da mesma família;
  2. senão: antes do encerramento do bloco (X990), ou depois do último
     registro do mesmo bloco;
  3. senão: antes do bloco 9, ou no fim do arquivo.

A heurística só olha os registros posicionados; vários registros novos
disputando o mesmo trecho não têm ordem garantida entre famílias diferentes.

Depois disso todos os contadores (X990, 9900, 9999) são recalculados.
"""
import logging
from collections import Counter

from core.estrutura import (
    REG_ABERTURA_ARQUIVO,
    bloco_do_registro,
    eh_encerramento_de_bloco,
    familia_do_registro,
    reg_encerramento,
)
from core.layout import DELIMITADOR, ENCODING_EFD, campos_do_registro
from schemas.exportacao import ArquivoExportado
from schemas.registro import Registro, Registros

logger = logging.getLogger(__name__)

PREFIXO_ARQUIVO_EXPORTACAO = "EFD_CONTRIBUICOES"
LIMITE_DESCR_COMPL_A170 = 50
QUEBRA_LINHA = "\n"


def _indice_insercao(posicionados: list[Registro], novo: Registro) -> int:
    familia = familia_do_registro(novo.reg)
    if familia:
        for i in range(len(posicionados) - 1, -1, -1):
            if posicionados[i].reg in familia:
                return i + 1

    bloco = bloco_do_registro(novo.reg)
    encerramento = reg_encerramento(bloco)
    for i, r in enumerate(posicionados):
        if r.reg == encerramento:
            return i
    for i in range(len(posicionados) - 1, -1, -1):
        if bloco_do_registro(posicionados[i].reg) == bloco:
            return i + 1

    for i, r in enumerate(posicionados):
        if r.reg.startswith("9"):
            return i
    return len(posicionados)


def ordenar_para_exportacao(registros: Registros) -> list[Registro]:
    """Lista final de registros, na ordem em que vão para o TXT."""
    todos = [r for lista in registros.values() for r in lista]
    posicionados = sorted((r for r in todos if r.ordem is not None), key=lambda r: r.ordem)
    novos = [r for r in todos if r.ordem is None]
    if not novos:
        return posicionados

    insercoes = [(_indice_insercao(posicionados, r), n, r) for n, r in enumerate(novos)]
    # do maior índice para o menor, para não deslocar as posições já calculadas;
    # no mesmo índice, o mais recente entra primeiro e termina depois dos anteriores
    for indice, _, registro in sorted(insercoes, key=lambda x: (x[0], x[1]), reverse=True):
        posicionados.insert(indice, registro)
    return posicionados


def _campos_para_gravar(r: Registro, por_reg: Counter, por_bloco: Counter, total: int) -> dict[str, str]:
    campos = dict(r.campos)
    campos["REG"] = r.reg

    if eh_encerramento_de_bloco(r.reg):
        bloco = bloco_do_registro(r.reg)
        campos[f"QTD_LIN_{bloco}"] = str(por_bloco[bloco])
    elif r.reg == "9900":
        campos["QTD_REG_BLC"] = str(por_reg[campos.get("REG_BLC") or ""])
    elif r.reg == "9999":
        campos["QTD_LIN"] = str(total)

    # o PVA recusa DESCR_COMPL do A170 com mais de 50 caracteres
    if r.reg == "A170" and campos.get("DESCR_COMPL"):
        campos["DESCR_COMPL"] = campos["DESCR_COMPL"][:LIMITE_DESCR_COMPL_A170]
    return campos


def export_to_text(registros: Registros) -> str:
    """
    Monta o TXT: uma linha "|REG|campo|...|" por registro, na ordem do
    leiaute, com os contadores refeitos sobre a lista final.
    """
    lista = [r for r in ordenar_para_exportacao(registros) if campos_do_registro(r.reg)]

    por_reg = Counter(r.reg for r in lista)
    por_bloco = Counter(bloco_do_registro(r.reg) for r in lista)
    total = len(lista)

    linhas = []
    for r in lista:
        campos = _campos_para_gravar(r, por_reg, por_bloco, total)
        valores = [campos.get(nome) or "" for nome in campos_do_registro(r.reg)]
        linhas.append(DELIMITADOR + DELIMITADOR.join(valores) + DELIMITADOR + QUEBRA_LINHA)

    logger.info("EFD exportada: %d linhas", total)
    return "".join(linhas)


def export_filename(registros: Registros) -> str:
    """EFD_CONTRIBUICOES_<CNPJ>_<DT_INI>_<DT_FIN>.txt, a partir do 0000."""
    abertura = (registros.get(REG_ABERTURA_ARQUIVO) or [None])[0]
    cnpj = abertura.valor("CNPJ") if abertura else ""
    dt_ini = abertura.valor("DT_INI") if abertura else ""
    dt_fin = abertura.valor("DT_FIN") if abertura else ""
    return (
        f"{PREFIXO_ARQUIVO_EXPORTACAO}_{cnpj or 'CNPJ_NAO_ENCONTRADO'}"
        f"_{dt_ini or 'DATA_INI'}_{dt_fin or 'DATA_FIN'}.txt"
    )


def exportar_arquivo(registros: Registros) -> ArquivoExportado:
    """TXT codificado + nome do arquivo, prontos para download."""
    texto = export_to_text(registros)
    return ArquivoExportado(
        nome=export_filename(registros),
        conteudo=texto.encode(ENCODING_EFD, errors="replace"),
        total_linhas=texto.count(QUEBRA_LINHA),
    )
