from dataclasses import replace

from conftest import CNPJ_FILIAL, EFD_TEXTO, linha, por_ordem

from logic_edicao import atualizar_registros, excluir_registros, novo_registro
from logic_exportar import (
    LIMITE_DESCR_COMPL_A170,
    export_filename,
    export_to_text,
    exportar_arquivo,
    ordenar_para_exportacao,
)
from parsers.efd_contribuicoes import parse_efd_text


def _linhas(texto):
    return texto.splitlines()


def _linha_do_reg(texto, prefixo):
    return next(l for l in _linhas(texto) if l.startswith(prefixo))


def _com_novo(registros, registro):
    atuais = registros.get(registro.reg) or []
    return atualizar_registros(registros, registro.reg, atuais + [registro])


def test_exporta_igual_ao_lido(documento):
    assert export_to_text(documento.registros) == EFD_TEXTO


def test_exporta_ordem_deterministica(documento):
    assert export_to_text(documento.registros) == export_to_text(documento.registros)


def test_exporta_corrige_contadores(documento):
    registros = dict(documento.registros)
    c990 = registros["C990"][0]
    registros["C990"] = [c990.com_campos(QTD_LIN_C="999")]
    r9999 = registros["9999"][0]
    registros["9999"] = [r9999.com_campos(QTD_LIN="1")]
    registros["9900"] = [r.com_campos(QTD_REG_BLC="0") for r in registros["9900"]]

    assert export_to_text(registros) == EFD_TEXTO


def test_novo_filho_entra_depois_da_familia(documento):
    pai = por_ordem(documento, 24)
    c170 = novo_registro("C170", {"NUM_ITEM": "2", "CFOP": "1403"}, parent_id=pai.id, cnpj=CNPJ_FILIAL)
    registros = _com_novo(documento.registros, c170)

    ordenados = ordenar_para_exportacao(registros)
    pos = ordenados.index(c170)
    assert ordenados[pos - 1] is por_ordem(documento, 25)
    assert ordenados[pos + 1].reg == "C990"

    texto = export_to_text(registros)
    assert len(_linhas(texto)) == 69
    assert "|C990|12|" in texto
    assert "|9900|C170|5|" in texto
    assert "|9999|69|" in texto
    # bloco 9 não mudou de tamanho
    assert "|9990|33|" in texto


def test_novo_sem_pai_entra_antes_do_encerramento(documento):
    c010 = novo_registro("C010", {"CNPJ": "55555555000191"})
    ordenados = ordenar_para_exportacao(_com_novo(documento.registros, c010))
    pos = ordenados.index(c010)
    assert ordenados[pos + 1].reg == "C990"
    assert ordenados[pos - 1] is por_ordem(documento, 25)


def test_novo_de_bloco_inexistente_entra_antes_do_bloco_9(documento):
    f010 = novo_registro("F010", {"CNPJ": CNPJ_FILIAL})
    ordenados = ordenar_para_exportacao(_com_novo(documento.registros, f010))
    pos = ordenados.index(f010)
    assert ordenados[pos - 1].reg == "1990"
    assert ordenados[pos + 1].reg == "9001"


def test_novo_sem_encerramento_entra_depois_do_ultimo_do_bloco(documento):
    registros = excluir_registros(documento.registros, [documento.registros["1990"][0].id])
    r1010 = novo_registro("1010", {"NUM_PROC": "123"})
    ordenados = ordenar_para_exportacao(_com_novo(registros, r1010))
    pos = ordenados.index(r1010)
    assert ordenados[pos - 1].reg == "1001"
    assert ordenados[pos + 1].reg == "9001"


def test_novos_no_mesmo_lugar_mantem_ordem_de_criacao(documento):
    primeiro = novo_registro("C010", {"CNPJ": "55555555000191"})
    segundo = novo_registro("C010", {"CNPJ": "66666666000191"})
    registros = _com_novo(_com_novo(documento.registros, primeiro), segundo)
    ordenados = ordenar_para_exportacao(registros)
    assert ordenados.index(primeiro) + 1 == ordenados.index(segundo)
    assert ordenados[ordenados.index(segundo) + 1].reg == "C990"


def test_exclusao_em_cascata_refaz_contadores(documento):
    registros = excluir_registros(documento.registros, [por_ordem(documento, 21).id])
    texto = export_to_text(registros)
    assert len(_linhas(texto)) == 66
    assert "|9999|66|" in texto
    assert "|C990|9|" in texto
    assert "|9900|C100|2|" in texto
    assert "|9900|C170|3|" in texto
    assert "5102" not in texto


def test_a170_descr_compl_truncada(documento):
    a170 = documento.registros["A170"][0]
    longa = "X" * 80
    registros = atualizar_registros(documento.registros, "A170", [a170.com_campos(DESCR_COMPL=longa)])
    texto = export_to_text(registros)
    assert "|" + "X" * LIMITE_DESCR_COMPL_A170 + "|" in _linha_do_reg(texto, "|A170|")
    assert "X" * (LIMITE_DESCR_COMPL_A170 + 1) not in texto
    # o registro em memória continua com o texto inteiro
    assert registros["A170"][0].valor("DESCR_COMPL") == longa


def test_pai_quebrado_nao_impede_exportacao(documento):
    c170 = por_ordem(documento, 19)
    registros = atualizar_registros(documento.registros, "C170", [replace(c170, parent_id=999999)])
    assert export_to_text(registros) == EFD_TEXTO


def test_nome_do_arquivo(documento):
    assert export_filename(documento.registros) == "EFD_CONTRIBUICOES_11111111000191_01012024_31012024.txt"
    sem_abertura = {k: v for k, v in documento.registros.items() if k != "0000"}
    assert export_filename(sem_abertura) == "EFD_CONTRIBUICOES_CNPJ_NAO_ENCONTRADO_DATA_INI_DATA_FIN.txt"


def test_arquivo_em_cp1252():
    doc = parse_efd_text(linha("0000", NOME="AÇÚCAR E CAFÉ", CNPJ="11111111000191") + "\n")
    arquivo = exportar_arquivo(doc.registros)
    assert isinstance(arquivo.conteudo, bytes)
    assert "AÇÚCAR E CAFÉ".encode("cp1252") in arquivo.conteudo
    assert arquivo.total_linhas == 1
    assert arquivo.nome.startswith("EFD_CONTRIBUICOES_11111111000191_")
