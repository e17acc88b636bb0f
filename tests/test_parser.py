import pytest

from conftest import CNPJ_FILIAL, CNPJ_MATRIZ, EFD_TEXTO, linha, por_ordem

from core.estrutura import aceita_filho
from parsers.efd_contribuicoes import EntradaVazia, parse_efd_text


def test_parse_agrupa_por_reg_e_guarda_ordem(documento):
    regs = documento.registros
    assert len(regs["C170"]) == 4
    assert len(regs["9900"]) == 30
    assert documento.total_registros == 68
    # ordem = índice da linha no arquivo (0-based)
    assert [r.ordem for r in regs["C100"]] == [18, 21, 24]
    assert regs["0000"][0].valor("CNPJ") == CNPJ_MATRIZ


def test_parse_campos_pelo_leiaute(documento):
    c170 = por_ordem(documento, 19)
    assert c170.reg == "C170"
    assert c170.campos["REG"] == "C170"
    assert c170.valor("CFOP") == "1102"
    assert c170.valor("VL_ITEM") == "1.000,00"
    # campo vazio continua string vazia
    assert c170.valor("COD_CTA") == ""


def test_parse_pai_pela_posicao(documento):
    assert por_ordem(documento, 19).parent_id == por_ordem(documento, 18).id
    assert por_ordem(documento, 20).parent_id == por_ordem(documento, 18).id
    assert por_ordem(documento, 22).parent_id == por_ordem(documento, 21).id
    assert por_ordem(documento, 25).parent_id == por_ordem(documento, 24).id
    # 0205 fica debaixo do 0200 logo acima dele
    assert por_ordem(documento, 6).parent_id == por_ordem(documento, 5).id
    # registros de topo não têm pai
    assert por_ordem(documento, 18).parent_id is None
    assert por_ordem(documento, 0).parent_id is None


def test_parse_pai_sempre_legal(documento):
    por_id = {r.id: r for lista in documento.registros.values() for r in lista}
    for lista in documento.registros.values():
        for r in lista:
            if r.parent_id is not None:
                assert aceita_filho(por_id[r.parent_id].reg, r.reg)


def test_parse_cnpj_por_contexto(documento):
    # 0140 é dono de si mesmo
    assert por_ordem(documento, 3).cnpj == CNPJ_MATRIZ
    assert por_ordem(documento, 7).cnpj == CNPJ_FILIAL
    # cadastros do bloco 0 são globais
    assert por_ordem(documento, 4).cnpj is None
    assert por_ordem(documento, 5).cnpj is None
    # A010 abre o contexto do bloco A
    assert por_ordem(documento, 12).cnpj == CNPJ_MATRIZ
    assert por_ordem(documento, 14).cnpj == CNPJ_MATRIZ
    # abertura e encerramento de bloco são estruturais
    assert por_ordem(documento, 16).cnpj is None
    assert por_ordem(documento, 26).cnpj is None
    # cada C010 troca o contexto
    assert por_ordem(documento, 19).cnpj == CNPJ_MATRIZ
    assert por_ordem(documento, 25).cnpj == CNPJ_FILIAL


def test_parse_bloco_global_limpa_contexto():
    texto = "\n".join([
        linha("C001", IND_MOV="0"),
        linha("C010", CNPJ=CNPJ_FILIAL),
        linha("C100", IND_OPER="0"),
        linha("M200", VL_TOT_CONT_REC="1,00"),
        linha("M210", COD_CONT="01"),
        linha("1100", PER_APU_CRED="012024"),
    ])
    doc = parse_efd_text(texto)
    assert doc.registros["C100"][0].cnpj == CNPJ_FILIAL
    # sem C001/C990 no meio, o bloco M ainda assim não herda o CNPJ do C010
    assert doc.registros["M200"][0].cnpj is None
    assert doc.registros["M210"][0].cnpj is None
    assert doc.registros["1100"][0].cnpj is None


def test_parse_abertura_de_bloco_nao_herda_cnpj_anterior():
    texto = "\n".join([
        linha("A001", IND_MOV="0"),
        linha("A010", CNPJ=CNPJ_MATRIZ),
        linha("C001", IND_MOV="0"),
        linha("C180", COD_MOD="65"),
    ])
    doc = parse_efd_text(texto)
    assert doc.registros["C001"][0].cnpj is None
    # sem C010 o registro fica global, não vira do CNPJ do bloco A
    assert doc.registros["C180"][0].cnpj is None


def test_parse_vazio_levanta_erro():
    with pytest.raises(EntradaVazia):
        parse_efd_text("")
    with pytest.raises(EntradaVazia):
        parse_efd_text("   \n\n  ")


def test_parse_ignora_lixo_e_reg_desconhecido():
    texto = "\n".join([
        "linha qualquer sem delimitador",
        "|Z999|campo|",
        "|",
        "",
        linha("0001", IND_MOV="0"),
    ])
    doc = parse_efd_text(texto)
    assert list(doc.registros) == ["0001"]
    # ordem continua sendo a linha original
    assert doc.registros["0001"][0].ordem == 4


def test_parse_campos_faltando_ou_sobrando():
    doc = parse_efd_text("|C010|123|\n|0001|0|extra|mais|\n")
    c010 = doc.registros["C010"][0]
    assert c010.campos == {"REG": "C010", "CNPJ": "123", "IND_ESCRI": ""}
    assert doc.registros["0001"][0].campos == {"REG": "0001", "IND_MOV": "0"}


def test_parse_linha_sem_delimitador_final():
    doc = parse_efd_text("|C010|123|2\n")
    assert doc.registros["C010"][0].valor("IND_ESCRI") == "2"


def test_parse_orfao_fica_sem_pai():
    doc = parse_efd_text("\n".join([
        linha("C170", CFOP="1102"),
        linha("C100", IND_OPER="0"),
        linha("C170", CFOP="5102"),
    ]))
    orfao, filho = doc.registros["C170"]
    assert orfao.parent_id is None
    assert filho.parent_id == doc.registros["C100"][0].id


def test_parse_irmao_do_mesmo_tipo_vira_novo_pai():
    doc = parse_efd_text("\n".join([
        linha("C400", COD_MOD="2D"),
        linha("C405", CRO="1"),
        linha("C481", CST_PIS="01"),
        linha("C405", CRO="2"),
        linha("C485", CST_COFINS="01"),
    ]))
    c400 = doc.registros["C400"][0]
    c405_a, c405_b = doc.registros["C405"]
    assert c405_a.parent_id == c400.id
    assert c405_b.parent_id == c400.id
    assert doc.registros["C481"][0].parent_id == c405_a.id
    assert doc.registros["C485"][0].parent_id == c405_b.id


def test_parse_crlf():
    doc = parse_efd_text(EFD_TEXTO.replace("\n", "\r\n"))
    assert doc.total_registros == 68
    assert doc.registros["9999"][0].valor("QTD_LIN") == "68"


def test_parse_avisa_progresso():
    chamadas = []
    parse_efd_text(EFD_TEXTO, ao_progredir=lambda atual, total: chamadas.append((atual, total)))
    assert chamadas[0] == (0, 68)
    assert chamadas[-1] == (68, 68)
    # sempre sobre o total de linhas, sem voltar para trás
    assert all(total == 68 for _, total in chamadas)
    atuais = [atual for atual, _ in chamadas]
    assert atuais == sorted(atuais)


def test_parse_ja_calcula_resumos(documento):
    assert len(documento.resumos.operacoes_entradas) == 2
    assert len(documento.resumos.operacoes_saidas) == 1
