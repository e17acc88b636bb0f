from decimal import Decimal

from conftest import linha

from logic_resumo import recalculate_summaries, registros_to_frame, resumos_to_frames
from parsers.efd_contribuicoes import parse_efd_text
from schemas.resumo import ENTRADA, SAIDA, Resumos
from utils import parse_numero_br


def test_parse_numero_br():
    assert parse_numero_br("1.234,56") == Decimal("1234.56")
    assert parse_numero_br("0,5") == Decimal("0.5")
    assert parse_numero_br("100") == Decimal("100")
    # falhas viram zero, sem exceção
    assert parse_numero_br("") == 0
    assert parse_numero_br(None) == 0
    assert parse_numero_br("abc") == 0
    assert parse_numero_br("NaN") == 0


def test_resumo_operacoes(documento):
    entradas = documento.resumos.operacoes_entradas
    saidas = documento.resumos.operacoes_saidas

    # ordenado por CFOP
    assert [e.cfop for e in entradas] == ["1102", "1403"]
    assert all(e.direcao == ENTRADA for e in entradas)

    e1102 = entradas[0]
    assert e1102.vlr_tot == Decimal("1500.00")
    assert e1102.vlr_icms == Decimal("270.00")
    assert e1102.vlr_pis == Decimal("24.75")
    assert e1102.vlr_cofins == Decimal("114.00")
    # base de PIS + base de COFINS
    assert e1102.vlr_bc_pis_cof == Decimal("3000.00")
    assert e1102.cst_pis_cof == "50/50"
    assert e1102.aliq_pis == Decimal("1.65")
    assert e1102.aliq_cofins == Decimal("7.60")

    assert len(saidas) == 1
    s = saidas[0]
    assert s.direcao == SAIDA
    assert s.cfop == "5102"
    assert s.vlr_tot == Decimal("2000.00")
    assert s.vlr_ipi == Decimal("100.00")
    assert s.cst_pis_cof == "01/01"


def test_resumo_soma_bate_com_os_itens(documento):
    c100_por_id = {r.id: r for r in documento.registros["C100"]}
    resumos = documento.resumos
    for linha_resumo in resumos.operacoes_entradas + resumos.operacoes_saidas:
        esperado = Decimal("0")
        for item in documento.registros["C170"]:
            doc = c100_por_id[item.parent_id]
            direcao = ENTRADA if doc.valor("IND_OPER") == "0" else SAIDA
            if (direcao, item.valor("CFOP"), item.valor("CST_PIS"), item.valor("CST_COFINS")) == (
                linha_resumo.direcao, linha_resumo.cfop, linha_resumo.cst_pis, linha_resumo.cst_cofins,
            ):
                esperado += parse_numero_br(item.valor("VL_ITEM"))
        assert linha_resumo.vlr_tot == esperado


def test_resumo_tributos(documento):
    pis = documento.resumos.tributo_pis
    cofins = documento.resumos.tributo_cofins
    # todos os campos do M200 menos o REG, na ordem do leiaute
    assert len(pis) == 12
    assert pis[0].atributo == "VL_TOT_CONT_NC_PER"
    assert pis[0].descricao == "Total Contribuição Não Cumulativa"
    assert pis[0].valor == Decimal("33.00")
    assert pis[-1].atributo == "VL_TOT_CONT_REC"
    assert pis[-1].valor == Decimal("3.30")
    assert cofins[-1].valor == Decimal("15.20")


def test_resumo_usa_so_o_primeiro_m200():
    doc = parse_efd_text("\n".join([
        linha("M200", VL_TOT_CONT_REC="1,00"),
        linha("M200", VL_TOT_CONT_REC="9,00"),
    ]))
    assert doc.resumos.tributo_pis[-1].valor == Decimal("1.00")
    assert doc.resumos.tributo_cofins == ()


def test_resumo_avisa_progresso(documento):
    chamadas = []
    recalculate_summaries(documento.registros, ao_progredir=lambda atual, total: chamadas.append((atual, total)))
    # 4 itens C170: aviso no primeiro item e no fim
    assert chamadas == [(0, 4), (4, 4)]


def test_resumo_vazio():
    assert recalculate_summaries({}) == Resumos()


def test_resumo_ignora_item_sem_documento():
    doc = parse_efd_text("\n".join([
        linha("C170", CFOP="1102", VL_ITEM="10,00"),
        linha("C100", IND_OPER="1"),
        linha("C170", CFOP="5102", VL_ITEM="20,00", VL_ICMS="xx"),
    ]))
    assert doc.resumos.operacoes_entradas == ()
    (saida,) = doc.resumos.operacoes_saidas
    assert saida.vlr_tot == Decimal("20.00")
    # número inválido vira zero
    assert saida.vlr_icms == 0
    # código vazio vira N/A
    assert saida.cst_pis_cof == "N/A/N/A"


def test_resumo_nao_altera_registros(documento):
    antes = {reg: list(lista) for reg, lista in documento.registros.items()}
    recalculate_summaries(documento.registros)
    assert documento.registros == antes


def test_resumos_to_frames(documento):
    frames = resumos_to_frames(documento.resumos)
    assert list(frames) == ["Entradas", "Saidas", "Apuracao_PIS", "Apuracao_COFINS"]
    df = frames["Entradas"]
    assert df["CFOP"].tolist() == ["1102", "1403"]
    assert df["Valor Total"].tolist() == [1500.0, 300.0]
    assert len(frames["Apuracao_PIS"]) == 12


def test_registros_to_frame(documento):
    df = registros_to_frame(documento.registros, "C010")
    assert list(df.columns) == ["_id", "REG", "CNPJ", "IND_ESCRI"]
    assert df["CNPJ"].tolist() == ["11111111000191", "22222222000191"]
    vazio = registros_to_frame(documento.registros, "C500")
    assert vazio.empty
    assert "COD_PART" in vazio.columns
