def test_app_importa_e_monta_layout():
    import app

    assert app.app.layout is not None
    texto = repr(app.app.layout)
    for id_componente in ("upload-efd", "select-cnpj", "store-efd", "store-rascunho", "tabela-registros", "input-lote"):
        assert id_componente in texto


def test_grade_so_filtra_tipos_com_estabelecimento(documento):
    import app

    from conftest import CNPJ_FILIAL

    registros = documento.registros
    assert app._cnpj_da_grade(registros, "C170", CNPJ_FILIAL) == CNPJ_FILIAL
    # aberturas e registros globais aparecem sem projeção
    assert app._cnpj_da_grade(registros, "A001", CNPJ_FILIAL) == app.TODOS_ESTABELECIMENTOS
    assert app._cnpj_da_grade(registros, "M200", CNPJ_FILIAL) == app.TODOS_ESTABELECIMENTOS

    dados = app.registros_to_store(registros)
    assert app.update_cnpj_habilitado('tab-entradas', None, dados) is False
    assert app.update_cnpj_habilitado('tab-pis', None, dados) is True
    assert app.update_cnpj_habilitado('tab-registros', 'M200', dados) is True
    assert app.update_cnpj_habilitado('tab-registros', 'C170', dados) is False
