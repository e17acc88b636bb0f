# app.py
import os
import base64
import io

import pandas as pd
from dash import Dash, dcc, html, Input, Output, State, dash_table, no_update
import dash_bootstrap_components as dbc

from utils import base_path, mask_cnpj, fmt_period, log_message
from logic_sped import parse_efd_from_any
from logic_resumo import recalculate_summaries, resumos_to_frames, registros_to_frame
from logic_filtro import project_cnpj, TODOS_ESTABELECIMENTOS
from logic_exportar import exportar_arquivo
from logic_edicao import (
    adicionar_em_lote,
    aplicar_edicoes_tabela,
    criar_tipo_registro,
    listar_estabelecimentos,
    novo_registro,
    atualizar_registros,
    tipo_visivel_no_filtro,
    CAMPOS_LOTE,
    LoteInvalido,
    RegistroDesconhecido,
    TipoRegistroJaExiste,
)
from schemas.documento_efd import DocumentoEfd
from schemas.registro import registros_from_store, registros_to_store


BASE_PATH = base_path()
ASSETS_PATH = os.path.join(BASE_PATH, "assets")

app = Dash(
    __name__,
    external_stylesheets=[dbc.themes.BOOTSTRAP],
    assets_folder=ASSETS_PATH,
    assets_url_path="/assets",
    serve_locally=True,
)

server = app.server
server.config["SEND_FILE_MAX_AGE_DEFAULT"] = 0

TABELA_STYLE = dict(
    page_size=15,
    style_table={'marginTop': '10px', 'overflowX': 'auto'},
    style_cell={'textAlign': 'center', 'padding': '6px', 'fontSize': 12},
    style_header={'fontWeight': 'bold'},
)


def _documento_da_sessao(dados_store, cnpj) -> DocumentoEfd:
    registros = registros_from_store(dados_store)
    return project_cnpj(DocumentoEfd(registros=registros), cnpj)


def _cnpj_da_grade(registros, reg, cnpj):
    """Tipos que o filtro não alcança aparecem (e são editados) sem projeção."""
    if cnpj == TODOS_ESTABELECIMENTOS or not tipo_visivel_no_filtro(registros, reg):
        return TODOS_ESTABELECIMENTOS
    return cnpj


def _frame_to_table(df: pd.DataFrame):
    return df.to_dict('records'), [{'name': c, 'id': c} for c in df.columns]


# --- CABEÇALHO ---
global_header = dbc.Card([
    dbc.CardBody([
        html.H4('EFD Contribuições - Análise e Edição', className='mb-3'),
        dcc.Upload(
            id='upload-efd',
            accept='.txt,.zip,text/plain,application/zip',
            multiple=False,
            children=html.Div(['Clique aqui para selecionar o TXT da EFD Contribuições']),
            style={
                'width': '100%',
                'height': '70px',
                'lineHeight': '70px',
                'borderWidth': '1px',
                'borderStyle': 'dashed',
                'borderRadius': '5px',
                'textAlign': 'center',
                'marginBottom': '10px',
            },
        ),
        html.Div(id='file-info-efd', style={'marginBottom': '10px', 'fontStyle': 'italic'}),
        dbc.Row([
            dbc.Col(
                dcc.Dropdown(
                    id='select-cnpj',
                    options=[{'label': 'Todos os estabelecimentos', 'value': TODOS_ESTABELECIMENTOS}],
                    value=TODOS_ESTABELECIMENTOS,
                    clearable=False,
                ),
                md=5,
            ),
            dbc.Col(
                html.Div([
                    dbc.Button('Processar alterações', id='btn-processar', color='primary', class_name='me-2'),
                    dbc.Button('Exportar TXT', id='btn-exportar-txt', color='success', class_name='me-2'),
                    dcc.Download(id='download-txt'),
                    dbc.Button('Resumos (Excel)', id='btn-excel-resumos', color='secondary'),
                    dcc.Download(id='download-excel-resumos'),
                ], className='d-flex gap-2'),
                width='auto',
            ),
        ], align='center', className='mb-2'),
        html.Div(id='status-efd'),
    ], style={'padding': '24px 28px'}),
], class_name='mb-3 border-0 shadow-sm', style={'backgroundColor': '#eef0f3', 'borderRadius': '12px'})


def _aba_tabela(id_tabela: str) -> dbc.Card:
    return dbc.Card([
        dbc.CardBody([
            dash_table.DataTable(id=id_tabela, data=[], columns=[], **TABELA_STYLE),
        ])
    ], class_name='mt-3')


# --- ABA: Registros (grade editável) ---
tab_registros_content = dbc.Card([
    dbc.CardBody([
        dbc.Row([
            dbc.Col(dcc.Dropdown(id='select-reg', options=[], placeholder='Registro (REG)'), md=3),
            dbc.Col(
                html.Div([
                    dbc.Button('Adicionar linha', id='btn-add-linha', color='primary', outline=True, class_name='me-2'),
                    dbc.Button('Aplicar edições da tabela', id='btn-aplicar-edicoes', color='primary'),
                ], className='d-flex gap-2'),
                width='auto',
            ),
            dbc.Col(
                dbc.InputGroup([
                    dbc.Input(id='input-novo-reg', type='text', placeholder='Ex.: C170', style={'maxWidth': '120px'}),
                    dbc.Button('Criar registro', id='btn-criar-reg', color='secondary'),
                ]),
                width='auto',
            ),
        ], align='center', className='mb-2'),
        dash_table.DataTable(
            id='tabela-registros',
            data=[],
            columns=[],
            editable=True,
            row_deletable=True,
            filter_action='native',
            hidden_columns=['_id'],
            **TABELA_STYLE,
        ),
        html.Div(id='lote-area', style={'display': 'none'}, children=[
            html.Hr(),
            html.Div(id='lote-colunas', style={'fontSize': 12, 'marginBottom': '6px'}),
            dcc.Textarea(
                id='input-lote',
                placeholder='Cole aqui as linhas da planilha (colunas separadas por TAB)',
                style={'width': '100%', 'height': '120px', 'fontSize': '12px', 'fontFamily': 'monospace'},
            ),
            dbc.Button('Adicionar em lote', id='btn-lote', color='primary', outline=True, class_name='mt-2'),
        ]),
    ])
], class_name='mt-3')


app.layout = dbc.Container([
    global_header,

    dcc.Tabs(id="tabs-container", value='tab-entradas', children=[
        dcc.Tab(label='Entradas', value='tab-entradas', children=_aba_tabela('tabela-entradas')),
        dcc.Tab(label='Saídas', value='tab-saidas', children=_aba_tabela('tabela-saidas')),
        dcc.Tab(label='Apuração PIS', value='tab-pis', children=_aba_tabela('tabela-pis')),
        dcc.Tab(label='Apuração COFINS', value='tab-cofins', children=_aba_tabela('tabela-cofins')),
        dcc.Tab(label='Registros', value='tab-registros', children=tab_registros_content),
    ]),

    html.Div(
        dcc.Textarea(id='log-textarea-efd', style={'width': '100%', 'height': '160px', 'fontSize': '12px'}, readOnly=True, value="Aguardando arquivo..."),
        style={'fontFamily': 'monospace', 'marginTop': '12px'}
    ),

    # Documento processado / rascunho com as edições ainda não processadas
    dcc.Store(id='store-efd', data=None),
    dcc.Store(id='store-rascunho', data=None),
    dcc.Store(id='store-log-efd', data=[]),
], fluid=True)


# =============================================================
# Upload
# =============================================================

@app.callback(
    Output('file-info-efd', 'children'),
    Output('store-efd', 'data'),
    Output('store-rascunho', 'data', allow_duplicate=True),
    Output('select-cnpj', 'options'),
    Output('select-cnpj', 'value'),
    Output('store-log-efd', 'data', allow_duplicate=True),
    Input('upload-efd', 'contents'),
    State('upload-efd', 'filename'),
    State('store-log-efd', 'data'),
    prevent_initial_call=True,
)
def process_upload_efd(contents, filename, logs):
    logs = list(logs or [])
    if not contents:
        return no_update, no_update, no_update, no_update, no_update, no_update

    try:
        header, b64 = contents.split(',', 1)
        data = base64.b64decode(b64)
        documento = parse_efd_from_any(data, filename)
    except Exception as e:
        logs = log_message(logs, f"ERRO ao ler {filename}: {e}")
        return f"Erro ao processar arquivo: {e}", None, None, no_update, no_update, logs

    registros = documento.registros
    abertura = (registros.get('0000') or [None])[0]
    periodo = fmt_period(abertura.valor('DT_INI'), abertura.valor('DT_FIN')) if abertura else "—"
    info = (
        f"Arquivo: {filename or '(sem nome)'} | Período: {periodo} | "
        f"{documento.total_registros} registros em {len(registros)} tipos"
    )

    opcoes = [{'label': 'Todos os estabelecimentos', 'value': TODOS_ESTABELECIMENTOS}]
    for cnpj, nome in listar_estabelecimentos(registros):
        opcoes.append({'label': f"{nome} ({mask_cnpj(cnpj)})", 'value': cnpj})

    logs = log_message(logs, f"Arquivo lido: {filename} ({documento.total_registros} registros)")
    dados = registros_to_store(registros)
    return info, dados, dados, opcoes, TODOS_ESTABELECIMENTOS, logs


@app.callback(Output('log-textarea-efd', 'value'), Input('store-log-efd', 'data'))
def update_log_display_efd(log_data):
    return "\n".join(log_data or ["Aguardando arquivo..."])


# =============================================================
# Resumos
# =============================================================

@app.callback(
    Output('tabela-entradas', 'data'),
    Output('tabela-entradas', 'columns'),
    Output('tabela-saidas', 'data'),
    Output('tabela-saidas', 'columns'),
    Output('tabela-pis', 'data'),
    Output('tabela-pis', 'columns'),
    Output('tabela-cofins', 'data'),
    Output('tabela-cofins', 'columns'),
    Input('store-efd', 'data'),
    Input('select-cnpj', 'value'),
)
def update_resumos(dados, cnpj):
    if not dados:
        return [], [], [], [], [], [], [], []
    documento = _documento_da_sessao(dados, cnpj)
    frames = resumos_to_frames(documento.resumos)
    saida = []
    for nome in ("Entradas", "Saidas", "Apuracao_PIS", "Apuracao_COFINS"):
        saida.extend(_frame_to_table(frames[nome]))
    return tuple(saida)


# =============================================================
# Grade de registros (rascunho)
# =============================================================

@app.callback(Output('select-reg', 'options'), Input('store-rascunho', 'data'))
def update_reg_options(dados):
    return [{'label': reg, 'value': reg} for reg in sorted((dados or {}).keys())]


@app.callback(
    Output('tabela-registros', 'data'),
    Output('tabela-registros', 'columns'),
    Input('select-reg', 'value'),
    Input('store-rascunho', 'data'),
    Input('select-cnpj', 'value'),
)
def update_grade(reg, dados, cnpj):
    if not reg or not dados:
        return [], []
    documento = _documento_da_sessao(dados, _cnpj_da_grade(registros_from_store(dados), reg, cnpj))
    df = registros_to_frame(documento.registros, reg)
    data = df.to_dict('records')
    cols = [{'name': c, 'id': c, 'editable': c not in ('_id', 'REG')} for c in df.columns]
    return data, cols


@app.callback(
    Output('store-rascunho', 'data', allow_duplicate=True),
    Output('status-efd', 'children', allow_duplicate=True),
    Input('btn-aplicar-edicoes', 'n_clicks'),
    State('tabela-registros', 'data'),
    State('select-reg', 'value'),
    State('store-rascunho', 'data'),
    State('select-cnpj', 'value'),
    prevent_initial_call=True,
)
def aplicar_edicoes(n, linhas, reg, dados, cnpj):
    if not n or not reg or dados is None:
        return no_update, no_update
    registros = registros_from_store(dados)
    cnpj = _cnpj_da_grade(registros, reg, cnpj)
    visiveis = project_cnpj(DocumentoEfd(registros=registros), cnpj).registros.get(reg) or []
    cnpj_novos = None if cnpj == TODOS_ESTABELECIMENTOS else cnpj
    try:
        registros = aplicar_edicoes_tabela(registros, reg, linhas or [], [r.id for r in visiveis], cnpj=cnpj_novos)
    except RegistroDesconhecido as e:
        return no_update, dbc.Alert(f"Registro desconhecido: {e}", color="danger")
    aviso = dbc.Alert("Edições aplicadas ao rascunho. Clique em 'Processar alterações'.", color="info")
    return registros_to_store(registros), aviso


@app.callback(
    Output('store-rascunho', 'data', allow_duplicate=True),
    Input('btn-add-linha', 'n_clicks'),
    State('select-reg', 'value'),
    State('store-rascunho', 'data'),
    State('select-cnpj', 'value'),
    prevent_initial_call=True,
)
def adicionar_linha(n, reg, dados, cnpj):
    if not n or not reg or dados is None:
        return no_update
    registros = registros_from_store(dados)
    cnpj = _cnpj_da_grade(registros, reg, cnpj)
    cnpj_novo = None if cnpj == TODOS_ESTABELECIMENTOS else cnpj
    registros = atualizar_registros(registros, reg, [novo_registro(reg, cnpj=cnpj_novo)])
    return registros_to_store(registros)


@app.callback(
    Output('store-rascunho', 'data', allow_duplicate=True),
    Output('select-reg', 'value'),
    Output('status-efd', 'children', allow_duplicate=True),
    Input('btn-criar-reg', 'n_clicks'),
    State('input-novo-reg', 'value'),
    State('store-rascunho', 'data'),
    prevent_initial_call=True,
)
def criar_registro(n, reg, dados):
    if not n or not reg or dados is None:
        return no_update, no_update, no_update
    reg = reg.strip().upper()
    try:
        registros = criar_tipo_registro(registros_from_store(dados), reg)
    except (RegistroDesconhecido, TipoRegistroJaExiste) as e:
        return no_update, no_update, dbc.Alert(str(e), color="danger")
    return registros_to_store(registros), reg, dbc.Alert(f"Registro {reg} criado no rascunho.", color="info")


@app.callback(
    Output('lote-area', 'style'),
    Output('lote-colunas', 'children'),
    Input('select-reg', 'value'),
)
def update_lote_area(reg):
    colunas = CAMPOS_LOTE.get(reg or "")
    if not colunas:
        return {'display': 'none'}, ""
    return {'display': 'block'}, f"Adição em lote de {reg} - colunas: " + " | ".join(colunas)


@app.callback(
    Output('store-rascunho', 'data', allow_duplicate=True),
    Output('input-lote', 'value'),
    Output('status-efd', 'children', allow_duplicate=True),
    Input('btn-lote', 'n_clicks'),
    State('input-lote', 'value'),
    State('select-reg', 'value'),
    State('store-rascunho', 'data'),
    State('select-cnpj', 'value'),
    prevent_initial_call=True,
)
def adicionar_lote(n, texto, reg, dados, cnpj):
    if not n or not reg or dados is None:
        return no_update, no_update, no_update
    cnpj_novos = None if cnpj == TODOS_ESTABELECIMENTOS else cnpj
    try:
        antes = registros_from_store(dados)
        registros = adicionar_em_lote(antes, reg, texto or "", cnpj=cnpj_novos)
    except LoteInvalido as e:
        return no_update, no_update, dbc.Alert(str(e), color="danger")
    qtd = len(registros[reg]) - len(antes.get(reg) or [])
    aviso = dbc.Alert(
        f"{qtd} registro(s) {reg} adicionado(s) ao rascunho. Clique em 'Processar alterações'.",
        color="info",
    )
    return registros_to_store(registros), "", aviso


@app.callback(
    Output('select-cnpj', 'disabled'),
    Input('tabs-container', 'value'),
    Input('select-reg', 'value'),
    Input('store-rascunho', 'data'),
)
def update_cnpj_habilitado(aba, reg, dados):
    registros = registros_from_store(dados)
    if len(listar_estabelecimentos(registros)) <= 1:
        return True
    if aba in ('tab-pis', 'tab-cofins'):
        return True
    if aba == 'tab-registros':
        return not (reg and tipo_visivel_no_filtro(registros, reg))
    return False


@app.callback(
    Output('store-efd', 'data', allow_duplicate=True),
    Output('status-efd', 'children', allow_duplicate=True),
    Output('store-log-efd', 'data', allow_duplicate=True),
    Input('btn-processar', 'n_clicks'),
    State('store-rascunho', 'data'),
    State('store-log-efd', 'data'),
    prevent_initial_call=True,
)
def processar_alteracoes(n, dados, logs):
    if not n or dados is None:
        return no_update, no_update, no_update
    logs = list(logs or [])
    registros = registros_from_store(dados)
    resumos = recalculate_summaries(registros)
    logs = log_message(
        logs,
        f"Alterações processadas: {len(resumos.operacoes_entradas)} grupos de entrada, "
        f"{len(resumos.operacoes_saidas)} de saída",
    )
    return dados, dbc.Alert("Alterações processadas.", color="success"), logs


# =============================================================
# Downloads
# =============================================================

@app.callback(
    Output('download-txt', 'data'),
    Output('status-efd', 'children', allow_duplicate=True),
    Input('btn-exportar-txt', 'n_clicks'),
    State('store-efd', 'data'),
    State('select-cnpj', 'value'),
    prevent_initial_call=True,
)
def exportar_txt(n, dados, cnpj):
    if not n:
        return no_update, no_update
    if not dados:
        return no_update, dbc.Alert("Carregue um arquivo primeiro.", color="danger")
    try:
        documento = _documento_da_sessao(dados, cnpj)
        arquivo = exportar_arquivo(documento.registros)
    except Exception as e:
        return no_update, dbc.Alert(f"Não foi possível gerar o arquivo: {e}", color="danger")
    status = dbc.Alert(f"✅ {arquivo.nome} gerado ({arquivo.total_linhas} linhas).", color="success")
    return dcc.send_bytes(arquivo.conteudo, arquivo.nome), status


@app.callback(
    Output('download-excel-resumos', 'data'),
    Input('btn-excel-resumos', 'n_clicks'),
    State('store-efd', 'data'),
    State('select-cnpj', 'value'),
    prevent_initial_call=True,
)
def download_resumos_excel(n, dados, cnpj):
    if not n or not dados:
        return no_update
    frames = resumos_to_frames(_documento_da_sessao(dados, cnpj).resumos)

    buf = io.BytesIO()
    with pd.ExcelWriter(buf, engine='openpyxl') as writer:
        for nome, df in frames.items():
            df.to_excel(writer, index=False, sheet_name=nome)
    buf.seek(0)
    return dcc.send_bytes(buf.getvalue(), 'resumos_efd_contribuicoes.xlsx')


if __name__ == '__main__':
    import threading, webbrowser
    port = 8060
    url = f'http://127.0.0.1:{port}'

    # Só abre o navegador se não estivermos no processo 'reloader'
    if not os.environ.get("WERKZEUG_RUN_MAIN"):
        threading.Timer(1.0, lambda: webbrowser.open(url)).start()

    app.server.config['MAX_CONTENT_LENGTH'] = 2 * 1024 * 1024 * 1024

    print(f"Servidor Dash rodando em {url}")
    print("Use 'Ctrl+C' para parar o servidor.")
    app.run(debug=True, host='127.0.0.1', port=port)
