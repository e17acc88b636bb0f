from dataclasses import dataclass


@dataclass
class ArquivoExportado:
    nome: str              # EFD_CONTRIBUICOES_<CNPJ>_<DT_INI>_<DT_FIN>.txt
    conteudo: bytes        # TXT já codificado em cp1252
    total_linhas: int
