import threading
from dataclasses import dataclass, field, replace
from typing import Optional

_ultimo_id = 0
# callbacks do Dash podem rodar em threads diferentes
_lock_id = threading.Lock()


def novo_id() -> int:
    """Identificador único do registro dentro do processo (sequencial)."""
    global _ultimo_id
    with _lock_id:
        _ultimo_id += 1
        return _ultimo_id


def reservar_ids_ate(valor: int):
    """Garante que os próximos ids gerados sejam maiores que ``valor``."""
    global _ultimo_id
    with _lock_id:
        if valor > _ultimo_id:
            _ultimo_id = valor


@dataclass
class Registro:
    reg: str                            # tipo do registro: 0000, C100, C170...
    campos: dict[str, str]              # nome do campo -> valor (texto cru do TXT)

    id: int = field(default_factory=novo_id)
    parent_id: Optional[int] = None     # registro pai, pela posição no arquivo
    cnpj: Optional[str] = None          # estabelecimento dono; None = global
    ordem: Optional[int] = None         # linha no arquivo original (None = criado na edição)

    def __post_init__(self):
        if self.campos.get("REG") != self.reg:
            self.campos = {**self.campos, "REG": self.reg}

    def valor(self, nome: str) -> str:
        return self.campos.get(nome) or ""

    def com_campos(self, **alteracoes: str) -> "Registro":
        """Cópia do registro (mesmo id) com alguns campos trocados."""
        return replace(self, campos={**self.campos, **alteracoes})


# Documento: REG -> registros daquele tipo, na ordem de leitura/edição
Registros = dict[str, list[Registro]]


def registros_to_store(registros: Registros) -> dict[str, list[dict]]:
    """
    Converte o documento em dicts simples (JSON), para guardar em dcc.Store.
    Metadados vão em chaves com prefixo "_".
    """
    saida: dict[str, list[dict]] = {}
    for reg, lista in registros.items():
        linhas = []
        for r in lista:
            linha = dict(r.campos)
            linha["_id"] = r.id
            linha["_parentId"] = r.parent_id
            linha["_cnpj"] = r.cnpj
            linha["_order"] = r.ordem
            linhas.append(linha)
        saida[reg] = linhas
    return saida


def registros_from_store(dados: dict[str, list[dict]] | None) -> Registros:
    registros: Registros = {}
    for reg, linhas in (dados or {}).items():
        lista = []
        for linha in linhas:
            campos = {k: ("" if v is None else str(v)) for k, v in linha.items() if not k.startswith("_")}
            rid = linha.get("_id")
            if rid is None:
                r = Registro(reg=reg, campos=campos)
            else:
                rid = int(rid)
                reservar_ids_ate(rid)
                r = Registro(reg=reg, campos=campos, id=rid)
            r.parent_id = linha.get("_parentId")
            r.cnpj = linha.get("_cnpj")
            r.ordem = linha.get("_order")
            lista.append(r)
        registros[reg] = lista
    return registros
