from dataclasses import dataclass, field

from schemas.registro import Registros
from schemas.resumo import Resumos


@dataclass
class DocumentoEfd:
    registros: Registros                            # REG -> lista de Registro
    resumos: Resumos = field(default_factory=Resumos)

    @property
    def total_registros(self) -> int:
        return sum(len(lista) for lista in self.registros.values())
