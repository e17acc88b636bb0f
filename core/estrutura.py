# core/estrutura.py
"""
Estrutura hierárquica da EFD Contribuições.

A chave é o registro pai e o valor são os registros filhos que podem vir
logo abaixo dele no arquivo. O TXT não tem chave estrangeira: o vínculo
pai/filho sai só da ordem das linhas + esta tabela.
"""
from types import MappingProxyType

_HIERARQUIA = {
    "0200": ("0205", "0206"),
    "A100": ("A170",),
    "C100": ("C110", "C111", "C120", "C170", "C175"),
    "C180": ("C181", "C185"),
    "C190": ("C191", "C195", "C198", "C199"),
    "C380": ("C381", "C385"),
    "C395": ("C396",),
    "C400": ("C405",),
    "C405": ("C481", "C485"),
    "C490": ("C491", "C495"),
    "C500": ("C501", "C505"),
    "C600": ("C601", "C605"),
    "C860": ("C870", "C880"),
    "D100": ("D101", "D105"),
    "D200": ("D201", "D205"),
    "D300": ("D301",),
    "D500": ("D501", "D505"),
    "D600": ("D601", "D605"),
    "F120": ("F130",),
    "F200": ("F205", "F210"),
    "I100": ("I200", "I300"),
    "M100": ("M105", "M110", "M115"),
    "M200": ("M205", "M210"),
    "M400": ("M410",),
    "M500": ("M505", "M510", "M515"),
    "M600": ("M605", "M610"),
    "M800": ("M810",),
    "P200": ("P210",),
}

HIERARQUIA_REGISTROS = MappingProxyType(_HIERARQUIA)

# filho -> pai
PAI_DO_REGISTRO = MappingProxyType(
    {filho: pai for pai, filhos in _HIERARQUIA.items() for filho in filhos}
)

# Blocos cujos registros pertencem a um estabelecimento (CNPJ)
BLOCOS_ESTABELECIMENTO = frozenset("ACDFIP")
# Blocos de consolidação do arquivo inteiro
BLOCOS_GLOBAIS = frozenset("0M19")
# Blocos cuja abertura (X001) tem o IND_MOV recalculado no filtro por CNPJ
BLOCOS_COM_ABERTURA = ("A", "C", "D", "F", "I", "M", "P")

REG_ABERTURA_ARQUIVO = "0000"
REG_ESTABELECIMENTO = "0140"
REG_PARTICIPANTE = "0150"
REG_ITEM = "0200"
SUFIXO_CONTEXTO_CNPJ = "010"

IND_MOV_COM_DADOS = "0"
IND_MOV_SEM_DADOS = "1"


def bloco_do_registro(reg: str) -> str:
    return reg[:1]


def reg_abertura(bloco: str) -> str:
    return f"{bloco}001"


def reg_encerramento(bloco: str) -> str:
    return f"{bloco}990"


def eh_abertura_de_bloco(reg: str) -> bool:
    return len(reg) == 4 and reg.endswith("001")


def eh_encerramento_de_bloco(reg: str) -> bool:
    return len(reg) == 4 and reg.endswith("990")


def pode_ter_filhos(reg: str) -> bool:
    return reg in HIERARQUIA_REGISTROS


def aceita_filho(pai: str, filho: str) -> bool:
    return filho in HIERARQUIA_REGISTROS.get(pai, ())


def familia_do_registro(reg: str) -> frozenset[str]:
    """
    Registro pai + todos os irmãos de ``reg``.
    Vazio se ``reg`` não for filho de ninguém.
    """
    pai = PAI_DO_REGISTRO.get(reg)
    if pai is None:
        return frozenset()
    return frozenset(HIERARQUIA_REGISTROS[pai]) | {pai}
