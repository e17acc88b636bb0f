# utils.py
import os
import re
import sys
from datetime import datetime
from decimal import Decimal, InvalidOperation

from core.layout import ENCODING_EFD

# ============== CONFIG / HELPERS GLOBAIS ==============

# A cada quantas linhas/itens o leitor e o resumo avisam o progresso
AVISO_A_CADA = 500


def base_path() -> str:
    """
    Retorna o caminho base para assets (funciona com PyInstaller).
    """
    if getattr(sys, "frozen", False):
        return getattr(sys, "_MEIPASS", os.path.dirname(sys.executable))
    return os.path.dirname(os.path.abspath(__file__))


def digits(s: str) -> str:
    if not s:
        return ""
    return re.sub(r"\D", "", str(s))


def mask_cnpj(d: str) -> str:
    """
    Formata CNPJ ou CPF:
      - CNPJ: 00.000.000/0000-00
      - CPF : 000.000.000-00
    Outros tamanhos: retorna só os dígitos.
    """
    d = digits(d or "")
    if len(d) == 14:
        return f"{d[0:2]}.{d[2:5]}.{d[5:8]}/{d[8:12]}-{d[12:14]}"
    if len(d) == 11:
        return f"{d[0:3]}.{d[3:6]}.{d[6:9]}-{d[9:11]}"
    return d


def fmt_data_efd(s: str) -> str:
    """DDMMAAAA -> DD/MM/AAAA (outros formatos voltam como vieram)."""
    d = digits(s)
    if len(d) != 8:
        return s or ""
    return f"{d[0:2]}/{d[2:4]}/{d[4:8]}"


def fmt_period(dt_ini: str, dt_fin: str) -> str:
    if not dt_ini and not dt_fin:
        return "—"
    return f"{fmt_data_efd(dt_ini)} a {fmt_data_efd(dt_fin)}"


def parse_numero_br(valor) -> Decimal:
    """
    Converte número no padrão do TXT ("1.234,56") para Decimal.
    Ponto é milhar e vírgula é decimal. Qualquer falha vira zero.
    """
    if valor is None:
        return Decimal("0")
    texto = str(valor).strip()
    if not texto:
        return Decimal("0")
    texto = texto.replace(".", "").replace(",", ".")
    try:
        numero = Decimal(texto)
    except InvalidOperation:
        return Decimal("0")
    if not numero.is_finite():
        return Decimal("0")
    return numero


def decode_efd_bytes(data: bytes) -> str:
    """
    Decodifica o TXT na página de código fixa da EFD (cp1252).
    Bytes sem mapeamento no cp1252 caem para latin-1.
    """
    try:
        return data.decode(ENCODING_EFD)
    except UnicodeDecodeError:
        return data.decode("latin-1")


def log_message(message_list, message: str):
    """
    Adiciona mensagem à lista de log (com timestamp) e imprime no stdout.
    """
    timestamp = datetime.now().strftime("%H:%M:%S")
    log_entry = f"[{timestamp}] {message}"
    print(log_entry, file=sys.stdout)
    message_list.append(log_entry)
    return message_list
