# logic_sped.py
import io
import zipfile
from typing import Callable, Optional

from parsers.efd_contribuicoes import EntradaVazia, parse_efd_text
from schemas.documento_efd import DocumentoEfd
from utils import decode_efd_bytes


def _primeiro_txt_do_zip(data: bytes) -> tuple[str, bytes]:
    with zipfile.ZipFile(io.BytesIO(data)) as zf:
        nomes = sorted(
            info.filename for info in zf.infolist()
            if not info.is_dir() and info.filename.lower().endswith(".txt")
        )
        if not nomes:
            raise EntradaVazia("Nenhum arquivo .txt dentro do ZIP.")
        with zf.open(nomes[0]) as f:
            return nomes[0], f.read()


def parse_efd_from_any(
    data: bytes,
    filename: str,
    ao_progredir: Optional[Callable[[int, int], None]] = None,
) -> DocumentoEfd:
    """
    Se for TXT: processa direto.
    Se for ZIP: usa o primeiro .txt de dentro (um documento por vez).
    """
    filename_lower = (filename or "").lower()

    if filename_lower.endswith(".zip"):
        _, txt_bytes = _primeiro_txt_do_zip(data)
    elif filename_lower.endswith(".txt"):
        txt_bytes = data
    else:
        raise ValueError(f"Tipo de arquivo não suportado: {filename}")

    return parse_efd_text(decode_efd_bytes(txt_bytes), ao_progredir=ao_progredir)
