# --------------------------------------------------------------
# File: material.py
# Description: Ajuste de claves y firmas a su longitud fija.
# --------------------------------------------------------------
import logging
from typing import Optional, Type

from textsign import config
from textsign.errors import TextSignError

logger = logging.getLogger(__name__)


def fit_length(
    data: bytes,
    size: int,
    *,
    label: str,
    error: Type[TextSignError],
    strict: Optional[bool] = None,
) -> bytes:
    """Devuelve exactamente ``size`` bytes de ``data``.

    Una entrada corta siempre es un error; nunca se rellena. Una entrada larga
    se recorta a los primeros ``size`` bytes salvo en modo estricto.

    Args:
        data (bytes): Clave o firma proporcionada.
        size (int): Longitud exigida por el algoritmo.
        label (str): Nombre del material para los mensajes de error.
        error (Type[TextSignError]): Excepción a lanzar si la longitud no vale.
        strict (Optional[bool]): Rechaza también entradas largas; ``None`` usa
            ``TEXTSIGN_STRICT_LENGTHS``.

    Returns:
        bytes: Material de longitud exacta.

    """

    data = bytes(data)
    if strict is None:
        strict = config.STRICT_LENGTHS
    if len(data) < size:
        raise error(f"{label}: se requieren {size} bytes, recibidos {len(data)}")
    if len(data) > size:
        if strict:
            raise error(f"{label}: se requieren {size} bytes exactos, recibidos {len(data)}")
        logger.warning("%s de %d bytes recortada a los primeros %d", label, len(data), size)
        return data[:size]
    return data
