# --------------------------------------------------------------
# File: stream.py
# Description: Contrato común de lectura de flujos binarios de entrada.
# --------------------------------------------------------------
"""Lectura por bloques de la entrada a firmar o verificar."""

from __future__ import annotations

import logging
import sys
from typing import BinaryIO, Iterator, Optional

from textsign import config
from textsign.errors import StreamReadError

logger = logging.getLogger(__name__)

STDIN = "-"


def get_reader(source: str) -> BinaryIO:
    """Abre la fuente indicada en modo binario.

    Args:
        source (str): Ruta de fichero o ``-`` para la entrada estándar.

    Returns:
        BinaryIO: Flujo listo para leer; el llamante es responsable de cerrarlo.

    Raises:
        StreamReadError: Si el fichero no puede abrirse.

    """

    if source == STDIN:
        return sys.stdin.buffer
    try:
        return open(source, "rb")
    except OSError as exc:
        raise StreamReadError(f"No se puede abrir {source}: {exc}") from exc


def iter_chunks(stream: BinaryIO, chunk_size: Optional[int] = None) -> Iterator[bytes]:
    """Recorre el flujo hasta EOF devolviendo bloques no vacíos.

    Args:
        stream (BinaryIO): Flujo binario de entrada.
        chunk_size (Optional[int]): Tamaño de bloque; por defecto el configurado.

    Returns:
        Iterator[bytes]: Bloques consecutivos del flujo.

    Raises:
        StreamReadError: Si la lectura falla antes de llegar a EOF.

    """

    size = chunk_size or config.CHUNK_SIZE
    total = 0
    while True:
        try:
            chunk = stream.read(size)
        except OSError as exc:
            raise StreamReadError(f"Error leyendo la entrada: {exc}") from exc
        if not chunk:
            break
        total += len(chunk)
        yield chunk
    logger.debug("Entrada leída: %d bytes", total)


def read_all(stream: BinaryIO, chunk_size: Optional[int] = None) -> bytes:
    """Lee el flujo completo en memoria."""

    return b"".join(iter_chunks(stream, chunk_size))
