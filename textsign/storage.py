# --------------------------------------------------------------
# File: storage.py
# Description: Persistencia de claves generadas y lectura de ficheros de clave.
# --------------------------------------------------------------
"""Funciones auxiliares de entrada/salida para el material de clave."""

from __future__ import annotations

import logging
import os
from typing import List

from textsign.errors import KeyStorageError, StreamReadError
from textsign.models import KeyArtifactSet

__all__ = ["load_key", "save_key_artifacts"]

logger = logging.getLogger(__name__)


def _write_file(path: str, content: bytes) -> None:
    with open(path, "wb") as handler:
        handler.write(content)


def _discard(path: str) -> None:
    if os.path.isfile(path):
        os.remove(path)


def save_key_artifacts(artifacts: KeyArtifactSet, directory: str) -> List[str]:
    """Escribe cada clave en ``directory/<nombre>`` como un conjunto indivisible.

    Primero se escriben todos los temporales y después se renombran. Si algún
    paso falla se eliminan los temporales y las claves ya renombradas, de modo
    que nunca queda media pareja en disco.

    Args:
        artifacts (KeyArtifactSet): Conjunto generado por ``generate_keys``.
        directory (str): Carpeta de destino; se crea si no existe.

    Returns:
        List[str]: Rutas escritas, en el orden del conjunto.

    Raises:
        KeyStorageError: Si no se puede escribir el conjunto completo.

    """

    paths = [os.path.join(directory, name) for name in artifacts.names()]
    pending = [f"{path}.tmp" for path in paths]
    installed: List[str] = []
    try:
        os.makedirs(directory, exist_ok=True)
        for tmp_path, (_, content) in zip(pending, artifacts.artifacts):
            _write_file(tmp_path, content)
        for tmp_path, path in zip(pending, paths):
            os.replace(tmp_path, path)
            installed.append(path)
    except OSError as exc:
        for path in installed:
            _discard(path)
        raise KeyStorageError(f"No se pudieron guardar las claves en {directory}: {exc}") from exc
    finally:
        for tmp_path in pending:
            _discard(tmp_path)
    logger.info("Claves %s guardadas en %s", artifacts.algorithm.value, directory)
    return paths


def load_key(path: str) -> bytes:
    """Lee un fichero de clave completo.

    Raises:
        StreamReadError: Si el fichero no existe o no puede leerse.

    """

    try:
        with open(path, "rb") as handler:
            return handler.read()
    except OSError as exc:
        raise StreamReadError(f"No se puede leer la clave {path}: {exc}") from exc
