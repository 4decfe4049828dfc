# --------------------------------------------------------------
# File: engine.py
# Description: Despacho uniforme de firma, verificación y generación de claves.
# --------------------------------------------------------------
"""Punto de entrada único para BLAKE3 y Ed25519.

Cada algoritmo tiene una fila fija en ``_IMPLEMENTATIONS``; los llamantes solo
cambian la etiqueta ``Algorithm`` para pasar de un mecanismo a otro.
"""

from __future__ import annotations

import logging
from typing import BinaryIO, Callable, Dict, NamedTuple, Optional, Union

from textsign.crypto_mac import Blake3Mac
from textsign.crypto_sign import Ed25519Signer, Ed25519Verifier
from textsign.models import Algorithm, KeyArtifactSet

logger = logging.getLogger(__name__)


class _Implementation(NamedTuple):
    signer: Callable
    verifier: Callable
    generate: Callable[[], KeyArtifactSet]


_IMPLEMENTATIONS: Dict[Algorithm, _Implementation] = {
    Algorithm.BLAKE3: _Implementation(Blake3Mac.from_key, Blake3Mac.from_key, Blake3Mac.generate),
    Algorithm.ED25519: _Implementation(
        Ed25519Signer.from_key, Ed25519Verifier.from_key, Ed25519Signer.generate
    ),
}


def sign(
    stream: BinaryIO,
    key: bytes,
    algorithm: Union[Algorithm, str],
    *,
    strict: Optional[bool] = None,
    chunk_size: Optional[int] = None,
) -> bytes:
    """Firma el flujo con la clave y el algoritmo indicados.

    Args:
        stream (BinaryIO): Datos a firmar, leídos hasta EOF.
        key (bytes): Clave BLAKE3 o semilla Ed25519 (32 bytes).
        algorithm (Algorithm | str): Mecanismo a utilizar.
        strict (Optional[bool]): Rechaza claves de más de 32 bytes.
        chunk_size (Optional[int]): Tamaño de bloque de lectura.

    Returns:
        bytes: Firma de 32 (BLAKE3) o 64 (Ed25519) bytes.

    Raises:
        KeyLengthError: Si la clave no aporta 32 bytes.
        StreamReadError: Si falla la lectura del flujo.

    """

    algorithm = Algorithm.parse(algorithm)
    signer = _IMPLEMENTATIONS[algorithm].signer(key, strict=strict)
    signature = signer.sign(stream, chunk_size=chunk_size)
    logger.debug("Firma %s de %d bytes", algorithm.value, len(signature))
    return signature


def verify(
    stream: BinaryIO,
    key: bytes,
    signature: bytes,
    algorithm: Union[Algorithm, str],
    *,
    strict: Optional[bool] = None,
    chunk_size: Optional[int] = None,
) -> bool:
    """Verifica la firma del flujo; una discrepancia devuelve ``False``.

    Args:
        stream (BinaryIO): Datos supuestamente firmados.
        key (bytes): Clave BLAKE3 o clave pública Ed25519 (32 bytes).
        signature (bytes): Firma recibida.
        algorithm (Algorithm | str): Mecanismo a utilizar.
        strict (Optional[bool]): Rechaza claves y firmas más largas de lo exigido.
        chunk_size (Optional[int]): Tamaño de bloque de lectura.

    Returns:
        bool: Resultado de la verificación.

    Raises:
        KeyLengthError: Si la clave no aporta 32 bytes.
        SignatureLengthError: Si la firma no aporta la longitud exigida.
        MalformedKeyError: Si la clave pública Ed25519 no es válida.

    """

    algorithm = Algorithm.parse(algorithm)
    verifier = _IMPLEMENTATIONS[algorithm].verifier(key, strict=strict)
    ok = verifier.verify(stream, signature, strict=strict, chunk_size=chunk_size)
    logger.debug("Verificación %s: %s", algorithm.value, "válida" if ok else "inválida")
    return ok


def generate_keys(algorithm: Union[Algorithm, str]) -> KeyArtifactSet:
    """Genera material de clave nuevo sin escribirlo en disco."""

    algorithm = Algorithm.parse(algorithm)
    artifacts = _IMPLEMENTATIONS[algorithm].generate()
    logger.info("Claves %s generadas: %s", algorithm.value, ", ".join(artifacts.names()))
    return artifacts
