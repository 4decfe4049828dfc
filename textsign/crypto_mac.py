# --------------------------------------------------------------
# File: crypto_mac.py
# Description: Autenticación simétrica con BLAKE3 en modo keyed hash.
# --------------------------------------------------------------
"""MAC de 32 bytes sobre flujos binarios basado en BLAKE3."""

from __future__ import annotations

import hmac
import logging
from typing import BinaryIO, Optional

from blake3 import blake3

from textsign.errors import KeyLengthError, SignatureLengthError
from textsign.genpass import DEFAULT_CHARACTER_CLASSES, CharacterClasses, random_key_material
from textsign.material import fit_length
from textsign.models import KEY_LENGTH, Algorithm, KeyArtifactSet
from textsign.stream import iter_chunks

logger = logging.getLogger(__name__)

MAC_LENGTH = Algorithm.BLAKE3.signature_length
KEY_ARTIFACT = "blake3.key"


class Blake3Mac:
    """Firma y verifica con la misma clave secreta de 32 bytes."""

    def __init__(self, key: bytes) -> None:
        if len(key) != KEY_LENGTH:
            raise KeyLengthError(f"Clave BLAKE3: se requieren {KEY_LENGTH} bytes")
        self._key = bytes(key)

    @classmethod
    def from_key(cls, key: bytes, *, strict: Optional[bool] = None) -> "Blake3Mac":
        """Construye el MAC a partir de bytes de clave arbitrarios.

        Args:
            key (bytes): Clave proporcionada; se usan los primeros 32 bytes.
            strict (Optional[bool]): Rechaza claves de más de 32 bytes.

        Returns:
            Blake3Mac: Instancia lista para firmar y verificar.

        """

        return cls(fit_length(key, KEY_LENGTH, label="Clave BLAKE3", error=KeyLengthError, strict=strict))

    def sign(self, stream: BinaryIO, *, chunk_size: Optional[int] = None) -> bytes:
        """Calcula el keyed hash de todo el flujo de forma incremental.

        Args:
            stream (BinaryIO): Datos a autenticar.
            chunk_size (Optional[int]): Tamaño de bloque de lectura.

        Returns:
            bytes: Digest de 32 bytes.

        """

        hasher = blake3(key=self._key)
        for chunk in iter_chunks(stream, chunk_size):
            hasher.update(chunk)
        return hasher.digest(MAC_LENGTH)

    def verify(
        self,
        stream: BinaryIO,
        signature: bytes,
        *,
        strict: Optional[bool] = None,
        chunk_size: Optional[int] = None,
    ) -> bool:
        """Recalcula el digest y lo compara en tiempo constante.

        Args:
            stream (BinaryIO): Datos supuestamente autenticados.
            signature (bytes): Digest recibido.
            strict (Optional[bool]): Rechaza firmas de más de 32 bytes.
            chunk_size (Optional[int]): Tamaño de bloque de lectura.

        Returns:
            bool: ``True`` si el digest coincide.

        Raises:
            SignatureLengthError: Si la firma tiene menos de 32 bytes.

        """

        expected = fit_length(
            signature, MAC_LENGTH, label="Firma BLAKE3", error=SignatureLengthError, strict=strict
        )
        return hmac.compare_digest(self.sign(stream, chunk_size=chunk_size), expected)

    @staticmethod
    def generate(classes: CharacterClasses = DEFAULT_CHARACTER_CLASSES) -> KeyArtifactSet:
        """Genera una clave de 32 caracteres con todas las clases activas."""

        key = random_key_material(KEY_LENGTH, classes=classes)
        logger.debug("Clave BLAKE3 generada")
        return KeyArtifactSet(algorithm=Algorithm.BLAKE3, artifacts=((KEY_ARTIFACT, key),))
