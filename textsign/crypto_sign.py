# --------------------------------------------------------------
# File: crypto_sign.py
# Description: Funciones para gestionar claves y firmas Ed25519.
# --------------------------------------------------------------
"""Abstracciones criptográficas para generación y validación Ed25519."""

from __future__ import annotations

import logging
from typing import BinaryIO, Optional, Tuple

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ed25519
from nacl.bindings import crypto_core_ed25519_is_valid_point

from textsign.errors import KeyLengthError, MalformedKeyError, SignatureLengthError
from textsign.material import fit_length
from textsign.models import KEY_LENGTH, Algorithm, KeyArtifactSet
from textsign.stream import read_all

logger = logging.getLogger(__name__)

SIGNATURE_LENGTH = Algorithm.ED25519.signature_length
# Orden del subgrupo primo; S debe ser menor que L.
GROUP_ORDER = 2**252 + 27742317777372353535851937790883648493
SIGNING_ARTIFACT = "ed25519.signing.key"
VERIFYING_ARTIFACT = "ed25519.verifying.key"


def _raw_private(key: ed25519.Ed25519PrivateKey) -> bytes:
    return key.private_bytes(
        encoding=serialization.Encoding.Raw,
        format=serialization.PrivateFormat.Raw,
        encryption_algorithm=serialization.NoEncryption(),
    )


def _raw_public(key: ed25519.Ed25519PublicKey) -> bytes:
    return key.public_bytes(
        encoding=serialization.Encoding.Raw,
        format=serialization.PublicFormat.Raw,
    )


def ed25519_generate_keypair() -> Tuple[bytes, bytes]:
    """Genera un par de claves Ed25519 en formato bruto.

    Returns:
        Tuple[bytes, bytes]: Semilla privada y clave pública, 32 bytes cada una.

    """

    private_key = ed25519.Ed25519PrivateKey.generate()
    return _raw_private(private_key), _raw_public(private_key.public_key())


class Ed25519Signer:
    """Firma determinista a partir de una semilla de 32 bytes."""

    def __init__(self, seed: bytes) -> None:
        if len(seed) != KEY_LENGTH:
            raise KeyLengthError(f"Semilla Ed25519: se requieren {KEY_LENGTH} bytes")
        try:
            self._key = ed25519.Ed25519PrivateKey.from_private_bytes(bytes(seed))
        except ValueError as exc:
            raise MalformedKeyError(f"Semilla Ed25519 inválida: {exc}") from exc

    @classmethod
    def from_key(cls, key: bytes, *, strict: Optional[bool] = None) -> "Ed25519Signer":
        return cls(fit_length(key, KEY_LENGTH, label="Semilla Ed25519", error=KeyLengthError, strict=strict))

    def verifying_key_bytes(self) -> bytes:
        """Deriva la clave pública correspondiente a la semilla."""

        return _raw_public(self._key.public_key())

    def sign(self, stream: BinaryIO, *, chunk_size: Optional[int] = None) -> bytes:
        """Firma el contenido completo del flujo.

        Args:
            stream (BinaryIO): Mensaje a firmar; se lee entero en memoria.
            chunk_size (Optional[int]): Tamaño de bloque de lectura.

        Returns:
            bytes: Firma Ed25519 de 64 bytes.

        """

        return self._key.sign(read_all(stream, chunk_size))

    @staticmethod
    def generate() -> KeyArtifactSet:
        """Genera semilla y clave pública como un único conjunto indivisible."""

        seed, public = ed25519_generate_keypair()
        logger.debug("Par Ed25519 generado")
        return KeyArtifactSet(
            algorithm=Algorithm.ED25519,
            artifacts=((SIGNING_ARTIFACT, seed), (VERIFYING_ARTIFACT, public)),
        )


def _check_encoding(signature: bytes) -> None:
    """Rechaza firmas con R fuera de la curva o S no canónico."""

    if int.from_bytes(signature[32:], "little") >= GROUP_ORDER:
        raise SignatureLengthError("Firma Ed25519 mal codificada: S no es canónico")
    if not crypto_core_ed25519_is_valid_point(signature[:32]):
        raise SignatureLengthError("Firma Ed25519 mal codificada: R no es un punto válido")


class Ed25519Verifier:
    """Verifica firmas Ed25519 con la clave pública de 32 bytes."""

    def __init__(self, public_key: bytes) -> None:
        if len(public_key) != KEY_LENGTH:
            raise KeyLengthError(f"Clave pública Ed25519: se requieren {KEY_LENGTH} bytes")
        public_key = bytes(public_key)
        if not crypto_core_ed25519_is_valid_point(public_key):
            raise MalformedKeyError("Clave pública Ed25519 inválida: no es un punto válido de la curva")
        try:
            self._key = ed25519.Ed25519PublicKey.from_public_bytes(public_key)
        except ValueError as exc:
            raise MalformedKeyError(f"Clave pública Ed25519 inválida: {exc}") from exc

    @classmethod
    def from_key(cls, key: bytes, *, strict: Optional[bool] = None) -> "Ed25519Verifier":
        return cls(
            fit_length(key, KEY_LENGTH, label="Clave pública Ed25519", error=KeyLengthError, strict=strict)
        )

    def verify(
        self,
        stream: BinaryIO,
        signature: bytes,
        *,
        strict: Optional[bool] = None,
        chunk_size: Optional[int] = None,
    ) -> bool:
        """Comprueba la firma sobre el contenido completo del flujo.

        Args:
            stream (BinaryIO): Mensaje original.
            signature (bytes): Firma a comprobar.
            strict (Optional[bool]): Rechaza firmas de más de 64 bytes.
            chunk_size (Optional[int]): Tamaño de bloque de lectura.

        Returns:
            bool: ``True`` si la firma es válida; ``False`` si no corresponde.

        Raises:
            SignatureLengthError: Si la firma tiene menos de 64 bytes o su
                codificación no es válida (R fuera de la curva o S >= L).

        """

        signature = fit_length(
            signature, SIGNATURE_LENGTH, label="Firma Ed25519", error=SignatureLengthError, strict=strict
        )
        _check_encoding(signature)
        message = read_all(stream, chunk_size)
        try:
            self._key.verify(signature, message)
        except InvalidSignature:
            return False
        return True
