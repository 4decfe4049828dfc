# --------------------------------------------------------------
# File: __init__.py
# Description: Exposición pública del motor de firma y verificación de textos.
# --------------------------------------------------------------
"""Firma y verificación de textos con BLAKE3 (MAC) o Ed25519."""

from textsign.engine import generate_keys, sign, verify
from textsign.errors import (
    ConversionError,
    EncodingError,
    KeyLengthError,
    KeyStorageError,
    MalformedKeyError,
    PasswordLengthError,
    SignatureLengthError,
    StreamReadError,
    TextSignError,
    UnknownAlgorithmError,
)
from textsign.models import Algorithm, KeyArtifactSet

__version__ = "0.1.0"

__all__ = [
    "Algorithm",
    "ConversionError",
    "EncodingError",
    "KeyArtifactSet",
    "KeyLengthError",
    "KeyStorageError",
    "MalformedKeyError",
    "PasswordLengthError",
    "SignatureLengthError",
    "StreamReadError",
    "TextSignError",
    "UnknownAlgorithmError",
    "generate_keys",
    "sign",
    "verify",
]
