# --------------------------------------------------------------
# File: b64.py
# Description: Codificación Base64 estándar y URL-safe sin relleno.
# --------------------------------------------------------------
"""Conversión de bytes a texto Base64 y viceversa."""

from __future__ import annotations

import base64
import binascii
from enum import Enum

from textsign.errors import EncodingError


class Base64Format(str, Enum):
    STANDARD = "standard"
    URLSAFE = "url"


def encode(data: bytes, fmt: Base64Format = Base64Format.STANDARD) -> str:
    """Codifica datos binarios; el formato URL-safe se emite sin relleno.

    Args:
        data (bytes): Datos a codificar.
        fmt (Base64Format): Alfabeto de salida.

    Returns:
        str: Texto ASCII codificado.

    """

    if Base64Format(fmt) is Base64Format.URLSAFE:
        return base64.urlsafe_b64encode(data).decode("ascii").rstrip("=")
    return base64.b64encode(data).decode("ascii")


def decode(text: str, fmt: Base64Format = Base64Format.STANDARD) -> bytes:
    """Decodifica texto Base64 ignorando espacios y saltos de línea.

    Args:
        text (str): Texto codificado; en URL-safe el relleno es opcional.
        fmt (Base64Format): Alfabeto de entrada.

    Returns:
        bytes: Datos originales.

    Raises:
        EncodingError: Si el texto no es Base64 válido para el formato.

    """

    value = "".join(text.split())
    try:
        if Base64Format(fmt) is Base64Format.URLSAFE:
            value = value.rstrip("=")
            return base64.b64decode(value + "=" * (-len(value) % 4), altchars=b"-_", validate=True)
        return base64.b64decode(value, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise EncodingError(f"Base64 inválido: {exc}") from exc
