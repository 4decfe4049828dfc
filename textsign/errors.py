# --------------------------------------------------------------
# File: errors.py
# Description: Jerarquía de excepciones del motor de firma de textos.
# --------------------------------------------------------------
"""Excepciones tipadas que el motor propaga hacia quien lo invoca."""


class TextSignError(Exception):
    """Error base de todas las operaciones de textsign."""


class KeyLengthError(TextSignError, ValueError):
    """La clave no aporta la longitud fija que exige el algoritmo."""


class SignatureLengthError(TextSignError, ValueError):
    """La firma no aporta la longitud exacta que exige el algoritmo."""


class MalformedKeyError(TextSignError, ValueError):
    """Los bytes de la clave Ed25519 no superan la validación estructural."""


class StreamReadError(TextSignError, OSError):
    """Fallo de lectura del flujo de entrada o de un fichero de clave."""


class UnknownAlgorithmError(TextSignError, ValueError):
    """Etiqueta de algoritmo fuera del conjunto soportado."""


class EncodingError(TextSignError, ValueError):
    """Texto Base64 inválido."""


class PasswordLengthError(TextSignError, ValueError):
    """La longitud pedida no admite un carácter de cada clase activa."""


class KeyStorageError(TextSignError, OSError):
    """No se pudo guardar el conjunto completo de claves."""


class ConversionError(TextSignError, ValueError):
    """El CSV de entrada no se puede leer o convertir."""
