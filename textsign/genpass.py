# --------------------------------------------------------------
# File: genpass.py
# Description: Generación de contraseñas y material aleatorio para claves MAC.
# --------------------------------------------------------------
"""Generador de contraseñas con clases de caracteres configurables."""

from __future__ import annotations

import logging
import secrets
from typing import List

from pydantic import BaseModel, ConfigDict

from textsign.errors import PasswordLengthError

logger = logging.getLogger(__name__)

_rng = secrets.SystemRandom()


class CharacterClasses(BaseModel):
    """Alfabetos disponibles para el generador.

    Los valores por defecto omiten caracteres ambiguos (``0``, ``O``, ``l``, ``I``).

    Attributes:
        upper (str): Letras mayúsculas.
        lower (str): Letras minúsculas.
        number (str): Dígitos.
        symbol (str): Símbolos.

    """

    model_config = ConfigDict(frozen=True)

    upper: str = "ABCDEFGHJKLMNPQRSTUVWXYZ"
    lower: str = "abcdefghijkmnopqrstuvwxyz"
    number: str = "123456789"
    symbol: str = "!@#$%^&*_"


DEFAULT_CHARACTER_CLASSES = CharacterClasses()


def generate_password(
    length: int = 16,
    *,
    upper: bool = True,
    lower: bool = True,
    number: bool = True,
    symbol: bool = True,
    classes: CharacterClasses = DEFAULT_CHARACTER_CLASSES,
) -> str:
    """Genera una contraseña con al menos un carácter de cada clase activa.

    Args:
        length (int): Número de caracteres de la contraseña.
        upper (bool): Incluir mayúsculas.
        lower (bool): Incluir minúsculas.
        number (bool): Incluir dígitos.
        symbol (bool): Incluir símbolos.
        classes (CharacterClasses): Alfabetos a utilizar.

    Returns:
        str: Contraseña aleatoria de ``length`` caracteres.

    Raises:
        PasswordLengthError: Si no hay clases activas o la longitud es menor que
            el número de clases activas.

    """

    enabled = [
        alphabet
        for active, alphabet in (
            (upper, classes.upper),
            (lower, classes.lower),
            (number, classes.number),
            (symbol, classes.symbol),
        )
        if active and alphabet
    ]
    if not enabled:
        raise PasswordLengthError("Activa al menos una clase de caracteres.")
    if length < len(enabled):
        raise PasswordLengthError(
            f"Longitud mínima {len(enabled)} para {len(enabled)} clases activas."
        )

    # Un carácter garantizado por clase; el resto sale del alfabeto combinado.
    password: List[str] = [_rng.choice(alphabet) for alphabet in enabled]
    pool = "".join(enabled)
    password.extend(_rng.choice(pool) for _ in range(length - len(password)))
    _rng.shuffle(password)

    logger.debug("Contraseña generada: %d caracteres, %d clases", length, len(enabled))
    return "".join(password)


def random_key_material(
    length: int = 32, *, classes: CharacterClasses = DEFAULT_CHARACTER_CLASSES
) -> bytes:
    """Devuelve ``length`` bytes ASCII aleatorios usando todas las clases."""

    return generate_password(length, classes=classes).encode("ascii")
