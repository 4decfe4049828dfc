# --------------------------------------------------------------
# File: test_password_policy.py
# Description: Pruebas para la estimación de robustez de contraseñas.
# --------------------------------------------------------------

import pytest

from textsign.genpass import generate_password
from textsign.password_policy import estimate_strength, strength_label


def test_generated_password_scores_high():
    """Una contraseña generada de 32 caracteres se considera fuerte.

    Returns:
        None: Las aserciones revisan la puntuación y su etiqueta.
    """
    score, _ = estimate_strength(generate_password(32))
    assert score >= 60
    assert strength_label(score) in {"fuerte", "muy fuerte"}


@pytest.mark.parametrize(
    "pw",
    [
        "short7!",  # menor a 12 caracteres
        "alllowercaseletters",  # solo una clase
        "password",  # común
        "AAAAaaaa1111",  # repeticiones largas
        "has space 1A!",  # espacios
    ],
)
def test_weak_passwords_get_reasons(pw):
    _, reasons = estimate_strength(pw)
    assert reasons


def test_common_password_is_capped():
    score, _ = estimate_strength("password")
    assert score <= 5
    assert strength_label(score) == "muy débil"
