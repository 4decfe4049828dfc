# --------------------------------------------------------------
# File: password_policy.py
# Description: Estimación de robustez de las contraseñas generadas.
# --------------------------------------------------------------
"""Utilidades para puntuar contraseñas de 0 a 100."""

from __future__ import annotations

import re
from typing import List, Tuple

COMMON = {
    "123456",
    "123456789",
    "12345678",
    "qwerty",
    "password",
    "111111",
    "abc123",
    "letmein",
    "iloveyou",
    "admin",
    "welcome",
    "passw0rd",
}

LOWER = re.compile(r"[a-z]")
UPPER = re.compile(r"[A-Z]")
DIGIT = re.compile(r"\d")
SYMBOL = re.compile(r"[^\w\s]|_")

_LABELS = (
    (80, "muy fuerte"),
    (60, "fuerte"),
    (40, "aceptable"),
    (20, "débil"),
    (0, "muy débil"),
)


def class_count(password: str) -> int:
    """Cuenta los grupos de caracteres presentes en la contraseña."""

    return sum(
        1 for pattern in (LOWER, UPPER, DIGIT, SYMBOL) if pattern.search(password)
    )


def has_long_repetition(password: str, max_run: int = 3) -> bool:
    pattern = rf"(.)\1{{{max_run},}}"
    return re.search(pattern, password) is not None


def estimate_strength(password: str) -> Tuple[int, List[str]]:
    """Puntúa la contraseña y explica qué le resta robustez.

    Args:
        password (str): Contraseña a evaluar.

    Returns:
        Tuple[int, List[str]]: Puntuación entre 0 y 100 y motivos de penalización.

    """

    reasons: List[str] = []
    score = 0

    length = len(password)
    if length < 12:
        reasons.append("Longitud inferior a 12.")
    score += min(50, length * 3)

    classes = class_count(password)
    score += classes * 8
    if classes < 3:
        reasons.append("Usa al menos 3 de: minúsculas, mayúsculas, dígitos, símbolos.")

    if password.lower() in COMMON:
        reasons.append("Contraseña demasiado común.")
        score = min(score, 5)

    if has_long_repetition(password):
        reasons.append("Repeticiones largas del mismo carácter.")
        score -= 15

    if any(char.isspace() for char in password):
        reasons.append("Contiene espacios en blanco.")
        score -= 5

    return max(0, min(100, score)), reasons


def strength_label(score: int) -> str:
    for threshold, label in _LABELS:
        if score >= threshold:
            return label
    return _LABELS[-1][1]
