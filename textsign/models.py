# --------------------------------------------------------------
# File: models.py
# Description: Modelos de datos comunes utilizados por el motor de firma.
# --------------------------------------------------------------
"""Algoritmos soportados y conjunto inmutable de claves generadas."""

from __future__ import annotations

from enum import Enum
from typing import Dict, List, Tuple

from pydantic import BaseModel, ConfigDict

from textsign.errors import UnknownAlgorithmError

KEY_LENGTH = 32


class Algorithm(str, Enum):
    """Conjunto cerrado de mecanismos de autenticación."""

    BLAKE3 = "blake3"
    ED25519 = "ed25519"

    @classmethod
    def parse(cls, value: "Algorithm | str") -> "Algorithm":
        """Convierte una etiqueta textual en un miembro del enum.

        Args:
            value (Algorithm | str): Miembro o su valor, sin distinguir mayúsculas.

        Returns:
            Algorithm: Algoritmo correspondiente.

        Raises:
            UnknownAlgorithmError: Si la etiqueta no pertenece al conjunto.

        """

        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError as exc:
            supported = ", ".join(member.value for member in cls)
            raise UnknownAlgorithmError(
                f"Algoritmo no soportado: {value!r} (usa {supported})"
            ) from exc

    @property
    def key_length(self) -> int:
        return KEY_LENGTH

    @property
    def signature_length(self) -> int:
        return 32 if self is Algorithm.BLAKE3 else 64


class KeyArtifactSet(BaseModel):
    """Claves generadas de una sola vez, con nombre estable y orden fijo.

    Attributes:
        algorithm (Algorithm): Mecanismo al que pertenecen las claves.
        artifacts (Tuple[Tuple[str, bytes], ...]): Pares (nombre, contenido)
            en el orden en que deben persistirse.

    """

    model_config = ConfigDict(frozen=True)

    algorithm: Algorithm
    artifacts: Tuple[Tuple[str, bytes], ...]

    def names(self) -> List[str]:
        return [name for name, _ in self.artifacts]

    def as_dict(self) -> Dict[str, bytes]:
        """Devuelve una copia ordenada nombre → contenido."""

        return dict(self.artifacts)

    def __getitem__(self, name: str) -> bytes:
        for artifact_name, content in self.artifacts:
            if artifact_name == name:
                return content
        raise KeyError(name)

    def __contains__(self, name: object) -> bool:
        return any(artifact_name == name for artifact_name, _ in self.artifacts)

    def __len__(self) -> int:
        return len(self.artifacts)
