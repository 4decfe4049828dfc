# --------------------------------------------------------------
# File: test_engine.py
# Description: Pruebas del despacho uniforme entre BLAKE3 y Ed25519.
# --------------------------------------------------------------

import io
import os

import pytest

from textsign import (
    Algorithm,
    KeyLengthError,
    MalformedKeyError,
    SignatureLengthError,
    StreamReadError,
    UnknownAlgorithmError,
    config,
    generate_keys,
    sign,
    verify,
)
from textsign.crypto_mac import KEY_ARTIFACT
from textsign.crypto_sign import SIGNING_ARTIFACT, VERIFYING_ARTIFACT


class _BrokenStream(io.RawIOBase):
    def readable(self):
        return True

    def read(self, size=-1):
        raise OSError("conexión cerrada")


def _keys_for(algorithm):
    """Devuelve (clave de firma, clave de verificación) recién generadas."""
    artifacts = generate_keys(algorithm)
    if algorithm is Algorithm.BLAKE3:
        key = artifacts[KEY_ARTIFACT]
        return key, key
    return artifacts[SIGNING_ARTIFACT], artifacts[VERIFYING_ARTIFACT]


@pytest.mark.parametrize("algorithm", list(Algorithm))
@pytest.mark.parametrize("message", [b"", b"hello", os.urandom(70_000)])
def test_roundtrip_for_every_algorithm(algorithm, message):
    """Firma y verifica el mismo mensaje con ambos algoritmos.

    Args:
        algorithm (Algorithm): Algoritmo parametrizado.
        message (bytes): Mensaje parametrizado, incluido el vacío.

    Returns:
        None: Las aserciones comprueban longitud y validez.
    """
    sign_key, verify_key = _keys_for(algorithm)
    signature = sign(io.BytesIO(message), sign_key, algorithm)
    assert len(signature) == algorithm.signature_length
    assert verify(io.BytesIO(message), verify_key, signature, algorithm) is True


@pytest.mark.parametrize("algorithm", list(Algorithm))
def test_verify_other_message_is_false(algorithm):
    sign_key, verify_key = _keys_for(algorithm)
    signature = sign(io.BytesIO(b"hello"), sign_key, algorithm)
    assert verify(io.BytesIO(b"bye"), verify_key, signature, algorithm) is False


def test_string_tags_are_accepted(mac_key):
    by_tag = sign(io.BytesIO(b"hello"), mac_key, "BLAKE3")
    by_enum = sign(io.BytesIO(b"hello"), mac_key, Algorithm.BLAKE3)
    assert by_tag == by_enum


def test_unknown_algorithm_rejected(mac_key):
    with pytest.raises(UnknownAlgorithmError):
        sign(io.BytesIO(b"hello"), mac_key, "hmac-sha256")


@pytest.mark.parametrize("algorithm", list(Algorithm))
def test_verify_with_short_key_raises(algorithm):
    """Una clave de menos de 32 bytes es un error, nunca un falso positivo.

    Args:
        algorithm (Algorithm): Algoritmo parametrizado.

    Returns:
        None: Se espera KeyLengthError.
    """
    with pytest.raises(KeyLengthError):
        verify(io.BytesIO(b"hello"), b"\x00" * 31, b"\x00" * 64, algorithm)


@pytest.mark.parametrize("algorithm", list(Algorithm))
def test_verify_with_short_signature_raises(algorithm):
    _, verify_key = _keys_for(algorithm)
    with pytest.raises(SignatureLengthError):
        verify(io.BytesIO(b"hello"), verify_key, b"\x00" * 16, algorithm)


def test_strict_mode_from_config(monkeypatch, mac_key):
    """El modo estricto configurado rechaza claves demasiado largas.

    Args:
        monkeypatch (pytest.MonkeyPatch): Fixture para activar el modo estricto.

    Returns:
        None: Se espera KeyLengthError solo con el modo activo.
    """
    sign(io.BytesIO(b"hello"), mac_key + b"!", Algorithm.BLAKE3)
    monkeypatch.setattr(config, "STRICT_LENGTHS", True)
    with pytest.raises(KeyLengthError):
        sign(io.BytesIO(b"hello"), mac_key + b"!", Algorithm.BLAKE3)


@pytest.mark.parametrize("algorithm", list(Algorithm))
def test_stream_failure_is_typed(algorithm):
    sign_key, _ = _keys_for(algorithm)
    with pytest.raises(StreamReadError):
        sign(_BrokenStream(), sign_key, algorithm)


def test_generated_pairs_are_independent():
    first = generate_keys(Algorithm.ED25519)
    second = generate_keys(Algorithm.ED25519)
    assert first[SIGNING_ARTIFACT] != second[SIGNING_ARTIFACT]
    assert first[VERIFYING_ARTIFACT] != second[VERIFYING_ARTIFACT]


def test_verify_invalid_point_key_raises():
    """Una clave pública que no es un punto válido es un error tipado, no ``False``.

    Returns:
        None: Se espera MalformedKeyError desde el despacho.
    """
    off_curve = b"\x01" + b"\x00" * 31  # punto neutro
    with pytest.raises(MalformedKeyError):
        verify(io.BytesIO(b"hello"), off_curve, b"\x00" * 64, Algorithm.ED25519)


def test_verify_non_canonical_signature_raises(ed25519_public):
    signature = b"\x00" * 32 + b"\xff" * 32
    with pytest.raises(SignatureLengthError):
        verify(io.BytesIO(b"hello"), ed25519_public, signature, Algorithm.ED25519)
