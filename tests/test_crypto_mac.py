# --------------------------------------------------------------
# File: test_crypto_mac.py
# Description: Pruebas del MAC BLAKE3 en modo keyed hash.
# --------------------------------------------------------------

import io

import pytest
from blake3 import blake3

from textsign.crypto_mac import KEY_ARTIFACT, MAC_LENGTH, Blake3Mac
from textsign.errors import KeyLengthError, SignatureLengthError
from textsign.models import Algorithm

HELLO_DIGEST = bytes.fromhex(
    "23278c18c8c9fe0fbfadfb940af5f08d3fd1802bf919dd6d77ebd211a19fbe29"
)


def test_sign_matches_regression_digest(mac_key):
    """Comprueba el digest conocido de ``hello`` con la clave 0..31.

    Returns:
        None: Las aserciones comparan el digest con el valor fijado.
    """
    assert Blake3Mac(mac_key).sign(io.BytesIO(b"hello")) == HELLO_DIGEST


def test_verify_regression_digest(mac_key):
    assert Blake3Mac(mac_key).verify(io.BytesIO(b"hello"), HELLO_DIGEST)


def test_verify_fails_with_flipped_key_byte(mac_key):
    """Una clave con un bit cambiado no valida el digest original.

    Returns:
        None: Se espera ``False`` sin excepción.
    """
    other = bytes([mac_key[0] ^ 1]) + mac_key[1:]
    assert Blake3Mac(other).verify(io.BytesIO(b"hello"), HELLO_DIGEST) is False


def test_incremental_hash_matches_one_shot(mac_key):
    """El hash por bloques coincide con el hash del búfer completo.

    Returns:
        None: Las aserciones comparan ambos digests.
    """
    data = bytes(range(256)) * 40
    chunked = Blake3Mac(mac_key).sign(io.BytesIO(data), chunk_size=7)
    assert chunked == blake3(data, key=mac_key).digest()


def test_verify_detects_every_single_byte_mutation(mac_key):
    """Cualquier byte alterado del mensaje invalida el MAC.

    Returns:
        None: Se recorre cada posición del mensaje.
    """
    mac = Blake3Mac(mac_key)
    message = b"mensaje importante"
    signature = mac.sign(io.BytesIO(message))
    for index in range(len(message)):
        tampered = bytearray(message)
        tampered[index] ^= 0x01
        assert mac.verify(io.BytesIO(bytes(tampered)), signature) is False


def test_short_key_rejected():
    with pytest.raises(KeyLengthError):
        Blake3Mac.from_key(b"k" * 31)


def test_long_key_truncated(mac_key):
    """Una clave larga se recorta a sus primeros 32 bytes.

    Returns:
        None: Las aserciones comparan con la clave recortada.
    """
    long_mac = Blake3Mac.from_key(mac_key + b"extra")
    assert long_mac.sign(io.BytesIO(b"hello")) == HELLO_DIGEST


def test_long_key_rejected_in_strict_mode(mac_key):
    with pytest.raises(KeyLengthError):
        Blake3Mac.from_key(mac_key + b"extra", strict=True)


def test_short_signature_rejected(mac_key):
    with pytest.raises(SignatureLengthError):
        Blake3Mac(mac_key).verify(io.BytesIO(b"hello"), HELLO_DIGEST[:31])


def test_generate_returns_single_printable_key():
    """La clave generada tiene 32 caracteres ASCII imprimibles.

    Returns:
        None: Las aserciones revisan nombre, longitud y alfabeto.
    """
    artifacts = Blake3Mac.generate()
    assert artifacts.algorithm is Algorithm.BLAKE3
    assert artifacts.names() == [KEY_ARTIFACT]
    key = artifacts[KEY_ARTIFACT]
    assert len(key) == 32
    assert key.decode("ascii").isprintable()


def test_mac_length_follows_algorithm():
    assert MAC_LENGTH == Algorithm.BLAKE3.signature_length
