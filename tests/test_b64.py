# --------------------------------------------------------------
# File: test_b64.py
# Description: Pruebas de la codificación Base64 estándar y URL-safe.
# --------------------------------------------------------------

import pytest

from textsign.b64 import Base64Format, decode, encode
from textsign.errors import EncodingError


def test_urlsafe_has_no_padding_or_unsafe_chars():
    data = b"\xfb\xff\xfe"
    text = encode(data + b"\x00", Base64Format.URLSAFE)
    assert "=" not in text and "+" not in text and "/" not in text
    assert decode(text, Base64Format.URLSAFE) == data + b"\x00"


def test_standard_keeps_padding():
    assert encode(b"hi") == "aGk="
    assert decode("aGk=\n") == b"hi"


def test_urlsafe_accepts_padded_input():
    assert decode("aGk=", Base64Format.URLSAFE) == b"hi"


@pytest.mark.parametrize(
    "text, fmt",
    [
        ("a", Base64Format.URLSAFE),
        ("!!!!", Base64Format.URLSAFE),
        ("aGk", Base64Format.STANDARD),
        ("a-k=", Base64Format.STANDARD),
    ],
)
def test_invalid_input_raises(text, fmt):
    with pytest.raises(EncodingError):
        decode(text, fmt)
