# --------------------------------------------------------------
# File: conftest.py
# Description: Fixtures compartidas con claves de referencia y entorno aislado.
# --------------------------------------------------------------

from typing import Iterator

import pytest

from textsign import config

# Semilla y clave pública del vector de prueba 1 de RFC 8032.
ED25519_SEED = bytes.fromhex(
    "9d61b19deffd5a60ba844af492ec2cc44449c5697b326919703bac031cae7f60"
)
ED25519_PUBLIC = bytes.fromhex(
    "d75a980182b10ab7d54bfed3c964073a0ee172f3daa62325af021a68f707511a"
)


@pytest.fixture(autouse=True)
def _isolate_config(tmp_path, monkeypatch) -> Iterator[None]:
    """Aísla el directorio de claves y fija el modo de longitudes permisivo.

    Args:
        tmp_path (Path): Carpeta temporal proporcionada por pytest.
        monkeypatch (pytest.MonkeyPatch): Fixture para ajustar la configuración.

    Returns:
        Iterator[None]: Control del fixture autouse durante la ejecución de cada test.
    """
    keys_dir = tmp_path / "_keys"
    monkeypatch.setattr(config, "KEYS_DIR", str(keys_dir))
    monkeypatch.setattr(config, "STRICT_LENGTHS", False)
    yield


@pytest.fixture
def mac_key() -> bytes:
    """Clave BLAKE3 de referencia: los bytes 0..31."""
    return bytes(range(32))


@pytest.fixture
def ed25519_seed() -> bytes:
    return ED25519_SEED


@pytest.fixture
def ed25519_public() -> bytes:
    return ED25519_PUBLIC
