# --------------------------------------------------------------
# File: config.py
# Description: Parámetros de ejecución leídos del entorno y de `.env`.
# --------------------------------------------------------------
import os

from dotenv import load_dotenv

load_dotenv()


def _env_flag(name: str, default: str = "0") -> bool:
    return os.getenv(name, default).strip().lower() in {"1", "true", "yes", "on"}


KEYS_DIR = os.getenv("TEXTSIGN_KEYS_DIR", "./_keys")
LOG_LEVEL = os.getenv("TEXTSIGN_LOG_LEVEL", "INFO").upper()
STRICT_LENGTHS = _env_flag("TEXTSIGN_STRICT_LENGTHS")
CHUNK_SIZE = int(os.getenv("TEXTSIGN_CHUNK_SIZE", "65536"))
