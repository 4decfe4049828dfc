# --------------------------------------------------------------
# File: cli.py
# Description: Interfaz de línea de comandos `textsign`.
# --------------------------------------------------------------
"""CLI para firmar, verificar y generar claves, más utilidades auxiliares.

Uso:
    textsign text generate --format ed25519 -o ./_keys
    textsign text sign -i mensaje.txt -k ./_keys/ed25519.signing.key --format ed25519
    textsign text verify -i mensaje.txt -k ./_keys/ed25519.verifying.key --sig <firma>
    textsign genpass -l 24
    textsign base64 encode -i fichero.bin --format url
    textsign csv -i datos.csv -o datos.json
    textsign http serve -d . -p 8080
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import List, Optional

from textsign import __version__, config
from textsign.b64 import Base64Format, decode, encode
from textsign.csv_convert import OutputFormat, convert_csv
from textsign.engine import generate_keys, sign, verify
from textsign.errors import TextSignError
from textsign.genpass import generate_password
from textsign.http_serve import serve
from textsign.models import Algorithm
from textsign.password_policy import estimate_strength, strength_label
from textsign.storage import load_key, save_key_artifacts
from textsign.stream import STDIN, get_reader, read_all

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INVALID = 1
EXIT_ERROR = 2


def setup_logging(verbose: bool = False, quiet: bool = False) -> None:
    """Configura el logging según la verbosidad pedida."""
    if quiet:
        level = logging.WARNING
    elif verbose:
        level = logging.DEBUG
    else:
        level = getattr(logging, config.LOG_LEVEL, logging.INFO)

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def _input_file(value: str) -> str:
    if value == STDIN or os.path.exists(value):
        return value
    raise argparse.ArgumentTypeError(f"El fichero no existe: {value}")


def _input_dir(value: str) -> str:
    if os.path.isdir(value):
        return value
    raise argparse.ArgumentTypeError(f"El directorio no existe: {value}")


def _open_input(source: str):
    """Devuelve el flujo y si debe cerrarse al terminar."""
    stream = get_reader(source)
    return stream, source != STDIN


def cmd_csv(args: argparse.Namespace) -> int:
    output = args.output or f"output.{args.format}"
    convert_csv(
        args.input,
        output,
        OutputFormat(args.format),
        delimiter=args.delimiter,
        header=args.header,
    )
    return EXIT_OK


def cmd_genpass(args: argparse.Namespace) -> int:
    password = generate_password(
        args.length,
        upper=args.upper,
        lower=args.lower,
        number=args.number,
        symbol=args.symbol,
    )
    print(password)
    score, reasons = estimate_strength(password)
    logger.info("Fortaleza estimada: %d/100 (%s)", score, strength_label(score))
    for reason in reasons:
        logger.warning(reason)
    return EXIT_OK


def cmd_base64(args: argparse.Namespace) -> int:
    stream, owned = _open_input(args.input)
    try:
        data = read_all(stream)
    finally:
        if owned:
            stream.close()
    fmt = Base64Format(args.format)
    if args.action == "encode":
        print(encode(data, fmt))
    else:
        sys.stdout.buffer.write(decode(data.decode("ascii", errors="replace"), fmt))
        sys.stdout.buffer.flush()
    return EXIT_OK


def cmd_text_sign(args: argparse.Namespace) -> int:
    key = load_key(args.key)
    stream, owned = _open_input(args.input)
    try:
        signature = sign(stream, key, args.format)
    finally:
        if owned:
            stream.close()
    print(encode(signature, Base64Format.URLSAFE))
    return EXIT_OK


def cmd_text_verify(args: argparse.Namespace) -> int:
    key = load_key(args.key)
    signature = decode(args.sig, Base64Format.URLSAFE)
    stream, owned = _open_input(args.input)
    try:
        ok = verify(stream, key, signature, args.format)
    finally:
        if owned:
            stream.close()
    if ok:
        print("✓ Firma verificada")
        return EXIT_OK
    print("⚠ Firma no verificada")
    return EXIT_INVALID


def cmd_text_generate(args: argparse.Namespace) -> int:
    artifacts = generate_keys(args.format)
    for path in save_key_artifacts(artifacts, args.output or config.KEYS_DIR):
        print(path)
    return EXIT_OK


def cmd_http_serve(args: argparse.Namespace) -> int:
    serve(args.dir, args.port)
    return EXIT_OK


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="textsign",
        description="Firma y verificación de textos con BLAKE3 o Ed25519",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Logging de depuración")
    parser.add_argument("-q", "--quiet", action="store_true", help="Solo avisos y errores")
    sub = parser.add_subparsers(dest="cmd", required=True)

    p_csv = sub.add_parser("csv", help="Convierte CSV a JSON o YAML")
    p_csv.add_argument("-i", "--input", type=_input_file, required=True)
    p_csv.add_argument("-o", "--output", default=None, help="Por defecto output.<formato>")
    p_csv.add_argument("-d", "--delimiter", default=",")
    p_csv.add_argument("--no-header", dest="header", action="store_false")
    p_csv.add_argument("--format", choices=[f.value for f in OutputFormat], default="json")
    p_csv.set_defaults(func=cmd_csv)

    p_pass = sub.add_parser("genpass", help="Genera una contraseña aleatoria")
    p_pass.add_argument("-l", "--length", type=int, default=16)
    p_pass.add_argument("--no-upper", dest="upper", action="store_false")
    p_pass.add_argument("--no-lower", dest="lower", action="store_false")
    p_pass.add_argument("--no-number", dest="number", action="store_false")
    p_pass.add_argument("--no-symbol", dest="symbol", action="store_false")
    p_pass.set_defaults(func=cmd_genpass)

    p_b64 = sub.add_parser("base64", help="Codifica o decodifica Base64")
    b64_sub = p_b64.add_subparsers(dest="action", required=True)
    for action in ("encode", "decode"):
        p_action = b64_sub.add_parser(action)
        p_action.add_argument("-i", "--input", type=_input_file, default=STDIN)
        p_action.add_argument(
            "--format", choices=[f.value for f in Base64Format], default="standard"
        )
        p_action.set_defaults(func=cmd_base64)

    p_text = sub.add_parser("text", help="Firma, verifica o genera claves")
    text_sub = p_text.add_subparsers(dest="action", required=True)
    algorithms = [a.value for a in Algorithm]

    p_sign = text_sub.add_parser("sign", help="Firma la entrada")
    p_sign.add_argument("-i", "--input", type=_input_file, default=STDIN)
    p_sign.add_argument("-k", "--key", type=_input_file, required=True)
    p_sign.add_argument("--format", choices=algorithms, default=Algorithm.BLAKE3.value)
    p_sign.set_defaults(func=cmd_text_sign)

    p_verify = text_sub.add_parser("verify", help="Verifica una firma URL-safe Base64")
    p_verify.add_argument("-i", "--input", type=_input_file, default=STDIN)
    p_verify.add_argument("-k", "--key", type=_input_file, required=True)
    p_verify.add_argument("--sig", required=True)
    p_verify.add_argument("--format", choices=algorithms, default=Algorithm.BLAKE3.value)
    p_verify.set_defaults(func=cmd_text_verify)

    p_gen = text_sub.add_parser("generate", help="Genera y guarda claves nuevas")
    p_gen.add_argument("--format", choices=algorithms, default=Algorithm.BLAKE3.value)
    p_gen.add_argument("-o", "--output", default=None, help="Por defecto TEXTSIGN_KEYS_DIR")
    p_gen.set_defaults(func=cmd_text_generate)

    p_http = sub.add_parser("http", help="Servidor HTTP de ficheros")
    http_sub = p_http.add_subparsers(dest="action", required=True)
    p_serve = http_sub.add_parser("serve", help="Sirve un directorio por HTTP")
    p_serve.add_argument("-d", "--dir", type=_input_dir, default=".")
    p_serve.add_argument("-p", "--port", type=int, default=8080)
    p_serve.set_defaults(func=cmd_http_serve)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose, args.quiet)
    try:
        return args.func(args)
    except TextSignError as exc:
        logger.error("%s", exc)
        return EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())
