# --------------------------------------------------------------
# File: csv_convert.py
# Description: Conversión de ficheros CSV a JSON o YAML.
# --------------------------------------------------------------
"""Convierte filas CSV en una lista de registros serializada."""

from __future__ import annotations

import csv
import json
import logging
from enum import Enum
from typing import Any, List

import yaml

from textsign.errors import ConversionError

logger = logging.getLogger(__name__)


class OutputFormat(str, Enum):
    JSON = "json"
    YAML = "yaml"


def convert_csv(
    input_path: str,
    output_path: str,
    fmt: OutputFormat = OutputFormat.JSON,
    *,
    delimiter: str = ",",
    header: bool = True,
) -> int:
    """Lee un CSV y escribe sus filas como JSON o YAML.

    Args:
        input_path (str): Fichero CSV de entrada.
        output_path (str): Fichero de salida.
        fmt (OutputFormat): Formato de serialización.
        delimiter (str): Separador de columnas.
        header (bool): Si la primera fila contiene los nombres de columna. Sin
            cabecera cada registro es una lista de valores.

    Returns:
        int: Número de registros escritos.

    Raises:
        ConversionError: Si el CSV no se puede leer o la salida no se puede escribir.

    """

    if len(delimiter) != 1:
        raise ConversionError(f"El separador debe ser un único carácter: {delimiter!r}")

    records: List[Any] = []
    try:
        with open(input_path, "r", encoding="utf-8", newline="") as handler:
            if header:
                records.extend(dict(row) for row in csv.DictReader(handler, delimiter=delimiter))
            else:
                records.extend(list(row) for row in csv.reader(handler, delimiter=delimiter))
    except (OSError, csv.Error, UnicodeDecodeError) as exc:
        raise ConversionError(f"No se puede leer el CSV {input_path}: {exc}") from exc

    if OutputFormat(fmt) is OutputFormat.YAML:
        content = yaml.safe_dump(records, allow_unicode=True, sort_keys=False)
    else:
        content = json.dumps(records, indent=2, ensure_ascii=False)

    try:
        with open(output_path, "w", encoding="utf-8") as handler:
            handler.write(content)
    except OSError as exc:
        raise ConversionError(f"No se puede escribir {output_path}: {exc}") from exc
    logger.info("%d registros escritos en %s", len(records), output_path)
    return len(records)
