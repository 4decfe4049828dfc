# --------------------------------------------------------------
# File: http_serve.py
# Description: Servidor HTTP de ficheros estáticos de un directorio.
# --------------------------------------------------------------
"""Sirve el contenido de un directorio por HTTP con FastAPI."""

from __future__ import annotations

import logging
import os

import uvicorn
from fastapi import FastAPI, HTTPException
from fastapi.responses import FileResponse
from fastapi.staticfiles import StaticFiles

logger = logging.getLogger(__name__)

STATIC_PREFIX = "/static"


def create_app(directory: str) -> FastAPI:
    """Crea la aplicación que expone los ficheros de ``directory``.

    Las rutas ``/<ruta>`` devuelven el fichero o 404 si no existe; bajo
    ``/static`` se monta además ``StaticFiles`` sobre el mismo directorio.

    Args:
        directory (str): Carpeta raíz a servir.

    Returns:
        FastAPI: Aplicación lista para uvicorn o ``TestClient``.

    """

    root = os.path.realpath(directory)
    app = FastAPI(title="textsign http serve", docs_url=None, redoc_url=None)
    app.mount(STATIC_PREFIX, StaticFiles(directory=root), name="static")

    @app.get("/{path:path}")
    def read_file(path: str) -> FileResponse:
        target = os.path.realpath(os.path.join(root, path))
        # Nada fuera de la raíz servida.
        if os.path.commonpath([root, target]) != root or not os.path.isfile(target):
            logger.warning("Fichero no encontrado: %s", path)
            raise HTTPException(status_code=404, detail=f"File {path} not found")
        logger.info("Leyendo fichero %s (%d bytes)", target, os.path.getsize(target))
        return FileResponse(target)

    return app


def serve(directory: str, port: int = 8080, host: str = "0.0.0.0") -> None:
    """Arranca uvicorn sirviendo ``directory`` hasta que se interrumpa."""

    logger.info("Sirviendo %s en http://%s:%d", directory, host, port)
    uvicorn.run(create_app(directory), host=host, port=port)
