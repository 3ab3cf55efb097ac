"""Lectura/escritura del archivo local del agente.

Por qué está en adapters:
- El zip del agente es un blob opaco: aquí solo se decide el nombre del
  fichero y se mueven bytes, sin codificar ni inspeccionar nada.
"""

from __future__ import annotations

import logging
from pathlib import Path

from core.domain.errors import LocalIOError

ARCHIVE_SUFFIX = ".zip"

logger = logging.getLogger(__name__)


def resolve_filename(project: str, override: str | None = None) -> str:
    """Nombre del archivo: `<project>.zip` por defecto, o el override con `.zip` garantizado."""

    if not override:
        return project + ARCHIVE_SUFFIX
    if not override.endswith(ARCHIVE_SUFFIX):
        return override + ARCHIVE_SUFFIX
    return override


def read_archive(path: Path) -> bytes:
    try:
        with open(path, "rb") as fh:
            data = fh.read()
    except OSError as exc:
        raise LocalIOError(f"cannot read archive {path}: {exc.strerror or exc}", path=path) from exc
    logger.debug("Read %d bytes from %s", len(data), path)
    return data


def write_archive(path: Path, data: bytes) -> Path:
    """Crea/trunca `path` y escribe todos los bytes.

    No crea directorios padre: una ruta inválida es un error del usuario.
    """

    try:
        with open(path, "wb") as fh:
            fh.write(data)
    except OSError as exc:
        raise LocalIOError(f"cannot write archive {path}: {exc.strerror or exc}", path=path) from exc
    logger.debug("Wrote %d bytes to %s", len(data), path)
    return path
