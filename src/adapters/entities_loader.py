"""Carga del JSON de entidades para `update-entities`.

Formato esperado (lista plana):
    [{"value": "madrid", "synonyms": ["madrid", "mad"]}, ...]
"""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import ValidationError

from core.domain.errors import LocalIOError
from core.domain.models import ENTITY_LIST_ADAPTER, Entity


def load_entities(path: Path) -> list[Entity]:
    try:
        raw = Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        raise LocalIOError(f"cannot read entities file {path}: {exc.strerror or exc}", path=path) from exc

    try:
        data = json.loads(raw)
        return ENTITY_LIST_ADAPTER.validate_python(data)
    except json.JSONDecodeError as exc:
        raise LocalIOError(f"entities file {path} is not valid JSON ({exc.msg})", path=path) from exc
    except ValidationError as exc:
        raise LocalIOError(
            f"entities file {path} does not match [{{value, synonyms}}]: {exc.error_count()} error(s)",
            path=path,
        ) from exc
