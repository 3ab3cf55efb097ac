"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Permite que el cliente de Dialogflow y el manager lean config de forma consistente.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (cross-platform, sin dependencias)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "dfmanager"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "dfmanager"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "dfmanager"
    return Path.home() / ".config" / "dfmanager"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def _parse_env_lines(text: str) -> dict[str, str]:
    data: dict[str, str] = {}
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip().strip('"').strip("'")
        if key:
            data[key] = value
    return data


def write_user_env_vars(values: dict[str, str]) -> Path:
    """Escribe/actualiza variables en el .env global del usuario."""

    env_path = get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)

    existing: dict[str, str] = {}
    if env_path.exists():
        existing = _parse_env_lines(env_path.read_text(encoding="utf-8"))

    existing.update({k: v for k, v in values.items() if v is not None})

    lines = ["# dfmanager user config (.env)"]
    for key in sorted(existing.keys()):
        lines.append(f"{key}={existing[key]}")
    env_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return env_path


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Las variables históricas `GCP_KEY` y `GCE_PROJECT` se aceptan tal cual,
    además de su forma con prefijo (`DFMANAGER_KEY_PATH`, `DFMANAGER_PROJECT`).
    Los flags de la CLI tienen prioridad sobre estos valores.
    """

    model_config = SettingsConfigDict(
        env_prefix="DFMANAGER_",
        extra="ignore",
        case_sensitive=False,
        # Orden: proyecto primero (dev), luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    key_path: Path | None = Field(
        default=None,
        validation_alias=AliasChoices("DFMANAGER_KEY_PATH", "GCP_KEY"),
        description="Ruta al JSON de la service account de GCP.",
    )
    project: str | None = Field(
        default=None,
        validation_alias=AliasChoices("DFMANAGER_PROJECT", "GCE_PROJECT"),
        description="ID del proyecto GCP que aloja el agente.",
    )

    language_code: str | None = Field(
        default=None,
        description="Idioma para listar/actualizar entity types (None = idioma por defecto del agente).",
    )
    api_endpoint: str | None = Field(
        default=None,
        description="Endpoint regional, p.ej. 'europe-west1-dialogflow.googleapis.com'.",
    )
    operation_timeout_seconds: float | None = Field(
        default=None,
        gt=0,
        description="Espera máxima por operaciones largas (None = deadline del transporte).",
    )

    log_level: str = Field(
        default="WARNING",
        min_length=1,
        description="Nivel de logging cuando no se pasa --verbose.",
    )
