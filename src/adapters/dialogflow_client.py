"""Construcción de clientes de Dialogflow (google-cloud-dialogflow v2).

Por qué un builder:
- Centraliza credenciales, scopes y endpoint para que todos los comandos se
  comporten igual.
- Facilita testeo: el manager recibe `DialogflowClients` y se puede sustituir
  por dobles sin red.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from google.api_core.client_options import ClientOptions
from google.auth.exceptions import GoogleAuthError
from google.cloud import dialogflow_v2 as dialogflow
from google.oauth2 import service_account

from core.config import AppSettings
from core.domain.errors import LocalIOError
from core.interfaces.dialogflow import AgentsApi, EntityTypesApi

SCOPES = (
    "https://www.googleapis.com/auth/cloud-platform",
    "https://www.googleapis.com/auth/dialogflow",
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DialogflowClients:
    agents: AgentsApi
    entity_types: EntityTypesApi


def load_service_account_info(key_path: Path) -> dict[str, Any]:
    """Lee y parsea el JSON de la service account.

    Se lee una sola vez al arrancar; un fichero ausente o ilegible es un
    `LocalIOError` que nombra la ruta.
    """

    try:
        raw = Path(key_path).read_text(encoding="utf-8")
    except OSError as exc:
        raise LocalIOError(f"cannot read key file {key_path}: {exc.strerror or exc}", path=key_path) from exc

    try:
        info = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise LocalIOError(
            f"cannot build Dialogflow client: key file {key_path} is not valid JSON ({exc.msg})",
            path=key_path,
        ) from exc
    if not isinstance(info, dict):
        raise LocalIOError(
            f"cannot build Dialogflow client: key file {key_path} is not a JSON object",
            path=key_path,
        )
    return info


def build_credentials(key_path: Path) -> service_account.Credentials:
    info = load_service_account_info(key_path)
    try:
        return service_account.Credentials.from_service_account_info(info, scopes=SCOPES)
    except (ValueError, GoogleAuthError) as exc:
        raise LocalIOError(f"cannot build Dialogflow client: {exc}", path=key_path) from exc


def build_dialogflow_clients(key_path: Path, settings: AppSettings | None = None) -> DialogflowClients:
    """Crea los clientes de agentes y entity types con las mismas credenciales."""

    settings = settings or AppSettings()
    credentials = build_credentials(key_path)

    client_options = None
    if settings.api_endpoint:
        client_options = ClientOptions(api_endpoint=settings.api_endpoint)

    logger.debug(
        "Building Dialogflow clients for %s (endpoint=%s)",
        credentials.service_account_email,
        settings.api_endpoint or "default",
    )
    return DialogflowClients(
        agents=dialogflow.AgentsClient(credentials=credentials, client_options=client_options),
        entity_types=dialogflow.EntityTypesClient(credentials=credentials, client_options=client_options),
    )
