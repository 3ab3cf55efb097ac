"""Agent lifecycle operations against Dialogflow.

One `AgentManager` is bound to one project for the lifetime of a CLI run.
Every operation issues a single remote call, blocks until the long-running
operation resolves and converts Google API failures into `RemoteError`.
Archive bytes are forwarded untouched in both directions.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator, Sequence
from concurrent import futures
from contextlib import contextmanager
from pathlib import Path
from typing import Any

from google.api_core.exceptions import GoogleAPIError
from google.auth.exceptions import GoogleAuthError
from google.cloud import dialogflow_v2 as dialogflow
from google.protobuf import field_mask_pb2

from adapters.archive_io import read_archive, write_archive
from adapters.dialogflow_client import DialogflowClients, build_dialogflow_clients
from core.config import AppSettings
from core.domain.errors import RemoteError
from core.domain.models import Entity, EntityType

logger = logging.getLogger(__name__)


@contextmanager
def _remote_call(action: str) -> Iterator[None]:
    try:
        yield
    except GoogleAPIError as exc:
        logger.debug("%s failed: %r", action, exc)
        raise RemoteError(getattr(exc, "message", None) or str(exc)) from exc
    except futures.TimeoutError as exc:
        logger.debug("%s timed out: %r", action, exc)
        raise RemoteError(str(exc) or f"{action} did not complete in time") from exc
    except GoogleAuthError as exc:
        logger.debug("%s failed during authentication: %r", action, exc)
        raise RemoteError(str(exc)) from exc


def _entity_type_from_proto(entity_type: Any) -> EntityType:
    kind = entity_type.kind
    return EntityType(
        name=entity_type.name,
        display_name=entity_type.display_name,
        kind=getattr(kind, "name", str(kind)),
        entities=[
            Entity(value=entity.value, synonyms=list(entity.synonyms))
            for entity in entity_type.entities
        ],
    )


class AgentManager:
    """Export, import and restore a project's agent, plus entity type helpers."""

    def __init__(
        self,
        project: str,
        clients: DialogflowClients,
        settings: AppSettings | None = None,
    ) -> None:
        self.project = project
        self.clients = clients
        self.settings = settings or AppSettings()

    @classmethod
    def from_key_file(
        cls,
        key_path: Path,
        project: str,
        settings: AppSettings | None = None,
        *,
        client_factory: Callable[[Path, AppSettings], DialogflowClients] | None = None,
    ) -> "AgentManager":
        settings = settings or AppSettings()
        factory = client_factory or build_dialogflow_clients
        return cls(project, factory(key_path, settings), settings)

    @property
    def project_path(self) -> str:
        return f"projects/{self.project}"

    @property
    def agent_path(self) -> str:
        return f"projects/{self.project}/agent"

    def entity_type_path(self, entity_type: str) -> str:
        """Expand a bare entity type id into its full resource name."""

        if "/" in entity_type:
            return entity_type
        return f"{self.agent_path}/entityTypes/{entity_type}"

    def _wait(self, operation: Any) -> Any:
        return operation.result(timeout=self.settings.operation_timeout_seconds)

    # -- agent archive -----------------------------------------------------

    def export(self) -> bytes:
        """Download the agent as zip bytes."""

        logger.info("Exporting agent of %s", self.project_path)
        with _remote_call("export"):
            operation = self.clients.agents.export_agent(
                request=dialogflow.ExportAgentRequest(parent=self.project_path)
            )
            response = self._wait(operation)

        content = bytes(response.agent_content)
        if not content and response.agent_uri:
            raise RemoteError(f"agent was exported to {response.agent_uri}, no inline content returned")
        logger.info("Exported %d bytes", len(content))
        return content

    def export_to_file(self, path: Path) -> Path:
        """Export and write the archive. Nothing is written if the export fails."""

        return write_archive(path, self.export())

    def import_agent(self, data: bytes) -> None:
        """Merge the archive into the live agent (additive)."""

        logger.info("Importing %d bytes into %s", len(data), self.project_path)
        with _remote_call("import"):
            operation = self.clients.agents.import_agent(
                request=dialogflow.ImportAgentRequest(parent=self.project_path, agent_content=data)
            )
            self._wait(operation)

    def import_file(self, path: Path) -> None:
        self.import_agent(read_archive(path))

    def restore(self, data: bytes) -> None:
        """Replace the live agent with the archive contents (destructive)."""

        logger.info("Restoring %s from %d bytes", self.project_path, len(data))
        with _remote_call("restore"):
            operation = self.clients.agents.restore_agent(
                request=dialogflow.RestoreAgentRequest(parent=self.project_path, agent_content=data)
            )
            self._wait(operation)

    def restore_file(self, path: Path) -> None:
        self.restore(read_archive(path))

    # -- entity types --------------------------------------------------------

    def list_entity_types(self) -> list[EntityType]:
        """Fetch every entity type of the agent, walking all pages."""

        request = dialogflow.ListEntityTypesRequest(parent=self.agent_path)
        if self.settings.language_code:
            request.language_code = self.settings.language_code

        with _remote_call("list entity types"):
            raw = list(self.clients.entity_types.list_entity_types(request=request))

        logger.info("Fetched %d entity types from %s", len(raw), self.agent_path)
        return [_entity_type_from_proto(entity_type) for entity_type in raw]

    def batch_update_entities(self, entity_type_name: str, entities: Sequence[Entity]) -> None:
        """Overwrite the entity list of one entity type in a single batch."""

        name = self.entity_type_path(entity_type_name)
        batch = dialogflow.EntityTypeBatch(
            entity_types=[
                dialogflow.EntityType(
                    name=name,
                    entities=[
                        dialogflow.EntityType.Entity(value=entity.value, synonyms=list(entity.synonyms))
                        for entity in entities
                    ],
                )
            ]
        )
        request = dialogflow.BatchUpdateEntityTypesRequest(
            parent=self.agent_path,
            entity_type_batch_inline=batch,
            update_mask=field_mask_pb2.FieldMask(paths=["entities"]),
        )
        if self.settings.language_code:
            request.language_code = self.settings.language_code

        logger.info("Updating %d entities of %s", len(entities), name)
        with _remote_call("batch update entities"):
            operation = self.clients.entity_types.batch_update_entity_types(request=request)
            self._wait(operation)
