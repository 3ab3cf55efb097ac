"""Contratos de los clientes de Dialogflow.

Por qué Protocol:
- `AgentsClient` y `EntityTypesClient` del SDK cumplen estos contratos de forma
  estructural (duck typing) sin herencia.
- El manager solo usa este subconjunto, así que un doble de test basta con
  implementar estos métodos.
"""

from __future__ import annotations

from typing import Any, Iterable, Protocol


class Operation(Protocol):
    """Operación larga (google.api_core.operation.Operation)."""

    def result(self, timeout: float | None = None) -> Any:
        """Bloquea hasta que la operación termina; lanza GoogleAPIError si falló, o TimeoutError si vence `timeout`."""

        ...


class AgentsApi(Protocol):
    def export_agent(self, request: Any) -> Operation: ...

    def import_agent(self, request: Any) -> Operation: ...

    def restore_agent(self, request: Any) -> Operation: ...


class EntityTypesApi(Protocol):
    def list_entity_types(self, request: Any) -> Iterable[Any]:
        """Devuelve un pager iterable que recorre todas las páginas."""

        ...

    def batch_update_entity_types(self, request: Any) -> Operation: ...
