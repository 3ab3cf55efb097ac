"""Shared fakes for the Dialogflow clients.

The fakes record every request and hand back operations whose `result`
either returns a canned response or raises a canned error, which is all the
manager relies on.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest

from adapters.dialogflow_client import DialogflowClients


class FakeOperation:
    def __init__(self, response: Any = None, error: Exception | None = None) -> None:
        self.response = response
        self.error = error
        self.timeouts: list[float | None] = []

    def result(self, timeout: float | None = None) -> Any:
        self.timeouts.append(timeout)
        if self.error is not None:
            raise self.error
        return self.response


class FakeAgents:
    def __init__(self) -> None:
        self.requests: list[tuple[str, Any]] = []
        self.export_response: Any = None
        self.error: Exception | None = None
        self.operations: list[FakeOperation] = []

    def _operation(self, method: str, request: Any, response: Any = None) -> FakeOperation:
        self.requests.append((method, request))
        operation = FakeOperation(response=response, error=self.error)
        self.operations.append(operation)
        return operation

    def export_agent(self, request: Any) -> FakeOperation:
        return self._operation("export_agent", request, self.export_response)

    def import_agent(self, request: Any) -> FakeOperation:
        return self._operation("import_agent", request)

    def restore_agent(self, request: Any) -> FakeOperation:
        return self._operation("restore_agent", request)


class FakeEntityTypes:
    def __init__(self) -> None:
        self.requests: list[tuple[str, Any]] = []
        self.entity_types: list[Any] = []
        self.list_error: Exception | None = None
        self.update_error: Exception | None = None

    def list_entity_types(self, request: Any) -> list[Any]:
        self.requests.append(("list_entity_types", request))
        if self.list_error is not None:
            raise self.list_error
        return list(self.entity_types)

    def batch_update_entity_types(self, request: Any) -> FakeOperation:
        self.requests.append(("batch_update_entity_types", request))
        return FakeOperation(error=self.update_error)


@pytest.fixture
def clients() -> DialogflowClients:
    return DialogflowClients(agents=FakeAgents(), entity_types=FakeEntityTypes())


@pytest.fixture
def isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    """Run in an empty cwd with no dfmanager variables in the environment."""

    for name in (
        "GCP_KEY",
        "GCE_PROJECT",
        "DFMANAGER_KEY_PATH",
        "DFMANAGER_PROJECT",
        "DFMANAGER_LANGUAGE_CODE",
        "DFMANAGER_API_ENDPOINT",
        "DFMANAGER_OPERATION_TIMEOUT_SECONDS",
        "DFMANAGER_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def fake_client_factory(monkeypatch: pytest.MonkeyPatch, clients: DialogflowClients) -> DialogflowClients:
    """Make every `AgentManager.from_key_file` use the fake clients."""

    monkeypatch.setattr(
        "core.services.agent_manager.build_dialogflow_clients",
        lambda key_path, settings: clients,
    )
    return clients
