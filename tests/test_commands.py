"""Unit tests for the static command table in core/services/commands.py."""

from __future__ import annotations

from pathlib import Path

import pytest
from google.cloud import dialogflow_v2 as dialogflow

from adapters.dialogflow_client import DialogflowClients
from core.config import AppSettings
from core.services.commands import ALIASES, COMMANDS, resolve_command, run_export, run_import, run_restore


def test_every_alias_points_at_a_command() -> None:
    assert set(ALIASES.values()) <= set(COMMANDS)


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("export", run_export),
        ("e", run_export),
        ("import", run_import),
        ("i", run_import),
        ("restore", run_restore),
        ("r", run_restore),
    ],
)
def test_resolve_command(name: str, expected: object) -> None:
    assert resolve_command(name) is expected


def test_unknown_command_raises_key_error() -> None:
    with pytest.raises(KeyError):
        resolve_command("delete")


def test_run_export_writes_default_filename(isolated_env: Path, fake_client_factory: DialogflowClients) -> None:
    fake_client_factory.agents.export_response = dialogflow.ExportAgentResponse(agent_content=b"zip")

    path = run_export(Path("key.json"), "myproj", None)

    assert path == Path("myproj.zip")
    assert (isolated_env / "myproj.zip").read_bytes() == b"zip"


def test_run_restore_appends_zip_suffix(isolated_env: Path, fake_client_factory: DialogflowClients) -> None:
    (isolated_env / "backup.zip").write_bytes(b"zip")

    path = run_restore(Path("key.json"), "myproj", "backup")

    assert path == Path("backup.zip")
    method, request = fake_client_factory.agents.requests[0]
    assert method == "restore_agent"
    assert request.agent_content == b"zip"


def test_command_uses_the_settings_it_is_given(
    isolated_env: Path, monkeypatch: pytest.MonkeyPatch, clients: DialogflowClients
) -> None:
    seen: list[AppSettings] = []

    def factory(key_path: Path, settings: AppSettings) -> DialogflowClients:
        seen.append(settings)
        return clients

    monkeypatch.setattr("core.services.agent_manager.build_dialogflow_clients", factory)
    clients.agents.export_response = dialogflow.ExportAgentResponse(agent_content=b"zip")
    settings = AppSettings(_env_file=None, operation_timeout_seconds=3.0)

    resolve_command("e")(Path("key.json"), "myproj", None, settings)

    assert seen[0] is settings
    assert clients.agents.operations[0].timeouts == [3.0]
