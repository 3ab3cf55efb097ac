"""Archive commands as plain functions.

The CLI does not dispatch through framework magic: `COMMANDS` maps each
command name to a function
`(key_path, project, file_override, settings) -> Path` and `ALIASES` maps the
short forms. Each function builds one manager, runs one
operation and returns the archive path it used.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from adapters.archive_io import resolve_filename
from core.config import AppSettings
from core.services.agent_manager import AgentManager

CommandFn = Callable[[Path, str, str | None, AppSettings | None], Path]


def _manager(key_path: Path, project: str, settings: AppSettings | None) -> AgentManager:
    return AgentManager.from_key_file(key_path, project, settings or AppSettings())


def run_export(
    key_path: Path,
    project: str,
    file_override: str | None = None,
    settings: AppSettings | None = None,
) -> Path:
    manager = _manager(key_path, project, settings)
    return manager.export_to_file(Path(resolve_filename(project, file_override)))


def run_import(
    key_path: Path,
    project: str,
    file_override: str | None = None,
    settings: AppSettings | None = None,
) -> Path:
    manager = _manager(key_path, project, settings)
    path = Path(resolve_filename(project, file_override))
    manager.import_file(path)
    return path


def run_restore(
    key_path: Path,
    project: str,
    file_override: str | None = None,
    settings: AppSettings | None = None,
) -> Path:
    manager = _manager(key_path, project, settings)
    path = Path(resolve_filename(project, file_override))
    manager.restore_file(path)
    return path


COMMANDS: dict[str, CommandFn] = {
    "export": run_export,
    "import": run_import,
    "restore": run_restore,
}

ALIASES: dict[str, str] = {
    "e": "export",
    "i": "import",
    "r": "restore",
}


def resolve_command(name: str) -> CommandFn:
    """Look up a command by name or alias; raises KeyError for unknown names."""

    return COMMANDS[ALIASES.get(name, name)]
