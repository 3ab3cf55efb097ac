"""CLI de dfmanager (Typer).

Por qué Typer:
- Flags globales con env vars (`GCP_KEY`, `GCE_PROJECT`) sin parsing manual.
- Cada comando es una función pequeña; la lógica vive en `core/services`.

Un proceso ejecuta exactamente una operación. Cualquier `ManagerError` se
imprime en stderr y termina con código 1.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler

from adapters.entities_loader import load_entities
from cli.doctor import app as doctor_app
from cli.ui_components import build_entity_types_table, print_error, print_success
from core.config import AppSettings
from core.domain.errors import ManagerError
from core.services.agent_manager import AgentManager
from core.services.commands import ALIASES, resolve_command

app = typer.Typer(
    name="dfmanager",
    no_args_is_help=True,
    add_completion=False,
    help="Dialogflow Agent Manager: export, import and restore agents.",
)
app.add_typer(doctor_app, name="doctor")

_console = Console()
_err_console = Console(stderr=True)


@dataclass
class CliState:
    key: Path | None
    project: str | None
    file: str | None
    settings: AppSettings

    def require(self) -> tuple[Path, str]:
        if not self.key:
            raise ManagerError("argument key is missing (use --key or GCP_KEY)")
        if not self.project:
            raise ManagerError("argument project is missing (use --project or GCE_PROJECT)")
        return self.key, self.project


def _load_settings() -> AppSettings:
    try:
        return AppSettings()
    except ValidationError as exc:
        details = "; ".join(
            f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}" for error in exc.errors()
        )
        raise ManagerError(f"invalid configuration: {details}") from exc


def _configure_logging(*, verbose: bool, level: str) -> None:
    if not isinstance(logging.getLevelName(level.upper()), int):
        raise ManagerError(f"invalid configuration: unknown log level {level!r}")
    logging.basicConfig(
        level=logging.DEBUG if verbose else level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=_err_console, show_path=False, rich_tracebacks=False)],
        force=True,
    )


@contextmanager
def _exit_on_error() -> Iterator[None]:
    try:
        yield
    except ManagerError as exc:
        print_error(_err_console, exc.message)
        raise typer.Exit(code=1) from exc


@app.callback()
def main(
    ctx: typer.Context,
    key: Path | None = typer.Option(
        None, "--key", "-k", envvar="GCP_KEY", help="Google Cloud Platform auth key (service account JSON)."
    ),
    project: str | None = typer.Option(
        None, "--project", "-p", envvar="GCE_PROJECT", help="Google Cloud Platform project id."
    ),
    file: str | None = typer.Option(
        None, "--file", "-f", help="Input/output archive file (default: <project>.zip)."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging on stderr."),
) -> None:
    with _exit_on_error():
        settings = _load_settings()
        _configure_logging(verbose=verbose, level=settings.log_level)
    ctx.obj = CliState(
        key=key or settings.key_path,
        project=project or settings.project,
        file=file,
        settings=settings,
    )


def _run_archive_command(ctx: typer.Context, name: str) -> Path:
    state: CliState = ctx.obj
    with _exit_on_error():
        key, project = state.require()
        return resolve_command(name)(key, project, state.file, state.settings)


def export_cmd(ctx: typer.Context) -> None:
    """Exports agent from Dialogflow (alias: e)."""

    path = _run_archive_command(ctx, "export")
    print_success(_console, f"Agent exported to {path}")


def import_cmd(ctx: typer.Context) -> None:
    """Imports agent to Dialogflow, merging with the live agent (alias: i)."""

    path = _run_archive_command(ctx, "import")
    print_success(_console, f"Agent imported from {path}")


def restore_cmd(ctx: typer.Context) -> None:
    """Restores agent in Dialogflow, replacing the live agent (alias: r)."""

    path = _run_archive_command(ctx, "restore")
    print_success(_console, f"Agent restored from {path}")


_ARCHIVE_COMMANDS = {
    "export": export_cmd,
    "import": import_cmd,
    "restore": restore_cmd,
}

for _name, _fn in _ARCHIVE_COMMANDS.items():
    app.command(name=_name)(_fn)
for _alias, _name in ALIASES.items():
    app.command(name=_alias, hidden=True)(_ARCHIVE_COMMANDS[_name])


@app.command(name="entities")
def entities_cmd(
    ctx: typer.Context,
    as_json: bool = typer.Option(False, "--json", help="Print entity types as JSON."),
) -> None:
    """Lists the agent's entity types."""

    state: CliState = ctx.obj
    with _exit_on_error():
        key, project = state.require()
        manager = AgentManager.from_key_file(key, project, state.settings)
        entity_types = manager.list_entity_types()

    if as_json:
        payload = [entity_type.model_dump(mode="json") for entity_type in entity_types]
        typer.echo(json.dumps(payload, ensure_ascii=False, indent=2))
        return
    _console.print(build_entity_types_table(entity_types))


@app.command(name="update-entities")
def update_entities_cmd(
    ctx: typer.Context,
    entity_type: str = typer.Argument(..., help="Entity type id or full resource name."),
    entities_file: Path = typer.Option(
        ..., "--entities", help='JSON list of {"value": ..., "synonyms": [...]} objects.'
    ),
) -> None:
    """Overwrites the entities of one entity type in a single batch."""

    state: CliState = ctx.obj
    with _exit_on_error():
        key, project = state.require()
        entities = load_entities(entities_file)
        manager = AgentManager.from_key_file(key, project, state.settings)
        manager.batch_update_entities(entity_type, entities)

    print_success(_console, f"Updated {len(entities)} entities of {entity_type}")


def run() -> None:
    app()
