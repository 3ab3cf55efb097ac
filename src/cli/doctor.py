"""Doctor command for environment diagnostics.

All checks are local: nothing here talks to Dialogflow.
"""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from adapters.archive_io import resolve_filename
from adapters.dialogflow_client import build_credentials
from core.config import AppSettings, get_user_env_file, write_user_env_vars
from core.domain.errors import LocalIOError

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


def _check_key(key: Path | None) -> tuple[bool, str]:
    if not key:
        return False, "No key set (--key / GCP_KEY)"
    try:
        credentials = build_credentials(key)
    except LocalIOError as exc:
        return False, exc.message
    return True, credentials.service_account_email


@app.command()
def run(ctx: typer.Context) -> None:
    """Run baseline diagnostics and show recommended fixes."""

    state = ctx.obj
    settings: AppSettings = state.settings if state is not None else AppSettings()
    key = state.key if state is not None else settings.key_path
    project = state.project if state is not None else settings.project
    override = state.file if state is not None else None

    table = Table(title="dfmanager Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    ok_key, detail_key = _check_key(key)
    table.add_row("Service account key", "OK" if ok_key else "FAIL", detail_key)

    if project:
        table.add_row("Project", "OK", project)
        table.add_row("Archive file", "OK", resolve_filename(project, override))
    else:
        table.add_row("Project", "FAIL", "No project set (--project / GCE_PROJECT)")

    table.add_row("Language", "OK", settings.language_code or "agent default")
    table.add_row("API endpoint", "OK", settings.api_endpoint or "dialogflow.googleapis.com")
    table.add_row("User config", "OK" if get_user_env_file().exists() else "OPTIONAL", str(get_user_env_file()))

    _console.print(table)

    if not (ok_key and project):
        _console.print("\n[yellow]Note:[/yellow] run `dfmanager doctor setup` to store key and project once.")
        raise typer.Exit(code=1)


@app.command(name="setup")
def setup() -> None:
    """Interactive setup (stores key path and project in the user config .env)."""

    settings = AppSettings()
    key = typer.prompt(
        "Service account key path",
        default=str(settings.key_path or ""),
        show_default=bool(settings.key_path),
    ).strip()
    project = typer.prompt(
        "GCP project id",
        default=settings.project or "",
        show_default=bool(settings.project),
    ).strip()

    if not key or not project:
        raise typer.BadParameter("key and project are required")

    env_path = write_user_env_vars(
        {
            "GCP_KEY": str(Path(key).expanduser().resolve()),
            "GCE_PROJECT": project,
        }
    )

    _console.print(f"[green]Saved config to:[/green] {env_path}")
