"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas/paneles en múltiples comandos.
"""

from __future__ import annotations

from collections.abc import Sequence

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from core.domain.models import EntityType


def print_error(console: Console, message: str) -> None:
    """Imprime un error en una sola línea (sin wrap) para que sea grep-able."""

    console.print(f"[bold red]Error:[/bold red] {escape(message)}", soft_wrap=True)


def print_success(console: Console, message: str) -> None:
    console.print(f"[green]{escape(message)}[/green]", soft_wrap=True)


def build_entity_types_table(entity_types: Sequence[EntityType], *, max_values: int = 5) -> Table:
    """Tabla con un entity type por fila; solo se muestran los primeros valores."""

    table = Table(title="Entity Types")
    table.add_column("Display name", style="cyan", no_wrap=True)
    table.add_column("Kind", style="white")
    table.add_column("Entities", style="green", justify="right")
    table.add_column("Values", style="magenta")
    table.add_column("Name", style="dim")

    for entity_type in entity_types:
        values = [entity.value for entity in entity_type.entities[:max_values]]
        if len(entity_type.entities) > max_values:
            values.append("…")
        table.add_row(
            escape(entity_type.display_name),
            entity_type.kind,
            str(len(entity_type.entities)),
            escape(", ".join(values)),
            escape(entity_type.name),
        )
    return table
