"""Lanzador de dfmanager desde un checkout (sin `pip install -e .`).

Ejemplo:
- `python main.py -k key.json -p my-project export`

Añade `src/` al path y arranca la app Typer con el mismo nombre de programa
que el script instalado, para que `--help` se vea igual en ambos casos.
"""

from __future__ import annotations

import sys
from pathlib import Path

SRC_DIR = Path(__file__).resolve().parent / "src"


def main(argv: list[str] | None = None) -> None:
    if str(SRC_DIR) not in sys.path:
        sys.path.insert(0, str(SRC_DIR))

    from cli.main import app  # noqa: PLC0415

    app(args=argv, prog_name="dfmanager")


if __name__ == "__main__":
    main()
