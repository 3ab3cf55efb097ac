"""Errors surfaced to the CLI.

Only two kinds exist: local file failures and failures reported by (or on the
way to) Dialogflow. Both are terminal for the invoking command.
"""

from __future__ import annotations

from pathlib import Path


class ManagerError(Exception):
    """Base class for every error the CLI reports and exits 1 on."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class LocalIOError(ManagerError):
    """A local file (archive or credentials) could not be opened, read or written."""

    def __init__(self, message: str, *, path: Path | str | None = None) -> None:
        super().__init__(message)
        self.path = Path(path) if path is not None else None


class RemoteError(ManagerError):
    """Dialogflow reported an error, or the call never reached it."""
