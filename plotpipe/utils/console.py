"""Shared Rich console used for session warnings and command echo."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape

console = Console(stderr=True)


def warn(message: str, target: Console | None = None) -> None:
    (target or console).log(f"[yellow]Warning:[/] {escape(message)}")
