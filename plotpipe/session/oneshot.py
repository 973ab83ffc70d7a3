"""Open a session, plot one signal, wait for the operator, close."""

from __future__ import annotations

from typing import Sequence

import questionary
from rich.console import Console

from ..interfaces.config import SessionConfig
from .core import PlotSession
from .serializers import as_vector


def _wait_for_enter() -> None:
    questionary.text("Press Enter to continue").ask()


def plot_once(
    x: Sequence[float],
    y: Sequence[float] | None = None,
    *,
    style: str | None = None,
    label_x: str | None = None,
    label_y: str | None = None,
    title: str | None = None,
    config: SessionConfig | None = None,
    console: Console | None = None,
) -> None:
    """Plot ``x`` (or ``x``/``y``) in a throwaway session.

    Blocks on console input until the operator presses Enter. Missing style
    and labels default to ``lines``, ``X`` and ``Y``. The session is closed
    on every exit path.
    """

    as_vector("x", x)
    with PlotSession.open(config, console=console) as session:
        session.set_style(style or "lines")
        session.set_axis_label("x", label_x or "X")
        session.set_axis_label("y", label_y or "Y")
        session.plot_coordinates(x, y, title)
        _wait_for_enter()
