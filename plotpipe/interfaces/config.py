"""Configuration interfaces and data structures."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
import tempfile

DEFAULT_MAX_TEMP_FILES = 64
DEFAULT_WIDTH = 900
DEFAULT_HEIGHT = 400


@dataclass(frozen=True)
class SessionConfig:
    """Runtime configuration for a gnuplot session."""

    executable: str = "gnuplot"
    tmp_dir: Path | None = None
    terminal: str = "wxt"
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    max_temp_files: int = DEFAULT_MAX_TEMP_FILES
    require_display: bool = False
    hardcopy_terminal: str = "postscript"
    echo: bool = False

    @property
    def temp_dir(self) -> Path:
        if self.tmp_dir is not None:
            return self.tmp_dir
        return Path(tempfile.gettempdir())
