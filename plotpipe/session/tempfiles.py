"""Ownership of the temporary data files a session hands to gnuplot."""

from __future__ import annotations

import os
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, TextIO

from rich.console import Console

from ..interfaces.errors import TempFileError, TooManyTempFiles
from ..utils.console import warn

TEMPFILE_PREFIX = "gnuplot-i-"


class TempFileRegistry:
    """Bounded, ordered set of temp files created (and not yet deleted) by one session."""

    def __init__(
        self,
        directory: Path,
        capacity: int,
        *,
        console: Console | None = None,
    ) -> None:
        self.directory = Path(directory)
        self.capacity = capacity
        self.console = console
        self._paths: list[Path] = []

    def __len__(self) -> int:
        return len(self._paths)

    @property
    def paths(self) -> tuple[Path, ...]:
        return tuple(self._paths)

    def check_capacity(self) -> None:
        if len(self._paths) >= self.capacity:
            raise TooManyTempFiles(
                f"Maximum number of temporary files reached ({self.capacity}): cannot open more"
            )

    @contextmanager
    def create(self) -> Iterator[tuple[Path, TextIO]]:
        """Create, track, and open a new temp file for writing.

        The file is closed when the block exits. If the block raises, the file
        is deleted and untracked before the error propagates; ``OSError`` is
        reported as :class:`TempFileError`.
        """

        self.check_capacity()
        try:
            fd, name = tempfile.mkstemp(prefix=TEMPFILE_PREFIX, dir=self.directory)
        except OSError as exc:
            raise TempFileError(f"Cannot create temporary file in {self.directory}: {exc}") from exc

        path = Path(name)
        self._paths.append(path)
        try:
            with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as handle:
                yield path, handle
        except OSError as exc:
            self.discard(path)
            raise TempFileError(f"Cannot write temporary file {path}: {exc}") from exc
        except BaseException:
            self.discard(path)
            raise

    def discard(self, path: Path) -> None:
        """Untrack ``path`` and delete it from disk."""

        if path in self._paths:
            self._paths.remove(path)
        self._unlink(path)

    def clear(self) -> int:
        """Delete every tracked file and empty the registry.

        Deletion is best-effort: failures are logged, never raised.

        Returns:
            Number of files actually removed.
        """

        removed = 0
        paths, self._paths = self._paths, []
        for path in paths:
            if self._unlink(path):
                removed += 1
        return removed

    def _unlink(self, path: Path) -> bool:
        try:
            path.unlink()
        except FileNotFoundError:
            return False
        except OSError as exc:
            warn(f"Cannot delete {path}: {exc}", self.console)
            return False
        return True
