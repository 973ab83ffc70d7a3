"""Point carriers and the point-source protocol used by callback plots."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Protocol, Sequence, Union, runtime_checkable

from .errors import InvalidArgument


@dataclass(frozen=True)
class Point:
    """A single (x, y, z) sample. ``z`` is ignored by 2-D plots."""

    x: float
    y: float
    z: float = 0.0

    @classmethod
    def coerce(cls, value: "Point | Sequence[float]") -> "Point":
        if isinstance(value, Point):
            return value
        coords = tuple(float(v) for v in value)
        if len(coords) not in (2, 3):
            raise ValueError(f"A point needs 2 or 3 coordinates, got {len(coords)}")
        return cls(*coords)


@runtime_checkable
class PointSource(Protocol):
    """Anything that can produce point ``index`` of ``count``."""

    def point_at(self, index: int, count: int) -> Point:  # pragma: no cover - protocol definition
        ...


PointFunction = Callable[[int, int], Union[Point, Sequence[float]]]


@dataclass(frozen=True)
class CallbackPointSource:
    """Adapts a plain ``(index, count) -> point`` callable to ``PointSource``."""

    func: PointFunction

    def point_at(self, index: int, count: int) -> Point:
        value = self.func(index, count)
        try:
            return Point.coerce(value)
        except (TypeError, ValueError) as exc:
            raise InvalidArgument(f"Point {index} of {count} is not numeric: {exc}") from exc


def as_point_source(source: PointSource | PointFunction) -> PointSource:
    if isinstance(source, PointSource):
        return source
    if callable(source):
        return CallbackPointSource(source)
    raise TypeError(f"Expected a PointSource or callable, got {type(source).__name__}")
