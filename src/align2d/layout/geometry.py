"""Geometric primitives consumed and produced by the alignment operations."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Pos2:
    """A point in 2D space."""

    x: float
    y: float

    def to_dict(self) -> dict:
        return {"x": self.x, "y": self.y}


@dataclass(frozen=True)
class Vec2:
    """A 2D vector, also used as a (width, height) size."""

    x: float
    y: float

    def to_dict(self) -> dict:
        return {"x": self.x, "y": self.y}


@dataclass(frozen=True)
class Rangef:
    """A closed scalar range ``[min, max]``. Either bound may be infinite."""

    min: float
    max: float

    @classmethod
    def from_pair(cls, pair: Rangef | tuple[float, float]) -> Rangef:
        """Accept either a Rangef or a ``(lo, hi)`` pair."""
        if isinstance(pair, Rangef):
            return pair
        lo, hi = pair
        return cls(float(lo), float(hi))

    @property
    def span(self) -> float:
        return self.max - self.min

    @property
    def center(self) -> float:
        return (self.min + self.max) / 2.0

    def contains(self, value: float) -> bool:
        return self.min <= value <= self.max

    def to_tuple(self) -> tuple[float, float]:
        return (self.min, self.max)


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle given by its min (left-top) and max
    (right-bottom) corners.

    Stored by corners rather than origin + size so that rectangles built
    from infinite ranges stay well defined.
    """

    min: Pos2
    max: Pos2

    @classmethod
    def from_min_size(cls, min: Pos2 | tuple[float, float], size: Vec2 | tuple[float, float]) -> Rect:
        mx, my = (min.x, min.y) if isinstance(min, Pos2) else min
        sx, sy = (size.x, size.y) if isinstance(size, Vec2) else size
        return cls(Pos2(mx, my), Pos2(mx + sx, my + sy))

    @classmethod
    def from_x_y_ranges(cls, x_range: Rangef | tuple[float, float], y_range: Rangef | tuple[float, float]) -> Rect:
        xr = Rangef.from_pair(x_range)
        yr = Rangef.from_pair(y_range)
        return cls(Pos2(xr.min, yr.min), Pos2(xr.max, yr.max))

    @property
    def left(self) -> float:
        return self.min.x

    @property
    def right(self) -> float:
        return self.max.x

    @property
    def top(self) -> float:
        return self.min.y

    @property
    def bottom(self) -> float:
        return self.max.y

    @property
    def width(self) -> float:
        return self.max.x - self.min.x

    @property
    def height(self) -> float:
        return self.max.y - self.min.y

    @property
    def size(self) -> Vec2:
        return Vec2(self.width, self.height)

    @property
    def center(self) -> Pos2:
        return Pos2((self.min.x + self.max.x) / 2.0, (self.min.y + self.max.y) / 2.0)

    @property
    def x_range(self) -> Rangef:
        return Rangef(self.min.x, self.max.x)

    @property
    def y_range(self) -> Rangef:
        return Rangef(self.min.y, self.max.y)

    def contains(self, pos: Pos2) -> bool:
        return self.left <= pos.x <= self.right and self.top <= pos.y <= self.bottom

    def to_dict(self) -> dict:
        return {"x": self.left, "y": self.top, "width": self.width, "height": self.height}
