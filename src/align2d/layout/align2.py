"""Two-axis alignment, e.g. ``Align2.LEFT_TOP``.

Every operation here splits into two independent one-axis ``Align``
computations and recombines the results.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from .align import Align
from .geometry import Pos2, Rect, Vec2


@dataclass(frozen=True)
class Align2:
    """Horizontal and vertical alignment.

    Prefer the named constants (``Align2.CENTER_CENTER`` etc.) over
    constructing instances directly.
    """

    horizontal: Align
    vertical: Align

    LEFT_TOP: ClassVar[Align2]
    LEFT_CENTER: ClassVar[Align2]
    LEFT_BOTTOM: ClassVar[Align2]
    CENTER_TOP: ClassVar[Align2]
    CENTER_CENTER: ClassVar[Align2]
    CENTER_BOTTOM: ClassVar[Align2]
    RIGHT_TOP: ClassVar[Align2]
    RIGHT_CENTER: ClassVar[Align2]
    RIGHT_BOTTOM: ClassVar[Align2]

    @classmethod
    def default(cls) -> Align2:
        return cls(Align.default(), Align.default())

    def x(self) -> Align:
        return self.horizontal

    def y(self) -> Align:
        return self.vertical

    def to_tuple(self) -> tuple[Align, Align]:
        return (self.horizontal, self.vertical)

    def to_sign(self) -> Vec2:
        """-1, 0, or +1 for each axis."""
        return Vec2(self.horizontal.to_sign(), self.vertical.to_sign())

    def anchor_rect(self, rect: Rect) -> Rect:
        """Reposition ``rect`` so that its min corner becomes the anchor.

        Used e.g. to anchor a piece of text at a point: with ``CENTER_CENTER``
        the returned rect is centered on ``rect.min``. The size is kept.
        """
        x_range = _anchor_range(self.horizontal, rect.left, rect.right, rect.width)
        y_range = _anchor_range(self.vertical, rect.top, rect.bottom, rect.height)
        return Rect.from_x_y_ranges(x_range, y_range)

    def align_size_within_rect(self, size: Vec2, frame: Rect) -> Rect:
        """Place a box of ``size`` inside ``frame``, e.g. center it."""
        x_range = self.horizontal.align_size_within_range(size.x, frame.x_range)
        y_range = self.vertical.align_size_within_range(size.y, frame.y_range)
        return Rect.from_x_y_ranges(x_range, y_range)

    def pos_in_rect(self, frame: Rect) -> Pos2:
        """The point of ``frame`` this alignment refers to."""
        return Pos2(
            _pick(self.horizontal, frame.left, frame.center.x, frame.right),
            _pick(self.vertical, frame.top, frame.center.y, frame.bottom),
        )


def _anchor_range(align: Align, low: float, high: float, extent: float) -> tuple[float, float]:
    # shift back from low by 0, half or all of extent, without 0 * inf
    if align is Align.MIN:
        return low, high
    if align is Align.CENTER:
        return low - 0.5 * extent, low + 0.5 * extent
    return low - extent, low


def _pick(align: Align, low: float, mid: float, high: float) -> float:
    if align is Align.MIN:
        return low
    if align is Align.CENTER:
        return mid
    return high


Align2.LEFT_TOP = Align2(Align.MIN, Align.MIN)
Align2.LEFT_CENTER = Align2(Align.MIN, Align.CENTER)
Align2.LEFT_BOTTOM = Align2(Align.MIN, Align.MAX)
Align2.CENTER_TOP = Align2(Align.CENTER, Align.MIN)
Align2.CENTER_CENTER = Align2(Align.CENTER, Align.CENTER)
Align2.CENTER_BOTTOM = Align2(Align.CENTER, Align.MAX)
Align2.RIGHT_TOP = Align2(Align.MAX, Align.MIN)
Align2.RIGHT_CENTER = Align2(Align.MAX, Align.CENTER)
Align2.RIGHT_BOTTOM = Align2(Align.MAX, Align.MAX)

DEFAULT_ALIGN2 = Align2.LEFT_TOP


def center_size_in_rect(size: Vec2, frame: Rect) -> Rect:
    """Center a box of ``size`` within ``frame``."""
    return Align2.CENTER_CENTER.align_size_within_rect(size, frame)
