"""One-axis alignment: left/center/right or top/center/bottom."""

from __future__ import annotations

from enum import Enum

import numpy as np

from .geometry import Rangef


class Align(Enum):
    """Where content sits along one axis of its frame.

    Values are the serialized names. ``LEFT``/``TOP`` and ``RIGHT``/``BOTTOM``
    are aliases of ``MIN`` and ``MAX``, not extra members::

        Align.LEFT is Align.MIN      # True
        len(Align)                   # 3
    """

    MIN = "min"
    CENTER = "center"
    MAX = "max"

    LEFT = "min"
    RIGHT = "max"
    TOP = "min"
    BOTTOM = "max"

    @classmethod
    def default(cls) -> Align:
        return cls.MIN

    def to_factor(self) -> float:
        """Convert ``MIN => 0.0``, ``CENTER => 0.5`` or ``MAX => 1.0``."""
        return _FACTORS[self]

    def to_sign(self) -> float:
        """Convert ``MIN => -1.0``, ``CENTER => 0.0`` or ``MAX => 1.0``."""
        return _SIGNS[self]

    def align_size_within_range(
        self,
        size: float,
        range: Rangef | tuple[float, float],
    ) -> Rangef:
        """Place content of ``size`` within the closed ``range``.

        Examples::

            Align.MIN.align_size_within_range(2.0, (10.0, 20.0))     # [10, 12]
            Align.CENTER.align_size_within_range(2.0, (10.0, 20.0))  # [14, 16]
            Align.MAX.align_size_within_range(2.0, (10.0, 20.0))     # [18, 20]

        An infinite size fills the unbounded side(s)::

            Align.MIN.align_size_within_range(inf, (10.0, 20.0))     # [10, inf]
            Align.CENTER.align_size_within_range(inf, (10.0, 20.0))  # [-inf, inf]
            Align.MAX.align_size_within_range(inf, (10.0, 20.0))     # [-inf, 20]

        Degenerate input (negative size, inverted range) is not rejected.
        """
        r = Rangef.from_pair(range)
        if self is Align.MIN:
            return Rangef(r.min, r.min + size)
        if self is Align.MAX:
            return Rangef(r.max - size, r.max)
        # inf - inf would give NaN
        if size == np.inf:
            return Rangef(-np.inf, np.inf)
        left = (r.min + r.max) / 2.0 - size / 2.0
        return Rangef(left, left + size)

    def align_sizes_within_range(
        self,
        sizes: np.ndarray | list[float],
        range: Rangef | tuple[float, float],
    ) -> tuple[np.ndarray, np.ndarray]:
        """Vectorized ``align_size_within_range`` over an array of sizes.

        Returns ``(starts, ends)`` as float64 arrays, element-wise equal to
        the scalar results.
        """
        r = Rangef.from_pair(range)
        sizes = np.asarray(sizes, dtype=np.float64)
        # inf - inf gives NaN silently, as in the scalar form
        with np.errstate(invalid="ignore"):
            if self is Align.MIN:
                starts = np.full(sizes.shape, r.min, dtype=np.float64)
                return starts, r.min + sizes
            if self is Align.MAX:
                ends = np.full(sizes.shape, r.max, dtype=np.float64)
                return r.max - sizes, ends

            infinite = sizes == np.inf
            left = (r.min + r.max) / 2.0 - sizes / 2.0
            right = left + sizes
        starts = np.where(infinite, -np.inf, left)
        ends = np.where(infinite, np.inf, right)
        return starts, ends


_FACTORS = {Align.MIN: 0.0, Align.CENTER: 0.5, Align.MAX: 1.0}
_SIGNS = {Align.MIN: -1.0, Align.CENTER: 0.0, Align.MAX: 1.0}

DEFAULT_ALIGN = Align.MIN
