"""Shared test fixtures for align2d."""

import pytest

from align2d.layout.align import Align
from align2d.layout.align2 import Align2
from align2d.layout.geometry import Pos2, Rect, Vec2


@pytest.fixture
def frame():
    """100x50 frame offset from the origin."""
    return Rect.from_min_size(Pos2(10.0, 20.0), Vec2(100.0, 50.0))


@pytest.fixture
def box_size():
    return Vec2(20.0, 10.0)


@pytest.fixture
def named_align2():
    """All nine named Align2 constants with their expected components."""
    return {
        "LEFT_TOP": (Align2.LEFT_TOP, Align.MIN, Align.MIN),
        "LEFT_CENTER": (Align2.LEFT_CENTER, Align.MIN, Align.CENTER),
        "LEFT_BOTTOM": (Align2.LEFT_BOTTOM, Align.MIN, Align.MAX),
        "CENTER_TOP": (Align2.CENTER_TOP, Align.CENTER, Align.MIN),
        "CENTER_CENTER": (Align2.CENTER_CENTER, Align.CENTER, Align.CENTER),
        "CENTER_BOTTOM": (Align2.CENTER_BOTTOM, Align.CENTER, Align.MAX),
        "RIGHT_TOP": (Align2.RIGHT_TOP, Align.MAX, Align.MIN),
        "RIGHT_CENTER": (Align2.RIGHT_CENTER, Align.MAX, Align.CENTER),
        "RIGHT_BOTTOM": (Align2.RIGHT_BOTTOM, Align.MAX, Align.MAX),
    }
