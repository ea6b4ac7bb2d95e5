"""align2d: one- and two-axis alignment of boxes within frames."""

import logging

from ._version import __version__
from .layout.align import Align, DEFAULT_ALIGN
from .layout.align2 import Align2, DEFAULT_ALIGN2, center_size_in_rect
from .layout.geometry import Pos2, Rangef, Rect, Vec2
from .serializers import (
    serialize_align,
    deserialize_align,
    serialize_align2,
    deserialize_align2,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    "Align",
    "Align2",
    "DEFAULT_ALIGN",
    "DEFAULT_ALIGN2",
    "center_size_in_rect",
    "Pos2",
    "Rangef",
    "Rect",
    "Vec2",
    "serialize_align",
    "deserialize_align",
    "serialize_align2",
    "deserialize_align2",
]
