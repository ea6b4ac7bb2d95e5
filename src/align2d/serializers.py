"""Serializers: convert alignments to and from JSON.

An ``Align`` is written as its snake_case name (``"min"``, ``"center"``,
``"max"``); an ``Align2`` as a two-element list, horizontal first.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from .layout.align import Align
from .layout.align2 import Align2

logger = logging.getLogger(__name__)

_NAMES = [a.value for a in Align]


def align_to_name(align: Align) -> str:
    return align.value


def align2_to_names(align2: Align2) -> list[str]:
    return [align2.horizontal.value, align2.vertical.value]


def align_from_name(name: Any) -> Align:
    """Parse an ``Align`` from its serialized name."""
    if not isinstance(name, str):
        logger.debug("Rejected non-string align name: %r", name)
        raise TypeError(
            f"Align name must be a string, got {type(name).__name__}."
        )
    try:
        return Align(name)
    except ValueError:
        logger.debug("Rejected unknown align name: %r", name)
        raise ValueError(
            f"Unknown align '{name}'. Use one of {_NAMES}."
        ) from None


def align2_from_names(names: Any) -> Align2:
    """Parse an ``Align2`` from a ``[horizontal, vertical]`` pair of names."""
    if not isinstance(names, (list, tuple)):
        logger.debug("Rejected non-sequence align2 value: %r", names)
        raise TypeError(
            f"Align2 must be a list of two names, got {type(names).__name__}."
        )
    if len(names) != 2:
        logger.debug("Rejected align2 value of length %d", len(names))
        raise ValueError(
            f"Align2 must have exactly 2 names (horizontal, vertical), "
            f"got {len(names)}."
        )
    return Align2(align_from_name(names[0]), align_from_name(names[1]))


def serialize_align(align: Align) -> str:
    """Serialize an ``Align`` as a JSON string."""
    return json.dumps(align_to_name(align))


def serialize_align2(align2: Align2) -> str:
    """Serialize an ``Align2`` as a JSON string."""
    return json.dumps(align2_to_names(align2))


def _loads(text: str) -> Any:
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        logger.debug("Rejected malformed JSON: %s", e)
        raise ValueError(f"Invalid JSON for alignment: {e.msg}") from None


def deserialize_align(text: str) -> Align:
    return align_from_name(_loads(text))


def deserialize_align2(text: str) -> Align2:
    return align2_from_names(_loads(text))
