"""Split a cleaned G-code line into typed address fields.

Each whitespace-separated word is a letter followed by a number, e.g.
``G1`` or ``X-12.5``.  Letters outside the motion vocabulary (F, S, T, M,
...) are kept as ``FieldKind.OTHER`` so callers can see them, but the
motion interpreter ignores them.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional

logger = logging.getLogger(__name__)


class FieldKind(Enum):
    """Address letters the motion interpreter understands."""
    G = "G"          # motion / mode code
    X = "X"
    Y = "Y"
    Z = "Z"
    I = "I"          # arc center offset along X
    J = "J"          # arc center offset along Y
    K = "K"          # arc center offset along Z
    R = "R"          # arc radius
    OTHER = "?"

    @property
    def is_axis(self) -> bool:
        return self in _AXES

    @property
    def is_offset(self) -> bool:
        return self in _OFFSETS


_AXES = frozenset({FieldKind.X, FieldKind.Y, FieldKind.Z})
_OFFSETS = frozenset({FieldKind.I, FieldKind.J, FieldKind.K})
_BY_LETTER = {k.value: k for k in FieldKind if k is not FieldKind.OTHER}

# Axis index (0=X, 1=Y, 2=Z) for axis and offset letters
AXIS_INDEX = {
    FieldKind.X: 0, FieldKind.Y: 1, FieldKind.Z: 2,
    FieldKind.I: 0, FieldKind.J: 1, FieldKind.K: 2,
}


@dataclass(frozen=True)
class Field:
    """One parsed address word."""
    kind: FieldKind
    letter: str
    value: float

    def __str__(self) -> str:
        return f"{self.letter}{self.value:g}"


def parse_field(word: str) -> Optional[Field]:
    """Parse one word, or return None when its number is unusable."""
    letter = word[0].upper()
    try:
        value = float(word[1:])
    except ValueError:
        logger.debug(f"Dropping unparseable field {word!r}")
        return None
    if not math.isfinite(value):
        logger.debug(f"Dropping non-finite field {word!r}")
        return None
    return Field(_BY_LETTER.get(letter, FieldKind.OTHER), letter, value)


def parse_fields(line: str) -> list[Field]:
    """Parse every word of a cleaned line, in order."""
    fields: list[Field] = []
    for word in line.split():
        f = parse_field(word)
        if f is not None:
            fields.append(f)
    return fields
