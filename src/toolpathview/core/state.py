"""Modal interpreter state carried from one line to the next."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from .toolpath.base import ORIGIN, Plane, Position


class MotionCommand(Enum):
    """Latched motion mode (modal group 1)."""
    NONE = None
    RAPID = 0       # G0
    LINEAR = 1      # G1
    ARC_CW = 2      # G2
    ARC_CCW = 3     # G3

    @property
    def is_arc(self) -> bool:
        return self in (MotionCommand.ARC_CW, MotionCommand.ARC_CCW)

    @property
    def is_travel(self) -> bool:
        return self is MotionCommand.RAPID


# G codes other than motion that the interpreter acts on
PLANE_CODES = {17: Plane.XY, 18: Plane.ZX, 19: Plane.YZ}
ABSOLUTE_CODE = 90
INCREMENTAL_CODE = 91
SET_ORIGIN_CODE = 92


def motion_for_code(code: float) -> Optional[MotionCommand]:
    """Return the motion command for a G number, or None."""
    if code in (0, 1, 2, 3):
        return MotionCommand(int(code))
    return None


@dataclass
class ParserState:
    """Mutable state owned by a single parse.

    Never share one instance between concurrent parses.
    """

    position: Position = field(default=ORIGIN)
    absolute_mode: bool = True          # G90 / G91
    plane: Plane = Plane.XY             # G17 / G18 / G19
    last_motion: MotionCommand = MotionCommand.NONE
    origin_established: bool = False    # set by G92

    def resolve_target(self, axes: dict[int, float]) -> Position:
        """Apply axis words to the current position under the active mode."""
        coords = list(self.position)
        for index, value in axes.items():
            coords[index] = value if self.absolute_mode else coords[index] + value
        return Position(*coords)
