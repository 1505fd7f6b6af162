"""Central module containing constants and definitions for path command processing."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum, auto
from typing import Literal, Optional

###############################################################################
# Types
###############################################################################


ArtPathCmds = Literal[  # Type-Definition for path commands; uppercase = absolute, lowercase = relative
    # MoveTo (2) - start a new subpath and move the current point to (x,y)
    "M",
    # LineTo (2) - draw a straight line from the current point to (x,y)
    "L",
    # Horizontal LineTo (1) - draw a horizontal line to the given x coordinate
    "H",
    # Vertical LineTo (1) - draw a vertical line to the given y coordinate
    "V",
    # Cubic Bezier To (6) - draw a cubic Bezier curve with two control points and an endpoint (x,y)
    "C",
    # Smooth cubic Bezier To (4) - cubic curve using the reflection of the previous cubic control point
    "S",
    # Quadratic Bezier To (4) - draw a quadratic Bezier curve with one control point and an endpoint (x,y)
    "Q",
    # Smooth quadratic Bezier To (2) - quadratic curve using the reflection of the previous control point
    "T",
    # Arc (7) - elliptical arc (rx ry x-axis-rotation large-arc-flag sweep-flag x y)
    "A",
    # ClosePath (0) - close subpath by drawing a line from the current point to start point
    "Z",
]


###############################################################################
# Enums and Consts
###############################################################################


class InstructionKind(Enum):
    """Enum of all drawing instruction kinds a path may contain."""

    MOVE_TO = auto()
    LINE_TO = auto()
    HORIZONTAL_LINE_TO = auto()
    VERTICAL_LINE_TO = auto()
    CUBIC_CURVE_TO = auto()
    SMOOTH_CURVE_TO = auto()
    QUADRATIC_CURVE_TO = auto()
    SMOOTH_QUADRATIC_TO = auto()
    ARC_TO = auto()
    CLOSE_PATH = auto()


@dataclass(frozen=True)
class CommandInfo:
    """Metadata for path commands.

    Attributes:
        kind: Instruction kind represented by the command letter
        arity: Number of values one instruction of this command carries
        is_curve: Whether this command represents a curve
    """

    kind: InstructionKind
    arity: int
    is_curve: bool = False


# Command registry with metadata (keyed by the uppercase letter)
COMMAND_INFO = {
    "M": CommandInfo(InstructionKind.MOVE_TO, 2),
    "L": CommandInfo(InstructionKind.LINE_TO, 2),
    "H": CommandInfo(InstructionKind.HORIZONTAL_LINE_TO, 1),
    "V": CommandInfo(InstructionKind.VERTICAL_LINE_TO, 1),
    "C": CommandInfo(InstructionKind.CUBIC_CURVE_TO, 6, True),
    "S": CommandInfo(InstructionKind.SMOOTH_CURVE_TO, 4, True),
    "Q": CommandInfo(InstructionKind.QUADRATIC_CURVE_TO, 4, True),
    "T": CommandInfo(InstructionKind.SMOOTH_QUADRATIC_TO, 2, True),
    "A": CommandInfo(InstructionKind.ARC_TO, 7, True),
    "Z": CommandInfo(InstructionKind.CLOSE_PATH, 0),
}

# Command letters, both cases
PATH_CMDS: str = "MmLlHhVvCcSsQqTtAaZz"

# Fixed-point factor used by the legacy integer-coordinate renderer
DEFAULT_PRECISION: int = 100

FULL_TURN: float = 2.0 * math.pi


###############################################################################
# Exceptions
###############################################################################


class ArtPathError(Exception):
    """Base exception for path-related errors."""


class ParseError(ArtPathError, ValueError):
    """Raised when a path string cannot be parsed.

    Attributes:
        command: The command letter the failing number run belongs to (None if there is none).
        values: The numeric run that failed validation.
    """

    def __init__(self, message: str, command: Optional[str] = None, values: tuple = ()):
        super().__init__(message)
        self.command = command
        self.values = tuple(values)


def command_info(command: str) -> CommandInfo:
    """Return the metadata of the given command letter (either case).

    Raises:
        ValueError: If _command_ is not a path command letter.
    """
    info = COMMAND_INFO.get(command.upper()) if len(command) == 1 else None
    if info is None:
        raise ValueError(f"Unknown path command '{command}'")
    return info
