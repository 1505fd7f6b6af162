"""Geometry evaluation of instruction sequences.

Walks the instructions of a path once, resolving relative coordinates against
the current point, and produces the legacy (VML-style) re-encoding together
with the bounding box of the path.

Re-encoding grammar (absolute coordinates):
    m x,y                       move
    l x,y                       line
    c x1,y1,x2,y2,x,y           cubic curve (quadratic curves get promoted)
    wa l,t,r,b,sx,sy,ex,ey      clockwise arc inside ellipse rectangle l,t,r,b
    at l,t,r,b,sx,sy,ex,ey      counter-clockwise arc
    x                           close subpath
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

from artpath.arc import resolve_arc
from artpath.common import InstructionKind
from artpath.geom import ArtBox, GeomMath
from artpath.instruction import PathInstruction, format_number

logger = logging.getLogger(__name__)


###############################################################################
# EvaluationState
###############################################################################


@dataclass
class EvaluationState:
    """Transient state of one evaluation pass.

    Attributes:
        x, y: Current point
        subpath_start: Target of the next close; None if no subpath is open
        cubic_control: Last control point of a preceding C/S instruction
        quadratic_control: Control point of a preceding Q/T instruction
        bounds_x, bounds_y: Coordinates contributing to the bounding box
    """

    x: float = 0.0
    y: float = 0.0
    subpath_start: Optional[Tuple[float, float]] = None
    cubic_control: Optional[Tuple[float, float]] = None
    quadratic_control: Optional[Tuple[float, float]] = None
    bounds_x: List[float] = field(default_factory=list)
    bounds_y: List[float] = field(default_factory=list)

    @property
    def point(self) -> Tuple[float, float]:
        """The current point."""
        return (self.x, self.y)


###############################################################################
# PathExtrapolator
###############################################################################


class PathExtrapolator:
    """Evaluates an instruction sequence into re-encoded text and a bounding box.

    If a _precision_ is given, every emitted number is multiplied by it and
    rounded half up (fixed-point coordinates). Bounds are always tracked in
    unscaled units.
    """

    def __init__(self, precision: Optional[float] = None):
        self.precision = precision
        self._state = EvaluationState()
        self._parts: List[str] = []

    @classmethod
    def evaluate(
        cls, instructions: Sequence[PathInstruction], precision: Optional[float] = None
    ) -> Tuple[str, ArtBox]:
        """Return the re-encoded path and its bounding box.

        Args:
            instructions: Instruction sequence to evaluate
            precision: Optional fixed-point factor for the emitted coordinates

        Returns:
            Tuple[str, ArtBox]: the re-encoding and the bounding box; an empty
                sequence gives an empty string and the all-zero box.
        """
        extrapolator = cls(precision)
        for instruction in instructions:
            extrapolator._step(instruction)
        state = extrapolator._state
        return "".join(extrapolator._parts), ArtBox.from_points(state.bounds_x, state.bounds_y)

    ###########################################################################
    # Emitting
    ###########################################################################

    def _num(self, value: float) -> str:
        return format_number(GeomMath.scale_round(value, self.precision))

    def _emit(self, command: str, *values: float) -> None:
        self._parts.append(command + ",".join(self._num(value) for value in values))

    def _track(self, x: float, y: float) -> None:
        self._state.bounds_x.append(x)
        self._state.bounds_y.append(y)

    ###########################################################################
    # Instructions
    ###########################################################################

    def _step(self, instruction: PathInstruction) -> None:
        state = self._state
        kind = instruction.kind
        v = instruction.values
        ref_x, ref_y = (state.x, state.y) if instruction.relative else (0.0, 0.0)

        if kind is not InstructionKind.MOVE_TO and state.subpath_start is None:
            # Drawing without a preceding move starts an implicit subpath here
            state.subpath_start = state.point
            self._track(state.x, state.y)

        cubic_control: Optional[Tuple[float, float]] = None
        quadratic_control: Optional[Tuple[float, float]] = None

        if kind is InstructionKind.MOVE_TO:
            self._move(ref_x + v[0], ref_y + v[1])
            state.subpath_start = state.point
        elif kind is InstructionKind.LINE_TO:
            self._line(ref_x + v[0], ref_y + v[1])
        elif kind is InstructionKind.HORIZONTAL_LINE_TO:
            self._line(ref_x + v[0], state.y)
        elif kind is InstructionKind.VERTICAL_LINE_TO:
            self._line(state.x, ref_y + v[0])
        elif kind is InstructionKind.CUBIC_CURVE_TO:
            first = (ref_x + v[0], ref_y + v[1])
            cubic_control = (ref_x + v[2], ref_y + v[3])
            self._curve(first, cubic_control, (ref_x + v[4], ref_y + v[5]))
        elif kind is InstructionKind.SMOOTH_CURVE_TO:
            first = self._reflect(state.cubic_control)
            cubic_control = (ref_x + v[0], ref_y + v[1])
            self._curve(first, cubic_control, (ref_x + v[2], ref_y + v[3]))
        elif kind is InstructionKind.QUADRATIC_CURVE_TO:
            quadratic_control = (ref_x + v[0], ref_y + v[1])
            self._curve(quadratic_control, quadratic_control, (ref_x + v[2], ref_y + v[3]))
        elif kind is InstructionKind.SMOOTH_QUADRATIC_TO:
            quadratic_control = self._reflect(state.quadratic_control)
            self._curve(quadratic_control, quadratic_control, (ref_x + v[0], ref_y + v[1]))
        elif kind is InstructionKind.ARC_TO:
            self._arc(v, ref_x + v[5], ref_y + v[6])
        elif kind is InstructionKind.CLOSE_PATH:
            self._close()
        else:
            raise NotImplementedError(f"Unhandled instruction kind {kind}")

        state.cubic_control = cubic_control
        state.quadratic_control = quadratic_control

    def _reflect(self, control: Optional[Tuple[float, float]]) -> Tuple[float, float]:
        """Reflect _control_ across the current point; the current point if there is no control."""
        if control is None:
            return self._state.point
        return GeomMath.reflect_point(control, self._state.point)

    def _move(self, x: float, y: float) -> None:
        state = self._state
        state.x, state.y = x, y
        self._track(x, y)
        self._emit("m", x, y)

    def _line(self, x: float, y: float) -> None:
        state = self._state
        state.x, state.y = x, y
        self._track(x, y)
        self._emit("l", x, y)

    def _curve(
        self, first: Tuple[float, float], second: Tuple[float, float], end: Tuple[float, float]
    ) -> None:
        # Only the end point contributes to the bounds, control points do not.
        state = self._state
        state.x, state.y = end
        self._track(*end)
        self._emit("c", *first, *second, *end)

    def _arc(self, v: Tuple[float, ...], end_x: float, end_y: float) -> None:
        state = self._state
        start_x, start_y = state.x, state.y
        geometry = resolve_arc(v[0], v[1], v[2], v[3], v[4], end_x - start_x, end_y - start_y, start_x, start_y)
        if geometry is None:
            logger.debug("Degenerate arc to (%g, %g) drawn as line", end_x, end_y)
            self._line(end_x, end_y)
            return

        state.bounds_x.extend(geometry.bounds_x)
        state.bounds_y.extend(geometry.bounds_y)
        self._track(end_x, end_y)
        state.x, state.y = end_x, end_y
        self._emit("wa" if v[4] else "at", *geometry.circle, start_x, start_y, end_x, end_y)

    def _close(self) -> None:
        state = self._state
        self._parts.append("x")
        if state.subpath_start is not None:
            self._move(*state.subpath_start)
            state.subpath_start = None
