"""Path instruction store with lazily derived encodings and bounding box."""

from __future__ import annotations

from typing import Iterable, List, Optional, Tuple, Union

from artpath.common import DEFAULT_PRECISION
from artpath.extrapolator import PathExtrapolator
from artpath.geom import ArtBox
from artpath.instruction import PathInstruction
from artpath.svgpath import ArtSvgPath

Number = Union[int, float]


###############################################################################
# ArtPath
###############################################################################


class ArtPath:
    """Ordered, mutable sequence of drawing instructions.

    A path is created empty, parsed from a path string or copied from another path.
    It changes only by appending one instruction at a time or by a reset.
    Every change drops the cached derived values:
        - the path string (direct encoding, see to_svg),
        - the re-encoding for the legacy renderer (see to_vml),
        - the bounding box (see measure).
    These are computed again on the next read.

    Attributes:
        _instructions: The instructions in drawing order
        _svg: Cached direct encoding
        _vml: Cached re-encoding together with the precision it was computed with
        _box: Cached bounding box
    """

    DEFAULT_PRECISION: int = DEFAULT_PRECISION  # pylint: disable=invalid-name

    def __init__(self, path: Optional[Union[str, ArtPath, Iterable[PathInstruction]]] = None):
        """
        Initialize an ArtPath.

        Args:
            path: None for an empty path, a path string to parse, another ArtPath
                to copy (cached values are taken over), or an iterable of instructions.

        Raises:
            ParseError: if _path_ is a string that cannot be parsed
        """
        self._svg: Optional[str] = None  # caching variable
        self._vml: Optional[Tuple[Optional[float], str]] = None  # caching variable
        self._box: Optional[ArtBox] = None  # caching variable

        if path is None:
            self._instructions: List[PathInstruction] = []
        elif isinstance(path, ArtPath):
            # Instructions are immutable, copying the list is a deep copy
            self._instructions = list(path._instructions)
            self._svg = path._svg
            self._vml = path._vml
            self._box = path._box
        elif isinstance(path, str):
            self._instructions = ArtSvgPath.parse_instructions(path)
        else:
            self._instructions = list(path)

    ###########################################################################
    # Sequence access
    ###########################################################################

    @property
    def instructions(self) -> Tuple[PathInstruction, ...]:
        """The instructions of this path in drawing order (read-only snapshot)."""
        return tuple(self._instructions)

    def __len__(self) -> int:
        return len(self._instructions)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ArtPath):
            return NotImplemented
        return self._instructions == other._instructions

    __hash__ = None  # mutable

    def __copy__(self) -> ArtPath:
        return ArtPath(self)

    def copy(self) -> ArtPath:
        """Return a copy of this path sharing no mutable state with it."""
        return ArtPath(self)

    def __repr__(self) -> str:
        return f"ArtPath({self.to_svg()!r})"

    ###########################################################################
    # Mutation
    ###########################################################################

    def _invalidate(self) -> None:
        self._svg = None
        self._vml = None
        self._box = None

    def push(self, command: str, *values: Number) -> ArtPath:
        """
        Append one instruction; modifying the path resets the cached values.

        Raises:
            ValueError: if _command_ is unknown or the number of _values_ does not match
        """
        instruction = PathInstruction.create(command, *values)
        self._invalidate()
        self._instructions.append(instruction)
        return self

    def reset(self) -> ArtPath:
        """Remove all instructions."""
        self._invalidate()
        self._instructions = []
        return self

    def move(self, x: Number, y: Number) -> ArtPath:
        """Move the current point by (x, y), starting a new subpath."""
        return self.push("m", x, y)

    def line(self, x: Number, y: Number) -> ArtPath:
        """Draw a line to the point at distance (x, y)."""
        return self.push("l", x, y)

    def close(self) -> ArtPath:
        """Close the current subpath."""
        return self.push("z")

    def bezier(self, c1x: Number, c1y: Number, c2x: Number, c2y: Number, ex: Number, ey: Number) -> ArtPath:
        """Draw a cubic Bezier curve; all points are distances from the current point."""
        return self.push("c", c1x, c1y, c2x, c2y, ex, ey)

    def arc(
        self, x: Number, y: Number, rx: Optional[Number] = None, ry: Optional[Number] = None, large: bool = False
    ) -> ArtPath:
        """
        Draw a clockwise elliptical arc to the point at distance (x, y).

        Args:
            x, y: Distance of the end point from the current point
            rx: x-radius. Defaults to |x|.
            ry: y-radius. Defaults to |rx| if given, else |y|.
            large: True to draw the arc spanning more than 180 degrees
        """
        return self.push("a", *self._arc_radii(x, y, rx, ry), 0, 1 if large else 0, 1, x, y)

    def counter_arc(
        self, x: Number, y: Number, rx: Optional[Number] = None, ry: Optional[Number] = None, large: bool = False
    ) -> ArtPath:
        """Draw a counter-clockwise elliptical arc; see arc() for the arguments."""
        return self.push("a", *self._arc_radii(x, y, rx, ry), 0, 1 if large else 0, 0, x, y)

    @staticmethod
    def _arc_radii(x: Number, y: Number, rx: Optional[Number], ry: Optional[Number]) -> Tuple[float, float]:
        radius_x = abs(rx or x)
        radius_y = abs(ry or rx or y)
        return float(radius_x), float(radius_y)

    ###########################################################################
    # Encodings and measurement
    ###########################################################################

    def to_svg(self) -> str:
        """Return the path string of this path (instructions serialized unchanged)."""
        if self._svg is None:
            self._svg = ArtSvgPath.encode(self._instructions)
        return self._svg

    def __str__(self) -> str:
        return self.to_svg()

    def _evaluate(self, precision: Optional[float]) -> None:
        vml, box = PathExtrapolator.evaluate(self._instructions, precision)
        self._vml = (precision, vml)
        self._box = box

    def to_vml(self, precision: Optional[float] = None) -> str:
        """
        Return the re-encoding of this path for the legacy renderer.

        Args:
            precision: Optional fixed-point factor, coordinates are multiplied by
                it and rounded to integers (the legacy renderer uses DEFAULT_PRECISION).
        """
        if self._vml is None or self._vml[0] != precision:
            self._evaluate(precision)
        return self._vml[1]

    def measure(self, precision: Optional[float] = None) -> ArtBox:
        """
        Return the bounding box of this path in unscaled units.

        Args:
            precision: Fixed-point factor for the re-encoding computed along with the box.
                It has no effect on the box itself.
        """
        if self._box is None:
            self._evaluate(precision)
        return self._box

    @classmethod
    def measure_paths(cls, paths: Iterable[Optional[ArtPath]]) -> ArtBox:
        """Return the box enclosing all given paths; None entries are skipped."""
        return ArtBox.union(path.measure() for path in paths if path is not None)

    ###########################################################################
    # Serialization
    ###########################################################################

    @classmethod
    def from_dict(cls, data: dict) -> ArtPath:
        """Create an ArtPath instance from a dictionary."""
        path = cls(data.get("path", ""))
        if data.get("bounding_box") is not None:
            path._box = ArtBox.from_dict(data["bounding_box"])
        return path

    def to_dict(self) -> dict:
        """Convert the ArtPath instance to a dictionary."""
        bbox_dict = None
        if self._box is not None:
            bbox_dict = self._box.to_dict()

        return {
            "path": self.to_svg(),
            "bounding_box": bbox_dict,
        }
