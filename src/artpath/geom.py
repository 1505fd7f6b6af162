"""Handling geometries"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Sequence, Tuple, Union

import numpy as np


###############################################################################
# GeomMath
###############################################################################
class GeomMath:
    """Class to provide various static methods related to geometry handling."""

    @staticmethod
    def reflect_point(
        point: Sequence[Union[int, float]], center: Sequence[Union[int, float]]
    ) -> Tuple[float, float]:
        """
        Reflect the given 2D _point_ across _center_.

        Used to synthesize the first control point of a smooth curve from the
        previous curve's last control point and the current point.

        Args:
            point (Tuple/List[float]): 2D point to reflect - (x, y)
            center (Tuple/List[float]): 2D point acting as mirror - (x, y)

        Returns:
            Tuple[float, float]: the reflected point (2 * center - point)
        """
        return (float(2 * center[0] - point[0]), float(2 * center[1] - point[1]))

    @staticmethod
    def scale_round(value: float, precision: Optional[float]) -> float:
        """
        Multiply _value_ by _precision_ and round half up to an integer.
        If _precision_ is None the value is returned unchanged.
        """
        if precision is None:
            return value
        return float(np.floor(value * precision + 0.5))


###############################################################################
# ArtBox
###############################################################################
@dataclass(frozen=True)
class ArtBox:
    """
    Axis-aligned bounding box in screen orientation (y grows downwards).

    Attributes:
        left (float): The minimum x-coordinate.
        top (float): The minimum y-coordinate.
        right (float): The maximum x-coordinate.
        bottom (float): The maximum y-coordinate.
    """

    left: float = 0.0
    top: float = 0.0
    right: float = 0.0
    bottom: float = 0.0

    def __post_init__(self):
        # Normalize coordinates to ensure left <= right and top <= bottom
        left, right = sorted((float(self.left), float(self.right)))
        top, bottom = sorted((float(self.top), float(self.bottom)))
        object.__setattr__(self, "left", left)
        object.__setattr__(self, "right", right)
        object.__setattr__(self, "top", top)
        object.__setattr__(self, "bottom", bottom)

    @property
    def width(self) -> float:
        """float: The width of the box (difference between right and left)."""
        return self.right - self.left

    @property
    def height(self) -> float:
        """float: The height of the box (difference between bottom and top)."""
        return self.bottom - self.top

    @property
    def extent(self) -> Tuple[float, float, float, float]:
        """The extent of the box as Tuple (left, top, right, bottom)."""
        return self.left, self.top, self.right, self.bottom

    @property
    def is_empty(self) -> bool:
        """True if the box has neither width nor height."""
        return self.width == 0.0 and self.height == 0.0

    @classmethod
    def from_points(cls, xs: Sequence[float], ys: Sequence[float]) -> ArtBox:
        """
        Create the tightest box around the given coordinates.
        Returns the all-zero box if no coordinates are given.
        """
        if not len(xs) or not len(ys):
            return cls()
        points_x = np.asarray(xs, dtype=np.float64)
        points_y = np.asarray(ys, dtype=np.float64)
        return cls(points_x.min(), points_y.min(), points_x.max(), points_y.max())

    @classmethod
    def union(cls, boxes: Iterable[Optional[ArtBox]]) -> ArtBox:
        """
        Return the box enclosing all given boxes; None entries are skipped.
        Returns the all-zero box if there is nothing to enclose.
        """
        extents = [box.extent for box in boxes if box is not None]
        if not extents:
            return cls()
        arr = np.asarray(extents, dtype=np.float64)
        return cls(arr[:, 0].min(), arr[:, 1].min(), arr[:, 2].max(), arr[:, 3].max())

    @classmethod
    def from_dict(cls, data: dict) -> ArtBox:
        """Create an ArtBox instance from a dictionary."""
        return cls(
            left=data.get("left", 0.0),
            top=data.get("top", 0.0),
            right=data.get("right", 0.0),
            bottom=data.get("bottom", 0.0),
        )

    def to_dict(self) -> dict:
        """Convert the ArtBox instance to a dictionary."""
        return {
            "left": self.left,
            "top": self.top,
            "right": self.right,
            "bottom": self.bottom,
            "width": self.width,
            "height": self.height,
        }

    def __str__(self):
        """Returns a string representation of the ArtBox instance."""
        return (
            f"ArtBox(left={self.left}, top={self.top}, "
            f"right={self.right}, bottom={self.bottom}, "
            f"width={self.width}, height={self.height})"
        )
