"""Elliptical arc resolution: endpoint parameterization to center parameterization.

See http://www.w3.org/TR/SVG/implnote.html#ArcImplementationNotes for the
general conversion. Angles are measured in the ellipse's own frame,
point = center + (rx * cos(t), ry * sin(t)), with y pointing downwards,
so an increasing angle walks clockwise on screen (sweep flag 1).
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Optional, Tuple

from artpath.common import FULL_TURN

logger = logging.getLogger(__name__)

# Angles of the four cardinal extrema of an axis-aligned ellipse
ANGLE_RIGHT: float = 0.0
ANGLE_BOTTOM: float = math.pi / 2
ANGLE_LEFT: float = math.pi
ANGLE_TOP: float = 3 * math.pi / 2


###############################################################################
# ArcGeometry
###############################################################################


@dataclass(frozen=True)
class ArcGeometry:
    """Center parameterization of an elliptical arc in absolute coordinates.

    Attributes:
        center: Center of the ellipse (x, y)
        radii: Radii (rx, ry), enlarged if the given ones could not span the chord
        start_angle: Angle where the clockwise walk along the arc begins, in [0, 2*pi)
        end_angle: Angle where the clockwise walk ends, in [start_angle, start_angle + 2*pi)
        circle: Enclosing rectangle of the full ellipse (left, top, right, bottom)
        bounds_x: x-coordinates contributed to a bounding box (left, right)
        bounds_y: y-coordinates contributed to a bounding box (top, bottom)
    """

    center: Tuple[float, float]
    radii: Tuple[float, float]
    start_angle: float
    end_angle: float
    circle: Tuple[float, float, float, float]
    bounds_x: Tuple[float, float]
    bounds_y: Tuple[float, float]

    def covers(self, angle: float) -> bool:
        """Return True if the cardinal _angle_ (in [0, 2*pi)) lies strictly inside the arc."""
        return covers_angle(self.start_angle, self.end_angle, angle)


def covers_angle(start_angle: float, end_angle: float, angle: float) -> bool:
    """Half-open test whether _angle_ is passed by the walk from _start_angle_ to _end_angle_.

    _start_angle_ must be in [0, 2*pi) and _end_angle_ in [start_angle, start_angle + 2*pi).
    An angle exactly on one of the arc's ends does not count; the end point itself
    is already part of the bounds.
    """
    return start_angle < angle < end_angle or angle + FULL_TURN < end_angle


def resolve_arc(
    rx: float,
    ry: float,
    rotation: float,
    large: float,
    sweep: float,
    dx: float,
    dy: float,
    start_x: float = 0.0,
    start_y: float = 0.0,
) -> Optional[ArcGeometry]:
    """
    Compute the center parameterization of an arc starting at (_start_x_, _start_y_)
    and ending at (_start_x_ + _dx_, _start_y_ + _dy_).

    _rotation_ is accepted for signature compatibility with the path command
    but not applied, the ellipse axes stay aligned with x and y.

    Args:
        rx (float): x-radius
        ry (float): y-radius
        rotation (float): x-axis-rotation in degrees (ignored)
        large (float): large-arc flag (0 or 1)
        sweep (float): sweep flag, 1 = clockwise, 0 = counter-clockwise
        dx (float): x-distance from start point to end point
        dy (float): y-distance from start point to end point
        start_x (float): absolute x of the start point. Defaults to 0.
        start_y (float): absolute y of the start point. Defaults to 0.

    Returns:
        Optional[ArcGeometry]: None if the arc degrades to a straight line
            (zero radius or end point equal to start point).
    """
    rx, ry = abs(rx), abs(ry)
    if not rx or not ry or (dx == 0 and dy == 0):
        return None

    # Center relative to the start point, starting from the chord's midpoint
    cx, cy = dx / 2, dy / 2
    rxry = rx * rx * ry * ry
    rycx = ry * ry * cx * cx
    rxcy = rx * rx * cy * cy
    a = rxry - rycx - rxcy

    if a < 0:
        # Radii too small for the chord: scale them up, center stays on the midpoint
        scale = math.sqrt(1 - a / rxry)
        logger.debug("Arc radii (%g, %g) too small, scaled by %g", rx, ry, scale)
        rx *= scale
        ry *= scale
    else:
        a = math.sqrt(a / (rxcy + rycx))
        if bool(large) == bool(sweep):
            a = -a
        cx, cy = cx - a * cy * rx / ry, cy + a * cx * ry / rx

    center_x, center_y = start_x + cx, start_y + cy
    end_x, end_y = start_x + dx, start_y + dy

    angle_start = math.atan2((start_y - center_y) / ry, (start_x - center_x) / rx)
    angle_end = math.atan2((end_y - center_y) / ry, (end_x - center_x) / rx)
    if not sweep:
        # Counter-clockwise from start to end is clockwise from end to start
        angle_start, angle_end = angle_end, angle_start
    extent = (angle_end - angle_start) % FULL_TURN
    angle_start %= FULL_TURN
    angle_end = angle_start + extent

    def on_arc(angle: float) -> bool:
        return covers_angle(angle_start, angle_end, angle)

    left = center_x - rx if on_arc(ANGLE_LEFT) else start_x
    right = center_x + rx if on_arc(ANGLE_RIGHT) else start_x
    top = center_y - ry if on_arc(ANGLE_TOP) else start_y
    bottom = center_y + ry if on_arc(ANGLE_BOTTOM) else start_y

    return ArcGeometry(
        center=(center_x, center_y),
        radii=(rx, ry),
        start_angle=angle_start,
        end_angle=angle_end,
        circle=(center_x - rx, center_y - ry, center_x + rx, center_y + ry),
        bounds_x=(left, right),
        bounds_y=(top, bottom),
    )

