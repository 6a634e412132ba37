import math
from typing import Optional, Union

from pose_types import DerivedPoint, Landmark

Point = Union[Landmark, DerivedPoint]

# Image "up": y grows downward in normalized image coordinates.
_UP = (0.0, -1.0)


def midpoint(a: Optional[Point], b: Optional[Point]) -> Optional[DerivedPoint]:
    if a is None or b is None:
        return None
    return DerivedPoint(
        (a.x + b.x) / 2.0,
        (a.y + b.y) / 2.0,
        (a.z + b.z) / 2.0,
    )


def angle_to_vertical(a: Optional[Point], b: Optional[Point]) -> Optional[float]:
    # Angle between (b - a) and image-up, in [0, 180].
    if a is None or b is None:
        return None
    dx = b.x - a.x
    dy = b.y - a.y
    mag = math.hypot(dx, dy)
    if mag == 0.0:
        return None
    dot = dx * _UP[0] + dy * _UP[1]
    cos_theta = max(-1.0, min(1.0, dot / mag))
    return math.degrees(math.acos(cos_theta))


def elevation_from_horizontal(origin: Optional[Point], target: Optional[Point]) -> Optional[float]:
    # Unsigned angle of (target - origin) above/below the horizontal axis, in [0, 180].
    # The y term is negated so that "up" in the image is a positive angle.
    if origin is None or target is None:
        return None
    dx = target.x - origin.x
    dy = target.y - origin.y
    if dx == 0.0 and dy == 0.0:
        return None
    return abs(math.degrees(math.atan2(-dy, dx)))
