import math

import pytest

from pose_types import LANDMARK_INDEX, NUM_LANDMARKS, Landmark


def build_frame(points):
    frame = [None] * NUM_LANDMARKS
    for name, value in points.items():
        if value is None:
            continue
        if isinstance(value, Landmark):
            frame[LANDMARK_INDEX[name]] = value
            continue
        x, y = value[0], value[1]
        visibility = value[2] if len(value) > 2 else 1.0
        frame[LANDMARK_INDEX[name]] = Landmark(x, y, 0.0, visibility)
    return frame


def head_points(tilt_deg, mid_ear=(0.5, 0.3), length=0.1, visibility=1.0):
    """Ears and eyes such that mid_ear -> mid_eye leans ``tilt_deg`` from vertical."""
    ex, ey = mid_ear
    mx = ex + length * math.sin(math.radians(tilt_deg))
    my = ey - length * math.cos(math.radians(tilt_deg))
    return {
        "left_ear": (ex - 0.05, ey, visibility),
        "right_ear": (ex + 0.05, ey, visibility),
        "left_eye": (mx - 0.02, my, visibility),
        "right_eye": (mx + 0.02, my, visibility),
    }


def shoulder_points(tilt_deg, neck=(0.5, 0.5), half_width=0.1, visibility=1.0):
    """Shoulders symmetric about ``neck`` with neck -> left shoulder ``tilt_deg`` from vertical."""
    nx, ny = neck
    dx = half_width * math.sin(math.radians(tilt_deg))
    dy = -half_width * math.cos(math.radians(tilt_deg))
    return {
        "left_shoulder": (nx + dx, ny + dy, visibility),
        "right_shoulder": (nx - dx, ny - dy, visibility),
    }


@pytest.fixture
def make_frame():
    return build_frame


@pytest.fixture
def upright_frame():
    # Ears straight above the shoulder midpoint, head tilted 12 deg.
    points = {
        "left_shoulder": (0.4, 0.5),
        "right_shoulder": (0.6, 0.5),
        "left_hip": (0.42, 0.9),
        "right_hip": (0.58, 0.9),
        "nose": (0.5, 0.22),
    }
    points.update(head_points(12.0))
    return build_frame(points)
