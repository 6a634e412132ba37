from dataclasses import dataclass, field
from typing import List, Optional, Sequence

# MediaPipe Pose landmark order (33 slots).
LANDMARK_NAMES = [
    "nose",
    "left_eye_inner",
    "left_eye",
    "left_eye_outer",
    "right_eye_inner",
    "right_eye",
    "right_eye_outer",
    "left_ear",
    "right_ear",
    "mouth_left",
    "mouth_right",
    "left_shoulder",
    "right_shoulder",
    "left_elbow",
    "right_elbow",
    "left_wrist",
    "right_wrist",
    "left_pinky",
    "right_pinky",
    "left_index",
    "right_index",
    "left_thumb",
    "right_thumb",
    "left_hip",
    "right_hip",
    "left_knee",
    "right_knee",
    "left_ankle",
    "right_ankle",
    "left_heel",
    "right_heel",
    "left_foot_index",
    "right_foot_index",
]

NUM_LANDMARKS = len(LANDMARK_NAMES)
LANDMARK_INDEX = {name: idx for idx, name in enumerate(LANDMARK_NAMES)}


@dataclass
class Landmark:
    x: float
    y: float
    z: float = 0.0
    visibility: float = 0.0


@dataclass
class DerivedPoint:
    # Synthetic point (e.g. mid-shoulder); carries no visibility of its own.
    x: float
    y: float
    z: float = 0.0


Frame = Sequence[Optional[Landmark]]


@dataclass
class PoseFrame:
    timestamp: float
    landmarks: List[Optional[Landmark]] = field(default_factory=lambda: [None] * NUM_LANDMARKS)
    valid: bool = True


def landmark_at(frame: Frame, index: int) -> Optional[Landmark]:
    if index < 0 or index >= len(frame):
        return None
    return frame[index]
