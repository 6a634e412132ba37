from dataclasses import dataclass
from typing import Optional

from geometry import midpoint
from pose_types import LANDMARK_INDEX, DerivedPoint, Frame, Landmark, landmark_at


@dataclass
class PostureLandmarks:
    nose: Optional[Landmark]
    left_eye: Optional[Landmark]
    right_eye: Optional[Landmark]
    left_ear: Optional[Landmark]
    right_ear: Optional[Landmark]
    left_shoulder: Optional[Landmark]
    right_shoulder: Optional[Landmark]
    left_hip: Optional[Landmark]
    right_hip: Optional[Landmark]
    neck: Optional[DerivedPoint]
    mid_ear: Optional[DerivedPoint]
    mid_eye: Optional[DerivedPoint]


def extract_landmarks(frame: Frame) -> PostureLandmarks:
    """Pick the upper-body points used by the posture indicators out of a frame.

    Missing slots stay ``None``; a derived point is ``None`` whenever either of
    its two source landmarks is missing. Eyes are the MediaPipe ``left_eye`` (2)
    and ``right_eye`` (5) slots, not the inner-eye points at 1 and 4.
    """
    def pick(name: str) -> Optional[Landmark]:
        return landmark_at(frame, LANDMARK_INDEX[name])

    left_eye = pick("left_eye")
    right_eye = pick("right_eye")
    left_ear = pick("left_ear")
    right_ear = pick("right_ear")
    left_shoulder = pick("left_shoulder")
    right_shoulder = pick("right_shoulder")

    return PostureLandmarks(
        nose=pick("nose"),
        left_eye=left_eye,
        right_eye=right_eye,
        left_ear=left_ear,
        right_ear=right_ear,
        left_shoulder=left_shoulder,
        right_shoulder=right_shoulder,
        left_hip=pick("left_hip"),
        right_hip=pick("right_hip"),
        neck=midpoint(left_shoulder, right_shoulder),
        mid_ear=midpoint(left_ear, right_ear),
        mid_eye=midpoint(left_eye, right_eye),
    )
