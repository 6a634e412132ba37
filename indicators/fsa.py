from typing import Optional

from config import StatusBand
from geometry import angle_to_vertical
from indicators.base import IndicatorBase, RawReading, present_mean_visibility
from landmarks import PostureLandmarks


class ForwardShoulderIndicator(IndicatorBase):
    name = "fsa"
    # left_hip is optional: it only feeds the confidence.
    required_points = ["left_shoulder", "right_shoulder"]

    def __init__(self, band: Optional[StatusBand] = None):
        super().__init__(band or StatusBand(good=15.0, warn=20.0))

    def measure(self, lm: PostureLandmarks) -> Optional[RawReading]:
        angle = angle_to_vertical(lm.neck, lm.left_shoulder)
        if angle is None:
            return None
        # Left hip only feeds the confidence, not the angle.
        confidence = present_mean_visibility([lm.left_shoulder, lm.right_shoulder, lm.left_hip])
        return RawReading(angle=angle, confidence=confidence)
