from typing import Optional

from config import StatusBand
from geometry import elevation_from_horizontal
from indicators.base import IndicatorBase, RawReading, present_mean_visibility
from landmarks import PostureLandmarks


class CraniovertebralIndicator(IndicatorBase):
    # Neck -> mid-ear elevation above horizontal; a larger angle is more upright.
    name = "cva"
    required_points = ["left_ear", "right_ear", "left_shoulder", "right_shoulder"]

    def __init__(self, band: Optional[StatusBand] = None):
        super().__init__(band or StatusBand(good=48.0, warn=44.0, higher_is_better=True))

    def measure(self, lm: PostureLandmarks) -> Optional[RawReading]:
        angle = elevation_from_horizontal(lm.neck, lm.mid_ear)
        if angle is None:
            return None
        confidence = present_mean_visibility(
            [lm.left_ear, lm.right_ear, lm.left_shoulder, lm.right_shoulder]
        )
        return RawReading(angle=angle, confidence=confidence)
