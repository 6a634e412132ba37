from typing import Optional

from config import StatusBand
from geometry import angle_to_vertical
from indicators.base import IndicatorBase, RawReading, fixed_mean_visibility
from landmarks import PostureLandmarks


class NeckFlexionIndicator(IndicatorBase):
    """Head pitch: tilt of the mid-ear -> mid-eye line away from image vertical.

    This is the only indicator the user calibration applies to. Its confidence
    divides by all four ear/eye landmarks even when some are missing, unlike
    CVA and FSA which average only the landmarks that are present.
    """

    name = "neck_flexion"
    required_points = ["left_ear", "right_ear", "left_eye", "right_eye"]

    def __init__(self, band: Optional[StatusBand] = None):
        super().__init__(band or StatusBand(good=15.0, warn=20.0))

    def measure(self, lm: PostureLandmarks) -> Optional[RawReading]:
        angle = angle_to_vertical(lm.mid_ear, lm.mid_eye)
        if angle is None:
            return None
        confidence = fixed_mean_visibility([lm.left_ear, lm.right_ear, lm.left_eye, lm.right_eye])
        return RawReading(angle=angle, confidence=confidence)

    def raw_angle(self, lm: PostureLandmarks) -> Optional[float]:
        reading = self.measure(lm)
        return reading.angle if reading is not None else None

    def adjust(self, angle: float, calibration_offset: Optional[float]) -> float:
        if calibration_offset is None:
            return angle
        return angle - calibration_offset
