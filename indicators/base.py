from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Optional

import numpy as np

from config import StatusBand
from landmarks import PostureLandmarks
from pose_types import Landmark


class MetricStatus(str, Enum):
    GOOD = "Good"
    WARN = "Warn"
    ALERT = "Alert"

    @property
    def severity(self) -> int:
        return _SEVERITY[self]


_SEVERITY = {MetricStatus.GOOD: 0, MetricStatus.WARN: 1, MetricStatus.ALERT: 2}


@dataclass
class Metric:
    angle: float
    status: MetricStatus
    confidence: float

    def to_dict(self) -> dict:
        return {"angle": self.angle, "status": self.status.value, "confidence": self.confidence}


@dataclass
class RawReading:
    angle: float
    confidence: float


def classify(angle: float, band: StatusBand) -> MetricStatus:
    # Boundaries belong to the better band.
    if band.higher_is_better:
        if angle >= band.good:
            return MetricStatus.GOOD
        if angle >= band.warn:
            return MetricStatus.WARN
        return MetricStatus.ALERT
    if angle <= band.good:
        return MetricStatus.GOOD
    if angle <= band.warn:
        return MetricStatus.WARN
    return MetricStatus.ALERT


def _visibility(lm: Landmark) -> float:
    return float(lm.visibility or 0.0)


def present_mean_visibility(points: Iterable[Optional[Landmark]]) -> float:
    values = [_visibility(p) for p in points if p is not None]
    if not values:
        return 0.0
    return float(np.mean(values))


def fixed_mean_visibility(points: Iterable[Optional[Landmark]]) -> float:
    # Absent points count as zero and still count towards the denominator.
    points = list(points)
    if not points:
        return 0.0
    total = sum(_visibility(p) for p in points if p is not None)
    return total / float(len(points))


class IndicatorBase:
    name = "base"
    required_points: List[str] = []

    def __init__(self, band: StatusBand):
        self.band = band

    def measure(self, lm: PostureLandmarks) -> Optional[RawReading]:
        raise NotImplementedError

    def adjust(self, angle: float, calibration_offset: Optional[float]) -> float:
        return angle

    def has_required_points(self, lm: PostureLandmarks) -> bool:
        return all(getattr(lm, k) is not None for k in self.required_points)

    def evaluate(self, lm: PostureLandmarks, calibration_offset: Optional[float] = None) -> Optional[Metric]:
        if not self.has_required_points(lm):
            return None
        reading = self.measure(lm)
        if reading is None:
            return None
        angle = self.adjust(reading.angle, calibration_offset)
        return Metric(angle=angle, status=classify(angle, self.band), confidence=reading.confidence)
