import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Union

from calibration import CalibrationStore
from config import ThresholdConfig
from history import PoseHistory
from indicator_registry import IndicatorEntry, get_indicator_entries
from indicators import Metric, MetricStatus, NeckFlexionIndicator
from landmarks import extract_landmarks
from pose_types import Frame, PoseFrame

logger = logging.getLogger(__name__)


@dataclass
class MetricSnapshot:
    neck_flexion: Optional[Metric] = None
    cva: Optional[Metric] = None
    fsa: Optional[Metric] = None

    def to_dict(self) -> Dict[str, Optional[dict]]:
        return {
            "neck_flexion": self.neck_flexion.to_dict() if self.neck_flexion else None,
            "cva": self.cva.to_dict() if self.cva else None,
            "fsa": self.fsa.to_dict() if self.fsa else None,
        }

    def metrics(self) -> List[Optional[Metric]]:
        return [self.neck_flexion, self.cva, self.fsa]

    def worst_status(self) -> Optional[MetricStatus]:
        present = [m.status for m in self.metrics() if m is not None]
        if not present:
            return None
        return max(present, key=lambda s: s.severity)


def _evaluate(entries: List[IndicatorEntry], frame: Frame, calibration_offset: Optional[float]) -> MetricSnapshot:
    lm = extract_landmarks(frame)
    values = {}
    for entry in entries:
        offset = calibration_offset if entry.uses_calibration else None
        values[entry.key] = entry.indicator.evaluate(lm, offset)
    return MetricSnapshot(**values)


def compute_snapshot(
    frame: Frame,
    calibration_offset: Optional[float] = None,
    thresholds: Optional[ThresholdConfig] = None,
) -> MetricSnapshot:
    """Compute all three posture metrics for one frame. Pure: no state is read or kept."""
    return _evaluate(get_indicator_entries(thresholds), frame, calibration_offset)


class PostureEngine:
    """
    Per-frame posture metric pipeline with user calibration.

    Callers feed one PoseFrame per camera frame through ``process``; the engine
    keeps a short frame history so ``set_calibration`` can capture the baseline
    from the latest valid frame.
    """

    def __init__(
        self,
        calibration: Optional[CalibrationStore] = None,
        thresholds: Optional[ThresholdConfig] = None,
        history_size: int = 30,
    ):
        self.calibration = calibration if calibration is not None else CalibrationStore()
        self.thresholds = thresholds or ThresholdConfig()
        self.history = PoseHistory(maxlen=history_size)
        self._entries = get_indicator_entries(self.thresholds)
        self._neck = next(e.indicator for e in self._entries if isinstance(e.indicator, NeckFlexionIndicator))
        self._latest_snapshot = MetricSnapshot()

    @property
    def latest_snapshot(self) -> MetricSnapshot:
        return self._latest_snapshot

    def process(self, pose: Union[PoseFrame, Frame]) -> MetricSnapshot:
        if not isinstance(pose, PoseFrame):
            pose = PoseFrame(timestamp=0.0, landmarks=list(pose))
        self.history.append(pose)
        if not pose.valid:
            snapshot = MetricSnapshot()
        else:
            snapshot = _evaluate(self._entries, pose.landmarks, self.calibration.get())
        self._latest_snapshot = snapshot
        return snapshot

    def get_calibration(self) -> Optional[float]:
        return self.calibration.get()

    def set_calibration(self) -> Optional[float]:
        # Baseline is the raw (uncalibrated) neck flexion of the latest valid frame.
        pose = self.history.latest_valid()
        if pose is None:
            logger.warning("Calibration requested before any pose was seen")
            return None
        raw = self._neck.raw_angle(extract_landmarks(pose.landmarks))
        if raw is None:
            logger.warning("Calibration skipped: ears or eyes not visible in the latest frame")
            return None
        self.calibration.set(raw)
        logger.info("Calibration offset set to %.2f deg", raw)
        return raw

    def clear_calibration(self) -> None:
        self.calibration.clear()
        logger.info("Calibration cleared")
