from typing import List, Optional, Tuple

import cv2

from engine import MetricSnapshot
from indicator_registry import INDICATOR_LABELS
from indicators import Metric, MetricStatus

# BGR
STATUS_COLORS = {
    MetricStatus.GOOD: (80, 220, 90),
    MetricStatus.WARN: (0, 180, 240),
    MetricStatus.ALERT: (0, 0, 255),
}
NEUTRAL_COLOR = (200, 200, 200)
INPUT_UNAVAILABLE_MESSAGE = "Unable to access webcam. Please allow camera access."


def format_metric(label: str, metric: Optional[Metric]) -> str:
    if metric is None:
        return f"{label}: --"
    return f"{label}: {metric.angle:5.1f} deg  {metric.status.value}  ({metric.confidence:.0%})"


def format_snapshot(snapshot: MetricSnapshot, calibration: Optional[float] = None) -> List[Tuple[str, Tuple[int, int, int]]]:
    lines: List[Tuple[str, Tuple[int, int, int]]] = []
    for key, label in INDICATOR_LABELS:
        metric = getattr(snapshot, key)
        color = STATUS_COLORS[metric.status] if metric is not None else NEUTRAL_COLOR
        lines.append((format_metric(label, metric), color))
    calib_text = "not set" if calibration is None else f"{calibration:.1f} deg"
    lines.append((f"Calibration: {calib_text}", NEUTRAL_COLOR))
    return lines


def draw_status_panel(frame, lines, origin=(10, 30)) -> None:
    x, y = origin
    for line in lines:
        if isinstance(line, tuple):
            text, color = line
        else:
            text, color = line, (255, 255, 255)
        cv2.putText(frame, text, (x, y), cv2.FONT_HERSHEY_SIMPLEX, 0.7, color, 2)
        y += 28


def draw_metric_panel(frame, snapshot: MetricSnapshot, calibration: Optional[float] = None) -> None:
    height, width = frame.shape[:2]
    worst = snapshot.worst_status()
    border = STATUS_COLORS[worst] if worst is not None else NEUTRAL_COLOR
    cv2.rectangle(frame, (0, 0), (width - 1, height - 1), border, 4)
    lines = format_snapshot(snapshot, calibration)
    lines.append(("Keys: C calibrate, X clear, Q quit", NEUTRAL_COLOR))
    draw_status_panel(frame, lines, origin=(10, 30))
