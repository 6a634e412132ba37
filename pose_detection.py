import logging
from typing import List, Optional, Sequence

import cv2

from pose_types import NUM_LANDMARKS, Landmark, PoseFrame

logger = logging.getLogger(__name__)


def frame_from_landmarks(landmarks: Optional[Sequence], visibility_threshold: Optional[float] = None) -> List[Optional[Landmark]]:
    """
    Convert a MediaPipe-style landmark list (objects with x/y/z/visibility) to a 33-slot frame.

    Missing entries, and entries below ``visibility_threshold`` when one is given,
    become ``None``.
    """
    slots: List[Optional[Landmark]] = [None] * NUM_LANDMARKS
    if not landmarks:
        return slots
    for idx, p in enumerate(landmarks):
        if idx >= NUM_LANDMARKS:
            break
        if p is None:
            continue
        visibility = float(getattr(p, "visibility", 0.0) or 0.0)
        if visibility_threshold is not None and visibility < visibility_threshold:
            continue
        slots[idx] = Landmark(float(p.x), float(p.y), float(getattr(p, "z", 0.0) or 0.0), visibility)
    return slots


class PoseDetector:
    def __init__(
        self,
        model_complexity: int = 1,
        min_detection_confidence: float = 0.5,
        min_tracking_confidence: float = 0.5,
        visibility_threshold: Optional[float] = None,
    ):
        try:
            import mediapipe as mp
        except ImportError as e:
            raise RuntimeError("MediaPipe is not installed. Install it with: pip install mediapipe") from e

        self.visibility_threshold = visibility_threshold
        self._pose = mp.solutions.pose.Pose(
            static_image_mode=False,
            model_complexity=int(model_complexity),
            smooth_landmarks=True,
            enable_segmentation=False,
            min_detection_confidence=float(min_detection_confidence),
            min_tracking_confidence=float(min_tracking_confidence),
        )

    def process(self, frame_bgr, timestamp: float) -> PoseFrame:
        frame_rgb = cv2.cvtColor(frame_bgr, cv2.COLOR_BGR2RGB)
        results = self._pose.process(frame_rgb)
        if results is None or results.pose_landmarks is None:
            return PoseFrame(timestamp=timestamp, valid=False)
        landmarks = frame_from_landmarks(results.pose_landmarks.landmark, self.visibility_threshold)
        return PoseFrame(timestamp=timestamp, landmarks=landmarks, valid=True)

    def close(self) -> None:
        self._pose.close()
