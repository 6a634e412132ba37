import logging
import time
from dataclasses import dataclass
from typing import Optional

import cv2
import numpy as np

from config import CameraConfig

logger = logging.getLogger(__name__)


@dataclass
class CameraFrame:
    frame: Optional[np.ndarray]
    timestamp: float
    ok: bool


class CameraStream:
    """
    Webcam source for the posture loop.

    A single failed read is common (USB hiccups); the stream only reports the
    input as unavailable after ``max_failures`` consecutive failed reads, or
    when the device never opened.
    """

    def __init__(self, cfg: Optional[CameraConfig] = None, max_failures: int = 30):
        self.cfg = cfg or CameraConfig()
        self.max_failures = max_failures
        self.failures = 0
        self._capture: Optional[cv2.VideoCapture] = None
        self._next_due = 0.0

    @property
    def unavailable(self) -> bool:
        return self._capture is None or self.failures >= self.max_failures

    def open(self) -> bool:
        capture = cv2.VideoCapture(self.cfg.index)
        if not capture.isOpened():
            logger.error("Unable to open camera %d", self.cfg.index)
            capture.release()
            return False
        capture.set(cv2.CAP_PROP_FRAME_WIDTH, self.cfg.width)
        capture.set(cv2.CAP_PROP_FRAME_HEIGHT, self.cfg.height)
        capture.set(cv2.CAP_PROP_FPS, self.cfg.target_fps)
        self._capture = capture
        self.failures = 0
        logger.info("Camera %d opened (%dx%d @ %d fps)", self.cfg.index, self.cfg.width, self.cfg.height, self.cfg.target_fps)
        return True

    def _throttle(self) -> None:
        if self.cfg.target_fps <= 0:
            return
        now = time.monotonic()
        if now < self._next_due:
            time.sleep(self._next_due - now)
            now = self._next_due
        self._next_due = now + 1.0 / float(self.cfg.target_fps)

    def read(self) -> CameraFrame:
        if self._capture is None:
            return CameraFrame(None, time.time(), False)
        self._throttle()
        ok, frame = self._capture.read()
        if not ok:
            self.failures += 1
            if self.failures == self.max_failures:
                logger.error("Camera %d stopped delivering frames", self.cfg.index)
            return CameraFrame(None, time.time(), False)
        if self.failures >= self.max_failures:
            logger.info("Camera %d recovered", self.cfg.index)
        self.failures = 0
        return CameraFrame(frame, time.time(), True)

    def release(self) -> None:
        if self._capture is not None:
            self._capture.release()
            self._capture = None
