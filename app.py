import logging

import cv2
import numpy as np

from calibration import CalibrationStore, JsonFileStore
from camera import CameraStream
from config import get_config
from engine import PostureEngine
from log import level_from_name, setup_logger
from pose_detection import PoseDetector
from ui import INPUT_UNAVAILABLE_MESSAGE, draw_metric_panel, draw_status_panel

logger = logging.getLogger(__name__)

WINDOW_NAME = "Desk Coach: Posture Tracking"


def _show_unavailable(message: str) -> None:
    blank = np.zeros((360, 640, 3), dtype=np.uint8)
    draw_status_panel(blank, [message], origin=(10, 30))
    cv2.imshow(WINDOW_NAME, blank)


def main():
    cfg = get_config()
    setup_logger(
        level=level_from_name(cfg.logging.level),
        log_dir=cfg.logging.log_dir,
        enable_console=cfg.logging.enable_console,
        enable_file=cfg.logging.enable_file,
        max_size_mb=cfg.logging.max_size_mb,
    )

    camera = CameraStream(cfg.camera)
    if not camera.open():
        _show_unavailable(INPUT_UNAVAILABLE_MESSAGE)
        cv2.waitKey(0)
        cv2.destroyAllWindows()
        return

    detector = PoseDetector(
        model_complexity=cfg.pose.model_complexity,
        min_detection_confidence=cfg.pose.min_detection_confidence,
        min_tracking_confidence=cfg.pose.min_tracking_confidence,
    )
    calibration = CalibrationStore(JsonFileStore(cfg.storage.calibration_path), key=cfg.storage.calibration_key)
    engine = PostureEngine(calibration, thresholds=cfg.thresholds, history_size=cfg.history_size)
    logger.info("Posture tracking started, calibration=%s", engine.get_calibration())

    cv2.namedWindow(WINDOW_NAME, cv2.WINDOW_NORMAL)
    try:
        while cv2.getWindowProperty(WINDOW_NAME, cv2.WND_PROP_VISIBLE) >= 1:
            cam_frame = camera.read()
            if cam_frame.ok:
                pose = detector.process(cam_frame.frame, cam_frame.timestamp)
                snapshot = engine.process(pose)
                draw_metric_panel(cam_frame.frame, snapshot, engine.get_calibration())
                cv2.imshow(WINDOW_NAME, cam_frame.frame)
            elif camera.unavailable:
                _show_unavailable(INPUT_UNAVAILABLE_MESSAGE)

            key = cv2.waitKey(1) & 0xFF
            if key == ord("q"):
                break
            if key == ord("c"):
                engine.set_calibration()
            elif key == ord("x"):
                engine.clear_calibration()
    finally:
        detector.close()
        camera.release()
        cv2.destroyAllWindows()


if __name__ == "__main__":
    main()
