import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Union

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "POSTURE_CONFIG"


@dataclass(frozen=True)
class StatusBand:
    # Lower-is-better: angle <= good -> Good, angle <= warn -> Warn, else Alert.
    # Higher-is-better flips both comparisons.
    good: float
    warn: float
    higher_is_better: bool = False


@dataclass(frozen=True)
class ThresholdConfig:
    neck_flexion: StatusBand = field(default_factory=lambda: StatusBand(good=15.0, warn=20.0))
    cva: StatusBand = field(default_factory=lambda: StatusBand(good=48.0, warn=44.0, higher_is_better=True))
    fsa: StatusBand = field(default_factory=lambda: StatusBand(good=15.0, warn=20.0))


@dataclass(frozen=True)
class CameraConfig:
    index: int = 0
    width: int = 1280
    height: int = 720
    target_fps: int = 30


@dataclass(frozen=True)
class PoseConfig:
    model_complexity: int = 1
    min_detection_confidence: float = 0.5
    min_tracking_confidence: float = 0.5


@dataclass(frozen=True)
class StorageConfig:
    calibration_path: str = str(Path("data") / "calibration.json")
    calibration_key: str = "neck_flexion_offset"


@dataclass(frozen=True)
class LoggingConfig:
    level: str = "INFO"
    log_dir: str = "logs"
    enable_console: bool = True
    enable_file: bool = False
    max_size_mb: int = 10


@dataclass(frozen=True)
class AppConfig:
    thresholds: ThresholdConfig = field(default_factory=ThresholdConfig)
    camera: CameraConfig = field(default_factory=CameraConfig)
    pose: PoseConfig = field(default_factory=PoseConfig)
    storage: StorageConfig = field(default_factory=StorageConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    history_size: int = 30


_CONFIG_PATH: Optional[Path] = None
_CONFIG_CACHE: Optional[AppConfig] = None


def _repo_root() -> Path:
    return Path(__file__).resolve().parent


def get_default_config_path() -> Path:
    env_path = os.getenv(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path).expanduser().resolve()
    return _repo_root() / "config.json"


def set_config_path(path: Union[str, Path]) -> None:
    """Override the config path and drop any cached config."""
    global _CONFIG_PATH
    global _CONFIG_CACHE
    _CONFIG_PATH = Path(path).expanduser().resolve()
    _CONFIG_CACHE = None


def _deep_get(d: Dict[str, Any], keys: list, default: Any = None) -> Any:
    cur: Any = d
    for k in keys:
        if not isinstance(cur, dict):
            return default
        cur = cur.get(k)
    return cur if cur is not None else default


def _as_int(v: Any, default: int) -> int:
    try:
        return int(v)
    except (TypeError, ValueError):
        return int(default)


def _as_float(v: Any, default: float) -> float:
    try:
        return float(v)
    except (TypeError, ValueError):
        return float(default)


def _as_bool(v: Any, default: bool) -> bool:
    if isinstance(v, bool):
        return v
    if isinstance(v, (int, float)):
        return bool(v)
    if isinstance(v, str):
        s = v.strip().lower()
        if s in ("1", "true", "yes", "on"):
            return True
        if s in ("0", "false", "no", "off"):
            return False
    return bool(default)


def _as_str(v: Any, default: str = "") -> str:
    return str(v) if v is not None else str(default)


def _parse_band(obj: Any, default: StatusBand) -> StatusBand:
    if not isinstance(obj, dict):
        return default
    return StatusBand(
        good=_as_float(obj.get("good"), default.good),
        warn=_as_float(obj.get("warn"), default.warn),
        higher_is_better=_as_bool(obj.get("higher_is_better"), default.higher_is_better),
    )


def load_config(path: Optional[Union[str, Path]] = None) -> AppConfig:
    p = Path(path).expanduser().resolve() if path else (_CONFIG_PATH or get_default_config_path())
    if not p.exists():
        return AppConfig()
    try:
        raw = json.loads(p.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        logger.warning("Could not read config %s, using defaults: %s", p, e)
        return AppConfig()
    if not isinstance(raw, dict):
        logger.warning("Config %s is not a JSON object, using defaults", p)
        return AppConfig()

    d_thr = ThresholdConfig()
    thresholds = ThresholdConfig(
        neck_flexion=_parse_band(_deep_get(raw, ["thresholds", "neck_flexion"]), d_thr.neck_flexion),
        cva=_parse_band(_deep_get(raw, ["thresholds", "cva"]), d_thr.cva),
        fsa=_parse_band(_deep_get(raw, ["thresholds", "fsa"]), d_thr.fsa),
    )

    d_cam = CameraConfig()
    camera = CameraConfig(
        index=_as_int(_deep_get(raw, ["camera", "index"], d_cam.index), d_cam.index),
        width=_as_int(_deep_get(raw, ["camera", "width"], d_cam.width), d_cam.width),
        height=_as_int(_deep_get(raw, ["camera", "height"], d_cam.height), d_cam.height),
        target_fps=max(0, _as_int(_deep_get(raw, ["camera", "target_fps"], d_cam.target_fps), d_cam.target_fps)),
    )

    d_pose = PoseConfig()
    pose = PoseConfig(
        model_complexity=_as_int(_deep_get(raw, ["pose", "model_complexity"], d_pose.model_complexity), 1),
        min_detection_confidence=_as_float(
            _deep_get(raw, ["pose", "min_detection_confidence"], d_pose.min_detection_confidence), 0.5
        ),
        min_tracking_confidence=_as_float(
            _deep_get(raw, ["pose", "min_tracking_confidence"], d_pose.min_tracking_confidence), 0.5
        ),
    )

    d_sto = StorageConfig()
    storage = StorageConfig(
        calibration_path=_as_str(_deep_get(raw, ["storage", "calibration_path"], d_sto.calibration_path)),
        calibration_key=_as_str(_deep_get(raw, ["storage", "calibration_key"], d_sto.calibration_key)).strip()
        or d_sto.calibration_key,
    )

    d_log = LoggingConfig()
    logging_cfg = LoggingConfig(
        level=_as_str(_deep_get(raw, ["logging", "level"], d_log.level)).upper(),
        log_dir=_as_str(_deep_get(raw, ["logging", "log_dir"], d_log.log_dir)),
        enable_console=_as_bool(_deep_get(raw, ["logging", "enable_console"], d_log.enable_console), True),
        enable_file=_as_bool(_deep_get(raw, ["logging", "enable_file"], d_log.enable_file), False),
        max_size_mb=max(1, _as_int(_deep_get(raw, ["logging", "max_size_mb"], d_log.max_size_mb), 10)),
    )

    history_size = max(1, _as_int(raw.get("history_size", 30), 30))

    return AppConfig(
        thresholds=thresholds,
        camera=camera,
        pose=pose,
        storage=storage,
        logging=logging_cfg,
        history_size=history_size,
    )


def get_config() -> AppConfig:
    global _CONFIG_CACHE
    if _CONFIG_CACHE is None:
        _CONFIG_CACHE = load_config()
    return _CONFIG_CACHE
