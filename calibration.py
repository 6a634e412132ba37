import json
import logging
import math
import os
import tempfile
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Optional, Tuple, Union

logger = logging.getLogger(__name__)

DEFAULT_CALIBRATION_KEY = "neck_flexion_offset"


class KeyValueStore(ABC):
    """
    Durable slot for small numeric values.

    Implementations may raise OSError/ValueError; CalibrationStore absorbs them.
    """

    @abstractmethod
    def load(self, key: str) -> Optional[float]: ...

    @abstractmethod
    def save(self, key: str, value: float) -> None: ...

    @abstractmethod
    def delete(self, key: str) -> None: ...


class MemoryStore(KeyValueStore):
    def __init__(self, values: Optional[Dict[str, float]] = None):
        self._values: Dict[str, float] = dict(values or {})

    def load(self, key: str) -> Optional[float]:
        return self._values.get(key)

    def save(self, key: str, value: float) -> None:
        self._values[key] = float(value)

    def delete(self, key: str) -> None:
        self._values.pop(key, None)


class JsonFileStore(KeyValueStore):
    # Whole document is rewritten through a temp file + os.replace.
    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def _read(self) -> Dict[str, object]:
        if not self.path.exists():
            return {}
        raw = json.loads(self.path.read_text(encoding="utf-8"))
        if not isinstance(raw, dict):
            raise ValueError(f"{self.path} does not hold a JSON object")
        return raw

    def _write(self, data: Dict[str, object]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp = tempfile.mkstemp(prefix=self.path.name, suffix=".tmp", dir=str(self.path.parent))
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                json.dump(data, fh, indent=2)
            os.replace(tmp, self.path)
        except BaseException:
            if os.path.exists(tmp):
                os.unlink(tmp)
            raise

    def load(self, key: str) -> Optional[float]:
        value = self._read().get(key)
        if value is None:
            return None
        return float(value)

    def _read_for_update(self) -> Tuple[Dict[str, object], bool]:
        # An unreadable document is replaced rather than blocking every later write.
        try:
            return self._read(), False
        except ValueError as e:
            logger.warning("Discarding unreadable %s: %s", self.path, e)
            return {}, True

    def save(self, key: str, value: float) -> None:
        data, _ = self._read_for_update()
        data[key] = float(value)
        self._write(data)

    def delete(self, key: str) -> None:
        data, corrupt = self._read_for_update()
        if key in data or corrupt:
            data.pop(key, None)
            self._write(data)


class CalibrationStore:
    """Holds the user's neck-flexion baseline (degrees) and mirrors it to a backend.

    The value is read from the backend once, on construction. Backend failures
    are logged and never raised: a failed load leaves the store uncalibrated,
    a failed save keeps the new value in memory only.
    """

    def __init__(self, backend: Optional[KeyValueStore] = None, key: str = DEFAULT_CALIBRATION_KEY):
        self.backend = backend if backend is not None else MemoryStore()
        self.key = key
        self._offset: Optional[float] = self._load()

    def _load(self) -> Optional[float]:
        try:
            value = self.backend.load(self.key)
        except (OSError, ValueError, TypeError) as e:
            logger.warning("Could not load calibration '%s', running uncalibrated: %s", self.key, e)
            return None
        if value is None:
            return None
        if not math.isfinite(value):
            logger.warning("Ignoring non-finite calibration value %r", value)
            return None
        logger.info("Loaded calibration offset %.2f deg", value)
        return value

    def get(self) -> Optional[float]:
        return self._offset

    def set(self, value: float) -> None:
        self._offset = float(value)
        try:
            self.backend.save(self.key, self._offset)
        except (OSError, ValueError, TypeError) as e:
            logger.warning("Could not persist calibration offset, keeping it for this session only: %s", e)

    def clear(self) -> None:
        self._offset = None
        try:
            self.backend.delete(self.key)
        except (OSError, ValueError, TypeError) as e:
            logger.warning("Could not remove stored calibration: %s", e)

    @property
    def is_set(self) -> bool:
        return self._offset is not None
