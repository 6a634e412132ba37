from collections import deque
from typing import Deque, Optional

from pose_types import PoseFrame


class PoseHistory:
    def __init__(self, maxlen: int = 30):
        self._buffer: Deque[PoseFrame] = deque(maxlen=maxlen)

    def __len__(self) -> int:
        return len(self._buffer)

    def append(self, pose: PoseFrame) -> None:
        self._buffer.append(pose)

    def latest(self) -> Optional[PoseFrame]:
        return self._buffer[-1] if self._buffer else None

    def latest_valid(self) -> Optional[PoseFrame]:
        for pose in reversed(self._buffer):
            if pose.valid:
                return pose
        return None
