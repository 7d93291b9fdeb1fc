"""Frame timing and collision statistics for a benchmark run, and their JSON record."""

from __future__ import annotations

import json
import time
from dataclasses import asdict, dataclass, fields
from enum import Enum
from os import PathLike
from pathlib import Path
from typing import Any


class FrameStatus(Enum):
    """What recording a frame meant for the run."""

    WARMUP = "warmup"
    RUNNING = "running"
    TARGET_REACHED = "target_reached"
    FINISHED = "finished"

    @property
    def should_exit(self) -> bool:
        return self in (FrameStatus.TARGET_REACHED, FrameStatus.FINISHED)


@dataclass(frozen=True)
class PerformanceResult:
    """Summary of one benchmark run."""

    method: str
    collisions: int
    collisions_per_frame: float
    duration_ms: int
    avg_frame_time: float
    max_frame_time: float
    avg_fps: float
    total_frames: int
    entities_spawned: int

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Any) -> PerformanceResult:
        """Build a result from a decoded JSON object; every field is required."""
        if not isinstance(data, dict):
            raise ValueError("a performance result must be a JSON object")
        missing = [f.name for f in fields(cls) if f.name not in data]
        if missing:
            raise ValueError(f"performance result is missing: {', '.join(missing)}")
        return cls(
            method=str(data["method"]),
            collisions=int(data["collisions"]),
            collisions_per_frame=float(data["collisions_per_frame"]),
            duration_ms=int(data["duration_ms"]),
            avg_frame_time=float(data["avg_frame_time"]),
            max_frame_time=float(data["max_frame_time"]),
            avg_fps=float(data["avg_fps"]),
            total_frames=int(data["total_frames"]),
            entities_spawned=int(data["entities_spawned"]),
        )


class PerformanceMetrics:
    """Accumulates frame statistics from the second frame up to the target frame."""

    def __init__(self, num_frames_to_test: int) -> None:
        self.start_time: float | None = None
        self.max_frame_time_ms = 0.0
        self.total_frame_time_ms = 0.0
        self.fps_sum = 0.0
        self.fps_count = 0
        self.target_frames = num_frames_to_test
        self.is_first_frame = True
        self.total_collisions_processed = 0

    def record_frame(
        self,
        frame_time_ms: float | None,
        fps: float | None,
        frame_count: int | None,
    ) -> FrameStatus:
        """Record one frame's measurements and report whether the run is done.

        The first frame, and any frame without a frame time or frame count, is
        not recorded.
        """
        if self.is_first_frame or frame_time_ms is None or frame_count is None:
            self.is_first_frame = False
            return FrameStatus.WARMUP
        if fps is None:
            raise ValueError("an FPS measurement is required once frame times are available")
        if self.start_time is None:
            self.start_time = time.monotonic()
        self.fps_sum += fps
        self.fps_count += 1
        self.total_frame_time_ms += frame_time_ms
        self.max_frame_time_ms = max(self.max_frame_time_ms, frame_time_ms)

        if frame_count == self.target_frames:
            return FrameStatus.TARGET_REACHED
        if frame_count >= self.target_frames:
            return FrameStatus.FINISHED
        return FrameStatus.RUNNING

    def build_result(
        self, method: str, frame_count: int, entities_spawned: int
    ) -> PerformanceResult:
        """Summarise the recorded frames; ``method`` is the label stored in the result."""
        if self.start_time is None or self.fps_count == 0:
            raise ValueError("no frames have been recorded")
        if frame_count <= 0:
            raise ValueError("frame_count must be positive")
        elapsed = time.monotonic() - self.start_time
        return PerformanceResult(
            method=method,
            collisions=self.total_collisions_processed,
            collisions_per_frame=self.total_collisions_processed / frame_count,
            duration_ms=int(elapsed * 1000),
            avg_frame_time=self.total_frame_time_ms / frame_count,
            max_frame_time=self.max_frame_time_ms,
            avg_fps=self.fps_sum / self.fps_count,
            total_frames=frame_count,
            entities_spawned=entities_spawned,
        )


def append_json_result(path: str | PathLike[str], result: PerformanceResult) -> None:
    """Append ``result`` to the JSON array stored at ``path``, creating it if needed."""
    target = Path(path)
    try:
        contents = target.read_text(encoding="utf-8")
    except FileNotFoundError:
        contents = ""
    existing: list[PerformanceResult] = []
    if contents:
        decoded = json.loads(contents)
        if not isinstance(decoded, list):
            raise ValueError("the results file must hold a JSON array")
        existing = [PerformanceResult.from_dict(item) for item in decoded]
    existing.append(result)
    with target.open("w", encoding="utf-8") as handle:
        json.dump([r.to_dict() for r in existing], handle, indent=2)