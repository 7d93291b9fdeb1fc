"""Running the collision detection benchmark from a run configuration."""

from __future__ import annotations

import argparse
import logging
import time
from collections.abc import Callable, Sequence
from enum import Enum

import psutil

from collisionbench.batching import (
    check_result_memory,
    combine_results,
    estimate_minimum_scale_factor,
    generate_batch_jobs,
    max_batch_size_for_limit,
    results_capacity,
)
from collisionbench.collision_processing import process_collisions
from collisionbench.config import ConfigError, RunConfig, load_run_config
from collisionbench.cpu_detection import detect_collisions
from collisionbench.model import Collidable, CollidingPair
from collisionbench.movement import move_entities, setup_position_cache
from collisionbench.performance import (
    FrameStatus,
    PerformanceMetrics,
    PerformanceResult,
    append_json_result,
)
from collisionbench.spawning import spawn_entities

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "./run_config.json"
# Default storage binding limit of a compute device, in bytes.
MAX_STORAGE_BUFFER_BINDING_SIZE = 128 << 20

Detector = Callable[[Sequence[Collidable]], list[CollidingPair]]


class CollisionDetectionMethod(Enum):
    GPU = "Gpu"
    CPU = "Cpu"


def _batched_detector(config: RunConfig) -> Detector:
    """Detector that splits the population into batch jobs and merges their results."""
    scale = estimate_minimum_scale_factor(
        float(config.top_right_x - config.bottom_left_x),
        float(config.top_right_y - config.bottom_left_y),
        (config.sensor_radius + config.body_radius) / 2.0,
    )
    max_batch_size = max_batch_size_for_limit(MAX_STORAGE_BUFFER_BINDING_SIZE, scale)
    total_memory = psutil.virtual_memory().total

    def detect(collidables: Sequence[Collidable]) -> list[CollidingPair]:
        items = list(collidables)
        check_result_memory(len(items), scale, total_memory)
        batch_results = []
        for job in generate_batch_jobs(len(items), max_batch_size):
            batch = items[job.start_index_incl : job.end_index_excl]
            capacity = results_capacity(len(batch), scale)
            batch_results.append((job, detect_collisions(batch)[:capacity]))
        return combine_results(batch_results)

    return detect


def _detector_for(method: CollisionDetectionMethod, config: RunConfig) -> Detector:
    if method is CollisionDetectionMethod.GPU:
        return _batched_detector(config)
    return detect_collisions


def _log_report(result: PerformanceResult) -> None:
    logger.info(
        "RESULTS FOR METHOD '%s':\n"
        "        Collisions Processed: %d\n"
        "        Collisions Per Frame: %r\n"
        "        Duration: %d ms\n"
        "        Average Frame Time: %r\n"
        "        Maximum Frame Time: %r\n"
        "        Average FPS: %s\n"
        "        Total Frames: %d",
        result.method,
        result.collisions,
        result.collisions_per_frame,
        result.duration_ms,
        result.avg_frame_time,
        result.max_frame_time,
        result.avg_fps,
        result.total_frames,
    )


def run_benchmark(
    method: CollisionDetectionMethod, config: RunConfig
) -> PerformanceResult | None:
    """Run frames until the configured frame count and return the summary.

    The summary is appended to the configured output file. When the target frame
    is never recorded (targets below 2) nothing is written and ``None`` is returned.
    """
    logger.info("Using collision detection method: %s", method.value)
    detect = _detector_for(method, config)
    world = spawn_entities(config)
    cache = setup_position_cache(config, [entity.id for entity in world.entities])
    transforms = {entity.id: entity.transform for entity in world.entities}
    sensors = world.sensor_ids()
    metrics = PerformanceMetrics(config.num_frames_to_test)

    result: PerformanceResult | None = None
    frame_count = 0
    last = time.perf_counter()
    while True:
        move_entities(cache, world)
        pairs = detect(world.collidables())
        metrics.total_collisions_processed += process_collisions(pairs, transforms, sensors)

        frame_count += 1
        now = time.perf_counter()
        frame_time_ms = (now - last) * 1000.0
        last = now
        fps = 1000.0 / frame_time_ms if frame_time_ms > 0.0 else 0.0

        status = metrics.record_frame(frame_time_ms, fps, frame_count)
        if status is FrameStatus.TARGET_REACHED:
            result = metrics.build_result(method.value, frame_count, len(world.entities))
            try:
                append_json_result(config.path_to_output_json, result)
            except (OSError, ValueError) as exc:
                logger.error("Failed to write performance results to JSON: %s", exc)
            _log_report(result)
        if status.should_exit:
            return result


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="collisionbench",
        description="Benchmark pairwise collision detection of bodies and sensors.",
    )
    parser.add_argument(
        "config",
        nargs="?",
        default=DEFAULT_CONFIG_PATH,
        help="path of the run configuration JSON (default: %(default)s)",
    )
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO)
    try:
        config = load_run_config(args.config)
    except (OSError, ConfigError) as exc:
        logger.error("Cannot read run configuration %s: %s", args.config, exc)
        return 1
    method = CollisionDetectionMethod.GPU if config.use_gpu else CollisionDetectionMethod.CPU
    run_benchmark(method, config)
    return 0