"""Splitting a collidable population into detector batches and merging their results."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from collisionbench.max_collisions import max_collisions
from collisionbench.model import CollidingPair

DEFAULT_WORKGROUP_SIZE = 64
DEFAULT_MAX_BATCH_SIZE = 10
PIPELINE_CACHE_CAPACITY = 10

# Bytes per result the detector writes: two 32-bit indices.
COLLISION_RESULT_BYTES = 8
# Bytes per colliding pair held on the host side.
COLLIDING_PAIR_BYTES = 48

_BATCH_SIZE_SAFETY_FACTOR = 1.1
_MEMORY_HEADROOM = 0.9
_GIB = 1024.0**3

_ARRAY_SIZE_LINE = "const ARRAY_SIZE: u32 = 5;"
_MAX_ARRAY_SIZE_LINE = "const MAX_ARRAY_SIZE: u32 = 5;"
_WORKGROUP_SIZE_LINE = "const WORKGROUP_SIZE: u32 = 64;"


class InsufficientMemoryError(RuntimeError):
    """Raised when the result buffer for a population would not fit in memory."""


@dataclass(frozen=True)
class BatchJob:
    """One detector run over ``[start, end)``, optionally against a second range.

    Jobs that pair two ranges name the job whose results they are deduplicated against.
    """

    start_index_incl: int
    end_index_excl: int
    second_start_index_incl: int | None = None
    second_end_index_excl: int | None = None
    dedup_against_other_batch_job: int | None = None


@dataclass(frozen=True)
class PipelineKey:
    """Identifies a specialised detector pipeline."""

    batch_population: int
    max_num_results: int


def generate_batch_jobs(population: int, max_batch_size: int) -> list[BatchJob]:
    """Plan the batch jobs for ``population`` collidables."""
    if max_batch_size < 1:
        raise ValueError("max_batch_size must be at least 1")
    jobs: list[BatchJob] = []
    for start in range(0, population, max_batch_size):
        end = min(start + max_batch_size, population)
        primary_id = len(jobs)
        jobs.append(BatchJob(start, end))
        remaining_start = start + max_batch_size
        if remaining_start < population:
            remaining_len = population - remaining_start
            for second_start in range(remaining_start, remaining_len, max_batch_size):
                jobs.append(
                    BatchJob(
                        start,
                        end,
                        second_start_index_incl=second_start,
                        second_end_index_excl=min(second_start + max_batch_size, remaining_len),
                        dedup_against_other_batch_job=primary_id,
                    )
                )
    return jobs


def dedup_cross_batch_collisions(
    to_dedup: Iterable[CollidingPair], comparer: Iterable[CollidingPair]
) -> list[CollidingPair]:
    """Keep the pairs in which exactly one entity appears first in some ``comparer`` pair."""
    seen = {pair.metadata1.entity for pair in comparer}
    return [
        pair
        for pair in to_dedup
        if (pair.metadata1.entity in seen) != (pair.metadata2.entity in seen)
    ]


def combine_results(
    batch_results: Sequence[tuple[BatchJob, Sequence[CollidingPair]]],
) -> list[CollidingPair]:
    """Merge per-job results, deduplicating cross-batch jobs against their primary job."""
    combined: list[CollidingPair] = []
    for job, pairs in batch_results:
        other = job.dedup_against_other_batch_job
        if other is None:
            combined.extend(pairs)
        else:
            combined.extend(dedup_cross_batch_collisions(pairs, batch_results[other][1]))
    return combined


def estimate_minimum_scale_factor(width: float, height: float, average_radius: float) -> float:
    """Rough fraction of all possible pairs expected to collide in the given area."""
    f = (width * height) / average_radius
    return 0.07396755 + (1.054372 - 0.07396755) / (1.0 + (f / 401.5207) ** 1.816759)


def max_batch_size_for_limit(max_storage_buffer_bytes: int, scale_factor: float) -> int:
    """Largest batch whose scaled result buffer fits in one storage binding."""
    p = float(COLLISION_RESULT_BYTES)
    t = float(max_storage_buffer_bytes)
    s = scale_factor * _BATCH_SIZE_SAFETY_FACTOR
    b = 0.5 * (math.sqrt(p * s + 8.0 * t) / (math.sqrt(p) * math.sqrt(s)) + 1.0)
    return max(math.floor(b), 0)


def results_capacity(batch_population: int, scale_factor: float) -> int:
    """Number of results to reserve for a batch of ``batch_population`` collidables."""
    return max(int(max_collisions(batch_population) * scale_factor), 0)


def workgroups_required(batch_population: int, workgroup_size: int) -> int:
    """Workgroups needed so every collidable in the batch has an invocation."""
    if workgroup_size < 1:
        raise ValueError("workgroup_size must be at least 1")
    return -(-batch_population // workgroup_size)


def specialise_shader_source(
    wgsl_source: str, num_colliders: int, max_num_results: int, workgroup_size: int
) -> str:
    """Substitute the batch constants into the detector shader text."""
    return (
        wgsl_source.replace(_ARRAY_SIZE_LINE, f"const ARRAY_SIZE: u32 = {num_colliders};")
        .replace(_MAX_ARRAY_SIZE_LINE, f"const MAX_ARRAY_SIZE: u32 = {max_num_results};")
        .replace(_WORKGROUP_SIZE_LINE, f"const WORKGROUP_SIZE: u32 = {workgroup_size};")
    )


def check_result_memory(population: int, scale_factor: float, total_memory: int) -> int:
    """Return the bytes needed to hold all results, raising if memory is too small."""
    max_results = results_capacity(population, scale_factor)
    collision_size = COLLIDING_PAIR_BYTES * max_results
    if collision_size > total_memory * _MEMORY_HEADROOM:
        raise InsufficientMemoryError(
            "Not enough memory to store all collisions, either reduce the number of "
            "entities or allow more potential collision misses by lowering the "
            f"max_detectable_collisions_scale (available: {total_memory / _GIB} GB, "
            f"needed: {collision_size / _GIB} GB)"
        )
    return collision_size