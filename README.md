# collisionbench

A small, deterministic benchmark for 2D collision detection between circles.

A grid of entities is spawned: at every integer point of the configured area
there is one *body* (a circle of `body_radius`) and one *sensor* (a circle of
`sensor_radius`). Every frame the entities are moved to pre-generated
pseudo-random positions, overlapping pairs are detected, the sensor/body
collisions are processed (each sensor and body involved is turned by 0.1 rad),
and the frame time is recorded. When the configured number of frames has run,
a summary is appended to a JSON results file.

## Installation

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Running the benchmark

Create a `run_config.json`:

```json
{
  "bottom_left_x": -80,
  "bottom_left_y": -80,
  "top_right_x": 80,
  "top_right_y": 80,
  "sensor_radius": 20.5,
  "body_radius": 2.5,
  "rng_seed": 1,
  "num_frames_to_test": 3,
  "use_gpu": false,
  "path_to_output_json": "results.json"
}
```

Then run:

```
collisionbench
```

By default the command reads `./run_config.json`; another path can be given
as its only argument:

```
collisionbench path/to/run_config.json
```

If the file cannot be read or a field is missing or has the wrong type, an
error is logged and the command exits with status 1. Unknown keys are ignored.

`use_gpu` chooses between the two values of
`collisionbench.app.CollisionDetectionMethod`:

- `CPU` (label `"Cpu"`) – every collidable is checked against every later one
  (`collisionbench.cpu_detection.detect_collisions`).
- `GPU` (label `"Gpu"`) – the batched strategy, run on the CPU. The population
  is split into jobs with `collisionbench.batching.generate_batch_jobs`, the
  collidables in each job's first index range are checked, each job's results
  are cut to `results_capacity`, and the jobs are merged with
  `combine_results`, which de-duplicates cross-batch jobs against their
  primary job. Pairs are only looked for inside a job's first range, so
  collisions between entities in different batches are not reported. Before
  each frame `check_result_memory` compares the needed result memory with the
  machine's total memory (via psutil) and raises `InsufficientMemoryError` if
  it would not fit.

The first frame is a warm-up and is not recorded. When the frame count equals
`num_frames_to_test`, a `PerformanceResult` is appended to the JSON array in
`path_to_output_json` (the file is created if absent) and a report is logged.
Each entry holds `method`, `collisions`, `collisions_per_frame`,
`duration_ms`, `avg_frame_time`, `max_frame_time`, `avg_fps`, `total_frames`
and `entities_spawned`. With `num_frames_to_test` below 2 the target frame is
never recorded and nothing is written.

## Using it as a library

```python
from collisionbench.app import CollisionDetectionMethod, run_benchmark
from collisionbench.config import load_run_config

config = load_run_config("run_config.json")
result = run_benchmark(CollisionDetectionMethod.CPU, config)
```

`run_benchmark` returns the `PerformanceResult`, or `None` when nothing was
recorded. The pieces can also be used on their own:

- `collisionbench.config` – `RunConfig`, `parse_run_config`, `load_run_config`
  and `ConfigError`.
- `collisionbench.model` – `BoundingCircle` (with `intersects`), `Transform`,
  `Collidable`, `CollidableMetadata`, `CollidingPair` and `CollisionResult`.
- `collisionbench.spawning` – `spawn_entities` builds a `World` of
  `SimEntity` objects; `circle_outline` gives the points of a closed circle
  line strip.
- `collisionbench.movement` – `PositionCache`, `setup_position_cache` and
  `move_entities` for seeded, cycling positions (1000 frames by default).
- `collisionbench.collision_processing` – `group_sensor_collisions` and
  `process_collisions`.
- `collisionbench.performance` – `PerformanceMetrics`, `PerformanceResult`,
  `FrameStatus` and `append_json_result`.
- `collisionbench.batching` – batch jobs (`BatchJob`, `generate_batch_jobs`),
  result merging (`dedup_cross_batch_collisions`, `combine_results`) and
  sizing helpers: `estimate_minimum_scale_factor`, `max_batch_size_for_limit`,
  `results_capacity`, `workgroups_required`, `check_result_memory`, plus
  `specialise_shader_source`, which substitutes batch constants into shader
  text, and the `PipelineKey` record.
- `collisionbench.max_collisions.max_collisions` – the number of unordered
  pairs among `n` entities.
- `collisionbench.my_rads` – `MyRads`, an angle kept within `[-π, π]` with
  shortest-direction rotation, slerp, ranges (`MyRadsRange`) and conversion
  to and from the small `Quat` type.
- `collisionbench.lru_cache.LruCache`, `collisionbench.step_function.StepFunction`
  and the sigmoid curves in `collisionbench.sigmoid`.
- `collisionbench.palette` – the named colours (`AvailableColor`, `Color`,
  `color_for`) that spawned entities are tagged with.

## What it does not do

- There is no graphics device work: nothing is dispatched to a GPU, no shader
  is compiled and no buffers are allocated. The `GPU` method is the batched
  strategy carried out in Python.
- Nothing is drawn. There is no window or camera; entity colours and circle
  outlines are plain data.