import json

import pytest

from collisionbench.performance import (
    FrameStatus,
    PerformanceMetrics,
    PerformanceResult,
    append_json_result,
)


def _sample_result(method="Cpu", collisions=12):
    return PerformanceResult(
        method=method,
        collisions=collisions,
        collisions_per_frame=4.0,
        duration_ms=15,
        avg_frame_time=1.5,
        max_frame_time=2.5,
        avg_fps=600.0,
        total_frames=3,
        entities_spawned=8,
    )


def test_first_frame_is_not_recorded():
    metrics = PerformanceMetrics(3)
    status = metrics.record_frame(5.0, 200.0, 1)
    assert status is FrameStatus.WARMUP
    assert metrics.fps_count == 0
    assert metrics.start_time is None
    assert metrics.is_first_frame is False


def test_missing_measurement_is_skipped():
    metrics = PerformanceMetrics(3)
    metrics.record_frame(1.0, 1000.0, 1)
    assert metrics.record_frame(None, None, 2) is FrameStatus.WARMUP
    assert metrics.fps_count == 0


def test_missing_fps_with_other_measurements_raises():
    metrics = PerformanceMetrics(3)
    metrics.record_frame(1.0, 1000.0, 1)
    with pytest.raises(ValueError):
        metrics.record_frame(1.0, None, 2)


def test_frames_accumulate_until_target():
    metrics = PerformanceMetrics(3)
    metrics.record_frame(1.0, 1000.0, 1)
    assert metrics.record_frame(2.0, 500.0, 2) is FrameStatus.RUNNING
    assert metrics.record_frame(6.0, 500.0, 3) is FrameStatus.TARGET_REACHED
    assert metrics.fps_count == 2
    assert metrics.max_frame_time_ms == 6.0
    assert metrics.start_time is not None
    assert metrics.record_frame(1.0, 1000.0, 4) is FrameStatus.FINISHED


def test_exit_status_flags():
    metrics = PerformanceMetrics(3)
    statuses = [
        metrics.record_frame(1.0, 1000.0, 1),
        metrics.record_frame(2.0, 500.0, 2),
        metrics.record_frame(6.0, 500.0, 3),
        metrics.record_frame(1.0, 1000.0, 4),
    ]
    assert [status.should_exit for status in statuses] == [False, False, True, True]


def test_build_result_summarises_frames():
    metrics = PerformanceMetrics(3)
    metrics.record_frame(1.0, 1000.0, 1)
    metrics.record_frame(2.0, 500.0, 2)
    metrics.record_frame(6.0, 500.0, 3)
    metrics.total_collisions_processed = 9
    result = metrics.build_result("Cpu", 3, 10)
    assert result.method == "Cpu"
    assert result.collisions == 9
    assert result.collisions_per_frame == pytest.approx(3.0)
    assert result.avg_frame_time == pytest.approx(8.0 / 3)
    assert result.max_frame_time == 6.0
    assert result.avg_fps == pytest.approx(500.0)
    assert result.total_frames == 3
    assert result.entities_spawned == 10
    assert result.duration_ms >= 0


def test_build_result_without_frames_raises():
    metrics = PerformanceMetrics(3)
    with pytest.raises(ValueError):
        metrics.build_result("Cpu", 3, 10)


def test_result_dict_round_trip():
    result = _sample_result()
    assert PerformanceResult.from_dict(result.to_dict()) == result


def test_from_dict_missing_field_raises():
    data = _sample_result().to_dict()
    del data["avg_fps"]
    with pytest.raises(ValueError):
        PerformanceResult.from_dict(data)


def test_append_creates_file_with_array(tmp_path):
    path = tmp_path / "results.json"
    append_json_result(path, _sample_result())
    decoded = json.loads(path.read_text())
    assert decoded == [_sample_result().to_dict()]
    assert path.read_text().startswith("[\n  {")


def test_append_keeps_existing_results_in_order(tmp_path):
    path = tmp_path / "results.json"
    append_json_result(path, _sample_result("Cpu", 1))
    append_json_result(path, _sample_result("Gpu", 2))
    decoded = json.loads(path.read_text())
    assert [entry["method"] for entry in decoded] == ["Cpu", "Gpu"]
    assert [entry["collisions"] for entry in decoded] == [1, 2]


def test_append_to_empty_file(tmp_path):
    path = tmp_path / "results.json"
    path.write_text("")
    append_json_result(path, _sample_result())
    assert len(json.loads(path.read_text())) == 1


def test_append_to_invalid_file_raises(tmp_path):
    path = tmp_path / "results.json"
    path.write_text("not json")
    with pytest.raises(ValueError):
        append_json_result(path, _sample_result())
    assert path.read_text() == "not json"


def test_append_to_non_array_raises(tmp_path):
    path = tmp_path / "results.json"
    path.write_text("{}")
    with pytest.raises(ValueError):
        append_json_result(path, _sample_result())