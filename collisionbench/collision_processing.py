"""Reacting to sensor-body collisions by turning the entities involved."""

from __future__ import annotations

from collections.abc import Collection, Iterable, Mapping

from collisionbench.model import CollidingPair, Transform
from collisionbench.my_rads import MyRads

CHUNK_SIZE = 32
_TURN = 0.1


def group_sensor_collisions(pairs: Iterable[CollidingPair]) -> dict[int, list[int]]:
    """Map each sensor to the bodies it collided with; other pairs are ignored."""
    groups: dict[int, list[int]] = {}
    for pair in pairs:
        m1, m2 = pair.metadata1, pair.metadata2
        if m1.is_sensor and not m2.is_sensor:
            groups.setdefault(m1.entity, []).append(m2.entity)
        elif m2.is_sensor and not m1.is_sensor:
            groups.setdefault(m2.entity, []).append(m1.entity)
    return groups


def _turn(transform: Transform) -> None:
    _, angle = transform.rotation.to_axis_angle()
    transform.rotation = MyRads(angle + _TURN).to_quat()


def _react(sensor: Transform, body: Transform) -> None:
    _turn(sensor)
    _turn(body)


def process_collisions(
    pairs: Iterable[CollidingPair],
    transforms: Mapping[int, Transform],
    sensors: Collection[int],
) -> int:
    """Rotate sensors and the bodies touching them; return how many collisions were handled.

    Bodies are fetched in chunks of ``CHUNK_SIZE``; a chunk containing a missing,
    sensor or repeated entity is skipped as a whole. Leftover bodies are handled one by one.
    """
    processed = 0
    for sensor_id, bodies in group_sensor_collisions(pairs).items():
        if sensor_id not in sensors or sensor_id not in transforms:
            continue
        sensor_transform = transforms[sensor_id]
        full = len(bodies) - len(bodies) % CHUNK_SIZE
        for start in range(0, full, CHUNK_SIZE):
            chunk = bodies[start : start + CHUNK_SIZE]
            valid = len(set(chunk)) == len(chunk) and all(
                body in transforms and body not in sensors for body in chunk
            )
            if not valid:
                continue
            for body in chunk:
                _react(sensor_transform, transforms[body])
                processed += 1
        for body in bodies[full:]:
            if body in transforms and body not in sensors:
                _react(sensor_transform, transforms[body])
                processed += 1
    return processed