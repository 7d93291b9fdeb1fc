"""Creating the grid of bodies and sensors the benchmark runs on."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field

from collisionbench.config import RunConfig
from collisionbench.model import BoundingCircle, Collidable, Transform
from collisionbench.palette import AvailableColor

logger = logging.getLogger(__name__)

OUTLINE_SEGMENTS = 32
BODY_COLOR = AvailableColor.PEAR
SENSOR_COLOR = AvailableColor.EMERALD


@dataclass
class SimEntity:
    id: int
    transform: Transform
    bounding_circle: BoundingCircle
    is_sensor: bool
    color: AvailableColor


@dataclass
class World:
    entities: list[SimEntity] = field(default_factory=list)

    def collidables(self) -> list[Collidable]:
        """Detector input for every entity, centred on its current translation."""
        return [
            Collidable(
                center_x=e.transform.translation[0],
                center_y=e.transform.translation[1],
                radius=e.bounding_circle.radius,
                entity=e.id,
                is_sensor=e.is_sensor,
            )
            for e in self.entities
        ]

    def sensor_ids(self) -> set[int]:
        return {e.id for e in self.entities if e.is_sensor}


def circle_outline(radius: float, segments: int = OUTLINE_SEGMENTS) -> list[tuple[float, float, float]]:
    """Closed line strip approximating a circle; the last point repeats the first."""
    if segments < 1:
        raise ValueError("segments must be at least 1")
    points = []
    for i in range(segments + 1):
        angle = (i / segments) * math.tau
        points.append((radius * math.cos(angle), radius * math.sin(angle), 0.0))
    return points


def _entity(entity_id: int, x: float, y: float, radius: float, sensor: bool) -> SimEntity:
    return SimEntity(
        id=entity_id,
        transform=Transform(translation=(x, y, 0.0)),
        bounding_circle=BoundingCircle((x, y), radius),
        is_sensor=sensor,
        color=SENSOR_COLOR if sensor else BODY_COLOR,
    )


def spawn_entities(config: RunConfig) -> World:
    """Place one body and one sensor on every integer point of the configured area."""
    world = World()
    for x in range(config.bottom_left_x, config.top_right_x):
        for y in range(config.bottom_left_y, config.top_right_y):
            next_id = len(world.entities)
            world.entities.append(_entity(next_id, float(x), float(y), config.body_radius, False))
            world.entities.append(
                _entity(next_id + 1, float(x), float(y), config.sensor_radius, True)
            )
    logger.info("total of %d entities spawned", len(world.entities))
    return world