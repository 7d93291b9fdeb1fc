"""Deterministic, pre-generated entity positions for every frame."""

from __future__ import annotations

import random
from collections.abc import Iterable

from collisionbench.config import RunConfig
from collisionbench.spawning import World

DEFAULT_CACHE_SIZE = 1000


class PositionCache:
    """Random positions for each entity, generated up front from a seed and replayed in a cycle."""

    def __init__(
        self,
        rng_seed: int,
        bottom_left: tuple[float, float],
        top_right: tuple[float, float],
        entities: Iterable[int],
        cache_size: int,
    ) -> None:
        rng = random.Random(rng_seed)
        entity_list = list(entities)
        width = top_right[0] - bottom_left[0]
        height = top_right[1] - bottom_left[1]
        self._frames: list[dict[int, tuple[float, float]]] = []
        for _ in range(cache_size):
            frame: dict[int, tuple[float, float]] = {}
            for entity in entity_list:
                x = rng.random() * width + bottom_left[0]
                y = rng.random() * height + bottom_left[1]
                frame.setdefault(entity, (x, y))
            self._frames.append(frame)
        self.current_frame = 0

    def __len__(self) -> int:
        return len(self._frames)

    def position(self, entity: int) -> tuple[float, float] | None:
        """The entity's position in the current frame, if it has one."""
        if self.current_frame >= len(self._frames):
            return None
        return self._frames[self.current_frame].get(entity)

    def advance_frame(self) -> None:
        """Move to the next frame, wrapping round; fails on an empty cache."""
        self.current_frame = (self.current_frame + 1) % len(self._frames)


def setup_position_cache(
    config: RunConfig, entities: Iterable[int], cache_size: int = DEFAULT_CACHE_SIZE
) -> PositionCache:
    return PositionCache(
        config.rng_seed,
        (float(config.bottom_left_x), float(config.bottom_left_y)),
        (float(config.top_right_x), float(config.top_right_y)),
        entities,
        cache_size,
    )


def move_entities(cache: PositionCache, world: World) -> None:
    """Place every entity at its cached position for the current frame."""
    for entity in world.entities:
        position = cache.position(entity.id)
        if position is None:
            continue
        x, y = position
        entity.transform.translation = (x, y, entity.transform.translation[2])
        entity.bounding_circle.center = (x, y)