"""Brute-force pairwise collision detection on the CPU."""

from __future__ import annotations

from collections.abc import Iterable
from itertools import combinations

from collisionbench.model import BoundingCircle, Collidable, CollidingPair


def _circle(collidable: Collidable) -> BoundingCircle:
    return BoundingCircle((collidable.center_x, collidable.center_y), collidable.radius)


def detect_collisions(collidables: Iterable[Collidable]) -> list[CollidingPair]:
    """Test every collidable against every later one and return the overlapping pairs.

    In each pair the collidable that came first in the input is ``metadata1``.
    """
    items = [(c.to_metadata(), _circle(c)) for c in collidables]
    return [
        CollidingPair(meta_a, meta_b)
        for (meta_a, circle_a), (meta_b, circle_b) in combinations(items, 2)
        if circle_a.intersects(circle_b)
    ]