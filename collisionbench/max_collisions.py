"""Upper bound on the number of distinct colliding pairs."""

from __future__ import annotations


def max_collisions(num_entities: int) -> int:
    """Number of unordered pairs that ``num_entities`` entities can form."""
    if num_entities < 0:
        raise ValueError("the number of entities cannot be negative")
    if num_entities == 0:
        return 0
    return num_entities * (num_entities - 1) // 2