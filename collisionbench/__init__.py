"""Deterministic 2D circle collision detection benchmark: spawning, movement,
all-pairs and batched detection, collision processing and JSON result logging."""

__version__ = "0.1.0"