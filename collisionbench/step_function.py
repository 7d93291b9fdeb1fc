"""Piecewise-constant functions that step down at fixed boundaries."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field


def solve_downwards_step_function(
    x: float,
    upper_boundaries: Sequence[float],
    y_values: Sequence[float],
    final_y: float,
) -> float:
    """Return the y of the first boundary that ``x`` lies below, else ``final_y``."""
    if len(y_values) < len(upper_boundaries):
        raise ValueError("every boundary needs a y value")
    return next(
        (y for boundary, y in zip(upper_boundaries, y_values) if x < boundary),
        final_y,
    )


@dataclass
class StepFunction:
    """A step function, e.g. ``StepFunction([2, 4, 6], [1.0, 0.5, 0.2], 0.0)``
    is 1.0 below 2, 0.5 below 4, 0.2 below 6 and 0.0 from 6 on."""

    upper_boundaries: list[float] = field(default_factory=list)
    y_values: list[float] = field(default_factory=list)
    final_y: float = 0.0

    def __post_init__(self) -> None:
        self.upper_boundaries = list(self.upper_boundaries)
        self.y_values = list(self.y_values)
        if len(self.upper_boundaries) != len(self.y_values):
            raise ValueError("Boundaries and y-values must have same length")

    def multiply_boundaries(self, factor: float) -> None:
        self.upper_boundaries = [b * factor for b in self.upper_boundaries]

    def evaluate(self, x: float) -> float:
        return solve_downwards_step_function(
            x, self.upper_boundaries, self.y_values, self.final_y
        )