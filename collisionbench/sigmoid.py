"""Logistic curves parameterised by where they start and stop changing."""

from __future__ import annotations

import math
from dataclasses import dataclass

_A = 73.67549
_B = -0.9095928
_EDGE_PERCENT = 5.0


def get_coefficient_given_percent_away(percent_away: float) -> float:
    """Base of the exponent so that one half-width from the centre the curve is
    roughly ``percent_away`` percent from its limit."""
    if percent_away < 0.0:
        return math.nan
    if percent_away == 0.0:
        return math.inf
    return percent_away ** (1.0 / _B) / _A ** (1.0 / _B)


@dataclass
class EasySigmoidCurve:
    """A sigmoid described by its centre and half-width."""

    amplitude: float
    center: float
    distance_from_center: float
    desired_percent_away: float
    flip_direction: bool = False

    def evaluate(self, x: float) -> float:
        coefficient = get_coefficient_given_percent_away(self.desired_percent_away)
        offset = self.center - x
        if self.flip_direction:
            offset = -offset
        offset /= self.distance_from_center
        try:
            denominator = 1.0 + coefficient**offset
        except OverflowError:
            denominator = math.inf
        return self.amplitude / denominator


@dataclass
class BoundedSigmoidCurve:
    """A sigmoid described by the x range over which it changes."""

    amplitude: float
    curve_start_x: float
    curve_end_x: float
    curve_start_desired_percent: float
    flip_direction: bool = False

    def to_easy_sigmoid(self) -> EasySigmoidCurve:
        # The centre is taken from the end of the range alone.
        center = (self.curve_end_x + self.curve_end_x) / 2.0
        length = abs(self.curve_end_x - self.curve_start_x)
        return EasySigmoidCurve(
            amplitude=self.amplitude,
            center=center,
            distance_from_center=length / 2.0,
            desired_percent_away=self.curve_start_desired_percent,
            flip_direction=self.flip_direction,
        )

    def evaluate(self, x: float) -> float:
        return self.to_easy_sigmoid().evaluate(x)


@dataclass
class SuperEasySigmoidReverse:
    """A curve of height 1 that is strong at small x and fades at large x."""

    very_strong_until: float
    almost_gone_after: float

    def _create_sigmoid(self) -> BoundedSigmoidCurve:
        return BoundedSigmoidCurve(
            1.0, self.very_strong_until, self.almost_gone_after, _EDGE_PERCENT, True
        )

    def evaluate(self, x: float) -> float:
        return self._create_sigmoid().evaluate(x)

    def multiply_strong_until(self, multiplier: float) -> None:
        self.very_strong_until *= multiplier

    def multiply_almost_gone_after(self, multiplier: float) -> None:
        self.almost_gone_after *= multiplier

    def add_to_strong_until(self, addition: float) -> None:
        self.very_strong_until += addition

    def add_to_almost_gone_after(self, addition: float) -> None:
        self.almost_gone_after += addition


@dataclass
class SuperEasySigmoidRegular:
    """A curve of height 1 that is faint at small x and strong at large x."""

    almost_gone_below: float
    very_strong_after: float

    def create_sigmoid(self) -> BoundedSigmoidCurve:
        return BoundedSigmoidCurve(
            1.0, self.almost_gone_below, self.very_strong_after, _EDGE_PERCENT, False
        )

    def evaluate(self, x: float) -> float:
        return self.create_sigmoid().evaluate(x)

    def multiply_almost_gone_below(self, multiplier: float) -> None:
        self.almost_gone_below *= multiplier

    def multiply_very_strong_after(self, multiplier: float) -> None:
        self.very_strong_after *= multiplier

    def add_to_almost_gone_below(self, addition: float) -> None:
        self.almost_gone_below += addition

    def add_to_very_strong_after(self, addition: float) -> None:
        self.very_strong_after += addition