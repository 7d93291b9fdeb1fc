import math

import pytest

from collisionbench.sigmoid import (
    BoundedSigmoidCurve,
    EasySigmoidCurve,
    SuperEasySigmoidRegular,
    SuperEasySigmoidReverse,
    get_coefficient_given_percent_away,
)


def test_coefficient_is_one_at_the_reference_constant():
    assert get_coefficient_given_percent_away(73.67549) == pytest.approx(1.0)


def test_coefficient_grows_as_percent_shrinks():
    assert get_coefficient_given_percent_away(1.0) > get_coefficient_given_percent_away(5.0)


def test_coefficient_of_negative_percent_is_nan():
    result = get_coefficient_given_percent_away(-1.0)
    assert repr(result) == "nan"
    assert math.isnan(result)


def test_easy_curve_is_half_amplitude_at_center():
    curve = EasySigmoidCurve(3.0, 10.0, 2.0, 5.0)
    assert curve.evaluate(10.0) == pytest.approx(curve.amplitude / 2)


@pytest.mark.parametrize("flip", [False, True])
def test_easy_curve_is_symmetric_about_center(flip):
    curve = EasySigmoidCurve(2.0, 4.0, 1.5, 5.0, flip)
    d = 1.5
    assert curve.evaluate(4.0 + d) + curve.evaluate(4.0 - d) == pytest.approx(2.0)


def test_easy_curve_direction():
    rising = EasySigmoidCurve(1.0, 0.0, 1.0, 5.0, False)
    falling = EasySigmoidCurve(1.0, 0.0, 1.0, 5.0, True)
    xs = [-3.0, -1.0, 0.0, 1.0, 3.0]
    up = [rising.evaluate(x) for x in xs]
    down = [falling.evaluate(x) for x in xs]
    assert up == sorted(up)
    assert down == sorted(down, reverse=True)


def test_easy_curve_far_away_saturates_without_error():
    curve = EasySigmoidCurve(1.0, 0.0, 0.001, 5.0, True)
    assert curve.evaluate(1000.0) == 0.0
    assert curve.evaluate(-1000.0) == pytest.approx(1.0)


def test_bounded_curve_converts_with_end_as_center():
    curve = BoundedSigmoidCurve(2.0, 1.0, 5.0, 5.0, True)
    easy = curve.to_easy_sigmoid()
    assert easy.center == 5.0
    assert easy.distance_from_center == pytest.approx(2.0)
    assert easy.amplitude == 2.0
    assert easy.flip_direction is True
    assert curve.evaluate(3.3) == easy.evaluate(3.3)


def test_reverse_curve_falls_and_is_half_at_almost_gone():
    curve = SuperEasySigmoidReverse(2.0, 8.0)
    assert curve.evaluate(8.0) == pytest.approx(0.5)
    assert curve.evaluate(1.0) > curve.evaluate(8.0) > curve.evaluate(20.0)


def test_reverse_mutators_move_the_curve():
    curve = SuperEasySigmoidReverse(2.0, 8.0)
    curve.add_to_almost_gone_after(3.0)
    assert curve.almost_gone_after == 11.0
    assert curve.evaluate(11.0) == pytest.approx(0.5)
    curve.multiply_almost_gone_after(2.0)
    assert curve.almost_gone_after == 22.0
    curve.add_to_strong_until(1.0)
    curve.multiply_strong_until(2.0)
    assert curve.very_strong_until == 6.0


def test_regular_curve_rises():
    curve = SuperEasySigmoidRegular(1.0, 6.0)
    assert curve.evaluate(0.0) < curve.evaluate(6.0) < curve.evaluate(30.0)
    assert curve.evaluate(6.0) == pytest.approx(0.5)


def test_regular_create_sigmoid_reflects_fields():
    curve = SuperEasySigmoidRegular(1.0, 6.0)
    curve.multiply_very_strong_after(2.0)
    curve.add_to_almost_gone_below(1.0)
    bounded = curve.create_sigmoid()
    assert bounded.curve_start_x == 2.0
    assert bounded.curve_end_x == 12.0
    assert bounded.flip_direction is False
    curve.multiply_almost_gone_below(3.0)
    curve.add_to_very_strong_after(-2.0)
    assert (curve.almost_gone_below, curve.very_strong_after) == (6.0, 10.0)