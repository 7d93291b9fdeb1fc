import pytest

from collisionbench.step_function import StepFunction, solve_downwards_step_function


@pytest.fixture
def documented():
    return StepFunction([2.0, 4.0, 6.0], [1.0, 0.5, 0.2], 0.0)


@pytest.mark.parametrize(
    "x, expected",
    [(1.0, 1.0), (2.0, 0.5), (3.0, 0.5), (5.0, 0.2), (6.0, 0.0), (7.0, 0.0)],
)
def test_documented_example(documented, x, expected):
    assert documented.evaluate(x) == expected


def test_multiply_boundaries(documented):
    documented.multiply_boundaries(2.0)
    assert documented.upper_boundaries == [4.0, 8.0, 12.0]
    assert documented.evaluate(3.0) == 1.0
    assert documented.evaluate(11.0) == 0.2


def test_mismatched_lengths_rejected():
    with pytest.raises(ValueError):
        StepFunction([1.0, 2.0], [1.0], 0.0)


def test_solver_uses_final_value_when_no_boundaries():
    assert solve_downwards_step_function(5.0, [], [], 9.0) == 9.0


def test_solver_picks_first_matching_boundary():
    assert solve_downwards_step_function(0.0, [3.0, 1.0], [7.0, 8.0], 9.0) == 7.0


def test_solver_rejects_missing_y_values():
    with pytest.raises(ValueError):
        solve_downwards_step_function(0.0, [1.0, 2.0], [1.0], 0.0)