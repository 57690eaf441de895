import pytest

from algodrills.stacks import (
    asteroid_collision,
    backspace_compare,
    cal_points,
    daily_temperatures,
    is_valid_parentheses,
    remove_stars,
)


@pytest.mark.parametrize("text", ["()[]{}", "", "([{}])", "(())"])
def test_valid_parentheses(text):
    assert is_valid_parentheses(text) is True


@pytest.mark.parametrize("text", ["(]", "([)]", "(", ")", "{[}"])
def test_invalid_parentheses(text):
    assert is_valid_parentheses(text) is False


def test_parentheses_reject_other_characters():
    with pytest.raises(ValueError):
        is_valid_parentheses("(a)")


def test_cal_points_example():
    assert cal_points(["5", "2", "C", "D", "+"]) == 30


def test_cal_points_single_score():
    assert cal_points(["7"]) == 7
    assert cal_points([]) == 0


def test_cal_points_cancel_restores_previous_total():
    assert cal_points(["4", "9", "C"]) == cal_points(["4"])


@pytest.mark.parametrize("ops", [["C"], ["D"], ["1", "+"], ["x"]])
def test_cal_points_errors(ops):
    with pytest.raises(ValueError):
        cal_points(ops)


def test_asteroid_collision_example():
    assert asteroid_collision([-2, -2, 1, -2]) == [-2, -2, -2]


def test_asteroid_equal_sizes_destroy_each_other():
    assert asteroid_collision([5, -5]) == []


def test_asteroid_larger_survives():
    assert asteroid_collision([3, -1]) == [3]
    assert asteroid_collision([1, -3]) == [-3]


@pytest.mark.parametrize("asteroids", [[1, 2, 3], [-1, -2], [-1, 1], []])
def test_asteroids_without_collision_are_unchanged(asteroids):
    assert asteroid_collision(asteroids) == asteroids


def test_backspace_compare():
    assert backspace_compare("ab#c", "ad#c") is True
    assert backspace_compare("ab##", "c#d#") is True
    assert backspace_compare("a#c", "b") is False


def test_backspace_on_empty_is_ignored():
    assert backspace_compare("###a", "a") is True


def test_remove_stars_without_stars():
    assert remove_stars("abc") == "abc"


def test_remove_stars_removes_left_characters():
    assert remove_stars("abc**") == "a"
    assert remove_stars("ab**") == ""


def test_remove_stars_error():
    with pytest.raises(ValueError):
        remove_stars("*a")


def test_daily_temperatures_example():
    assert daily_temperatures([73, 74, 75, 71, 69, 72, 76, 73]) == [
        1, 1, 4, 2, 1, 1, 0, 0
    ]


def test_daily_temperatures_decreasing_gives_zeros():
    assert daily_temperatures([5, 4, 3, 3]) == [0, 0, 0, 0]


def test_daily_temperatures_points_to_first_warmer_day():
    temps = [30, 60, 50, 40, 55, 90, 10, 20]
    waits = daily_temperatures(temps)
    assert len(waits) == len(temps)
    assert waits[-1] == 0
    for day, wait in enumerate(waits):
        if wait:
            assert temps[day + wait] > temps[day]
            assert all(t <= temps[day] for t in temps[day + 1 : day + wait])
        else:
            assert all(t <= temps[day] for t in temps[day + 1 :])