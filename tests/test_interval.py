import math

import pytest

from gentracer.interval import Interval


def test_default_is_empty():
    assert Interval() == Interval.empty()
    assert Interval().is_empty()


def test_universe_contains_everything():
    universe = Interval.universe()
    assert not universe.is_empty()
    assert universe.contains(-1e30)
    assert universe.contains(1e30)


def test_contains_includes_bounds():
    interval = Interval(0.0, 1.0)
    assert interval.contains(0.0)
    assert interval.contains(1.0)
    assert not interval.contains(1.5)


def test_surrounds_excludes_bounds():
    interval = Interval(0.0, 1.0)
    assert not interval.surrounds(0.0)
    assert not interval.surrounds(1.0)
    assert interval.surrounds(0.5)


@pytest.mark.parametrize("value", [-3.0, 0.25, 0.999, 7.0])
def test_clamp_stays_within_bounds(value):
    interval = Interval(0.0, 0.999)
    clamped = interval.clamp(value)
    assert interval.contains(clamped)
    if interval.contains(value):
        assert clamped == value


def test_clamp_below_and_above():
    interval = Interval(-1.0, 2.0)
    assert interval.clamp(-5.0) == interval.min
    assert interval.clamp(5.0) == interval.max


def test_expand_empty_with_value():
    interval = Interval.empty()
    interval.expand_to_include(4.0)
    assert interval == Interval(4.0, 4.0)
    assert interval.size() == 0.0


def test_expand_with_values_grows_both_sides():
    interval = Interval(1.0, 2.0)
    interval.expand_to_include(-3.0)
    interval.expand_to_include(5.0)
    assert interval == Interval(-3.0, 5.0)


def test_expand_with_interval():
    interval = Interval(1.0, 2.0)
    interval.expand_to_include(Interval(0.5, 1.5))
    assert interval == Interval(0.5, 2.0)


def test_size_of_empty_is_negative_infinity():
    assert Interval.empty().size() == -math.inf


def test_intersect_and_overlap():
    a = Interval(0.0, 2.0)
    b = Interval(1.0, 3.0)
    assert Interval.intersect(a, b) == Interval(1.0, 2.0)
    assert Interval.overlaps(a, b)
    assert Interval.overlaps(b, a)


def test_disjoint_intervals():
    a = Interval(0.0, 1.0)
    b = Interval(2.0, 3.0)
    assert not Interval.overlaps(a, b)
    assert Interval.intersect(a, b).is_empty()


def test_touching_intervals_overlap():
    assert Interval.overlaps(Interval(0.0, 1.0), Interval(1.0, 2.0))


def test_str_format():
    assert str(Interval(0.0, 1.0)) == "[0, 1]"
    assert str(Interval.universe()) == "[-inf, inf]"