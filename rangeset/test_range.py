import pytest

from rangeset.cut import ABOVE_ALL, BELOW_ALL, BoundType, Cut
from rangeset.errors import InvalidArgumentError
from rangeset.range import Range, parse_value


def test_cut_ordering():
    # closed lower < open lower < ... < open upper < closed upper at the same value
    assert BELOW_ALL < Cut.below(5) < Cut.above(5) < ABOVE_ALL
    assert Cut.above(4) < Cut.below(5)
    assert Cut.below(5) == Cut.lower(5, BoundType.CLOSED) == Cut.upper(5, BoundType.OPEN)
    assert Cut.above(5) == Cut.lower(5, BoundType.OPEN) == Cut.upper(5, BoundType.CLOSED)
    assert BELOW_ALL <= BELOW_ALL and not BELOW_ALL < BELOW_ALL
    assert ABOVE_ALL > Cut.above(10 ** 9)
    assert sorted([Cut.above(1), ABOVE_ALL, Cut.below(1), BELOW_ALL]) == [
        BELOW_ALL, Cut.below(1), Cut.above(1), ABOVE_ALL]


def test_cut_rejects_none():
    with pytest.raises(InvalidArgumentError):
        Cut.below(None)


def test_contains():
    r = Range.closed_open(1, 3)
    assert 1 in r
    assert r.contains(2.5)
    assert 3 not in r
    assert 0 not in r
    assert Range.all().contains(-10 ** 12)
    assert Range.less_than(0).contains(-1)
    assert not Range.less_than(0).contains(0)
    assert Range.at_most(0).contains(0)
    assert Range.greater_than("m").contains("n")


def test_empty_ranges():
    assert Range.closed_open(5, 5).is_empty()
    assert Range.open_closed(5, 5).is_empty()
    assert Range.open(5, 5).is_empty()
    assert not Range.singleton(5).is_empty()
    assert 5 not in Range.open(5, 5)


def test_inverted_range_is_rejected():
    with pytest.raises(InvalidArgumentError):
        Range.closed(3, 1)
    with pytest.raises(InvalidArgumentError):
        Range.open(5, 4)
    with pytest.raises(ValueError):
        Range(ABOVE_ALL, ABOVE_ALL)


def test_none_is_rejected():
    with pytest.raises(InvalidArgumentError):
        Range.closed(None, 3)
    with pytest.raises(InvalidArgumentError):
        Range.closed(1, 3).contains(None)
    with pytest.raises(InvalidArgumentError):
        Range.closed(1, 3).span(None)


def test_is_connected():
    assert Range.closed(1, 3).is_connected(Range.closed(3, 5))
    assert Range.closed_open(1, 3).is_connected(Range.closed(3, 5))
    assert Range.closed(1, 3).is_connected(Range.open(3, 5))
    assert not Range.closed_open(1, 3).is_connected(Range.open_closed(3, 5))
    assert not Range.closed(1, 2).is_connected(Range.closed(4, 5))
    assert Range.closed(1, 10).is_connected(Range.closed(4, 5))
    assert Range.less_than(0).is_connected(Range.at_least(0))


def test_span_and_encloses():
    assert Range.closed(1, 2).span(Range.open(4, 5)) == Range.closed_open(1, 5)
    assert Range.at_least(3).span(Range.closed(1, 2)) == Range.at_least(1)
    outer = Range.closed(1, 10)
    assert outer.encloses(Range.open(1, 10))
    assert outer.encloses(outer)
    assert not Range.open(1, 10).encloses(outer)
    assert Range.all().encloses(Range.greater_than(7))


def test_intersection():
    assert Range.closed(1, 5).intersection(Range.open(3, 8)) == Range.open_closed(3, 5)
    assert Range.closed(1, 3).intersection(Range.closed(3, 5)) == Range.singleton(3)
    assert Range.closed_open(1, 3).intersection(Range.closed(3, 5)).is_empty()
    with pytest.raises(InvalidArgumentError):
        Range.closed(1, 2).intersection(Range.closed(4, 5))


def test_bounds():
    r = Range.open_closed(1, 3)
    assert r.lower_endpoint == 1 and r.lower_bound_type is BoundType.OPEN
    assert r.upper_endpoint == 3 and r.upper_bound_type is BoundType.CLOSED
    assert Range.range(1, BoundType.OPEN, 3, BoundType.CLOSED) == r
    assert Range.up_to(3, BoundType.OPEN) == Range.less_than(3)
    assert Range.down_to(3, BoundType.CLOSED) == Range.at_least(3)
    assert not Range.at_most(3).has_lower_bound
    with pytest.raises(InvalidArgumentError):
        Range.at_most(3).lower_endpoint


def test_enclose_all():
    assert Range.enclose_all([4, 1, 7, 3]) == Range.closed(1, 7)
    with pytest.raises(InvalidArgumentError):
        Range.enclose_all([])


def test_str():
    assert str(Range.closed(1, 3)) == "[1‥3]"
    assert str(Range.greater_than(4)) == "(4‥+∞)"
    assert str(Range.at_most(5)) == "(-∞‥5]"
    assert str(Range.all()) == "(-∞‥+∞)"
    assert repr(Range.closed_open(1, 2)) == "Range([1‥2))"


def test_parse():
    assert Range.parse("[1‥3]") == Range.closed(1, 3)
    assert Range.parse("(4..+inf)") == Range.greater_than(4)
    assert Range.parse(" (-∞ .. 5] ") == Range.at_most(5)
    assert Range.parse("[1.5..2)") == Range.closed_open(1.5, 2)
    assert Range.parse("[a..f]") == Range.closed("a", "f")
    assert Range.parse("7") == Range.singleton(7)
    for r in [Range.closed(1, 3), Range.open(2, 9), Range.at_least(-4), Range.all()]:
        assert Range.parse(str(r)) == r


def test_parse_invalid():
    for text in ["", "[1..", "[-inf..3]", "(1..inf]", "[3..1]", "[1..a]"]:
        with pytest.raises(InvalidArgumentError):
            Range.parse(text)
    assert Range.parse_or_null("[3..1]") is None


def test_parse_value():
    assert parse_value("12") == 12
    assert parse_value("1.25") == 1.25
    assert parse_value("abc") == "abc"


def test_ranges_are_hashable_values():
    assert len({Range.closed(1, 3), Range.closed(1, 3), Range.open(1, 3)}) == 2
