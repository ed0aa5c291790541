from typing import Any, Iterable, Union
from dataclasses import dataclass

import re

from rangeset.cut import ABOVE_ALL, BELOW_ALL, BoundType, Cut, CutKind
from rangeset.errors import InvalidArgumentError, check_not_none

################################################################################
# Notation
################################################################################

_RANGE_RE = re.compile(r'^([\[(])\s*(.*?)\s*(?:\.\.|‥)\s*(.*?)\s*([\])])$')

_NEGATIVE_INFINITY = {'-∞', '-inf', '-infinity', ''}
_POSITIVE_INFINITY = {'+∞', '∞', '+inf', 'inf', '+infinity', 'infinity', ''}


def parse_value(text: str) -> Union[int, float, str]:
    """Parses an endpoint as an int, then a float, falling back to the raw string."""
    try:
        return int(text)
    except ValueError:
        pass
    try:
        return float(text)
    except ValueError:
        return text

################################################################################
# Range
################################################################################

@dataclass(frozen=True)
class Range[C]:
    """
    An immutable interval over a totally ordered type, stored as two cuts.
    Either end may be open, closed or unbounded. Use the factory methods
    (``Range.closed(1, 3)``, ``Range.at_least(4)``, ...) to build one.
    """
    lower: Cut[C]
    upper: Cut[C]

    def __post_init__(self):
        check_not_none(self.lower, "lower")
        check_not_none(self.upper, "upper")
        if self.lower.kind is CutKind.ABOVE_ALL:
            raise InvalidArgumentError("Invalid range: lower bound cannot be +∞")
        if self.upper.kind is CutKind.BELOW_ALL:
            raise InvalidArgumentError("Invalid range: upper bound cannot be -∞")
        if self.lower > self.upper:
            # (v‥v) has no values; store it as the empty range (v‥v]
            if (self.lower.kind is CutKind.ABOVE and self.upper.kind is CutKind.BELOW
                    and self.lower.value == self.upper.value):
                object.__setattr__(self, 'upper', self.lower)
            else:
                raise InvalidArgumentError(
                    f"Invalid range: {self.lower.describe_as_lower_bound()}‥"
                    f"{self.upper.describe_as_upper_bound()} has lower > upper"
                )

    # --- Factories ---

    @classmethod
    def open(cls, lower: C, upper: C) -> 'Range[C]':
        return cls(Cut.above(lower), Cut.below(upper))

    @classmethod
    def closed(cls, lower: C, upper: C) -> 'Range[C]':
        return cls(Cut.below(lower), Cut.above(upper))

    @classmethod
    def closed_open(cls, lower: C, upper: C) -> 'Range[C]':
        return cls(Cut.below(lower), Cut.below(upper))

    @classmethod
    def open_closed(cls, lower: C, upper: C) -> 'Range[C]':
        return cls(Cut.above(lower), Cut.above(upper))

    @classmethod
    def range(cls, lower: C, lower_type: BoundType, upper: C, upper_type: BoundType) -> 'Range[C]':
        return cls(Cut.lower(lower, lower_type), Cut.upper(upper, upper_type))

    @classmethod
    def less_than(cls, upper: C) -> 'Range[C]':
        return cls(BELOW_ALL, Cut.below(upper))

    @classmethod
    def at_most(cls, upper: C) -> 'Range[C]':
        return cls(BELOW_ALL, Cut.above(upper))

    @classmethod
    def up_to(cls, upper: C, bound_type: BoundType) -> 'Range[C]':
        return cls(BELOW_ALL, Cut.upper(upper, bound_type))

    @classmethod
    def greater_than(cls, lower: C) -> 'Range[C]':
        return cls(Cut.above(lower), ABOVE_ALL)

    @classmethod
    def at_least(cls, lower: C) -> 'Range[C]':
        return cls(Cut.below(lower), ABOVE_ALL)

    @classmethod
    def down_to(cls, lower: C, bound_type: BoundType) -> 'Range[C]':
        return cls(Cut.lower(lower, bound_type), ABOVE_ALL)

    @classmethod
    def all(cls) -> 'Range[Any]':
        return cls(BELOW_ALL, ABOVE_ALL)

    @classmethod
    def singleton(cls, value: C) -> 'Range[C]':
        return cls.closed(value, value)

    @classmethod
    def enclose_all(cls, values: Iterable[C]) -> 'Range[C]':
        """Returns the minimal closed range containing all of values."""
        iterator = iter(check_not_none(values, "values"))
        try:
            low = high = check_not_none(next(iterator), "value")
        except StopIteration:
            raise InvalidArgumentError("Cannot enclose an empty collection of values")
        for value in iterator:
            check_not_none(value, "value")
            if value < low:
                low = value
            if high < value:
                high = value
        return cls.closed(low, high)

    # --- Bounds ---

    @property
    def has_lower_bound(self) -> bool:
        return self.lower.kind is not CutKind.BELOW_ALL

    @property
    def has_upper_bound(self) -> bool:
        return self.upper.kind is not CutKind.ABOVE_ALL

    @property
    def lower_endpoint(self) -> C:
        if not self.has_lower_bound:
            raise InvalidArgumentError(f"{self} has no lower bound")
        return self.lower.value

    @property
    def upper_endpoint(self) -> C:
        if not self.has_upper_bound:
            raise InvalidArgumentError(f"{self} has no upper bound")
        return self.upper.value

    @property
    def lower_bound_type(self) -> BoundType:
        if not self.has_lower_bound:
            raise InvalidArgumentError(f"{self} has no lower bound")
        return self.lower.as_lower_bound()

    @property
    def upper_bound_type(self) -> BoundType:
        if not self.has_upper_bound:
            raise InvalidArgumentError(f"{self} has no upper bound")
        return self.upper.as_upper_bound()

    # --- Predicates ---

    def is_empty(self) -> bool:
        return self.lower == self.upper

    def contains(self, value: C) -> bool:
        check_not_none(value, "value")
        return self.lower.is_less_than(value) and not self.upper.is_less_than(value)

    def __contains__(self, value: C) -> bool:
        return self.contains(value)

    def encloses(self, other: 'Range[C]') -> bool:
        check_not_none(other, "other")
        return self.lower <= other.lower and other.upper <= self.upper

    def is_connected(self, other: 'Range[C]') -> bool:
        """
        True iff there is no value strictly between the two ranges, i.e. they
        overlap or touch. [1‥3] and [3‥5] are connected, so are [1‥3) and [3‥5],
        but [1‥3) and (3‥5] are not.
        """
        check_not_none(other, "other")
        return self.lower <= other.upper and other.lower <= self.upper

    # --- Combinators ---

    def span(self, other: 'Range[C]') -> 'Range[C]':
        check_not_none(other, "other")
        lower = self.lower if self.lower <= other.lower else other.lower
        upper = self.upper if self.upper >= other.upper else other.upper
        if lower is self.lower and upper is self.upper:
            return self
        if lower is other.lower and upper is other.upper:
            return other
        return Range(lower, upper)

    def intersection(self, other: 'Range[C]') -> 'Range[C]':
        """The maximal range enclosed by both; the ranges must be connected."""
        if not self.is_connected(other):
            raise InvalidArgumentError(f"Ranges {self} and {other} are not connected")
        lower = self.lower if self.lower >= other.lower else other.lower
        upper = self.upper if self.upper <= other.upper else other.upper
        return Range(lower, upper)

    # --- Notation ---

    @classmethod
    def parse_or_null(cls, text: str) -> Union['Range[Any]', None]:
        try:
            return cls.parse(text)
        except InvalidArgumentError:
            return None

    @classmethod
    def parse(cls, text: str) -> 'Range[Any]':
        """
        Parses the notation produced by str(): "[1‥3]", "(4‥+∞)", "(-∞‥5)".
        ".." may be used instead of "‥", and a bare value is a singleton.
        """
        check_not_none(text, "text")
        text = text.strip()
        match = _RANGE_RE.match(text)
        if not match:
            if not text or any(c in text for c in '[]()‥') or '..' in text:
                raise InvalidArgumentError(f"Invalid range: {text!r}")
            return cls.singleton(parse_value(text))

        opening, low, high, closing = match.groups()
        if low.lower() in _NEGATIVE_INFINITY:
            if opening != '(':
                raise InvalidArgumentError(f"Invalid range: {text!r} (-∞ must be open)")
            lower: Cut[Any] = BELOW_ALL
        else:
            lower = Cut.lower(parse_value(low), BoundType.CLOSED if opening == '[' else BoundType.OPEN)

        if high.lower() in _POSITIVE_INFINITY:
            if closing != ')':
                raise InvalidArgumentError(f"Invalid range: {text!r} (+∞ must be open)")
            upper: Cut[Any] = ABOVE_ALL
        else:
            upper = Cut.upper(parse_value(high), BoundType.CLOSED if closing == ']' else BoundType.OPEN)

        try:
            return cls(lower, upper)
        except TypeError as e:
            raise InvalidArgumentError(f"Invalid range: {text!r} ({e})") from e

    def __str__(self) -> str:
        return f"{self.lower.describe_as_lower_bound()}‥{self.upper.describe_as_upper_bound()}"

    def __repr__(self) -> str:
        return f"Range({self})"
