from typing import Any
from dataclasses import dataclass
from enum import Enum

from rangeset.errors import check_not_none

################################################################################
# Bound Type
################################################################################

class BoundType(Enum):
    OPEN = 'open'
    CLOSED = 'closed'

    def flip(self) -> 'BoundType':
        return BoundType.CLOSED if self is BoundType.OPEN else BoundType.OPEN

################################################################################
# Cut
################################################################################

class CutKind(Enum):
    # Values give the order of two cuts at the same point
    BELOW_ALL = 0
    BELOW = 1
    ABOVE = 2
    ABOVE_ALL = 3


@dataclass(frozen=True)
class Cut[C]:
    """
    A position on the ordered line: just below a value, just above a value, or
    below/above every value. A range is a pair of cuts, so a closed lower bound
    at v is BELOW(v), an open lower bound is ABOVE(v), an open upper bound is
    BELOW(v) and a closed upper bound is ABOVE(v).
    """
    kind: CutKind
    value: C | None = None

    @classmethod
    def below_all(cls) -> 'Cut[Any]':
        return BELOW_ALL

    @classmethod
    def above_all(cls) -> 'Cut[Any]':
        return ABOVE_ALL

    @classmethod
    def below(cls, value: C) -> 'Cut[C]':
        return cls(CutKind.BELOW, check_not_none(value, "value"))

    @classmethod
    def above(cls, value: C) -> 'Cut[C]':
        return cls(CutKind.ABOVE, check_not_none(value, "value"))

    @classmethod
    def lower(cls, value: C, bound_type: BoundType) -> 'Cut[C]':
        return cls.below(value) if bound_type is BoundType.CLOSED else cls.above(value)

    @classmethod
    def upper(cls, value: C, bound_type: BoundType) -> 'Cut[C]':
        return cls.above(value) if bound_type is BoundType.CLOSED else cls.below(value)

    @property
    def is_finite(self) -> bool:
        return self.kind in (CutKind.BELOW, CutKind.ABOVE)

    def is_less_than(self, value: C) -> bool:
        """True iff value lies above this cut."""
        match self.kind:
            case CutKind.BELOW_ALL:
                return True
            case CutKind.ABOVE_ALL:
                return False
            case CutKind.BELOW:
                return not value < self.value
            case _:
                return self.value < value

    def as_lower_bound(self) -> BoundType:
        assert self.is_finite, f"{self} has no bound type"
        return BoundType.CLOSED if self.kind is CutKind.BELOW else BoundType.OPEN

    def as_upper_bound(self) -> BoundType:
        assert self.is_finite, f"{self} has no bound type"
        return BoundType.OPEN if self.kind is CutKind.BELOW else BoundType.CLOSED

    def describe_as_lower_bound(self) -> str:
        match self.kind:
            case CutKind.BELOW_ALL: return "(-∞"
            case CutKind.BELOW:     return f"[{self.value}"
            case CutKind.ABOVE:     return f"({self.value}"
            case _:                 return "(+∞"

    def describe_as_upper_bound(self) -> str:
        match self.kind:
            case CutKind.BELOW_ALL: return "-∞)"
            case CutKind.BELOW:     return f"{self.value})"
            case CutKind.ABOVE:     return f"{self.value}]"
            case _:                 return "+∞)"

    def compare_to(self, other: 'Cut[C]') -> int:
        if not self.is_finite or not other.is_finite:
            return (self.kind.value > other.kind.value) - (self.kind.value < other.kind.value)
        if self.value < other.value:
            return -1
        if other.value < self.value:
            return 1
        return (self.kind.value > other.kind.value) - (self.kind.value < other.kind.value)

    def __lt__(self, other: 'Cut[C]') -> bool:
        return self.compare_to(other) < 0
    def __le__(self, other: 'Cut[C]') -> bool:
        return self.compare_to(other) <= 0
    def __gt__(self, other: 'Cut[C]') -> bool:
        return self.compare_to(other) > 0
    def __ge__(self, other: 'Cut[C]') -> bool:
        return self.compare_to(other) >= 0

    def __repr__(self) -> str:
        match self.kind:
            case CutKind.BELOW_ALL: return "Cut.below_all()"
            case CutKind.ABOVE_ALL: return "Cut.above_all()"
            case CutKind.BELOW:     return f"Cut.below({self.value!r})"
            case _:                 return f"Cut.above({self.value!r})"


BELOW_ALL: Cut[Any] = Cut(CutKind.BELOW_ALL)
ABOVE_ALL: Cut[Any] = Cut(CutKind.ABOVE_ALL)
