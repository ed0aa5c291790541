from typing import Any, ClassVar, Iterable, Iterator, List, Optional, Self, Union
from collections.abc import Sequence
import abc
import bisect
import logging

from rangeset.config import get_settings
from rangeset.cut import ABOVE_ALL, BELOW_ALL, Cut
from rangeset.errors import (
    ConcurrentModificationError,
    EmptyRangeSetError,
    UnsupportedOperationError,
    check_not_none,
)
from rangeset.range import Range

logger = logging.getLogger(__name__)

type RangeSource[C] = Union['RangeSetBase[C]', Iterable[Range[C]]]


def _lower(rng: Range[Any]) -> Cut[Any]:
    return rng.lower


def _upper(rng: Range[Any]) -> Cut[Any]:
    return rng.upper


def _members(source: RangeSource[Any]) -> List[Range[Any]]:
    # Always a snapshot: the source may be this set or its complement
    check_not_none(source, "other")
    if isinstance(source, RangeSetBase):
        return list(source.as_ranges())
    return [check_not_none(rng, "range") for rng in source]

################################################################################
# Ranges View
################################################################################

class RangesView[C](Sequence[Range[C]]):
    """
    Read-through view of the member ranges of a range set, in increasing order
    of lower bound (equivalently, of upper bound). Iteration fails fast if the
    set changes before the iterator is exhausted.
    """

    def __init__(self, owner: 'RangeSetBase[C]') -> None:
        self._owner = owner

    def __len__(self) -> int:
        return self._owner._count()

    def __getitem__(self, index):
        if isinstance(index, slice):
            return [self[i] for i in range(*index.indices(len(self)))]
        count = len(self)
        if index < 0:
            index += count
        if not 0 <= index < count:
            raise IndexError(f"Range index out of range: {index}")
        return self._owner._range_at(index)

    def __iter__(self) -> Iterator[Range[C]]:
        owner = self._owner
        expected = owner._mod_count
        i = 0
        while True:
            if owner._mod_count != expected:
                raise ConcurrentModificationError("Range set changed during iteration")
            if i >= owner._count():
                return
            yield owner._range_at(i)
            i += 1

    def __contains__(self, item: object) -> bool:
        if not isinstance(item, Range):
            return False
        candidate = self._owner._floor(item.lower)
        return candidate == item

    def first(self) -> Range[C]:
        if not self:
            raise EmptyRangeSetError("Range set is empty")
        return self[0]

    def last(self) -> Range[C]:
        if not self:
            raise EmptyRangeSetError("Range set is empty")
        return self[-1]

    def __repr__(self) -> str:
        return f"RangesView([{', '.join(str(rng) for rng in self)}])"

################################################################################
# Range Set Contract
################################################################################

class RangeSetBase[C](abc.ABC):
    """
    A set of disjoint, non-empty, non-connected ranges. Every query is answered
    from four primitives: the member count, the member at an index, the member
    with the greatest lower bound at or below a cut, and a modification counter.
    """

    supports_mutation: ClassVar[bool] = True

    @abc.abstractmethod
    def _count(self) -> int:
        raise NotImplementedError()

    @abc.abstractmethod
    def _range_at(self, index: int) -> Range[C]:
        raise NotImplementedError()

    @abc.abstractmethod
    def _floor(self, cut: Cut[C]) -> Optional[Range[C]]:
        raise NotImplementedError()

    @property
    @abc.abstractmethod
    def _mod_count(self) -> int:
        raise NotImplementedError()

    @abc.abstractmethod
    def add(self, rng: Range[C]) -> None:
        raise NotImplementedError()

    @abc.abstractmethod
    def remove(self, rng: Range[C]) -> None:
        raise NotImplementedError()

    @abc.abstractmethod
    def complement(self) -> 'RangeSetBase[C]':
        raise NotImplementedError()

    def _check_mutable(self) -> None:
        if not self.supports_mutation:
            raise UnsupportedOperationError(f"{type(self).__name__} does not support mutation")

    # --- Queries ---

    def contains(self, value: C) -> bool:
        return self.range_containing(value) is not None

    def __contains__(self, value: C) -> bool:
        return self.contains(value)

    def range_containing(self, value: C) -> Optional[Range[C]]:
        """Returns the member range containing value, or None."""
        check_not_none(value, "value")
        candidate = self._floor(Cut.below(value))
        if candidate is not None and candidate.contains(value):
            return candidate
        return None

    def is_empty(self) -> bool:
        return self._count() == 0

    def __bool__(self) -> bool:
        return not self.is_empty()

    def span(self) -> Range[C]:
        """The minimal range enclosing every member range."""
        if self.is_empty():
            raise EmptyRangeSetError("Cannot take the span of an empty range set")
        return self._range_at(0).span(self._range_at(self._count() - 1))

    def range_enclosing(self, rng: Range[C]) -> Optional[Range[C]]:
        """Returns the member range enclosing rng, or None."""
        check_not_none(rng, "range")
        candidate = self._floor(rng.lower)
        if candidate is not None and candidate.encloses(rng):
            return candidate
        return None

    def encloses(self, rng: Range[C]) -> bool:
        return self.range_enclosing(rng) is not None

    def encloses_all(self, other: RangeSource[C]) -> bool:
        return all(self.encloses(rng) for rng in _members(other))

    def as_ranges(self) -> RangesView[C]:
        return RangesView(self)

    def __invert__(self) -> 'RangeSetBase[C]':
        return self.complement()

    # --- Bulk mutation ---

    def add_all(self, other: RangeSource[C]) -> None:
        self._check_mutable()
        for rng in _members(other):
            self.add(rng)

    def remove_all(self, other: RangeSource[C]) -> None:
        self._check_mutable()
        for rng in _members(other):
            self.remove(rng)

    def __ior__(self, other: RangeSource[C]) -> 'RangeSetBase[C]':
        self.add_all(other)
        return self

    def __isub__(self, other: RangeSource[C]) -> 'RangeSetBase[C]':
        self.remove_all(other)
        return self

    # --- Derived sets ---

    def copy(self) -> 'RangeSet[C]':
        return RangeSet(self)

    def union(self, other: RangeSource[C]) -> 'RangeSet[C]':
        result = self.copy()
        result.add_all(other)
        return result

    def difference(self, other: RangeSource[C]) -> 'RangeSet[C]':
        result = self.copy()
        result.remove_all(other)
        return result

    def intersection(self, other: RangeSource[C]) -> 'RangeSet[C]':
        if not isinstance(other, RangeSetBase):
            other = RangeSet(other)
        result = self.copy()
        result.remove_all(other.complement())
        return result

    def __or__(self, other: object) -> 'RangeSet[C]':
        if not isinstance(other, RangeSetBase):
            return NotImplemented
        return self.union(other)

    def __and__(self, other: object) -> 'RangeSet[C]':
        if not isinstance(other, RangeSetBase):
            return NotImplemented
        return self.intersection(other)

    def __sub__(self, other: object) -> 'RangeSet[C]':
        if not isinstance(other, RangeSetBase):
            return NotImplemented
        return self.difference(other)

    # --- Object protocol ---

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RangeSetBase):
            return NotImplemented
        return list(self.as_ranges()) == list(other.as_ranges())

    __hash__ = None  # type: ignore

    def __str__(self) -> str:
        if self.is_empty():
            return "{}"
        return ''.join(str(rng) for rng in self.as_ranges())

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self})"

################################################################################
# Sorted List Implementation
################################################################################

class _SortedRangeSet[C](RangeSetBase[C]):
    # Invariant: _ranges is sorted by lower cut, holds no empty range, and for
    # any two neighbours a, b we have a.upper < b.lower (so they are not connected).
    _ranges: List[Range[C]]

    def __init__(self, ranges: RangeSource[C] = ()) -> None:
        self._ranges = []
        self._modifications = 0
        for rng in _members(ranges):
            self._add(rng)

    @classmethod
    def copy_of(cls, ranges: RangeSource[C]) -> Self:
        return cls(ranges)

    @classmethod
    def of(cls, *ranges: Range[C]) -> Self:
        return cls(ranges)

    def _count(self) -> int:
        return len(self._ranges)

    def _range_at(self, index: int) -> Range[C]:
        return self._ranges[index]

    def _floor(self, cut: Cut[C]) -> Optional[Range[C]]:
        index = bisect.bisect_right(self._ranges, cut, key=_lower) - 1
        return self._ranges[index] if index >= 0 else None

    @property
    def _mod_count(self) -> int:
        return self._modifications

    def add(self, rng: Range[C]) -> None:
        """
        Adds rng, coalescing it with every member range it is connected to.
        Adding an empty range is a no-op.
        """
        self._check_mutable()
        self._add(check_not_none(rng, "range"))

    def remove(self, rng: Range[C]) -> None:
        """
        Removes every value of rng, splitting member ranges that stick out on
        either side. Removing an empty range is a no-op.
        """
        self._check_mutable()
        self._remove(check_not_none(rng, "range"))

    def complement(self) -> 'RangeSetBase[C]':
        return _ComplementRangeSet(self)

    def _add(self, rng: Range[C]) -> None:
        if rng.is_empty():
            return
        ranges = self._ranges
        # Members [lo, hi) are connected to rng: lower <= rng.upper and upper >= rng.lower
        hi = bisect.bisect_right(ranges, rng.upper, key=_lower)
        lo = bisect.bisect_left(ranges, rng.lower, 0, hi, key=_upper)

        if lo + 1 == hi and ranges[lo].encloses(rng):
            return

        merged = rng
        if lo < hi:
            merged = rng.span(ranges[lo]).span(ranges[hi - 1])
            logger.debug("Coalesced %s with %d member range(s) into %s", rng, hi - lo, merged)

        ranges[lo:hi] = [merged]
        self._modified()

    def _remove(self, rng: Range[C]) -> None:
        if rng.is_empty():
            return
        ranges = self._ranges
        # Members [lo, hi) share a value with rng: lower < rng.upper and upper > rng.lower
        hi = bisect.bisect_left(ranges, rng.upper, key=_lower)
        lo = bisect.bisect_right(ranges, rng.lower, 0, hi, key=_upper)
        if lo >= hi:
            return

        first, last = ranges[lo], ranges[hi - 1]
        remainders: List[Range[C]] = []
        if first.lower < rng.lower:
            remainders.append(Range(first.lower, rng.lower))
        if rng.upper < last.upper:
            remainders.append(Range(rng.upper, last.upper))
        logger.debug("Removed %s from %d member range(s), keeping %s",
                     rng, hi - lo, ', '.join(str(r) for r in remainders) or 'nothing')

        ranges[lo:hi] = remainders
        self._modified()

    def _modified(self) -> None:
        self._modifications += 1
        if get_settings().check_invariants:
            self._check_invariants()

    def _check_invariants(self) -> None:
        problem = None
        for rng in self._ranges:
            if rng.is_empty():
                problem = f"empty member range {rng}"
                break
        else:
            for a, b in zip(self._ranges, self._ranges[1:]):
                if not a.upper < b.lower:
                    problem = f"member ranges {a} and {b} are connected or out of order"
                    break
        if problem is not None:
            logger.error("Invariant violated in %r: %s", self, problem)
            raise AssertionError(f"Invariant violated: {problem}")


class RangeSet[C](_SortedRangeSet[C]):
    """
    A mutable set of disjoint ranges over a totally ordered type. Connected
    ranges are coalesced on add; member ranges are split on remove.

        rs = RangeSet([Range.closed(1, 3)])
        rs.add(Range.greater_than(4))
        str(rs)  # "[1‥3](4‥+∞)"
    """
    supports_mutation: ClassVar[bool] = True

    empty: ClassVar['ImmutableRangeSet[Any]']  # type: ignore


class ImmutableRangeSet[C](_SortedRangeSet[C]):
    """A read-only, hashable range set. Its complement is read-only as well."""
    supports_mutation: ClassVar[bool] = False

    def __hash__(self) -> int:
        return hash(tuple(self._ranges))


RangeSet.empty = ImmutableRangeSet()  # type: ignore

################################################################################
# Complement View
################################################################################

class _ComplementRangeSet[C](RangeSetBase[C]):
    """
    Live view of everything a range set does not cover. Its member ranges are
    the gaps between consecutive members of the underlying set plus the two
    edge gaps; nothing is stored. add/remove are forwarded as remove/add.
    """

    def __init__(self, positive: _SortedRangeSet[C]) -> None:
        self._positive = positive

    @property
    def supports_mutation(self) -> bool:  # type: ignore[override]
        return self._positive.supports_mutation

    @property
    def _mod_count(self) -> int:
        return self._positive._mod_count

    def _gap(self, index: int) -> Range[C]:
        # The gap just before positive member `index` (index == len means after the last)
        ranges = self._positive._ranges
        lower = ranges[index - 1].upper if index > 0 else BELOW_ALL
        upper = ranges[index].lower if index < len(ranges) else ABOVE_ALL
        return Range(lower, upper)

    def _offset(self) -> int:
        ranges = self._positive._ranges
        return 1 if ranges and ranges[0].lower == BELOW_ALL else 0

    def _count(self) -> int:
        ranges = self._positive._ranges
        if not ranges:
            return 1
        unbounded_above = ranges[-1].upper == ABOVE_ALL
        return len(ranges) + 1 - self._offset() - (1 if unbounded_above else 0)

    def _range_at(self, index: int) -> Range[C]:
        return self._gap(index + self._offset())

    def _floor(self, cut: Cut[C]) -> Optional[Range[C]]:
        ranges = self._positive._ranges
        index = bisect.bisect_right(ranges, cut, key=_upper)
        # No edge gap exists beside a member that is unbounded on that side
        if index == 0 and ranges and ranges[0].lower == BELOW_ALL:
            return None
        if index == len(ranges) and ranges and ranges[-1].upper == ABOVE_ALL:
            return None
        return self._gap(index)

    def add(self, rng: Range[C]) -> None:
        self._check_mutable()
        self._positive.remove(rng)

    def remove(self, rng: Range[C]) -> None:
        self._check_mutable()
        self._positive.add(rng)

    def complement(self) -> RangeSetBase[C]:
        return self._positive

    def __repr__(self) -> str:
        return f"{type(self._positive).__name__}.complement({self})"
