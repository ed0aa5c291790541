from typing import Iterable, List, Tuple
from dataclasses import dataclass
from enum import Enum
import logging

from rangeset.range import Range
from rangeset.range_set import RangeSet

logger = logging.getLogger(__name__)


class OperationKind(Enum):
    ADD = 'add'
    REMOVE = 'remove'


@dataclass(frozen=True)
class Operation:
    kind: OperationKind
    range: Range

    @classmethod
    def parse(cls, kind: str, text: str) -> 'Operation':
        return cls(OperationKind(kind), Range.parse(text))

    def apply(self, target: RangeSet) -> None:
        match self.kind:
            case OperationKind.ADD:
                target.add(self.range)
            case OperationKind.REMOVE:
                target.remove(self.range)

    def __str__(self) -> str:
        return f"{self.kind.value} {self.range}"


def parse_operations(pairs: Iterable[Tuple[str, str]] | None) -> List[Operation]:
    """Parses (kind, range text) pairs as collected by the command line."""
    return [Operation.parse(kind, text) for kind, text in pairs or []]


def build_range_set(operations: Iterable[Operation]) -> RangeSet:
    """Applies the operations in order to an empty range set."""
    result = RangeSet()
    for op in operations:
        op.apply(result)
        logger.debug("After %s: %s", op, result)
    return result
