from typing import List

from rangeset.messages import info, success, warning
from rangeset.range_set import RangeSet
from rangeset.tasks.build import Operation, build_range_set


def evaluate(operations: List[Operation], show_complement: bool = False) -> RangeSet:
    result = build_range_set(operations)

    if result.is_empty():
        warning("Range set is empty")
    else:
        success(f"Range set: {result}")
        info(f"Members: {len(result.as_ranges())}",
             f"Span: {result.span()}")

    if show_complement:
        info(f"Complement: {result.complement()}")

    return result
