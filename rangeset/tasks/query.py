from typing import List

from rangeset.messages import error, success
from rangeset.range import Range, parse_value
from rangeset.tasks.build import Operation, build_range_set


def contains(value_text: str, operations: List[Operation]) -> bool:
    rs = build_range_set(operations)
    value = parse_value(value_text)

    member = rs.range_containing(value)
    if member is not None:
        success(f"{value} is covered by {member}")
        return True

    gap = rs.complement().range_containing(value)
    error(f"{value} is not covered", f"It lies in the gap {gap}")
    return False


def encloses(range_text: str, operations: List[Operation]) -> bool:
    rs = build_range_set(operations)
    rng = Range.parse(range_text)

    if rs.encloses(rng):
        success(f"{rng} is enclosed by {rs.range_enclosing(rng)}")
        return True

    error(f"{rng} is not enclosed by {rs}")
    return False
