import bisect
from typing import Sequence

from partid.core.exception import InvalidArgument
from partid.core.space import LogicalSpace


def validate_partition_count(partition_count: int) -> int:
    """
    Reports the partition count back if it can own a non-empty range.

    The logical space holds SIZE distinct values, so at most SIZE partitions
    can each receive at least one of them.
    """
    if isinstance(partition_count, bool) or not isinstance(partition_count, int):
        raise InvalidArgument(
            f"Partition count must be an integer, got {type(partition_count).__name__}"
        )
    if not (1 <= partition_count <= LogicalSpace.SIZE):
        raise InvalidArgument(
            f"Partition count must be in [1, {LogicalSpace.SIZE}], got {partition_count}"
        )
    return partition_count


def build_ranges(partition_count: int) -> tuple[int, ...]:
    """
    Split the logical space into `partition_count` contiguous ranges.

    Returns the inclusive upper bound of each range, in ascending order.
    The first `SIZE % partition_count` partitions get one extra value, so
    range sizes differ by at most one. The last bound is always pinned to
    LogicalSpace.MAX.

    Example with 4 partitions (SIZE = 32767, base = 8191, remainder = 3):
        sizes   8192, 8192, 8192, 8191
        bounds  8191, 16383, 24575, 32766
    """
    validate_partition_count(partition_count)

    total = LogicalSpace.SIZE
    base = total // partition_count
    remainder = total - partition_count * base

    ranges: list[int] = []
    end = -1
    for i in range(partition_count - 1):
        size = base + 1 if i < remainder else base
        end = min(end + size, total - 1)
        ranges.append(end)

    ranges.append(total - 1)
    return tuple(ranges)


def locate(ranges: Sequence[int], value: int) -> int:
    """
    Return the index of the range owning `value`.

    This is a lower bound: the leftmost i such that value <= ranges[i].
    Bounds are strictly ascending, so exactly one index qualifies for any
    value in [0, ranges[-1]].
    """
    if not ranges:
        raise InvalidArgument("Range table is empty")
    if not (0 <= value <= ranges[-1]):
        raise InvalidArgument(f"Logical value {value} is outside [0, {ranges[-1]}]")
    return bisect.bisect_left(ranges, value)
