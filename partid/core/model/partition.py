from dataclasses import dataclass
from typing import Callable, Generator

from partid.core.exception import InvalidArgument
from partid.core.ranges import build_ranges, locate, validate_partition_count
from partid.core.space import LogicalSpace


@dataclass(frozen=True, slots=True)
class LogicalPartition:
    """
    LogicalPartition represents a contiguous segment of the logical space.

    The logical space [0, 32767) is divided into N near-equal partitions.
    Each partition covers the closed interval [start, end]. Partitions do not
    store data and do not know which shard or node serves them; callers map
    the pid to whatever they route to.
    """
    pid: int
    start: int
    end: int

    @property
    def size(self) -> int:
        return self.end - self.start + 1

    def contains(self, value: int) -> bool:
        """Reports whether the logical value belongs to this partition."""
        return self.start <= value <= self.end


class Partitioner:
    def __init__(
        self,
        partition_count: int,
        ranges_factory: Callable[[int], tuple[int, ...]] = build_ranges,
    ) -> None:
        self._partition_count = validate_partition_count(partition_count)
        self._ranges = ranges_factory(self._partition_count)

    @property
    def total_partitions(self) -> int:
        return self._partition_count

    @property
    def ranges(self) -> tuple[int, ...]:
        """Inclusive upper bound of every partition, in pid order."""
        return self._ranges

    def pid_for_logical(self, value: int) -> int:
        return locate(self._ranges, value)

    def start_for_pid(self, pid: int) -> int:
        self._check_pid(pid)
        return 0 if pid == 0 else self._ranges[pid - 1] + 1

    def end_for_pid(self, pid: int) -> int:
        self._check_pid(pid)
        return self._ranges[pid]

    def segment_for_pid(self, pid: int) -> tuple[int, int]:
        return self.start_for_pid(pid), self.end_for_pid(pid)

    def partition_for_pid(self, pid: int) -> LogicalPartition:
        start, end = self.segment_for_pid(pid)
        return LogicalPartition(pid, start, end)

    def partition_for_logical(self, value: int) -> LogicalPartition:
        """
        Construct and return the LogicalPartition that contains the logical value.
        """
        return self.partition_for_pid(self.pid_for_logical(value))

    def find_partition_by_key(self, key: str | None) -> LogicalPartition:
        value = LogicalSpace.to_logical(key)
        return self.partition_for_logical(value)

    def segments(self) -> Generator[LogicalPartition, None, None]:
        """Yield every partition in pid order."""
        for pid in range(self._partition_count):
            yield self.partition_for_pid(pid)

    def _check_pid(self, pid: int) -> None:
        if not (0 <= pid < self._partition_count):
            raise InvalidArgument(
                f"Partition id {pid} is outside [0, {self._partition_count - 1}]"
            )
