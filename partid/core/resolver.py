import logging
from functools import _CacheInfo, lru_cache
from typing import TYPE_CHECKING

from partid.core.exception import InvalidArgument
from partid.core.model.pair import HashPair
from partid.core.model.partition import LogicalPartition, Partitioner
from partid.core.ranges import build_ranges, locate, validate_partition_count
from partid.core.space import LogicalSpace

if TYPE_CHECKING:
    from partid.bootstrap.config.settings import PartidConfig


class PartitionResolver:
    """
    Maps partition keys to partition ids.

    The pipeline is: key → canonical bytes → mixing hash → logical value →
    lower-bound search in the range table of the requested partition count.

    Range tables only depend on the partition count and are memoized in a
    per-resolver LRU cache. Everything else is recomputed per call, so one
    resolver can be shared freely between threads.
    """

    def __init__(self, partition_count: int | None = None, range_cache_size: int = 128) -> None:
        self._logger = logging.getLogger("partid.core.resolver")
        if partition_count is not None:
            validate_partition_count(partition_count)
        if range_cache_size < 0:
            raise InvalidArgument(f"Range cache size must be >= 0, got {range_cache_size}")

        self._partition_count = partition_count
        self._range_cache_size = range_cache_size
        self._cached_ranges = lru_cache(maxsize=range_cache_size)(self._build_ranges)

    @classmethod
    def from_config(cls, config: "PartidConfig") -> "PartitionResolver":
        return cls(
            partition_count=config.partitioning.partition_count,
            range_cache_size=config.partitioning.range_cache_size,
        )

    @property
    def partition_count(self) -> int | None:
        return self._partition_count

    def _build_ranges(self, partition_count: int) -> tuple[int, ...]:
        ranges = build_ranges(partition_count)
        self._logger.debug(
            f"Built range table for {partition_count} partitions "
            f"(cache size={self._range_cache_size})"
        )
        return ranges

    def _count(self, partition_count: int | None) -> int:
        if partition_count is None:
            partition_count = self._partition_count
        if partition_count is None:
            raise InvalidArgument("No partition count given and no default configured")
        return validate_partition_count(partition_count)

    def ranges(self, partition_count: int | None = None) -> tuple[int, ...]:
        return self._cached_ranges(self._count(partition_count))

    def partitioner(self, partition_count: int | None = None) -> Partitioner:
        return Partitioner(self._count(partition_count), ranges_factory=self._cached_ranges)

    def resolve(self, key: str | None, partition_count: int | None = None) -> int:
        """
        Return the partition id in [0, partition_count) that owns `key`.

        An absent key always resolves to the partition owning logical value 0,
        which is partition 0.
        """
        ranges = self.ranges(partition_count)
        return locate(ranges, LogicalSpace.to_logical(key))

    def partition_for_key(self, key: str | None, partition_count: int | None = None) -> LogicalPartition:
        return self.partitioner(partition_count).find_partition_by_key(key)

    def cache_info(self) -> _CacheInfo:
        return self._cached_ranges.cache_info()


@lru_cache
def default_resolver() -> PartitionResolver:
    return PartitionResolver()


def resolve(key: str | None, partition_count: int) -> int:
    return default_resolver().resolve(key, partition_count)


def hash_key(key: str | None) -> HashPair | None:
    """Raw mixing hash of a key's canonical bytes; None for an absent key."""
    if key is None:
        return None
    return LogicalSpace.hash(key)
