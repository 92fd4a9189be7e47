from partid.core.exception import InvalidArgument
from partid.core.mixhash import mix_hash
from partid.core.model.pair import HashPair


class LogicalSpace:
    """
    LogicalSpace defines the bounded integer space [0, SIZE) that keys are
    reduced into before being looked up in a partition range table.

    This type provides:
    - the canonical byte form of a key (invariant uppercase, ASCII with '?')
    - hashing of that byte form with the 32-bit mixing hash
    - reduction of the hash pair into a logical value

    LogicalSpace does not know anything about partition counts or ranges.
    Higher-level components (ranges, Partitioner, PartitionResolver) build on
    top of it.
    """

    SIZE = 32767
    MAX = SIZE - 1

    @classmethod
    def normalize(cls, key: str) -> bytes:
        """
        Returns the canonical byte sequence of a key.

        Every character above 0x7F is encoded as a single '?' byte before any
        case mapping, so non-ASCII letters whose uppercase form is ASCII (such
        as 'ı' or 'ſ') still hash as '?'. The remaining ASCII bytes are then
        uppercased, which never depends on the host locale. The byte length
        always equals the character length.
        """
        if not isinstance(key, str):
            raise InvalidArgument(f"Partition key must be a string, got {type(key).__name__}")

        return key.encode("ascii", errors="replace").upper()

    @classmethod
    def hash(cls, key: str) -> HashPair:
        return mix_hash(cls.normalize(key))

    @classmethod
    def reduce(cls, pair: HashPair | None) -> int:
        """
        Folds a HashPair into a logical value in [0, SIZE).

        The modulus is taken on the unsigned XOR of both words. An absent pair
        reduces to 0.
        """
        if pair is None:
            return 0
        return pair.folded % cls.SIZE

    @classmethod
    def to_logical(cls, key: str | None) -> int:
        """
        Returns the logical value of a key.

        An absent key maps to 0 without being hashed; this is a defined value,
        not an error.
        """
        if key is None:
            return 0
        return cls.reduce(cls.hash(key))

    @classmethod
    def contains(cls, value: int) -> bool:
        return 0 <= value <= cls.MAX
