from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class HashPair:
    """
    HashPair is the raw output of the mixing hash: two unsigned 32-bit words.

    word_a is the final value of the `c` accumulator and word_b the final
    value of `b`. Their XOR is what the logical space reduces; the 64-bit
    combination is kept for callers that want a wider fingerprint of the key.
    """

    word_a: int
    word_b: int

    _MAX = 1 << 32

    def __post_init__(self):
        for word in (self.word_a, self.word_b):
            if not (0 <= word < self._MAX):
                raise ValueError("HashPair words must be unsigned 32-bit integers")

    @property
    def folded(self) -> int:
        """XOR of both words, still an unsigned 32-bit value."""
        return self.word_a ^ self.word_b

    @property
    def combined(self) -> int:
        """64-bit value with word_a in the low half and word_b in the high half."""
        return self.word_a + (self.word_b << 32)

    def __repr__(self) -> str:
        return f"HashPair(word_a=0x{self.word_a:08x}, word_b=0x{self.word_b:08x})"
