"""
32-bit block mixing hash (Bob Jenkins' lookup3, `hashlittle2` variant).

The routing of every key depends on this function producing the same two
words on every platform, so all arithmetic is done on Python ints and masked
back to 32 bits after each operation that can overflow.
"""
import struct

from partid.core.model.pair import HashPair

_MASK = 0xFFFFFFFF
_GOLDEN = 0xDEADBEEF
_BLOCK = struct.Struct("<3I")


def _rot(x: int, k: int) -> int:
    return ((x << k) | (x >> (32 - k))) & _MASK


def _mix(a: int, b: int, c: int) -> tuple[int, int, int]:
    a = (a - c) & _MASK; a ^= _rot(c, 4);  c = (c + b) & _MASK
    b = (b - a) & _MASK; b ^= _rot(a, 6);  a = (a + c) & _MASK
    c = (c - b) & _MASK; c ^= _rot(b, 8);  b = (b + a) & _MASK
    a = (a - c) & _MASK; a ^= _rot(c, 16); c = (c + b) & _MASK
    b = (b - a) & _MASK; b ^= _rot(a, 19); a = (a + c) & _MASK
    c = (c - b) & _MASK; c ^= _rot(b, 4);  b = (b + a) & _MASK
    return a, b, c


def _final(a: int, b: int, c: int) -> tuple[int, int, int]:
    c ^= b; c = (c - _rot(b, 14)) & _MASK
    a ^= c; a = (a - _rot(c, 11)) & _MASK
    b ^= a; b = (b - _rot(a, 25)) & _MASK
    c ^= b; c = (c - _rot(b, 16)) & _MASK
    a ^= c; a = (a - _rot(c, 4)) & _MASK
    b ^= a; b = (b - _rot(a, 14)) & _MASK
    c ^= b; c = (c - _rot(b, 24)) & _MASK
    return a, b, c


def _fold_tail(tail: bytes) -> tuple[int, int, int]:
    """
    Split the last 1..12 bytes into three little-endian partial words.

    Byte i lands in word i // 4 at bit offset 8 * (i % 4), so 11 bytes fill
    the low three bytes of the third word and leave its top byte at zero,
    while 1 byte only touches the bottom byte of the first word.
    """
    words = [0, 0, 0]
    for i, byte in enumerate(tail):
        words[i >> 2] += byte << ((i & 3) << 3)
    return words[0], words[1], words[2]


def mix_hash(data: bytes, pc: int = 0, pb: int = 0) -> HashPair:
    """
    Hash `data` into a HashPair (c, b).

    `pc` and `pb` are the two seeds of hashlittle2: `pc` is folded into the
    initial value of all three accumulators, `pb` is added to `c` only.

    Blocks of 12 bytes are mixed while more than 12 bytes remain, which means
    a non-empty input always keeps 1..12 bytes for the tail and always goes
    through the final mix. Only the empty input returns the accumulators
    untouched.
    """
    length = len(data)
    a = b = c = (_GOLDEN + length + (pc & _MASK)) & _MASK
    c = (c + (pb & _MASK)) & _MASK

    offset = 0
    while length - offset > 12:
        k0, k1, k2 = _BLOCK.unpack_from(data, offset)
        a = (a + k0) & _MASK
        b = (b + k1) & _MASK
        c = (c + k2) & _MASK
        a, b, c = _mix(a, b, c)
        offset += 12

    if offset == length:
        return HashPair(c, b)

    t0, t1, t2 = _fold_tail(data[offset:])
    a = (a + t0) & _MASK
    b = (b + t1) & _MASK
    c = (c + t2) & _MASK

    a, b, c = _final(a, b, c)
    return HashPair(c, b)
