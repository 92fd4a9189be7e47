import pytest

from partid.core.mixhash import _fold_tail, _rot, mix_hash
from partid.core.model.pair import HashPair


@pytest.mark.ut
def test_empty_input_skips_final_mix():
    assert mix_hash(b"") == HashPair(0xDEADBEEF, 0xDEADBEEF)


@pytest.mark.ut
def test_empty_input_with_seed_b():
    # c picks up pb on top of the initial value, b does not
    assert mix_hash(b"", pc=0, pb=0xDEADBEEF) == HashPair(0xBD5B7DDE, 0xDEADBEEF)


@pytest.mark.ut
def test_empty_input_with_both_seeds():
    assert mix_hash(b"", pc=0xDEADBEEF, pb=0xDEADBEEF) == HashPair(0x9C093CCD, 0xBD5B7DDE)


@pytest.mark.ut
def test_lookup3_published_vector():
    pair = mix_hash(b"Four score and seven years ago")
    assert pair == HashPair(0x17770551, 0xCE7226E6)


@pytest.mark.ut
def test_hash_is_deterministic():
    data = b"00000000-0000-0101-9A83-DEADDEADBEEF"
    assert mix_hash(data) == mix_hash(data)


@pytest.mark.ut
def test_seeds_are_masked_to_32_bits():
    assert mix_hash(b"key", pc=1 << 32, pb=1 << 33) == mix_hash(b"key")


@pytest.mark.ut
def test_seeds_change_the_result():
    assert mix_hash(b"key", pc=1) != mix_hash(b"key")
    assert mix_hash(b"key", pb=1) != mix_hash(b"key")


@pytest.mark.ut
def test_full_block_tail_goes_through_final_mix():
    # 12 zero bytes: without the final mix both words would stay at the
    # initial value 0xdeadbeef + 12
    initial = 0xDEADBEEF + 12
    assert mix_hash(bytes(12)) != HashPair(initial, initial)


@pytest.mark.ut
@pytest.mark.parametrize("length", range(0, 40))
def test_words_stay_in_32_bits(length):
    pair = mix_hash(b"\xff" * length)
    assert 0 <= pair.word_a <= 0xFFFFFFFF
    assert 0 <= pair.word_b <= 0xFFFFFFFF


@pytest.mark.ut
def test_single_byte_change_changes_hash():
    assert mix_hash(b"ABCDEFGHIJKLM") != mix_hash(b"ABCDEFGHIJKLN")


@pytest.mark.ut
def test_fold_tail_eleven_bytes():
    assert _fold_tail(bytes(range(1, 12))) == (0x04030201, 0x08070605, 0x000B0A09)


@pytest.mark.ut
def test_fold_tail_twelve_bytes_uses_whole_words():
    assert _fold_tail(bytes(range(1, 13))) == (0x04030201, 0x08070605, 0x0C0B0A09)


@pytest.mark.ut
def test_fold_tail_single_byte_only_touches_a():
    assert _fold_tail(b"\x7f") == (0x7F, 0, 0)


@pytest.mark.ut
def test_fold_tail_five_bytes():
    assert _fold_tail(b"\x01\x02\x03\x04\x05") == (0x04030201, 0x05, 0)


@pytest.mark.ut
def test_rot_wraps_high_bits():
    assert _rot(0x80000000, 1) == 1
    assert _rot(0x12345678, 16) == 0x56781234


@pytest.mark.ut
def test_hash_pair_rejects_out_of_range_words():
    with pytest.raises(ValueError):
        HashPair(1 << 32, 0)
    with pytest.raises(ValueError):
        HashPair(0, -1)


@pytest.mark.ut
def test_hash_pair_combined_and_folded():
    pair = HashPair(0x00000001, 0x00000002)
    assert pair.combined == 0x0000000200000001
    assert pair.folded == 3
