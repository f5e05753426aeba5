"""Fixed-width arithmetic helpers behave like typed 64-bit words."""

from prng_sources.bits import MASK64, MAX_UINT63, add64, mul64, rotl64, rotr64, to_uint64


def test_to_uint64_uses_twos_complement_pattern():
    assert to_uint64(-1) == MASK64
    assert to_uint64(-(1 << 63)) == 1 << 63
    assert to_uint64(1 << 64) == 0
    assert to_uint64(42) == 42


def test_rotations_wrap_and_are_inverse():
    assert rotl64(1, 1) == 2
    assert rotl64(1 << 63, 1) == 1
    assert rotr64(1, 1) == 1 << 63
    assert rotl64(0x0123456789ABCDEF, 0) == 0x0123456789ABCDEF
    assert rotl64(0x0123456789ABCDEF, 64) == 0x0123456789ABCDEF

    word = 0xDEADBEEFCAFEF00D
    for k in (3, 17, 45, 58, 63):
        assert rotr64(rotl64(word, k), k) == word


def test_mul64_splits_full_product():
    hi, lo = mul64(MASK64, MASK64)
    assert (hi << 64) | lo == MASK64 * MASK64
    assert hi == MASK64 - 1
    assert lo == 1


def test_add64_carries_out_of_low_word():
    assert add64(MASK64, 1) == (0, 1)
    assert add64(MASK64, MASK64, 1) == (MASK64, 1)
    assert add64(2, 3) == (5, 0)


def test_max_uint63_is_all_but_top_bit():
    assert MAX_UINT63 == MASK64 >> 1
