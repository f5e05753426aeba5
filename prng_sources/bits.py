"""Fixed-width integer helpers for the 64-bit generator engines."""

# Python ints never overflow, so every helper clips to the width a typed
# language would use and the engines stay bit-exact.

MASK64 = 0xFFFFFFFFFFFFFFFF
MAX_UINT63 = (1 << 63) - 1


def to_uint64(x: int) -> int:
    """Clip an integer to its raw 64-bit two's-complement pattern."""
    return x & MASK64


def rotl64(x: int, k: int) -> int:
    """Rotate a 64-bit word left by ``k`` bits."""
    k &= 63
    x &= MASK64
    return ((x << k) | (x >> (64 - k))) & MASK64


def rotr64(x: int, k: int) -> int:
    """Rotate a 64-bit word right by ``k`` bits."""
    return rotl64(x, -k)


def mul64(a: int, b: int) -> tuple[int, int]:
    """Full 64x64 -> 128 bit product, returned as ``(hi, lo)``."""
    product = (a & MASK64) * (b & MASK64)
    return product >> 64, product & MASK64


def add64(a: int, b: int, carry: int = 0) -> tuple[int, int]:
    """64-bit add with carry, returned as ``(sum, carry_out)``."""
    total = (a & MASK64) + (b & MASK64) + carry
    return total & MASK64, total >> 64
