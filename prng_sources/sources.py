"""64-bit generator engines sharing one ``seed`` / ``int63`` / ``uint64`` contract.

SplitMix64 (period 2^64)
    Fixed-increment version of Java 8's SplittableRandom. Fast, passes
    BigCrush, and doubles as the seed expander for the larger engines.

XOshiro256 (xoshiro256** in the literature, period 2^256 - 1)
    Faster and statistically stronger than the xorshift family. Offers
    ``jump`` / ``long_jump`` for non-overlapping parallel streams.

PCG (XSL RR 128/64 LCG, period 2^128)
    128-bit linear congruential state with an xorshift-low / random-rotate
    output permutation.

WyRand
    One wrapping add and one widening multiply per draw.

None of these are cryptographically secure. Engines mutate their state in
place and are not safe to share between threads; wrap them in
:class:`prng_sources.lockable.LockableSource` for that.
"""

import logging
from abc import ABC, abstractmethod
from typing import Optional

from .bits import MASK64, MAX_UINT63, add64, mul64, rotl64, rotr64, to_uint64

logger = logging.getLogger(__name__)

GOLDEN_GAMMA = 0x9E3779B97F4A7C15
SPLITMIX_MUL1 = 0xBF58476D1CE4E5B9
SPLITMIX_MUL2 = 0x94D049BB133111EB

PCG_MUL_HI = 0x2360ED051FC65DA4
PCG_MUL_LO = 0x4385DF649FCCF645
PCG_INC_HI = 0x5851F42D4C957F2D
PCG_INC_LO = 0x14057B7EF767814F

WY0 = 0xA0761D6478BD642F
WY1 = 0xE7037ED1A0B428DB

XOSHIRO_JUMP = (0x180EC6D33CFD0ABA, 0xD5A61266F0C9392C, 0xA9582618E03FC9AA, 0x39ABDC4529B1661C)
XOSHIRO_LONG_JUMP = (0x76E15D3EFEFDCBBF, 0xC5004E441C522FB3, 0x77710069854EE241, 0x39109BB02ACBE635)


class Source64(ABC):
    """Common contract for every engine (and the lockable wrapper)."""

    __slots__ = ()

    @abstractmethod
    def seed(self, seed: int) -> None:
        """Reset all state from the raw 64-bit pattern of ``seed``."""

    @abstractmethod
    def uint64(self) -> int:
        """Advance one step and return a value in ``[0, 2**64)``."""

    def int63(self) -> int:
        """Non-negative 63-bit value; consumes exactly one ``uint64`` draw."""
        return self.uint64() & MAX_UINT63


class _EngineBase(Source64):
    __slots__ = ()

    @property
    def state(self) -> tuple[int, ...]:
        raise NotImplementedError

    def __eq__(self, other):
        if type(self) is not type(other):
            return NotImplemented
        return self.state == other.state

    __hash__ = None

    def __repr__(self) -> str:
        words = ", ".join(f"0x{word:016x}" for word in self.state)
        return f"{type(self).__name__}({words})"


class SplitMix64Source(_EngineBase):
    """SplitMix64: one 64-bit word of state, every value (zero included) valid."""

    __slots__ = ("_s",)

    def __init__(self, seed: Optional[int] = None):
        self._s = 0
        if seed is not None:
            self.seed(seed)

    @classmethod
    def from_state(cls, s: int) -> "SplitMix64Source":
        src = cls()
        src._s = to_uint64(s)
        return src

    @property
    def state(self) -> tuple[int]:
        return (self._s,)

    def seed(self, seed: int) -> None:
        self._s = to_uint64(seed)

    def uint64(self) -> int:
        self._s = (self._s + GOLDEN_GAMMA) & MASK64
        z = self._s
        z = ((z ^ (z >> 30)) * SPLITMIX_MUL1) & MASK64
        z = ((z ^ (z >> 27)) * SPLITMIX_MUL2) & MASK64
        return z ^ (z >> 31)


def _expand_seed(seed: int, words: int) -> list[int]:
    """Draw ``words`` successive outputs from a throwaway SplitMix64."""
    sm64 = SplitMix64Source(seed)
    expanded = [sm64.uint64() for _ in range(words)]
    logger.debug("expanded seed 0x%016x into %d state words", to_uint64(seed), words)
    return expanded


class XOshiro256Source(_EngineBase):
    """xoshiro256**: four 64-bit words of state.

    The all-zero state is an absorbing fixed point that only ever yields
    zero. ``seed`` avoids it by expanding through SplitMix64, and
    ``from_state`` refuses it. A source built without a seed holds that
    zero state and must be seeded before drawing.
    """

    __slots__ = ("_s",)

    def __init__(self, seed: Optional[int] = None):
        self._s = [0, 0, 0, 0]
        if seed is not None:
            self.seed(seed)

    @classmethod
    def from_state(cls, s0: int, s1: int, s2: int, s3: int) -> "XOshiro256Source":
        words = [to_uint64(s0), to_uint64(s1), to_uint64(s2), to_uint64(s3)]
        if not any(words):
            raise ValueError("xoshiro256 state must not be all zero")
        src = cls()
        src._s = words
        return src

    @property
    def state(self) -> tuple[int, int, int, int]:
        return tuple(self._s)

    def seed(self, seed: int) -> None:
        self._s = _expand_seed(seed, 4)

    def uint64(self) -> int:
        s = self._s
        result = (rotl64(s[1] * 5, 7) * 9) & MASK64
        t = (s[1] << 17) & MASK64

        s[2] ^= s[0]
        s[3] ^= s[1]
        s[1] ^= s[2]
        s[0] ^= s[3]

        s[2] ^= t
        s[3] = rotl64(s[3], 45)

        return result

    def jump(self) -> "XOshiro256Source":
        """Equivalent to 2^128 draws; yields 2^128 non-overlapping subsequences.

        The receiver is advanced 256 steps; the jumped-to state is returned
        as a new source.
        """
        return self._jump(XOSHIRO_JUMP, "jump")

    def long_jump(self) -> "XOshiro256Source":
        """Equivalent to 2^192 draws; yields 2^64 distant starting points.

        From each starting point ``jump`` can then generate 2^64
        non-overlapping subsequences for distributed computations.
        """
        return self._jump(XOSHIRO_LONG_JUMP, "long_jump")

    def _jump(self, polynomial: tuple[int, ...], label: str) -> "XOshiro256Source":
        s = self._s
        acc = [0, 0, 0, 0]
        for word in polynomial:
            for b in range(64):
                if word & (1 << b):
                    acc[0] ^= s[0]
                    acc[1] ^= s[1]
                    acc[2] ^= s[2]
                    acc[3] ^= s[3]
                self.uint64()

        jumped = type(self)()
        jumped._s = acc
        logger.debug("xoshiro256 %s produced %r", label, jumped)
        return jumped


class PCGSource(_EngineBase):
    """PCG XSL RR 128/64 with the 128-bit state held as ``(lo, hi)`` limbs."""

    __slots__ = ("_lo", "_hi")

    def __init__(self, seed: Optional[int] = None):
        self._lo = 0
        self._hi = 0
        if seed is not None:
            self.seed(seed)

    @classmethod
    def from_state(cls, lo: int, hi: int) -> "PCGSource":
        src = cls()
        src._lo = to_uint64(lo)
        src._hi = to_uint64(hi)
        return src

    @property
    def state(self) -> tuple[int, int]:
        return (self._lo, self._hi)

    def seed(self, seed: int) -> None:
        self._lo, self._hi = _expand_seed(seed, 2)

    def uint64(self) -> int:
        self._mult()
        self._add()
        return rotr64(self._hi ^ self._lo, self._hi >> 58)

    def _mult(self) -> None:
        # 128x128 -> 128 truncating multiply; hi*mul_hi falls off the top.
        hi, lo = mul64(self._lo, PCG_MUL_LO)
        hi = (hi + self._hi * PCG_MUL_LO + self._lo * PCG_MUL_HI) & MASK64
        self._lo, self._hi = lo, hi

    def _add(self) -> None:
        self._lo, carry = add64(self._lo, PCG_INC_LO)
        self._hi, _ = add64(self._hi, PCG_INC_HI, carry)


class WySource(_EngineBase):
    """wyrand: one 64-bit word of state, no forbidden values."""

    __slots__ = ("_s",)

    def __init__(self, seed: Optional[int] = None):
        self._s = 0
        if seed is not None:
            self.seed(seed)

    @classmethod
    def from_state(cls, s: int) -> "WySource":
        src = cls()
        src._s = to_uint64(s)
        return src

    @property
    def state(self) -> tuple[int]:
        return (self._s,)

    def seed(self, seed: int) -> None:
        self._s = to_uint64(seed)

    def uint64(self) -> int:
        self._s = (self._s + WY0) & MASK64
        hi, lo = mul64(self._s ^ WY1, self._s)
        return hi ^ lo
