# src/fibofizz/fixedwidth.py
from __future__ import annotations

from dataclasses import dataclass
from math import floor, log10

import gmpy2

# Default operand size in bits. Controls how far the sequence can go:
#      64 bits -> n <= 93
#    1024 bits -> n <= 1,476
#    8192 bits -> n <= 11,801
#   32768 bits -> n <= 47,201
UINT_BITS = 8192


def max_decimal_digits(bits: int) -> int:
    """Decimal digits guaranteed to fit in an unsigned operand of `bits` bits."""
    return floor(bits * log10(2.0))


@dataclass(frozen=True)
class FixedUInt:
    """
    Unsigned integer bounded to `bits` bits.

    Arithmetic never wraps: add() returns (result, overflowed) and leaves the
    operand untouched when the sum does not fit.
    """
    value: gmpy2.mpz
    bits: int = UINT_BITS

    def __post_init__(self):
        if self.bits < 1:
            raise ValueError(f"operand width must be at least 1 bit, got {self.bits}")
        v = gmpy2.mpz(self.value)
        if v < 0:
            raise ValueError("FixedUInt is unsigned")
        if v.bit_length() > self.bits:
            raise ValueError(f"value needs {v.bit_length()} bits, operand holds {self.bits}")
        object.__setattr__(self, "value", v)

    def add(self, other: FixedUInt) -> tuple[FixedUInt, bool]:
        if other.bits != self.bits:
            raise ValueError(f"operand widths differ: {self.bits} vs {other.bits}")
        s = self.value + other.value
        if s.bit_length() > self.bits:
            return self, True
        return FixedUInt(s, self.bits), False

    def __mod__(self, m: int) -> int:
        return int(self.value % m)

    def __int__(self) -> int:
        return int(self.value)

    def __str__(self) -> str:
        return str(self.value)

    def __eq__(self, other) -> bool:
        if isinstance(other, FixedUInt):
            return self.value == other.value
        if isinstance(other, int):
            return self.value == other
        return NotImplemented

    def __lt__(self, other) -> bool:
        return self.value < (other.value if isinstance(other, FixedUInt) else other)

    def __hash__(self) -> int:
        return hash(int(self.value))
