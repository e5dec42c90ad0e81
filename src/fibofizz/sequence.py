# -----------------------------------------------------------------------------
#  sequence.py
#  Fibonacci sequence generator with fixed operand width
# -----------------------------------------------------------------------------

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass

from fibofizz.fixedwidth import UINT_BITS, FixedUInt


@dataclass(frozen=True)
class RunResult:
    index: int          # final index reached
    value: FixedUInt    # F(index)
    overflow: bool      # True if the run stopped short of the requested length


class FiboGenerator:
    """
    Steps through F(1)=1, F(2)=1, F(3)=2, ... holding each term in a
    FixedUInt of `bits` bits.

    The generator keeps one term of lookahead: while sitting on index i it
    already holds F(i+1), so an overflow is detected one step early and the
    generator stops on the last index whose successor still fits.
    """

    def __init__(self, bits: int = UINT_BITS):
        self.bits = int(bits)
        self.index = 1
        self.current = FixedUInt(1, self.bits)
        self._next = FixedUInt(1, self.bits)
        self.exhausted = False

    def advance(self) -> bool:
        """
        Move to the next index. Returns True if computing the lookahead term
        overflowed; the generator is then exhausted and sits on the last
        valid term.
        """
        if self.exhausted:
            raise RuntimeError(f"generator exhausted at n = {self.index} ({self.bits} bits)")
        following, overflow = self._next.add(self.current)
        self.current = self._next
        self.index += 1
        if overflow:
            self.exhausted = True
        else:
            self._next = following
        return overflow

    def run(self, target: int, on_term: Callable[[int, FixedUInt], None] | None = None) -> RunResult:
        """
        Emit (index, value) for every index up to `target` or until the
        operand width is exhausted, whichever comes first.
        """
        if target < 1:
            raise ValueError(f"sequence length must be >= 1, got {target}")

        overflow = False
        while self.index < target and not overflow:
            if on_term is not None:
                on_term(self.index, self.current)
            overflow = self.advance()

        if on_term is not None:
            on_term(self.index, self.current)

        # Overflow on the very last step still delivered the requested term
        return RunResult(
            index=self.index,
            value=self.current,
            overflow=overflow and self.index < target,
        )


def fibonacci_terms(count: int, bits: int = UINT_BITS) -> Iterator[tuple[int, FixedUInt]]:
    """Yield (index, F(index)) for the first `count` terms that fit in `bits` bits."""
    if count < 1:
        return
    gen = FiboGenerator(bits)
    yield gen.index, gen.current
    while gen.index < count:
        if gen.advance():
            yield gen.index, gen.current
            return
        yield gen.index, gen.current
