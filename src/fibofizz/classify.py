from __future__ import annotations

from fibofizz.fixedwidth import FixedUInt
from fibofizz.output_manager import OutputManager
from fibofizz.primes_table import is_fibo_prime

BUZZ = "Buzz   "
FIZZ = "Fizz   "
PRIME = "BuzzFizz!!  "


def classify(index: int, value: FixedUInt | int) -> str:
    """
    Label for the Fibonacci term F(index) = value.

    Divisibility is tested first and both markers may fire on the same term.
    The prime-index label is only considered when neither did, so a term
    divisible by 3 or 5 never reads as prime even if its index is tabulated.
    """
    label = ""
    if value % 3 == 0:
        label += BUZZ
    if value % 5 == 0:
        label += FIZZ
    if not label and is_fibo_prime(index):
        label = PRIME
    if not label:
        label = str(value)
    return label


def format_line(index: int, value: FixedUInt | int) -> str:
    return f"{index}  {classify(index, value)}"


class FizzPrinter:
    """
    Generator callback: classifies each term and writes one line per index.

    With print_details=False the terms are still classified but nothing is
    written, which keeps I/O out of timing runs.
    """

    def __init__(self, om: OutputManager | None = None, *, print_details: bool = True):
        self.om = om
        self.print_details = print_details
        self.count = 0

    def __call__(self, index: int, value: FixedUInt) -> None:
        line = format_line(index, value)
        self.count += 1
        if not self.print_details:
            return
        if self.om is not None:
            self.om.write(line)
        else:
            print(line)
