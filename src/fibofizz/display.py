# src/fibofizz/display.py
from __future__ import annotations

import sys

from colorama import Fore, Style

from fibofizz.fixedwidth import max_decimal_digits
from fibofizz.fmt import abbr_int_fast
from fibofizz.output_manager import OutputManager
from fibofizz.primes_table import largest_known_index
from fibofizz.sequence import RunResult
from fibofizz.utility import dec_digits, flatten_dotted, typename


def print_banner(bits: int, *, om: OutputManager) -> None:
    om.write()
    om.write(f"{Fore.YELLOW}{Style.BRIGHT}Welcome to FIZZBUZZ!{Style.RESET_ALL}")
    om.write(
        f"Your current operand size is {bits}bits, "
        f"your result will be limited to {max_decimal_digits(bits)} decimal digits"
    )
    om.write("If you need more digits, then rerun with a larger --bits value")
    om.write()


def print_summary(result: RunResult, cpu_seconds: float, *, om: OutputManager) -> None:
    """
    Final report: SUCCESS with the last (index, value) pair, or the overflow
    error with the highest pair reached. CPU time is always reported.
    """
    om.write()
    if result.overflow:
        om.write(f"HIGHEST RESULT:  {result.index}  {result.value}")
        om.write(f"{Fore.RED}ERROR: data overflow condition after n = {result.index}{Style.RESET_ALL}")
        om.write("Please rerun with more operand bits (--bits)")
    else:
        om.write(f"{Fore.GREEN}SUCCESS:  {result.index}  {result.value}{Style.RESET_ALL}")

    # mostly useful with --no-details
    om.write(f"CPUtime seconds: {cpu_seconds:.6f}")


def print_debug_header(bits: int, source: str | None, settings: dict | None = None) -> None:
    print(f"[debug] operand width: {bits} bits ({max_decimal_digits(bits)} decimal digits)", file=sys.stderr)
    print(f"[debug] largest tabulated Fibonacci prime index: {largest_known_index()}", file=sys.stderr)
    if source:
        print(f"[debug] settings file: {source}", file=sys.stderr)
    flat = flatten_dotted(settings or {})
    for k in sorted(flat, key=str.lower):
        v = flat[k]
        print(f"        {k:.<30} {v!r} ({typename(v)})", file=sys.stderr)


def print_debug_result(result: RunResult, printed: int) -> None:
    v = int(result.value)
    print(
        f"[debug] final term F({result.index}) = {abbr_int_fast(v)} "
        f"({dec_digits(v)} digits, {v.bit_length()} bits), {printed} term(s) classified",
        file=sys.stderr,
    )
