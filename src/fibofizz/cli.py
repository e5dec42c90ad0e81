# src/fibofizz/cli.py

"""
FIZZBUZZ over the Fibonacci sequence

Description:
    Generates the first n Fibonacci numbers F(n), printing
      "Buzz"       when F(n) is divisible by 3,
      "Fizz"       when F(n) is divisible by 5,
      "BuzzFizz!!" when F(n) is a known Fibonacci prime,
      F(n) itself otherwise.
    Terms are held in a fixed operand width (--bits); the run stops at the
    last term that fits and reports the overflow.

usage: see fibofizz -h

Data: indices of Fibonacci primes from OEIS A001605
      (https://oeis.org/A001605).
"""

from __future__ import annotations

import argparse
import faulthandler
import sys
import time
import traceback

from colorama import Fore, Style
from colorama import init as colorama_init

from fibofizz.classify import FizzPrinter
from fibofizz.config import load_settings
from fibofizz.display import print_banner, print_debug_header, print_debug_result, print_summary
from fibofizz.fixedwidth import UINT_BITS, max_decimal_digits
from fibofizz.output_manager import OutputManager
from fibofizz.runtime import APPLY, CFG, ensure_runtime_deps
from fibofizz.runtime import current as _rt_current
from fibofizz.runtime import reset as _rt_reset
from fibofizz.sequence import FiboGenerator, RunResult
from fibofizz.utility import UserInputError, parse_length, validate_output_setting

PROMPT = "Enter the length of FIZZBUZZ sequence to run: "


def run_fizzbuzz(length: int, *, bits: int = UINT_BITS, om: OutputManager,
                 print_details: bool = True) -> RunResult:
    """Run the sequence up to `length` terms, then report the result and CPU time."""
    printer = FizzPrinter(om, print_details=print_details)

    ticks = time.process_time()
    result = FiboGenerator(bits).run(length, printer)
    ticks = time.process_time() - ticks

    print_summary(result, ticks, om=om)
    if _rt_current().debug:
        print_debug_result(result, printer.count)
    return result


def _install_loud_error_handlers(debug: bool) -> None:
    if not debug:
        return
    faulthandler.enable()

    def _excepthook(exc_type, exc, tb):
        sys.stderr.write("\n[UNCAUGHT EXCEPTION]\n")
        traceback.print_exception(exc_type, exc, tb, file=sys.stderr)
        sys.stderr.flush()
    sys.excepthook = _excepthook


def _print_user_error(msg: str) -> None:
    """Uniform, one-line friendly error."""
    prefix = f"{Fore.RED}Error:{Style.RESET_ALL}"
    if not (msg.startswith("Invalid input:") or msg.startswith("Error:")):
        msg = f"{prefix} {msg}"
    print(msg, file=sys.stderr)


def _read_length(items: list[str]) -> int | None:
    """Length from the command line, else from the interactive prompt."""
    if items:
        return parse_length(items[0])
    try:
        return parse_length(input(PROMPT))
    except EOFError:
        return None


# ---- argparse ----
def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="fibofizz",
        description="FIZZBUZZ over the Fibonacci sequence with a fixed operand width",
    )
    p.add_argument("items", nargs="*", metavar="length",
                   help="sequence length to run (prompted for when omitted)")
    p.add_argument("--bits", type=int, default=None,
                   help=f"operand size in bits (default {UINT_BITS})")
    p.add_argument("--config", default=None, help="TOML settings file")
    p.add_argument("--output", default=None, help="Also append results to a file")
    p.add_argument("--quiet", action="store_true", help="Suppress screen output")
    p.add_argument("--no-details", action="store_true",
                   help="Skip per-term lines (useful for timing)")
    p.add_argument("--debug", action="store_true", help="Show internal trace info and tracebacks")
    return p


def main(argv=None) -> int:
    """Thin wrapper: catch friendly errors, hide tracebacks unless debug."""
    try:
        return _main_impl(argv)
    except UserInputError as e:
        _print_user_error(str(e))
        return 2
    except KeyboardInterrupt:
        print("Aborted by user.", file=sys.stderr)
        return 130
    except Exception as e:
        debug = ("--debug" in (argv if argv is not None else sys.argv)) or _rt_current().debug
        if debug:
            raise
        print(f"Unexpected error: {e.__class__.__name__}: {e}", file=sys.stderr)
        print("Run with --debug for a full traceback.", file=sys.stderr)
        return 1


# ---- main ----
def _main_impl(argv=None) -> int:

    colorama_init(autoreset=True)

    parser = _build_parser()
    args = parser.parse_args(argv)

    if not ensure_runtime_deps():
        return 1

    rt = _rt_reset()
    source = None
    if args.config:
        selected = load_settings(args.config)
        APPLY(selected)
        source = str(selected._source)
    # CLI flag wins over the settings file
    rt.debug = rt.debug or bool(args.debug)
    _install_loud_error_handlers(rt.debug)

    bits = args.bits if args.bits is not None else int(CFG("FIZZBUZZ.UINT_BITS", UINT_BITS))
    if bits < 1:
        raise UserInputError(f"operand size must be at least 1 bit, got {bits}.")
    print_details = not args.no_details and bool(CFG("FIZZBUZZ.PRINT_DETAILS", True))

    try:
        target = validate_output_setting(args.output or CFG("OUTPUT.OUTPUT_FILE", None))
    except ValueError as e:
        raise UserInputError(f"--output: {e}") from None

    # str() of huge values; leave an explicit user limit alone
    digits = max_decimal_digits(bits) + 1
    if hasattr(sys, "set_int_max_str_digits") and digits > sys.get_int_max_str_digits() > 0:
        sys.set_int_max_str_digits(digits)

    om = OutputManager(output_file=target, quiet=args.quiet)
    try:
        print_banner(bits, om=om)
        if rt.debug:
            print_debug_header(bits, source, rt.settings)

        length = _read_length(args.items)
        if length is None or length < 1:
            return 0

        run_fizzbuzz(length, bits=bits, om=om, print_details=print_details)
    finally:
        om.close()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
