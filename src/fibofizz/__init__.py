from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _pkg_version

# Version
try:
    __version__ = _pkg_version("fibofizz")
except PackageNotFoundError:
    __version__ = "0+unknown"

# Public API re-exports
from .classify import classify, format_line
from .fixedwidth import UINT_BITS, FixedUInt, max_decimal_digits
from .primes_table import FIBO_PRIME_INDICES, is_fibo_prime
from .runtime import APPLY, CFG
from .sequence import FiboGenerator, RunResult, fibonacci_terms

__all__ = [
    "APPLY",
    "CFG",
    "FIBO_PRIME_INDICES",
    "UINT_BITS",
    "FiboGenerator",
    "FixedUInt",
    "RunResult",
    "__version__",
    "classify",
    "fibonacci_terms",
    "format_line",
    "is_fibo_prime",
    "max_decimal_digits",
]
