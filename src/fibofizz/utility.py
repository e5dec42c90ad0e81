# -----------------------------------------------------------------------------
#  Utility functions
# -----------------------------------------------------------------------------

from __future__ import annotations

import os
import re

# Sequence indices are unsigned 32-bit counters
MAX_INDEX = 2**32 - 1

_LEADING_INT_RE = re.compile(r"\s*([+-]?\d+)")


class UserInputError(Exception):
    pass


def dec_digits(n: int) -> int:
    """Exact decimal digit count without str(); handles n >= 0."""
    n = abs(int(n))
    if n == 0:
        return 1
    # floor(log10(n)) ~= floor(bitlen*log10(2))
    bl = n.bit_length()
    est = int((bl * 30103) // 100000)
    # bring into correct decade with at most a couple of steps
    p10 = 10 ** est
    if n < p10:
        while n < p10:
            est -= 1
            p10 //= 10
    else:
        p10 *= 10
        while n >= p10:
            est += 1
            p10 *= 10
    return est + 1


def parse_length(text: str | None) -> int | None:
    """
    Parse the requested sequence length as typed at the prompt.

    Reads the leading integer the way a stream extraction would ("7abc" -> 7,
    "10 20" -> 10) and returns None when there is none. Lengths past
    MAX_INDEX are capped; no operand width gets anywhere near it.
    """
    m = _LEADING_INT_RE.match(text or "")
    if m is None:
        return None
    token = m.group(1)
    # skip int() on absurdly long input; the result is capped either way
    if len(token.lstrip("+-")) > 12:
        return 0 if token.startswith("-") else MAX_INDEX
    return min(int(token), MAX_INDEX)


def validate_output_setting(output_file: str | None) -> str | None:
    """
    Validate output setting.
    - None / "" => ok (screen only)
    - path/to/file => must not be a directory or have a forbidden extension
    Returns the output_file, or raises ValueError.
    """
    FORBIDDEN_EXTENSIONS = {".py", ".md", ".toml"}

    if not output_file:
        return output_file  # screen only

    if output_file.endswith(("/", "\\")) or output_file in (".", ".."):
        raise ValueError(f"Output must be a file, not a directory: {output_file}")

    basename = os.path.basename(output_file)
    _, ext = os.path.splitext(basename)
    if ext.lower() in FORBIDDEN_EXTENSIONS:
        raise ValueError(f"Forbidden output file extension: {ext.lower()}")

    return output_file


def typename(v: object) -> str:
    return type(v).__name__


def flatten_dotted(d: dict, prefix: str = "") -> dict[str, object]:
    out: dict[str, object] = {}
    for k, v in (d or {}).items():
        key = f"{prefix}.{k}" if prefix else str(k)
        if isinstance(v, dict):
            out.update(flatten_dotted(v, key))
        else:
            out[key] = v
    return out
