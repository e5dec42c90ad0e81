# runtime.py
from __future__ import annotations

from contextvars import ContextVar
from dataclasses import dataclass, field
from importlib.util import find_spec
from typing import TYPE_CHECKING, Any

from colorama import Fore, Style

if TYPE_CHECKING:
    from fibofizz.config import Settings


@dataclass
class Runtime:
    """Settings in effect for one fizzbuzz run (defaults until a file is applied)."""
    profile_name: str = "default"
    settings: dict[str, Any] = field(default_factory=dict)
    debug: bool = False  # [debug] trace lines and tracebacks

    def apply(self, selected: Settings) -> None:
        self.profile_name = selected.name
        self.settings = dict(selected.as_dict())
        # only an explicit boolean switches debug on or off
        dbg = self.get("BEHAVIOUR.DEBUG")
        if isinstance(dbg, bool):
            self.debug = dbg

    def get(self, key: str, default: Any = None) -> Any:
        """Dotted lookup into the nested settings, e.g. 'FIZZBUZZ.UINT_BITS'."""
        node: Any = self.settings
        for part in key.split("."):
            if not isinstance(node, dict) or part not in node:
                return default
            node = node[part]
        return node


_current_runtime: ContextVar[Runtime | None] = ContextVar("fibofizz_runtime", default=None)


def current() -> Runtime:
    rt = _current_runtime.get()
    if rt is None:
        rt = reset()
    return rt


def reset() -> Runtime:
    """Install a fresh Runtime (defaults only) and return it."""
    rt = Runtime()
    _current_runtime.set(rt)
    return rt


def APPLY(selected: Settings) -> None:
    current().apply(selected)


def CFG(key: str, default: Any = None) -> Any:
    return current().get(key, default)


def ensure_runtime_deps() -> bool:
    """Return False (after printing an install hint) when gmpy2 is not installed."""
    if find_spec("gmpy2") is not None:
        return True
    print(
        f"{Fore.RED}{Style.BRIGHT}\nMissing dependency:{Style.RESET_ALL} gmpy2\n"
        f"Install with: {Fore.YELLOW}pip install gmpy2{Style.RESET_ALL}"
    )
    return False
