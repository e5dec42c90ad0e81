from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

try:
    import tomllib as toml
except Exception:
    import tomli as toml  # type: ignore

from fibofizz.utility import UserInputError

# Recognized keys per section and their expected types
_SCHEMA: dict[str, dict[str, type]] = {
    "FIZZBUZZ": {"UINT_BITS": int, "PRINT_DETAILS": bool},
    "BEHAVIOUR": {"DEBUG": bool},
    "OUTPUT": {"OUTPUT_FILE": str},
}


@dataclass
class Settings:
    """
    Wrap the TOML dict (without the [PROFILE] section).
    .as_dict() feeds runtime.apply().
    """
    data: dict[str, Any]
    name: str
    description: str
    _source: Path | None = None

    def as_dict(self) -> dict[str, Any]:
        return self.data


# --- I/O -------------------------------------------------------------------


def _load_toml(path: Path) -> dict[str, object]:
    try:
        with path.open("rb") as f:
            return toml.load(f)
    except OSError as e:
        raise UserInputError(f"reading {path}: {e.strerror or e}.") from None
    except toml.TOMLDecodeError as e:
        lineno = getattr(e, "lineno", None)
        colno = getattr(e, "colno", None)
        msg = getattr(e, "msg", str(e))
        where = []
        if lineno is not None:
            where.append(f"line {lineno}")
        if colno is not None:
            where.append(f"column {colno}")
        loc = f" (at {', '.join(where)})" if where else ""
        # No traceback chaining
        raise UserInputError(f"reading {path.name}: {msg}{loc}.") from None


def _sanitize_oneline(s: str) -> str:
    return " ".join(str(s).split()) or "(no description)"


def _check_types(data: dict[str, Any], source: str) -> None:
    for section, keys in _SCHEMA.items():
        block = data.get(section)
        if block is None:
            continue
        if not isinstance(block, dict):
            raise UserInputError(f"{source}: [{section}] must be a table.")
        for key, typ in keys.items():
            if key not in block:
                continue
            v = block[key]
            # bool is an int subclass; don't accept it as a width
            if not isinstance(v, typ) or (typ is int and isinstance(v, bool)):
                raise UserInputError(
                    f"{source}: {section}.{key} must be {typ.__name__}, got {type(v).__name__}."
                )

    bits = (data.get("FIZZBUZZ") or {}).get("UINT_BITS")
    if bits is not None and bits < 1:
        raise UserInputError(f"{source}: FIZZBUZZ.UINT_BITS must be >= 1, got {bits}.")


# --- Public API ------------------------------------------------------------


def load_settings(path: str | Path) -> Settings:
    """
    Load a settings file, strip the [PROFILE] metadata, type-check the
    known keys and return Settings(data=..., name=..., description=..., _source=path).
    """
    path = Path(path).expanduser()
    raw = _load_toml(path)

    meta = raw.get("PROFILE") or {}
    if not isinstance(meta, dict):
        meta = {}
    data = {k: v for k, v in raw.items() if k != "PROFILE"}
    _check_types(data, path.name)

    return Settings(
        data=data,
        name=str(meta.get("name") or path.stem),
        description=_sanitize_oneline(str(meta.get("description") or "")),
        _source=path,
    )
