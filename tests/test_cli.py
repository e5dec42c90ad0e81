# tests/test_cli.py
"""
Driver, settings and output routing tests.

Run: pytest -v
"""

from __future__ import annotations

import faulthandler
import sys

import pytest

from fibofizz.cli import PROMPT, main, run_fizzbuzz
from fibofizz.config import load_settings
from fibofizz.output_manager import OutputManager
from fibofizz.runtime import APPLY, CFG, current
from fibofizz.utility import UserInputError, validate_output_setting

FIRST_TEN = (
    "1  1\n"
    "2  1\n"
    "3  BuzzFizz!!  \n"
    "4  Buzz   \n"
    "5  Fizz   \n"
    "6  8\n"
    "7  BuzzFizz!!  \n"
    "8  Buzz   \n"
    "9  34\n"
    "10  Fizz   \n"
)

# ---------- helpers -----------------------------------------------------------


def _feed(monkeypatch, text: str | None):
    prompts: list[str] = []

    def fake_input(prompt=""):
        prompts.append(prompt)
        if text is None:
            raise EOFError
        return text

    monkeypatch.setattr("builtins.input", fake_input)
    return prompts


def _write_toml(tmp_path, body: str):
    p = tmp_path / "fizz.toml"
    p.write_text(body, encoding="utf-8")
    return p


# ---------- driver ------------------------------------------------------------


def test_banner_and_first_ten(capsys):
    assert main(["10"]) == 0
    out = capsys.readouterr().out
    assert "Welcome to FIZZBUZZ!" in out
    assert "Your current operand size is 8192bits, your result will be limited to 2466 decimal digits" in out
    assert FIRST_TEN in out
    assert "SUCCESS:  10  55" in out
    assert "CPUtime seconds: " in out


def test_prompted_length(monkeypatch, capsys):
    prompts = _feed(monkeypatch, "5\n")
    assert main([]) == 0
    out = capsys.readouterr().out
    assert prompts == [PROMPT]
    assert "5  Fizz   \n" in out
    assert "SUCCESS:  5  5" in out


@pytest.mark.parametrize("typed", ["0", "-4", "abc", "", None])
def test_short_or_invalid_length_exits_quietly(monkeypatch, capsys, typed):
    _feed(monkeypatch, typed)
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Welcome to FIZZBUZZ!" in out
    assert "1  1" not in out
    assert "SUCCESS" not in out
    assert "CPUtime" not in out


def test_length_one(capsys):
    assert main(["1"]) == 0
    out = capsys.readouterr().out
    assert "\n1  1\n" in out
    assert "\n2  " not in out
    assert "SUCCESS:  1  1" in out


def test_overflow_is_reported_not_failed(capsys):
    assert main(["100", "--bits", "64"]) == 0
    out = capsys.readouterr().out
    assert "limited to 19 decimal digits" in out
    assert "93  12200160415121876738\n" in out
    assert "\n94  " not in out
    assert "HIGHEST RESULT:  93  12200160415121876738" in out
    assert "ERROR: data overflow condition after n = 93" in out
    assert "SUCCESS" not in out
    assert "CPUtime seconds: " in out


def test_exact_boundary_is_success(capsys):
    assert main(["93", "--bits", "64", "--no-details"]) == 0
    out = capsys.readouterr().out
    assert "SUCCESS:  93  12200160415121876738" in out
    assert "ERROR" not in out


def test_no_details_suppresses_lines(capsys):
    assert main(["30", "--no-details"]) == 0
    out = capsys.readouterr().out
    assert "3  BuzzFizz" not in out
    assert "SUCCESS:  30  832040" in out


def test_run_fizzbuzz_returns_result(capsys):
    om = OutputManager()
    result = run_fizzbuzz(20, om=om, print_details=False)
    assert result.index == 20
    assert result.value == 6765
    assert not result.overflow
    assert "SUCCESS:  20  6765" in capsys.readouterr().out


def test_zero_bits_exits_2(capsys):
    assert main(["5", "--bits", "0"]) == 2
    err = capsys.readouterr().err
    assert err.strip()


def test_debug_trace(monkeypatch, capsys):
    monkeypatch.setattr(faulthandler, "enable", lambda *a, **k: None)
    monkeypatch.setattr(sys, "excepthook", sys.excepthook)
    assert main(["3", "--debug"]) == 0
    err = capsys.readouterr().err
    assert "[debug] operand width: 8192 bits (2466 decimal digits)" in err
    assert "[debug] largest tabulated Fibonacci prime index: 2904353" in err
    assert "[debug] final term F(3) = 2" in err


# ---------- settings ----------------------------------------------------------


def test_config_file_sets_width_and_details(tmp_path, capsys):
    p = _write_toml(tmp_path, """
[PROFILE]
name = "tiny"
description = "64-bit operands, no per-term lines"

[FIZZBUZZ]
UINT_BITS = 64
PRINT_DETAILS = false
""")
    assert main(["100", "--config", str(p)]) == 0
    out = capsys.readouterr().out
    assert "operand size is 64bits" in out
    assert "\n2  1\n" not in out
    assert "ERROR: data overflow condition after n = 93" in out


def test_cli_bits_overrides_config(tmp_path, capsys):
    p = _write_toml(tmp_path, "[FIZZBUZZ]\nUINT_BITS = 64\n")
    assert main(["100", "--config", str(p), "--bits", "1024", "--no-details"]) == 0
    out = capsys.readouterr().out
    assert "operand size is 1024bits" in out
    assert "SUCCESS:  100  354224848179261915075" in out


def test_load_settings_metadata(tmp_path):
    p = _write_toml(tmp_path, '[PROFILE]\ndescription = "  wide\\n  run "\n[FIZZBUZZ]\nUINT_BITS = 32768\n')
    s = load_settings(p)
    assert s.name == "fizz"
    assert s.description == "wide run"
    assert "PROFILE" not in s.as_dict()
    APPLY(s)
    assert CFG("FIZZBUZZ.UINT_BITS") == 32768
    assert CFG("FIZZBUZZ.MISSING", "x") == "x"
    assert current().profile_name == "fizz"


def test_debug_from_settings(tmp_path):
    p = _write_toml(tmp_path, "[BEHAVIOUR]\nDEBUG = true\n")
    APPLY(load_settings(p))
    assert current().debug


@pytest.mark.parametrize("body", [
    "[FIZZBUZZ\nUINT_BITS = 64\n",
    "[FIZZBUZZ]\nUINT_BITS = \"wide\"\n",
    "[FIZZBUZZ]\nUINT_BITS = true\n",
    "[FIZZBUZZ]\nUINT_BITS = 0\n",
    "[FIZZBUZZ]\nPRINT_DETAILS = 1\n",
    "FIZZBUZZ = 3\n",
])
def test_bad_settings_raise_user_error(tmp_path, body):
    p = _write_toml(tmp_path, body)
    with pytest.raises(UserInputError):
        load_settings(p)


def test_bad_settings_exit_2(tmp_path, capsys):
    p = _write_toml(tmp_path, "[FIZZBUZZ]\nUINT_BITS = -8\n")
    assert main(["5", "--config", str(p)]) == 2
    assert "UINT_BITS" in capsys.readouterr().err


def test_missing_settings_file(tmp_path, capsys):
    assert main(["5", "--config", str(tmp_path / "nope.toml")]) == 2


# ---------- output routing ----------------------------------------------------


def test_output_file_quiet(tmp_path, capsys):
    target = tmp_path / "runs" / "fizz.txt"
    assert main(["10", "--output", str(target), "--quiet"]) == 0
    assert capsys.readouterr().out == ""
    text = target.read_text(encoding="utf-8")
    assert FIRST_TEN in text
    assert "SUCCESS:  10  55" in text
    assert "\x1b[" not in text
    assert text.endswith("\n\n")


def test_output_file_appends_runs(tmp_path, capsys):
    target = tmp_path / "fizz.txt"
    main(["3", "--output", str(target), "--quiet"])
    main(["4", "--output", str(target), "--quiet"])
    text = target.read_text(encoding="utf-8")
    assert text.count("Welcome to FIZZBUZZ!") == 2
    assert "SUCCESS:  3  2" in text
    assert "SUCCESS:  4  3" in text


def test_output_manager_strips_color_in_file(tmp_path, capsys):
    target = tmp_path / "color.txt"
    with OutputManager(output_file=str(target)) as om:
        om.write("\x1b[32mSUCCESS\x1b[0m")
    assert "\x1b[32mSUCCESS" in capsys.readouterr().out
    assert target.read_text(encoding="utf-8") == "SUCCESS\n\n"


@pytest.mark.parametrize("name", ["notes.md", "script.py", "dir/", "fizz.toml"])
def test_forbidden_outputs(name):
    with pytest.raises(ValueError):
        validate_output_setting(name)


def test_forbidden_output_exit_2(capsys):
    assert main(["5", "--output", "out.py"]) == 2


def test_debug_lists_settings(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr(faulthandler, "enable", lambda *a, **k: None)
    monkeypatch.setattr(sys, "excepthook", sys.excepthook)
    p = _write_toml(tmp_path, "[BEHAVIOUR]\nDEBUG = true\n[FIZZBUZZ]\nUINT_BITS = 64\n")
    assert main(["2", "--config", str(p)]) == 0
    err = capsys.readouterr().err
    assert f"[debug] settings file: {p}" in err
    assert "FIZZBUZZ.UINT_BITS" in err
    assert "64 (int)" in err


def test_length_past_index_range_reports_overflow(capsys):
    assert main([str(2**32), "--bits", "64", "--no-details"]) == 0
    out = capsys.readouterr().out
    assert "HIGHEST RESULT:  93  12200160415121876738" in out
    assert "ERROR: data overflow condition after n = 93" in out


@pytest.mark.parametrize(("typed", "last_line"), [("7abc", "7  BuzzFizz!!  \n"), ("4 20", "4  Buzz   \n")])
def test_prompt_reads_leading_integer(monkeypatch, capsys, typed, last_line):
    _feed(monkeypatch, typed)
    assert main([]) == 0
    out = capsys.readouterr().out
    assert last_line in out
    assert f"SUCCESS:  {typed.split()[0].rstrip('abc')}  " in out


def test_output_manager_keeps_no_history(tmp_path, capsys):
    target = tmp_path / "long.txt"
    om = OutputManager(output_file=str(target), quiet=True)
    for i in range(2000):
        om.write(f"{i}  {'9' * 200}")
    assert not any(isinstance(v, (list, str)) and len(v) > 1000 for v in vars(om).values())
    om.close()
    assert target.read_text(encoding="utf-8").count("\n") == 2001


def test_output_manager_close_without_writes(tmp_path):
    target = tmp_path / "empty.txt"
    OutputManager(output_file=str(target)).close()
    assert not target.exists()
