"""Tests for CLI tool."""

from __future__ import annotations

import os
import subprocess
import sys
from pathlib import Path

import pytest

SRC = Path(__file__).resolve().parents[2] / "src"


def run_cli(*args: str, input: str | None = None) -> subprocess.CompletedProcess[str]:
    env = dict(os.environ)
    env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(SRC), env.get("PYTHONPATH")]))
    return subprocess.run(
        [sys.executable, "-m", "ucgas.cli.main", *args],
        input=input,
        capture_output=True,
        text=True,
        env=env,
    )


def test_cli_help() -> None:
    """Test CLI --help flag."""
    result = run_cli("--help")
    assert result.returncode == 0
    assert "ucgas: UCGv2 Command Grammar Assembler" in result.stdout
    assert "asm" in result.stdout
    assert "disasm" in result.stdout


def test_cli_version() -> None:
    """Test CLI --version flag."""
    result = run_cli("--version")
    assert result.returncode == 0
    assert "ucgas 0.2.0" in result.stdout


def test_cli_no_args() -> None:
    """Test CLI with no arguments (should show help)."""
    result = run_cli()
    assert result.returncode == 0
    assert "ucgas: UCGv2 Command Grammar Assembler" in result.stdout


class TestAssemble:
    """Test the asm subcommand."""

    def test_immediate_hex(self) -> None:
        """Test immediate-mode lines become hex records; comments are skipped."""
        result = run_cli("asm", "-m", "-x", input="# pump on\n03/4 1F/7 RQRY 002 01 02\n\n")

        assert result.returncode == 0
        assert result.stdout == "1CFF08020102\n"

    def test_scripted_default(self) -> None:
        """Test scripted mode is the default."""
        result = run_cli("asm", "-x", input="+250 03/4 1F/7 RQRY 002 01 02\n")

        assert result.returncode == 0
        assert result.stdout == "FA0000801CFF08020102\n"

    def test_error_reports_line(self) -> None:
        """Test parse errors name the line and exit non-zero."""
        result = run_cli("asm", "-m", "-x", input="03/4 1F/7 NOP 000\n03/4 1F/7 JUMP 000\n")

        assert result.returncode == 1
        assert "line 2" in result.stderr
        assert 'Invalid opcode: "JUMP"' in result.stderr
        assert result.stdout == "1CFF0000\n"

    def test_stops_at_first_error(self) -> None:
        """Test the first error aborts the run by default."""
        result = run_cli("asm", "-m", "-x", input="bad\n03/4 1F/7 NOP 000\n")

        assert result.returncode == 1
        assert result.stdout == ""

    def test_keep_going(self) -> None:
        """Test -k continues past errors."""
        result = run_cli("asm", "-m", "-x", "-k", input="bad\n03/4 1F/7 NOP 000\n")

        assert result.returncode == 1
        assert result.stdout == "1CFF0000\n"

    def test_echo_comments(self) -> None:
        """Test -c echoes comment lines to stderr."""
        result = run_cli("asm", "-m", "-x", "-c", input="# pump on\n03/4 1F/7 NOP 000\n")

        assert result.returncode == 0
        assert "# PUMP ON" in result.stderr
        assert result.stdout == "1CFF0000\n"

    def test_absolute_timestamp_rejected(self) -> None:
        """Test absolute timestamps fail in scripted mode."""
        result = run_cli("asm", "-x", input="100 03/4 1F/7 NOP 000\n")

        assert result.returncode == 1
        assert "Absolute timestamps are unsupported" in result.stderr


class TestDisassemble:
    """Test the disasm subcommand."""

    def test_immediate_hex(self) -> None:
        """Test hex records become assembly lines."""
        result = run_cli("disasm", "-m", "-x", input="1CFF08020102\n")

        assert result.returncode == 0
        assert result.stdout == "03/4 1F/7 RQRY 002 01 02\n"

    def test_decimal(self) -> None:
        """Test -d prints payload words in decimal."""
        result = run_cli("disasm", "-m", "-x", "-d", input="1CFF0803013930\n")

        assert result.returncode == 0
        assert result.stdout == "03/4 1F/7 RQRY 003 01 D12345\n"

    def test_scripted(self) -> None:
        """Test scripted records carry their timestamp."""
        result = run_cli("disasm", "-x", input="FA0000801CFF08020102\n")

        assert result.returncode == 0
        assert result.stdout == "+250s 03/4 1F/7 RQRY 002 01 02\n"

    def test_bad_record(self) -> None:
        """Test undecodable records are reported."""
        result = run_cli("disasm", "-m", "-x", input="1CFF\n")

        assert result.returncode == 1
        assert "record 1" in result.stderr
        assert "Truncated frame" in result.stderr

    def test_bad_hex(self) -> None:
        """Test framing errors are reported."""
        result = run_cli("disasm", "-m", "-x", input="XYZ\n")

        assert result.returncode == 1
        assert "Invalid hex record" in result.stderr


def test_cli_missing_file() -> None:
    """Test CLI with a missing input file."""
    result = run_cli("asm", "nonexistent.ucg")
    assert result.returncode == 1
    assert "not found" in result.stderr.lower()


def test_cli_binary_file_roundtrip(tmp_path: Path) -> None:
    """Test length-prefixed binary output disassembles back to the source."""
    source = tmp_path / "script.ucg"
    binary = tmp_path / "script.bin"
    listing = tmp_path / "script.txt"
    source.write_text("# startup\n+0 03/4 1F/7 RQRY 002 01 02\n+1500 03/4 1F/7 RVAL 003 01 D10000\n")

    result = run_cli("asm", str(source), "-o", str(binary))
    assert result.returncode == 0, result.stderr
    assert binary.read_bytes()[:4] == b"\x00\x00\x00\x0a"

    result = run_cli("disasm", str(binary), "-o", str(listing), "-d")
    assert result.returncode == 0, result.stderr
    assert listing.read_text().splitlines() == [
        "+0s 03/4 1F/7 RQRY 002 01 D2",
        "+1500s 03/4 1F/7 RVAL 003 01 D10000",
    ]


@pytest.mark.parametrize("flag", ["-v", "-q"])
def test_cli_verbosity_flags(flag: str) -> None:
    """Test verbosity flags are accepted."""
    result = run_cli("asm", "-m", "-x", flag, input="03/4 1F/7 NOP 000\n")
    assert result.returncode == 0
    assert result.stdout == "1CFF0000\n"
