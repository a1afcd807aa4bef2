"""Tests for CLI tool."""

from __future__ import annotations

import subprocess
import sys
from pathlib import Path

import pytest

from wiremsg import Message, decode, encode
from wiremsg.cli.main import main


def test_cli_help() -> None:
    """Test CLI --help flag."""
    result = subprocess.run(
        [sys.executable, "-m", "wiremsg.cli.main", "--help"],
        capture_output=True,
        text=True,
    )
    assert result.returncode == 0
    assert "wiremsg: Header/Payload Message Codec" in result.stdout
    assert "--decode" in result.stdout


def test_cli_version() -> None:
    """Test CLI --version flag."""
    result = subprocess.run(
        [sys.executable, "-m", "wiremsg.cli.main", "--version"],
        capture_output=True,
        text=True,
    )
    assert result.returncode == 0
    assert "wiremsg 0.1.0" in result.stdout


def test_cli_demo(capsys: pytest.CaptureFixture[str]) -> None:
    """Test CLI --demo round trip."""
    assert main(["--demo"]) == 0

    out = capsys.readouterr().out
    assert "Content-Type: application/json" in out
    assert "X-Request-Id: 12345" in out
    assert "Round-trip successful" in out


def test_cli_encode_then_decode(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Test CLI --encode output can be read back with --decode."""
    payload_file = tmp_path / "body.json"
    payload_file.write_bytes(b'{"key":"value"}')
    out_file = tmp_path / "msg.bin"

    code = main(
        [
            "--encode",
            str(out_file),
            "-H",
            "X-Request-Id=12345",
            "-H",
            "Content-Type=application/json",
            "--payload-file",
            str(payload_file),
        ]
    )
    assert code == 0
    assert decode(out_file.read_bytes()) == Message(
        headers={"Content-Type": "application/json", "X-Request-Id": "12345"},
        payload=b'{"key":"value"}',
    )

    assert main(["--decode", str(out_file)]) == 0
    out = capsys.readouterr().out
    assert "2 headers" in out
    assert "15 bytes" in out


def test_cli_encode_bad_header(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Test CLI --encode with a header missing '='."""
    assert main(["--encode", str(tmp_path / "msg.bin"), "-H", "no-separator"]) == 1
    assert "NAME=VALUE" in capsys.readouterr().err


def test_cli_encode_limit_error(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Test CLI --encode reporting a format limit violation."""
    out_file = tmp_path / "msg.bin"

    assert main(["--encode", str(out_file), "-H", "n=" + "v" * 1024]) == 1
    assert "1023 bytes" in capsys.readouterr().err
    assert not out_file.exists()


def test_cli_decode_truncated_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Test CLI --decode with a malformed file."""
    bad = tmp_path / "bad.bin"
    bad.write_bytes(encode(Message(headers={"name": "value"}))[:-3])

    assert main(["--decode", str(bad)]) == 1
    assert "Error decoding file" in capsys.readouterr().err


def test_cli_decode_missing_file() -> None:
    """Test CLI --decode with missing file."""
    result = subprocess.run(
        [sys.executable, "-m", "wiremsg.cli.main", "--decode", "nonexistent.bin"],
        capture_output=True,
        text=True,
    )
    assert result.returncode == 1
    assert result.stderr.strip() == "Error: File not found: nonexistent.bin"


def test_cli_no_args() -> None:
    """Test CLI with no arguments (should show help)."""
    result = subprocess.run(
        [sys.executable, "-m", "wiremsg.cli.main"],
        capture_output=True,
        text=True,
    )
    assert result.returncode == 0
    assert "wiremsg: Header/Payload Message Codec" in result.stdout


def test_cli_actions_mutually_exclusive(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """Test CLI rejects --encode and --decode together."""
    out_file = tmp_path / "msg.bin"
    in_file = tmp_path / "in.bin"
    in_file.write_bytes(b"\x00")

    with pytest.raises(SystemExit) as exc_info:
        main(["--encode", str(out_file), "--decode", str(in_file)])

    assert exc_info.value.code == 2
    assert "not allowed with argument" in capsys.readouterr().err
    assert not out_file.exists()


def test_cli_decode_non_utf8_header(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Test CLI --decode shows undecodable header bytes as escapes."""
    msg_file = tmp_path / "msg.bin"
    msg_file.write_bytes(b"\x01\x01\x00\x01\x00\xffvtail")

    assert main(["--decode", str(msg_file)]) == 0
    out = capsys.readouterr().out
    assert "1. \\xff: v  (1/1 bytes)" in out
    assert "4 bytes" in out
