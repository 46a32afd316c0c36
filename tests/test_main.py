"""Tests for the z32 command line."""

import io

import pytest

from z32.main import main
from z32.zbase32 import ALPHABET


def test_encode_text(capsys):
    main(["encode", "The quick brown fox jumps over the lazy dog. 👀", "--bits", "64"])
    assert capsys.readouterr().out == "ktwgkedtqiwsg\n"


def test_encode_hex(capsys):
    main(["encode", "--hex", "8b 88 80", "--bits", "20"])
    assert capsys.readouterr().out == "tqre\n"


def test_encode_full_bytes_hex(capsys):
    main(["encode", "--hex", "ff"])
    assert capsys.readouterr().out == "9h\n"


def test_encode_stdin(capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.TextIOWrapper(io.BytesIO(b"\x80")))
    main(["encode", "--bits", "5"])
    assert capsys.readouterr().out == "o\n"


def test_encode_stdin_hex(capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.TextIOWrapper(io.BytesIO(b"8080\n")))
    main(["encode", "-", "--hex", "--bits", "10"])
    assert capsys.readouterr().out == "on\n"


def test_encode_too_many_bits(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["encode", "--hex", "00", "--bits", "9"])
    assert exc.value.code == 2
    assert "cannot encode 9 bits" in capsys.readouterr().err


def test_encode_invalid_hex(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["encode", "--hex", "zz"])
    assert exc.value.code == 2
    assert "invalid hex input" in capsys.readouterr().err


def test_alphabet(capsys):
    main(["alphabet"])
    assert capsys.readouterr().out == ALPHABET + "\n"


def test_no_command(capsys):
    with pytest.raises(SystemExit) as exc:
        main([])
    assert exc.value.code == 1
    assert "usage: z32" in capsys.readouterr().out
