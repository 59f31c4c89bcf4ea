"""Unit tests for :mod:`utopia_gateway.entrypoints.cli.helpers.messages`.

Glyph choice follows the encoding of the stream Click reports for stderr, and
is re-checked on every call. Messages are styled and written to stderr only.
"""

import io
import sys

import click
import pytest

from utopia_gateway.entrypoints.cli.helpers.messages import (
    _supports_character,
    error,
    error_glyph,
    success,
    success_glyph,
)

SET_GREEN = "\x1b[32m"
SET_RED = "\x1b[31m"
SET_BOLD = "\x1b[1m"
RESET = "\x1b[0m"


class FakeTTY(io.StringIO):
    """A TTY-like text stream with a fixed encoding."""

    def __init__(self, encoding: str):
        super().__init__()
        self._encoding = encoding

    @property
    def encoding(self) -> str:
        return self._encoding

    def isatty(self) -> bool:
        """Pretend to be a terminal so Click keeps ANSI styles."""
        return True


@pytest.fixture
def fake_stderr(monkeypatch):
    """Factory: route Click's stderr probe and sys.stderr to one FakeTTY."""

    def _install(encoding: str) -> FakeTTY:
        stream = FakeTTY(encoding)
        monkeypatch.setattr(click, "get_text_stream", lambda name: stream)
        monkeypatch.setattr(sys, "stderr", stream, raising=False)
        monkeypatch.delenv("NO_COLOR", raising=False)
        return stream

    return _install


@pytest.mark.parametrize(
    ("encoding", "expected_success", "expected_error"),
    [("ascii", "[OK]", "[X]"), ("utf-8", "✅", "❌")],
)
def test_glyphs_respect_stream_encoding(
    fake_stderr, encoding, expected_success, expected_error
):
    """Emoji are used only where stderr can encode them."""
    fake_stderr(encoding)
    assert success_glyph() == expected_success
    assert error_glyph() == expected_error


def test_supports_character_requeries_stream_each_call(monkeypatch):
    """The stream is looked up again on every probe."""
    encodings = iter(["ascii", "utf-8"])
    monkeypatch.setattr(
        click, "get_text_stream", lambda name: FakeTTY(next(encodings))
    )

    assert _supports_character("✅") is False
    assert _supports_character("✅") is True


@pytest.mark.parametrize(
    ("encoding", "glyph", "color_code", "func"),
    [
        ("ascii", "[OK]", SET_GREEN, success),
        ("utf-8", "✅", SET_GREEN, success),
        ("ascii", "[X]", SET_RED, error),
        ("utf-8", "❌", SET_RED, error),
    ],
)
def test_messages_emit_styled_stderr(fake_stderr, encoding, glyph, color_code, func):
    """success/error write bold, colored lines with the right glyph."""
    stream = fake_stderr(encoding)

    func("Demo finished")

    out = stream.getvalue()
    assert f"{glyph}  Demo finished" in out
    assert SET_BOLD in out
    assert color_code in out
    assert RESET in out


def test_error_without_glyph_starts_with_message(fake_stderr):
    """With the glyph disabled the line starts with the message itself."""
    stream = fake_stderr("utf-8")

    error("******** FAILED to run the application: boom", glyph=False)

    out = click.unstyle(stream.getvalue())
    assert out.startswith("******** FAILED to run the application: boom")


def test_success_writes_to_stderr_only(capsys):
    """Status lines never pollute stdout."""
    success("done")
    captured = capsys.readouterr()
    assert "done" in captured.err
    assert captured.out == ""
