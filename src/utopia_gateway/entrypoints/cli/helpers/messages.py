"""Terminal message helpers for the UTOPIA GATEWAY CLI.

Lines are written to stderr, so stdout carries only parameters and call
results. Glyphs fall back to ASCII on terminals that cannot encode emoji.
"""

import click


def _supports_character(character: str) -> bool:
    """Return True if *character* can be encoded on stderr.

    The stream is looked up on every call so redirected or re-encoded streams
    are honored.
    """
    stream = click.get_text_stream("stderr")
    encoding = getattr(stream, "encoding", None) or "ascii"
    try:
        character.encode(encoding)
    except UnicodeEncodeError:
        return False
    return True


def _glyph(emoji: str, fallback: str) -> str:
    return emoji if _supports_character(emoji) else fallback


def success_glyph() -> str:
    """Return "✅" or the ASCII fallback "[OK]"."""
    return _glyph("✅", "[OK]")


def error_glyph() -> str:
    """Return "❌" or the ASCII fallback "[X]"."""
    return _glyph("❌", "[X]")


def success(msg: str) -> None:
    """Emit a green, bold success line to **stderr**."""
    click.secho(f"{success_glyph()}  {msg}", fg="green", bold=True, err=True)


def error(msg: str, glyph: bool = True) -> None:
    """Emit a red, bold error line to **stderr**.

    Args:
        msg: The message to display.
        glyph: Prefix the line with the error glyph. Disable when the line
            must start with a fixed, greppable prefix.
    """
    line = f"{error_glyph()}  {msg}" if glyph else msg
    click.secho(line, fg="red", bold=True, err=True)
