"""Percent-encoding of names and values."""

from __future__ import annotations

from urllib.parse import quote

# Characters left alone by ECMAScript's encodeURIComponent; quote() adds
# ASCII letters and digits itself.
SAFE_CHARACTERS = "-_.!~*'()"


def _scrub_surrogates(text: str) -> str:
    return text.encode("utf-16", "surrogatepass").decode("utf-16", "replace")


def encode(text: str, charset: str = "UTF-8") -> str:
    """Percent-encode ``text`` with uppercase hex escapes.

    Space becomes ``%20``. Characters the charset cannot represent are first
    written as ``&#NNNN;`` references, the way browsers submit them.
    """
    if not text:
        return ""
    return quote(
        _scrub_surrogates(text),
        safe=SAFE_CHARACTERS,
        encoding=charset,
        errors="xmlcharrefreplace",
    )


__all__ = ["SAFE_CHARACTERS", "encode"]
