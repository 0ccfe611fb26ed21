"""Identifier casing helpers — camelCase / PascalCase from kebab, snake or colon names."""

from __future__ import annotations

import re

# Letter/digit runs; anything else (hyphen, colon, underscore, dot, space) separates
_RUN_RE = re.compile(r"[^\W_]+")

# Over a run mapped to character classes (U upper, L other letter, D digit):
# upper-case runs ("XML" in "XMLHttp"), capitalised or lower words, digit runs
_HUMP_RE = re.compile(r"U+(?!L)|U?L+|D+")


def _char_class(c: str) -> str:
    if c.isdigit():
        return "D"
    return "U" if c.isupper() else "L"


def split_words(text: str) -> list[str]:
    """Tokenize ``text`` into words on separators and case humps (Unicode-aware)."""
    words: list[str] = []
    for run in _RUN_RE.findall(text):
        classes = "".join(_char_class(c) for c in run)
        words.extend(run[m.start():m.end()] for m in _HUMP_RE.finditer(classes))
    return words


def camel_case(text: str, pascal: bool = False) -> str:
    """Convert a name to camelCase (or PascalCase with ``pascal=True``).

    ``fill-opacity`` → ``fillOpacity``, ``xlink:href`` → ``xlinkHref``,
    ``arrow-left-2`` → ``ArrowLeft2`` (pascal), ``10k`` → ``10K`` (pascal),
    ``café`` → ``Café`` (pascal). Letters without case (``日本``) are kept as-is.
    """
    words = [w.lower() for w in split_words(text)]
    if not words:
        return ""

    out = [words[0].capitalize() if pascal else words[0]]
    out.extend(w.capitalize() for w in words[1:])
    return "".join(out)


def pascal_case(text: str) -> str:
    return camel_case(text, pascal=True)
