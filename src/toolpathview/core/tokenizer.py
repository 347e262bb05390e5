"""Comment stripping and line splitting for G-code text."""

from __future__ import annotations

from typing import Iterator


def _strip_paren_comments(line: str) -> str:
    # An unterminated "(" swallows the rest of the line; a stray ")" is kept
    # and later dropped as an unparseable field.
    parts = []
    depth = 0
    for ch in line:
        if ch == "(":
            depth += 1
        elif ch == ")" and depth > 0:
            depth -= 1
            if depth == 0:
                parts.append(" ")
        elif depth == 0:
            parts.append(ch)
    return "".join(parts)


def clean_line(line: str) -> str:
    """Strip ``;`` and parenthesized comments and surrounding whitespace.

    A line that is entirely a comment becomes empty.
    """
    if ";" in line:
        line = line[:line.index(";")]
    if "(" in line:
        line = _strip_paren_comments(line)
    return line.strip()


def iter_lines(text: str) -> Iterator[str]:
    """Yield the cleaned, non-empty logical lines of *text*."""
    for raw in text.splitlines():
        line = clean_line(raw)
        if line:
            yield line


def preprocess(text: str) -> list[str]:
    return list(iter_lines(text))
