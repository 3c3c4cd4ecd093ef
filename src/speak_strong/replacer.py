"""Replacer — splices matches into text and tidies the result."""

from __future__ import annotations
import re
from typing import Iterable

from .types import Match

_MULTI_SPACE = re.compile(r" {2,}")
_SPACE_BEFORE_PUNCT = re.compile(r"\s+([.,!?;:])")
_SENTENCE_START = re.compile(r"([.!?]\s+)([a-z])")
_FIRST_CHAR = re.compile(r"\S")


def apply_matches(text: str, matches: Iterable[Match]) -> str:
    """Apply every non-suggestion match, then clean up spacing and capitals.

    Offsets always refer to `text`; working right-to-left keeps the
    earlier ones valid while later spans are replaced.
    """
    result = text
    applied = [m for m in matches if m.replacement is not None]
    for match in sorted(applied, key=lambda m: m.start, reverse=True):
        result = result[:match.start] + match.replacement + result[match.end:]
    return cleanup_text(result)


def cleanup_text(text: str) -> str:
    """Collapse doubled spaces, fix punctuation spacing and sentence capitals.

    Works line by line so newlines and tabs survive untouched.
    """
    lines = []
    for line in text.split("\n"):
        line = _MULTI_SPACE.sub(" ", line)
        line = _SPACE_BEFORE_PUNCT.sub(r"\1", line)
        lines.append(line.strip(" "))
    result = "\n".join(lines)

    result = _SENTENCE_START.sub(lambda m: m.group(1) + m.group(2).upper(), result)

    m = _FIRST_CHAR.search(result)
    if m and not m.group().isupper():
        i = m.start()
        result = result[:i] + result[i].upper() + result[i + 1:]
    return result
