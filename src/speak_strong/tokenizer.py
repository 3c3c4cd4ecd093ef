"""Tokenizer — splits text into position-tracked tokens.

Tokenization is lossless: joining the token texts in order gives back
the input exactly, so every match can be mapped to offsets in the
original text.

    >>> [t.text for t in tokenize("I'm here, OK?")]
    ["I'm", ' ', 'here', ',', ' ', 'OK', '?']
"""

from __future__ import annotations
import re

from .types import Token

WORD = "word"
CONTRACTION = "contraction"
PUNCTUATION = "punctuation"
WHITESPACE = "whitespace"

WORD_TYPES = frozenset({WORD, CONTRACTION})

CONTRACTIONS = frozenset({
    "i'm", "i'll", "i've", "i'd",
    "you're", "you'll", "you've", "you'd",
    "he's", "he'll", "he'd",
    "she's", "she'll", "she'd",
    "it's", "it'll", "it'd",
    "we're", "we'll", "we've", "we'd",
    "they're", "they'll", "they've", "they'd",
    "that's", "that'll", "that'd",
    "who's", "who'll", "who'd",
    "what's", "what'll", "what'd",
    "where's", "where'll", "where'd",
    "when's", "when'll", "when'd",
    "why's", "why'll", "why'd",
    "how's", "how'll", "how'd",
    "isn't", "aren't", "wasn't", "weren't",
    "hasn't", "haven't", "hadn't",
    "doesn't", "don't", "didn't",
    "won't", "wouldn't", "shouldn't", "couldn't",
    "mightn't", "mustn't", "can't",
    "let's", "here's", "there's",
})

_WHITESPACE_RE = re.compile(r"\s+")
_WORD_RE = re.compile(r"[\w']+")
_PUNCT_CHAR_RE = re.compile(r"[^\w\s']")
_WORD_CHAR_RE = re.compile(r"\w")


def tokenize(text: str, *, preserve_contractions: bool = True) -> list[Token]:
    """Split text into word, contraction, punctuation and whitespace tokens."""
    tokens: list[Token] = []
    pos = 0
    n = len(text)

    while pos < n:
        char = text[pos]

        # Whitespace runs are kept verbatim (tabs, newlines and all)
        m = _WHITESPACE_RE.match(text, pos)
        if m:
            tokens.append(Token(m.group(), WHITESPACE, pos, m.end(), m.group()))
            pos = m.end()
            continue

        # A lone apostrophe (not starting a word) is punctuation too
        next_char = text[pos + 1] if pos + 1 < n else ""
        if _PUNCT_CHAR_RE.match(char) or (char == "'" and not _WORD_CHAR_RE.match(next_char)):
            tokens.append(Token(char, PUNCTUATION, pos, pos + 1, char))
            pos += 1
            continue

        m = _WORD_RE.match(text, pos)
        if m:
            word = m.group()
            while word.endswith("'") and word.lower() not in CONTRACTIONS:
                word = word[:-1]
            end = pos + len(word)
            lowered = word.lower()
            is_contraction = preserve_contractions and lowered in CONTRACTIONS
            tokens.append(Token(word, CONTRACTION if is_contraction else WORD, pos, end, lowered))
            pos = end
            continue

        tokens.append(Token(char, PUNCTUATION, pos, pos + 1, char))
        pos += 1

    return tokens


def get_word_tokens(tokens: list[Token]) -> list[Token]:
    """Only word and contraction tokens (no whitespace or punctuation)."""
    return [t for t in tokens if t.type in WORD_TYPES]


def tokens_to_text(tokens: list[Token]) -> str:
    return "".join(t.text for t in tokens)


def token_at(tokens: list[Token], position: int) -> Token | None:
    """Return the token covering a text offset, if any."""
    for t in tokens:
        if t.start <= position < t.end:
            return t
    return None


def token_slice(tokens: list[Token], start: int, end: int) -> list[Token]:
    """Tokens lying entirely inside the [start, end) offset window."""
    return [t for t in tokens if t.start >= start and t.end <= end]
