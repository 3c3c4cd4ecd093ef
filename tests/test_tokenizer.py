"""Tests for the tokenizer."""

import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

import pytest

from speak_strong.tokenizer import (
    get_word_tokens, token_at, token_slice, tokenize, tokens_to_text,
)


# ── Classification ───────────────────────────────────────────────────

def test_simple_words():
    tokens = tokenize("hello world")
    assert len(tokens) == 3
    assert (tokens[0].text, tokens[0].type, tokens[0].start, tokens[0].end) == ("hello", "word", 0, 5)
    assert (tokens[1].text, tokens[1].type) == (" ", "whitespace")
    assert (tokens[2].text, tokens[2].start, tokens[2].end) == ("world", 6, 11)


def test_punctuation_is_separate():
    assert [t.text for t in tokenize("Hello, world!")] == ["Hello", ",", " ", "world", "!"]


def test_contraction_single_token():
    first = get_word_tokens(tokenize("I'm going to the store"))[0]
    assert first.text == "I'm"
    assert first.type == "contraction"
    assert first.normalized == "i'm"


def test_multiple_contractions():
    tokens = tokenize("I'll try but I can't promise")
    assert [t.normalized for t in tokens if t.type == "contraction"] == ["i'll", "can't"]


def test_contractions_disabled():
    tokens = tokenize("I'm here", preserve_contractions=False)
    assert tokens[0].text == "I'm"
    assert tokens[0].type == "word"


def test_possessive_apostrophe_split_off():
    tokens = tokenize("the dogs' bowls")
    assert [t.text for t in tokens] == ["the", " ", "dogs", "'", " ", "bowls"]
    assert tokens[3].type == "punctuation"


def test_leading_apostrophe_word():
    tokens = tokenize("'tis fine")
    assert tokens[0].text == "'tis"
    assert tokens[0].type == "word"


def test_whitespace_kept_verbatim():
    tokens = tokenize("hello\tworld\nfoo  bar")
    assert [t.text for t in tokens if t.type == "whitespace"] == ["\t", "\n", "  "]


def test_normalized_lowercase():
    tokens = tokenize("Hello WORLD")
    assert tokens[0].normalized == "hello"
    assert tokens[2].normalized == "world"


def test_empty_string():
    assert tokenize("") == []


# ── Losslessness ─────────────────────────────────────────────────────

@pytest.mark.parametrize("text", [
    "Hello, I'm going to the store!",
    "rock 'n' roll",
    "''",
    "x'",
    "  tabs\tand\nnewlines  ",
    "émigré café — naïve?",
    "Wait... what?! (really)",
    "don't' stop",
])
def test_lossless(text):
    tokens = tokenize(text)
    assert tokens_to_text(tokens) == text
    for t in tokens:
        assert text[t.start:t.end] == t.text
    # contiguous, no gaps or overlaps
    for a, b in zip(tokens, tokens[1:]):
        assert a.end == b.start


# ── Helpers ──────────────────────────────────────────────────────────

def test_get_word_tokens():
    words = get_word_tokens(tokenize("Hello, I'm here!"))
    assert [t.text for t in words] == ["Hello", "I'm", "here"]


def test_token_at():
    tokens = tokenize("hello world")
    assert token_at(tokens, 0).text == "hello"
    assert token_at(tokens, 3).text == "hello"
    assert token_at(tokens, 5).text == " "
    assert token_at(tokens, 6).text == "world"
    assert token_at(tokenize("hi"), 100) is None


def test_token_slice():
    tokens = tokenize("hello world foo")
    assert [t.text for t in token_slice(tokens, 6, 11)] == ["world"]
