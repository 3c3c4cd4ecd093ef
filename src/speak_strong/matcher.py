"""Matcher — finds rule phrases in text.

Rules are tried longest pattern first, so "I think we should" wins over
"we should" on the same words.  Accepted spans never overlap: the first
rule to claim a range of text keeps it.
"""

from __future__ import annotations
from typing import Iterable

from .rules import CAPTURES
from .tokenizer import get_word_tokens, token_slice, tokenize
from .types import Match, MatchContext, PatternToken, Rule, Token


def match_pattern(words: list[Token], start: int, pattern: tuple[PatternToken, ...]) -> int | None:
    """Try `pattern` against `words` from `start`.

    Returns the index just past the last consumed word, or None.
    Optional pattern words are consumed when present and skipped otherwise.
    """
    idx = start
    for p in pattern:
        if idx < len(words) and words[idx].normalized == p.text:
            idx += 1
        elif not p.optional:
            return None
    return idx


def preserve_case(original: str, replacement: str) -> str:
    """Give `replacement` the casing style of the first word of `original`."""
    if not replacement:
        return replacement
    words = original.split()
    first = words[0] if words else original
    if not first:
        return replacement

    if len(first) > 1 and first == first.upper() and first != first.lower():
        return replacement.upper()
    if first == first.lower() and first != first.upper():
        return replacement.lower()
    if first[0].isupper() and first[1:] == first[1:].lower():
        return replacement[0].upper() + replacement[1:].lower()
    return replacement


def _replacement_text(matched: list[Token], rule: Rule) -> str | None:
    if rule.replacement is None:
        return None
    if not rule.replacement:
        return ""
    phrase = " ".join(rule.replacement)
    words = get_word_tokens(matched)
    if not words:
        return phrase
    return preserve_case(" ".join(t.text for t in words), phrase)


def _overlaps(start: int, end: int, used: list[tuple[int, int]]) -> bool:
    return any(start < e and end > s for s, e in used)


def find_matches(text: str, rules: Iterable[Rule]) -> list[Match]:
    """Find every accepted match of `rules` in `text`, sorted by start offset.

    Replacements and suggestions are both returned; suggestions carry
    `replacement=None`.
    """
    tokens = tokenize(text)
    words = get_word_tokens(tokens)
    matches: list[Match] = []
    used: list[tuple[int, int]] = []

    # sorted() is stable: equal-length patterns keep their list order
    for rule in sorted(rules, key=lambda r: len(r.pattern), reverse=True):
        for i in range(len(words)):
            end_idx = match_pattern(words, i, rule.pattern)
            if end_idx is None or end_idx == i:
                continue

            start = words[i].start
            end = words[end_idx - 1].end
            if _overlaps(start, end, used):
                continue

            context = MatchContext(
                before=[t for t in tokens if t.end <= start],
                matched=token_slice(tokens, start, end),
                after=[t for t in tokens if t.start >= end],
                tokens=tokens,
                text=text,
            )
            if rule.constraint is not None and not rule.constraint(context):
                continue

            if rule.restructure is not None:
                after_words = get_word_tokens(context.after)
                for name in rule.restructure.captures:
                    absorbed = CAPTURES[name](after_words)
                    if absorbed:
                        end = absorbed[-1].end
                        after_words = after_words[len(absorbed):]
                # a capture may have reached into the next claimed span
                if _overlaps(start, end, used):
                    end = context.matched[-1].end

            matched = token_slice(tokens, start, end)
            matches.append(Match(
                original=text[start:end],
                replacement=_replacement_text(matched, rule),
                start=start,
                end=end,
                rule=rule,
            ))
            used.append((start, end))

    return sorted(matches, key=lambda m: m.start)
