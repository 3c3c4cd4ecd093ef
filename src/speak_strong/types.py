"""Core types."""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Callable, Literal

StrictnessLevel = Literal["conservative", "moderate", "aggressive"]

LEVELS: tuple[str, ...] = ("conservative", "moderate", "aggressive")


@dataclass(frozen=True, slots=True)
class Token:
    """A slice of the input text with its position."""
    text: str
    type: str              # "word" | "contraction" | "punctuation" | "whitespace"
    start: int
    end: int               # exclusive
    normalized: str        # lowercase form used for matching


@dataclass(frozen=True, slots=True)
class PatternToken:
    text: str
    optional: bool = False


@dataclass(frozen=True, slots=True)
class RestructureSpec:
    """Words after the matched phrase that the rewrite should absorb."""
    captures: tuple[str, ...]   # capture names, e.g. ("subject",)


@dataclass(frozen=True, slots=True)
class MatchContext:
    """What a constraint sees when deciding whether a match stands."""
    before: list[Token]
    matched: list[Token]
    after: list[Token]
    tokens: list[Token]
    text: str


@dataclass(frozen=True, slots=True)
class Rule:
    """A compiled rule, ready for matching."""
    id: str
    pattern: tuple[PatternToken, ...]
    replacement: tuple[str, ...] | None    # None = suggestion only, () = delete
    level: str
    category: str
    suggestion: str | None = None
    restructure: RestructureSpec | None = None
    constraint: Callable[[MatchContext], bool] | None = field(default=None, compare=False)

    @property
    def phrase(self) -> str:
        """The normalized pattern as a plain string."""
        return " ".join(p.text for p in self.pattern)

    @property
    def suggestion_only(self) -> bool:
        return self.replacement is None


@dataclass(frozen=True, slots=True)
class Match:
    """A rule applied to a span of the original text."""
    original: str               # matched text, exactly as written
    replacement: str | None     # None for suggestions
    start: int
    end: int
    rule: Rule


@dataclass(frozen=True, slots=True)
class ProcessResult:
    """Result of rewriting a piece of text."""
    original: str
    transformed: str
    replacements: tuple[Match, ...] = ()     # applied into `transformed`
    suggestions: tuple[Match, ...] = ()      # flagged, never applied
