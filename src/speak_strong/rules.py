"""Rule model — turns rule entries into compiled, matchable rules.

A rule entry is the declarative form found in the rules file:

    - pattern: "I think we should"
      replacement: "We should"
      category: hedging

Compilation lowercases and splits the pattern, decides between
substitution / deletion / suggestion, and attaches any restructuring
or constraint registered for that pattern.  Compiled rules are grouped
in an immutable RuleSet, which is what the rewriter consumes.
"""

from __future__ import annotations
import logging
import re
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Callable, Iterable, Mapping

import yaml
from pydantic import ValidationError

from .schemas import RuleEntry, RulesDatabase, format_validation_errors, validate_rules_database
from .types import LEVELS, MatchContext, PatternToken, RestructureSpec, Rule, Token

logger = logging.getLogger(__name__)

DEFAULT_RULES_PATH = Path(__file__).parent / "data" / "rules.yaml"

_PATTERN_PUNCT = re.compile(r"[.,!?;:]")

SUBJECT_PRONOUNS = frozenset({"i", "we", "you", "he", "she", "it", "they"})


class RulesError(ValueError):
    """Rules data failed validation."""


# ------------------------------------------------------------------
# Registries — keyed by normalized pattern ("would you mind if")
# ------------------------------------------------------------------

def _capture_subject(after_words: list[Token]) -> list[Token]:
    """Absorb a subject pronoun right after the phrase."""
    if after_words and after_words[0].normalized in SUBJECT_PRONOUNS:
        return after_words[:1]
    return []


# capture name → takes the word tokens after the match, returns those to absorb
CAPTURES: dict[str, Callable[[list[Token]], list[Token]]] = {
    "subject": _capture_subject,
}

# Only used when the entry also sets `restructure: true`
RESTRUCTURE_CAPTURES: dict[str, tuple[str, ...]] = {
    "would you mind if": ("subject",),
}

# Extra guards a match must pass, e.g. requiring certain neighbouring words
CONSTRAINTS: dict[str, Callable[[MatchContext], bool]] = {}


# ------------------------------------------------------------------
# Compilation
# ------------------------------------------------------------------

def compile_pattern(text: str) -> tuple[PatternToken, ...]:
    """Lowercase, split on whitespace, strip .,!?;: (apostrophes stay)."""
    words = (_PATTERN_PUNCT.sub("", w) for w in text.lower().split())
    return tuple(PatternToken(w) for w in words if w)


def compile_rule(entry: RuleEntry | Mapping[str, Any], level: str) -> Rule:
    """Compile one rule entry for the given strictness level."""
    if isinstance(entry, RuleEntry):
        entry = entry.model_dump()

    pattern = compile_pattern(entry["pattern"])
    key = " ".join(p.text for p in pattern)
    replacement_text = entry.get("replacement")
    suggestion = entry.get("suggestion")

    replacement: tuple[str, ...] | None
    if suggestion and replacement_text is None:
        replacement = None
    elif not replacement_text:
        replacement = ()
    else:
        replacement = tuple(replacement_text.split())

    restructure = None
    captures = RESTRUCTURE_CAPTURES.get(key)
    if entry.get("restructure") and captures:
        restructure = RestructureSpec(captures=captures)

    return Rule(
        id=f"{level}-{key.replace(' ', '-')}",
        pattern=pattern,
        replacement=replacement,
        level=level,
        category=entry["category"],
        suggestion=suggestion,
        restructure=restructure,
        constraint=CONSTRAINTS.get(key),
    )


@dataclass(frozen=True)
class RuleSet:
    """Compiled rules per strictness level.  Build once, share freely."""

    version: str
    conservative: tuple[Rule, ...] = ()
    moderate: tuple[Rule, ...] = ()
    aggressive: tuple[Rule, ...] = ()

    @classmethod
    def from_database(cls, db: RulesDatabase | Mapping[str, Any]) -> "RuleSet":
        """Compile a validated database (or a raw dict, validated first)."""
        if not isinstance(db, RulesDatabase):
            db = _validate(db)
        ruleset = cls(
            version=db.version,
            **{
                level: tuple(compile_rule(e, level) for e in getattr(db, level))
                for level in LEVELS
            },
        )
        logger.debug("Compiled %d rules (rules v%s)", ruleset.count(), ruleset.version)
        return ruleset

    def for_level(self, level: str) -> tuple[Rule, ...]:
        """Rules active at `level` — each level includes the ones below it."""
        if level not in LEVELS:
            raise ValueError(f"Unknown strictness level: {level!r}")
        rules: list[Rule] = []
        for name in LEVELS[: LEVELS.index(level) + 1]:
            rules.extend(getattr(self, name))
        return tuple(rules)

    def count(self, level: str | None = None) -> int:
        if level is not None:
            return len(self.for_level(level))
        return sum(len(getattr(self, name)) for name in LEVELS)

    def without_categories(self, categories: Iterable[str]) -> "RuleSet":
        """Copy of this set with every rule in `categories` dropped."""
        skip = set(categories)
        if not skip:
            return self
        return replace(self, **{
            name: tuple(r for r in getattr(self, name) if r.category not in skip)
            for name in LEVELS
        })


# ------------------------------------------------------------------
# Loading
# ------------------------------------------------------------------

def _validate(data: Any) -> RulesDatabase:
    try:
        return validate_rules_database(data)
    except ValidationError as e:
        raise RulesError(f"Invalid rules database:\n{format_validation_errors(e)}") from e


def load_rules_database(path: str | Path = DEFAULT_RULES_PATH) -> RulesDatabase:
    """Read and validate a rules file (YAML, or JSON since YAML parses it)."""
    with open(path, encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise RulesError(f"Cannot parse rules file {path}: {e}") from e
    db = _validate(data)
    logger.debug("Loaded rules database v%s from %s", db.version, path)
    return db


def load_ruleset(path: str | Path = DEFAULT_RULES_PATH) -> RuleSet:
    return RuleSet.from_database(load_rules_database(path))
