"""Rewriter — the main API.  Tokenize, match, splice.

Usage:
    from speak_strong import Rewriter, RewriterConfig, process_text

    result = process_text("I think we should try this")
    print(result.transformed)        # "We should try this"

    rewriter = Rewriter(RewriterConfig(level="moderate"))   # reusable
    result = rewriter.process("Would you mind if I take this?")
    print(result.transformed)        # "I'd like to take this?"
    for s in result.suggestions:
        print(s.original, s.rule.suggestion)
"""

from __future__ import annotations
import logging
import threading
from dataclasses import dataclass, field
from typing import Iterable

from .matcher import find_matches
from .replacer import apply_matches
from .rules import RuleSet, load_ruleset
from .types import ProcessResult

logger = logging.getLogger(__name__)

# Lazy singleton — the bundled rules are compiled on first use
_default_rules: RuleSet | None = None
_default_lock = threading.Lock()


def default_rules() -> RuleSet:
    """The bundled rule set, compiled once per process."""
    global _default_rules
    if _default_rules is None:
        with _default_lock:
            if _default_rules is None:
                _default_rules = load_ruleset()
    return _default_rules


def clear_rules_cache() -> None:
    """Forget the bundled rule set; the next call recompiles it."""
    global _default_rules
    with _default_lock:
        _default_rules = None


@dataclass
class RewriterConfig:
    """Configuration for the Rewriter."""
    level: str = "conservative"
    rules: RuleSet | None = None          # None = bundled rules
    # Categories to ignore entirely (e.g. keep "apologizing" phrases)
    skip_categories: set[str] = field(default_factory=set)
    # False = drop suggestion-only rules, report replacements only
    suggestions: bool = True


class Rewriter:
    """Rewrites weak phrasing using a compiled rule set.

    Holds no per-call state, so one instance can serve many texts.
    """

    def __init__(self, config: RewriterConfig | None = None) -> None:
        self.config = config or RewriterConfig()
        rules = self.config.rules or default_rules()
        self.rules = rules.without_categories(self.config.skip_categories)

    def process(self, text: str, level: str | None = None) -> ProcessResult:
        """Rewrite `text` at `level` (defaults to the configured level)."""
        level = level or self.config.level
        rules = self.rules.for_level(level)
        if not self.config.suggestions:
            rules = tuple(r for r in rules if not r.suggestion_only)
        logger.debug("Applying %d rules for level '%s'", len(rules), level)

        matches = find_matches(text, rules)
        replacements = tuple(m for m in matches if m.replacement is not None)
        suggestions = tuple(m for m in matches if m.replacement is None)
        transformed = apply_matches(text, replacements)

        logger.info(
            "Processed text: %d replacements, %d suggestions",
            len(replacements), len(suggestions),
        )
        return ProcessResult(
            original=text,
            transformed=transformed,
            replacements=replacements,
            suggestions=suggestions,
        )

    def process_many(self, texts: Iterable[str], level: str | None = None) -> list[ProcessResult]:
        return [self.process(t, level) for t in texts]


def process_text(
    text: str,
    level: str = "conservative",
    rules: RuleSet | None = None,
) -> ProcessResult:
    """Rewrite `text` with `rules` (bundled rules by default)."""
    return Rewriter(RewriterConfig(level=level, rules=rules)).process(text)


def get_strictness_level(*, moderate: bool = False, aggressive: bool = False) -> str:
    """Map CLI-style flags to a level; aggressive wins over moderate."""
    if aggressive:
        return "aggressive"
    if moderate:
        return "moderate"
    return "conservative"


def get_rules_version(rules: RuleSet | None = None) -> str:
    return (rules or default_rules()).version


def get_rule_count(level: str | None = None, rules: RuleSet | None = None) -> int:
    """Rules active at `level`, or all rules when no level is given."""
    return (rules or default_rules()).count(level)
