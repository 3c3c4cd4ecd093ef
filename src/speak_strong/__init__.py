"""speak-strong — rewrite hedging, minimizing and apologetic phrasing."""

__version__ = "1.0.0"

from .rewriter import (
    Rewriter, RewriterConfig,
    process_text, get_strictness_level, get_rules_version, get_rule_count,
    default_rules, clear_rules_cache,
)
from .rules import RuleSet, RulesError, compile_rule, load_rules_database, load_ruleset
from .matcher import find_matches
from .replacer import apply_matches
from .tokenizer import tokenize, get_word_tokens, token_at, token_slice, tokens_to_text
from .config import create_rewriter, load_config, load_from_yaml
from .types import Match, ProcessResult, Rule, Token

__all__ = [
    "Rewriter", "RewriterConfig",
    "process_text", "get_strictness_level", "get_rules_version", "get_rule_count",
    "default_rules", "clear_rules_cache",
    "RuleSet", "RulesError", "compile_rule", "load_rules_database", "load_ruleset",
    "find_matches", "apply_matches",
    "tokenize", "get_word_tokens", "token_at", "token_slice", "tokens_to_text",
    "create_rewriter", "load_config", "load_from_yaml",
    "Match", "ProcessResult", "Rule", "Token",
]
