"""YAML/dict config loader for speak-strong.

Supports loading from a YAML file or a plain dict (for embedding in a
larger application config).

Example YAML:

    speak_strong:
      level: moderate              # conservative | moderate | aggressive
      rules_path: ~/my-rules.yaml  # omit to use the bundled rules
      suggestions: true
      skip_categories:
        - apologizing
"""

from __future__ import annotations
from pathlib import Path
from typing import Any

import yaml

from .rewriter import Rewriter, RewriterConfig
from .rules import RulesError, load_ruleset
from .types import LEVELS


def _as_set(value: Any) -> set[str]:
    """A single category or a list of them."""
    if not value:
        return set()
    if isinstance(value, str):
        return {value}
    return set(value)


def load_config(data: dict[str, Any] | None) -> dict[str, Any]:
    """Normalize a config dict (from YAML or inline)."""
    data = data or {}
    # Support nested under "speak_strong" key or flat
    if isinstance(data, dict) and "speak_strong" in data:
        data = data["speak_strong"] or {}
    if not isinstance(data, dict):
        raise RulesError(f"config: expected a mapping, got {type(data).__name__}")

    level = data.get("level", "conservative")
    if level not in LEVELS:
        raise RulesError(f"level: must be one of {', '.join(LEVELS)} (got {level!r})")

    rules_path = data.get("rules_path")
    return {
        "level": level,
        "rules_path": str(Path(rules_path).expanduser()) if rules_path else None,
        "skip_categories": _as_set(data.get("skip_categories")),
        "suggestions": bool(data.get("suggestions", True)),
    }


def load_from_yaml(path: str | Path) -> dict[str, Any]:
    """Load config from a YAML file."""
    with open(path, encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise RulesError(f"Cannot parse config file {path}: {e}") from e
    return load_config(data)


def create_rewriter(config: dict[str, Any]) -> Rewriter:
    """Create a fully configured rewriter from a config dict."""
    cfg = load_config(config)   # idempotent, so already-normalized dicts are fine

    rules = load_ruleset(cfg["rules_path"]) if cfg["rules_path"] else None
    return Rewriter(RewriterConfig(
        level=cfg["level"],
        rules=rules,
        skip_categories=cfg["skip_categories"],
        suggestions=cfg["suggestions"],
    ))
