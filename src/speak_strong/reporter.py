"""Plain-text and JSON rendering of a ProcessResult."""

from __future__ import annotations
from typing import Any

from .types import Match, ProcessResult

_RULE = "─" * 34


def _group_by_category(matches: tuple[Match, ...]) -> dict[str, list[Match]]:
    grouped: dict[str, list[Match]] = {}
    for m in matches:
        grouped.setdefault(m.rule.category, []).append(m)
    return grouped


def format_output(result: ProcessResult, show_diff: bool = True) -> str:
    """The transformed text, preceded by a change summary when `show_diff`."""
    lines: list[str] = []

    if show_diff and (result.replacements or result.suggestions):
        if result.replacements:
            lines += ["", f"── Replacements {_RULE}"]
            for category, matches in _group_by_category(result.replacements).items():
                lines.append(f"  [{category}]")
                for m in matches:
                    lines.append(f"  {m.original} -> {m.replacement or '(removed)'}")

        if result.suggestions:
            lines += ["", f"── Suggestions (manual review) {_RULE[:20]}"]
            for category, matches in _group_by_category(result.suggestions).items():
                lines.append(f"  [{category}]")
                for m in matches:
                    hint = m.rule.suggestion or "Consider revising"
                    lines.append(f'  ! "{m.original}": {hint}')

        lines += ["", f"── Result {_RULE}{'─' * 6}"]

    lines.append(result.transformed)
    return "\n".join(lines)


def format_stats(result: ProcessResult) -> str:
    """One-line summary, e.g. "2 phrases replaced, 1 suggestion"."""
    reps, sugs = len(result.replacements), len(result.suggestions)
    if not reps and not sugs:
        return "No weak language detected"

    parts = []
    if reps:
        parts.append(f"{reps} phrase{'' if reps == 1 else 's'} replaced")
    if sugs:
        parts.append(f"{sugs} suggestion{'' if sugs == 1 else 's'}")
    return ", ".join(parts)


def _match_to_dict(m: Match) -> dict[str, Any]:
    return {
        "original": m.original,
        "replacement": m.replacement,
        "start": m.start,
        "end": m.end,
        "category": m.rule.category,
        "level": m.rule.level,
        "rule": m.rule.id,
        "suggestion": m.rule.suggestion,
    }


def result_to_dict(result: ProcessResult) -> dict[str, Any]:
    """JSON-ready view of a result."""
    return {
        "original": result.original,
        "transformed": result.transformed,
        "replacements": [_match_to_dict(m) for m in result.replacements],
        "suggestions": [_match_to_dict(m) for m in result.suggestions],
    }
