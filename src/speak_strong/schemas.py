"""
Rules Schemas — validation for rule databases

Pydantic models for the rules file. Bad entries are rejected here,
before anything is compiled, so the matcher can assume every rule has
a non-empty pattern.
"""

from __future__ import annotations

from typing import Optional
from pydantic import BaseModel, Field, ValidationError


class RuleEntry(BaseModel):
    """One rule as written in the rules file."""
    pattern: str = Field(..., min_length=1, description="Phrase to match, case-insensitive.")
    replacement: Optional[str] = Field(None, description="Omit or leave empty to delete the phrase.")
    category: str = Field(..., min_length=1)
    suggestion: Optional[str] = None
    restructure: Optional[bool] = None


class RulesDatabase(BaseModel):
    """The full rules file, one list per strictness level."""
    version: str = Field(..., min_length=1)
    conservative: list[RuleEntry]
    moderate: list[RuleEntry]
    aggressive: list[RuleEntry]


def validate_rules_database(data: object) -> RulesDatabase:
    """Validate raw (YAML/JSON-decoded) data. Raises pydantic.ValidationError."""
    return RulesDatabase.model_validate(data)


def format_validation_errors(error: ValidationError) -> str:
    """One "path: message" line per problem."""
    lines = []
    for err in error.errors():
        path = ".".join(str(p) for p in err["loc"])
        lines.append(f"{path}: {err['msg']}" if path else err["msg"])
    return "\n".join(lines)
