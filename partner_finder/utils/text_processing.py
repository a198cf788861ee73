"""Keyword input parsing and validation."""

from typing import Sequence


class KeywordLimitError(ValueError):
    """Keyword input is empty or has too many terms."""


def parse_keywords(raw: str) -> list[str]:
    """Split a line of user input into keywords on runs of whitespace."""
    return (raw or "").split()


def check_keyword_limit(keywords: Sequence[str], max_keywords: int) -> None:
    """Raise KeywordLimitError unless 1..max_keywords keywords were given."""
    if not keywords:
        raise KeywordLimitError("Enter at least one keyword.")
    if len(keywords) > max_keywords:
        raise KeywordLimitError(
            f"Enter at most {max_keywords} keywords ({len(keywords)} given)."
        )
