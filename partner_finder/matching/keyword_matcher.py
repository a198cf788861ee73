"""Case-insensitive substring counting (default scorer)."""

from typing import Optional, Protocol, Sequence, runtime_checkable

from partner_finder.profile.models import ProfileRecord


@runtime_checkable
class Scorer(Protocol):
    """Interface for record scoring strategies.

    The ranking pipeline only relies on this method, so another strategy
    can be passed in without touching it.
    """

    def score(self, record: ProfileRecord, keywords: Sequence[str]) -> int:
        """Return a non-negative relevance score for the record."""
        ...


def count_occurrences(text: Optional[str], keyword: Optional[str]) -> int:
    """Count non-overlapping, case-insensitive occurrences of keyword in text.

    Scanning resumes after the end of each hit, so "aa" is found twice in
    "aaaa", not three times.
    """
    if not text or not keyword:
        return 0
    return text.lower().count(keyword.lower())


def score_record(record: ProfileRecord, keywords: Sequence[str]) -> int:
    """Sum keyword hits over name, role, location and posts."""
    score = 0
    for text in record.scorable_fields():
        for keyword in keywords:
            score += count_occurrences(text, keyword)
    return score


class SubstringScorer:
    """Default Scorer: literal substring counting."""

    def score(self, record: ProfileRecord, keywords: Sequence[str]) -> int:
        return score_record(record, keywords)
