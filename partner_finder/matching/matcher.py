"""Ranking pipeline: load records, score, filter and sort."""

import logging
from pathlib import Path
from typing import Optional, Sequence, Union

from partner_finder.matching.keyword_matcher import Scorer, SubstringScorer
from partner_finder.matching.models import RankedResult, SearchOutcome
from partner_finder.profile.models import ProfileRecord
from partner_finder.storage.record_store import RecordStoreError, load_records

logger = logging.getLogger("partner_finder.matching")


def rank_records(
    records: Sequence[ProfileRecord],
    keywords: Sequence[str],
    scorer: Optional[Scorer] = None,
) -> list[RankedResult]:
    """Score all records and return those with a positive score, best first."""
    scorer = scorer or SubstringScorer()

    matched = []
    for record in records:
        score = scorer.score(record, keywords)
        if score > 0:
            matched.append(RankedResult(record=record, score=score))

    # Stable sort: equal scores keep store order
    matched.sort(key=lambda r: r.score, reverse=True)

    logger.info("Matched %d/%d records for keywords %s", len(matched), len(records), list(keywords))
    return matched


def search_with_status(
    source: Union[str, Path],
    keywords: Sequence[str],
    scorer: Optional[Scorer] = None,
) -> SearchOutcome:
    """Run a search and report whether the record store loaded."""
    try:
        records = load_records(source)
    except RecordStoreError as e:
        logger.warning("Record store unavailable, searching zero records: %s", e)
        return SearchOutcome(load_error=str(e))

    return SearchOutcome(
        results=rank_records(records, keywords, scorer),
        records_loaded=len(records),
    )


def search(
    source: Union[str, Path],
    keywords: Sequence[str],
    scorer: Optional[Scorer] = None,
) -> list[RankedResult]:
    """Rank the records in source against keywords.

    A store that cannot be loaded behaves like an empty one.
    """
    return search_with_status(source, keywords, scorer).results
