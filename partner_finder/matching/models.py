"""Search result data models."""

from dataclasses import dataclass, field
from typing import Optional

from partner_finder.profile.models import ProfileRecord


@dataclass
class RankedResult:
    """A profile record paired with its keyword score."""

    record: ProfileRecord
    score: int

    @property
    def name(self) -> str:
        return self.record.name or ""

    def to_dict(self) -> dict:
        data = self.record.to_dict()
        data["score"] = self.score
        return data


@dataclass
class SearchOutcome:
    """Ranked results plus what happened while loading the record store."""

    results: list[RankedResult] = field(default_factory=list)
    records_loaded: int = 0
    load_error: Optional[str] = None

    @property
    def store_failed(self) -> bool:
        return self.load_error is not None
