"""Profile record data model."""

from dataclasses import dataclass
from typing import Iterator, Optional

# Keys used by data files exported from the original Dutch deployment
FIELD_ALIASES = {
    "naam": "name",
    "functie": "role",
    "locatie": "location",
    "foto": "photo",
}

RECORD_FIELDS = ("name", "role", "location", "posts", "photo", "contact")


def _as_text(value) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, str):
        return value
    return str(value)


@dataclass
class ProfileRecord:
    """Represents one candidate business partner."""

    name: Optional[str] = None
    role: Optional[str] = None
    location: Optional[str] = None
    posts: Optional[str] = None
    # Presentation-only, never scored
    photo: Optional[str] = None
    contact: Optional[str] = None

    @classmethod
    def from_dict(cls, raw: dict) -> "ProfileRecord":
        """Build a record from one JSON object. Unknown keys are ignored."""
        values = {key: _as_text(raw[key]) for key in RECORD_FIELDS if key in raw}
        # English keys win over their Dutch aliases
        for alias, field_name in FIELD_ALIASES.items():
            if alias in raw:
                values.setdefault(field_name, _as_text(raw[alias]))
        return cls(**values)

    def scorable_fields(self) -> Iterator[Optional[str]]:
        """Yield the scored fields in fixed order: name, role, location, posts."""
        yield self.name
        yield self.role
        yield self.location
        yield self.posts

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "name": self.name,
            "role": self.role,
            "location": self.location,
            "posts": self.posts,
            "photo": self.photo,
            "contact": self.contact,
        }
