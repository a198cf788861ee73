"""JSON file store for profile records."""

import json
import logging
from pathlib import Path
from typing import Union

from partner_finder.profile.models import ProfileRecord

logger = logging.getLogger("partner_finder.storage")


class RecordStoreError(Exception):
    """The record store could not be read or parsed."""

    def __init__(self, path: Union[str, Path], message: str):
        self.path = str(path)
        self.message = message
        super().__init__(f"{self.path}: {message}")


def load_records(path: Union[str, Path]) -> list[ProfileRecord]:
    """Load profile records from a JSON document whose top level is a list.

    Entries that are not JSON objects are skipped.
    """
    store_path = Path(path)
    try:
        with open(store_path, "r", encoding="utf-8") as f:
            raw = json.load(f)
    except FileNotFoundError as e:
        raise RecordStoreError(store_path, "file not found") from e
    except (OSError, UnicodeDecodeError) as e:
        raise RecordStoreError(store_path, f"unreadable: {e}") from e
    # JSONDecodeError, oversized int literals and deep nesting
    except (ValueError, RecursionError) as e:
        raise RecordStoreError(store_path, f"invalid JSON: {e}") from e

    if not isinstance(raw, list):
        raise RecordStoreError(store_path, f"expected a JSON list, got {type(raw).__name__}")

    records = []
    for i, entry in enumerate(raw):
        if not isinstance(entry, dict):
            logger.warning("Skipping entry #%d in %s: not an object", i, store_path)
            continue
        records.append(ProfileRecord.from_dict(entry))

    logger.debug("Loaded %d records from %s", len(records), store_path)
    return records
