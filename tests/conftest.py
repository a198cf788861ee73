"""Shared fixtures: temporary JSON profile stores."""

import json
import os
import tempfile

import pytest

SAMPLE_RECORDS = [
    {
        "name": "Anna",
        "role": "Developer",
        "location": "Amsterdam",
        "posts": "Loves Java and Amsterdam events",
    },
    {
        "name": "Bob",
        "role": "Manager",
        "location": "Utrecht",
        "posts": "No tech posts",
    },
]


def write_store(records) -> str:
    with tempfile.NamedTemporaryFile(mode="w", suffix=".json", delete=False, encoding="utf-8") as f:
        json.dump(records, f)
        return f.name


@pytest.fixture
def store_file():
    """Create a temporary store holding the Anna/Bob sample."""
    path = write_store(SAMPLE_RECORDS)
    yield path
    os.unlink(path)


@pytest.fixture
def make_store():
    """Factory for temporary stores with arbitrary content."""
    paths = []

    def _make(records):
        path = write_store(records)
        paths.append(path)
        return path

    yield _make
    for path in paths:
        os.unlink(path)
