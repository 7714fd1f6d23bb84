from __future__ import annotations

from datetime import datetime

import pytest

from photo_album.core.models import PhotoRecord


@pytest.fixture(autouse=True)
def isolate_search_env(monkeypatch):
    """Keep developer shell settings from changing date policy or result names."""
    monkeypatch.delenv("PHOTO_ALBUM_STRICT_DATES", raising=False)
    monkeypatch.delenv("PHOTO_ALBUM_RESULTS_NAME", raising=False)
    yield


@pytest.fixture
def tagged_photos() -> list[PhotoRecord]:
    """A: person=John, B: location=Paris, C: both."""
    taken = datetime(2024, 5, 1, 12, 0, 0)
    return [
        PhotoRecord(id="A", timestamp=taken, tags=[("person", "John")]),
        PhotoRecord(id="B", timestamp=taken, tags=[("location", "Paris")]),
        PhotoRecord(
            id="C",
            timestamp=taken,
            tags=[("person", "John"), ("location", "Paris")],
        ),
    ]


@pytest.fixture
def dated_photos() -> list[PhotoRecord]:
    return [
        PhotoRecord(id="new-year", timestamp=datetime(2020, 1, 1, 0, 0, 0)),
        PhotoRecord(id="spring", timestamp=datetime(2020, 3, 15, 9, 30)),
        PhotoRecord(id="last-second", timestamp=datetime(2020, 12, 31, 23, 59, 59)),
        PhotoRecord(id="too-late", timestamp=datetime(2020, 12, 31, 23, 59, 59, 500000)),
        PhotoRecord(id="before", timestamp=datetime(2019, 12, 31, 23, 59, 59)),
        PhotoRecord(id="after", timestamp=datetime(2021, 1, 1, 0, 0, 0)),
    ]
