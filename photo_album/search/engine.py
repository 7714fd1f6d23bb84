from __future__ import annotations

import logging
from typing import Iterable, Optional

from photo_album.core.env import strict_dates_enabled
from photo_album.core.errors import QueryError
from photo_album.core.models import (
    Album,
    DateRangeQuery,
    Library,
    PhotoRecord,
    SearchError,
    SearchOutcome,
)

from .classifier import Query, classify
from .date_range import evaluate_date_range
from .tags import evaluate_tags

logger = logging.getLogger(__name__)


class QueryEngine:
    """Single entry point: raw query text plus photos in, outcome out."""

    def __init__(self, *, strict_dates: Optional[bool] = None) -> None:
        self.strict_dates = strict_dates_enabled() if strict_dates is None else strict_dates

    def classify(self, raw: str) -> Query:
        return classify(raw)

    def evaluate(
        self, query: Query, photos: Iterable[PhotoRecord]
    ) -> list[PhotoRecord]:
        if isinstance(query, DateRangeQuery):
            return evaluate_date_range(query, photos, strict=self.strict_dates)
        return evaluate_tags(query, photos)

    def search(self, raw: str, photos: Iterable[PhotoRecord]) -> SearchOutcome:
        """Classify and evaluate a query; failures come back on ``outcome.error``."""
        text = raw if isinstance(raw, str) else repr(raw)
        kind: Optional[str] = None
        try:
            query = self.classify(raw)
            kind = query.kind
            snapshot = list(photos)
            matched = self.evaluate(query, snapshot)
        except QueryError as exc:
            logger.info("Search %r rejected (%s): %s", text, exc.code, exc)
            return SearchOutcome(
                query=text,
                kind=kind,
                error=SearchError(code=exc.code, message=str(exc)),
            )

        logger.info(
            "Search %r (%s) matched %d of %d photos", text, kind, len(matched), len(snapshot)
        )
        return SearchOutcome(query=text, kind=kind, photos=matched)

    def search_album(self, raw: str, album: Album) -> SearchOutcome:
        return self.search(raw, album.photos)

    def search_library(self, raw: str, library: Library) -> SearchOutcome:
        """Search every album the library holds; a photo shared by albums appears once."""
        return self.search(raw, library.photos())


def search(raw: str, photos: Iterable[PhotoRecord]) -> SearchOutcome:
    return QueryEngine().search(raw, photos)
