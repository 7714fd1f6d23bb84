from __future__ import annotations

import logging
import re
from typing import Union

from photo_album.core.errors import MalformedQuery
from photo_album.core.models import (
    CalendarDay,
    DateRangeQuery,
    TagExpression,
    TagPredicate,
)

logger = logging.getLogger(__name__)

# ASCII keeps \d and \w to plain digits and [A-Za-z0-9_].
_DATE_RANGE = re.compile(
    r"(\d{2})/(\d{2})/(\d{4})-(\d{2})/(\d{2})/(\d{4})", re.ASCII
)
_BINARY_TAG = re.compile(r"(\w+)=(\w+) (AND|OR) (\w+)=(\w+)", re.ASCII)
_SINGLE_TAG = re.compile(r"(\w+)=(\w+)", re.ASCII)

Query = Union[DateRangeQuery, TagPredicate, TagExpression]


def _day(month: str, day: str, year: str) -> CalendarDay:
    return CalendarDay(month=int(month), day=int(day), year=int(year))


def classify_date_range(raw: str) -> DateRangeQuery:
    """Parse MM/DD/YYYY-MM/DD/YYYY without checking calendar validity."""
    match = _DATE_RANGE.fullmatch(raw) if isinstance(raw, str) else None
    if match is None:
        raise MalformedQuery(f"Not a date range (expected MM/DD/YYYY-MM/DD/YYYY): {raw!r}")
    groups = match.groups()
    return DateRangeQuery(text=raw, start=_day(*groups[:3]), end=_day(*groups[3:]))


def classify(raw: str) -> Query:
    """Decide the shape of a raw query: date range, binary tag, or single tag."""
    if not isinstance(raw, str):
        raise MalformedQuery(f"Query must be text, got {type(raw).__name__}")
    if not raw:
        raise MalformedQuery("Query is empty")

    binary = _BINARY_TAG.fullmatch(raw)
    single = _SINGLE_TAG.fullmatch(raw)
    if _DATE_RANGE.fullmatch(raw):
        query: Query = classify_date_range(raw)
    elif binary:
        left_key, left_value, op, right_key, right_value = binary.groups()
        query = TagExpression(
            left=TagPredicate(key=left_key, value=left_value),
            right=TagPredicate(key=right_key, value=right_value),
            op=op,
        )
    elif single:
        query = TagPredicate(key=single.group(1), value=single.group(2))
    else:
        raise MalformedQuery(
            f"Unrecognized query {raw!r}; use MM/DD/YYYY-MM/DD/YYYY, key=value, "
            "or key=value AND|OR key=value"
        )

    logger.debug("Classified %r as %s", raw, query.kind)
    return query
