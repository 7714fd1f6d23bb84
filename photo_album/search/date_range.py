from __future__ import annotations

import logging
from datetime import date, datetime, time, timedelta
from typing import Iterable

from photo_album.core.errors import InvalidRange
from photo_album.core.models import CalendarDay, DateRangeQuery, PhotoRecord
from photo_album.search.classifier import classify_date_range

logger = logging.getLogger(__name__)

_DAY_START = time(0, 0, 0)
# Sub-second part stays zero: 23:59:59.5 on the end day falls outside the range.
_DAY_END = time(23, 59, 59)


def _label(day: CalendarDay) -> str:
    return f"{day.month:02d}/{day.day:02d}/{day.year:04d}"


def _calendar_date(day: CalendarDay, *, strict: bool) -> date:
    if strict:
        try:
            return date(day.year, day.month, day.day)
        except ValueError as exc:
            raise InvalidRange(f"{_label(day)} is not a calendar date") from exc

    # Month overflow carries into the year, day overflow into the following months.
    year, month_index = divmod(day.year * 12 + day.month - 1, 12)
    try:
        return date(year, month_index + 1, 1) + timedelta(days=day.day - 1)
    except (ValueError, OverflowError) as exc:
        raise InvalidRange(f"{_label(day)} is outside the supported calendar") from exc


def resolve_date_range(
    query: DateRangeQuery | str, *, strict: bool = False
) -> tuple[datetime, datetime]:
    """Return the inclusive (start, end) bounds for a date-range query."""
    if isinstance(query, str):
        query = classify_date_range(query)
    start = datetime.combine(_calendar_date(query.start, strict=strict), _DAY_START)
    end = datetime.combine(_calendar_date(query.end, strict=strict), _DAY_END)
    if start > end:
        raise InvalidRange(
            f"Start date {_label(query.start)} is after end date {_label(query.end)}"
        )
    return start, end


def _within(timestamp: datetime, start: datetime, end: datetime) -> bool:
    if timestamp.tzinfo is not None:
        # Bounds are wall-clock days in the photo's own timezone.
        start = start.replace(tzinfo=timestamp.tzinfo)
        end = end.replace(tzinfo=timestamp.tzinfo)
    return start <= timestamp <= end


def evaluate_date_range(
    query: DateRangeQuery | str,
    photos: Iterable[PhotoRecord],
    *,
    strict: bool = False,
) -> list[PhotoRecord]:
    """Photos timestamped inside the inclusive range, in their original order."""
    start, end = resolve_date_range(query, strict=strict)
    matched = [photo for photo in photos if _within(photo.timestamp, start, end)]
    logger.debug("Date range %s..%s matched %d photos", start, end, len(matched))
    return matched
