from datetime import datetime, timedelta, timezone

import pytest

from photo_album.core.errors import InvalidRange, MalformedQuery
from photo_album.core.models import PhotoRecord
from photo_album.search import classify, evaluate_date_range, resolve_date_range


def _ids(photos) -> list[str]:
    return [photo.id for photo in photos]


def test_range_is_inclusive_and_keeps_order(dated_photos) -> None:
    matched = evaluate_date_range("01/01/2020-12/31/2020", dated_photos)
    assert _ids(matched) == ["new-year", "spring", "last-second"]
    assert matched[0] is dated_photos[0]


def test_end_bound_has_zero_sub_seconds() -> None:
    start, end = resolve_date_range("01/01/2020-12/31/2020")
    assert start == datetime(2020, 1, 1, 0, 0, 0)
    assert end == datetime(2020, 12, 31, 23, 59, 59)
    assert end.microsecond == 0


def test_single_day_range(dated_photos) -> None:
    matched = evaluate_date_range(classify("03/15/2020-03/15/2020"), dated_photos)
    assert _ids(matched) == ["spring"]


def test_start_after_end_is_invalid(dated_photos) -> None:
    with pytest.raises(InvalidRange):
        evaluate_date_range("01/01/2020-12/31/2019", dated_photos)
    with pytest.raises(InvalidRange):
        evaluate_date_range("01/01/2020-12/31/2019", [])


def test_text_must_be_a_date_range() -> None:
    with pytest.raises(MalformedQuery):
        evaluate_date_range("person=John", [])


def test_calendar_invalid_day_rolls_over_by_default() -> None:
    start, end = resolve_date_range("02/30/2024-03/01/2024")
    assert start == datetime(2024, 3, 1, 0, 0, 0)
    assert end == datetime(2024, 3, 1, 23, 59, 59)

    photos = [
        PhotoRecord(id="feb29", timestamp=datetime(2024, 2, 29, 12, 0)),
        PhotoRecord(id="mar1", timestamp=datetime(2024, 3, 1, 8, 0)),
    ]
    assert _ids(evaluate_date_range("02/30/2024-03/01/2024", photos)) == ["mar1"]


@pytest.mark.parametrize(
    "text, expected_start",
    [
        ("13/01/2020-12/31/2021", datetime(2021, 1, 1)),
        ("00/15/2020-12/31/2021", datetime(2019, 12, 15)),
        ("03/00/2021-12/31/2021", datetime(2021, 2, 28)),
        ("01/32/2021-12/31/2021", datetime(2021, 2, 1)),
    ],
)
def test_month_and_day_overflow(text: str, expected_start: datetime) -> None:
    start, _ = resolve_date_range(text)
    assert start == expected_start


def test_rollover_can_make_the_range_invalid() -> None:
    # 02/30/2023 becomes 03/02/2023, after the end date.
    with pytest.raises(InvalidRange):
        resolve_date_range("02/30/2023-03/01/2023")


def test_strict_mode_rejects_calendar_invalid_day() -> None:
    with pytest.raises(InvalidRange, match="02/30/2024"):
        resolve_date_range("02/30/2024-03/01/2024", strict=True)
    start, _ = resolve_date_range("02/29/2024-03/01/2024", strict=True)
    assert start == datetime(2024, 2, 29)


def test_unrepresentable_years_are_invalid() -> None:
    with pytest.raises(InvalidRange):
        resolve_date_range("01/01/0000-01/01/2020")
    with pytest.raises(InvalidRange):
        resolve_date_range("01/01/2020-12/99/9999")


def test_aware_timestamps_use_their_own_wall_clock() -> None:
    tz = timezone(timedelta(hours=9))
    photos = [
        PhotoRecord(id="tokyo-morning", timestamp=datetime(2024, 7, 4, 1, 0, tzinfo=tz)),
        PhotoRecord(id="utc-late", timestamp=datetime(2024, 7, 3, 23, 0, tzinfo=timezone.utc)),
    ]
    assert _ids(evaluate_date_range("07/04/2024-07/04/2024", photos)) == ["tokyo-morning"]


def test_refiltering_is_idempotent(dated_photos) -> None:
    once = evaluate_date_range("01/01/2020-12/31/2020", dated_photos)
    twice = evaluate_date_range("01/01/2020-12/31/2020", once)
    assert twice == once
