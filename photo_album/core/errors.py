from __future__ import annotations


class QueryError(ValueError):
    """Base class for search query validation failures."""

    code = "query_error"


class MalformedQuery(QueryError):
    """Raised when a query matches none of the recognized shapes."""

    code = "malformed_query"


class InvalidRange(QueryError):
    """Raised when a date range cannot be resolved or starts after it ends."""

    code = "invalid_range"


class InvalidPredicate(QueryError):
    """Raised when a tag predicate has an empty or whitespace-bearing key/value."""

    code = "invalid_predicate"


_ERRORS_BY_CODE: dict[str, type[QueryError]] = {
    cls.code: cls for cls in (MalformedQuery, InvalidRange, InvalidPredicate)
}


def error_for_code(code: str) -> type[QueryError]:
    return _ERRORS_BY_CODE.get(code, QueryError)
