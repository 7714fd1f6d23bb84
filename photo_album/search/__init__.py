"""Query classification and photo filtering."""

from .classifier import classify, classify_date_range
from .date_range import evaluate_date_range, resolve_date_range
from .engine import QueryEngine, search
from .tags import evaluate_tags, validate_predicate

__all__ = [
    "QueryEngine",
    "classify",
    "classify_date_range",
    "evaluate_date_range",
    "evaluate_tags",
    "resolve_date_range",
    "search",
    "validate_predicate",
]
