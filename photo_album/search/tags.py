from __future__ import annotations

import logging
from typing import Iterable, Union

from photo_album.core.errors import InvalidPredicate
from photo_album.core.models import PhotoRecord, TagExpression, TagPredicate

logger = logging.getLogger(__name__)

TagQuery = Union[TagPredicate, TagExpression]


def _predicates(expr: TagQuery) -> list[TagPredicate]:
    if isinstance(expr, TagExpression):
        return [expr.left, expr.right]
    return [expr]


def validate_predicate(predicate: TagPredicate) -> None:
    for part, text in (("key", predicate.key), ("value", predicate.value)):
        if not text:
            raise InvalidPredicate(f"Tag {part} cannot be empty")
        if any(ch.isspace() for ch in text):
            raise InvalidPredicate(f"Tag {part} {text!r} cannot contain spaces")


def matches_predicate(photo: PhotoRecord, predicate: TagPredicate) -> bool:
    # Key and value must come from the same pair.
    return photo.tags.contains(predicate.key, predicate.value)


def matches(photo: PhotoRecord, expr: TagQuery) -> bool:
    if isinstance(expr, TagPredicate):
        return matches_predicate(photo, expr)
    left = matches_predicate(photo, expr.left)
    right = matches_predicate(photo, expr.right)
    if expr.op == "AND":
        return left and right
    return left or right


def evaluate_tags(expr: TagQuery, photos: Iterable[PhotoRecord]) -> list[PhotoRecord]:
    """Filter photos by a single tag predicate or an AND/OR pair of predicates."""
    for predicate in _predicates(expr):
        validate_predicate(predicate)
    matched = [photo for photo in photos if matches(photo, expr)]
    logger.debug("Tag query %s matched %d photos", expr.kind, len(matched))
    return matched
