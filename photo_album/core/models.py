from __future__ import annotations

from datetime import datetime
from typing import Any, Iterable, Iterator, Literal, Optional
from uuid import uuid4

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    RootModel,
    field_validator,
    model_validator,
)

from photo_album.core.env import results_album_name
from photo_album.core.errors import error_for_code


class Tag(BaseModel):
    """A single key/value label attached to a photo."""

    model_config = ConfigDict(frozen=True)

    key: str
    value: str

    @model_validator(mode="before")
    @classmethod
    def _from_pair(cls, data: Any) -> Any:
        if isinstance(data, (tuple, list)) and len(data) == 2:
            key, value = data
            return {"key": key, "value": value}
        return data

    @field_validator("key", "value")
    @classmethod
    def _require_token(cls, value: str) -> str:
        if not value:
            raise ValueError("Tag keys and values cannot be empty")
        if any(ch.isspace() for ch in value):
            raise ValueError("Tag keys and values cannot contain whitespace")
        return value


class TagSet(RootModel[list[Tag]]):
    """Ordered tags for one photo. Keys may repeat with different values."""

    root: list[Tag] = Field(default_factory=list)

    def __iter__(self) -> Iterator[Tag]:  # type: ignore[override]
        return iter(self.root)

    def __len__(self) -> int:
        return len(self.root)

    def contains(self, key: str, value: str) -> bool:
        """True when one pair carries both the key and the value."""
        return any(tag.key == key and tag.value == value for tag in self.root)

    def values(self, key: str) -> list[str]:
        return [tag.value for tag in self.root if tag.key == key]

    def add(self, key: str, value: str) -> Tag:
        tag = Tag(key=key, value=value)
        if tag in self.root:
            raise ValueError(f"Tag {key}={value} already present")
        self.root.append(tag)
        return tag

    def remove(self, key: str, value: str) -> bool:
        for idx, tag in enumerate(self.root):
            if tag.key == key and tag.value == value:
                del self.root[idx]
                return True
        return False


class PhotoRecord(BaseModel):
    id: str = Field(default_factory=lambda: uuid4().hex)
    timestamp: datetime
    tags: TagSet = Field(default_factory=TagSet)
    path: Optional[str] = None
    caption: Optional[str] = None


def _require_album_name(name: str) -> str:
    if not name:
        raise ValueError("Album name cannot be empty")
    return name


class Album(BaseModel):
    name: str
    photos: list[PhotoRecord] = Field(default_factory=list)

    @field_validator("name")
    @classmethod
    def _name_required(cls, value: str) -> str:
        return _require_album_name(value)

    @property
    def size(self) -> int:
        return len(self.photos)

    def add_photo(self, photo: PhotoRecord) -> None:
        self.photos.append(photo)

    def remove_photo(self, photo: PhotoRecord | str) -> bool:
        photo_id = photo if isinstance(photo, str) else photo.id
        for idx, existing in enumerate(self.photos):
            if existing.id == photo_id:
                del self.photos[idx]
                return True
        return False

    def rename(self, name: str) -> None:
        self.name = _require_album_name(name)

    def start_date(self) -> Optional[datetime]:
        """Earliest photo timestamp, or None for an empty album."""
        if not self.photos:
            return None
        return min(photo.timestamp for photo in self.photos)

    def end_date(self) -> Optional[datetime]:
        if not self.photos:
            return None
        return max(photo.timestamp for photo in self.photos)

    def search(self, raw: str) -> "SearchOutcome":
        from photo_album.search.engine import search

        return search(raw, self.photos)


class Library(BaseModel):
    """One user's albums, handed to the search engine as explicit context."""

    owner: str
    albums: list[Album] = Field(default_factory=list)

    def get_album(self, name: str) -> Optional[Album]:
        for album in self.albums:
            if album.name == name:
                return album
        return None

    def add_album(self, album: Album) -> Album:
        if self.get_album(album.name) is not None:
            raise ValueError(f"Album {album.name!r} already exists")
        self.albums.append(album)
        return album

    def photos(self) -> list[PhotoRecord]:
        """Every photo across albums in album order, each photo id once."""
        seen: set[str] = set()
        collected: list[PhotoRecord] = []
        for album in self.albums:
            for photo in album.photos:
                if photo.id in seen:
                    continue
                seen.add(photo.id)
                collected.append(photo)
        return collected

    def unique_album_name(self, base: str | None = None) -> str:
        base_name = base or results_album_name()
        candidate = base_name
        count = 1
        while self.get_album(candidate) is not None:
            candidate = f"{base_name}{count}"
            count += 1
        return candidate

    def results_album(
        self, photos: Iterable[PhotoRecord], base: str | None = None
    ) -> Album:
        """Build a transient album for search results; it is not added to the library."""
        return Album(name=self.unique_album_name(base), photos=list(photos))


class CalendarDay(BaseModel):
    """Month/day/year exactly as typed; not yet checked against a calendar."""

    month: int
    day: int
    year: int


class DateRangeQuery(BaseModel):
    kind: Literal["date_range"] = "date_range"
    text: str
    start: CalendarDay
    end: CalendarDay


class TagPredicate(BaseModel):
    kind: Literal["single_tag"] = "single_tag"
    key: str
    value: str


Combinator = Literal["AND", "OR"]


class TagExpression(BaseModel):
    kind: Literal["binary_tag"] = "binary_tag"
    left: TagPredicate
    right: TagPredicate
    op: Combinator


class SearchError(BaseModel):
    code: str  # malformed_query | invalid_range | invalid_predicate
    message: str


class SearchOutcome(BaseModel):
    query: str
    kind: Optional[str] = None
    photos: list[PhotoRecord] = Field(default_factory=list)
    error: Optional[SearchError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def raise_for_error(self) -> None:
        if self.error is not None:
            raise error_for_code(self.error.code)(self.error.message)
