from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from photo_album.core.env import configure_logging, load_dotenv_if_present
from photo_album.core.errors import QueryError
from photo_album.core.models import Library, PhotoRecord, SearchOutcome
from photo_album.search import QueryEngine

app = FastAPI(title="Photo Album Search API")

load_dotenv_if_present()
configure_logging()

engine = QueryEngine()


class ClassifyRequest(BaseModel):
    query: str


class SearchRequest(BaseModel):
    query: str
    photos: list[PhotoRecord] = []


class LibrarySearchRequest(BaseModel):
    query: str
    library: Library


def _raise_for_outcome(outcome: SearchOutcome) -> None:
    if outcome.error is not None:
        raise HTTPException(status_code=400, detail=outcome.error.model_dump())


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}


@app.post("/classify")
def classify_query(req: ClassifyRequest) -> dict:
    try:
        query = engine.classify(req.query)
    except QueryError as exc:
        raise HTTPException(
            status_code=400, detail={"code": exc.code, "message": str(exc)}
        ) from exc
    return {"kind": query.kind, "query": query.model_dump()}


@app.post("/search")
def search_photos(req: SearchRequest) -> dict:
    outcome = engine.search(req.query, req.photos)
    _raise_for_outcome(outcome)
    return {
        "kind": outcome.kind,
        "results": [photo.model_dump() for photo in outcome.photos],
    }


@app.post("/library/search")
def search_library(req: LibrarySearchRequest) -> dict:
    """Search all albums and return the hits as a transient, uniquely named album."""
    outcome = engine.search_library(req.query, req.library)
    _raise_for_outcome(outcome)
    album = req.library.results_album(outcome.photos)
    return {"kind": outcome.kind, "album": album.model_dump()}
