# api/routes/genres.py

from fastapi import APIRouter, Depends, status
from fastapi.responses import PlainTextResponse
from sqlalchemy.orm import Session

from core.result import Empty, Failure
from core.sa.database import get_db
from core.services.catalog_service import CatalogService
from api.schemas.genre import GenreCount

NO_GENRES_FOUND = "No genres found"

router = APIRouter(prefix="/genres", tags=["genres"])

@router.get("", response_model=None)
def get_genres(db: Session = Depends(get_db)):
    """
    Get the names of all genres sorted alphabetically.

    Returns:
        JSON array of genre names, the text "No genres found" when there are none,
        or a 500 with a plain-text message if the store could not be queried
    """
    result = CatalogService(db).list_genre_names()
    if isinstance(result, Failure):
        return PlainTextResponse("Error retrieving genres", status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)
    if isinstance(result, Empty):
        return PlainTextResponse(NO_GENRES_FOUND)
    return result.value

@router.get("/count", response_model=GenreCount)
def get_genre_count(db: Session = Depends(get_db)):
    """
    Get the total number of genres.

    Returns:
        {"count": n}, or a 500 with a plain-text message if the store could not be queried
    """
    result = CatalogService(db).count_genres()
    if isinstance(result, Failure):
        return PlainTextResponse("Error retrieving genre count", status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)
    return GenreCount(count=result.value)
