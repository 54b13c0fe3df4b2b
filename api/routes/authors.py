# api/routes/authors.py

from fastapi import APIRouter, Depends, status
from fastapi.responses import PlainTextResponse
from sqlalchemy.orm import Session

from core.result import Empty, Failure
from core.sa.database import get_db
from core.services.catalog_service import CatalogService

NO_AUTHORS_FOUND = "No authors found"

router = APIRouter(prefix="/authors", tags=["authors"])

@router.get("", response_model=None)
def get_authors(db: Session = Depends(get_db)):
    """Get all author names ("family_name, first_name") sorted by family name."""
    result = CatalogService(db).list_author_names()
    if isinstance(result, Failure):
        return PlainTextResponse("Error retrieving authors", status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)
    if isinstance(result, Empty):
        return PlainTextResponse(NO_AUTHORS_FOUND)
    return result.value
