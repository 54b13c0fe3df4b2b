# core/services/catalog_service.py

import logging
from typing import Callable, List
from sqlalchemy.orm import Session

from core.result import Empty, Failure, Found, QueryResult
from core.sa.repositories import AuthorRepository, GenreRepository

logger = logging.getLogger(__name__)

class CatalogService:
    """Read side of the catalog used by the HTTP routes and the CLI.

    Every operation returns a tagged result instead of raising: Found for data,
    Empty for a successful query with no rows, and Failure when the repository
    call raised, whatever the exception type.
    Callers decide how each case is presented.
    """

    def __init__(self, session: Session):
        self.session = session
        self.genres = GenreRepository(session)
        self.authors = AuthorRepository(session)

    def list_genre_names(self) -> QueryResult[List[str]]:
        """All genre names sorted alphabetically"""
        return self._collect("genres", lambda: self.genres.get_all_genres({"name": 1}))

    def list_author_names(self) -> QueryResult[List[str]]:
        """All author names sorted by family name"""
        return self._collect("authors", lambda: self.authors.get_all_authors({"family_name": 1}))

    def count_genres(self) -> QueryResult[int]:
        """Total number of genres; zero is still Found"""
        try:
            return Found(self.genres.count_genres())
        except Exception as e:
            return self._failed("genre count", e)

    def _collect(self, label: str, query: Callable[[], List[str]]) -> QueryResult[List[str]]:
        try:
            items = query()
        except Exception as e:
            return self._failed(label, e)
        if not items:
            return Empty()
        return Found(items)

    def _failed(self, label: str, error: Exception) -> Failure:
        logger.exception("Error retrieving %s", label)
        self.session.rollback()
        return Failure(str(error))
