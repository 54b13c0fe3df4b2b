# core/seed.py
import logging
from typing import Iterable, List, Optional
from sqlalchemy.orm import Session

from core.sa.database import Database
from core.sa.repositories.genre import GenreRepository

logger = logging.getLogger(__name__)

DEFAULT_GENRES = ('Fiction', 'Non-Fiction', 'Science Fiction', 'Mystery', 'Fantasy')

def seed_genres(session: Session, genres: Iterable[str] = DEFAULT_GENRES) -> List[str]:
    """Replace every genre with the given names.

    Existing genres are deleted first, then each name is inserted and committed
    one at a time. An error stops the remaining inserts; genres already
    inserted are kept.

    Args:
        session: Session to write through
        genres: Names to insert, in order

    Returns:
        The inserted names
    """
    repo = GenreRepository(session)
    removed = repo.delete_all_genres()
    logger.info("Removed %d existing genres", removed)

    inserted = []
    for name in genres:
        repo.create_genre(name)
        inserted.append(name)
        logger.debug("Inserted genre %r", name)

    logger.info("Genres seeded successfully (%d)", len(inserted))
    return inserted

def run_seed(database_url: Optional[str] = None, genres: Iterable[str] = DEFAULT_GENRES) -> List[str]:
    """Connect, seed the genre table, and release the connection"""
    database = Database(database_url)
    try:
        database.init_db()
        with database.session_scope() as session:
            return seed_genres(session, genres)
    finally:
        database.dispose()
