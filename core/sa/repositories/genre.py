# core/sa/repositories/genre.py

import logging
from typing import Any, Dict, List, Optional
from core.sa.models import Genre
from .base import BaseRepository, SortOptions

logger = logging.getLogger(__name__)

class GenreRepository(BaseRepository):
    """Repository for managing Genre entities.

    Store errors are not handled here; they propagate to the caller.
    """

    model = Genre

    def count_genres(self, filters: Optional[Dict[str, Any]] = None) -> int:
        """Count the genres matching a filter.

        Args:
            filters: Optional field/value equality pairs, e.g. {"name": "Fiction"}.
                     An empty or missing filter counts every genre.

        Returns:
            The number of matching genres
        """
        return self._filtered(filters).count()

    def get_genre_id_by_name(self, name: str) -> Optional[int]:
        """Get the ID of the first genre with the given name.

        Args:
            name: The exact name of the genre

        Returns:
            The genre ID if found, None otherwise
        """
        genre = self.session.query(Genre).filter(Genre.name == name).order_by(Genre.id).first()
        if genre is None:
            return None
        return genre.id

    def get_all_genres(self, sort_opts: Optional[SortOptions] = None) -> List[str]:
        """Get the names of all genres.

        Args:
            sort_opts: Optional mapping of field name to 1 (ascending) or -1 (descending),
                       e.g. {"name": 1}. Without it the order is whatever the store returns.

        Returns:
            List of genre names
        """
        query = self._sorted(self.session.query(Genre), sort_opts)
        return [genre.name for genre in query.all()]

    def create_genre(self, name: str) -> Genre:
        """Create and commit a new genre.

        Raises:
            ValidationError: If the name is outside the allowed length
        """
        genre = Genre(name=name)
        self.session.add(genre)
        self.session.commit()
        logger.debug("Created genre %r with id %s", genre.name, genre.id)
        return genre

    def delete_all_genres(self) -> int:
        """Delete every genre and commit.

        Returns:
            The number of deleted genres
        """
        deleted = self.session.query(Genre).delete(synchronize_session=False)
        self.session.commit()
        return deleted
