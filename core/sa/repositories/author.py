# core/sa/repositories/author.py
from datetime import date
from typing import Any, Dict, List, Optional
from core.sa.models import Author
from .base import BaseRepository, SortOptions

class AuthorRepository(BaseRepository):
    model = Author

    def count_authors(self, filters: Optional[Dict[str, Any]] = None) -> int:
        """Count authors matching optional field/value equality filters"""
        return self._filtered(filters).count()

    def get_all_authors(self, sort_opts: Optional[SortOptions] = None) -> List[str]:
        """Get every author's full name, optionally sorted, e.g. {"family_name": 1}"""
        query = self._sorted(self.session.query(Author), sort_opts)
        return [author.name for author in query.all()]

    def create_author(
        self,
        first_name: str,
        family_name: str,
        date_of_birth: Optional[date] = None,
        date_of_death: Optional[date] = None
    ) -> Author:
        """Create and commit a new author"""
        author = Author(
            first_name=first_name,
            family_name=family_name,
            date_of_birth=date_of_birth,
            date_of_death=date_of_death
        )
        self.session.add(author)
        self.session.commit()
        return author
