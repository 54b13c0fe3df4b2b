# core/sa/repositories/base.py
from typing import Any, Dict, Optional, Type
from sqlalchemy.orm import Query, Session

from core.sa.models import Base

SortOptions = Dict[str, int]

class BaseRepository:
    """Shared filter and sort handling for single-model repositories."""

    model: Type[Base]

    def __init__(self, session: Session):
        """Initialize the repository with a database session.

        Args:
            session: SQLAlchemy session for database operations
        """
        self.session = session

    def _column(self, field: str):
        columns = self.model.__table__.columns
        if field not in columns:
            raise ValueError(f"Unknown {self.model.__tablename__} field '{field}'")
        return columns[field]

    def _filtered(self, filters: Optional[Dict[str, Any]] = None) -> Query:
        """Build a query matching every field/value pair in filters by equality"""
        query = self.session.query(self.model)
        for field, value in (filters or {}).items():
            query = query.filter(self._column(field) == value)
        return query

    def _sorted(self, query: Query, sort_opts: Optional[SortOptions] = None) -> Query:
        """Apply a {field: 1 | -1} sort mapping, in key order

        Raises:
            ValueError: For an unknown field or a direction other than 1 or -1
        """
        for field, direction in (sort_opts or {}).items():
            column = self._column(field)
            if direction == 1:
                query = query.order_by(column.asc())
            elif direction == -1:
                query = query.order_by(column.desc())
            else:
                raise ValueError(f"Sort direction for '{field}' must be 1 or -1, got {direction!r}")
        return query
