# core/sa/models/genre.py
from sqlalchemy import Integer, String, Index
from sqlalchemy.orm import Mapped, mapped_column, validates
from .base import Base, TimestampMixin, check_length

NAME_MIN_LENGTH = 4
NAME_MAX_LENGTH = 100

class Genre(Base, TimestampMixin):
    __tablename__ = 'genre'

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    # Not unique: two genres may share a name
    name: Mapped[str] = mapped_column(String(NAME_MAX_LENGTH), nullable=False)

    __table_args__ = (
        # Search index
        Index('idx_genre_name', 'name'),
    )

    @validates('name')
    def validate_name(self, key: str, value: str) -> str:
        return check_length(key, value, NAME_MIN_LENGTH, NAME_MAX_LENGTH)

    def __repr__(self) -> str:
        return f"<Genre id={self.id} name={self.name!r}>"
