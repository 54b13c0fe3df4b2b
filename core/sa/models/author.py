# core/sa/models/author.py
from datetime import date
from sqlalchemy import Date, Integer, String, Index
from sqlalchemy.orm import Mapped, mapped_column, validates
from .base import Base, TimestampMixin, check_length

NAME_MAX_LENGTH = 100

class Author(Base, TimestampMixin):
    __tablename__ = 'author'

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    first_name: Mapped[str] = mapped_column(String(NAME_MAX_LENGTH), nullable=False)
    family_name: Mapped[str] = mapped_column(String(NAME_MAX_LENGTH), nullable=False)
    date_of_birth: Mapped[date | None] = mapped_column(Date, nullable=True)
    date_of_death: Mapped[date | None] = mapped_column(Date, nullable=True)

    __table_args__ = (
        Index('idx_author_family_name', 'family_name'),
    )

    @validates('first_name', 'family_name')
    def validate_name_part(self, key: str, value: str) -> str:
        return check_length(key, value, 1, NAME_MAX_LENGTH)

    @property
    def name(self) -> str:
        """Full name as "family_name, first_name", or "" if either part is missing"""
        if not self.first_name or not self.family_name:
            return ""
        return f"{self.family_name}, {self.first_name}"

    def __repr__(self) -> str:
        return f"<Author id={self.id} name={self.name!r}>"
