# core/sa/models/base.py
from datetime import datetime, UTC
from typing import Optional
from sqlalchemy.orm import DeclarativeBase, mapped_column, Mapped
from sqlalchemy import DateTime

from core.exceptions import ValidationError

class Base(DeclarativeBase):
    """Base class for all models"""
    pass

class TimestampMixin:
    """Mixin to add created_at and updated_at columns"""
    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=lambda: datetime.now(UTC))
    updated_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=lambda: datetime.now(UTC), onupdate=lambda: datetime.now(UTC))

def check_length(field: str, value: Optional[str], min_length: int, max_length: int) -> str:
    """Check a required text field against its length bounds.

    Args:
        field: Name of the field, used in the error
        value: The value being written
        min_length: Minimum number of characters (inclusive)
        max_length: Maximum number of characters (inclusive)

    Returns:
        The value unchanged

    Raises:
        ValidationError: If the value is missing, not text, or out of bounds
    """
    if value is None:
        raise ValidationError(field, "is required")
    if not isinstance(value, str):
        raise ValidationError(field, "must be a string")
    if len(value) < min_length:
        raise ValidationError(field, f"must be at least {min_length} characters")
    if len(value) > max_length:
        raise ValidationError(field, f"must be at most {max_length} characters")
    return value
