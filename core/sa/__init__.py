# core/sa/__init__.py
from .database import Database
from .models import Base, Author, Genre

__all__ = [
    'Database',
    'Base',
    'Author',
    'Genre',
]
