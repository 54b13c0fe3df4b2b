# core/sa/repositories/__init__.py
from .author import AuthorRepository
from .genre import GenreRepository

__all__ = ['AuthorRepository', 'GenreRepository']
