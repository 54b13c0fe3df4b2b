# tests/test_sa/test_repositories/test_author_repository.py
import pytest
from datetime import date
from core.exceptions import ValidationError
from core.sa.repositories.author import AuthorRepository
from core.sa.models import Author

@pytest.fixture
def author_repo(db_session):
    """Fixture to create an AuthorRepository instance"""
    return AuthorRepository(db_session)

def test_get_all_authors_by_family_name(author_repo, sample_authors):
    assert author_repo.get_all_authors({"family_name": 1}) == [
        "Asimov, Isaac",
        "Austen, Jane",
        "Tolkien, J.R.R.",
    ]

def test_get_all_authors_descending(author_repo, sample_authors):
    names = author_repo.get_all_authors({"family_name": -1})
    assert names[0] == "Tolkien, J.R.R."

def test_get_all_authors_unsorted(author_repo, sample_authors):
    assert sorted(author_repo.get_all_authors()) == sorted(a.name for a in sample_authors)

def test_get_all_authors_empty(author_repo):
    assert author_repo.get_all_authors({"family_name": 1}) == []

def test_count_authors(author_repo, sample_authors):
    assert author_repo.count_authors() == 3
    assert author_repo.count_authors({"family_name": "Austen"}) == 1

def test_create_author(author_repo, db_session):
    author = author_repo.create_author("Ursula", "Le Guin", date_of_birth=date(1929, 10, 21))
    stored = db_session.get(Author, author.id)
    assert stored.name == "Le Guin, Ursula"
    assert stored.date_of_birth == date(1929, 10, 21)
    assert stored.date_of_death is None

def test_create_author_requires_names(author_repo):
    with pytest.raises(ValidationError):
        author_repo.create_author("", "Nobody")
    assert author_repo.count_authors() == 0
