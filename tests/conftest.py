# tests/conftest.py
import sys
from datetime import date
from pathlib import Path
import pytest

# Add project root to Python path
project_root = str(Path(__file__).parent.parent)
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from fastapi.testclient import TestClient
from core.config import Settings
from core.sa.database import Database
from core.sa.models import Author, Base, Genre
from api.main import create_app

@pytest.fixture
def database_url(tmp_path):
    """URL of a fresh SQLite database file for a single test."""
    return f"sqlite:///{tmp_path / 'test_library.db'}"

@pytest.fixture
def database(database_url):
    """Create a test database instance with an empty schema"""
    db = Database(database_url)
    db.init_db()
    yield db
    db.dispose()

@pytest.fixture
def db_session(database):
    """Create a new database session for a test"""
    session = database.get_session()
    try:
        yield session
    finally:
        session.close()

@pytest.fixture
def sample_genres(db_session):
    """Insert three genres, deliberately out of alphabetical order."""
    names = ["Mystery", "Fiction", "Fantasy"]
    for name in names:
        db_session.add(Genre(name=name))
    db_session.commit()
    return names

@pytest.fixture
def sample_authors(db_session):
    """Insert three authors, deliberately out of family-name order."""
    authors = [
        Author(first_name="J.R.R.", family_name="Tolkien", date_of_birth=date(1892, 1, 3), date_of_death=date(1973, 9, 2)),
        Author(first_name="Jane", family_name="Austen", date_of_birth=date(1775, 12, 16)),
        Author(first_name="Isaac", family_name="Asimov"),
    ]
    db_session.add_all(authors)
    db_session.commit()
    return authors

@pytest.fixture
def client(database):
    """TestClient for an app bound to the test database."""
    settings = Settings(
        database_url=database.connection_string,
        log_level="DEBUG",
        cors_origins=["http://localhost:5173"]
    )
    app = create_app(database, settings)
    with TestClient(app) as test_client:
        yield test_client

@pytest.fixture
def broken_store(database, client):
    """Drop every table after the app has started, so each query fails."""
    Base.metadata.drop_all(database.engine)
    return database
