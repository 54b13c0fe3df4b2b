# tests/test_api/test_genres.py
from sqlalchemy.exc import OperationalError
from core.sa.models import Genre
from core.sa.repositories.genre import GenreRepository

def test_root(client):
    response = client.get("/")
    assert response.status_code == 200
    assert "message" in response.json()

def test_get_genres_sorted(client, db_session):
    """Genres come back as a JSON array sorted by name"""
    db_session.add_all([Genre(name="Mystery"), Genre(name="Fiction")])
    db_session.commit()

    response = client.get("/genres")
    assert response.status_code == 200
    assert response.json() == ["Fiction", "Mystery"]

def test_get_genres_keeps_duplicates(client, db_session):
    db_session.add_all([Genre(name="Fiction"), Genre(name="Fiction")])
    db_session.commit()

    assert client.get("/genres").json() == ["Fiction", "Fiction"]

def test_get_genres_empty(client):
    response = client.get("/genres")
    assert response.status_code == 200
    assert response.text == "No genres found"
    assert response.headers["content-type"].startswith("text/plain")

def test_get_genres_store_failure(client, broken_store):
    """A store failure is reported as a 500, not as an empty catalog"""
    response = client.get("/genres")
    assert response.status_code == 500
    assert response.text == "Error retrieving genres"

def test_get_genres_unexpected_store_error(client, monkeypatch):
    def fail(*args, **kwargs):
        raise OperationalError("SELECT name FROM genre", {}, Exception("database is locked"))

    monkeypatch.setattr(GenreRepository, "get_all_genres", fail)
    response = client.get("/genres")
    assert response.status_code == 500

def test_get_genre_count(client, sample_genres):
    response = client.get("/genres/count")
    assert response.status_code == 200
    assert response.json() == {"count": len(sample_genres)}

def test_get_genre_count_empty(client):
    assert client.get("/genres/count").json() == {"count": 0}

def test_get_genre_count_store_failure(client, broken_store):
    response = client.get("/genres/count")
    assert response.status_code == 500
    assert response.text == "Error retrieving genre count"

def test_get_genre_count_non_database_error(client, monkeypatch):
    """Errors outside SQLAlchemy still get the route's plain-text 500"""
    def fail(*args, **kwargs):
        raise RuntimeError("driver returned garbage")

    monkeypatch.setattr(GenreRepository, "count_genres", fail)
    response = client.get("/genres/count")
    assert response.status_code == 500
    assert response.text == "Error retrieving genre count"
