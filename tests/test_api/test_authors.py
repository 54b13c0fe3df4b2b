# tests/test_api/test_authors.py

def test_get_authors_sorted(client, sample_authors):
    response = client.get("/authors")
    assert response.status_code == 200
    assert response.json() == ["Asimov, Isaac", "Austen, Jane", "Tolkien, J.R.R."]

def test_get_authors_empty(client):
    response = client.get("/authors")
    assert response.status_code == 200
    assert response.text == "No authors found"

def test_get_authors_store_failure(client, broken_store):
    response = client.get("/authors")
    assert response.status_code == 500
    assert response.text == "Error retrieving authors"
