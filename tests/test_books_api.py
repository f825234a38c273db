from fastapi.testclient import TestClient

from book_store_api.app.main import create_app
from book_store_api.app.services.book_service import BookStore


def test_list_books(client):
    response = client.get("/books")
    assert response.status_code == 200
    body = response.json()
    assert body["total"] == 2
    assert body["page"] == 1
    assert body["limit"] == 2
    assert [b["title"] for b in body["data"]] == ["1984", "The Alchemist"]
    first = body["data"][0]
    assert set(first) == {"id", "title", "author", "createdAt", "isFavorite", "status"}


def test_list_filters(client):
    client.post("/books", json={"title": "Dune", "author": "Herbert", "isFavorite": True})
    body = client.get("/books", params={"favorite": "true"}).json()
    assert body["total"] == 2
    assert all(b["isFavorite"] for b in body["data"])

    body = client.get("/books", params={"favorite": "true", "status": "completed"}).json()
    assert body["total"] == 1
    assert body["data"][0]["title"] == "The Alchemist"


def test_list_sort_and_paginate(client):
    client.post("/books", json={"title": "Animal Farm", "author": "George Orwell"})
    body = client.get("/books", params={"sortBy": "title"}).json()
    assert [b["title"] for b in body["data"]] == ["1984", "Animal Farm", "The Alchemist"]

    body = client.get("/books", params={"sortBy": "title", "page": "2", "limit": "1"}).json()
    assert body["total"] == 3
    assert body["page"] == 2
    assert body["limit"] == 1
    assert [b["title"] for b in body["data"]] == ["Animal Farm"]


def test_list_second_page_of_two(client):
    body = client.get("/books?page=2&limit=1").json()
    assert body["total"] == 2
    assert [b["id"] for b in body["data"]] == [2]


def test_list_lenient_numbers(client):
    body = client.get("/books?page=abc&limit=-4").json()
    assert body["page"] == 1
    assert body["limit"] == 2
    assert len(body["data"]) == 2


def test_get_book(client):
    response = client.get("/books/1")
    assert response.status_code == 200
    assert response.json()["author"] == "George Orwell"


def test_get_missing_book(client):
    response = client.get("/books/99")
    assert response.status_code == 404
    assert response.json() == {"error": "Book not found."}
    assert client.get("/books/not-a-number").status_code == 404


def test_search(client):
    response = client.get("/books/search", params={"query": "orwell"})
    assert response.status_code == 200
    assert [b["title"] for b in response.json()] == ["1984"]


def test_search_without_query(client):
    response = client.get("/books/search")
    assert response.status_code == 400
    assert response.json() == {"error": "Query required."}
    assert client.get("/books/search?query=").status_code == 400


def test_recommend(client):
    response = client.get("/books/recommend")
    assert response.status_code == 200
    assert response.json()["id"] in (1, 2)


def test_recommend_empty():
    client = TestClient(create_app(store=BookStore(seed=False)))
    response = client.get("/books/recommend")
    assert response.status_code == 404
    assert response.json() == {"error": "No books available."}


def test_stats(client):
    response = client.get("/books/stats")
    assert response.status_code == 200
    assert response.json() == {"total": 2, "favorites": 1, "completed": 1, "reading": 0, "unread": 1}


def test_create_book(client):
    response = client.post("/books", json={"title": "Dune", "author": "Herbert"})
    assert response.status_code == 201
    book = response.json()
    assert book["id"] == 3
    assert book["status"] == "unread"
    assert book["isFavorite"] is False
    assert book["createdAt"]
    assert client.get("/books/3").json()["title"] == "Dune"


def test_create_book_missing_fields(client):
    response = client.post("/books", json={"title": "Dune"})
    assert response.status_code == 400
    assert response.json() == {"error": "Title and author required."}
    assert client.post("/books").status_code == 400
    assert client.get("/books").json()["total"] == 2


def test_create_book_ignores_non_boolean_favorite(client):
    book = client.post("/books", json={"title": "Dune", "author": "Herbert", "isFavorite": "yes"}).json()
    assert book["isFavorite"] is False


def test_malformed_body_is_bad_request(client):
    response = client.post(
        "/books",
        content="{not json",
        headers={"Content-Type": "application/json"},
    )
    assert response.status_code == 400
    assert "error" in response.json()

    response = client.post("/books", json={"title": 42, "author": "Herbert"})
    assert response.status_code == 400
    assert "title" in response.json()["error"]


def test_update_book_partial(client):
    response = client.put("/books/1", json={"title": "Nineteen Eighty-Four", "isFavorite": True})
    assert response.status_code == 200
    book = response.json()
    assert book["title"] == "Nineteen Eighty-Four"
    assert book["author"] == "George Orwell"
    assert book["isFavorite"] is True
    assert book["status"] == "unread"


def test_update_book_favorite_must_be_boolean(client):
    book = client.put("/books/2", json={"isFavorite": "false"}).json()
    assert book["isFavorite"] is True


def test_update_missing_book(client):
    response = client.put("/books/42", json={"title": "x"})
    assert response.status_code == 404
    assert response.json() == {"error": "Book not found."}


def test_toggle_favorite(client):
    response = client.patch("/books/1/favorite")
    assert response.status_code == 200
    body = response.json()
    assert body["message"] == "Favorite status toggled."
    assert body["book"]["isFavorite"] is True
    assert client.patch("/books/1/favorite").json()["book"]["isFavorite"] is False
    assert client.patch("/books/9/favorite").status_code == 404


def test_update_status(client):
    response = client.patch("/books/1/status", json={"status": "reading"})
    assert response.status_code == 200
    assert response.json() == {
        "message": "Status updated.",
        "book": client.get("/books/1").json(),
    }
    assert response.json()["book"]["status"] == "reading"


def test_update_status_invalid(client):
    expected = {"error": "Status must be one of: unread, reading, completed"}
    response = client.patch("/books/1/status", json={"status": "archived"})
    assert response.status_code == 400
    assert response.json() == expected

    # Validation wins over the missing id.
    response = client.patch("/books/999/status", json={"status": "archived"})
    assert response.status_code == 400
    assert response.json() == expected

    assert client.patch("/books/1/status").status_code == 400


def test_update_status_missing_book(client):
    response = client.patch("/books/999/status", json={"status": "completed"})
    assert response.status_code == 404


def test_delete_book(client):
    response = client.delete("/books/1")
    assert response.status_code == 200
    assert response.json()["title"] == "1984"
    assert client.get("/books/1").status_code == 404
    assert client.delete("/books/1").status_code == 404


def test_reset(client):
    response = client.delete("/books/reset")
    assert response.status_code == 200
    assert response.json() == {"message": "Book list cleared."}
    assert client.get("/books").json() == {"total": 0, "page": 1, "limit": 0, "data": []}
    assert client.get("/books/recommend").status_code == 404


def test_apps_do_not_share_state(client):
    client.delete("/books/reset")
    other = TestClient(create_app())
    assert other.get("/books").json()["total"] == 2


def test_oversized_numbers_fall_back(client):
    body = client.get("/books", params={"page": "9" * 5000, "limit": "9" * 5000}).json()
    assert body["page"] == 1
    assert body["limit"] == 2
    assert len(body["data"]) == 2

    response = client.get("/books/" + "1" * 5000)
    assert response.status_code == 404
    assert response.json() == {"error": "Book not found."}


def test_non_ascii_digits_are_not_ids(client):
    assert client.get("/books/١").status_code == 404
    body = client.get("/books", params={"page": "٢", "limit": "1"}).json()
    assert body["page"] == 1
    assert [b["id"] for b in body["data"]] == [1]


def test_create_book_null_status_uses_default(client):
    book = client.post("/books", json={"title": "Dune", "author": "Herbert", "status": None}).json()
    assert book["status"] == "unread"


def test_sort_puts_punctuation_before_digits_and_letters(client):
    client.delete("/books/reset")
    for title in ("1984", "_under", "Apple", "~Tilde"):
        client.post("/books", json={"title": title, "author": "Someone"})
    body = client.get("/books", params={"sortBy": "title"}).json()
    assert [b["title"] for b in body["data"]] == ["_under", "~Tilde", "1984", "Apple"]
