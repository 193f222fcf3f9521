"""HTTP level tests for the movie endpoints."""

import pytest

from movies_crud_api.app.main import create_app
from movies_crud_api.app.services.movie_service import MovieStore

SEED = [
    {
        "id": "1",
        "isbn": "12345678",
        "title": "Movie One",
        "director": {"firstname": "John", "lastname": "Doe"},
    },
    {
        "id": "2",
        "isbn": "87654321",
        "title": "Movie Two",
        "director": {"firstname": "Jane", "lastname": "Doe"},
    },
]

NOT_FOUND = "No movie found with the given ID"


def test_list_returns_seed_records_in_order(client):
    response = client.get("/movies")
    assert response.status_code == 200
    assert response.headers["content-type"] == "application/json"
    assert response.json() == SEED


def test_get_movie(client):
    response = client.get("/movie/1")
    assert response.status_code == 200
    assert response.headers["content-type"] == "application/json"
    assert response.json() == SEED[0]


@pytest.mark.parametrize("movie_id", ["999", "0", "abc", "1 "])
def test_get_unknown_movie_is_plain_text_404(client, movie_id):
    response = client.get(f"/movie/{movie_id}")
    assert response.status_code == 404
    assert response.headers["content-type"].startswith("text/plain")
    assert response.text == NOT_FOUND


def test_delete_then_list(client):
    response = client.delete("/movie/1")
    assert response.status_code == 200
    assert response.headers["content-type"] == "application/json"
    assert response.json() == [SEED[1]]
    assert client.get("/movies").json() == [SEED[1]]
    assert client.get("/movie/1").status_code == 404


def test_delete_unknown_id_returns_unchanged_sequence(client):
    response = client.delete("/movie/999")
    assert response.status_code == 200
    assert response.json() == SEED
    assert client.get("/movies").json() == SEED


def test_create_then_list(client):
    movie = {
        "id": "3",
        "isbn": "11223344",
        "title": "Movie Three",
        "director": {"firstname": "Jim", "lastname": "Roe"},
    }
    response = client.post("/movies", json=movie)
    assert response.status_code == 200
    assert response.headers["content-type"] == "application/json"
    assert response.json() == movie
    assert client.get("/movies").json() == SEED + [movie]
    assert client.get("/movie/3").json() == movie


def test_create_without_id_assigns_one(client):
    response = client.post("/movies", json={"isbn": "1", "title": "Anonymous"})
    assert response.status_code == 200
    body = response.json()
    assert body["id"].isdigit()
    assert body["director"] is None
    assert client.get(f"/movie/{body['id']}").json() == body


def test_create_duplicate_id_conflicts(client):
    response = client.post("/movies", json={"id": "1", "title": "Impostor"})
    assert response.status_code == 409
    assert response.headers["content-type"].startswith("text/plain")
    assert response.text == "A movie with the given ID already exists"
    assert client.get("/movies").json() == SEED


def test_create_with_malformed_body_is_rejected(client):
    response = client.post(
        "/movies", content=b"{not json", headers={"Content-Type": "application/json"}
    )
    assert response.status_code == 422
    assert client.get("/movies").json() == SEED


def test_update_then_get(client):
    body = {
        "id": "something-else",
        "isbn": "99999999",
        "title": "Movie Two (Extended)",
        "director": {"firstname": "Janet", "lastname": "Doe"},
    }
    response = client.put("/movie/2", json=body)
    assert response.status_code == 200
    assert response.headers["content-type"] == "application/json"
    expected = dict(body, id="2")
    assert response.json() == expected
    assert client.get("/movie/2").json() == expected
    assert [m["id"] for m in client.get("/movies").json()] == ["1", "2"]


def test_update_can_clear_director(client):
    response = client.put("/movie/1", json={"isbn": "12345678", "title": "Movie One", "director": None})
    assert response.status_code == 200
    assert client.get("/movie/1").json()["director"] is None


def test_update_unknown_movie_is_404(client):
    response = client.put("/movie/999", json={"title": "Nope"})
    assert response.status_code == 404
    assert response.text == NOT_FOUND
    assert client.get("/movies").json() == SEED


def test_apps_do_not_share_state():
    first = create_app(MovieStore())
    second = create_app(MovieStore())
    first.state.movie_store.seed_demo_data()
    assert len(first.state.movie_store) == 2
    assert len(second.state.movie_store) == 0


def test_module_level_app_is_seeded():
    from movies_crud_api.app.main import app

    assert [m.id for m in app.state.movie_store.list()] == ["1", "2"]


@pytest.mark.parametrize("path", ["/movies/", "/movie/1/"])
def test_trailing_slash_is_not_redirected(client, path):
    response = client.get(path, follow_redirects=False)
    assert response.status_code == 404


def test_movie_schema_has_no_orm_mode():
    from movies_crud_api.app.schemas.movie import Movie

    assert "from_attributes" not in Movie.model_config


def test_schema_examples_use_examples_field():
    from movies_crud_api.app.schemas.movie import Director, Movie, MovieCreate, MovieUpdate

    for model in (Director, Movie, MovieCreate, MovieUpdate):
        for name, field in model.model_fields.items():
            assert field.json_schema_extra is None, f"{model.__name__}.{name}"
    assert Movie.model_fields["id"].examples == ["1"]
