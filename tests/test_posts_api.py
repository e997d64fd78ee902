"""
Tests for the post endpoints.
"""
import pytest

from blog_api.app.schemas import Post

from conftest import make_post


def test_create_post(client, post_repository):
    payload = {"Id": 256, "Title": "title", "Content": "cntnt", "CreationDate": "2024-01-01T00:00:00Z"}

    resp = client.post("/api/posts", json=payload)

    assert resp.status_code == 200
    assert resp.headers["content-type"] == "application/json"
    assert resp.json() == {"Message": "Post with id: 256 successfully added", "Status": 200}
    assert post_repository.get_by_id(256).value.title == "title"


def test_create_duplicate_post_is_server_error(client, post_repository):
    post_repository.insert(make_post(9))

    resp = client.post("/api/posts", json={"Id": 9, "Title": "again", "CreationDate": "2024-01-01T00:00:00Z"})

    assert resp.status_code == 500
    assert resp.headers["content-type"].startswith("text/plain")
    assert resp.text == "Post with id: 9 already exists"
    assert len(post_repository) == 1


@pytest.mark.parametrize(
    "body",
    [
        b"",
        b"not json",
        b"[]",
        b'{"Id": "12"}',
        b'{"Id": -1}',
        b'{"Id": 1.5}',
        b'{"Id": 1, "CreationDate": "2024-01-01T00:00:00"}',
        b'{"Id": 18446744073709551616}',
    ],
)
def test_create_post_malformed_body(client, post_repository, body):
    resp = client.post("/api/posts", content=body, headers={"Content-Type": "application/json"})

    assert resp.status_code == 400
    assert resp.text == "400 Bad Request"
    assert len(post_repository) == 0


def test_create_post_with_missing_fields_uses_unset_values(client):
    resp = client.post("/api/posts", json={"Id": 3, "unknown": "ignored"})
    assert resp.status_code == 200

    fetched = client.get("/api/posts/3").json()
    assert fetched == {"Id": 3, "Title": "", "Content": "", "CreationDate": "0001-01-01T00:00:00Z"}


def test_get_post(post_repository, client):
    post_repository.insert(make_post(34, title="test title", content="this is a post content"))

    resp = client.get("/api/posts/34")

    assert resp.status_code == 200
    assert resp.headers["content-type"] == "application/json"
    assert resp.json() == {
        "Id": 34,
        "Title": "test title",
        "Content": "this is a post content",
        "CreationDate": "2018-09-16T12:00:00Z",
    }


def test_get_post_round_trips(post_repository, client):
    post = make_post(2)
    post_repository.insert(post)

    resp = client.get("/api/posts/2")

    assert Post.model_validate_json(resp.content) == post


@pytest.mark.parametrize("raw_id", ["abc", "-1", "12abc", "18446744073709551616"])
def test_get_post_with_invalid_id(client, raw_id):
    resp = client.get(f"/api/posts/{raw_id}")

    assert resp.status_code == 400
    assert resp.headers["content-type"] == "application/json"
    assert resp.json() == {"Message": f"Wrong id path variable: /api/posts/{raw_id}", "Status": 400}


def test_get_missing_post(client):
    resp = client.get("/api/posts/404")

    assert resp.status_code == 404
    assert resp.headers["content-type"] == "application/json"
    assert resp.json() == {"Message": "Post with id: 404 does not exist", "Status": 404}


def test_get_post_with_largest_id(client, post_repository):
    post_repository.insert(make_post(2**64 - 1))

    resp = client.get(f"/api/posts/{2**64 - 1}")

    assert resp.status_code == 200
    assert resp.json()["Id"] == 2**64 - 1
