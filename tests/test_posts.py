# File: tests/test_posts.py

from sqlalchemy import text


def test_list_posts_empty(client):
    resp = client.get("/api/posts")
    assert resp.status_code == 200
    assert resp.json() == []


def test_create_post(client, register):
    author_id = register(email="dora@example.com")

    resp = client.post("/api/posts", json={"content": "Anyone up for a hike?", "authorId": author_id})
    assert resp.status_code == 201
    post = resp.json()
    assert post["content"] == "Anyone up for a hike?"
    assert post["authorId"] == author_id
    assert post["likeCount"] == 0
    assert "createdAt" in post
    assert post["author"]["id"] == author_id


def test_create_post_without_author_is_bad_request(client):
    resp = client.post("/api/posts", json={"content": "orphan"})
    assert resp.status_code == 400
    assert resp.json() == {"error": "Content and authorId are required."}


def test_create_post_without_content_is_bad_request(client, register):
    author_id = register()
    resp = client.post("/api/posts", json={"content": "   ", "authorId": author_id})
    assert resp.status_code == 400


def test_create_post_for_unknown_author(client):
    resp = client.post("/api/posts", json={"content": "hello", "authorId": 999})
    assert resp.status_code == 404


def test_posts_listed_newest_first(client, register):
    author_id = register()
    for content in ("first", "second", "third"):
        assert client.post("/api/posts", json={"content": content, "authorId": author_id}).status_code == 201

    resp = client.get("/api/posts")
    assert resp.status_code == 200
    assert [p["content"] for p in resp.json()] == ["third", "second", "first"]


def test_author_projection_derives_name_and_avatar(client, register):
    author_id = register(email="erik.nagy@example.com")
    client.post("/api/posts", json={"content": "hi", "authorId": author_id})

    author = client.get("/api/posts").json()[0]["author"]
    assert author == {
        "id": author_id,
        "name": "erik.nagy",
        "avatarUrl": f"https://i.pravatar.cc/150?u={author_id}",
    }
    assert "email" not in author


def test_author_projection_prefers_profile_fields(client, register):
    author_id = register(email="fanni@example.com")
    client.put(
        f"/api/users/{author_id}",
        json={"name": "Fanni", "avatarUrl": "https://cdn.example.com/fanni.png"},
    )
    client.post("/api/posts", json={"content": "hi", "authorId": author_id})

    author = client.get("/api/posts").json()[0]["author"]
    assert author["name"] == "Fanni"
    assert author["avatarUrl"] == "https://cdn.example.com/fanni.png"


def test_database_error_does_not_leak_details(client, database):
    with database.engine.begin() as conn:
        conn.execute(text("DROP TABLE posts"))

    resp = client.get("/api/posts")
    assert resp.status_code == 500
    assert resp.json() == {"error": "Internal server error."}
