"""
Tests for the post endpoints
"""
import pytest

from posts_api.app.schemas.post import PostRead


TEST_POST = {"id": 1, "userId": 1, "title": "Test Post", "body": "Test Content"}


def _add(post_store, post_id, user_id, title="t", body="b"):
    post_store.reset(post_store.list_posts() + [PostRead(id=post_id, user_id=user_id, title=title, body=body)])


class TestGetPost:
    """GET /posts/{id}"""

    def test_existing_post(self, client):
        response = client.get("/posts/1")
        assert response.status_code == 200
        assert response.headers["content-type"] == "application/json"
        assert response.json() == TEST_POST

    def test_missing_post(self, client):
        response = client.get("/posts/999")
        assert response.status_code == 404
        assert response.headers["content-type"].startswith("text/plain")
        assert response.text == "Post not found"

    def test_non_numeric_id_is_post_zero(self, client, post_store):
        assert client.get("/posts/abc").status_code == 404

        _add(post_store, 0, 5, title="Zero")
        response = client.get("/posts/abc")
        assert response.status_code == 200
        assert response.json()["id"] == 0
        assert response.json()["title"] == "Zero"

    def test_returns_current_values_for_every_post(self, client, post_store):
        _add(post_store, 2, 2, title="Second")
        _add(post_store, 3, 1, title="Third")
        for post in post_store.list_posts():
            response = client.get(f"/posts/{post.id}")
            assert response.status_code == 200
            assert response.json() == post.model_dump(by_alias=True)


class TestListPosts:
    """GET /posts"""

    def test_all_posts(self, client):
        response = client.get("/posts")
        assert response.status_code == 200
        assert response.json() == [TEST_POST]

    def test_filter_by_user_keeps_order(self, client, post_store):
        _add(post_store, 2, 2, title="a")
        _add(post_store, 3, 1, title="b")
        _add(post_store, 4, 2, title="c")

        response = client.get("/posts", params={"userId": 2})
        assert response.status_code == 200
        assert [p["id"] for p in response.json()] == [2, 4]

        response = client.get("/posts?userId=1")
        assert [p["id"] for p in response.json()] == [1, 3]

    def test_filter_without_match_is_empty_list(self, client):
        response = client.get("/posts?userId=999")
        assert response.status_code == 200
        assert response.json() == []

    def test_empty_filter_returns_everything(self, client):
        response = client.get("/posts?userId=")
        assert response.status_code == 200
        assert response.json() == [TEST_POST]

    def test_non_numeric_filter_matches_user_zero(self, client, post_store):
        _add(post_store, 2, 0, title="anonymous")
        response = client.get("/posts?userId=nobody")
        assert [p["id"] for p in response.json()] == [2]

    def test_empty_store(self, client, post_store):
        post_store.reset()
        response = client.get("/posts")
        assert response.status_code == 200
        assert response.json() == []


class TestCreatePost:
    """POST /posts"""

    def test_create_post(self, client):
        response = client.post("/posts", json={"title": "New", "body": "Content", "userId": 1})
        assert response.status_code == 201
        expected = {"id": 2, "userId": 1, "title": "New", "body": "Content"}
        assert response.json() == expected

        response = client.get("/posts/2")
        assert response.status_code == 200
        assert response.json() == expected

    def test_appends_to_end(self, client):
        client.post("/posts", json={"title": "New"})
        assert [p["id"] for p in client.get("/posts").json()] == [1, 2]

    def test_body_id_is_ignored(self, client):
        response = client.post("/posts", json={"id": 50, "title": "New"})
        assert response.json()["id"] == 2
        assert client.get("/posts/50").status_code == 404

    def test_missing_fields_default_to_zero_values(self, client):
        response = client.post("/posts", json={"title": "Only title"})
        assert response.status_code == 201
        assert response.json() == {"id": 2, "userId": 0, "title": "Only title", "body": ""}

    def test_empty_body_creates_empty_post(self, client):
        response = client.post("/posts")
        assert response.status_code == 201
        assert response.json() == {"id": 2, "userId": 0, "title": "", "body": ""}

    def test_mistyped_fields_default_to_zero_values(self, client):
        response = client.post("/posts", json={"title": 5, "body": None, "userId": "7"})
        assert response.status_code == 201
        assert response.json() == {"id": 2, "userId": 0, "title": "", "body": ""}

    def test_ids_increase_and_are_never_reused(self, client):
        assert client.post("/posts", json={}).json()["id"] == 2
        assert client.delete("/posts/2").status_code == 204
        assert client.post("/posts", json={}).json()["id"] == 3

    def test_malformed_json_is_rejected(self, client, post_store):
        response = client.post(
            "/posts",
            content=b'{"title": "New",',
            headers={"Content-Type": "application/json"},
        )
        assert response.status_code == 400
        assert response.text == "Invalid JSON body"
        assert post_store.next_id == 2
        assert len(post_store.list_posts()) == 1

    def test_non_object_json_is_rejected(self, client, post_store):
        response = client.post("/posts", json=["title", "New"])
        assert response.status_code == 400
        assert post_store.next_id == 2

    @pytest.mark.parametrize(
        "content_type", ["application/x-www-form-urlencoded", "text/plain", None]
    )
    def test_json_body_is_read_whatever_the_content_type(self, client, content_type):
        headers = {"Content-Type": content_type} if content_type else {}
        response = client.post(
            "/posts",
            content=b'{"title":"New","body":"Content","userId":1}',
            headers=headers,
        )
        assert response.status_code == 201
        assert response.json() == {"id": 2, "userId": 1, "title": "New", "body": "Content"}

    @pytest.mark.parametrize("constant", ["NaN", "Infinity", "-Infinity"])
    def test_non_standard_json_constants_are_rejected(self, client, post_store, constant):
        response = client.post(
            "/posts",
            content=('{"title":"x","userId":%s}' % constant).encode("utf-8"),
            headers={"Content-Type": "application/json"},
        )
        assert response.status_code == 400
        assert response.text == "Invalid JSON body"
        assert post_store.next_id == 2

    def test_user_id_outside_int64_is_zeroed(self, client):
        response = client.post("/posts", json={"title": "Big", "userId": 10 ** 20})
        assert response.status_code == 201
        assert response.json()["userId"] == 0


class TestUpdatePost:
    """PUT /posts/{id}"""

    def test_path_id_wins(self, client):
        response = client.put(
            "/posts/1", json={"id": 999, "title": "Updated", "body": "Updated", "userId": 1}
        )
        assert response.status_code == 200
        assert response.json() == {"id": 1, "userId": 1, "title": "Updated", "body": "Updated"}
        assert client.get("/posts/1").json()["title"] == "Updated"
        assert client.get("/posts/999").status_code == 404

    def test_full_replace_resets_missing_fields(self, client):
        response = client.put("/posts/1", json={"title": "Only title"})
        assert response.json() == {"id": 1, "userId": 0, "title": "Only title", "body": ""}

    def test_keeps_position(self, client, post_store):
        _add(post_store, 2, 2)
        client.put("/posts/1", json={"title": "Updated"})
        assert [p["id"] for p in client.get("/posts").json()] == [1, 2]

    @pytest.mark.parametrize("content", [b'{"title": "Updated",', b'["Updated"]'])
    def test_invalid_body_is_rejected(self, client, content):
        response = client.put("/posts/1", content=content, headers={"Content-Type": "application/json"})
        assert response.status_code == 400
        assert response.text == "Invalid JSON body"
        assert client.get("/posts/1").json() == TEST_POST

    def test_missing_post(self, client, post_store):
        response = client.put(
            "/posts/999", json={"id": 999, "title": "Updated", "body": "Updated", "userId": 1}
        )
        assert response.status_code == 404
        assert response.text == "Post not found"
        assert [p.id for p in post_store.list_posts()] == [1]


class TestPatchPost:
    """PATCH /posts/{id}"""

    def test_patch_title_only(self, client):
        response = client.patch("/posts/1", json={"title": "Patched"})
        assert response.status_code == 200
        assert response.json() == {"id": 1, "userId": 1, "title": "Patched", "body": "Test Content"}
        assert client.get("/posts/1").json()["title"] == "Patched"

    def test_patch_all_fields(self, client):
        response = client.patch("/posts/1", json={"title": "T", "body": "B", "userId": 4})
        assert response.json() == {"id": 1, "userId": 4, "title": "T", "body": "B"}

    def test_mistyped_and_unknown_fields_are_ignored(self, client):
        response = client.patch(
            "/posts/1", json={"title": 5, "body": None, "userId": "7", "id": 42, "extra": True}
        )
        assert response.status_code == 200
        assert response.json() == TEST_POST

    def test_boolean_user_id_is_ignored(self, client):
        response = client.patch("/posts/1", json={"userId": True})
        assert response.json()["userId"] == 1

    def test_fractional_user_id_is_truncated(self, client):
        response = client.patch("/posts/1", json={"userId": 3.9})
        assert response.json()["userId"] == 3

    def test_plain_text_content_type(self, client):
        response = client.patch(
            "/posts/1", content=b'{"title":"Patched"}', headers={"Content-Type": "text/plain"}
        )
        assert response.status_code == 200
        assert response.json()["title"] == "Patched"

    @pytest.mark.parametrize("content", [b'{"title": "Patched"', b'[{"title": "Patched"}]'])
    def test_invalid_body_is_rejected(self, client, content):
        response = client.patch("/posts/1", content=content, headers={"Content-Type": "application/json"})
        assert response.status_code == 400
        assert response.text == "Invalid JSON body"
        assert client.get("/posts/1").json() == TEST_POST

    def test_user_id_outside_int64_is_ignored(self, client):
        response = client.patch("/posts/1", json={"userId": -(2 ** 63) - 1})
        assert response.status_code == 200
        assert response.json()["userId"] == 1

    def test_empty_body_changes_nothing(self, client):
        response = client.patch("/posts/1")
        assert response.status_code == 200
        assert response.json() == TEST_POST

    def test_missing_post(self, client):
        response = client.patch("/posts/999", json={"title": "Patched"})
        assert response.status_code == 404
        assert response.text == "Post not found"


class TestDeletePost:
    """DELETE /posts/{id}"""

    def test_delete_then_get(self, client):
        response = client.delete("/posts/1")
        assert response.status_code == 204
        assert response.content == b""
        assert client.get("/posts/1").status_code == 404

    def test_preserves_order_of_remaining_posts(self, client, post_store):
        _add(post_store, 2, 1)
        _add(post_store, 3, 1)
        client.delete("/posts/2")
        assert [p["id"] for p in client.get("/posts").json()] == [1, 3]

    def test_missing_post_has_no_side_effects(self, client, post_store):
        response = client.delete("/posts/999")
        assert response.status_code == 404
        assert response.text == "Post not found"
        assert [p.id for p in post_store.list_posts()] == [1]
        assert post_store.next_id == 2

    def test_delete_twice(self, client):
        assert client.delete("/posts/1").status_code == 204
        assert client.delete("/posts/1").status_code == 404
