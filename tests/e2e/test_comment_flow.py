"""End-to-end tests for the comment endpoints.

Each test gets its own app and in-memory store, so data created in one
request is visible to the following requests of the same test only.
"""

from uuid import uuid4

from tests.harness import create_client_fixture

client = create_client_fixture()


def _register(client, username: str) -> dict[str, str]:
    response = client.post(
        "/auth/register",
        json={
            "username": username,
            "email": f"{username}@example.com",
            "password": "password123",
        },
    )
    assert response.status_code == 201, response.text
    return {"Authorization": f"Bearer {response.json()['token']}"}


def _journal(client, headers) -> str:
    response = client.post(
        "/journals", json={"title": "Day one", "content": "Dear diary"}, headers=headers
    )
    assert response.status_code == 201, response.text
    return response.json()["id"]


def _comment(client, headers, journal_id, content, parent_id=None):
    body = {"content": content}
    if parent_id:
        body["parentCommentId"] = parent_id
    return client.post(f"/journals/{journal_id}/comments", json=body, headers=headers)


class TestCommentThreadFlow:
    """Comment, reply, list, edit and delete through the HTTP API."""

    def test_full_thread_lifecycle(self, client):
        # Arrange
        alice = _register(client, "alice")
        bob = _register(client, "bob")
        journal_id = _journal(client, alice)

        # Act - bob comments, alice replies
        created = _comment(client, bob, journal_id, "  Great entry  ")
        assert created.status_code == 201
        assert created.json()["message"] == "Comment created successfully"
        top = created.json()["comment"]
        assert top["content"] == "Great entry"
        assert top["parentCommentId"] is None
        assert top["isEdited"] is False
        assert top["author"]["username"] == "bob"

        reply = _comment(client, alice, journal_id, "Thanks!", parent_id=top["id"])
        assert reply.status_code == 201
        reply_id = reply.json()["comment"]["id"]

        # Replies to replies are refused
        nested = _comment(client, bob, journal_id, "Deeper", parent_id=reply_id)
        assert nested.status_code == 400

        # Listing shows one thread with one reply
        listing = client.get(f"/journals/{journal_id}/comments")
        assert listing.status_code == 200
        body = listing.json()
        assert [c["id"] for c in body["comments"]] == [top["id"]]
        assert [r["id"] for r in body["comments"][0]["replies"]] == [reply_id]
        assert body["comments"][0]["replies"][0]["author"]["username"] == "alice"
        assert body["pagination"] == {
            "currentPage": 1,
            "totalPages": 1,
            "totalComments": 1,
            "hasNext": False,
            "hasPrev": False,
        }

        # Bob edits his comment
        edited = client.put(
            f"/comments/{top['id']}", json={"content": "Great entry!"}, headers=bob
        )
        assert edited.status_code == 200
        assert edited.json()["message"] == "Comment updated successfully"
        assert edited.json()["comment"]["isEdited"] is True
        assert edited.json()["comment"]["editedAt"] is not None

        # Bob deletes it and the reply goes with it
        deleted = client.delete(f"/comments/{top['id']}", headers=bob)
        assert deleted.status_code == 200
        assert deleted.json()["repliesDeleted"] == 1
        assert deleted.json()["cascadeComplete"] is True

        # Assert
        assert client.get(f"/comments/{top['id']}").status_code == 404
        assert client.get(f"/comments/{reply_id}").status_code == 404
        assert client.get(f"/journals/{journal_id}/comments").json()["comments"] == []

    def test_get_single_comment_with_replies(self, client):
        alice = _register(client, "alice")
        journal_id = _journal(client, alice)
        top = _comment(client, alice, journal_id, "Top").json()["comment"]
        _comment(client, alice, journal_id, "Reply", parent_id=top["id"])

        response = client.get(f"/comments/{top['id']}")

        assert response.status_code == 200
        comment = response.json()["comment"]
        assert comment["journal"]["title"] == "Day one"
        assert [r["content"] for r in comment["replies"]] == ["Reply"]

    def test_listing_is_public_and_paginated(self, client):
        alice = _register(client, "alice")
        journal_id = _journal(client, alice)
        for i in range(3):
            _comment(client, alice, journal_id, f"Comment {i}")

        response = client.get(
            f"/journals/{journal_id}/comments", params={"page": "2", "limit": "2"}
        )

        assert response.status_code == 200
        body = response.json()
        assert len(body["comments"]) == 1
        assert body["pagination"]["totalPages"] == 2
        assert body["pagination"]["hasPrev"] is True
        assert body["pagination"]["hasNext"] is False

    def test_garbage_paging_is_ignored(self, client):
        alice = _register(client, "alice")
        journal_id = _journal(client, alice)
        _comment(client, alice, journal_id, "Only one")

        response = client.get(
            f"/journals/{journal_id}/comments", params={"page": "x", "limit": "0"}
        )

        assert response.status_code == 200
        assert response.json()["pagination"]["currentPage"] == 1
        assert len(response.json()["comments"]) == 1


class TestCommentErrors:
    """Status codes and messages for failing comment requests."""

    def test_create_requires_token(self, client):
        alice = _register(client, "alice")
        journal_id = _journal(client, alice)

        response = _comment(client, {}, journal_id, "Anonymous")

        assert response.status_code == 401
        assert response.json() == {"message": "Not authorized, no token"}

    def test_create_with_bad_token(self, client):
        alice = _register(client, "alice")
        journal_id = _journal(client, alice)

        response = _comment(
            client, {"Authorization": "Bearer nonsense"}, journal_id, "Hi"
        )

        assert response.status_code == 401
        assert response.json() == {"message": "Not authorized, token failed"}

    def test_blank_content(self, client):
        alice = _register(client, "alice")
        journal_id = _journal(client, alice)

        response = _comment(client, alice, journal_id, "   ")

        assert response.status_code == 400
        assert response.json() == {"message": "Comment content is required"}

    def test_unknown_journal(self, client):
        alice = _register(client, "alice")

        response = _comment(client, alice, str(uuid4()), "Hello")

        assert response.status_code == 404
        assert response.json() == {"message": "Journal not found"}

    def test_malformed_journal_id(self, client):
        alice = _register(client, "alice")

        response = _comment(client, alice, "not-a-uuid", "Hello")

        assert response.status_code == 400

    def test_listing_unknown_journal(self, client):
        response = client.get(f"/journals/{uuid4()}/comments")

        assert response.status_code == 404

    def test_edit_by_someone_else(self, client):
        alice = _register(client, "alice")
        bob = _register(client, "bob")
        journal_id = _journal(client, alice)
        comment = _comment(client, alice, journal_id, "Mine").json()["comment"]

        response = client.put(
            f"/comments/{comment['id']}", json={"content": "Bob was here"}, headers=bob
        )

        assert response.status_code == 404
        assert "permission to edit" in response.json()["message"]
        unchanged = client.get(f"/comments/{comment['id']}").json()["comment"]
        assert unchanged["content"] == "Mine"
        assert unchanged["isEdited"] is False

    def test_delete_by_someone_else(self, client):
        alice = _register(client, "alice")
        bob = _register(client, "bob")
        journal_id = _journal(client, alice)
        comment = _comment(client, alice, journal_id, "Mine").json()["comment"]

        response = client.delete(f"/comments/{comment['id']}", headers=bob)

        assert response.status_code == 404
        assert client.get(f"/comments/{comment['id']}").status_code == 200
