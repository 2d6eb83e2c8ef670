"""End-to-end tests for voting through the API."""

import pytest

from tests.e2e.api import (
    auth_headers,
    create_comment,
    create_post,
    create_subreddit,
    make_client,
    register,
    vote,
)


@pytest.fixture
def client():
    """Create test client."""
    return make_client()


@pytest.fixture
def thread(client):
    """A logged in author with a post in a subreddit."""
    headers = auth_headers(register(client))
    subreddit = create_subreddit(client, headers)
    post = create_post(client, headers, subreddit["id"])
    return headers, post


class TestVotingFlow:
    """Votes toggle through record, switch and remove."""

    def test_toggle_sequence(self, client, thread):
        """UP records, DOWN switches, DOWN again removes."""
        headers, post = thread
        path = f"posts/{post['id']}"

        recorded = vote(client, headers, path, "UP")
        switched = vote(client, headers, path, "DOWN")
        removed = vote(client, headers, path, "DOWN")

        assert recorded.status_code == 200
        assert recorded.json()["message"] == "Vote recorded successfully"
        assert recorded.json()["data"] == {"upvotes": 1, "downvotes": 0, "score": 1}
        assert switched.json()["message"] == "Vote updated successfully"
        assert switched.json()["data"] == {"upvotes": 0, "downvotes": 1, "score": -1}
        assert removed.json()["message"] == "Vote removed successfully"
        assert removed.json()["data"] == {"upvotes": 0, "downvotes": 0, "score": 0}

    def test_camel_case_vote_type(self, client, thread):
        """voteType is accepted as well as vote_type."""
        headers, post = thread

        response = client.post(
            f"/api/posts/{post['id']}/vote", json={"voteType": "UP"}, headers=headers
        )

        assert response.status_code == 200
        assert response.json()["data"]["score"] == 1

    @pytest.mark.parametrize(
        "body",
        [
            {"vote_type": "SIDEWAYS"},
            {},
            {"vote_type": None},
            {"vote_type": 5},
            {"voteType": ["UP"]},
            {"vote_type": {"UP": True}},
        ],
    )
    def test_invalid_vote_type(self, client, thread, body):
        """A polarity other than UP/DOWN is a 400 and records nothing."""
        headers, post = thread

        response = client.post(
            f"/api/posts/{post['id']}/vote", json=body, headers=headers
        )
        tally = client.get(f"/api/posts/{post['id']}/votes")

        assert response.status_code == 400
        assert response.json()["detail"] == "Invalid vote type. Must be UP or DOWN"
        assert tally.json()["data"]["score"] == 0

    @pytest.mark.parametrize("post_id", ["not-an-id", "1", "-5"])
    def test_undecodable_id_is_not_found(self, client, thread, post_id):
        """Ids the codec didn't produce look exactly like missing posts."""
        headers, _ = thread

        response = vote(client, headers, f"posts/{post_id}", "UP")

        assert response.status_code == 404
        assert response.json()["detail"] == "Post not found"

    def test_vote_requires_authentication(self, client, thread):
        """Anonymous votes are rejected."""
        _, post = thread
        client.cookies.clear()

        response = client.post(f"/api/posts/{post['id']}/vote", json={"vote_type": "UP"})

        assert response.status_code == 401

    def test_tally_counts_each_voter(self, client, thread):
        """Two upvotes and a downvote score one."""
        headers, post = thread
        path = f"posts/{post['id']}"
        bob = auth_headers(register(client, "bob@example.com"))
        carol = auth_headers(register(client, "carol@example.com"))

        vote(client, headers, path, "UP")
        vote(client, bob, path, "UP")
        vote(client, carol, path, "DOWN")
        response = client.get(f"/api/{path}/votes")

        assert response.json()["data"] == {"upvotes": 2, "downvotes": 1, "score": 1}

    def test_votes_by_voter(self, client, thread):
        """The caller's voted posts and comments carry their polarity."""
        headers, post = thread
        comment = create_comment(client, headers, post["id"])
        vote(client, headers, f"posts/{post['id']}", "DOWN")
        vote(client, headers, f"comments/{comment['id']}", "UP")

        posts = client.get("/api/posts/votes/me", headers=headers)
        downs = client.get(
            "/api/posts/votes/me", params={"vote_type": "DOWN"}, headers=headers
        )
        ups = client.get(
            "/api/posts/votes/me", params={"vote_type": "UP"}, headers=headers
        )
        comments = client.get("/api/comments/votes/me", headers=headers)

        assert [p["id"] for p in posts.json()["data"]] == [post["id"]]
        assert posts.json()["data"][0]["user_vote_type"] == "DOWN"
        assert len(downs.json()["data"]) == 1
        assert ups.json()["data"] == []
        assert [c["id"] for c in comments.json()["data"]] == [comment["id"]]
        assert comments.json()["data"][0]["votes"]["score"] == 1
