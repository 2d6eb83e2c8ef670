"""Unit tests for the response envelope and id decoding."""

import json

import pytest

from specdit.application.usecase.common import SubredditSummary
from specdit.domain.error import InvalidIdentifierError
from specdit.domain.value import PageInfo, Tally
from specdit.interface.api.encoding import decode_id, decode_optional_id, envelope
from specdit.util.codec import IdCodec


@pytest.fixture
def codec():
    return IdCodec(salt="envelope-salt", min_length=10)


def body_of(response) -> dict:
    return json.loads(response.body)


class TestEnvelope:
    """Tests for envelope."""

    def test_message_only(self, codec):
        """Optional members are left out when absent."""
        response = envelope(codec, message="Logged out successfully")

        assert response.status_code == 200
        assert body_of(response) == {
            "success": True,
            "message": "Logged out successfully",
        }

    def test_encodes_identifier_fields(self, codec):
        """Id fields in models and lists are encoded, other ints are not."""
        data = [SubredditSummary(id=1, name="python"), SubredditSummary(id=2, name="rust")]

        body = body_of(envelope(codec, data, status_code=201))

        assert [item["id"] for item in body["data"]] == [codec.encode(1), codec.encode(2)]
        assert body["data"][0]["name"] == "python"

    def test_counts_are_not_encoded(self, codec):
        """Tallies and pagination keep their numbers."""
        body = body_of(
            envelope(
                codec,
                Tally(upvotes=2, downvotes=1),
                pagination=PageInfo(page=1, limit=10, total_posts=3),
            )
        )

        assert body["data"] == {"upvotes": 2, "downvotes": 1, "score": 1}
        assert body["pagination"]["total_posts"] == 3
        assert body["pagination"]["has_more"] is False

    def test_null_reply_to_id_stays_null(self, codec):
        """A missing parent is still null after encoding."""
        body = body_of(envelope(codec, {"id": 5, "reply_to_id": None}))

        assert body["data"]["reply_to_id"] is None
        assert codec.decode(body["data"]["id"]) == 5


class TestDecodeId:
    """Tests for decode_id."""

    def test_round_trip(self, codec):
        assert decode_id(codec, codec.encode(42), "Post") == 42

    @pytest.mark.parametrize("external_id", ["", "42", "not-an-id"])
    def test_undecodable(self, codec, external_id):
        """Anything the codec didn't issue raises InvalidIdentifierError."""
        with pytest.raises(InvalidIdentifierError) as exc_info:
            decode_id(codec, external_id, "Comment")

        assert exc_info.value.resource == "Comment"

    def test_optional(self, codec):
        assert decode_optional_id(codec, None, "Comment") is None
        assert decode_optional_id(codec, codec.encode(3), "Comment") == 3

    def test_other_salt(self, codec):
        """Ids issued under another salt don't decode."""
        other = IdCodec(salt="another-salt", min_length=10)

        with pytest.raises(InvalidIdentifierError):
            decode_id(codec, other.encode(42), "Post")
