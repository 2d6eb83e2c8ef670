"""Unit tests for the identifier codec."""

import copy

import pytest

from specdit.util.codec import IdCodec, PayloadKind, classify
from specdit.util.error import (
    IdentifierEncodingError,
    PayloadCycleError,
    PayloadTooDeepError,
)


@pytest.fixture
def codec():
    """Codec with a fixed test salt."""
    return IdCodec(salt="unit-test-salt", min_length=10)


class TestEncodeDecode:
    """Tests for encode() and decode()."""

    @pytest.mark.parametrize("value", [0, 1, 42, 2**31, 2**53])
    def test_decode_reverses_encode(self, codec, value):
        """Decoding an encoded id should give back the id."""
        assert codec.decode(codec.encode(value)) == value

    def test_encode_respects_min_length(self, codec):
        """Encoded ids should be at least min_length characters."""
        assert len(codec.encode(1)) >= 10

    def test_encode_is_deterministic(self, codec):
        """Same id and salt should always encode the same way."""
        assert codec.encode(1234) == codec.encode(1234)
        assert codec.encode(1234) == IdCodec(salt="unit-test-salt").encode(1234)

    def test_encode_is_injective_over_sample(self, codec):
        """Distinct ids should never share an encoding."""
        encoded = {codec.encode(value) for value in range(2000)}
        assert len(encoded) == 2000

    def test_encode_accepts_digit_string(self, codec):
        """Decimal strings encode like the integer they spell."""
        assert codec.encode("42") == codec.encode(42)

    @pytest.mark.parametrize("value", [-1, "abc", "-3", "4.2", "", True, None, 1.5])
    def test_encode_rejects_malformed_values(self, codec, value):
        """Malformed ids should encode to None."""
        assert codec.encode(value) is None

    def test_salt_changes_encoding(self, codec):
        """A different salt should produce a different encoding."""
        other = IdCodec(salt="another-salt", min_length=10)
        assert codec.encode(42) != other.encode(42)

    @pytest.mark.parametrize("external", ["", "nope", "!!!!!!!!!!", "0000000000"])
    def test_decode_rejects_foreign_strings(self, codec, external):
        """Strings the codec never produced should decode to None."""
        assert codec.decode(external) is None

    def test_decode_rejects_other_salt(self, codec):
        """Ids from another salt should not decode."""
        other = IdCodec(salt="another-salt", min_length=10)
        assert codec.decode(other.encode(42)) != 42

    def test_decode_rejects_multi_number_hash(self, codec):
        """A hash carrying several numbers is not a single identifier."""
        multi = codec._hashids.encode(1, 2)
        assert codec.decode(multi) is None

    def test_decode_rejects_non_string(self, codec):
        """Non-string input should decode to None."""
        assert codec.decode(42) is None


class TestClassify:
    """Tests for payload node classification."""

    @pytest.mark.parametrize(
        "node, kind",
        [
            ({}, PayloadKind.MAPPING),
            ([], PayloadKind.SEQUENCE),
            ((1, 2), PayloadKind.SEQUENCE),
            ("text", PayloadKind.SCALAR),
            (b"bytes", PayloadKind.SCALAR),
            (None, PayloadKind.SCALAR),
            (3, PayloadKind.SCALAR),
        ],
    )
    def test_classify(self, node, kind):
        """Strings and bytes are scalars, lists and tuples are sequences."""
        assert classify(node) is kind


class TestWalk:
    """Tests for walk()."""

    def test_walk_encodes_nested_id_fields(self, codec):
        """Id fields should be encoded at every level."""
        payload = {"id": "42", "nested": {"id": "7", "other": "x"}}

        result = codec.walk(payload, ["id"])

        assert result == {
            "id": codec.encode("42"),
            "nested": {"id": codec.encode("7"), "other": "x"},
        }

    def test_walk_does_not_mutate_input(self, codec):
        """The original payload should be left untouched."""
        payload = {"id": 42, "items": [{"post_id": 7}], "meta": {"page": 1}}
        snapshot = copy.deepcopy(payload)

        codec.walk(payload, {"id", "post_id"})

        assert payload == snapshot

    def test_walk_handles_lists_of_records(self, codec):
        """Records inside lists should be encoded."""
        payload = [{"id": 1, "title": "a"}, {"id": 2, "title": "b"}]

        result = codec.walk(payload, {"id"})

        assert result == [
            {"id": codec.encode(1), "title": "a"},
            {"id": codec.encode(2), "title": "b"},
        ]

    def test_walk_leaves_non_id_fields_alone(self, codec):
        """Numbers outside id fields should stay numbers."""
        payload = {"id": 5, "upvotes": 3, "score": -1}

        result = codec.walk(payload, {"id"})

        assert result["upvotes"] == 3
        assert result["score"] == -1

    def test_walk_keeps_null_id_fields(self, codec):
        """A null id field (e.g. top-level reply_to_id) stays null."""
        payload = {"id": 5, "reply_to_id": None}

        result = codec.walk(payload, {"id", "reply_to_id"})

        assert result["reply_to_id"] is None

    def test_walk_recurses_into_container_id_fields(self, codec):
        """An id field holding a container is walked, not encoded."""
        payload = {"id": [{"id": 1}]}

        result = codec.walk(payload, {"id"})

        assert result == {"id": [{"id": codec.encode(1)}]}

    def test_walk_returns_scalars_unchanged(self, codec):
        """A bare scalar payload is returned as-is."""
        assert codec.walk("hello", {"id"}) == "hello"
        assert codec.walk(None, {"id"}) is None

    def test_walk_allows_shared_siblings(self, codec):
        """The same object appearing twice side by side is not a cycle."""
        shared = {"id": 3}
        payload = {"a": shared, "b": shared}

        result = codec.walk(payload, {"id"})

        assert result["a"] == result["b"] == {"id": codec.encode(3)}

    def test_walk_detects_cycles(self, codec):
        """A container inside itself should raise."""
        payload: dict = {"id": 1}
        payload["self"] = payload

        with pytest.raises(PayloadCycleError):
            codec.walk(payload, {"id"})

    def test_walk_detects_list_cycles(self, codec):
        """A list inside itself should raise."""
        payload: list = []
        payload.append(payload)

        with pytest.raises(PayloadCycleError):
            codec.walk(payload, {"id"})

    def test_walk_rejects_excessive_depth(self):
        """Nesting past max_depth should raise."""
        codec = IdCodec(salt="unit-test-salt", max_depth=5)
        payload: dict = {}
        node = payload
        for _ in range(10):
            node["child"] = {}
            node = node["child"]

        with pytest.raises(PayloadTooDeepError):
            codec.walk(payload, {"id"})

    def test_walk_rejects_malformed_id(self, codec):
        """An id field holding junk should raise instead of leaking it."""
        with pytest.raises(IdentifierEncodingError) as exc_info:
            codec.walk({"id": "not-a-number"}, {"id"})

        assert exc_info.value.field == "id"
