"""Salted reversible identifier codec.

Internal identifiers are sequential integers. Clients only ever see them
encoded as short opaque strings, which keeps row counts and creation order
from being trivially enumerable. This is obfuscation, not access control.

Usage:
    codec = IdCodec(salt=settings.hashids.salt, min_length=10)
    external = codec.encode(42)            # e.g. "Ox8Vb3mKqa"
    codec.decode(external)                 # 42
    codec.walk({"id": 42, "title": "x"}, {"id"})
"""

from collections.abc import Collection, Mapping
from enum import Enum
from typing import Any

from hashids import Hashids

from specdit.util.error import (
    IdentifierEncodingError,
    PayloadCycleError,
    PayloadTooDeepError,
)

DEFAULT_MAX_DEPTH = 64


class PayloadKind(Enum):
    """Shape of one node in a JSON-like payload."""

    MAPPING = "mapping"
    SEQUENCE = "sequence"
    SCALAR = "scalar"


def classify(node: Any) -> PayloadKind:
    """Classify a payload node.

    Strings and bytes are scalars even though they are sequences.
    """
    if isinstance(node, Mapping):
        return PayloadKind.MAPPING
    if isinstance(node, (list, tuple)):
        return PayloadKind.SEQUENCE
    return PayloadKind.SCALAR


class IdCodec:
    """Encode and decode identifiers with a fixed salt.

    One instance is created at startup and shared by every request. The
    instance holds no mutable state.
    """

    def __init__(
        self,
        salt: str,
        min_length: int = 10,
        max_depth: int = DEFAULT_MAX_DEPTH,
    ) -> None:
        """Initialize codec.

        Args:
            salt: Secret salt; changing it invalidates every issued id
            min_length: Minimum length of encoded ids
            max_depth: Deepest payload nesting accepted by walk()
        """
        self._hashids = Hashids(salt=salt, min_length=min_length)
        self.max_depth = max_depth

    def encode(self, value: int | str) -> str | None:
        """Encode an internal identifier.

        Args:
            value: Non-negative integer, or its decimal string form

        Returns:
            Encoded identifier, or None if the value is malformed
        """
        number = _to_number(value)
        if number is None:
            return None
        encoded = self._hashids.encode(number)
        return encoded or None

    def decode(self, external_id: str) -> int | None:
        """Decode an external identifier.

        Args:
            external_id: Identifier previously produced by encode()

        Returns:
            Internal identifier, or None if the string was not produced by
            encode() under this salt
        """
        if not isinstance(external_id, str) or not external_id:
            return None
        numbers = self._hashids.decode(external_id)
        if len(numbers) != 1:
            return None
        # hashids already rejects strings that don't re-encode to themselves
        return numbers[0]

    def walk(self, payload: Any, id_fields: Collection[str]) -> Any:
        """Return a copy of payload with identifier fields encoded.

        Every mapping key named in id_fields whose value is an int or a
        string is replaced by its encoding. All nested mappings and
        sequences are visited whether or not their key is an id field.
        The input is never mutated.

        Args:
            payload: JSON-like tree of mappings, sequences and scalars
            id_fields: Names of keys holding identifiers

        Returns:
            Transformed copy (sequences come back as lists)

        Raises:
            IdentifierEncodingError: If an id field holds a malformed value
            PayloadCycleError: If a container is nested inside itself
            PayloadTooDeepError: If nesting exceeds max_depth
        """
        return self._walk(payload, frozenset(id_fields), 0, set())

    def _walk(
        self,
        node: Any,
        id_fields: frozenset[str],
        depth: int,
        active: set[int],
    ) -> Any:
        kind = classify(node)
        if kind is PayloadKind.SCALAR:
            return node

        if depth >= self.max_depth:
            raise PayloadTooDeepError(self.max_depth)

        # Only containers on the current path count, so shared siblings are fine
        marker = id(node)
        if marker in active:
            raise PayloadCycleError(
                f"{type(node).__name__} contains itself at depth {depth}"
            )
        active.add(marker)
        try:
            if kind is PayloadKind.MAPPING:
                result: dict[Any, Any] = {}
                for key, value in node.items():
                    if key in id_fields and _is_identifier(value):
                        result[key] = self._encode_field(key, value)
                    else:
                        result[key] = self._walk(value, id_fields, depth + 1, active)
                return result
            return [self._walk(item, id_fields, depth + 1, active) for item in node]
        finally:
            active.discard(marker)

    def _encode_field(self, field: str, value: int | str) -> str:
        encoded = self.encode(value)
        if encoded is None:
            raise IdentifierEncodingError(field, value)
        return encoded


def _is_identifier(value: Any) -> bool:
    """Whether a value is a candidate identifier (int or str, not bool)."""
    return isinstance(value, (int, str)) and not isinstance(value, bool)


def _to_number(value: Any) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value if value >= 0 else None
    if isinstance(value, str) and value.isascii() and value.isdigit():
        return int(value)
    return None
