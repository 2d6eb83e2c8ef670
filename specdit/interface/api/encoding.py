"""Identifier encoding at the HTTP boundary.

Inbound external ids are decoded before anything else runs. Outbound
payloads are wrapped in the response envelope and walked by the codec so
every identifier field leaves the service encoded.
"""

from typing import Any

from fastapi import status
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from specdit.domain.error import InvalidIdentifierError
from specdit.util.codec import IdCodec

# Keys holding entity identifiers anywhere in a response payload
ID_FIELDS = frozenset(
    {
        "id",
        "user_id",
        "author_id",
        "creator_id",
        "post_id",
        "subreddit_id",
        "reply_to_id",
        "votable_id",
    }
)


def decode_id(codec: IdCodec, external_id: str, resource: str) -> int:
    """Decode an external identifier.

    Raises:
        InvalidIdentifierError: If the id was not produced by the codec
    """
    internal_id = codec.decode(external_id)
    if internal_id is None:
        raise InvalidIdentifierError(resource, external_id)
    return internal_id


def decode_optional_id(
    codec: IdCodec, external_id: str | None, resource: str
) -> int | None:
    """Decode an identifier that may be absent."""
    if external_id is None:
        return None
    return decode_id(codec, external_id, resource)


def _dump(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json")
    if isinstance(value, list):
        return [_dump(item) for item in value]
    return value


def envelope(
    codec: IdCodec,
    data: Any = None,
    *,
    message: str | None = None,
    pagination: BaseModel | None = None,
    status_code: int = status.HTTP_200_OK,
) -> JSONResponse:
    """Build a success response with identifiers encoded.

    Args:
        codec: Identifier codec
        data: Model, list of models or plain JSON-compatible value
        message: Optional human readable message
        pagination: Optional pagination metadata
        status_code: HTTP status code

    Returns:
        JSON response shaped {success, message?, data?, pagination?}

    Raises:
        CodecError: If an identifier fails to encode
    """
    body: dict[str, Any] = {"success": True}
    if message is not None:
        body["message"] = message
    if data is not None:
        body["data"] = _dump(data)
    if pagination is not None:
        body["pagination"] = _dump(pagination)

    return JSONResponse(status_code=status_code, content=codec.walk(body, ID_FIELDS))
