"""Translation of errors into HTTP responses.

Every route catches what its use case raises and hands it to http_error(),
so one exception always maps to the same status code.
"""

import logfire
from fastapi import HTTPException, Request, Response, status
from fastapi.exception_handlers import http_exception_handler

from specdit.domain.error import (
    AuthenticationError,
    ConflictError,
    DomainError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)
from specdit.persistence.database import TransactionOutcome
from specdit.util.jwt import JWTError


def http_error(error: Exception, action: str) -> HTTPException:
    """Map an exception raised while performing an action to an HTTPException.

    Client errors carry a short detail without internal identifiers.
    Anything unexpected is logged with its detail and reported as a
    generic 500.

    Args:
        error: The exception raised by the use case
        action: What the route was doing, e.g. "creating post"

    Returns:
        HTTPException to raise
    """
    if isinstance(error, HTTPException):
        return error

    if isinstance(error, NotFoundError):
        logfire.warn(f"Not found while {action}", resource=error.resource)
        return HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"{error.resource} not found",
        )
    if isinstance(error, NotAuthorizedError):
        logfire.warn(f"Not authorized while {action}", resource=error.resource)
        return HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=f"Not authorized to modify this {error.resource}",
        )
    if isinstance(error, ConflictError):
        logfire.warn(f"Conflict while {action}", error=str(error))
        return HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(error))
    if isinstance(error, (AuthenticationError, JWTError)):
        logfire.warn(f"Authentication failed while {action}", error=str(error))
        return HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail=str(error)
        )
    if isinstance(error, (ValidationError, ValueError)):
        logfire.warn(f"Validation error while {action}", error=str(error))
        return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(error))
    if isinstance(error, DomainError):
        logfire.warn(f"Domain error while {action}", error=str(error))
        return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(error))

    logfire.error(
        f"Unexpected error while {action}",
        error=str(error),
        error_type=type(error).__name__,
    )
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=f"Error {action}",
    )


async def handle_http_exception(request: Request, exc: HTTPException) -> Response:
    """Answer an HTTPException and keep the request's writes from committing.

    Routes raise after their use case may already have written, so the
    request session must roll back instead of committing on close.
    """
    container = getattr(request.state, "dishka_container", None)
    if container is not None:
        outcome = await container.get(TransactionOutcome)
        outcome.mark_failed(f"HTTP {exc.status_code}")
    return await http_exception_handler(request, exc)
