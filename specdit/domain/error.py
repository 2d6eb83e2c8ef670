"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class NotAuthorizedError(DomainError):
    """Raised when a user attempts to change content they don't own."""

    def __init__(self, resource: str, resource_id: str, user_id: str):
        self.resource = resource
        self.resource_id = resource_id
        super().__init__(
            f"User {user_id} is not authorized to modify {resource} {resource_id}"
        )


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class InvalidIdentifierError(NotFoundError):
    """Raised when an external identifier does not decode.

    An unrecognized external id cannot point at a real resource, so callers
    handle it exactly like a missing row.
    """

    def __init__(self, resource: str, identifier: str):
        super().__init__(resource, identifier)


class ConflictError(DomainError):
    """Raised when a write collides with existing state.

    Duplicate subscriptions, duplicate registrations and concurrent votes
    from the same voter on the same target all end up here.
    """

    pass


class AuthenticationError(DomainError):
    """Raised when credentials do not match a user."""

    pass
