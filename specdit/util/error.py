"""Utility layer errors."""


class UtilError(Exception):
    """Base utility error."""

    pass


class DependencyInjectionError(UtilError):
    """Dependency injection error."""

    pass


class CodecError(UtilError):
    """Base identifier codec error.

    Codec errors on outbound payloads are internal errors: identifiers
    produced by persistence are always expected to encode.
    """

    pass


class IdentifierEncodingError(CodecError):
    """Raised when an identifier field holds a value that cannot be encoded."""

    def __init__(self, field: str, value: object):
        self.field = field
        self.value = value
        super().__init__(f"Cannot encode identifier field {field!r}: {value!r}")


class PayloadCycleError(CodecError):
    """Raised when a payload container appears inside itself."""

    pass


class PayloadTooDeepError(CodecError):
    """Raised when a payload nests deeper than the walker allows."""

    def __init__(self, max_depth: int):
        self.max_depth = max_depth
        super().__init__(f"Payload nesting exceeds {max_depth} levels")
