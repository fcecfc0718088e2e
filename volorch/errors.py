"""
Error classes for volorch.

All errors raised by the compiler are local validation failures:
- PermanentError: Do not retry (the input itself is wrong)
- MissingFieldError: A required field or label is absent or empty
- NilInputError: A required reference (claim, job, evaluation) is absent

Error handling contract:
- Compiler operations return values on success
- Errors are exceptions, not values
- The caller decides whether to prompt for corrected input or abort
"""


class VolorchError(Exception):
    """Base exception for volorch."""
    pass


class PermanentError(VolorchError):
    """
    Permanent error - do not retry.

    Examples:
    - Claim without a name
    - Claim missing a required label
    - Claim requesting an engine that is not registered
    """
    pass


class MissingFieldError(PermanentError):
    """
    A required scalar or label is absent or empty.

    Attributes:
        field: Name of the missing field or label key
    """

    def __init__(self, field: str, message: str | None = None):
        self.field = field
        super().__init__(message or f"Missing {field}")


class NilInputError(MissingFieldError):
    """
    A required reference was not provided at all.

    Subclasses MissingFieldError: an absent claim is reported as a
    missing field named after the absent reference.
    """

    def __init__(self, field: str, message: str | None = None):
        super().__init__(field, message or f"Nil {field} provided")


class UnknownEngineError(PermanentError):
    """Raised when a claim requests a volume engine that is not registered."""

    def __init__(self, engine: str, registered: list[str]):
        self.engine = engine
        self.registered = registered
        super().__init__(
            f"No volume engine registered for type: {engine}. "
            f"Registered: {registered}"
        )


class ConfigError(VolorchError):
    """Configuration validation error."""
    pass
