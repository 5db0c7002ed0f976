from enum import Enum
from typing import Any, Optional


class ErrorKind(str, Enum):
    INVALID_ARGUMENT = "invalid_argument"
    MALFORMED_FACTORY = "malformed_factory"


class RenderError(Exception):
    """Base class for template-authoring errors raised during a render pass.

    These are programmer errors: they are raised immediately, never retried,
    and left to the caller (typically a request handler) to report.
    """

    kind: ErrorKind

    def __init__(self, message: str, value: Optional[Any] = None):
        super().__init__(message)
        self.message = message
        self.value = value


class InvalidArgumentError(RenderError, TypeError):
    """Raised when a render entry point or template receives an unusable argument."""

    kind = ErrorKind.INVALID_ARGUMENT


class MalformedFactoryError(RenderError, TypeError):
    """Raised when an interpolated callable is not a zero-argument, synchronous factory."""

    kind = ErrorKind.MALFORMED_FACTORY
