"""
Custom exception hierarchy for ctxcat.

Every failure that can abort a run is one of these; the command layer turns
them into a diagnostic on stderr and a non-zero exit code.
"""

class CtxcatError(Exception):
    """Base exception for all ctxcat errors."""
    def __init__(self, message: str, context: dict = None):
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self):
        return self.message


class ConfigurationError(CtxcatError):
    """Raised when output options fail validation."""
    pass


class InputReadError(CtxcatError):
    """Raised when a named input cannot be opened or read."""

    def __init__(self, identifier: str, cause: Exception):
        reason = getattr(cause, 'strerror', None) or str(cause)
        super().__init__(
            f"Error reading file: {identifier} – {reason}",
            context={'identifier': identifier, 'cause': repr(cause)},
        )
        self.identifier = identifier
        self.cause = cause


class OutputWriteError(CtxcatError):
    """Raised when the output sink rejects a write."""

    def __init__(self, cause: Exception):
        super().__init__(
            f"Error writing output: {cause}",
            context={'cause': repr(cause)},
        )
        self.cause = cause
