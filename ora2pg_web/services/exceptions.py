"""
Service Layer Exceptions

Custom exceptions for the migration orchestration logic.
"""

TRANSLATION_FAILED_MESSAGE = "Failed to translate code. Please check the input and try again."


class TranslationError(Exception):
    """
    Raised when the translation call fails for any reason.
    Network, authentication and malformed-response failures all collapse
    into the same user facing message.
    """

    def __init__(self, message: str = TRANSLATION_FAILED_MESSAGE):
        super().__init__(message)
        self.message = message


class SessionNotFoundError(ValueError):
    """Raised when a session id does not exist (or was already deleted)."""
    pass


class OperationInProgressError(Exception):
    """Raised when a translation or explanation is requested while one is in flight."""
    pass
