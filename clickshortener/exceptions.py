"""Application-specific exceptions.

Classes:
    ClickShortenerError:
        Base class for all application errors.

    ValidationError:
        Raised when a submission fails validation. Carries the field errors.

    BatchValidationError:
        Raised when a batch submission fails validation. Carries the field
        errors keyed by submission index.

    ShortURLNotFoundError:
        Raised when a short code is unknown.

    ShortURLExpiredError:
        Raised when a short code is known but past its expiry.

    UnknownError:
        Raised on unexpected failures.

    ShortcodeExhaustedError:
        Raised when no free short code could be drawn.

    ConfigurationError:
        Raised when the application is misconfigured.

Example:
    >>> from clickshortener.exceptions import ShortURLNotFoundError
    >>> raise ShortURLNotFoundError("Short URL 'abc123' not found.")
    Traceback (most recent call last):
        ...
    clickshortener.exceptions.ShortURLNotFoundError: Short URL 'abc123' not found.
"""

from clickshortener.models import FieldError


class ClickShortenerError(Exception):
    """Base exception for all application-specific errors."""

    error_code = 'app:clickshortener_error'


class ValidationError(ClickShortenerError):
    """Raised when a URL submission fails validation."""

    error_code = 'app:validation_error'

    def __init__(self, errors: list[FieldError], message: str | None = None):
        self.errors = list(errors)
        if message is None:
            message = f'Validation failed: {", ".join(error.message for error in self.errors)}'
        super().__init__(message)


class BatchValidationError(ValidationError):
    """Raised when a batch of URL submissions fails validation."""

    error_code = 'app:batch_validation_error'

    def __init__(self, errors_by_index: dict[int, list[FieldError]]):
        self.errors_by_index = dict(errors_by_index)
        errors = [error for index in sorted(self.errors_by_index) for error in self.errors_by_index[index]]
        super().__init__(errors, message='Batch validation failed')


class ShortURLNotFoundError(ClickShortenerError):
    """Raised when a short code does not exist."""

    error_code = 'app:short_url_not_found'


class ShortURLExpiredError(ClickShortenerError):
    """Raised when a short code exists but has expired."""

    error_code = 'app:short_url_expired'


class UnknownError(ClickShortenerError):
    """Raised on unexpected failures."""

    error_code = 'app:unknown_error'


class ShortcodeExhaustedError(UnknownError):
    """Raised when every generation attempt drew a short code that is already taken."""

    error_code = 'app:shortcode_exhausted'


class ConfigurationError(ClickShortenerError):
    """Raised when the application is configured with invalid parameters."""

    error_code = 'config:configuration_error'
