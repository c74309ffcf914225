"""Input validation for URL submissions.

Validators never raise: each returns None (or an empty collection) when the
input is acceptable, otherwise the FieldError(s) describing what is wrong.
Every failure is logged as a warning in the `validation` category.

Functions:
    validate_url(url) -> FieldError | None
    validate_validity_minutes(minutes) -> FieldError | None
    validate_custom_shortcode(shortcode, dao) -> FieldError | None
    validate_submission(submission, dao) -> list[FieldError]
    validate_batch(submissions, dao) -> dict[int, list[FieldError]]

Example:
    >>> validate_url('not-a-url')
    FieldError(field='url', message='Please enter a valid URL')
    >>> validate_validity_minutes(None) is None
    True
"""

import re
import logging
import urllib.parse

from clickshortener.constants import Batch, LogCategory, Shortcode, Validity
from clickshortener.dao.base import ShortURLBaseDAO
from clickshortener.models import FieldError, SubmissionModel


logger = logging.getLogger(__name__)

ALLOWED_SCHEMES = frozenset({'http', 'https'})
SHORTCODE_PATTERN = re.compile(r'[a-zA-Z0-9]+')

_extra = {'category': LogCategory.VALIDATION}


def validate_url(url: str | None) -> FieldError | None:
    if not url or not url.strip():
        logger.warning('URL validation failed: empty URL.', extra=_extra)
        return FieldError('url', 'URL is required')

    candidate = url.strip()
    invalid = FieldError('url', 'Please enter a valid URL')

    if any(char.isspace() for char in candidate):
        logger.warning('URL validation failed: invalid format - %s.', url, extra=_extra)
        return invalid

    try:
        components = urllib.parse.urlsplit(candidate)
        components.port  # raises ValueError on a malformed port
    except ValueError:
        logger.warning('URL validation failed: invalid format - %s.', url, extra=_extra)
        return invalid

    if not components.scheme:
        logger.warning('URL validation failed: invalid format - %s.', url, extra=_extra)
        return invalid

    if components.scheme.lower() not in ALLOWED_SCHEMES:
        logger.warning('URL validation failed: invalid protocol %s.', components.scheme, extra=_extra)
        return FieldError('url', 'URL must use HTTP or HTTPS protocol')

    if not components.hostname:
        logger.warning('URL validation failed: invalid format - %s.', url, extra=_extra)
        return invalid

    return None


def validate_validity_minutes(minutes: int | None) -> FieldError | None:
    """None means "use the default validity" and always passes."""
    if minutes is None:
        return None

    if isinstance(minutes, bool) or not isinstance(minutes, int):
        logger.warning('Validity validation failed: %r is not a whole number.', minutes, extra=_extra)
        return FieldError('validityMinutes', 'Validity must be a whole number of minutes')

    if minutes < Validity.MIN_MINUTES:
        logger.warning('Validity validation failed: %s minutes too low.', minutes, extra=_extra)
        return FieldError('validityMinutes', 'Validity must be at least 1 minute')

    if minutes > Validity.MAX_MINUTES:
        logger.warning('Validity validation failed: %s minutes too high.', minutes, extra=_extra)
        return FieldError('validityMinutes', 'Validity cannot exceed 1 year')

    return None


def validate_custom_shortcode(shortcode: str | None, dao: ShortURLBaseDAO) -> FieldError | None:
    """None or empty means "generate one" and always passes.

    A code held by any stored record, expired or not, is taken.
    """
    if not shortcode:
        return None

    if len(shortcode) < Shortcode.MIN_CUSTOM_LENGTH:
        logger.warning('Shortcode validation failed: %s too short.', shortcode, extra=_extra)
        return FieldError('customShortCode', f'Custom shortcode must be at least {Shortcode.MIN_CUSTOM_LENGTH} characters')

    if len(shortcode) > Shortcode.MAX_CUSTOM_LENGTH:
        logger.warning('Shortcode validation failed: %s too long.', shortcode, extra=_extra)
        return FieldError('customShortCode', f'Custom shortcode cannot exceed {Shortcode.MAX_CUSTOM_LENGTH} characters')

    if not SHORTCODE_PATTERN.fullmatch(shortcode):
        logger.warning('Shortcode validation failed: %s contains invalid characters.', shortcode, extra=_extra)
        return FieldError('customShortCode', 'Custom shortcode must be alphanumeric only')

    if dao.exists(shortcode):
        logger.warning('Shortcode validation failed: %s already exists.', shortcode, extra=_extra)
        return FieldError('customShortCode', 'This shortcode is already taken')

    return None


def validate_submission(submission: SubmissionModel, dao: ShortURLBaseDAO) -> list[FieldError]:
    """Collect URL, validity and short code errors, in that order."""
    checks = (
        validate_url(submission.url),
        validate_validity_minutes(submission.validity_minutes),
        validate_custom_shortcode(submission.custom_shortcode, dao),
    )
    errors = [error for error in checks if error is not None]

    if errors:
        logger.warning('URL submission validation failed with %s errors.', len(errors), extra=_extra)
    return errors


def validate_batch(submissions: list[SubmissionModel], dao: ShortURLBaseDAO) -> dict[int, list[FieldError]]:
    """Validate a batch of submissions

    An empty or oversized batch fails as a whole with a single `batch` error
    under index 0. Otherwise every submission is validated on its own and
    only the indexes with errors are returned.

    Returns:
        dict[int, list[FieldError]]: Errors keyed by submission index. Empty if the batch is acceptable.
    """
    if not submissions:
        logger.warning('Batch validation failed: no URLs provided.', extra=_extra)
        return {0: [FieldError('batch', 'At least one URL is required')]}

    if len(submissions) > Batch.MAX_SIZE:
        logger.warning('Batch validation failed: %s URLs exceeds limit.', len(submissions), extra=_extra)
        return {0: [FieldError('batch', f'Maximum {Batch.MAX_SIZE} URLs allowed at once')]}

    batch_errors = {}
    for index, submission in enumerate(submissions):
        errors = validate_submission(submission, dao)
        if errors:
            batch_errors[index] = errors
    return batch_errors
