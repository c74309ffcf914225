"""Shortening and redirection service

The ShortenerService orchestrates the short URL lifecycle on top of a
ShortURLBaseDAO: validating submissions, drawing free short codes, creating
records, resolving redirects and recording clicks.

Classes:
    ShortenerService:
        Entry point used by the lambda handlers and the cleanup scheduler.

Example:
    >>> from clickshortener.dao import ShortURLDAO
    >>> from clickshortener.dao.memory import MemoryRecordStorage
    >>> from clickshortener.models import SubmissionModel

    >>> service = ShortenerService(ShortURLDAO(MemoryRecordStorage()))
    >>> short_url = service.shorten(SubmissionModel(url='https://example.com', validity_minutes=10))
    >>> service.redirect(short_url.shortcode, referrer='https://news.ycombinator.com')
    'https://example.com'
"""

import random
import logging
import uuid
from datetime import timedelta

from clickshortener.constants import DIRECT_REFERRER, LogCategory, Shortcode, Validity
from clickshortener.dao.base import ShortURLBaseDAO
from clickshortener.dao.exceptions import DAOError
from clickshortener.exceptions import (
    BatchValidationError,
    ClickShortenerError,
    ShortcodeExhaustedError,
    ShortURLExpiredError,
    ShortURLNotFoundError,
    ValidationError,
)
from clickshortener.models import ClickModel, ClickOutcome, ShortURLModel, SubmissionModel
from clickshortener.services.geolocation import GeolocationBase, MockGeolocation
from clickshortener.services.validation import validate_batch, validate_submission
from clickshortener.types import Clock, IdFactory
from clickshortener.utils.helpers import utc_now
from clickshortener.utils.shortener import random_shortcode


logger = logging.getLogger(__name__)


def generate_id() -> str:
    return uuid.uuid4().hex


class ShortenerService:
    """Short URL lifecycle service

    All collaborators are injected so tests can pin time, randomness and
    identifiers.

    Attributes:
        dao (ShortURLBaseDAO):
            Store holding every short URL record.
        geolocator (GeolocationBase):
            Location provider for recorded clicks. Defaults to MockGeolocation.
        clock (Callable[[], datetime]):
            Source of the current time. Defaults to utc_now.
        rng (random.Random):
            Randomness for short code draws. Defaults to a system-entropy generator.
        id_factory (Callable[[], str]):
            Record id generator. Defaults to random UUID4 hex strings.
        max_attempts (int):
            Short code draws before giving up with ShortcodeExhaustedError.
    """

    def __init__(
        self,
        dao: ShortURLBaseDAO,
        geolocator: GeolocationBase | None = None,
        clock: Clock | None = None,
        rng: random.Random | None = None,
        id_factory: IdFactory | None = None,
        max_attempts: int = Shortcode.MAX_GENERATION_ATTEMPTS,
    ):
        self.dao = dao
        self.geolocator = geolocator or MockGeolocation()
        self.clock = clock or utc_now
        self.rng = rng or random.SystemRandom()
        self.id_factory = id_factory or generate_id
        self.max_attempts = max_attempts

    def generate_shortcode(self) -> str:
        """Draw a short code that no stored record uses

        Raises:
            ShortcodeExhaustedError:
                If every one of `max_attempts` draws hit a taken code.
        """
        for attempt in range(1, self.max_attempts + 1):
            shortcode = random_shortcode(Shortcode.LENGTH, rng=self.rng)
            if not self.dao.exists(shortcode):
                return shortcode
            logger.debug(
                'Short code collision on attempt %s: %s.',
                attempt,
                shortcode,
                extra={'category': LogCategory.SHORTENER, 'shortcode': shortcode},
            )

        logger.error(
            'No free short code found after %s attempts.',
            self.max_attempts,
            extra={'category': LogCategory.SHORTENER, 'attempts': self.max_attempts},
        )
        raise ShortcodeExhaustedError(f'No free short code found after {self.max_attempts} attempts.')

    def shorten(self, submission: SubmissionModel) -> ShortURLModel:
        """Validate a submission and persist a new short URL record

        Args:
            submission (SubmissionModel):
                URL, optional validity in minutes and optional custom short code.

        Returns:
            ShortURLModel: The newly created record.

        Raises:
            ValidationError:
                If the submission is invalid (field errors in `errors`).
            ShortcodeExhaustedError:
                If no free short code could be drawn.
            DataStoreError:
                If the record can't be persisted.
        """
        logger.info('Attempting to shorten URL: %s.', submission.url, extra={'category': LogCategory.SHORTENER})

        errors = validate_submission(submission, self.dao)
        if errors:
            error = ValidationError(errors)
            logger.error('URL shortening failed validation: %s.', error, extra={'category': LogCategory.SHORTENER})
            raise error

        shortcode = submission.custom_shortcode or self.generate_shortcode()
        validity_minutes = submission.validity_minutes if submission.validity_minutes is not None else Validity.DEFAULT_MINUTES
        created_at = self.clock()

        short_url = ShortURLModel(
            id=self.id_factory(),
            target=submission.url.strip(),
            shortcode=shortcode,
            created_at=created_at,
            expires_at=created_at + timedelta(minutes=validity_minutes),
            validity_minutes=validity_minutes,
        )
        self.dao.save(short_url)

        logger.info(
            'URL shortened successfully: %s -> %s.',
            short_url.target,
            shortcode,
            extra={'category': LogCategory.SHORTENER, 'shortcode': shortcode},
        )
        return short_url

    def shorten_batch(self, submissions: list[SubmissionModel]) -> list[ShortURLModel]:
        """Shorten a batch of URLs, in input order

        Validation is all-or-nothing: if any submission is invalid nothing is
        written. Writing is best-effort: the first failure after validation
        aborts the batch and records already written stay written.

        Raises:
            BatchValidationError:
                If the batch or any submission is invalid (errors in `errors_by_index`).
            ValidationError:
                If a submission became invalid after batch validation (e.g. its
                custom short code was taken in the meantime).
        """
        logger.info('Attempting to shorten %s URLs.', len(submissions), extra={'category': LogCategory.SHORTENER})

        batch_errors = validate_batch(submissions, self.dao)
        if batch_errors:
            logger.error(
                'Batch URL shortening failed validation for %s URLs.',
                len(batch_errors),
                extra={'category': LogCategory.SHORTENER},
            )
            raise BatchValidationError(batch_errors)

        short_urls = []
        for submission in submissions:
            try:
                short_urls.append(self.shorten(submission))
            except (ClickShortenerError, DAOError):
                logger.error(
                    'Failed to shorten individual URL in batch: %s.',
                    submission.url,
                    extra={'category': LogCategory.SHORTENER, 'written': len(short_urls)},
                )
                raise

        logger.info('Successfully shortened %s URLs.', len(short_urls), extra={'category': LogCategory.SHORTENER})
        return short_urls

    def redirect(self, shortcode: str, referrer: str | None = None, user_agent: str | None = None) -> str:
        """Resolve a short code to its target URL and record the click

        The click is recorded on a best-effort basis: a failure to record it
        never blocks the redirect.

        Args:
            shortcode (str):
                The requested short code.
            referrer (str | None):
                Originating page. Recorded as 'direct' when missing.
            user_agent (str | None):
                Client identification string.

        Returns:
            str: The target URL.

        Raises:
            ShortURLNotFoundError:
                If the short code is unknown.
            ShortURLExpiredError:
                If the short code has expired.
        """
        logger.info('Attempting to redirect shortcode: %s.', shortcode, extra={'category': LogCategory.REDIRECT, 'shortcode': shortcode})

        short_url = self.dao.get(shortcode)
        if short_url is None:
            logger.warning('Shortcode not found: %s.', shortcode, extra={'category': LogCategory.REDIRECT, 'shortcode': shortcode})
            raise ShortURLNotFoundError(f"Short URL with code '{shortcode}' not found.")

        if short_url.is_expired:
            logger.warning(
                'Attempted to access expired shortcode: %s.',
                shortcode,
                extra={'category': LogCategory.REDIRECT, 'shortcode': shortcode},
            )
            raise ShortURLExpiredError(f"Short URL with code '{shortcode}' has expired.")

        self.record_click(shortcode, referrer=referrer, user_agent=user_agent)

        logger.info(
            'Successful redirect: %s -> %s.',
            shortcode,
            short_url.target,
            extra={'category': LogCategory.REDIRECT, 'shortcode': shortcode},
        )
        return short_url.target

    def record_click(self, shortcode: str, referrer: str | None = None, user_agent: str | None = None) -> ClickOutcome:
        """Record a click, fire-and-forget

        Never raises. Any failure (geolocation, storage) is logged and reported
        as ClickOutcome.FAILED; callers are free to ignore the outcome.
        """
        try:
            click = ClickModel(
                timestamp=self.clock(),
                referrer=referrer or DIRECT_REFERRER,
                user_agent=user_agent or '',
                geolocation=self.geolocator.sample(),
            )
            outcome = self.dao.add_click(shortcode, click)
        except Exception:
            logger.exception('Failed to record click for %s.', shortcode, extra={'category': LogCategory.REDIRECT, 'shortcode': shortcode})
            return ClickOutcome.FAILED

        if outcome is not ClickOutcome.RECORDED:
            logger.warning(
                'Click for %s was not recorded (%s).',
                shortcode,
                outcome,
                extra={'category': LogCategory.REDIRECT, 'shortcode': shortcode, 'outcome': outcome},
            )
        return outcome

    def get_all_urls(self) -> list[ShortURLModel]:
        """Return every stored record, expired ones included, for statistics display."""
        short_urls = self.dao.all()
        logger.info('Retrieved %s URLs from storage.', len(short_urls), extra={'category': LogCategory.SHORTENER})
        return short_urls

    def get_url_stats(self, shortcode: str) -> ShortURLModel | None:
        """Return the record behind a short code, or None when unknown

        The lookup may flip and persist the record's expiry flag.
        """
        short_url = self.dao.get(shortcode)
        if short_url is None:
            logger.warning(
                'Stats requested for non-existent shortcode: %s.',
                shortcode,
                extra={'category': LogCategory.SHORTENER, 'shortcode': shortcode},
            )
        else:
            logger.info('Retrieved stats for shortcode: %s.', shortcode, extra={'category': LogCategory.SHORTENER, 'shortcode': shortcode})
        return short_url

    def cleanup_expired(self) -> bool:
        """Delete expired records

        Storage failures are logged, never raised.

        Returns:
            bool: True if the sweep completed, False if it failed.
        """
        try:
            self.dao.sweep_expired()
        except DAOError:
            logger.exception('Failed to cleanup expired URLs.', extra={'category': LogCategory.CLEANUP})
            return False

        logger.info('Expired URLs cleanup completed.', extra={'category': LogCategory.CLEANUP})
        return True
