"""Data Access Object (DAO) implementation for managing shortened URLs

This module provides the ShortURLBaseDAO implementation on top of any
RecordStorageBase. The storage holds one JSON document: the array of all
short URL records. No record is cached between operations; every operation
re-reads and re-decodes the document, so the storage stays the only source
of truth.

Responsibilities:
    - Upsert, list and look up ShortURLModel records;
    - Flip the expiry flag lazily on lookup and persist it;
    - Append clicks to live records;
    - Sweep expired records in a single write;
    - Degrade failed lookups to empty results (logged, never raised);
    - Abort writes whose read fails, so no record is lost.

Classes:
    ShortURLDAO:
        DAO for storing and retrieving ShortURLModel through a record storage.

Example:
    >>> from clickshortener.dao.memory import MemoryRecordStorage
    >>> dao = ShortURLDAO(MemoryRecordStorage())
    >>> dao.save(short_url)
    <ShortURLDAO>
    >>> dao.get('abc123').target
    'https://example.com/page'
    >>> dao.add_click('abc123', click)
    <ClickOutcome.RECORDED: 'recorded'>
"""

import json
import logging

from beartype import beartype

from clickshortener.constants import LogCategory
from clickshortener.models import ClickModel, ClickOutcome, ShortURLModel
from clickshortener.types import Clock
from clickshortener.dao.base import RecordStorageBase, ShortURLBaseDAO
from clickshortener.dao.exceptions import CorruptedDataError, DataStoreError
from clickshortener.utils.helpers import utc_now


logger = logging.getLogger(__name__)


class ShortURLDAO(ShortURLBaseDAO):
    """Record storage based Data Access Object (DAO) for short URL mappings

    Attributes:
        storage (RecordStorageBase):
            Durable document storage holding every record.
        clock (Callable[[], datetime]):
            Source of the current time used for expiry decisions.
    """

    def __init__(self, storage: RecordStorageBase, clock: Clock | None = None):
        self.storage = storage
        self.clock = clock or utc_now

    def _load(self) -> list[ShortURLModel]:
        """Read and decode the stored document

        Raises:
            CorruptedDataError: If the document isn't a JSON array of valid records.
            DataStoreError: If the storage can't be read.
        """
        payload = self.storage.read()
        if not payload:
            return []

        try:
            data = json.loads(payload)
            if not isinstance(data, list):
                raise CorruptedDataError(f'Stored document must be a JSON array (given type: {type(data).__name__}).')
            return [ShortURLModel.from_dict(item) for item in data]
        except (json.JSONDecodeError, KeyError, TypeError, ValueError, AttributeError) as e:
            raise CorruptedDataError(f'Failed to decode stored short URLs: {e}') from e

    def _load_for_write(self) -> list[ShortURLModel]:
        """Read the record set a write is about to replace

        A corrupted document is logged and replaced by an empty record set.
        A storage read failure propagates before anything is written.

        Raises:
            DataStoreError: If the storage can't be read.
        """
        try:
            return self._load()
        except CorruptedDataError as e:
            logger.error(
                'Discarding corrupted short URLs document.',
                extra={'category': LogCategory.STORE, 'reason': str(e), 'error': e.__class__.__name__},
            )
            return []

    def _dump(self, short_urls: list[ShortURLModel]) -> None:
        self.storage.write_all(json.dumps([short_url.to_dict() for short_url in short_urls]))

    @beartype
    def save(self, short_url: ShortURLModel) -> 'ShortURLDAO':
        """Upsert a short URL record by id

        A record sharing the same id is replaced in place, otherwise the record
        is appended. All other records are preserved.

        Raises:
            DataStoreError:
                If the storage can't be read or written. Nothing is written
                when the read fails.
        """
        try:
            short_urls = self._load_for_write()
            for index, existing in enumerate(short_urls):
                if existing.id == short_url.id:
                    short_urls[index] = short_url
                    break
            else:
                short_urls.append(short_url)

            self._dump(short_urls)
        except DataStoreError:
            logger.exception(
                'Failed to save short URL to storage.',
                extra={'category': LogCategory.STORE, 'shortcode': short_url.shortcode},
            )
            raise

        logger.info(
            'Short URL saved to storage: %s.',
            short_url.shortcode,
            extra={'category': LogCategory.STORE, 'shortcode': short_url.shortcode},
        )
        return self

    def all(self) -> list[ShortURLModel]:
        """Retrieve every stored record

        Never raises. A corrupted document or an unreachable storage is
        logged and reported as an empty record set.
        """
        try:
            return self._load()
        except (CorruptedDataError, DataStoreError) as e:
            logger.error(
                'Failed to retrieve short URLs from storage.',
                extra={'category': LogCategory.STORE, 'reason': str(e), 'error': e.__class__.__name__},
            )
            return []

    @beartype
    def get(self, shortcode: str) -> ShortURLModel | None:
        """Retrieve a record by short code, detecting expiry lazily

        When the record is past its expiry and not flagged yet, the expiry
        flag is set and persisted before the record is returned. A failure to
        persist the flag is logged; the flagged record is still returned.

        Args:
            shortcode (str):
                The short code to look up.

        Returns:
            ShortURLModel | None:
                The record if found, otherwise None.

        Example:
            >>> dao.get('abc123')
            ShortURLModel(id='...', target='https://example.com', shortcode='abc123', ...)
        """
        short_url = next((item for item in self.all() if item.shortcode == shortcode), None)
        if short_url is None:
            return None

        if not short_url.is_expired and short_url.has_expired(self.clock()):
            short_url = short_url.mark_expired()
            logger.warning(
                'Accessed expired short URL: %s.',
                shortcode,
                extra={'category': LogCategory.STORE, 'shortcode': shortcode},
            )
            try:
                self.save(short_url)
            except DataStoreError:
                pass  # already logged by save()

        return short_url

    @beartype
    def add_click(self, shortcode: str, click: ClickModel) -> ClickOutcome:
        """Append a click to a live record

        Missing and expired records drop the click without raising.

        Returns:
            ClickOutcome:
                RECORDED when the click was persisted, otherwise NOT_FOUND or EXPIRED.

        Raises:
            DataStoreError:
                If the storage can't be read back or written.
        """
        short_url = self.get(shortcode)
        if short_url is None:
            logger.info('Dropped click for unknown short URL: %s.', shortcode, extra={'category': LogCategory.STORE, 'shortcode': shortcode})
            return ClickOutcome.NOT_FOUND
        if short_url.is_expired:
            logger.info('Dropped click for expired short URL: %s.', shortcode, extra={'category': LogCategory.STORE, 'shortcode': shortcode})
            return ClickOutcome.EXPIRED

        self.save(short_url.with_click(click))
        logger.info('Click recorded for %s.', shortcode, extra={'category': LogCategory.STORE, 'shortcode': shortcode})
        return ClickOutcome.RECORDED

    @beartype
    def exists(self, shortcode: str) -> bool:
        """Check whether any record, expired or not, uses the short code."""
        return any(short_url.shortcode == shortcode for short_url in self.all())

    def sweep_expired(self) -> None:
        """Delete every record past its expiry

        The clock is read once and the surviving records are written back in
        a single write. The number of discarded records is only logged.

        Raises:
            DataStoreError:
                If the storage can't be read or the filtered record set can't
                be written. Nothing is written when the read fails.
        """
        short_urls = self._load_for_write()
        now = self.clock()
        live = [short_url for short_url in short_urls if not short_url.has_expired(now)]
        self._dump(live)

        logger.info(
            'Cleared %s expired short URLs.',
            len(short_urls) - len(live),
            extra={'category': LogCategory.STORE, 'removed': len(short_urls) - len(live), 'remaining': len(live)},
        )
