import random
from datetime import datetime, timedelta, UTC

import pytest

from clickshortener.dao import ShortURLDAO
from clickshortener.dao.exceptions import DataStoreError
from clickshortener.dao.memory import MemoryRecordStorage
from clickshortener.models import ClickModel, GeolocationModel, ShortURLModel
from clickshortener.services import MockGeolocation, ShortenerService


# Matches @freeze_time('2025-10-15 12:00:00')
NOW = datetime(2025, 10, 15, 12, 0, 0, tzinfo=UTC)


class CountingStorage(MemoryRecordStorage):
    """Memory storage which counts writes."""

    def __init__(self, payload: str | None = None):
        super().__init__(payload)
        self.writes = 0

    def write_all(self, payload: str) -> None:
        self.writes += 1
        super().write_all(payload)


class ReadOnlyStorage(MemoryRecordStorage):
    """Memory storage whose writes always fail."""

    def write_all(self, payload: str) -> None:
        raise DataStoreError("Can't connect to Redis at redis.test:6379/0.")


class FlakyReadStorage(CountingStorage):
    """Memory storage whose reads numbered in `failing_reads` time out."""

    def __init__(self, payload: str | None = None):
        super().__init__(payload)
        self.reads = 0
        self.failing_reads: set[int] = set()

    def read(self) -> str | None:
        self.reads += 1
        if self.reads in self.failing_reads:
            raise DataStoreError("Can't connect to Redis at redis.test:6379/0.")
        return super().read()


@pytest.fixture
def storage() -> CountingStorage:
    return CountingStorage()


@pytest.fixture
def dao(storage) -> ShortURLDAO:
    return ShortURLDAO(storage)


@pytest.fixture
def make_short_url():
    """Build ShortURLModel instances created at NOW unless told otherwise."""

    def _make(
        shortcode: str = 'abc123',
        *,
        record_id: str | None = None,
        target: str = 'https://example.com/article/123',
        created_at: datetime = NOW,
        validity_minutes: int = 30,
        clicks: tuple = (),
        is_expired: bool = False,
    ) -> ShortURLModel:
        return ShortURLModel(
            id=record_id or f'id-{shortcode}',
            target=target,
            shortcode=shortcode,
            created_at=created_at,
            expires_at=created_at + timedelta(minutes=validity_minutes),
            validity_minutes=validity_minutes,
            clicks=tuple(clicks),
            is_expired=is_expired,
        )

    return _make


@pytest.fixture
def click() -> ClickModel:
    return ClickModel(
        timestamp=NOW,
        referrer='https://news.ycombinator.com/',
        user_agent='Mozilla/5.0 (X11; Linux x86_64)',
        geolocation=GeolocationModel(country='Germany', city='Berlin', ip='192.168.1.3'),
    )


@pytest.fixture
def service(dao) -> ShortenerService:
    """Service with seeded randomness and predictable record ids."""
    ids = (f'rec{n}' for n in range(1, 1000))
    return ShortenerService(
        dao,
        geolocator=MockGeolocation(rng=random.Random(7)),
        rng=random.Random(42),
        id_factory=lambda: next(ids),
    )
