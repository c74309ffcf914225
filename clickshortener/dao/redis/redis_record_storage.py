"""Redis-backed record storage

Stores the serialized JSON array of all short URL records under a single,
optionally namespaced, Redis key. Every process pointed at the same Redis
database and prefix shares the same record set.

Classes:
    RedisRecordStorage:
        RecordStorageBase implementation on top of one Redis string key.

Example:
    >>> storage = RedisRecordStorage(redis_host='localhost', prefix='clickshortener:dev')
    >>> storage.write_all('[]')
    >>> storage.read()
    '[]'

TODO:
    - Replace the whole-document SET with a WATCH/MULTI check-and-set so
      concurrent writers stop overwriting each other.
"""

from beartype import beartype

from clickshortener.dao.base import RecordStorageBase
from clickshortener.dao.exceptions import CorruptedDataError
from clickshortener.dao.redis.mixins import RedisClientMixin
from clickshortener.dao.redis.helpers import handle_redis_connection_error


class RedisRecordStorage(RedisClientMixin, RecordStorageBase):
    """Redis-based storage for the short URL record document

    Attributes (see RedisClientMixin):
        redis (redis.Redis):
            Redis client used to communicate with the Redis datastore.
        keys (RedisKeySchema):
            Key schema helper for generating namespaced Redis keys.

    Methods:
        read() -> str | None:
            GET the record document. Returns None when the key doesn't exist.
            Raises CorruptedDataError when the stored bytes aren't valid UTF-8.
            Raises DataStoreError on connectivity issues with Redis.

        write_all(payload: str) -> None:
            SET the record document.
            Raises DataStoreError on connectivity issues with Redis.
    """

    @handle_redis_connection_error
    def read(self) -> str | None:
        payload = self.redis.get(self.keys.records_key())
        if isinstance(payload, bytes):
            try:
                payload = payload.decode('utf-8')
            except UnicodeDecodeError as e:
                raise CorruptedDataError(f'Stored document is not valid UTF-8: {e}') from e
        return payload

    @handle_redis_connection_error
    @beartype
    def write_all(self, payload: str) -> None:
        self.redis.set(self.keys.records_key(), payload)
