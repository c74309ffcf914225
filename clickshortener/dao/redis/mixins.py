"""Redis mixin shared by Redis-backed record storages.

Responsibilities:
    - Build (or adopt) the Redis client from the lambda's `redis` config section
    - Namespace keys with the application prefix
    - PING Redis before the storage is handed out

Classes:
    - RedisClientMixin: Client setup, key schema and healthcheck for Redis-backed storage.

Example:
    Typical usage with a storage implementation:

        >>> class RedisRecordStorage(RedisClientMixin, RecordStorageBase):
        ...     pass
        ...
        >>> storage = RedisRecordStorage(redis_host='redis.internal', prefix='clickshortener:prod')
        >>> storage.keys.records_key()
        'clickshortener:prod:url_shortener_data'
"""

import redis

from clickshortener.dao.redis.redis_key_schema import RedisKeySchema
from clickshortener.dao.exceptions import DataStoreError


# Errors meaning "Redis is not reachable right now"
CONNECTIVITY_ERRORS = (redis.exceptions.ConnectionError, redis.exceptions.TimeoutError)


class RedisClientMixin:
    """Redis client setup and healthcheck for Redis-backed storage.

    Attributes:
        redis (redis.Redis):
            Client used for every document read and write.

        keys (RedisKeySchema):
            Key names, namespaced with the application prefix.
    """

    def __init__(
        self,
        redis_host: str | None = 'localhost',
        redis_port: int | None = 6379,
        redis_db: int | None = 0,
        redis_decode_responses: bool | None = True,
        redis_username: str | None = None,
        redis_password: str | None = None,
        redis_socket_timeout: float | None = None,
        redis_client: redis.Redis | None = None,
        prefix: str | None = None,
    ):
        """Adopt `redis_client` or connect with the `redis_*` parameters

        The `redis_*` names match the keys of the lambda's `redis` config
        section once prefixed, so a config section can be splatted in as-is.

        Args:
            redis_host, redis_port, redis_db:
                Server address. Port and db accept numeric strings.
            redis_decode_responses (bool | None):
                Decode replies to str. Defaults to True.
            redis_username, redis_password:
                Credentials, if the server requires them.
            redis_socket_timeout (float | None):
                Seconds before a command gives up. None waits forever.
            redis_client (redis.Redis | None):
                Pre-initialized client. Connection parameters are ignored when given.
            prefix (str | None):
                Key namespace, e.g. 'clickshortener:prod'.

        Raises:
            DataStoreError:
                If Redis doesn't answer the initial PING.
        """
        if redis_client is None:
            redis_client = redis.Redis(
                host=redis_host,
                port=int(redis_port),
                db=int(redis_db),
                decode_responses=redis_decode_responses,
                username=redis_username,
                password=redis_password,
                socket_timeout=redis_socket_timeout,
            )

        self.redis = redis_client
        self.keys = RedisKeySchema(prefix=prefix)

        self._healthcheck()

    def _healthcheck(self, raise_error: bool = True) -> bool:
        """PING Redis

        Returns:
            bool: True if Redis answered. False if not and raise_error is False.

        Raises:
            DataStoreError:
                If Redis didn't answer and raise_error is True.
        """
        try:
            self.redis.ping()
        except CONNECTIVITY_ERRORS as e:
            if not raise_error:
                return False
            info = self.redis.connection_pool.connection_kwargs
            raise DataStoreError(
                f"Can't connect to Redis at {info.get('host')}:{info.get('port')}/{info.get('db')}. "
                'Check the provided configuration parameters.'
            ) from e
        return True
