from clickshortener.dao.redis.redis_key_schema import RedisKeySchema
from clickshortener.dao.redis.mixins import RedisClientMixin
from clickshortener.dao.redis.redis_record_storage import RedisRecordStorage


__all__ = [
    'RedisKeySchema',
    'RedisClientMixin',
    'RedisRecordStorage',
]
