from typing import Any

from clickshortener.dao import ShortURLDAO
from clickshortener.dao.redis import RedisRecordStorage
from clickshortener.models import ShortURLModel
from clickshortener.services import ShortenerService
from clickshortener.types import LambdaConfiguration, LambdaEvent
from clickshortener.utils.config import app_prefix
from clickshortener.utils.helpers import get_short_url


def build_service(app_config: LambdaConfiguration) -> ShortenerService:
    """Wire a ShortenerService to the Redis record storage described by the lambda's config

    Raises:
        KeyError: If the config has no 'redis' section.
        DataStoreError: If Redis is unreachable.
    """
    redis_config = {f'redis_{k}': v for k, v in app_config['redis'].items()}
    storage = RedisRecordStorage(**redis_config, prefix=app_prefix())
    return ShortenerService(ShortURLDAO(storage))


def serialize_short_url(short_url: ShortURLModel, event: LambdaEvent) -> dict[str, Any]:
    return {**short_url.to_dict(), 'shortUrl': get_short_url(short_url.shortcode, event)}
