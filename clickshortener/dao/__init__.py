from clickshortener.dao.base import RecordStorageBase, ShortURLBaseDAO
from clickshortener.dao.short_url_dao import ShortURLDAO


__all__ = [
    'RecordStorageBase',
    'ShortURLBaseDAO',
    'ShortURLDAO',
]
