from clickshortener.dao.base.record_storage_base import RecordStorageBase
from clickshortener.dao.base.short_url_base_dao import ShortURLBaseDAO


__all__ = [
    'RecordStorageBase',
    'ShortURLBaseDAO',
]
