from clickshortener.dao.base import RecordStorageBase


class MemoryRecordStorage(RecordStorageBase):
    """Process-local record storage.

    Holds the serialized document as a string, so every DAO read still goes
    through a full decode. Suitable for tests and single-process use.

    Example:
        >>> storage = MemoryRecordStorage()
        >>> storage.read() is None
        True
        >>> storage.write_all('[]')
        >>> storage.read()
        '[]'
    """

    def __init__(self, payload: str | None = None):
        self._payload = payload

    def read(self) -> str | None:
        return self._payload

    def write_all(self, payload: str) -> None:
        self._payload = payload
