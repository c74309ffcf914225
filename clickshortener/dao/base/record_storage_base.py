"""Abstract base class for durable record storage.

A record storage is a key-value slot addressed by one fixed key which holds
the serialized JSON array of all short URL records. It knows nothing about
records; encoding, decoding and all record semantics belong to the DAO.

NOTE:
    Every DAO operation is a read-modify-write of the whole document. Two
    writers sharing the same storage can interleave, in which case the last
    write wins and the other one is lost.
"""

from abc import ABC, abstractmethod


class RecordStorageBase(ABC):
    """Interface for the durable document holding all short URL records.

    Methods:
        read() -> str | None:
            Return the stored document, or None if nothing was stored yet.
            Raises DataStoreError on connection or read failure.

        write_all(payload: str) -> None:
            Replace the stored document with payload.
            Raises DataStoreError on connection or write failure.
    """

    @abstractmethod
    def read(self) -> str | None:
        """Return the stored document, or None if nothing was stored yet."""
        pass

    @abstractmethod
    def write_all(self, payload: str) -> None:
        """Replace the stored document."""
        pass
