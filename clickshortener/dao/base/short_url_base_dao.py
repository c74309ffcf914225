"""Abstract base class for ShortURL data access objects (DAOs).

This class establishes a consistent contract for the authoritative keeper of
all short URL records, regardless of the underlying storage mechanism (e.g.,
in-memory, Redis).

Responsibilities:
    - Provide an interface for saving and retrieving ShortURLModel objects.
    - Detect expiry lazily on lookup and persist the expiry flag.
    - Append clicks to live records.
    - Delete expired records in bulk.

Example:
    Typical usage with a storage-specific implementation:

        >>> from clickshortener.dao import ShortURLDAO
        >>> from clickshortener.dao.memory import MemoryRecordStorage

        >>> dao = ShortURLDAO(MemoryRecordStorage())
        >>> dao.save(short_url)
        <ShortURLDAO>

        >>> retrieved = dao.get('a1b2c3')
        >>> print(retrieved.target)
        https://example.com/blog/article-123

        >>> dao.exists('a1b2c3')
        True
"""

from abc import ABC, abstractmethod

from clickshortener.models import ClickModel, ClickOutcome, ShortURLModel


class ShortURLBaseDAO(ABC):
    """Interface for ShortURL data access objects (DAOs).

    Methods:
        save(short_url: ShortURLModel) -> ShortURLBaseDAO:
            Upsert a record by id, preserving all other records.
            Raises DataStoreError on connection or write failure.

        all() -> list[ShortURLModel]:
            Return every record. Never raises: failures are logged and
            yield an empty list.

        get(shortcode: str) -> ShortURLModel | None:
            Retrieve a record by short code, marking it expired (and
            persisting the flag) when it is past its expiry.
            Returns None if not found.

        add_click(shortcode: str, click: ClickModel) -> ClickOutcome:
            Append a click to a live record.
            Expired or missing records drop the click silently.

        exists(shortcode: str) -> bool:
            True if any record (expired or not) uses the short code.

        sweep_expired() -> None:
            Delete every record past its expiry in a single write.

    Subclassing:
        Implementations must extend this class and implement all abstract methods.
    """

    @abstractmethod
    def save(self, short_url: ShortURLModel) -> 'ShortURLBaseDAO':
        """Upsert a ShortURLModel by id.

        Args:
            short_url (ShortURLModel):
                The record to insert or replace.

        Returns:
            ShortURLBaseDAO: self (for method chaining)

        Raises:
            DataStoreError:
                If there is an error in the data store.
        """
        pass

    @abstractmethod
    def all(self) -> list[ShortURLModel]:
        """Retrieve every stored ShortURLModel.

        Returns:
            list[ShortURLModel]: All records, or an empty list on failure.
        """
        pass

    @abstractmethod
    def get(self, shortcode: str) -> ShortURLModel | None:
        """Retrieve a ShortURLModel by its short code.

        Args:
            shortcode (str):
                The short code of the record to be retrieved.

        Returns:
            ShortURLModel | None: The record if found, otherwise None.
        """
        pass

    @abstractmethod
    def add_click(self, shortcode: str, click: ClickModel) -> ClickOutcome:
        """Append a click to a live record.

        Args:
            shortcode (str):
                The short code that was accessed.
            click (ClickModel):
                The click to append.

        Returns:
            ClickOutcome: RECORDED, EXPIRED or NOT_FOUND.

        Raises:
            DataStoreError:
                If the updated record can't be written.
        """
        pass

    @abstractmethod
    def exists(self, shortcode: str) -> bool:
        """Check whether a short code is taken."""
        pass

    @abstractmethod
    def sweep_expired(self) -> None:
        """Delete every expired record.

        Raises:
            DataStoreError:
                If the filtered record set can't be written.
        """
        pass
