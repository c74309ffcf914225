"""Exceptions related to Data Access Objects (DAO) operations.

Classes:
    DAOError:
        Generic base class for DAO-related exceptions.

    DataStoreError:
        Raised when there is an error in the data store (e.g., connection issues, timeouts, OOM, etc.).

    CorruptedDataError:
        Raised when the stored document can't be decoded into short URL records.

Example:
    >>> from clickshortener.dao.exceptions import CorruptedDataError
    >>> raise CorruptedDataError("Stored document is not a JSON array.")
    Traceback (most recent call last):
        ...
    clickshortener.dao.exceptions.CorruptedDataError: Stored document is not a JSON array.
"""


class DAOError(Exception):
    """Generic base class for DAO-related exceptions."""

    pass


class DataStoreError(DAOError):
    """Exception raised when there is an error in the data store.

    e.g. connection issues, timeouts, OOM, etc.
    """

    pass


class CorruptedDataError(DAOError):
    """Exception raised when the stored document can't be decoded."""

    pass
