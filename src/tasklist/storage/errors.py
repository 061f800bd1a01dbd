"""Storage exceptions."""


class StorageError(Exception):
    """Base exception for key-value storage errors."""

    pass


class StorageUnavailableError(StorageError):
    """The storage service could not be reached."""

    pass


class StorageResponseError(StorageError):
    """The storage service answered with something unexpected."""

    pass
