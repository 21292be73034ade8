"""Domain-specific exceptions for the datastore."""


class DatastoreError(Exception):
    """Base exception for all confstore errors."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class StorageUnavailableError(DatastoreError):
    """Raised by a storage adapter when the persistent backend is unusable.

    The datastore service treats this as unrecoverable: the first occurrence
    disables all further storage access for the life of the service.
    """

    def __init__(
        self,
        message: str = "Persistent storage is unavailable",
        operation: str | None = None,
        key: str | None = None,
    ):
        super().__init__(message)
        self.operation = operation
        self.key = key
        if operation:
            self.details["operation"] = operation
        if key is not None:
            self.details["key"] = key


class ConfigurationError(DatastoreError):
    """Raised when the datastore configuration is invalid."""

    pass
