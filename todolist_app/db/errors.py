"""
Exception types shared by the record store and the UI boundary.
"""


class TodoStoreError(Exception):
    """Base class for record store failures."""


class StoreUnavailableError(TodoStoreError):
    """The underlying SQLite database could not be opened or written."""


class TaskValidationError(ValueError):
    """Form input rejected before it reaches the store (e.g. empty title)."""
