"""
Exception types for the search core.

All of these signal programming errors (precondition violations). The heap
and the engine never catch them; they propagate to the caller.
"""


class SearchError(Exception):
    """Base class for every error raised by lattice_search."""


class EmptyQueueError(SearchError, IndexError):
    """Raised when min() or extract_min() is called on an empty queue."""

    def __init__(self, message: str = "queue empty"):
        super().__init__(message)


class ElementNotPresentError(SearchError, ValueError):
    """Raised when change_priority() targets an element not in the queue."""

    def __init__(self, element=None):
        self.element = element
        super().__init__(f"Element not in queue: {element!r}")


class UnsupportedMutationError(SearchError, TypeError):
    """Raised when a caller tries to remove answers through the search iterator."""

    def __init__(self, message: str = "search results cannot be removed"):
        super().__init__(message)


class ConfigurationError(SearchError, ValueError):
    """Raised for invalid SearchConfig values."""


__all__ = [
    'SearchError',
    'EmptyQueueError',
    'ElementNotPresentError',
    'UnsupportedMutationError',
    'ConfigurationError',
]
