"""
RedStore Exceptions
===================

Error types raised by the store and by reducer composition.

Reducer failures are not wrapped: whatever the reducer raises reaches the
caller of ``dispatch`` unchanged, with the store left at its previous state.
"""


class StoreError(Exception):
    """Base class for errors raised by redstore itself."""

    pass


class InvalidReducerError(StoreError, TypeError):
    """Raised when a reducer is not callable."""

    pass


class InvalidListenerError(StoreError, TypeError):
    """Raised when a listener passed to subscribe() is not callable."""

    pass


class DispatchInReducerError(StoreError, RuntimeError):
    """Raised when dispatch() is called while the reducer is running."""

    pass


__all__ = [
    "StoreError",
    "InvalidReducerError",
    "InvalidListenerError",
    "DispatchInReducerError",
]
