"""
RedStore - Reducer-driven Observable State

A small state container: one state value, changed only by dispatching actions
through a pure reducer, with listeners notified after every change.
"""

from .combine import combine_reducers
from .exceptions import (
    DispatchInReducerError,
    InvalidListenerError,
    InvalidReducerError,
    StoreError,
)
from .store import ActionTypes, Reducer, Store, create_store

__all__ = [
    # Store
    "Store",
    "create_store",
    "ActionTypes",
    "Reducer",
    # Composition
    "combine_reducers",
    # Exceptions
    "StoreError",
    "InvalidReducerError",
    "InvalidListenerError",
    "DispatchInReducerError",
]
