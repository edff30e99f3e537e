"""
RedStore Utils
==============

Support data structures for the store.

Classes:
- ListenerRegistry: slot-id listener storage with cached, copy-free snapshots
"""

from .listener_registry import ListenerRegistry

__all__ = [
    "ListenerRegistry",
]
