"""
RedStore Store - Observable State Container
===========================================

This module provides the Store: a single state cell that changes only through a
reducer, plus a subscription mechanism that tells interested code when it did.

Core Components
---------------

**Store**: Holds the current state. ``dispatch(action)`` runs the reducer,
replaces the state with its result and then calls every subscribed listener.

**create_store**: Factory function returning a new Store. Stores are plain
objects owned by whoever creates them; there is no global store.

**ActionTypes**: Action types reserved by redstore itself.

Basic Usage
-----------

```python
from redstore import create_store

def counter(state, action):
    if state is None:
        state = 0
    if action["type"] == "INCREMENT":
        return state + 1
    return state

store = create_store(counter)
print(store.get_state())  # None, the reducer has not run yet

unsubscribe = store.subscribe(lambda: print("count:", store.get_state()))
store.dispatch({"type": "INCREMENT"})  # Prints: count: 1
unsubscribe()
store.dispatch({"type": "INCREMENT"})  # Nothing printed
```

Notification Rules
------------------

- Listeners are called with no arguments, in registration order, after the new
  state has been stored. Read the state with ``get_state()``.
- Each pass iterates over a snapshot of the listeners taken when the pass
  starts. Subscribing or unsubscribing from inside a listener affects the next
  pass, not the one that is running.
- A listener may call ``dispatch`` again. The nested dispatch runs its own
  complete pass before the outer pass continues.
- If the reducer raises, the exception reaches the caller of ``dispatch``, the
  state is left as it was and no listener is called.
"""

import logging
import threading
from typing import Any, Callable, Generic, Optional, TypeVar

from .exceptions import (
    DispatchInReducerError,
    InvalidListenerError,
    InvalidReducerError,
)
from .util.listener_registry import Listener, ListenerRegistry

logger = logging.getLogger(__name__)

S = TypeVar("S")
A = TypeVar("A")

Reducer = Callable[[Optional[S], A], S]


class ActionTypes:
    """Action types reserved by redstore. Reducers should not handle them."""

    INIT = "@@redstore/INIT"


def _action_type(action: Any) -> Any:
    if isinstance(action, dict):
        return action.get("type", "<untyped>")
    return type(action).__name__


class Store(Generic[S, A]):
    """
    Observable state container driven by a reducer.

    Each Store owns its state, its listeners and a re-entrant lock, so one
    store can be shared between threads while a listener on the dispatching
    thread can still dispatch again.

    Args:
        reducer: Pure function ``(state, action) -> new_state``. Receives
            ``None`` as the state on the first dispatch unless a preloaded
            state was given.
        preloaded_state: Initial value of the state cell.
        prime: Dispatch ``ActionTypes.INIT`` immediately, so the reducer's
            default state is visible before the first real dispatch.

    Raises:
        InvalidReducerError: If ``reducer`` is not callable.
    """

    def __init__(
        self,
        reducer: Reducer,
        preloaded_state: Optional[S] = None,
        *,
        prime: bool = False,
    ):
        if not callable(reducer):
            raise InvalidReducerError(
                f"Expected the reducer to be callable, got {type(reducer).__name__}"
            )

        self._reducer = reducer
        self._state: Optional[S] = preloaded_state
        self._listeners = ListenerRegistry()
        self._lock = threading.RLock()
        self._is_reducing = False

        if prime:
            self.dispatch({"type": ActionTypes.INIT})

    def get_state(self) -> Optional[S]:
        """Return the current state (by reference, not a copy)."""
        return self._state

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """
        Register a listener to be called after every dispatch.

        The listener is not called right away. Subscribing the same callable
        twice creates two registrations, each removed by its own token.

        Returns:
            A function that removes this registration. Calling it more than
            once does nothing after the first call.

        Raises:
            InvalidListenerError: If ``listener`` is not callable.
        """
        if not callable(listener):
            raise InvalidListenerError(
                f"Expected the listener to be callable, got {type(listener).__name__}"
            )

        with self._lock:
            slot_id = self._listeners.add(listener)
            logger.debug(f"Subscribed listener {slot_id} to {self!r}")

        def unsubscribe():
            with self._lock:
                if self._listeners.remove(slot_id):
                    logger.debug(f"Unsubscribed listener {slot_id} from {self!r}")

        return unsubscribe

    def dispatch(self, action: A) -> S:
        """
        Apply an action: run the reducer, store its result, notify listeners.

        Returns:
            The new state.

        Raises:
            DispatchInReducerError: If called while the reducer is running.
            Exception: Anything raised by the reducer, unchanged. The state is
                not modified and no listener is called in that case.
        """
        with self._lock:
            if self._is_reducing:
                raise DispatchInReducerError(
                    "Reducers may not dispatch actions; "
                    f"got {_action_type(action)!r} while reducing"
                )

            self._is_reducing = True
            try:
                next_state = self._reducer(self._state, action)
            except Exception as e:
                logger.debug(
                    f"Reducer failed for action {_action_type(action)!r}: {e!r}"
                )
                raise
            finally:
                self._is_reducing = False

            self._state = next_state

            listeners = self._listeners.snapshot()
            logger.debug(
                f"Dispatched {_action_type(action)!r}, "
                f"notifying {len(listeners)} listeners"
            )
            for listener in listeners:
                listener()

            return next_state

    def __repr__(self) -> str:
        name = getattr(self._reducer, "__name__", type(self._reducer).__name__)
        return f"Store(reducer={name}, listeners={len(self._listeners)})"


def create_store(
    reducer: Reducer, preloaded_state: Optional[S] = None, *, prime: bool = False
) -> Store:
    """
    Create a new Store driven by ``reducer``.

    See ``Store`` for the meaning of the arguments.
    """
    return Store(reducer, preloaded_state, prime=prime)


__all__ = [
    "ActionTypes",
    "Reducer",
    "Store",
    "create_store",
]
