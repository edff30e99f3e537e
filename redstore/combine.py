"""
RedStore Reducer Composition
============================

``combine_reducers`` turns a mapping of slice name -> slice reducer into one
root reducer whose state is a dict with one entry per slice.

```python
from redstore import combine_reducers, create_store

store = create_store(combine_reducers({"todos": todos, "goals": goals}))
store.dispatch({"type": "ADD_GOAL", "goal": {"id": 0, "name": "Ship it"}})
store.get_state()  # {"todos": [], "goals": [{"id": 0, "name": "Ship it"}]}
```

Every slice reducer sees every action. A slice reducer that does not handle an
action must return its input slice unchanged, and must return its own default
when the slice is ``None``.
"""

from typing import Any, Dict, Mapping, Optional

from .exceptions import InvalidReducerError
from .store import Reducer


def combine_reducers(reducers: Mapping[str, Reducer]) -> Reducer:
    """
    Combine slice reducers into a single root reducer.

    The combined reducer always returns a new dict, even when no slice changed.
    Slices are computed in the mapping's order. Keys of the incoming state that
    have no reducer are not carried over.

    Args:
        reducers: Slice name -> reducer for that slice. Copied, so later changes
            to the caller's mapping do not affect the combined reducer.

    Raises:
        InvalidReducerError: If any value of ``reducers`` is not callable.
    """
    slice_reducers: Dict[str, Reducer] = dict(reducers)

    for key, reducer in slice_reducers.items():
        if not callable(reducer):
            raise InvalidReducerError(
                f"Reducer for slice {key!r} is not callable: {reducer!r}"
            )

    def combination(state: Optional[Mapping[str, Any]], action: Any) -> Dict[str, Any]:
        if state is None:
            state = {}
        return {
            key: reducer(state.get(key), action)
            for key, reducer in slice_reducers.items()
        }

    combination.__name__ = f"combined({', '.join(slice_reducers)})"
    return combination


__all__ = ["combine_reducers"]
