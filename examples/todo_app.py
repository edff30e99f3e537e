#!/usr/bin/env python3
"""
RedStore TODO Application
=========================

A small todo and goal tracker built on a single combined store. It shows the
usual pieces of an application sitting on top of redstore:

- Action type constants and action creator functions
- One reducer per state slice, combined with ``combine_reducers``
- A listener that logs every new state

To run it:
```bash
$ pip install -e . && python examples/todo_app.py
```
"""

import logging

from redstore import combine_reducers, create_store

# ==============================================================================================
# Configuration and Constants
# ==============================================================================================

LOG_LEVEL = logging.INFO

ADD_TODO = "ADD_TODO"
REMOVE_TODO = "REMOVE_TODO"
TOGGLE_TODO = "TOGGLE_TODO"
ADD_GOAL = "ADD_GOAL"
REMOVE_GOAL = "REMOVE_GOAL"

logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)

# ==============================================================================================
# Action Creators
# ==============================================================================================


def add_todo_action(todo):
    return {"type": ADD_TODO, "todo": todo}


def remove_todo_action(todo_id):
    return {"type": REMOVE_TODO, "id": todo_id}


def toggle_todo_action(todo_id):
    return {"type": TOGGLE_TODO, "id": todo_id}


def add_goal_action(goal):
    return {"type": ADD_GOAL, "goal": goal}


def remove_goal_action(goal_id):
    return {"type": REMOVE_GOAL, "id": goal_id}


# ==============================================================================================
# Reducers
# ==============================================================================================


def todos(state, action):
    """Todo list slice. Each todo is a dict with id, name and complete."""
    if state is None:
        state = []

    kind = action["type"]
    if kind == ADD_TODO:
        return state + [action["todo"]]
    elif kind == REMOVE_TODO:
        return [todo for todo in state if todo["id"] != action["id"]]
    elif kind == TOGGLE_TODO:
        return [
            todo
            if todo["id"] != action["id"]
            else {**todo, "complete": not todo["complete"]}
            for todo in state
        ]
    else:
        return state


def goals(state, action):
    """Long-term goal list slice."""
    if state is None:
        state = []

    kind = action["type"]
    if kind == ADD_GOAL:
        return state + [action["goal"]]
    elif kind == REMOVE_GOAL:
        return [goal for goal in state if goal["id"] != action["id"]]
    else:
        return state


app = combine_reducers({"todos": todos, "goals": goals})


# ==============================================================================================
# Demo
# ==============================================================================================


def main():
    store = create_store(app)

    unsubscribe = store.subscribe(
        lambda: logger.info(f"The new state is: {store.get_state()}")
    )

    store.dispatch(add_todo_action({"id": 0, "name": "Walk the dog", "complete": False}))
    store.dispatch(add_todo_action({"id": 1, "name": "Read a book", "complete": True}))
    store.dispatch(add_goal_action({"id": 0, "name": "Learn Redux"}))
    store.dispatch(toggle_todo_action(0))
    store.dispatch(remove_todo_action(1))
    store.dispatch(remove_goal_action(0))

    unsubscribe()
    return store


if __name__ == "__main__":
    main()
