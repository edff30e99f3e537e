"""
Shared pytest fixtures and configuration for redstore tests.

The todo and goal reducers below are small application reducers used across
the suite. They follow the reducer rules: ``None`` state becomes the default,
and unknown actions return the input unchanged.
"""

import pytest

from redstore import combine_reducers, create_store

ADD_TODO = "ADD_TODO"
REMOVE_TODO = "REMOVE_TODO"
TOGGLE_TODO = "TOGGLE_TODO"
ADD_GOAL = "ADD_GOAL"
REMOVE_GOAL = "REMOVE_GOAL"


def todos_reducer(state, action):
    if state is None:
        state = []
    kind = action.get("type")
    if kind == ADD_TODO:
        return state + [action["todo"]]
    if kind == REMOVE_TODO:
        return [todo for todo in state if todo["id"] != action["id"]]
    if kind == TOGGLE_TODO:
        return [
            todo
            if todo["id"] != action["id"]
            else {**todo, "complete": not todo["complete"]}
            for todo in state
        ]
    return state


def goals_reducer(state, action):
    if state is None:
        state = []
    kind = action.get("type")
    if kind == ADD_GOAL:
        return state + [action["goal"]]
    if kind == REMOVE_GOAL:
        return [goal for goal in state if goal["id"] != action["id"]]
    return state


def counter_reducer(state, action):
    if state is None:
        state = 0
    kind = action.get("type")
    if kind == "INCREMENT":
        return state + action.get("by", 1)
    if kind == "DECREMENT":
        return state - action.get("by", 1)
    return state


@pytest.fixture
def todos():
    """The todo list reducer."""
    return todos_reducer


@pytest.fixture
def goals():
    """The goal list reducer."""
    return goals_reducer


@pytest.fixture
def counter():
    """An integer counter reducer."""
    return counter_reducer


@pytest.fixture
def counter_store():
    """A fresh store over the counter reducer."""
    return create_store(counter_reducer)


@pytest.fixture
def app_store():
    """A fresh store over the combined todos and goals reducers."""
    return create_store(
        combine_reducers({"todos": todos_reducer, "goals": goals_reducer})
    )
