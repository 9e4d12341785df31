"""Pytest configuration and shared fixtures."""
import pytest

from treerow.core.log import Log
from treerow.ui.model import flatten_tree


UNIT = 10


@pytest.fixture(autouse=True)
def _quiet_log():
    """Every test starts with a quiet, empty log and leaves it that way."""
    Log.set_verbosity(0)
    Log.clear()
    yield
    Log.set_verbosity(0)
    Log.clear()


@pytest.fixture
def unit():
    return UNIT


@pytest.fixture
def small_tree():
    """
    A ┬ B
      └ C ┬ D
          └ E
    F
    """
    return [
        {"id": "a", "title": "A", "children": [
            {"id": "b", "title": "B"},
            {"id": "c", "title": "C", "children": [
                {"id": "d", "title": "D"},
                {"id": "e", "title": "E"},
            ]},
        ]},
        {"id": "f", "title": "F"},
    ]


@pytest.fixture
def small_rows(small_tree):
    return flatten_tree(small_tree)
