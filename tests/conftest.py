import sys
from datetime import datetime
from pathlib import Path

import pytest

# Ensure repo root is on sys.path so tests can import the package directly
root = Path(__file__).resolve().parent.parent
if str(root) not in sys.path:
    sys.path.insert(0, str(root))

from teknonymy.models import Person  # noqa: E402


def born(year, month=1, day=1, hour=0, minute=0):
    return datetime(year, month, day, hour, minute)


@pytest.fixture
def john_holly():
    holly = Person("Holly", "F", born(1970))
    return Person("John", "M", born(1946), (holly,))


@pytest.fixture
def three_generations():
    #  John
    #   |
    #  Mary
    #   |
    #  Tom
    tom = Person("Tom", "M", born(1995))
    mary = Person("Mary", "F", born(1970), (tom,))
    return Person("John", "M", born(1946), (mary,))


@pytest.fixture
def tied_tree():
    #          Root
    #        /   |   \
    #       A    B    C
    #       |   / \    \
    #      A1  B1  B2   C1
    #
    # every grandchild sits at depth 2; B2 and C1 share the earliest birth date
    a1 = Person("A1", "M", born(1990, 6, 1))
    b1 = Person("B1", "F", born(1989, 3, 1))
    b2 = Person("B2", "M", born(1985, 1, 1))
    c1 = Person("C1", "F", born(1985, 1, 1))
    a = Person("A", "M", born(1960), (a1,))
    b = Person("B", "F", born(1958), (b1, b2))
    c = Person("C", None, born(1962), (c1,))
    return Person("Root", "F", born(1930), (a, b, c))
