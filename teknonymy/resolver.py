"""Teknonym resolution.

A teknonym names a person after their most distant descendant, e.g.
"grandfather of Tom". The descendant is the deepest node of the person's
subtree; when several nodes share the maximum depth the oldest one (earliest
birth date) is chosen, and among equally old ones the first met in child
order.

API:
    resolve(root) -> str
    TeknonymyService(strategy="breadth_first")
        .find_descendant(person) -> (descendant, depth)
        .get_teknonymy(person) -> str
    build_teknonym(person, descendant, depth) -> str
    degree_of_kinship(label, depth) -> str

Two search strategies are available and always agree:
    - depth_first: recursive post-order search. Recursion depth equals the
      tree height, so very tall trees can hit Python's recursion limit.
    - breadth_first: level-order search with two alternating level buffers.
      Memory is bounded by the widest level. This is the default.

The tree is never modified; resolutions can run from several threads over
the same tree.
"""
from __future__ import annotations
from typing import Callable, Dict, List, Optional, Tuple
import logging

from .models import Person

DEPTH_FIRST = "depth_first"
BREADTH_FIRST = "breadth_first"
DEFAULT_STRATEGY = BREADTH_FIRST


def deepest_oldest_recursive(person: Person) -> Tuple[Person, int]:
    """Return (descendant, depth) for the subtree rooted at `person`.

    The result for a node is computed from the results of its children's
    subtrees: keep the deepest, replace on equal depth only when strictly
    older. A leaf is its own answer at depth 0.
    """
    if person.is_leaf():
        return person, 0

    best = None
    best_depth = -1
    for child in person.children:
        cand, depth = deepest_oldest_recursive(child)
        if best is None or depth > best_depth:
            best, best_depth = cand, depth
        elif depth == best_depth and cand.is_older(best):
            best = cand

    return best, best_depth + 1


def deepest_oldest_iterative(person: Person) -> Tuple[Person, int]:
    """Breadth-first variant of `deepest_oldest_recursive`.

    Walks the tree one level at a time. The oldest node of each level is
    remembered; when the next level turns out empty the last winner is the
    answer and the number of levels walked below the root is its depth.
    """
    current: List[Person] = [person]
    nxt: List[Person] = []
    oldest: Optional[Person] = None
    depth = -1  # root level is depth 0

    while current:
        depth += 1
        oldest = None
        for node in current:
            nxt.extend(node.children)
            if oldest is None or node.is_older(oldest):
                oldest = node
        # swap buffers
        current, nxt = nxt, current
        nxt.clear()

    return oldest, depth


STRATEGIES: Dict[str, Callable[[Person], Tuple[Person, int]]] = {
    DEPTH_FIRST: deepest_oldest_recursive,
    BREADTH_FIRST: deepest_oldest_iterative,
}


def degree_of_kinship(label: str, depth: int) -> str:
    """Prefix `label` with 'grand' and 'great-' according to `depth`.

    depth 1 -> 'father', 2 -> 'grandfather', 3 -> 'great-grandfather', ...
    Depth 0 (no descendants) gives an empty string.
    """
    if depth <= 0:
        return ""
    if depth == 1:
        return label
    return "great-" * (depth - 2) + "grand" + label


def build_teknonym(person: Person, descendant: Person, depth: int) -> str:
    """Render '<degree> of <descendant name>' for `person`, or '' at depth 0."""
    if depth == 0:
        return ""
    return f"{degree_of_kinship(person.parenthood(), depth)} of {descendant.name}"


class TeknonymyService:
    """Compute teknonyms with a configurable search strategy."""

    def __init__(self, strategy: str = DEFAULT_STRATEGY):
        if strategy not in STRATEGIES:
            raise ValueError(f"unknown strategy {strategy!r}; expected one of {sorted(STRATEGIES)}")
        self.strategy = strategy
        self._search = STRATEGIES[strategy]

    def find_descendant(self, person: Person) -> Tuple[Person, int]:
        return self._search(person)

    def get_teknonymy(self, person: Person) -> str:
        descendant, depth = self.find_descendant(person)
        logging.debug("teknonymy: root=%s strategy=%s depth=%d", person.name, self.strategy, depth)
        return build_teknonym(person, descendant, depth)


_default_service = TeknonymyService()


def resolve(root: Person) -> str:
    """Return the teknonym of `root`, or '' if `root` has no descendants."""
    return _default_service.get_teknonymy(root)
