from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Tuple


PARENTHOOD = {"M": "father", "F": "mother"}
# used when sex is unset or outside the known categories
NEUTRAL_PARENTHOOD = "parent"


def _parse_birth_date(raw: Any) -> datetime:
    """Parse an ISO-8601 birth date into a naive datetime.

    Dates carrying an offset are converted to UTC and the offset dropped, so
    every birth date of a tree compares with every other.
    """
    if isinstance(raw, datetime):
        dt = raw
    elif not isinstance(raw, str) or not raw.strip():
        raise ValueError(f"birth_date must be an ISO-8601 string, got {raw!r}")
    else:
        try:
            dt = datetime.fromisoformat(raw.strip())
        except ValueError:
            raise ValueError(f"invalid birth_date {raw!r}") from None
    if dt.tzinfo is not None:
        dt = dt.astimezone(timezone.utc).replace(tzinfo=None)
    return dt


def _children_of(node: Any) -> List[Any]:
    """Validate one serialized node and return its children list."""
    if not isinstance(node, dict):
        raise ValueError(f"person node must be an object, got {type(node).__name__}")
    name = node.get("name")
    if not isinstance(name, str) or not name:
        raise ValueError("person node is missing a name")
    kids = node.get("children")
    if kids is None:
        return []
    if not isinstance(kids, list):
        raise ValueError(f"children of {name!r} must be a list")
    return kids


@dataclass(frozen=True)
class Person:
    name: str
    # sex stored as a one-letter string: 'M', 'F', anything else or None is unknown
    sex: Optional[str]
    birth_date: datetime
    children: Tuple["Person", ...] = field(default_factory=tuple)

    def __post_init__(self):
        # accept None or any iterable of children, keep an immutable tuple
        kids = self.children
        if kids is None:
            kids = ()
        elif not isinstance(kids, tuple):
            kids = tuple(kids)
        object.__setattr__(self, "children", kids)

    def is_leaf(self) -> bool:
        return not self.children

    def is_older(self, other: "Person") -> bool:
        """True if this person was born strictly before `other`."""
        return self.birth_date < other.birth_date

    def parenthood(self) -> str:
        """Return 'father', 'mother' or the neutral 'parent' label."""
        key = self.sex.upper() if isinstance(self.sex, str) else None
        return PARENTHOOD.get(key, NEUTRAL_PARENTHOOD)

    def _node_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "sex": self.sex,
            "birth_date": self.birth_date.isoformat(),
            "children": [],
        }

    def to_dict(self) -> Dict[str, Any]:
        """Serialize the whole subtree without recursing once per generation."""
        root = self._node_dict()
        stack = [(self, root)]
        while stack:
            person, out = stack.pop()
            for child in person.children:
                cd = child._node_dict()
                out["children"].append(cd)
                stack.append((child, cd))
        return root

    @staticmethod
    def from_dict(d: Dict[str, Any]) -> "Person":
        """Build a tree from nested dicts.

        Nodes are visited with an explicit stack so tall trees do not hit the
        recursion limit. Each node is built once all of its children are.
        """
        built: List[Person] = []
        stack = [(d, False)]
        while stack:
            node, expanded = stack.pop()
            if not expanded:
                kids = _children_of(node)
                stack.append((node, True))
                # reversed so the first child is finished first
                for child in reversed(kids):
                    stack.append((child, False))
                continue
            n = len(node.get("children") or [])
            children = ()
            if n:
                children = tuple(built[-n:])
                del built[-n:]
            built.append(
                Person(
                    name=node["name"],
                    sex=node.get("sex"),
                    birth_date=_parse_birth_date(node.get("birth_date")),
                    children=children,
                )
            )
        return built[0]
