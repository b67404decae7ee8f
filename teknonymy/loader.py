"""Read and write family trees as JSON documents.

A document holds a single root node:

    {"name": "John", "sex": "M", "birth_date": "1946-01-01T00:00:00",
     "children": [{"name": "Holly", "sex": "F", "birth_date": "1970-05-02"}]}

`children` may be omitted or null for leaves.

Every generation adds two levels of JSON nesting, and the json module gives
up past the interpreter's recursion limit (a few hundred generations by
default). Such documents are reported as ValueError; trees built in memory
have no depth limit.
"""
from __future__ import annotations
from pathlib import Path
import json
import logging
import os
import tempfile
from typing import Any, Dict, Union

from .models import Person


def tree_from_dict(d: Dict[str, Any]) -> Person:
    return Person.from_dict(d)


def load_tree(path: Union[str, Path]) -> Person:
    """Load the tree stored at `path`.

    Raises FileNotFoundError when the file is missing and ValueError when it
    is not valid JSON, is nested too deeply, or does not describe a tree.
    """
    p = Path(path)
    logging.info("loading tree from %s", p)
    with p.open("r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except RecursionError:
            raise ValueError(f"tree in {p} is too deep to decode") from None
    return tree_from_dict(data)


def save_tree(path: Union[str, Path], person: Person) -> None:
    """Write `person` and its subtree to `path` atomically.

    Raises ValueError when the tree is too deep to encode; `path` is left
    untouched in that case.
    """
    p = Path(path)
    try:
        text = json.dumps(person.to_dict(), ensure_ascii=False, indent=2)
    except RecursionError:
        raise ValueError(f"tree rooted at {person.name!r} is too deep to encode") from None
    p.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp = tempfile.mkstemp(dir=str(p.parent))
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(text)
        os.replace(tmp, str(p))
    finally:
        if Path(tmp).exists():
            Path(tmp).unlink()
