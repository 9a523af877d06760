from __future__ import annotations
import json
import math
from typing import Optional, Any, Dict, Iterator, List

try:
    from typing import Self
except ImportError:
    from typing_extensions import Self

from nhxtree.exceptions import NewickParseError


class Node:
    """
    Structured tree node produced by the parser.

    ``name``, ``length`` and ``children`` are fixed fields. NHX annotation tags
    live in the dedicated ``tags`` mapping; keys and values are raw strings.
    ``children`` is ``None`` for a node that had no branchset in the input.

    Nodes are built bottom-up by the translator and hold no reference to their
    parent, so every child is owned by exactly one parent.
    """

    __slots__ = ("name", "length", "tags", "children", "errors")

    name: str
    length: float
    tags: Dict[str, str]
    children: Optional[List[Self]]
    errors: List[NewickParseError]

    def __init__(
        self,
        name: str = "",
        length: float = 0.0,
        tags: Optional[Dict[str, str]] = None,
        children: Optional[List[Self]] = None,
        errors: Optional[List[NewickParseError]] = None,
    ):
        # Avoid mutable default arguments; create fresh containers
        self.name = name
        self.length = length
        self.tags = dict(tags) if tags is not None else {}
        self.children = list(children) if children is not None else None
        self.errors = list(errors) if errors is not None else []

    # ------------------------------------------------------------------------
    # Structure
    # ------------------------------------------------------------------------
    def is_leaf(self) -> bool:
        return not self.children

    @property
    def has_branchset(self) -> bool:
        return self.children is not None

    @property
    def leaves(self) -> List[Self]:
        """All leaf nodes of this subtree, left to right."""
        return [node for node in self.traverse() if node.is_leaf()]

    def traverse(self) -> Iterator[Self]:
        """Pre-order iteration over this subtree without recursion."""
        stack: List[Self] = [self]
        while stack:
            node = stack.pop()
            yield node
            if node.children:
                stack.extend(reversed(node.children))

    def get_child(self, *path: int) -> Self:
        """
        Follow a path of child indices from this node.

        ``tree.get_child(2, 0)`` is the first child of the third child.
        """
        node = self
        for i in path:
            if not node.children or i >= len(node.children):
                raise IndexError(f"Node {node.name!r} has no child at index {i}")
            node = node.children[i]
        return node

    def has_errors(self) -> bool:
        return any(node.errors for node in self.traverse())

    # ------------------------------------------------------------------------
    # Equality
    # ------------------------------------------------------------------------
    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Node):
            return NotImplemented
        same_length = self.length == other.length or (
            math.isnan(self.length) and math.isnan(other.length)
        )
        return (
            self.name == other.name
            and same_length
            and self.tags == other.tags
            and self.children == other.children
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        parts = [f"name={self.name!r}", f"length={self.length!r}"]
        if self.tags:
            parts.append(f"tags={self.tags!r}")
        if self.children is not None:
            parts.append(f"children={len(self.children)}")
        return f"Node({', '.join(parts)})"

    # ------------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------------
    def to_dict(self, flatten_tags: bool = False) -> Dict[str, Any]:
        """
        Convert the subtree to plain dictionaries.

        With ``flatten_tags`` the tags are merged into the record next to
        ``name`` and ``length`` (the classic NHX-to-JSON layout) and the child
        list is stored under ``branchset``. Fixed fields win over tags with the
        same key.
        """
        if flatten_tags:
            record: Dict[str, Any] = dict(self.tags)
            record["name"] = self.name
            record["length"] = self.length
            if self.children is not None:
                record["branchset"] = [
                    child.to_dict(flatten_tags=True) for child in self.children
                ]
            return record

        record = {"name": self.name, "length": self.length, "tags": dict(self.tags)}
        if self.children is not None:
            record["children"] = [child.to_dict() for child in self.children]
        if self.errors:
            record["errors"] = [str(error) for error in self.errors]
        return record

    def to_json(self, flatten_tags: bool = False) -> str:
        return json.dumps(self.to_dict(flatten_tags=flatten_tags), indent=4)
