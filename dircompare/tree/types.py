"""Immutable in-memory tree nodes for file and directory content.

Equality, hashing and size walks never recurse on the Python stack, so
arbitrarily deep trees compare without hitting the interpreter's recursion
limit.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType


@dataclass(frozen=True)
class FileNode:
    """Raw byte content of a regular file."""

    data: bytes

    def __repr__(self) -> str:
        return f"FileNode(<{len(self.data)} bytes>)"


@dataclass(frozen=True)
class DirectoryNode:
    """Directory content as an unordered mapping of child name to child node.

    ``children`` is stored as a read-only view over a private copy, so a
    node never shares state with the mapping it was constructed from.
    Equality compares names and nodes, never sibling order. The hash is
    computed once from the children's own cached hashes.
    """

    children: Mapping[str, "Node"] = field(default_factory=dict)
    _hash: int = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        children = MappingProxyType(dict(self.children))
        object.__setattr__(self, "children", children)
        object.__setattr__(self, "_hash", hash(frozenset((name, hash(child)) for name, child in children.items())))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DirectoryNode):
            return NotImplemented
        return nodes_equal(self, other)

    def __hash__(self) -> int:
        return self._hash

    def __repr__(self) -> str:
        return f"DirectoryNode({sorted(self.children)!r})"


Node = FileNode | DirectoryNode


def nodes_equal(left: Node, right: Node) -> bool:
    """Return whether two trees hold the same names and bytes at every level."""
    pending: list[tuple[Node, Node]] = [(left, right)]
    while pending:
        a, b = pending.pop()
        if a is b:
            continue
        if isinstance(a, FileNode):
            if not isinstance(b, FileNode) or a.data != b.data:
                return False
            continue
        if not isinstance(b, DirectoryNode):
            return False
        # equal trees always share a hash
        if a._hash != b._hash or a.children.keys() != b.children.keys():
            return False
        pending.extend((child, b.children[name]) for name, child in a.children.items())
    return True


def node_size(node: Node) -> int:
    """Return the total number of file bytes held by ``node``."""
    total = 0
    pending: list[Node] = [node]
    while pending:
        current = pending.pop()
        if isinstance(current, FileNode):
            total += len(current.data)
        else:
            pending.extend(current.children.values())
    return total


__all__ = [
    "FileNode",
    "DirectoryNode",
    "Node",
    "nodes_equal",
    "node_size",
]
