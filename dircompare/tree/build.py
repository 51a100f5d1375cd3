"""Filesystem scanning into immutable content trees.

A build reads the whole subtree eagerly. Any ``OSError`` raised while
reading a file or listing a directory aborts the build and reaches the
caller unchanged; partial trees are never returned. Directories are walked
with an explicit stack, so nesting depth is bounded only by the platform's
path length limits.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path

from .types import DirectoryNode, FileNode, Node, node_size

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class _PendingDirectory:
    """A directory whose children are still being built."""

    name: str
    children: dict[str, Node]
    remaining: Iterator[tuple[str, Path]]


def _list_children(directory: Path) -> Iterator[tuple[str, Path]]:
    """Return ``(name, path)`` pairs for ``directory``, closing the scan first."""
    with os.scandir(directory) as entries:
        listed = [(entry.name, Path(entry.path)) for entry in entries]
    return iter(listed)


def _build(path: Path) -> Node:
    """Build the node for ``path``, following symlinks."""
    if path.is_file():
        return FileNode(path.read_bytes())

    stack = [_PendingDirectory(name="", children={}, remaining=_list_children(path))]
    while True:
        current = stack[-1]
        for name, child_path in current.remaining:
            if child_path.is_file():
                current.children[name] = FileNode(child_path.read_bytes())
            else:
                stack.append(_PendingDirectory(name=name, children={}, remaining=_list_children(child_path)))
                break
        else:
            stack.pop()
            node = DirectoryNode(current.children)
            if not stack:
                return node
            stack[-1].children[current.name] = node


def build_node(path: str | os.PathLike[str]) -> Node:
    """Read ``path`` into a ``FileNode`` or a fully built ``DirectoryNode``.

    Anything that is not a readable regular file is listed as a directory,
    so missing paths, special files and broken symlinks surface the
    platform's ``OSError`` from that listing.
    """
    target = Path(path)
    node = _build(target)
    if logger.isEnabledFor(logging.DEBUG):
        kind = "file" if isinstance(node, FileNode) else "directory"
        logger.debug("Built %s tree for %s (%d bytes)", kind, target, node_size(node))
    return node


__all__ = [
    "build_node",
]
