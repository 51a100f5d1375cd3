"""Content-tree primitives shared by ``Entry`` and ``Content``.

This package contains the non-public comparison core:
- file/directory node datatypes with structural equality
- the eager filesystem builder that produces them
"""

from __future__ import annotations

from .types import DirectoryNode, FileNode, Node, node_size, nodes_equal
from .build import build_node

__all__ = [
    "FileNode",
    "DirectoryNode",
    "Node",
    "nodes_equal",
    "node_size",
    "build_node",
]
