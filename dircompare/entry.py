"""Comparable snapshots of files and directories.

``Entry`` compares a filesystem object including its own name. ``Content``
compares only what the object holds, so two directories with different
names but identical children are equal as ``Content`` and unequal as
``Entry``. Names below the root always take part in both comparisons.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from .tree import DirectoryNode, FileNode, Node, build_node


class InvalidEntryPath(ValueError):
    """Raised when a path has no final component to use as an entry name."""

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self.path = Path(path)
        super().__init__(f"{str(path)!r} has no entry name; cannot create an entry for it")


def entry_name(path: str | os.PathLike[str]) -> str:
    """Return the final component of ``path`` or raise ``InvalidEntryPath``.

    Roots, ``.`` and paths ending in ``..`` have no name of their own.
    """
    name = Path(path).name
    if not name or name == "..":
        raise InvalidEntryPath(path)
    return name


@dataclass(frozen=True)
class Content:
    """The content of a file (its bytes) or a directory (its named children)."""

    node: Node

    @classmethod
    def of(cls, path: str | os.PathLike[str]) -> Content:
        """Read the file or directory at ``path``.

        I/O failures anywhere in the subtree propagate as the original
        ``OSError``.
        """
        return cls(build_node(path))

    @property
    def is_file(self) -> bool:
        """Whether this is the content of a regular file."""
        return isinstance(self.node, FileNode)

    @property
    def is_dir(self) -> bool:
        """Whether this is the content of a directory."""
        return isinstance(self.node, DirectoryNode)


@dataclass(frozen=True)
class Entry:
    """A file or directory together with its own name."""

    name: str
    content: Content

    @classmethod
    def at(cls, path: str | os.PathLike[str]) -> Entry:
        """Read the entry at ``path``, named after its final component.

        Raises ``InvalidEntryPath`` before touching the filesystem when the
        path has no name, otherwise bubbles ``OSError`` from the read.
        """
        name = entry_name(path)
        return cls(name=name, content=Content.of(path))

    @property
    def is_file(self) -> bool:
        """Whether this entry is a regular file."""
        return self.content.is_file

    @property
    def is_dir(self) -> bool:
        """Whether this entry is a directory."""
        return self.content.is_dir


__all__ = [
    "Content",
    "Entry",
    "InvalidEntryPath",
    "entry_name",
]
