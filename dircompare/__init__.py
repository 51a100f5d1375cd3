"""Public package surface for dircompare.

Build an ``Entry`` or ``Content`` for a file/directory path and compare it
with ``==`` like any other value. Comparison is recursive over names and
bytes.
"""

from __future__ import annotations

from .entry import Content, Entry, InvalidEntryPath

__all__ = ["Content", "Entry", "InvalidEntryPath"]
