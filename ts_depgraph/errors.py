"""Exceptions raised by the graph pipeline."""

from __future__ import annotations

from pathlib import Path


class DepGraphError(Exception):
    """Base class for ts-depgraph errors."""


class RootDirectoryError(DepGraphError, ValueError):
    """The analysis root is missing or is not a directory."""

    def __init__(self, root: Path, reason: str):
        self.root = root
        self.reason = reason
        super().__init__(f"{reason}: {root}")
