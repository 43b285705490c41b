"""Import extraction from JS/TS source text."""

from __future__ import annotations

from pathlib import Path

from ts_depgraph.extractor.imports import (
    extract_specifiers,
    filter_candidates,
    is_candidate,
    strip_comments,
)


def read_source(path: Path) -> str:
    return Path(path).read_text(encoding="utf-8", errors="replace")


__all__ = [
    "extract_specifiers",
    "filter_candidates",
    "is_candidate",
    "read_source",
    "strip_comments",
]
