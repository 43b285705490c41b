"""Include/exclude policy over root-relative file ids."""

from __future__ import annotations

import fnmatch
import logging
import re
from typing import Iterable

from ts_depgraph.diagnostics import NULL_CHANNEL, DiagnosticChannel, PatternRejected

logger = logging.getLogger(__name__)


def compile_patterns(
    patterns: Iterable[str],
    channel: DiagnosticChannel = NULL_CHANNEL,
) -> list[re.Pattern[str]]:
    """Compile regex patterns, skipping (and reporting) the malformed ones."""
    compiled: list[re.Pattern[str]] = []
    for pattern in patterns:
        try:
            compiled.append(re.compile(pattern))
        except (re.error, TypeError) as e:
            logger.warning("Invalid pattern %r ignored: %s", pattern, e)
            channel.emit(PatternRejected(pattern=str(pattern), error=str(e)))
    return compiled


class PathFilter:
    """Decides which file ids belong in the graph.

    Exclude wins over include. An empty include list admits every file
    that is not excluded.
    """

    def __init__(
        self,
        exclude_patterns: Iterable[str] = (),
        include_patterns: Iterable[str] = (),
        channel: DiagnosticChannel = NULL_CHANNEL,
    ):
        self.exclude = compile_patterns(exclude_patterns, channel)
        self.include = compile_patterns(include_patterns, channel)

    def is_excluded(self, file_id: str) -> bool:
        return any(p.search(file_id) for p in self.exclude)

    def is_included(self, file_id: str) -> bool:
        if not self.include:
            return True
        return any(p.search(file_id) for p in self.include)

    def accepts(self, file_id: str) -> bool:
        return self.is_included(file_id) and not self.is_excluded(file_id)


def is_skipped_dir(name: str, skip_dirs: Iterable[str]) -> bool:
    return any(fnmatch.fnmatch(name, pattern) for pattern in skip_dirs)
