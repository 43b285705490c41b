"""Directory walk producing the candidate file list for a build."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from ts_depgraph.diagnostics import NULL_CHANNEL, DiagnosticChannel
from ts_depgraph.models import GraphConfig
from ts_depgraph.resolver.path_resolver import normalize_id
from ts_depgraph.scanner.filters import PathFilter, is_skipped_dir

logger = logging.getLogger(__name__)


class TreeScanner:
    """Walk a root with an explicit stack and keep matching source files."""

    def __init__(self, config: GraphConfig, path_filter: PathFilter | None = None,
                 channel: DiagnosticChannel = NULL_CHANNEL):
        self.config = config
        self.root = config.root
        self.extensions = set(config.extensions)
        self.skip_dirs = list(config.skip_dirs)
        self.path_filter = path_filter or PathFilter(
            config.exclude_patterns, config.include_patterns, channel,
        )

    def scan(self) -> list[Path]:
        """Return candidate files, ordered by their root-relative id."""
        files: list[Path] = []
        stack = [self.root]
        while stack:
            directory = stack.pop()
            try:
                entries = sorted(os.scandir(directory), key=lambda e: e.name)
            except OSError as e:
                logger.warning("Skipping unreadable directory %s: %s", directory, e)
                continue

            subdirs = []
            for entry in entries:
                if entry.is_dir(follow_symlinks=False):
                    if not is_skipped_dir(entry.name, self.skip_dirs):
                        subdirs.append(Path(entry.path))
                elif entry.is_file() and os.path.splitext(entry.name)[1] in self.extensions:
                    file_id = normalize_id(entry.path, self.root)
                    if self.path_filter.accepts(file_id):
                        files.append(Path(entry.path))
            stack.extend(reversed(subdirs))

        files.sort(key=lambda p: normalize_id(p, self.root))
        return files


def scan_directory(config: GraphConfig, channel: DiagnosticChannel = NULL_CHANNEL) -> list[Path]:
    """Scan ``config.root`` and return the files to analyse."""
    return TreeScanner(config, channel=channel).scan()
