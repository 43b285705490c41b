"""Data models shared by the scan -> extract -> resolve -> build stages."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from ts_depgraph.resolver.aliases import AliasTable

DEFAULT_EXTENSIONS = [".ts", ".tsx", ".js", ".jsx"]
DEFAULT_SKIP_DIRS = ["node_modules", ".git", "dist"]


@dataclass
class GraphConfig:
    """Configuration for a single graph build.

    ``exclude_patterns`` and ``include_patterns`` are regular expressions
    searched against the root-relative file id. ``extensions`` is ordered:
    it decides which files are scanned and the probe order during
    resolution. ``base_directory`` may be relative to ``root_dir``.
    """
    root_dir: Path = field(default_factory=lambda: Path("."))
    extensions: list[str] = field(default_factory=lambda: list(DEFAULT_EXTENSIONS))
    exclude_patterns: list[str] = field(default_factory=list)
    include_patterns: list[str] = field(default_factory=list)
    show_full_path: bool = True
    path_aliases: AliasTable = field(default_factory=AliasTable)
    base_directory: Path | None = None
    skip_dirs: list[str] = field(default_factory=lambda: list(DEFAULT_SKIP_DIRS))
    verbose: bool = False

    @property
    def root(self) -> Path:
        return Path(self.root_dir).expanduser().resolve()

    @property
    def base_dir(self) -> Path | None:
        if self.base_directory is None:
            return None
        base = Path(self.base_directory).expanduser()
        if not base.is_absolute():
            base = self.root / base
        return base
