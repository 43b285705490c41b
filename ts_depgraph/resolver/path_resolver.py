"""Multi-strategy import specifier resolution."""

from __future__ import annotations

import os
from pathlib import Path
from typing import TYPE_CHECKING

from ts_depgraph.diagnostics import NULL_CHANNEL, AliasMatched, DiagnosticChannel
from ts_depgraph.resolver.aliases import AliasTable

if TYPE_CHECKING:
    from ts_depgraph.models import GraphConfig

SOURCE_SUBDIR = "src"


def normalize_id(path: str | os.PathLike, root: Path) -> str:
    """Root-relative, forward-slash, case-preserving id for ``path``."""
    rel = os.path.relpath(os.path.normpath(os.fspath(path)), os.fspath(root))
    return rel.replace(os.sep, "/")


class PathResolver:
    """Resolve raw specifiers to root-relative file ids.

    Strategies run in a fixed order and the first that finds a file wins:
    relative to the importing file, path aliases, the base directory, then
    the root and ``<root>/src``. Each strategy probes ``P + ext`` for every
    extension, then ``P`` itself if it is a file, then ``P/index + ext``.
    """

    def __init__(
        self,
        root: Path,
        extensions: list[str],
        aliases: AliasTable | None = None,
        base_dir: Path | None = None,
        channel: DiagnosticChannel = NULL_CHANNEL,
    ):
        self.root = Path(root)
        self.extensions = list(extensions)
        self.aliases = aliases if aliases is not None else AliasTable()
        self.base_dir = Path(base_dir) if base_dir is not None else None
        self.channel = channel

    @classmethod
    def from_config(cls, config: GraphConfig, channel: DiagnosticChannel = NULL_CHANNEL) -> "PathResolver":
        return cls(
            root=config.root,
            extensions=config.extensions,
            aliases=config.path_aliases,
            base_dir=config.base_dir,
            channel=channel,
        )

    def resolve(self, specifier: str, from_file: str | os.PathLike) -> str | None:
        """Return the root-relative id ``specifier`` points at, or None."""
        if specifier.startswith("."):
            directory = os.path.dirname(os.path.abspath(os.fspath(from_file)))
            return self._probe(os.path.join(directory, specifier))

        found = self._resolve_alias(specifier)
        if found:
            return found

        bare = specifier.lstrip("/")
        if self.base_dir is not None:
            found = self._probe(os.path.join(self.base_dir, bare))
            if found:
                return found

        for base in (self.root, self.root / SOURCE_SUBDIR):
            found = self._probe(os.path.join(base, bare))
            if found:
                return found
        return None

    def _resolve_alias(self, specifier: str) -> str | None:
        alias_root = self.base_dir if self.base_dir is not None else self.root
        for entry, captured in self.aliases.matches(specifier):
            for replacement in entry.expand(captured):
                found = self._probe(os.path.join(alias_root, replacement))
                if found:
                    self.channel.emit(AliasMatched(
                        alias=entry.pattern,
                        specifier=specifier,
                        resolved_path=found,
                    ))
                    return found
        return None

    def _probe(self, candidate: str) -> str | None:
        candidate = os.path.normpath(candidate)
        for ext in self.extensions:
            if os.path.isfile(candidate + ext):
                return normalize_id(candidate + ext, self.root)
        if os.path.isfile(candidate):
            return normalize_id(candidate, self.root)
        index = os.path.join(candidate, "index")
        for ext in self.extensions:
            if os.path.isfile(index + ext):
                return normalize_id(index + ext, self.root)
        return None
