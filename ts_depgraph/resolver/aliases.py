"""Ordered path-alias table with single-wildcard pattern matching."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, Iterator, Mapping

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AliasEntry:
    """One alias pattern and its replacement templates, in priority order."""
    pattern: str
    replacements: tuple[str, ...] = ()

    @property
    def is_wildcard(self) -> bool:
        return "*" in self.pattern

    @property
    def prefix(self) -> str:
        return self.pattern.split("*", 1)[0]

    @property
    def suffix(self) -> str:
        return self.pattern.split("*", 1)[1] if self.is_wildcard else ""

    def match(self, specifier: str) -> str | None:
        """Return the wildcard capture ("" for exact aliases) or None."""
        if not self.is_wildcard:
            return "" if specifier == self.pattern else None
        prefix, suffix = self.prefix, self.suffix
        if len(specifier) < len(prefix) + len(suffix):
            return None
        if specifier.startswith(prefix) and specifier.endswith(suffix):
            return specifier[len(prefix):len(specifier) - len(suffix)]
        return None

    def expand(self, captured: str) -> Iterator[str]:
        """Yield each replacement with the capture substituted into its ``*``."""
        for template in self.replacements:
            if "*" in template:
                yield template.replace("*", captured, 1)
            else:
                yield template


@dataclass
class AliasTable:
    """Alias entries checked in list order; the first that resolves wins."""
    entries: list[AliasEntry] = field(default_factory=list)

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Iterable[str] | str] | None) -> "AliasTable":
        """Build a table from a config mapping, keeping its key order.

        A value that is not a mapping gives an empty table. Patterns with
        more than one ``*`` are skipped with a warning, as are replacement
        values that are neither a string nor a list of strings.
        """
        table = cls()
        if mapping is None:
            return table
        if not isinstance(mapping, Mapping):
            logger.warning("Ignoring path aliases: expected an object, got %s", type(mapping).__name__)
            return table
        for pattern, replacements in mapping.items():
            if not isinstance(pattern, str) or pattern.count("*") > 1:
                logger.warning("Ignoring invalid alias pattern %r", pattern)
                continue
            if isinstance(replacements, str):
                replacements = [replacements]
            elif not isinstance(replacements, (list, tuple)):
                logger.warning("Ignoring alias %r: replacements must be a list, got %r", pattern, replacements)
                continue
            templates = []
            for template in replacements:
                if isinstance(template, str) and template.count("*") <= 1:
                    templates.append(template)
                else:
                    logger.warning("Ignoring invalid replacement %r for alias %r", template, pattern)
            table.entries.append(AliasEntry(pattern=pattern, replacements=tuple(templates)))
        return table

    def to_mapping(self) -> dict[str, list[str]]:
        return {e.pattern: list(e.replacements) for e in self.entries}

    def matches(self, specifier: str) -> Iterator[tuple[AliasEntry, str]]:
        """Yield ``(entry, captured)`` for every entry matching ``specifier``."""
        for entry in self.entries:
            captured = entry.match(specifier)
            if captured is not None:
                yield entry, captured

    def has_match(self, specifier: str) -> bool:
        return next(self.matches(specifier), None) is not None

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[AliasEntry]:
        return iter(self.entries)
