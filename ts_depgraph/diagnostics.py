"""Typed diagnostic events emitted while resolving imports.

Resolution code never prints. It hands events to a caller-supplied sink,
and only when the build runs with ``verbose`` set.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Union

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AliasMatched:
    alias: str
    specifier: str
    resolved_path: str


@dataclass(frozen=True)
class ImportUnresolved:
    specifier: str
    from_file: str


@dataclass(frozen=True)
class FileReadFailed:
    file: str
    error: str


@dataclass(frozen=True)
class PatternRejected:
    pattern: str
    error: str


DiagnosticEvent = Union[AliasMatched, ImportUnresolved, FileReadFailed, PatternRejected]
DiagnosticSink = Callable[[DiagnosticEvent], None]


def logging_sink(event: DiagnosticEvent) -> None:
    """Forward a diagnostic event to the package logger at DEBUG."""
    logger.debug("%s: %s", type(event).__name__, event)


class DiagnosticCollector:
    """Sink that keeps every event, mostly useful for tests and reports."""

    def __init__(self):
        self.events: list[DiagnosticEvent] = []

    def __call__(self, event: DiagnosticEvent) -> None:
        self.events.append(event)

    def of_type(self, kind: type) -> list[DiagnosticEvent]:
        return [e for e in self.events if isinstance(e, kind)]


class DiagnosticChannel:
    """Gate between the pipeline and a sink; silent unless enabled."""

    def __init__(self, sink: DiagnosticSink | None = None, enabled: bool = True):
        self.sink = sink
        self.enabled = enabled and sink is not None

    def emit(self, event: DiagnosticEvent) -> None:
        if self.enabled:
            self.sink(event)


NULL_CHANNEL = DiagnosticChannel()
