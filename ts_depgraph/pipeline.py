"""Pipeline orchestrator: validate root -> scan -> build -> annotate cycles."""

from __future__ import annotations

import logging
from typing import Callable

from ts_depgraph.analysis.cycles import annotate_cycles
from ts_depgraph.analysis.dependency_graph import DependencyGraphBuilder
from ts_depgraph.analysis.graph_models import DependencyGraph
from ts_depgraph.diagnostics import DiagnosticChannel, DiagnosticSink
from ts_depgraph.errors import RootDirectoryError
from ts_depgraph.models import GraphConfig
from ts_depgraph.scanner.filters import PathFilter
from ts_depgraph.scanner.tree_scanner import TreeScanner

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[str, int, int], None]


def check_root(config: GraphConfig) -> None:
    """Raise RootDirectoryError unless the root is an existing directory."""
    root = config.root
    if not root.exists():
        raise RootDirectoryError(root, "Directory not found")
    if not root.is_dir():
        raise RootDirectoryError(root, "Path is not a directory")


def build_graph(
    config: GraphConfig,
    sink: DiagnosticSink | None = None,
    progress: ProgressCallback | None = None,
) -> DependencyGraph:
    """Build the annotated dependency graph for ``config.root_dir``.

    Only a bad root directory raises; per-file problems are logged and
    reported to ``sink`` when ``config.verbose`` is set.
    """
    check_root(config)
    channel = DiagnosticChannel(sink, enabled=config.verbose)
    path_filter = PathFilter(config.exclude_patterns, config.include_patterns, channel)

    logger.info("Analyzing directory: %s", config.root)
    if progress:
        progress("Scanning", 0, 1)
    files = TreeScanner(config, path_filter=path_filter, channel=channel).scan()
    if progress:
        progress("Scanning", 1, 1)

    builder = DependencyGraphBuilder(config, channel=channel, path_filter=path_filter)
    graph = builder.build(files, progress=progress)
    annotate_cycles(graph)

    logger.info(
        "Found %d files and %d dependencies (%d circular)",
        len(graph.nodes), len(graph.edges), len(graph.circular_edges),
    )
    return graph
