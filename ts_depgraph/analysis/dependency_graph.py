"""Dependency graph builder: files -> nodes, resolved imports -> edges."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Callable, Iterable

from ts_depgraph.analysis.graph_models import DependencyEdge, DependencyGraph, DependencyNode
from ts_depgraph.diagnostics import (
    NULL_CHANNEL,
    DiagnosticChannel,
    FileReadFailed,
    ImportUnresolved,
)
from ts_depgraph.extractor import extract_specifiers, filter_candidates, read_source
from ts_depgraph.models import GraphConfig
from ts_depgraph.resolver.path_resolver import PathResolver, normalize_id
from ts_depgraph.scanner.filters import PathFilter

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[str, int, int], None]


class DependencyGraphBuilder:
    """Build a file-level dependency graph from a list of scanned files."""

    def __init__(
        self,
        config: GraphConfig,
        channel: DiagnosticChannel = NULL_CHANNEL,
        path_filter: PathFilter | None = None,
        resolver: PathResolver | None = None,
    ):
        self.config = config
        self.root = config.root
        self.channel = channel
        self.path_filter = path_filter or PathFilter(
            config.exclude_patterns, config.include_patterns, channel,
        )
        self.resolver = resolver or PathResolver.from_config(config, channel)

    def build(
        self,
        files: Iterable[Path],
        progress: ProgressCallback | None = None,
    ) -> DependencyGraph:
        files = list(files)
        graph = DependencyGraph(root_dir=str(self.root))

        # Pass 1: every node exists before any import is resolved
        for file_path in files:
            node_id = normalize_id(file_path, self.root)
            if node_id in graph.nodes:
                continue
            graph.nodes[node_id] = DependencyNode(
                id=node_id,
                name=node_id if self.config.show_full_path else os.path.basename(node_id),
                full_path=os.fspath(file_path),
            )

        # Pass 2: extract, resolve, keep in-graph targets
        total = len(graph.nodes)
        for i, node in enumerate(graph.nodes.values()):
            if progress:
                progress("Resolving", i, total)
            self._link_node(graph, node)
        if progress:
            progress("Resolving", total, total)

        return graph

    def _link_node(self, graph: DependencyGraph, node: DependencyNode) -> None:
        try:
            source = read_source(Path(node.full_path))
        except OSError as e:
            logger.warning("Could not read %s: %s", node.full_path, e)
            self.channel.emit(FileReadFailed(file=node.id, error=str(e)))
            return

        specifiers = filter_candidates(extract_specifiers(source), self.config.path_aliases)
        for specifier in specifiers:
            target = self.resolver.resolve(specifier, node.full_path)
            if target is None:
                node.unresolved.append(specifier)
                self.channel.emit(ImportUnresolved(specifier=specifier, from_file=node.id))
                continue
            if target not in graph.nodes or self.path_filter.is_excluded(target):
                continue
            if target in node.imports:
                continue
            node.imports.append(target)
            graph.nodes[target].imported_by.append(node.id)
            graph.edges.append(DependencyEdge(source=node.id, target=target))
