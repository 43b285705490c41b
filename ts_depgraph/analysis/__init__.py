"""Graph construction and cycle analysis."""

from ts_depgraph.analysis.cycles import annotate_cycles, find_cycles, strongly_connected_components
from ts_depgraph.analysis.dependency_graph import DependencyGraphBuilder
from ts_depgraph.analysis.graph_models import DependencyEdge, DependencyGraph, DependencyNode

__all__ = [
    "DependencyEdge",
    "DependencyGraph",
    "DependencyGraphBuilder",
    "DependencyNode",
    "annotate_cycles",
    "find_cycles",
    "strongly_connected_components",
]
