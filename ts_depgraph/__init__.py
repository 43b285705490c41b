"""ts-depgraph: file-level dependency graphs for TypeScript/JavaScript trees."""

__version__ = "0.1.0"

from ts_depgraph.errors import DepGraphError, RootDirectoryError
from ts_depgraph.models import GraphConfig
from ts_depgraph.pipeline import build_graph

__all__ = [
    "DepGraphError",
    "GraphConfig",
    "RootDirectoryError",
    "build_graph",
]
