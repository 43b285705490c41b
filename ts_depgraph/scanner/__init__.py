"""File discovery and include/exclude filtering."""

from ts_depgraph.scanner.filters import PathFilter, compile_patterns
from ts_depgraph.scanner.tree_scanner import TreeScanner, scan_directory

__all__ = ["PathFilter", "TreeScanner", "compile_patterns", "scan_directory"]
