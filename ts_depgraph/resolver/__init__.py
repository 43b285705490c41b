"""Specifier resolution: alias tables and the multi-strategy resolver."""

from ts_depgraph.resolver.aliases import AliasEntry, AliasTable
from ts_depgraph.resolver.path_resolver import PathResolver, normalize_id

__all__ = ["AliasEntry", "AliasTable", "PathResolver", "normalize_id"]
