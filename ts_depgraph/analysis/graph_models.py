"""Data models for the dependency graph."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class DependencyNode:
    id: str  # root-relative path, "/" separated
    name: str  # display label only
    full_path: str
    imports: list[str] = field(default_factory=list)
    imported_by: list[str] = field(default_factory=list)
    unresolved: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "fullPath": self.full_path,
            "imports": list(self.imports),
            "importedBy": list(self.imported_by),
            "unresolved": list(self.unresolved),
        }


@dataclass
class DependencyEdge:
    source: str
    target: str
    circular: bool = False

    @property
    def pair(self) -> tuple[str, str]:
        return (self.source, self.target)

    def to_dict(self) -> dict[str, Any]:
        return {"source": self.source, "target": self.target, "circular": self.circular}


@dataclass
class DependencyGraph:
    root_dir: str = ""
    nodes: dict[str, DependencyNode] = field(default_factory=dict)
    edges: list[DependencyEdge] = field(default_factory=list)

    @property
    def circular_edges(self) -> list[DependencyEdge]:
        return [e for e in self.edges if e.circular]

    def successors(self, node_id: str) -> list[str]:
        node = self.nodes.get(node_id)
        return node.imports if node else []

    def to_dict(self) -> dict[str, Any]:
        return {
            "nodes": [n.to_dict() for n in self.nodes.values()],
            "edges": [e.to_dict() for e in self.edges],
        }
