"""Cycle detection over a built dependency graph.

Both walks use explicit stacks so very long import chains cannot hit the
interpreter recursion limit.
"""

from __future__ import annotations

from ts_depgraph.analysis.graph_models import DependencyGraph


def strongly_connected_components(graph: DependencyGraph) -> list[list[str]]:
    """Tarjan's algorithm, iterative. Components come out in reverse topological order."""
    index: dict[str, int] = {}
    low: dict[str, int] = {}
    stack: list[str] = []
    on_stack: set[str] = set()
    components: list[list[str]] = []
    counter = 0

    for start in graph.nodes:
        if start in index:
            continue
        index[start] = low[start] = counter
        counter += 1
        stack.append(start)
        on_stack.add(start)
        work = [(start, iter(graph.successors(start)))]

        while work:
            node_id, neighbors = work[-1]
            for neighbor in neighbors:
                if neighbor not in index:
                    index[neighbor] = low[neighbor] = counter
                    counter += 1
                    stack.append(neighbor)
                    on_stack.add(neighbor)
                    work.append((neighbor, iter(graph.successors(neighbor))))
                    break
                if neighbor in on_stack:
                    low[node_id] = min(low[node_id], index[neighbor])
            else:
                work.pop()
                if work:
                    parent = work[-1][0]
                    low[parent] = min(low[parent], low[node_id])
                if low[node_id] == index[node_id]:
                    component: list[str] = []
                    while True:
                        member = stack.pop()
                        on_stack.discard(member)
                        component.append(member)
                        if member == node_id:
                            break
                    components.append(component)

    return components


def annotate_cycles(graph: DependencyGraph) -> DependencyGraph:
    """Set ``circular`` on every edge that lies on at least one cycle.

    An edge is on a cycle exactly when it is a self-import or both ends sit
    in the same strongly connected component. The graph is updated in place
    and returned.
    """
    component_of: dict[str, int] = {}
    for i, component in enumerate(strongly_connected_components(graph)):
        for node_id in component:
            component_of[node_id] = i

    for edge in graph.edges:
        edge.circular = (
            edge.source == edge.target
            or component_of.get(edge.source) == component_of.get(edge.target)
        )
    return graph


def find_cycles(graph: DependencyGraph) -> list[list[str]]:
    """Depth-first search for cycles, one per back edge.

    Each cycle is the path from the re-entered node back to itself, e.g.
    ``["a.ts", "b.ts", "a.ts"]``. A node is expanded once, so this lists
    the cycles a single DFS sees, not every elementary cycle.
    """
    cycles: list[list[str]] = []
    visited: set[str] = set()
    rec_stack: set[str] = set()

    for start in graph.nodes:
        if start in visited:
            continue
        visited.add(start)
        rec_stack.add(start)
        path = [start]
        work = [(start, iter(graph.successors(start)))]

        while work:
            node_id, neighbors = work[-1]
            for neighbor in neighbors:
                if neighbor not in visited:
                    visited.add(neighbor)
                    rec_stack.add(neighbor)
                    path.append(neighbor)
                    work.append((neighbor, iter(graph.successors(neighbor))))
                    break
                if neighbor in rec_stack:
                    idx = path.index(neighbor)
                    cycles.append(path[idx:] + [neighbor])
            else:
                work.pop()
                path.pop()
                rec_stack.discard(node_id)

    return cycles
