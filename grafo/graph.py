"""Undirected weighted graphs read from a simple line-oriented text format."""

from __future__ import annotations

import re
from collections import deque
from dataclasses import dataclass, field
from typing import Iterable, Iterator, Optional

DEFAULT_WEIGHT = 2**31 - 1
"""Weight given to an edge whose line carries none."""

EDGE_SEPARATOR = " -- "

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _leading_int(text: str) -> int:
    """Parse the integer at the start of ``text``, or 0 when there is none."""
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def _first_line(text: str) -> str:
    """Return ``text`` up to its first newline."""
    return text.split("\n", 1)[0]


@dataclass(frozen=True)
class Edge:
    """One direction of an undirected edge; both directions share ``ident``."""

    target: str
    weight: int
    ident: int


@dataclass
class Vertex:
    """A named vertex and the edges leaving it."""

    name: str
    edges: list[Edge] = field(default_factory=list)

    @property
    def neighbours(self) -> Iterator[str]:
        return (edge.target for edge in self.edges)


class Graph:
    """An undirected multigraph with named vertices and integer weights."""

    def __init__(self, name: str = "") -> None:
        self.name = name
        self._vertices: dict[str, Vertex] = {}
        self._edge_count = 0

    def __iter__(self) -> Iterator[Vertex]:
        return iter(self._vertices.values())

    def __contains__(self, name: object) -> bool:
        return name in self._vertices

    def __len__(self) -> int:
        return len(self._vertices)

    def add_vertex(self, name: str) -> Vertex:
        """Return the vertex called ``name``, creating it if needed."""
        vertex = self._vertices.get(name)
        if vertex is None:
            vertex = self._vertices[name] = Vertex(name)
        return vertex

    def find_vertex(self, name: str) -> Optional[Vertex]:
        """Return the vertex called ``name``, or None."""
        return self._vertices.get(name)

    def connect(self, u: str, v: str, weight: int = DEFAULT_WEIGHT) -> None:
        """Join ``u`` and ``v`` by an edge, creating missing vertices."""
        first = self.add_vertex(u)
        second = self.add_vertex(v)
        ident = self._edge_count
        first.edges.append(Edge(v, weight, ident))
        second.edges.append(Edge(u, weight, ident))
        self._edge_count += 1

    def _vertex(self, name: str) -> Vertex:
        try:
            return self._vertices[name]
        except KeyError:
            raise KeyError(f"no vertex named {name!r}") from None

    def breadth_first(self, root: str) -> dict[str, int]:
        """Map each vertex reachable from ``root`` to its level, in visiting order."""
        self._vertex(root)
        levels = {root: 0}
        queue = deque([root])
        while queue:
            name = queue.popleft()
            for neighbour in self._vertices[name].neighbours:
                if neighbour not in levels:
                    levels[neighbour] = levels[name] + 1
                    queue.append(neighbour)
        return levels

    def depth_first(self, root: str) -> dict[str, Optional[str]]:
        """Map each vertex reachable from ``root`` to its parent, in discovery order."""
        self._vertex(root)
        parents: dict[str, Optional[str]] = {root: None}
        stack = [(root, iter(self._vertices[root].neighbours))]
        while stack:
            name, neighbours = stack[-1]
            for neighbour in neighbours:
                if neighbour not in parents:
                    parents[neighbour] = name
                    stack.append((neighbour, iter(self._vertices[neighbour].neighbours)))
                    break
            else:
                stack.pop()
        return parents

    def _components(self) -> Iterator[list[str]]:
        seen: set[str] = set()
        for name in self._vertices:
            if name not in seen:
                component = list(self.breadth_first(name))
                seen.update(component)
                yield component

    def vertex_count(self) -> int:
        return len(self._vertices)

    def edge_count(self) -> int:
        return self._edge_count

    def component_count(self) -> int:
        return sum(1 for _ in self._components())

    def is_bipartite(self) -> bool:
        """True when no edge joins two vertices on the same breadth-first level."""
        for component in self._components():
            levels = self.breadth_first(component[0])
            for name in component:
                for neighbour in self._vertices[name].neighbours:
                    if levels[name] == levels[neighbour]:
                        return False
        return True

    def diameters(self) -> list[int]:
        """Diameters (in edges) of the components, in non-decreasing order."""
        return sorted(
            max(max(self.breadth_first(name).values()) for name in component)
            for component in self._components()
        )

    def _cut_structure(self) -> tuple[set[str], list[tuple[str, str]]]:
        discovery: dict[str, int] = {}
        low: dict[str, int] = {}
        cut_vertices: set[str] = set()
        bridges: list[tuple[str, str]] = []
        for start in self._vertices:
            if start in discovery:
                continue
            discovery[start] = low[start] = len(discovery)
            root_children = 0
            stack: list[tuple[str, Optional[int], Iterator[Edge]]] = [
                (start, None, iter(self._vertices[start].edges))
            ]
            while stack:
                name, parent_edge, edges = stack[-1]
                for edge in edges:
                    if edge.ident == parent_edge:
                        continue
                    target = edge.target
                    if target not in discovery:
                        discovery[target] = low[target] = len(discovery)
                        stack.append((target, edge.ident, iter(self._vertices[target].edges)))
                        break
                    low[name] = min(low[name], discovery[target])
                else:
                    stack.pop()
                    if not stack:
                        continue
                    parent = stack[-1][0]
                    low[parent] = min(low[parent], low[name])
                    if low[name] > discovery[parent]:
                        bridges.append(tuple(sorted((parent, name))))  # type: ignore[arg-type]
                    if parent == start:
                        root_children += 1
                    elif low[name] >= discovery[parent]:
                        cut_vertices.add(parent)
            if root_children > 1:
                cut_vertices.add(start)
        return cut_vertices, bridges

    def cut_vertices(self) -> list[str]:
        """Names of the cut vertices, in alphabetical order."""
        return sorted(self._cut_structure()[0])

    def cut_edges(self) -> list[tuple[str, str]]:
        """Cut edges as alphabetically ordered name pairs, in alphabetical order."""
        return sorted(self._cut_structure()[1])


def read_graph(stream: Iterable[str]) -> Graph:
    """Build a graph from lines of text.

    The first plain line names the graph, ``a -- b [weight]`` lines add edges,
    other plain lines add isolated vertices; ``//`` comments and blank lines
    are skipped.
    """
    graph = Graph()
    named = False
    for line in stream:
        if line.startswith("//") or line.startswith("\n") or not line:
            continue
        head, sep, rest = line.partition(EDGE_SEPARATOR)
        if sep:
            tokens = [token for token in rest.split(" ") if token]
            target = _first_line(tokens[0]) if tokens else ""
            weight = _leading_int(tokens[1]) if len(tokens) > 1 else DEFAULT_WEIGHT
            graph.connect(head, target, weight)
        elif not named:
            graph.name = _first_line(line)
            named = True
        else:
            graph.add_vertex(_first_line(line))
    return graph