# grafo

Reads an undirected, optionally weighted multigraph from a simple text format
and reports its name, vertex and edge counts, number of connected components,
whether it is bipartite, the diameters of its components, its cut vertices
and its cut edges (bridges).

## Input format

Lines starting with `//` and blank lines are skipped. An edge is written as

```
xxx -- yyy ppp
```

where `xxx` is everything before ` -- `, `yyy` is the next space-separated
word and `ppp` is an optional integer weight. When the weight is missing the
edge gets `2147483647` (`grafo.graph.DEFAULT_WEIGHT`); when it does not start
with an integer it is read as `0`. Vertices named in an edge are created as
needed and need no line of their own.

The first line that is not an edge names the graph; every later line that is
not an edge names an isolated vertex.

```
// the graph's name
triangle_with_vertex

// three edges and their weights
one -- two 12
two -- four 24
four -- one 41

// an isolated vertex
three
```

## Command line

```
grafo graph.txt
grafo < graph.txt
```

The command reads the named file, or standard input when no file is given,
and prints a report such as:

```
grafo: triangle_with_vertex
4 vertices
3 arestas
2 componentes
não bipartido
diâmetros: 0 1
vértices de corte: 
arestas de corte: 
```

Diameters are listed in non-decreasing order, cut vertices in alphabetical
order, and each cut edge as its two vertex names in alphabetical order. If the
file cannot be opened, the error is printed to standard error and the command
exits with status 1.

## Library

```python
from grafo.graph import read_graph

with open("graph.txt", encoding="utf-8") as stream:
    graph = read_graph(stream)

print(graph.name, graph.vertex_count(), graph.edge_count())
print(graph.component_count(), graph.is_bipartite())
print(graph.diameters())      # e.g. [0, 1]
print(graph.cut_vertices())   # sorted vertex names
print(graph.cut_edges())      # sorted (a, b) pairs with a <= b
```

`read_graph` accepts any iterable of lines, so a list of strings works too.

`grafo.graph.Graph` can also be built directly:

- `Graph(name="")` creates an empty graph.
- `add_vertex(name)` returns the vertex called `name`, creating it if needed.
- `find_vertex(name)` returns the `Vertex` or `None`.
- `connect(u, v, weight=DEFAULT_WEIGHT)` adds an edge, creating missing
  vertices; parallel edges and loops are allowed.
- `breadth_first(root)` maps each vertex reachable from `root` to its
  breadth-first level; `depth_first(root)` maps each reachable vertex to its
  depth-first parent (`None` for the root). Both raise `KeyError` for an
  unknown root.
- A `Graph` supports `len()`, `in` on vertex names, and iteration over its
  `Vertex` objects in insertion order.

A `Vertex` has a `name`, a list of `edges` and a `neighbours` property; an
`Edge` has a `target` name, a `weight` and an `ident` shared by both
directions of the same undirected edge.

`grafo.cli.report(graph)` returns the report text that the command prints.

## Limits

Edge weights are stored but not used by any of the reported properties:
diameters count edges, not weights.

## Tests

```
pip install -e .[test]
pytest
```