import io

import pytest

from grafo.graph import DEFAULT_WEIGHT, Graph, read_graph

EXAMPLE = """\

// o nome do grafo
triângulo_com_vértice

// uma lista com três arestas e seus pesos
um -- dois 12
dois -- quatro 24
quatro -- um 41

// um vértice isolado
três

"""


def build(edges, name="g"):
    graph = Graph(name)
    for u, v in edges:
        graph.connect(u, v)
    return graph


@pytest.fixture
def example():
    return read_graph(io.StringIO(EXAMPLE))


def test_example_summary(example):
    assert example.name == "triângulo_com_vértice"
    assert example.vertex_count() == 4
    assert example.edge_count() == 3
    assert example.component_count() == 2
    assert example.is_bipartite() is False
    assert example.cut_vertices() == []
    assert example.cut_edges() == []


def test_example_weights(example):
    um = example.find_vertex("um")
    weights = {edge.target: edge.weight for edge in um.edges}
    assert weights == {"dois": 12, "quatro": 41}


def test_example_diameters(example):
    assert example.diameters() == [0, 1]


def test_missing_weight_uses_default():
    graph = read_graph(io.StringIO("g\na -- b\n"))
    assert graph.find_vertex("a").edges[0].weight == DEFAULT_WEIGHT
    assert DEFAULT_WEIGHT == 2**31 - 1


def test_vertex_named_after_edge_is_not_duplicated():
    graph = read_graph(io.StringIO("g\na -- b 3\na\n"))
    assert graph.vertex_count() == 2
    assert [v.name for v in graph] == ["a", "b"]


def test_find_vertex_unknown_is_none(example):
    assert example.find_vertex("cinco") is None


def test_path_cut_structure():
    graph = build([("a", "b"), ("b", "c")])
    assert graph.cut_vertices() == ["b"]
    assert graph.cut_edges() == [("a", "b"), ("b", "c")]
    assert graph.is_bipartite() is True
    assert graph.component_count() == 1


def test_cut_edges_ordering():
    graph = build([("z", "a"), ("x", "b"), ("y", "c")])
    assert graph.cut_edges() == [("a", "z"), ("b", "x"), ("c", "y")]


def test_parallel_edges_are_not_bridges():
    graph = build([("a", "b"), ("a", "b")])
    assert graph.cut_edges() == []
    assert graph.edge_count() == 2


def test_even_and_odd_cycles():
    square = build([("a", "b"), ("b", "c"), ("c", "d"), ("d", "a")])
    triangle = build([("a", "b"), ("b", "c"), ("c", "a")])
    assert square.is_bipartite() is True
    assert triangle.is_bipartite() is False


def test_self_loop_is_not_bipartite():
    graph = build([("a", "a")])
    assert graph.is_bipartite() is False


def test_breadth_first_levels_are_consistent():
    graph = build([("a", "b"), ("b", "c"), ("a", "d"), ("d", "c")])
    levels = graph.breadth_first("a")
    assert set(levels) == {"a", "b", "c", "d"}
    assert levels["a"] == 0
    for vertex in graph:
        for neighbour in vertex.neighbours:
            assert abs(levels[vertex.name] - levels[neighbour]) <= 1


def test_depth_first_parents_are_neighbours():
    graph = build([("a", "b"), ("b", "c"), ("c", "a"), ("c", "d")])
    parents = graph.depth_first("a")
    assert parents["a"] is None
    assert set(parents) == {"a", "b", "c", "d"}
    for child, parent in parents.items():
        if parent is not None:
            assert parent in graph.find_vertex(child).neighbours


def test_unknown_root_raises():
    graph = build([("a", "b")])
    with pytest.raises(KeyError):
        graph.breadth_first("zz")
    with pytest.raises(KeyError):
        graph.depth_first("zz")


def test_path_diameter():
    names = ["a", "b", "c", "d", "e"]
    graph = build(zip(names, names[1:]))
    assert graph.diameters() == [len(names) - 1]


def test_diameters_sorted_one_per_component():
    graph = build([("a", "b"), ("b", "c"), ("x", "y")])
    graph.add_vertex("solo")
    result = graph.diameters()
    assert len(result) == graph.component_count()
    assert result == sorted(result)


def test_comments_and_blank_lines_ignored():
    graph = read_graph(io.StringIO("// c\n\nnome\n// a -- b\n"))
    assert graph.name == "nome"
    assert graph.vertex_count() == 0