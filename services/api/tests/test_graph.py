from kitchenplan.services.conversion_checks import Graph


def test_empty_graph():
    g = Graph.empty()
    assert g.n == 0
    assert g.m == 0
    assert g.edge_pointers == [0]


def test_outward_neighbours():
    g = Graph([1, 2, 3, 4], [0, 3, 5, 5, 6], [2, 3, 4, 1, 3, 2])
    assert g.n == 4
    assert g.m == 6
    assert g.get_outward_neighbours(1) == [2, 3, 4]
    assert g.get_outward_neighbours(3) == []
    assert g.has_edge(4, 2)
    assert not g.has_edge(2, 4)


def test_easy_induced_subgraph():
    g = Graph([1, 2, 3, 4], [0, 3, 5, 5, 6], [2, 3, 4, 1, 3, 2])

    sub = g.induced_subgraph([1, 2, 3])

    assert sub.vertices == [1, 2, 3]
    assert sub.edge_pointers == [0, 2, 4, 4]
    assert sub.edges == [2, 3, 1, 3]


def test_complex_induced_subgraph():
    g = Graph([1, 2, 3, 4], [0, 3, 5, 5, 6], [2, 3, 4, 1, 3, 2])

    sub = g.induced_subgraph([1, 2, 4])

    assert sub.vertices == [1, 2, 4]
    assert sub.edge_pointers == [0, 2, 3, 4]
    assert sub.edges == [2, 4, 1, 2]


def test_nested_subgraph_keeps_outer_names():
    g = Graph([1, 2, 3, 4], [0, 3, 5, 5, 6], [2, 3, 4, 1, 3, 2])

    inner = g.induced_subgraph([2, 3, 4]).induced_subgraph([2, 4])

    assert inner.vertices == [2, 4]
    assert inner.edges == [2]
    assert inner.convert_vertex_names(4) == 1
    assert inner.get_outward_neighbours(4) == [2]
    assert 3 not in inner


def test_from_adjacency():
    g = Graph.from_adjacency({1: [2], 2: [1, 3], 3: []})
    assert g.edge_pointers == [0, 1, 3, 3]
    assert g.edges == [2, 1, 3]
