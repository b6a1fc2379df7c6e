from kitchenplan.services.conversion_checks import Graph, SCCFinder


def test_strong_components(sample_graph):
    components = SCCFinder(sample_graph).run()

    assert len(components) == 1
    comp = components[0]
    assert comp.vertices == [3, 4, 6, 7, 8]
    assert comp.edge_pointers == [0, 2, 3, 4, 6, 7]
    assert comp.edges == [4, 6, 3, 7, 4, 8, 6]


def test_no_components_in_dag():
    g = Graph.from_adjacency({1: [2, 3], 2: [3], 3: []})
    assert SCCFinder(g).run() == []


def test_empty_graph_has_no_components():
    assert SCCFinder(Graph.empty()).run() == []


def test_disjoint_components():
    g = Graph.from_adjacency({1: [2], 2: [1], 3: [4], 4: [5], 5: [3], 6: [1]})

    components = SCCFinder(g).run()

    assert [c.vertices for c in components] == [[1, 2], [3, 4, 5]]


def test_self_loop_is_a_component():
    g = Graph.from_adjacency({1: [1], 2: [3], 3: []})

    components = SCCFinder(g).run()

    assert len(components) == 1
    assert components[0].vertices == [1]
    assert components[0].edges == [1]


def test_long_cycle_is_one_component():
    g = Graph.from_adjacency({v: [v % 3000 + 1] for v in range(1, 3001)})

    components = SCCFinder(g).run()

    assert len(components) == 1
    assert components[0].n == 3000
