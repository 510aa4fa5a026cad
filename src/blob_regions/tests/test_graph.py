import networkx as nx

from blob_regions.graph import region_adjacency_graph
from blob_regions.region import Region


def test_adjacency_graph_from_mapping():
    regions = {
        "a": Region.from_rectangle(3, 3, (0, 0)),
        "b": Region.from_rectangle(3, 3, (3, 0)),
        "c": Region.from_rectangle(2, 2, (10, 10)),
    }
    graph = region_adjacency_graph(regions)
    assert isinstance(graph, nx.Graph)
    assert set(graph.nodes) == {"a", "b", "c"}
    assert set(map(frozenset, graph.edges)) == {frozenset({"a", "b"})}
    assert graph.nodes["a"]["region"] is regions["a"]
    assert graph.nodes["c"]["n_boundary_points"] == 4
    assert nx.number_connected_components(graph) == 2


def test_adjacency_graph_from_sequence():
    chain = [Region.from_rectangle(2, 2, (2 * i, 0)) for i in range(4)]
    graph = region_adjacency_graph(chain)
    assert sorted(graph.edges) == [(0, 1), (1, 2), (2, 3)]


def test_empty_regions_are_isolated():
    graph = region_adjacency_graph([Region(), Region.from_rectangle(2, 2)])
    assert graph.number_of_nodes() == 2
    assert graph.number_of_edges() == 0
