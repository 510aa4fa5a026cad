"""Adjacency graph over a collection of regions."""

from collections.abc import Hashable, Mapping, Sequence
from itertools import combinations
from typing import Union

import networkx as nx

from blob_regions.region import Region


def region_adjacency_graph(
    regions: Union[Mapping[Hashable, Region], Sequence[Region]],
) -> nx.Graph:
    """
    Create a graph connecting regions that touch.

    Nodes are the keys of ``regions`` (or the positions, for a sequence).
    Each node stores attributes:
    - 'region': the Region itself.
    - 'n_boundary_points': number of stored boundary points.

    An edge joins every pair ``a, b`` with ``a.adjacent_to(b)``. Empty
    regions become isolated nodes.

    Parameters
    ----------
    regions : Mapping[Hashable, Region] or Sequence[Region]

    Returns
    -------
    adjacency_graph : nx.Graph
    """
    if isinstance(regions, Mapping):
        items = list(regions.items())
    else:
        items = list(enumerate(regions))

    adjacency_graph = nx.Graph()
    for node_id, region in items:
        adjacency_graph.add_node(
            node_id, region=region, n_boundary_points=len(region)
        )

    for (id_a, region_a), (id_b, region_b) in combinations(items, 2):
        if region_a.adjacent_to(region_b):
            adjacency_graph.add_edge(id_a, id_b)

    return adjacency_graph
