"""
Conversion between graphs and pandas/numpy representations
"""
import logging
from typing import Hashable, Iterable, List, Optional

import numpy as np
import pandas as pd

from .graph import Graph

logger = logging.getLogger(__name__)


def edges_to_dataframe(graph: Graph) -> pd.DataFrame:
    """Convert the edges of a graph to a DataFrame with columns node1 and node2"""
    edge_dict = {"node1": [], "node2": []}

    for node1, node2 in graph.edges():
        edge_dict["node1"].append(node1)
        edge_dict["node2"].append(node2)

    return pd.DataFrame(edge_dict)


def dataframe_to_graph(
    df: pd.DataFrame, nodes: Optional[Iterable[Hashable]] = None
) -> Graph:
    """
    Convert a DataFrame with columns node1 and node2 to a Graph.

    Nodes are added in the order in which they first appear. Nodes that have
    no edges can be passed in *nodes*; they are added before the edge endpoints.
    """
    graph = Graph(nodes if nodes is not None else ())
    for edge in df.itertuples(index=False):
        graph.add_node(edge.node1)
        graph.add_node(edge.node2)
        graph.add_edge(edge.node1, edge.node2)
    logger.debug(
        "Created graph with %d nodes and %d edges from DataFrame",
        graph.node_count(),
        graph.count_edges(),
    )
    return graph


def adjacency_matrix(
    graph: Graph, nodes: Optional[List[Hashable]] = None
) -> np.ndarray:
    """
    Return the symmetric adjacency matrix of the graph.

    Rows and columns are in the order of *nodes* (default: graph.nodes()).
    Neighbors that are not listed in *nodes* are ignored.

    Raises:
        ValueError: if a node is listed more than once
    """
    if nodes is None:
        nodes = graph.nodes()
    index = {node: i for i, node in enumerate(nodes)}
    if len(index) != len(nodes):
        raise ValueError("Each node may be listed only once")
    matrix = np.zeros((len(nodes), len(nodes)), dtype=int)
    for node, i in index.items():
        for neighbor in graph.neighbors(node):
            j = index.get(neighbor)
            if j is not None:
                matrix[i, j] = 1
    return matrix
