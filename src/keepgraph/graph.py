import logging
from collections import OrderedDict
from typing import List

from .error import SelfLoopError, UnknownNodeError

logger = logging.getLogger(__name__)

# Default for _reachable when no node is excluded; None is a valid node
_NO_NODE = object()


class Graph:
    """
    Undirected graph that only allows removing a node if the remaining
    nodes stay connected.

    Nodes can be any hashable values. Each edge is stored twice, once in the
    neighbor list of each endpoint.
    """

    def __init__(self, nodes=()):
        # values are lists of adjacent nodes
        self._nodes = OrderedDict()
        for node in nodes:
            self._nodes[node] = []

    def __repr__(self):
        return f"Graph(nodes={len(self._nodes)}, edges={self.count_edges()})"

    def __len__(self):
        return len(self._nodes)

    def __contains__(self, node):
        return node in self._nodes

    def __iter__(self):
        return iter(self._nodes)

    def clear(self):
        """Remove all nodes and edges"""
        self._nodes.clear()

    def add_node(self, node):
        """Add a node. Adding a node that already exists does nothing."""
        if node not in self._nodes:
            self._nodes[node] = []

    def has_node(self, node):
        return node in self._nodes

    def add_edge(self, node1, node2):
        """
        Add an undirected edge between two existing nodes.

        Adding an edge that already exists does nothing.

        Raises:
            UnknownNodeError: if one of the nodes is not in the graph
            SelfLoopError: if node1 and node2 are the same node
        """
        for node in (node1, node2):
            if node not in self._nodes:
                raise UnknownNodeError(node)
        if node1 == node2:
            raise SelfLoopError(node1)
        if node2 in self._nodes[node1]:
            logger.debug("Edge %r -- %r already exists", node1, node2)
            return
        self._nodes[node1].append(node2)
        self._nodes[node2].append(node1)

    def node_count(self) -> int:
        return len(self._nodes)

    def nodes(self):
        """Return all nodes as a list"""
        return list(self._nodes)

    def neighbors(self, node):
        """
        Return a list of all neighbors of a node.

        The list is a copy. An empty list is returned if the node does not exist.
        """
        return list(self._nodes.get(node, ()))

    def edges(self):
        """Yield every edge once, as (node1, node2) with node1 added before node2"""
        position = {node: i for i, node in enumerate(self._nodes)}
        for node1, neighbors in self._nodes.items():
            for node2 in neighbors:
                if position[node1] < position[node2]:
                    yield node1, node2

    def count_edges(self) -> int:
        # each edge appears in two neighbor lists
        degree_sum = sum(map(len, self._nodes.values()))
        return degree_sum // 2

    def copy(self):
        graph = Graph()
        graph._nodes = OrderedDict(
            (node, neighbors.copy()) for node, neighbors in self._nodes.items()
        )
        return graph

    def _reachable(self, start, excluded=_NO_NODE):
        """
        Return the set of nodes reachable from start without passing through
        the excluded node. The excluded node is never part of the result.
        """
        visited = set()
        if start == excluded:
            return visited
        to_visit = [start]
        while to_visit:
            node = to_visit.pop()
            if node in visited:
                continue
            visited.add(node)
            for neighbor in self._nodes[node]:
                if neighbor != excluded and neighbor not in visited:
                    to_visit.append(neighbor)
        return visited

    def connected_components(self) -> List[List]:
        """Return a list of connected components, each given as a list of nodes"""
        visited = set()
        components = []
        for node in self._nodes:
            if node in visited:
                continue
            component = self._reachable(node)
            visited.update(component)
            components.append([n for n in self._nodes if n in component])
        return components

    def is_connected(self):
        """Return whether all nodes are reachable from each other"""
        if not self._nodes:
            return True
        start = next(iter(self._nodes))
        return len(self._reachable(start)) == len(self._nodes)

    def try_remove_node(self, node_to_remove, starting_node) -> bool:
        """
        Remove a node unless that would split the graph apart.

        All nodes except node_to_remove must be reachable from starting_node
        without passing through node_to_remove. The graph is assumed to be
        connected before the call.

        The only way to remove the last node is to pass it as both
        node_to_remove and starting_node. Otherwise starting_node must be a
        different node of the graph.

        Return:
            True if the node was removed, False if the graph was left unchanged
        """
        if node_to_remove not in self._nodes:
            logger.debug("Not removing %r: node does not exist", node_to_remove)
            return False
        if starting_node not in self._nodes:
            logger.debug(
                "Not removing %r: starting node %r does not exist",
                node_to_remove,
                starting_node,
            )
            return False
        if starting_node == node_to_remove:
            if len(self._nodes) == 1:
                self._nodes.clear()
                logger.debug("Removed last node %r", node_to_remove)
                return True
            logger.debug(
                "Not removing %r: starting node must be a different node",
                node_to_remove,
            )
            return False

        reachable = self._reachable(starting_node, excluded=node_to_remove)
        if len(reachable) != len(self._nodes) - 1:
            logger.debug(
                "Not removing %r: only %d of %d remaining nodes reachable from %r",
                node_to_remove,
                len(reachable),
                len(self._nodes) - 1,
                starting_node,
            )
            return False

        for neighbor in self._nodes[node_to_remove]:
            self._nodes[neighbor].remove(node_to_remove)
        del self._nodes[node_to_remove]
        logger.debug(
            "Removed node %r, %d nodes remaining", node_to_remove, len(self._nodes)
        )
        return True
