class GraphError(Exception):
    pass


class UnknownNodeError(GraphError, KeyError):
    """An edge was requested between nodes of which at least one is not in the graph"""

    def __init__(self, node):
        super().__init__(node)
        self.node = node

    def __str__(self):
        return f"Node {self.node!r} does not exist in the graph"


class SelfLoopError(GraphError, ValueError):
    def __init__(self, node):
        super().__init__(node)
        self.node = node

    def __str__(self):
        return f"Cannot add an edge from node {self.node!r} to itself"
