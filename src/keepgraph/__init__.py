"""
Undirected graph that refuses node removals that would disconnect it
"""

from .error import GraphError, SelfLoopError, UnknownNodeError
from .graph import Graph

try:
    from ._version import version as __version__
except ImportError:
    __version__ = "unknown"

__all__ = ["Graph", "GraphError", "SelfLoopError", "UnknownNodeError"]
