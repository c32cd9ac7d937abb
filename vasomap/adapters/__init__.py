"""
Adapters for exchanging vessel graphs with other libraries.
"""

from .networkx_adapter import to_networkx_graph, from_networkx_graph

__all__ = [
    "to_networkx_graph",
    "from_networkx_graph",
]
