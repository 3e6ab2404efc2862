"""site_walker.graph: generic graph traversal used by the crawler."""
from site_walker.graph.adjacency import Adjacency, MappingGraph
from site_walker.graph.traversal import BreadthFirstSearch, TraversalState

__all__ = ["Adjacency", "MappingGraph", "BreadthFirstSearch", "TraversalState"]
