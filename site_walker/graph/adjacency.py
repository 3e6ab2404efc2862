"""
The adjacency contract used by the traversal engine.

Anything with an awaitable ``neighbors(node)`` returning the nodes one hop
away can be walked. Implementations must absorb their own failures and
return an empty sequence instead of raising.
"""
from __future__ import annotations

from typing import Dict, Hashable, Iterable, List, Mapping, Protocol, Sequence, TypeVar

__all__ = ("Adjacency", "MappingGraph", "NodeT")

NodeT = TypeVar("NodeT", bound=Hashable)


class Adjacency(Protocol[NodeT]):
    """What is reachable in one hop from a node."""

    async def neighbors(self, node: NodeT) -> Sequence[NodeT]:
        ...


class MappingGraph:
    """In-memory graph given as ``{node: [neighbor, ...]}``."""

    def __init__(self, edges: Mapping[Hashable, Iterable[Hashable]]) -> None:
        self._edges: Dict[Hashable, List[Hashable]] = {k: list(v) for k, v in edges.items()}
        self.calls: List[Hashable] = []

    async def neighbors(self, node: Hashable) -> List[Hashable]:
        self.calls.append(node)
        return list(self._edges.get(node, ()))
