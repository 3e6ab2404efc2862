"""
Lazy breadth-first traversal over an :class:`Adjacency`.

Each ``await anext(bfs)`` dequeues until it finds an unvisited node, asks the
adjacency for that node's neighbors, enqueues the unvisited ones and returns
the node. Duplicates may sit in the queue; they are dropped when dequeued.
"""
from __future__ import annotations

import enum
from collections import deque
from typing import Deque, FrozenSet, Generic, Set

from site_walker.graph.adjacency import Adjacency, NodeT

__all__ = ("BreadthFirstSearch", "TraversalState")


class TraversalState(enum.Enum):
    READY = "ready"
    STEPPING = "stepping"
    EXHAUSTED = "exhausted"


class BreadthFirstSearch(Generic[NodeT]):
    """
    One-shot, forward-only BFS. Not restartable: iterating again resumes
    where the previous loop stopped. There is no built-in limit; the caller
    stops pulling when it has enough.
    """

    def __init__(self, adjacency: Adjacency[NodeT], start: NodeT) -> None:
        self._adjacency = adjacency
        self._queue: Deque[NodeT] = deque([start])
        self._visited: Set[NodeT] = set()
        self._state = TraversalState.READY

    @property
    def state(self) -> TraversalState:
        return self._state

    @property
    def visited(self) -> FrozenSet[NodeT]:
        return frozenset(self._visited)

    @property
    def pending(self) -> int:
        """Queue length, duplicates included."""
        return len(self._queue)

    def __aiter__(self) -> BreadthFirstSearch[NodeT]:
        return self

    async def __anext__(self) -> NodeT:
        if self._state is TraversalState.STEPPING:
            raise RuntimeError("BreadthFirstSearch does not support concurrent steps")
        if self._state is TraversalState.EXHAUSTED:
            raise StopAsyncIteration

        self._state = TraversalState.STEPPING
        try:
            while self._queue:
                node = self._queue.popleft()
                if node in self._visited:
                    continue
                try:
                    neighbors = await self._adjacency.neighbors(node)
                except BaseException:
                    # cancelled mid-lookup: keep the node so the next pull retries it
                    self._queue.appendleft(node)
                    raise
                for neighbor in neighbors:
                    if neighbor not in self._visited:
                        self._queue.append(neighbor)
                self._visited.add(node)
                self._state = TraversalState.READY if self._queue else TraversalState.EXHAUSTED
                return node
        finally:
            if self._state is TraversalState.STEPPING:
                self._state = TraversalState.READY if self._queue else TraversalState.EXHAUSTED

        raise StopAsyncIteration
