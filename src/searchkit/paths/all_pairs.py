from __future__ import annotations

"""关键节点间的全源距离表。

对每个关键节点跑一次单源搜索（而不是每对节点各跑一次），
结果缓存在 (src, dst) -> 距离 映射中，供分支定界的后继函数反复查询。
"""

from typing import Dict, Iterable, Optional, Tuple

from searchkit.core.types import NeighborFn, Node, Unreachable
from searchkit.paths.dijkstra import dijkstra


class DistanceTable:
    """按源节点惰性计算并缓存最短距离。"""

    def __init__(self, neighbors: NeighborFn, max_expansions: Optional[int] = None):
        self.neighbors = neighbors
        self.max_expansions = max_expansions
        self._by_source: Dict[Node, Dict[Node, float]] = {}

    def from_source(self, src: Node) -> Dict[Node, float]:
        if src not in self._by_source:
            result = dijkstra(src, self.neighbors, max_expansions=self.max_expansions)
            self._by_source[src] = result.costs
        return self._by_source[src]

    def distance(self, src: Node, dst: Node) -> float:
        costs = self.from_source(src)
        if dst not in costs:
            raise Unreachable(src, dst)
        return costs[dst]

    @property
    def searches(self) -> int:
        return len(self._by_source)


def all_pairs_distances(nodes: Iterable[Node], neighbors: NeighborFn) -> Dict[Tuple[Node, Node], float]:
    """构建关键节点两两距离表，不可达的节点对不写入。"""
    interesting = list(dict.fromkeys(nodes))
    table = DistanceTable(neighbors)
    out: Dict[Tuple[Node, Node], float] = {}
    for src in interesting:
        costs = table.from_source(src)
        for dst in interesting:
            if dst in costs:
                out[(src, dst)] = costs[dst]
    return out
