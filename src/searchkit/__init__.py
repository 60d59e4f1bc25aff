"""Implicit-graph shortest paths and branch-and-bound search.

公共 API:
- shortest_path / dijkstra: 单源最短路
- all_pairs_distances: 关键节点全源距离
- optimize / branch_and_bound: 分支定界最大化
"""

from .core.types import SearchConfig, Unreachable
from .paths import DistanceTable, all_pairs_distances, dijkstra, shortest_path
from .search import branch_and_bound, optimize

__all__ = [
    "DistanceTable",
    "SearchConfig",
    "Unreachable",
    "all_pairs_distances",
    "branch_and_bound",
    "dijkstra",
    "optimize",
    "shortest_path",
]
