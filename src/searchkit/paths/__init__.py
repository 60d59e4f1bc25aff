"""最短路子包：单源 Dijkstra 与全源距离表。"""

from .all_pairs import DistanceTable, all_pairs_distances
from .dijkstra import dijkstra, shortest_path

__all__ = ["DistanceTable", "all_pairs_distances", "dijkstra", "shortest_path"]
