from __future__ import annotations

"""路径辅助函数：
- 前驱表还原路径
- 网格边界检查
- 四邻域枚举
"""

from typing import Dict, Iterator, List

from .types import Coord, Node

DIRECTIONS = ((-1, 0), (1, 0), (0, -1), (0, 1))


def reconstruct_path(parents: Dict[Node, Node], start: Node, goal: Node) -> List[Node]:
    """沿前驱表从 goal 回溯到 start，返回正序节点序列。"""
    path = [goal]
    cur = goal
    while cur != start:
        cur = parents[cur]
        path.append(cur)
    path.reverse()
    return path


def in_bounds(coord: Coord, n_rows: int, n_cols: int) -> bool:
    row, col = coord
    return 0 <= row < n_rows and 0 <= col < n_cols


def orthogonal_neighbors(coord: Coord, n_rows: int, n_cols: int) -> Iterator[Coord]:
    """枚举网格内的上下左右邻格。"""
    row, col = coord
    for dr, dc in DIRECTIONS:
        nxt = (row + dr, col + dc)
        if in_bounds(nxt, n_rows, n_cols):
            yield nxt
