from __future__ import annotations

"""单源最短路引擎（Dijkstra，惰性发现节点）。

实现要点：
1) 优先队列条目: (累计代价, 插入序号, 节点)，同代价按先发现者优先；
2) 节点按需由调用方提供的邻接函数生成，无需预先给出整张图；
3) 过期条目在出队时惰性跳过，每个节点至多定稿一次；
4) 目标可以是节点、谓词或 None（遍历全部可达节点）。
"""

import heapq
import itertools
import logging
import math
from typing import Any, Dict, List, Optional, Set, Tuple, Union

from searchkit.core.types import (
    GoalPredicate,
    NegativeEdgeCostError,
    NeighborFn,
    Node,
    PathResult,
    SearchLimitError,
    Unreachable,
)

logger = logging.getLogger(__name__)

Goal = Union[Node, GoalPredicate, None]


def _goal_predicate(goal: Goal) -> Optional[GoalPredicate]:
    """把目标节点统一转换为谓词。"""
    if goal is None:
        return None
    if callable(goal):
        return goal
    return lambda node: node == goal


def dijkstra(
    start: Node,
    neighbors: NeighborFn,
    goal: Goal = None,
    *,
    max_expansions: Optional[int] = None,
) -> PathResult:
    """从 start 出发计算最短代价。

    - goal 为 None：扩展全部可达节点，返回完整代价表；
    - goal 给定：目标节点出队即停止，前沿耗尽则抛 Unreachable。
    """
    is_goal = _goal_predicate(goal)
    best: Dict[Node, float] = {start: 0}
    parents: Dict[Node, Node] = {}
    closed: Set[Node] = set()
    seq = itertools.count()
    queue: List[Tuple[float, int, Node]] = [(0, next(seq), start)]

    while queue:
        cur_cost, _, cur = heapq.heappop(queue)
        if cur in closed or cur_cost > best[cur]:
            continue
        closed.add(cur)
        if max_expansions is not None and len(closed) > max_expansions:
            raise SearchLimitError(f"shortest-path search exceeded {max_expansions} expansions")

        if is_goal is not None and is_goal(cur):
            logger.debug("goal %r reached at cost %s after %d expansions", cur, cur_cost, len(closed))
            return PathResult(
                start=start,
                costs={n: best[n] for n in closed},
                parents=parents,
                goal=cur,
                goal_cost=cur_cost,
                expanded=len(closed),
            )

        for nxt, edge_cost in neighbors(cur):
            if edge_cost < 0:
                raise NegativeEdgeCostError(f"negative edge cost {edge_cost} on {cur!r} -> {nxt!r}")
            if nxt in closed:
                continue
            new_cost = cur_cost + edge_cost
            if new_cost < best.get(nxt, math.inf):
                best[nxt] = new_cost
                parents[nxt] = cur
                heapq.heappush(queue, (new_cost, next(seq), nxt))

    if is_goal is not None:
        raise Unreachable(start, goal)

    logger.debug("search from %r finalized %d nodes", start, len(closed))
    return PathResult(start=start, costs={n: best[n] for n in closed}, parents=parents, expanded=len(closed))


def shortest_path(start: Node, neighbors: NeighborFn, goal: Goal = None, **kwargs: Any):
    """调用契约入口。

    无目标时返回 {节点: 最短代价}；有目标时返回目标代价（不可达抛 Unreachable）。
    """
    result = dijkstra(start, neighbors, goal, **kwargs)
    if goal is None:
        return dict(result.costs)
    return result.goal_cost
