from __future__ import annotations

"""核心数据类型定义。

该模块统一描述：
- 搜索节点 / 邻接规则的类型别名
- 最短路结果与分支定界结果结构
- 搜索配置与统计
- 引擎抛出的异常
"""

import math
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Hashable, Iterable, List, Optional, Tuple

Node = Hashable
Coord = Tuple[int, int]
Edge = Tuple[Node, float]
NeighborFn = Callable[[Node], Iterable[Edge]]
GoalPredicate = Callable[[Node], bool]

STRATEGIES = ("depth_first", "breadth_first", "best_first")


def combine_status(statuses: Iterable[str]) -> str:
    """多次搜索的总状态：全部 OPTIMAL 才算 OPTIMAL，否则取第一个非最优状态。"""
    for status in statuses:
        if status != "OPTIMAL":
            return status
    return "OPTIMAL"


class Unreachable(LookupError):
    """最短路搜索耗尽前沿仍未到达目标。"""

    def __init__(self, start: Node, goal: Any):
        super().__init__(f"goal {goal!r} is unreachable from {start!r}")
        self.start = start
        self.goal = goal


class NegativeEdgeCostError(ValueError):
    pass


class SearchLimitError(RuntimeError):
    pass


@dataclass
class SearchConfig:
    """搜索全局配置（策略、限制、日志频率）。"""
    strategy: str = "depth_first"
    max_nodes: Optional[int] = None
    time_limit_s: Optional[float] = None
    dedup: bool = True
    max_expansions: Optional[int] = None
    log_every: int = 100_000


@dataclass
class PathResult:
    """单源最短路结果。

    - costs: 已定稿节点的最短代价（不可达节点不出现，即视为无穷）
    - parents: 前驱表，用于还原路径
    - goal/goal_cost: 命中的目标节点及其代价（未设目标时为 None）
    """
    start: Node
    costs: Dict[Node, float]
    parents: Dict[Node, Node]
    goal: Optional[Node] = None
    goal_cost: Optional[float] = None
    expanded: int = 0

    def cost_to(self, node: Node) -> float:
        return self.costs.get(node, math.inf)

    def path_to(self, node: Node) -> List[Node]:
        from .path_utils import reconstruct_path

        if node not in self.costs:
            raise Unreachable(self.start, node)
        return reconstruct_path(self.parents, self.start, node)


@dataclass
class SearchStats:
    """分支定界过程统计。"""
    expanded: int = 0
    generated: int = 0
    pruned: int = 0
    duplicates: int = 0
    incumbent_updates: int = 0
    runtime_sec: float = 0.0

    def as_dict(self) -> Dict[str, float]:
        return {
            "expanded": float(self.expanded),
            "generated": float(self.generated),
            "pruned": float(self.pruned),
            "duplicates": float(self.duplicates),
            "incumbent_updates": float(self.incumbent_updates),
            "runtime_sec": self.runtime_sec,
        }


@dataclass
class BnBResult:
    """分支定界求解结果。"""
    status: str
    best_score: float
    best_state: Any = None
    stats: SearchStats = field(default_factory=SearchStats)
