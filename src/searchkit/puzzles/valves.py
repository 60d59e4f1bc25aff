from __future__ import annotations

"""阀门开启计划（分支定界）。

状态: (执行者元组, 仍关闭的有效阀门, 已锁定的泄压总量)
- 执行者在 t 分钟打开阀门 v，立即锁定 flow(v) * (budget - t) 的泄压量；
- 后继只为落后最多的执行者生成：前往并打开某个关闭阀门，或就此停止；
- 阀门间距离来自隧道图上的全源距离表。

上界：已锁定量 + 对每个关闭阀门，按任一活跃执行者最早可打开的时间计算其最大贡献
（忽略阀门之间的互斥），因此可采纳。
"""

import logging
import math
from dataclasses import dataclass
from typing import Any, Dict, FrozenSet, Iterable, Iterator, List, Sequence, Tuple

from searchkit.core.types import BnBResult, SearchConfig, Unreachable
from searchkit.data.loader import parse_valves
from searchkit.paths.all_pairs import DistanceTable
from searchkit.search.actors import Actor, Actors, all_finished, canonical, lagging_actor, replace_actor
from searchkit.search.branch_bound import branch_and_bound

logger = logging.getLogger(__name__)


@dataclass
class CaveMap:
    flow: Dict[str, int]
    tunnels: Dict[str, Tuple[str, ...]]

    def tunnel_neighbors(self, valve: str) -> Iterator[Tuple[str, int]]:
        for nxt in self.tunnels[valve]:
            yield nxt, 1

    def useful_valves(self) -> FrozenSet[str]:
        return frozenset(v for v, f in self.flow.items() if f > 0)


@dataclass(frozen=True)
class ValvePlan:
    actors: Actors
    closed: FrozenSet[str]
    released: int


class ValvePlanner:
    """把阀门问题包装成分支定界所需的四个回调。"""

    def __init__(self, cave: CaveMap, budget: int, start: str = "AA"):
        if start not in cave.flow:
            raise ValueError(f"unknown start valve {start!r}")
        self.cave = cave
        self.budget = budget
        self.start = start
        self.table = DistanceTable(cave.tunnel_neighbors)
        reachable = self.table.from_source(start)
        self.useful = frozenset(v for v in cave.useful_valves() if v in reachable)

    def distance(self, src: str, dst: str) -> float:
        return self.table.from_source(src).get(dst, math.inf)

    def initial(self, n_actors: int) -> ValvePlan:
        if n_actors < 1:
            raise ValueError("need at least one actor")
        actors = canonical(Actor(0, self.start) for _ in range(n_actors))
        return ValvePlan(actors=actors, closed=self.useful, released=0)

    def successors(self, plan: ValvePlan) -> List[ValvePlan]:
        idx = lagging_actor(plan.actors)
        actor = plan.actors[idx]
        out: List[ValvePlan] = []
        for valve in sorted(plan.closed):
            opened_at = actor.elapsed + self.distance(actor.position, valve) + 1
            if opened_at >= self.budget:
                continue
            opened_at = int(opened_at)
            out.append(
                ValvePlan(
                    actors=replace_actor(plan.actors, idx, Actor(opened_at, valve)),
                    closed=plan.closed - {valve},
                    released=plan.released + self.cave.flow[valve] * (self.budget - opened_at),
                )
            )
        # 停止：该执行者不再行动。
        stopped = Actor(self.budget, actor.position)
        out.append(ValvePlan(replace_actor(plan.actors, idx, stopped), plan.closed, plan.released))
        return out

    def is_complete(self, plan: ValvePlan) -> bool:
        return not plan.closed or all_finished(plan.actors, self.budget)

    def score(self, plan: ValvePlan) -> int:
        return plan.released

    def upper_bound(self, plan: ValvePlan) -> int:
        active = [a for a in plan.actors if not a.finished(self.budget)]
        bound = plan.released
        for valve in plan.closed:
            earliest = min(a.elapsed + self.distance(a.position, valve) + 1 for a in active)
            if earliest < self.budget:
                bound += self.cave.flow[valve] * int(self.budget - earliest)
        return bound


def max_pressure(
    cave: CaveMap,
    minutes: int = 30,
    n_actors: int = 1,
    start: str = "AA",
    cfg: SearchConfig | None = None,
) -> BnBResult:
    planner = ValvePlanner(cave, minutes, start)
    logger.debug("planning %d actors over %d useful valves for %d minutes", n_actors, len(planner.useful), minutes)
    return branch_and_bound(
        planner.initial(n_actors),
        planner.successors,
        planner.is_complete,
        planner.score,
        planner.upper_bound,
        cfg=cfg,
    )


def pressure_for_order(cave: CaveMap, order: Sequence[str], minutes: int = 30, start: str = "AA") -> int:
    """按给定顺序由单个执行者依次打开阀门，返回总泄压量。"""
    planner = ValvePlanner(cave, minutes, start)
    elapsed, position, total = 0, start, 0
    for valve in order:
        dist = planner.distance(position, valve)
        if math.isinf(dist):
            raise Unreachable(position, valve)
        elapsed += int(dist) + 1
        if elapsed >= minutes:
            break
        total += cave.flow[valve] * (minutes - elapsed)
        position = valve
    return total


def load(lines: Iterable[str]) -> CaveMap:
    flow, tunnels = parse_valves(list(lines))
    return CaveMap(flow=flow, tunnels=tunnels)


def solve(cave: CaveMap, cfg: SearchConfig | None = None) -> Dict[str, Any]:
    part_1 = max_pressure(cave, minutes=30, n_actors=1, cfg=cfg)
    part_2 = max_pressure(cave, minutes=26, n_actors=2, cfg=cfg)
    return {
        "part_1": int(part_1.best_score),
        "part_2": int(part_2.best_score),
        "part_1_status": part_1.status,
        "part_2_status": part_2.status,
    }
