from __future__ import annotations

"""机器人工厂蓝图评估（分支定界）。

资源顺序固定为 (ore, clay, obsidian, geode)。
后继不逐分钟展开，而是直接跳到“下一台机器人造好”的时刻：
等待资源够用后花一分钟建造；或者什么都不造直到时间用尽。
每分钟至多造一台；某种资源的机器人数超过每分钟最大消耗即无意义，直接剪掉。
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Sequence, Tuple

from searchkit.core.types import BnBResult, SearchConfig, combine_status
from searchkit.data.loader import parse_blueprints
from searchkit.search.branch_bound import branch_and_bound

logger = logging.getLogger(__name__)

ORE, CLAY, OBSIDIAN, GEODE = range(4)
Cost = Tuple[int, int, int]
Counts = Tuple[int, int, int, int]


@dataclass(frozen=True)
class Blueprint:
    blueprint_id: int
    costs: Tuple[Cost, Cost, Cost, Cost]

    @property
    def max_spend(self) -> Cost:
        """每种原料每分钟最多能花掉多少。"""
        return tuple(max(c[res] for c in self.costs) for res in range(3))


@dataclass(frozen=True)
class FactoryState:
    minute: int
    robots: Counts
    stock: Counts


class FactoryPlanner:
    def __init__(self, blueprint: Blueprint, minutes: int):
        self.blueprint = blueprint
        self.minutes = minutes
        self.max_spend = blueprint.max_spend

    def initial(self) -> FactoryState:
        return FactoryState(minute=0, robots=(1, 0, 0, 0), stock=(0, 0, 0, 0))

    def _build(self, state: FactoryState, kind: int) -> FactoryState | None:
        cost = self.blueprint.costs[kind]
        wait = 0
        for res in range(3):
            need = cost[res] - state.stock[res]
            if need <= 0:
                continue
            if state.robots[res] == 0:
                return None
            wait = max(wait, -(-need // state.robots[res]))
        done = state.minute + wait + 1
        if done >= self.minutes:
            return None
        span = wait + 1
        stock = tuple(
            state.stock[res] + state.robots[res] * span - (cost[res] if res < 3 else 0)
            for res in range(4)
        )
        robots = tuple(n + 1 if res == kind else n for res, n in enumerate(state.robots))
        return FactoryState(minute=done, robots=robots, stock=stock)

    def successors(self, state: FactoryState) -> List[FactoryState]:
        remaining = self.minutes - state.minute
        idle = FactoryState(
            minute=self.minutes,
            robots=state.robots,
            stock=tuple(s + r * remaining for s, r in zip(state.stock, state.robots)),
        )
        out = [idle]
        # 栈式搜索后进先出，晶洞机器人放最后以便最先展开。
        for kind in (ORE, CLAY, OBSIDIAN, GEODE):
            if kind != GEODE and state.robots[kind] >= self.max_spend[kind]:
                continue
            nxt = self._build(state, kind)
            if nxt is not None:
                out.append(nxt)
        return out

    def is_complete(self, state: FactoryState) -> bool:
        return state.minute >= self.minutes

    def score(self, state: FactoryState) -> int:
        return state.stock[GEODE] + state.robots[GEODE] * (self.minutes - state.minute)

    def upper_bound(self, state: FactoryState) -> int:
        # 假设此后每分钟都造一台晶洞机器人。
        remaining = self.minutes - state.minute
        return self.score(state) + remaining * (remaining - 1) // 2


def max_geodes(blueprint: Blueprint, minutes: int = 24, cfg: SearchConfig | None = None) -> BnBResult:
    planner = FactoryPlanner(blueprint, minutes)
    result = branch_and_bound(
        planner.initial(),
        planner.successors,
        planner.is_complete,
        planner.score,
        planner.upper_bound,
        cfg=cfg,
    )
    logger.debug("blueprint %d: %s geodes in %d minutes", blueprint.blueprint_id, result.best_score, minutes)
    return result


def _quality(blueprints: Sequence[Blueprint], results: Sequence[BnBResult]) -> int:
    return sum(bp.blueprint_id * int(r.best_score) for bp, r in zip(blueprints, results))


def _product(results: Sequence[BnBResult]) -> int:
    product = 1
    for r in results:
        product *= int(r.best_score)
    return product


def quality_level_sum(blueprints: Sequence[Blueprint], minutes: int = 24, cfg: SearchConfig | None = None) -> int:
    return _quality(blueprints, [max_geodes(bp, minutes, cfg) for bp in blueprints])


def top_blueprints_product(
    blueprints: Sequence[Blueprint], count: int = 3, minutes: int = 32, cfg: SearchConfig | None = None
) -> int:
    return _product([max_geodes(bp, minutes, cfg) for bp in blueprints[:count]])


def load(lines: Iterable[str]) -> List[Blueprint]:
    return [Blueprint(blueprint_id=bid, costs=costs) for bid, costs in parse_blueprints(list(lines))]


def solve(blueprints: Sequence[Blueprint], cfg: SearchConfig | None = None) -> Dict[str, Any]:
    first = [max_geodes(bp, 24, cfg) for bp in blueprints]
    second = [max_geodes(bp, 32, cfg) for bp in blueprints[:3]]
    return {
        "part_1": _quality(blueprints, first),
        "part_2": _product(second),
        "part_1_status": combine_status(r.status for r in first),
        "part_2_status": combine_status(r.status for r in second),
    }
