from __future__ import annotations

"""分支定界状态空间搜索。

该模块负责通用的最大化搜索循环：
1) 以初始状态为种子建立候选前沿；
2) 反复弹出候选并生成后继；
3) 完成态更新 incumbent，未完成态用可采纳上界剪枝；
4) 同一身份的状态只保留一个代表。

上界函数必须可采纳（不低于真实可达最优），否则剪枝会静默丢掉最优解。
"""

import heapq
import itertools
import logging
import math
import time
from collections import deque
from typing import Any, Callable, Hashable, Iterable, List, Optional, Set, Tuple

from searchkit.core.types import STRATEGIES, BnBResult, SearchConfig, SearchStats

logger = logging.getLogger(__name__)

State = Any
SuccessorFn = Callable[[State], Iterable[State]]
CompleteFn = Callable[[State], bool]
ScoreFn = Callable[[State], float]
KeyFn = Callable[[State], Hashable]


class _Frontier:
    """候选前沿容器。

    - depth_first: 栈（后进先出）；
    - breadth_first: 队列（先进先出）；
    - best_first: 按上界从大到小。
    """

    def __init__(self, strategy: str):
        if strategy not in STRATEGIES:
            raise ValueError(f"Unknown strategy {strategy!r}. Choose one of: {', '.join(STRATEGIES)}")
        self.strategy = strategy
        self._seq = itertools.count()
        self._stack: List[Tuple[State, float]] = []
        self._fifo: deque = deque()
        self._heap: List[Tuple[float, int, State]] = []

    def push(self, state: State, bound: float) -> None:
        if self.strategy == "depth_first":
            self._stack.append((state, bound))
        elif self.strategy == "breadth_first":
            self._fifo.append((state, bound))
        else:
            heapq.heappush(self._heap, (-bound, next(self._seq), state))

    def pop(self) -> Tuple[State, float]:
        if self.strategy == "depth_first":
            return self._stack.pop()
        if self.strategy == "breadth_first":
            return self._fifo.popleft()
        neg_bound, _, state = heapq.heappop(self._heap)
        return state, -neg_bound

    def __len__(self) -> int:
        return len(self._stack) + len(self._fifo) + len(self._heap)


def branch_and_bound(
    initial: State,
    successors: SuccessorFn,
    is_complete: CompleteFn,
    score: ScoreFn,
    upper_bound: ScoreFn,
    *,
    cfg: Optional[SearchConfig] = None,
    key: Optional[KeyFn] = None,
    floor: float = 0,
) -> BnBResult:
    """求解入口。

    best_score 以 floor 为哨兵初值；若从未出现完成态则原样返回 floor，
    状态为 NO_SOLUTION，由调用方解释为“无可行方案”。
    """
    cfg = cfg or SearchConfig()
    key = key or (lambda s: s)
    stats = SearchStats()
    t0 = time.monotonic()

    best = floor
    best_state = None

    if is_complete(initial):
        s = score(initial)
        stats.runtime_sec = time.monotonic() - t0
        if s >= best:
            return BnBResult(status="OPTIMAL", best_score=s, best_state=initial, stats=stats)
        return BnBResult(status="NO_SOLUTION", best_score=best, stats=stats)

    frontier = _Frontier(cfg.strategy)
    # 根节点总是扩展，不参与上界比较。
    frontier.push(initial, math.inf)
    seen: Set[Hashable] = {key(initial)} if cfg.dedup else set()

    status = "OPTIMAL"
    while frontier:
        if cfg.max_nodes is not None and stats.expanded >= cfg.max_nodes:
            status = "NODE_LIMIT"
            break
        if cfg.time_limit_s is not None and time.monotonic() - t0 > cfg.time_limit_s:
            status = "TIME_LIMIT"
            break

        state, bound = frontier.pop()
        if bound <= best:
            # incumbent 在入栈之后变好，此候选已无希望。
            stats.pruned += 1
            continue
        stats.expanded += 1
        if cfg.log_every and stats.expanded % cfg.log_every == 0:
            logger.info("expanded=%d frontier=%d best=%s", stats.expanded, len(frontier), best)

        for nxt in successors(state):
            stats.generated += 1
            if is_complete(nxt):
                s = score(nxt)
                if s > best or (best_state is None and s == best):
                    best = s
                    best_state = nxt
                    stats.incumbent_updates += 1
                    logger.debug("new incumbent %s after %d expansions", s, stats.expanded)
                continue

            ub = upper_bound(nxt)
            if ub <= best:
                stats.pruned += 1
                continue
            if cfg.dedup:
                k = key(nxt)
                if k in seen:
                    stats.duplicates += 1
                    continue
                seen.add(k)
            frontier.push(nxt, ub)

    if status == "OPTIMAL" and best_state is None:
        status = "NO_SOLUTION"
    stats.runtime_sec = time.monotonic() - t0
    logger.debug("branch-and-bound finished: status=%s best=%s stats=%s", status, best, stats.as_dict())
    return BnBResult(status=status, best_score=best, best_state=best_state, stats=stats)


def optimize(
    initial: State,
    successors: SuccessorFn,
    is_complete: CompleteFn,
    score: ScoreFn,
    upper_bound: ScoreFn,
    **kwargs: Any,
) -> float:
    """调用契约入口：只返回最优分数。"""
    return branch_and_bound(initial, successors, is_complete, score, upper_bound, **kwargs).best_score
