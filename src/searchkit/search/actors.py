from __future__ import annotations

"""多执行者（multi-actor）状态辅助。

多个协作执行者共享一个全局资源集合，各自有位置与已用时间。
执行者元组始终按 (elapsed, position) 排序保存，
因此仅执行者编号不同的状态具有相同身份，可被去重。
"""

from dataclasses import dataclass
from typing import Hashable, Iterable, Tuple


@dataclass(frozen=True, order=True)
class Actor:
    elapsed: int
    position: Hashable

    def finished(self, budget: int) -> bool:
        return self.elapsed >= budget


Actors = Tuple[Actor, ...]


def canonical(actors: Iterable[Actor]) -> Actors:
    return tuple(sorted(actors))


def lagging_actor(actors: Actors) -> int:
    """返回已用时间最少的执行者下标（并列取第一个）。"""
    idx = 0
    for i, actor in enumerate(actors):
        if actor.elapsed < actors[idx].elapsed:
            idx = i
    return idx


def replace_actor(actors: Actors, idx: int, actor: Actor) -> Actors:
    """替换第 idx 个执行者并重新规范化顺序。"""
    return canonical(actors[:idx] + (actor,) + actors[idx + 1:])


def all_finished(actors: Actors, budget: int) -> bool:
    return all(a.finished(budget) for a in actors)
