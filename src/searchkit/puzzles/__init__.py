"""谜题驱动：把输入解析为领域结构，并为两个搜索引擎构造回调。"""

from typing import Callable, Dict, Tuple

from . import blizzards, heightmap, robots, valves

PUZZLES: Dict[str, Tuple[Callable, Callable]] = {
    "hill-climb": (heightmap.load, heightmap.solve),
    "valves": (valves.load, valves.solve),
    "blizzards": (blizzards.load, blizzards.solve),
    "robots": (robots.load, robots.solve),
}


def get_puzzle(name: str) -> Tuple[Callable, Callable]:
    try:
        return PUZZLES[name]
    except KeyError:
        raise ValueError(f"Unknown puzzle {name!r}. Choose one of: {', '.join(sorted(PUZZLES))}") from None


__all__ = ["PUZZLES", "get_puzzle"]
