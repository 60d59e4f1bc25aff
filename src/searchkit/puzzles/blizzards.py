from __future__ import annotations

"""暴风雪盆地穿越（带时间维度的网格最短路）。

暴风雪按固定方向每分钟移动一格，在墙内循环，
所以整张地图以 lcm(高, 宽) 分钟为周期重复。
搜索节点取 (行, 列, 分钟 mod 周期)，每一步（包括原地等待）代价为 1 分钟，
且只能落在下一分钟没有暴风雪的格子上；起点和终点缺口永远安全。
"""

import logging
import math
from dataclasses import dataclass
from typing import Any, Dict, FrozenSet, Iterator, List, Tuple

from searchkit.core.path_utils import DIRECTIONS
from searchkit.core.types import Coord, SearchConfig
from searchkit.data.loader import parse_basin
from searchkit.paths.dijkstra import dijkstra

logger = logging.getLogger(__name__)

TimedCoord = Tuple[int, int, int]


@dataclass(frozen=True)
class Basin:
    """height/width 为墙内尺寸；暴风雪坐标为墙内 0 起坐标。"""
    height: int
    width: int
    start: Coord
    end: Coord
    north: FrozenSet[Coord]
    east: FrozenSet[Coord]
    south: FrozenSet[Coord]
    west: FrozenSet[Coord]

    @property
    def period(self) -> int:
        return self.height * self.width // math.gcd(self.height, self.width)

    def blizzard_at(self, coord: Coord, minute: int) -> bool:
        """整图坐标 coord 在第 minute 分钟是否有暴风雪。"""
        r, c = coord[0] - 1, coord[1] - 1
        h, w = self.height, self.width
        return (
            (r, (c - minute) % w) in self.east
            or (r, (c + minute) % w) in self.west
            or ((r - minute) % h, c) in self.south
            or ((r + minute) % h, c) in self.north
        )

    def inside(self, coord: Coord) -> bool:
        return 1 <= coord[0] <= self.height and 1 <= coord[1] <= self.width

    def is_open(self, coord: Coord, minute: int) -> bool:
        if coord == self.start or coord == self.end:
            return True
        return self.inside(coord) and not self.blizzard_at(coord, minute)

    def moves(self, node: TimedCoord) -> Iterator[Tuple[TimedCoord, int]]:
        row, col, phase = node
        nxt_phase = (phase + 1) % self.period
        for dr, dc in ((0, 0),) + DIRECTIONS:
            nxt = (row + dr, col + dc)
            if self.is_open(nxt, phase + 1):
                yield (nxt[0], nxt[1], nxt_phase), 1


def crossing_time(basin: Basin, src: Coord, dst: Coord, depart: int = 0, cfg: SearchConfig | None = None) -> int:
    """从 src 于 depart 分钟出发到达 dst 所需分钟数。"""
    cfg = cfg or SearchConfig()
    start = (src[0], src[1], depart % basin.period)
    result = dijkstra(
        start,
        basin.moves,
        lambda node: (node[0], node[1]) == dst,
        max_expansions=cfg.max_expansions,
    )
    logger.debug("crossing %r -> %r from minute %d took %s", src, dst, depart, result.goal_cost)
    return int(result.goal_cost)


def round_trips(basin: Basin, legs: List[Tuple[Coord, Coord]], cfg: SearchConfig | None = None) -> int:
    """依次走完多段行程，返回最终到达的分钟数。"""
    minute = 0
    for src, dst in legs:
        minute += crossing_time(basin, src, dst, minute, cfg)
    return minute


def load(lines: List[str]) -> Basin:
    height, width, start, end, blizzards = parse_basin(lines)
    return Basin(
        height=height,
        width=width,
        start=start,
        end=end,
        north=frozenset(blizzards["north"]),
        east=frozenset(blizzards["east"]),
        south=frozenset(blizzards["south"]),
        west=frozenset(blizzards["west"]),
    )


def solve(basin: Basin, cfg: SearchConfig | None = None) -> Dict[str, Any]:
    there = (basin.start, basin.end)
    back = (basin.end, basin.start)
    return {
        "part_1": round_trips(basin, [there], cfg),
        "part_2": round_trips(basin, [there, back, there], cfg),
        "part_1_status": "OPTIMAL",
        "part_2_status": "OPTIMAL",
    }
