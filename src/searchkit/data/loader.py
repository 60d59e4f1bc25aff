from __future__ import annotations

"""谜题输入加载模块。

数据组织约定：
- 每个谜题一个纯文本文件，逐行解析；
- 正则在模块导入时编译一次，解析函数只读使用；
- 解析失败抛 ValueError 并指出行号。

加载流程：
1) read_lines 读文件并去掉行尾换行；
2) parse_* 把行列表转换为各谜题的领域结构。
"""

import re
from pathlib import Path
from typing import Dict, List, Sequence, Set, Tuple

from searchkit.core.types import Coord

VALVE_RE = re.compile(r"^Valve ([A-Z]+) has flow rate=(\d+); tunnels? leads? to valves? ([A-Z, ]+)$")
BLUEPRINT_RE = re.compile(
    r"^Blueprint (\d+): Each ore robot costs ([^.]*)\. Each clay robot costs ([^.]*)\. "
    r"Each obsidian robot costs ([^.]*)\. Each geode robot costs ([^.]*)\.$"
)
COST_RE = re.compile(r"^(\d+) (ore|clay|obsidian)$")

RESOURCES = ("ore", "clay", "obsidian")
BLIZZARD_CHARS = {"^": "north", ">": "east", "v": "south", "<": "west"}


def read_lines(path: str | Path) -> List[str]:
    """读取非空行（去掉行尾换行与空白）。"""
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"input file not found: {p}")
    return [line.rstrip() for line in p.read_text(encoding="utf-8").splitlines() if line.strip()]


def parse_heightmap(lines: Sequence[str]) -> Tuple[List[List[int]], Coord, Coord]:
    """高度图：a..z -> 0..25，S 为起点（高度 a），E 为终点（高度 z）。"""
    heights: List[List[int]] = []
    start = end = None
    for row_idx, line in enumerate(lines):
        row: List[int] = []
        for col_idx, ch in enumerate(line):
            if ch == "S":
                start = (row_idx, col_idx)
                ch = "a"
            elif ch == "E":
                end = (row_idx, col_idx)
                ch = "z"
            if not "a" <= ch <= "z":
                raise ValueError(f"unexpected height {ch!r} at line {row_idx + 1}")
            row.append(ord(ch) - ord("a"))
        heights.append(row)
    if not heights:
        raise ValueError("empty height map")
    if any(len(r) != len(heights[0]) for r in heights):
        raise ValueError("height map rows have different lengths")
    if start is None or end is None:
        raise ValueError("height map needs both S and E markers")
    return heights, start, end


def parse_valves(lines: Sequence[str]) -> Tuple[Dict[str, int], Dict[str, Tuple[str, ...]]]:
    """阀门扫描：返回 (流量表, 隧道邻接表)。"""
    flow: Dict[str, int] = {}
    tunnels: Dict[str, Tuple[str, ...]] = {}
    for idx, line in enumerate(lines, start=1):
        m = VALVE_RE.match(line.strip())
        if m is None:
            raise ValueError(f"invalid valve line {idx}: {line!r}")
        name = m.group(1)
        flow[name] = int(m.group(2))
        tunnels[name] = tuple(v.strip() for v in m.group(3).split(","))
    for name, dests in tunnels.items():
        for d in dests:
            if d not in flow:
                raise ValueError(f"valve {name} leads to unknown valve {d}")
    return flow, tunnels


def _parse_cost(text: str, line_no: int) -> Tuple[int, int, int]:
    """'3 ore and 14 clay' -> (ore, clay, obsidian)。"""
    amounts = dict.fromkeys(RESOURCES, 0)
    for part in text.split(" and "):
        m = COST_RE.match(part.strip())
        if m is None:
            raise ValueError(f"invalid robot cost {part!r} at line {line_no}")
        amounts[m.group(2)] = int(m.group(1))
    return amounts["ore"], amounts["clay"], amounts["obsidian"]


def parse_blueprints(lines: Sequence[str]) -> List[Tuple[int, Tuple[Tuple[int, int, int], ...]]]:
    """蓝图：每行返回 (id, (矿/黏土/黑曜石/晶洞 四种机器人的成本))。

    每种机器人读取自己的成本分组。
    """
    out = []
    for idx, line in enumerate(lines, start=1):
        m = BLUEPRINT_RE.match(line.strip())
        if m is None:
            raise ValueError(f"invalid blueprint line {idx}: {line!r}")
        costs = tuple(_parse_cost(m.group(g), idx) for g in range(2, 6))
        out.append((int(m.group(1)), costs))
    return out


def parse_basin(lines: Sequence[str]) -> Tuple[int, int, Coord, Coord, Dict[str, Set[Coord]]]:
    """暴风雪盆地：返回 (内部高, 内部宽, 起点, 终点, 各方向暴风雪的内部坐标)。

    内部坐标从 0 开始；起点/终点为外墙上的缺口（整图坐标）。
    """
    if len(lines) < 3:
        raise ValueError("basin needs at least three lines")
    n_rows = len(lines)
    n_cols = len(lines[0])
    if any(len(line) != n_cols for line in lines):
        raise ValueError("basin rows have different lengths")

    top_gaps = [c for c, ch in enumerate(lines[0]) if ch == "."]
    bottom_gaps = [c for c, ch in enumerate(lines[-1]) if ch == "."]
    if len(top_gaps) != 1 or len(bottom_gaps) != 1:
        raise ValueError("basin walls need exactly one gap at the top and one at the bottom")

    blizzards: Dict[str, Set[Coord]] = {d: set() for d in BLIZZARD_CHARS.values()}
    for row in range(1, n_rows - 1):
        line = lines[row]
        if line[0] != "#" or line[-1] != "#":
            raise ValueError(f"missing side wall at line {row + 1}")
        for col in range(1, n_cols - 1):
            ch = line[col]
            if ch == ".":
                continue
            if ch not in BLIZZARD_CHARS:
                raise ValueError(f"unexpected char {ch!r} at line {row + 1}")
            blizzards[BLIZZARD_CHARS[ch]].add((row - 1, col - 1))

    return n_rows - 2, n_cols - 2, (0, top_gaps[0]), (n_rows - 1, bottom_gaps[0]), blizzards
