from __future__ import annotations

"""单谜题求解 CLI。

命令行参数 -> SearchConfig -> 谜题驱动 -> 打印 JSON 结果。
"""

import argparse
import json
import logging
import time

from searchkit.core.types import SearchConfig, combine_status
from searchkit.data.loader import read_lines
from searchkit.puzzles import PUZZLES, get_puzzle


def _load_cfg(path: str) -> SearchConfig:
    """从 JSON 文件加载配置并覆盖默认值。"""
    cfg = SearchConfig()
    if not path:
        return cfg
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    for k, v in data.items():
        if hasattr(cfg, k):
            setattr(cfg, k, v)
    return cfg


def solve_file(puzzle: str, input_path: str, cfg: SearchConfig) -> dict:
    """解析输入文件并求两问答案。

    status 为两问的总状态；受 max_nodes / time_limit_s 截断时答案只是当前最优，不保证最优。
    """
    load, solve = get_puzzle(puzzle)
    t0 = time.time()
    answers = solve(load(read_lines(input_path)), cfg)
    status = combine_status([answers["part_1_status"], answers["part_2_status"]])
    return {"puzzle": puzzle, "status": status, **answers, "runtime_sec": time.time() - t0}


def main() -> None:
    """CLI 主入口。"""
    parser = argparse.ArgumentParser(description="Solve one puzzle input with the search engines")
    parser.add_argument("--puzzle", required=True, choices=sorted(PUZZLES))
    parser.add_argument("--input", required=True)
    parser.add_argument("--config", default="")
    parser.add_argument("--log-level", default="WARNING")
    args = parser.parse_args()

    logging.basicConfig(level=args.log_level.upper(), format="%(asctime)s %(name)s %(levelname)s %(message)s")
    cfg = _load_cfg(args.config)
    print(json.dumps(solve_file(args.puzzle, args.input, cfg), ensure_ascii=False))


if __name__ == "__main__":
    main()
