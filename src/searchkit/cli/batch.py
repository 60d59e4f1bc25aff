from __future__ import annotations

"""批量求解 CLI。

manifest 为 JSON 列表，每项 {"puzzle": ..., "input": ...}；
逐项求解后汇总并写出 report.json。
"""

import argparse
import json
import logging
from pathlib import Path
from typing import List

from searchkit.cli.solve import _load_cfg, solve_file
from searchkit.core.types import SearchConfig, SearchLimitError, Unreachable

logger = logging.getLogger(__name__)


def run_batch(manifest_path: str, cfg: SearchConfig, output_dir: str = "outputs") -> dict:
    """批量入口：单项失败记录为 ERROR 状态，不中断整批。

    只有 OPTIMAL 计入 solved；被节点/时间上限截断的结果计入 limited。
    """
    entries = json.loads(Path(manifest_path).read_text(encoding="utf-8"))
    base = Path(manifest_path).parent
    results: List[dict] = []
    for entry in entries:
        input_path = Path(entry["input"])
        if not input_path.is_absolute():
            input_path = base / input_path
        try:
            res = solve_file(entry["puzzle"], str(input_path), cfg)
        except (ValueError, FileNotFoundError, Unreachable, SearchLimitError) as exc:
            logger.warning("failed on %s: %s", input_path, exc)
            res = {"status": "ERROR", "puzzle": entry.get("puzzle"), "error": str(exc)}
        res["input"] = str(input_path)
        results.append(res)

    solved = [r for r in results if r["status"] == "OPTIMAL"]
    finished = [r for r in results if r["status"] != "ERROR"]
    summary = {
        "entries": float(len(results)),
        "solved": float(len(solved)),
        "limited": float(len(finished) - len(solved)),
        "total_runtime_sec": sum(r["runtime_sec"] for r in finished),
    }
    out = Path(output_dir)
    out.mkdir(parents=True, exist_ok=True)
    (out / "report.json").write_text(
        json.dumps({"summary": summary, "results": results}, ensure_ascii=False, indent=2),
        encoding="utf-8",
    )
    return {"summary": summary, "results": results}


def main() -> None:
    """读取参数并运行 run_batch。"""
    parser = argparse.ArgumentParser(description="Solve a batch of puzzle inputs")
    parser.add_argument("--manifest", required=True)
    parser.add_argument("--config", default="")
    parser.add_argument("--output-dir", default="outputs")
    parser.add_argument("--log-level", default="WARNING")
    args = parser.parse_args()

    logging.basicConfig(level=args.log_level.upper(), format="%(asctime)s %(name)s %(levelname)s %(message)s")
    report = run_batch(args.manifest, _load_cfg(args.config), output_dir=args.output_dir)
    print(json.dumps(report["summary"], ensure_ascii=False))


if __name__ == "__main__":
    main()
