import json
import tempfile
import unittest
from pathlib import Path

from searchkit.cli.batch import run_batch
from searchkit.cli.solve import _load_cfg, solve_file
from searchkit.core.types import SearchConfig

VALVES = [
    "Valve AA has flow rate=0; tunnels lead to valves DD, II, BB",
    "Valve BB has flow rate=13; tunnels lead to valves CC, AA",
    "Valve CC has flow rate=2; tunnels lead to valves DD, BB",
    "Valve DD has flow rate=20; tunnels lead to valves CC, AA, EE",
    "Valve EE has flow rate=3; tunnels lead to valves FF, DD",
    "Valve FF has flow rate=0; tunnels lead to valves EE, GG",
    "Valve GG has flow rate=0; tunnels lead to valves FF, HH",
    "Valve HH has flow rate=22; tunnel leads to valve GG",
    "Valve II has flow rate=0; tunnels lead to valves AA, JJ",
    "Valve JJ has flow rate=21; tunnel leads to valve II",
]


class TestCli(unittest.TestCase):
    def test_load_cfg_overrides_known_keys(self):
        with tempfile.TemporaryDirectory() as td:
            path = Path(td) / "cfg.json"
            path.write_text(json.dumps({"strategy": "best_first", "max_nodes": 10, "bogus": 1}), encoding="utf-8")
            cfg = _load_cfg(str(path))
            self.assertEqual(cfg.strategy, "best_first")
            self.assertEqual(cfg.max_nodes, 10)
            self.assertFalse(hasattr(cfg, "bogus"))

    def test_solve_file(self):
        with tempfile.TemporaryDirectory() as td:
            path = Path(td) / "hill.txt"
            path.write_text("Sabqponm\nabcryxxl\naccszExk\nacctuvwj\nabdefghi\n", encoding="utf-8")
            out = solve_file("hill-climb", str(path), _load_cfg(""))
            self.assertEqual(out["puzzle"], "hill-climb")
            self.assertEqual(out["part_1"], 31)
            self.assertEqual(out["part_2"], 29)
            self.assertEqual(out["status"], "OPTIMAL")

    def test_unknown_puzzle(self):
        with self.assertRaises(ValueError):
            solve_file("nope", "missing.txt", _load_cfg(""))

    def test_run_batch_records_errors(self):
        with tempfile.TemporaryDirectory() as td:
            base = Path(td)
            (base / "hill.txt").write_text("SbcdefghijklmnopqrstuvwxyE\n", encoding="utf-8")
            manifest = base / "manifest.json"
            manifest.write_text(
                json.dumps([{"puzzle": "hill-climb", "input": "hill.txt"}, {"puzzle": "valves", "input": "gone.txt"}]),
                encoding="utf-8",
            )
            report = run_batch(str(manifest), _load_cfg(""), output_dir=str(base / "out"))
            self.assertEqual(report["summary"]["solved"], 1.0)
            statuses = [r["status"] for r in report["results"]]
            self.assertEqual(statuses, ["OPTIMAL", "ERROR"])
            self.assertEqual(report["results"][0]["part_1"], 25)
            self.assertTrue((base / "out" / "report.json").exists())

    def test_run_batch_records_expansion_limit(self):
        with tempfile.TemporaryDirectory() as td:
            base = Path(td)
            (base / "hill.txt").write_text("SbcdefghijklmnopqrstuvwxyE\n", encoding="utf-8")
            manifest = base / "manifest.json"
            manifest.write_text(json.dumps([{"puzzle": "hill-climb", "input": "hill.txt"}]), encoding="utf-8")
            report = run_batch(str(manifest), SearchConfig(max_expansions=3), output_dir=str(base / "out"))
            self.assertEqual(report["results"][0]["status"], "ERROR")
            self.assertIn("3", report["results"][0]["error"])
            self.assertEqual(report["summary"]["solved"], 0.0)
            self.assertTrue((base / "out" / "report.json").exists())

    def test_truncated_search_is_not_solved(self):
        with tempfile.TemporaryDirectory() as td:
            base = Path(td)
            (base / "valves.txt").write_text("\n".join(VALVES) + "\n", encoding="utf-8")
            out = solve_file("valves", str(base / "valves.txt"), SearchConfig(max_nodes=2))
            self.assertEqual(out["status"], "NODE_LIMIT")
            self.assertEqual(out["part_1_status"], "NODE_LIMIT")

            manifest = base / "manifest.json"
            manifest.write_text(json.dumps([{"puzzle": "valves", "input": "valves.txt"}]), encoding="utf-8")
            report = run_batch(str(manifest), SearchConfig(max_nodes=2), output_dir=str(base / "out"))
            self.assertEqual(report["results"][0]["status"], "NODE_LIMIT")
            self.assertEqual(report["summary"]["solved"], 0.0)
            self.assertEqual(report["summary"]["limited"], 1.0)


if __name__ == "__main__":
    unittest.main()
