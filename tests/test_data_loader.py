import tempfile
import unittest
from pathlib import Path

from searchkit.data.loader import parse_basin, parse_blueprints, parse_heightmap, parse_valves, read_lines


class TestDataLoader(unittest.TestCase):
    def test_read_lines_skips_blank(self):
        with tempfile.TemporaryDirectory() as td:
            path = Path(td) / "input.txt"
            path.write_text("abc\n\nSbE  \n", encoding="utf-8")
            self.assertEqual(read_lines(path), ["abc", "SbE"])

    def test_read_lines_missing_file(self):
        with self.assertRaises(FileNotFoundError):
            read_lines("/nonexistent/input.txt")

    def test_heightmap_markers(self):
        heights, start, end = parse_heightmap(["SbE"])
        self.assertEqual(heights, [[0, 1, 25]])
        self.assertEqual((start, end), ((0, 0), (0, 2)))
        with self.assertRaises(ValueError):
            parse_heightmap(["Sbc"])
        with self.assertRaises(ValueError):
            parse_heightmap(["Sb1E"])

    def test_valves(self):
        flow, tunnels = parse_valves(
            [
                "Valve AA has flow rate=0; tunnels lead to valves BB, CC",
                "Valve BB has flow rate=13; tunnel leads to valve AA",
                "Valve CC has flow rate=2; tunnel leads to valve AA",
            ]
        )
        self.assertEqual(flow, {"AA": 0, "BB": 13, "CC": 2})
        self.assertEqual(tunnels["AA"], ("BB", "CC"))

    def test_valves_invalid(self):
        with self.assertRaises(ValueError):
            parse_valves(["Valve AA has flow rate=x; tunnels lead to valves BB"])
        with self.assertRaises(ValueError):
            parse_valves(["Valve AA has flow rate=1; tunnel leads to valve QQ"])

    def test_blueprint_bad_resource(self):
        line = (
            "Blueprint 1: Each ore robot costs 4 ore. Each clay robot costs 2 gold. "
            "Each obsidian robot costs 3 ore and 14 clay. Each geode robot costs 2 ore and 7 obsidian."
        )
        with self.assertRaises(ValueError):
            parse_blueprints([line])

    def test_basin_needs_gaps(self):
        with self.assertRaises(ValueError):
            parse_basin(["#####", "#...#", "###.#"])
        with self.assertRaises(ValueError):
            parse_basin(["#.###", "#.x.#", "###.#"])


if __name__ == "__main__":
    unittest.main()
