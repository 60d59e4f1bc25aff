import unittest

from searchkit.core.types import SearchConfig, combine_status
from searchkit.puzzles import robots
from searchkit.puzzles.robots import Blueprint, FactoryPlanner, max_geodes, quality_level_sum

EXAMPLE = [
    "Blueprint 1: Each ore robot costs 4 ore. Each clay robot costs 2 ore. "
    "Each obsidian robot costs 3 ore and 14 clay. Each geode robot costs 2 ore and 7 obsidian.",
    "Blueprint 2: Each ore robot costs 2 ore. Each clay robot costs 3 ore. "
    "Each obsidian robot costs 3 ore and 8 clay. Each geode robot costs 3 ore and 12 obsidian.",
]


class TestRobots(unittest.TestCase):
    def setUp(self):
        self.blueprints = robots.load(EXAMPLE)

    def test_each_robot_reads_its_own_cost(self):
        bp = self.blueprints[0]
        self.assertEqual(bp.blueprint_id, 1)
        self.assertEqual(bp.costs, ((4, 0, 0), (2, 0, 0), (3, 14, 0), (2, 0, 7)))
        self.assertEqual(bp.max_spend, (4, 14, 7))

    def test_build_waits_for_resources(self):
        planner = FactoryPlanner(self.blueprints[0], 24)
        nxt = planner.successors(planner.initial())
        built = {s.robots: s for s in nxt if s.minute < 24}
        clay = built[(1, 1, 0, 0)]
        # 2 ore needs two minutes of mining, building takes the third.
        self.assertEqual(clay.minute, 3)
        self.assertEqual(clay.stock, (1, 0, 0, 0))

    def test_example_blueprints(self):
        self.assertEqual(max_geodes(self.blueprints[0], 24).best_score, 9)
        self.assertEqual(max_geodes(self.blueprints[1], 24).best_score, 12)

    def test_quality_level_sum(self):
        self.assertEqual(quality_level_sum(self.blueprints, 24), 33)

    def test_free_geode_robots(self):
        bp = Blueprint(blueprint_id=3, costs=((1, 0, 0), (1, 0, 0), (1, 0, 0), (1, 0, 0)))
        # 第 2、3、4 分钟各造一台晶洞机器人：3 + 2 + 1。
        self.assertEqual(max_geodes(bp, 5).best_score, 6)


    def test_solve_status_reflects_node_limit(self):
        answers = robots.solve(self.blueprints, SearchConfig(max_nodes=1))
        self.assertEqual(answers["part_1_status"], "NODE_LIMIT")
        self.assertEqual(answers["part_2_status"], "NODE_LIMIT")

    def test_combine_status_keeps_first_shortfall(self):
        self.assertEqual(combine_status(["OPTIMAL", "OPTIMAL"]), "OPTIMAL")
        self.assertEqual(combine_status(["OPTIMAL", "TIME_LIMIT", "NODE_LIMIT"]), "TIME_LIMIT")


if __name__ == "__main__":
    unittest.main()
