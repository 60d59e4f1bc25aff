import unittest

from searchkit.search.actors import Actor, all_finished, canonical, lagging_actor, replace_actor


class TestActors(unittest.TestCase):
    def test_canonical_order_shares_identity(self):
        a = canonical([Actor(5, "BB"), Actor(2, "DD")])
        b = canonical([Actor(2, "DD"), Actor(5, "BB")])
        self.assertEqual(a, b)
        self.assertEqual(hash(a), hash(b))

    def test_lagging_actor(self):
        actors = canonical([Actor(7, "CC"), Actor(3, "JJ"), Actor(3, "AA")])
        self.assertEqual(actors[lagging_actor(actors)].elapsed, 3)

    def test_replace_and_finish(self):
        actors = canonical([Actor(0, "AA"), Actor(0, "AA")])
        actors = replace_actor(actors, 0, Actor(26, "AA"))
        self.assertEqual(actors[0], Actor(0, "AA"))
        self.assertFalse(all_finished(actors, 26))
        actors = replace_actor(actors, lagging_actor(actors), Actor(30, "HH"))
        self.assertTrue(all_finished(actors, 26))


if __name__ == "__main__":
    unittest.main()
