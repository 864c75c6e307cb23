import unittest

from simulator.errors import DuplicateRuleError
from simulator.rules import RuleTable, TransitionAction, TransitionKey, format_move, parse_move


KEY = TransitionKey(0, "1", "E")
FIRST = TransitionAction(1, "A", "E", 1, 0)
SECOND = TransitionAction(2, "B", "1", -1, 1)


class RuleTableTests(unittest.TestCase):
    def test_lookup_by_plain_tuple(self):
        table = RuleTable()
        table.insert(KEY, FIRST)

        self.assertEqual(table.lookup((0, "1", "E")), FIRST)
        self.assertIsNone(table.lookup((0, "0", "E")))
        self.assertIn((0, "1", "E"), table)

    def test_first_insert_wins_by_default(self):
        table = RuleTable()

        self.assertTrue(table.insert(KEY, FIRST))
        self.assertFalse(table.insert(KEY, SECOND))

        self.assertEqual(table.lookup(KEY), FIRST)
        self.assertEqual(len(table), 1)
        self.assertEqual(table.duplicates, 1)

    def test_last_insert_wins(self):
        table = RuleTable("last")
        table.insert(KEY, FIRST)
        table.insert(KEY, SECOND)

        self.assertEqual(table.lookup(KEY), SECOND)

    def test_reject_duplicates(self):
        table = RuleTable("reject")
        table.insert(KEY, FIRST)

        with self.assertRaises(DuplicateRuleError) as ctx:
            table.insert(KEY, SECOND)
        self.assertEqual(ctx.exception.key, KEY)
        self.assertEqual(table.lookup(KEY), FIRST)

    def test_unknown_policy(self):
        with self.assertRaises(ValueError):
            RuleTable("newest")

    def test_states_and_iteration(self):
        table = RuleTable()
        table.insert(KEY, FIRST)
        table.insert((1, "0", "E"), (999999999, "0", "E", 0, 1))

        self.assertEqual(table.states(), [0, 1, 999999999])
        self.assertEqual([key for key, _ in table], [KEY, TransitionKey(1, "0", "E")])

    def test_moves(self):
        self.assertEqual(parse_move("L"), -1)
        self.assertEqual(parse_move("R"), 1)
        self.assertEqual(parse_move("N"), 0)
        self.assertEqual(parse_move("S"), 0)
        self.assertEqual(format_move(-1), "L")
        self.assertEqual(format_move(0), "N")

    def test_format_rule(self):
        table = RuleTable()
        table.insert(KEY, FIRST)

        self.assertEqual(table.format_rule(KEY), "q0,(1,E)=q1,(A,E),R,N")


if __name__ == "__main__":
    unittest.main()
