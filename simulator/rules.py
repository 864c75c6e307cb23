from typing import NamedTuple

from simulator.errors import DuplicateRuleError

DUPLICATE_POLICIES = ("first", "last", "reject")

MOVES = {"L": -1, "R": 1}


class TransitionKey(NamedTuple):
    state: int
    read1: str
    read2: str


class TransitionAction(NamedTuple):
    next_state: int
    write1: str
    write2: str
    move1: int
    move2: int


def parse_move(char):
    """L is left, R is right, anything else leaves the head where it is."""
    return MOVES.get(char, 0)


def format_move(move):
    return {-1: "L", 1: "R"}.get(move, "N")


class RuleTable:
    """Transition table keyed on (state, symbol under head 1, symbol under head 2)."""

    def __init__(self, duplicate_policy="first"):
        if duplicate_policy not in DUPLICATE_POLICIES:
            raise ValueError(f"Unknown duplicate policy {duplicate_policy!r}, expected one of {DUPLICATE_POLICIES}")
        self.duplicate_policy = duplicate_policy
        self._rules = {}
        self.duplicates = 0
        # Lines the loader could not parse
        self.skipped = 0

    def insert(self, key, action):
        key = TransitionKey(*key)
        action = TransitionAction(*action)
        if key in self._rules:
            self.duplicates += 1
            if self.duplicate_policy == "reject":
                raise DuplicateRuleError(key)
            if self.duplicate_policy == "first":
                return False
        self._rules[key] = action
        return True

    def lookup(self, key):
        return self._rules.get(key)

    def states(self):
        """Every state named by a rule, as source or destination."""
        found = set()
        for key, action in self._rules.items():
            found.add(key.state)
            found.add(action.next_state)
        return sorted(found)

    def __contains__(self, key):
        return key in self._rules

    def __len__(self):
        return len(self._rules)

    def __iter__(self):
        return iter(self._rules.items())

    def format_rule(self, key):
        action = self._rules[key]
        return (
            f"q{key.state},({key.read1},{key.read2})="
            f"q{action.next_state},({action.write1},{action.write2}),"
            f"{format_move(action.move1)},{format_move(action.move2)}"
        )
