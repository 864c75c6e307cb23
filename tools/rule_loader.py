import argparse
import re
from pathlib import Path

from simulator.rules import RuleTable, TransitionAction, TransitionKey, parse_move

# q<state>,(<read1>,<read2>)=q<next>,(<write1>,<write2>),<move1>,<move2>
RULE_PATTERN = re.compile(
    r"^\s*q(-?\d+),\((.),(.)\)=q(-?\d+),\((.),(.)\),(.),(.)"
)


def parse_rule_line(line):
    """Parse one rule line into (TransitionKey, TransitionAction), or None if it isn't one."""
    match = RULE_PATTERN.match(line)
    if match is None:
        return None
    state, read1, read2, next_state, write1, write2, move1, move2 = match.groups()
    key = TransitionKey(int(state), read1, read2)
    action = TransitionAction(int(next_state), write1, write2, parse_move(move1), parse_move(move2))
    return key, action


def parse_rules(lines, table):
    """Insert every valid rule into `table`. Returns the number of skipped lines."""
    skipped = 0
    for line in lines:
        rule = parse_rule_line(line)
        if rule is None:
            skipped += 1
            continue
        table.insert(*rule)
    return skipped


def load_rules(path, duplicate_policy="first"):
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Transition rule file not found at: {path}")

    table = RuleTable(duplicate_policy)
    with open(path, "r", encoding="utf-8") as f:
        table.skipped = parse_rules(f, table)
    return table


def main():
    parser = argparse.ArgumentParser(description="Parse a two-tape transition rule file and echo the rules")
    parser.add_argument("rules", nargs="?", default="transfer_rules.txt", help="Rule file to load")
    parser.add_argument("--duplicates", choices=["first", "last", "reject"], default="first",
                        help="How repeated (state, read1, read2) keys are handled")
    args = parser.parse_args()

    table = load_rules(args.rules, args.duplicates)
    for key, _ in table:
        print(table.format_rule(key))
    print(f"[INFO] Loaded {len(table)} rules, skipped {table.skipped} lines, {table.duplicates} duplicates.")


if __name__ == "__main__":
    main()
