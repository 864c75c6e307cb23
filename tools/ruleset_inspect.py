import argparse

from rich.console import Console
from rich.table import Table

from simulator.rules import format_move
from simulator.turing_machine import FINAL_STATE
from tools.rule_loader import load_rules

console = Console()


def state_label(state):
    return "HALT" if state == FINAL_STATE else f"q{state}"


def build_rule_table(rules):
    """Render the transitions as a rich table, one row per rule, in file order."""
    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("State", justify="center")
    table.add_column("Read", justify="center")
    table.add_column("Next", justify="center")
    table.add_column("Write", justify="center")
    table.add_column("Move", justify="center")

    for key, action in rules:
        next_label = state_label(action.next_state)
        if action.next_state == FINAL_STATE:
            next_label = f"[green]{next_label}[/green]"
        table.add_row(
            state_label(key.state),
            f"({key.read1}, {key.read2})",
            next_label,
            f"({action.write1}, {action.write2})",
            f"{format_move(action.move1)}{format_move(action.move2)}",
        )
    return table


def pretty_print_rules(rules):
    console.print("\n[bold]=== Transition Table ===[/bold]")
    console.print(build_rule_table(rules))
    states = rules.states()
    console.print(f"Rules: {len(rules)}  States: {len(states)}  "
                  f"Skipped lines: {rules.skipped}  Duplicates: {rules.duplicates}")
    if FINAL_STATE not in states:
        console.print("[yellow]Warning: no rule reaches the final state.[/yellow]")


def main():
    parser = argparse.ArgumentParser(description="Two-tape rule table inspector")
    parser.add_argument("rules", nargs="?", default="transfer_rules.txt", help="Rule file to inspect")
    args = parser.parse_args()

    pretty_print_rules(load_rules(args.rules))

if __name__ == "__main__":
    main()
