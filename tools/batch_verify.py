# tools/batch_verify.py

import argparse
import sys

from rich.console import Console
from rich.progress import Progress, SpinnerColumn, BarColumn, TextColumn, TimeElapsedColumn

from simulator.codec import polynomial
from simulator.turing_machine import TwoTapeMachine
from tools.rule_loader import load_rules

console = Console()


def operand_schedule(count):
    """Yield (a, x, b, y), bumping a, x, b, y in turn, starting from (1, 0, 0, 0)."""
    operands = [0, 0, 0, 0]
    for i in range(count):
        operands[i % 4] += 1
        yield tuple(operands)


def batch_verify(rules, count=200, max_steps=None, logger=None, blank="E", show_progress=True):
    """Run the schedule on one machine and compare every result against direct arithmetic."""
    machine = TwoTapeMachine(rules, blank=blank)
    summary = {"total": 0, "passed": 0, "failed": 0, "abnormal": 0, "failures": []}

    with Progress(
            SpinnerColumn(),
            BarColumn(),
            "[progress.percentage]{task.percentage:>3.0f}%",
            TextColumn("{task.completed}/{task.total} Computations"),
            TimeElapsedColumn(),
            console=console,
            disable=not show_progress,
    ) as progress:

        task = progress.add_task("[cyan]Verifying...", total=count)

        for operands in operand_schedule(count):
            machine.reset()
            result = machine.compute(*operands, max_steps=max_steps)
            expected = polynomial(*operands)
            entry = result.as_entry()
            entry["expected"] = expected

            summary["total"] += 1
            if not result.ok:
                summary["abnormal"] += 1
                summary["failures"].append(entry)
            elif result.value != expected:
                summary["failed"] += 1
                summary["failures"].append(entry)
            else:
                summary["passed"] += 1

            if logger:
                logger.log_result(result)
            progress.update(task, advance=1)

    return summary


def print_summary(summary):
    console.print(f"[bold]{summary['total']}[/bold] computations: "
                  f"[green]{summary['passed']} passed[/green], "
                  f"[red]{summary['failed']} wrong[/red], "
                  f"[yellow]{summary['abnormal']} abnormal halts[/yellow]")
    for entry in summary["failures"][:10]:
        console.print(f"  [red]{entry['a']} {entry['x']} {entry['b']} {entry['y']}[/red] "
                      f"-> {entry['value']} (expected {entry['expected']}, {entry['status']})")


# === CLI ===
def main():
    parser = argparse.ArgumentParser(description="Cross-check the two-tape machine against direct arithmetic.")
    parser.add_argument("--rules", default="transfer_rules.txt", help="Transition rule file")
    parser.add_argument("--count", type=int, default=200, help="Number of operand tuples to run")
    parser.add_argument("--max_steps", type=int, default=0, help="Step limit per computation (0 = unlimited)")
    args = parser.parse_args()

    rules = load_rules(args.rules)
    summary = batch_verify(rules, count=args.count, max_steps=args.max_steps or None)
    print_summary(summary)
    sys.exit(0 if summary["passed"] == summary["total"] else 1)


if __name__ == "__main__":
    main()
