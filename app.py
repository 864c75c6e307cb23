# app.py

import argparse
from pathlib import Path

from rich.console import Console
from rich.prompt import Prompt

from config.config_loader import DEFAULT_CONFIG, DEFAULT_CONFIG_PATH, load_config
from logger.logger import JSONLogger
from simulator.codec import polynomial
from simulator.turing_machine import TwoTapeMachine
from tools.batch_verify import batch_verify, print_summary
from tools.rule_loader import load_rules
from tools.ruleset_inspect import pretty_print_rules

console = Console()

# === Utilities ===
def load_runtime_config(path=None):
    if path is None and not Path(DEFAULT_CONFIG_PATH).exists():
        return DEFAULT_CONFIG.copy()
    return load_config(path or DEFAULT_CONFIG_PATH, verbose=False)

def parse_operands(text):
    """Four whitespace-separated non-negative integers, or ValueError."""
    parts = text.split()
    if len(parts) != 4:
        raise ValueError("Expected exactly four numbers: a x b y")
    operands = tuple(int(p) for p in parts)
    if any(v < 0 for v in operands):
        raise ValueError("Numbers must be non-negative")
    return operands

def report_result(result, config):
    if result.ok:
        console.print(f"[green]Result is {result.value}[/green] "
                      f"({result.steps:,} steps, {result.cpu_time:.3f}s CPU)")
        if config["print_tapes"]:
            console.print(f"Tape1: {result.tapes[0]}")
            console.print(f"Tape2: {result.tapes[1]}")
        if config["check_results"]:
            expected = polynomial(*result.operands)
            if result.value != expected:
                console.print(f"[red]Mismatch: direct arithmetic gives {expected}[/red]")
    else:
        s1, s2 = result.symbols
        console.print(f"[bold red]Abnormal halt![/bold red] {result.reason}")
        console.print(f"State: {result.state}, ({s1}, {s2}) after {result.steps:,} steps")
        console.print(f"Tape1: {result.tapes[0]}")
        console.print(f"Tape2: {result.tapes[1]}")

# === Interactive Mode ===
def interactive_main(machine, config, logger):
    console.print("\n[bold cyan]Two-Tape Turing Machine[/bold cyan]")
    console.print("Enter a x b y to compute a*x^2+b*y, q to quit.")

    while True:
        try:
            text = Prompt.ask("\na x b y")
        except (EOFError, KeyboardInterrupt):
            break
        if text.strip().lower() in ("q", "quit", "exit"):
            break
        try:
            operands = parse_operands(text)
        except ValueError as e:
            console.print(f"[red]{e}[/red]")
            continue

        console.print("[cyan]Running...[/cyan]")
        machine.reset()
        result = machine.compute(*operands, max_steps=config["max_steps"] or None)
        report_result(result, config)
        logger.log_result(result)
        console.print("-------------")

    console.print("[bold green]Goodbye![/bold green]")

# === CLI Mode for Automation ===
def cli_main(args, machine, config, logger):
    if args.inspect:
        pretty_print_rules(machine.rules)
    if args.verify is not None:
        count = args.verify or config["verify_count"]
        summary = batch_verify(machine.rules, count=count, max_steps=config["max_steps"] or None,
                               logger=logger, blank=config["blank_symbol"])
        print_summary(summary)
        return 0 if summary["passed"] == summary["total"] else 1
    if args.compute:
        machine.reset()
        result = machine.compute(*args.compute, max_steps=config["max_steps"] or None)
        report_result(result, config)
        logger.log_result(result)
        return 0 if result.ok else 1
    return 0

def main():
    parser = argparse.ArgumentParser(description="Two-tape Turing machine computing a*x^2 + b*y")
    parser.add_argument("--config", help="Path to runtime_config.json")
    parser.add_argument("--rules", help="Transition rule file (overrides the config)")
    parser.add_argument("--compute", nargs=4, type=int, metavar=("A", "X", "B", "Y"), help="Compute once and exit")
    parser.add_argument("--verify", nargs="?", type=int, const=0, help="Run the self-check on N operand tuples")
    parser.add_argument("--inspect", action="store_true", help="Print the loaded transition table")
    args = parser.parse_args()

    config = load_runtime_config(args.config)
    rules = load_rules(args.rules or config["rules_file"], config["duplicate_rules"])
    console.print(f"[green]Loaded {len(rules)} transition rules.[/green]")

    machine = TwoTapeMachine(rules, blank=config["blank_symbol"])
    logger = JSONLogger(config["output_directory"], config["log_file_prefix"])

    if args.compute or args.verify is not None or args.inspect:
        raise SystemExit(cli_main(args, machine, config, logger))
    interactive_main(machine, config, logger)

if __name__ == "__main__":
    main()
