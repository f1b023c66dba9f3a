# app.py

import argparse
import sys
from contextlib import closing

from rich.console import Console
from rich.markup import escape

from config.config_loader import load_config
from logger.logger import JSONLogger
from simulator.alphabet import parse_line
from simulator.printer import ConsolePrinter
from simulator.turing_machine import TuringMachine
from tools.table_inspect import latex_table

console = Console()

PROMPT = "Type value terminated by # character (theta equivalent): "

# === Input ===
def read_line(console, stream):
    line = console.input(PROMPT, stream=stream)
    if line == "":
        raise EOFError("standard input closed")
    return line

def run_interactive(machine, console, stream, printer=None):
    """Prompt until one line parses cleanly, then feed it to the machine."""
    printer = printer or machine.reporter or ConsolePrinter(console)
    while True:
        parsed = parse_line(read_line(console, stream))
        if parsed.empty:
            continue
        if not parsed.ok:
            printer.show_rejection(parsed.rejected)
            continue
        machine.feed(parsed.symbols)
        return parsed.symbols

def run_once(machine, text, console, printer=None):
    """Feed a single line without prompting. Returns False if the line was rejected."""
    printer = printer or machine.reporter or ConsolePrinter(console)
    parsed = parse_line(text)
    if not parsed.ok:
        printer.show_rejection(parsed.rejected)
        return False
    machine.feed(parsed.symbols)
    return True

def build_machine(config, console, log_runs=True):
    printer = ConsolePrinter(console, show_transition_table=config["show_transition_table"])
    run_logger = None
    if config["log_runs"] and log_runs:
        run_logger = JSONLogger(config["output_directory"], config["log_file_prefix"])
    return TuringMachine(reporter=printer, run_logger=run_logger)

# === Entry point ===
def main(argv=None, stream=None, console=console):
    parser = argparse.ArgumentParser(description="Single-tape Turing Machine")
    parser.add_argument("--config", help="Path to a JSON configuration file")
    parser.add_argument("--input", help="Process this line instead of prompting")
    parser.add_argument("--no-log", action="store_true", help="Do not write run records")
    parser.add_argument("--latex", action="store_true", help="Print the transition table as LaTeX and exit")
    parser.add_argument("--show-config", action="store_true", help="Print the loaded configuration")
    args = parser.parse_args(argv)

    try:
        config = load_config(args.config, verbose=args.show_config)
    except (FileNotFoundError, ValueError, TypeError) as exc:
        # json.JSONDecodeError is a ValueError
        console.print(f"[red]Error: {escape(str(exc))}[/red]", highlight=False)
        return 2

    if args.latex:
        console.print(latex_table(), markup=False, highlight=False, soft_wrap=True)
        return 0

    machine = build_machine(config, console, log_runs=not args.no_log)

    if args.input is not None:
        with machine:
            run_once(machine, args.input, console)
        return 0

    with closing(stream if stream is not None else sys.stdin) as source:
        try:
            with machine:
                run_interactive(machine, console, source)
        except EOFError:
            return 1
    return 0

if __name__ == "__main__":
    sys.exit(main())
