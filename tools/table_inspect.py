import argparse

from simulator.printer import ConsolePrinter, table_matrix
from simulator.transition_table import TRANSITION_TABLE


def latex_table(table=TRANSITION_TABLE):
    """Render the transition table as a LaTeX array, one row per state."""
    header, *rows = table_matrix(table)
    symbols = header[1:]

    lines = [r"\begin{array}{c|" + "c" * len(symbols) + "}"]
    lines.append(r"\delta & " + " & ".join(_latex_cell(symbol) for symbol in symbols) + r" \\ \hline")
    for row in rows:
        lines.append(" & ".join(_latex_cell(cell) for cell in row) + r" \\")
    lines.append(r"\end{array}")
    return "\n".join(lines)


def _latex_cell(text):
    if text == "Θ":
        return r"\Theta"
    return f"\\text{{{text}}}"


def main(argv=None):
    parser = argparse.ArgumentParser(description="Transition Table Inspector")
    parser.add_argument("--latex-only", action="store_true", help="Skip the console grid")
    args = parser.parse_args(argv)

    if not args.latex_only:
        ConsolePrinter().show_table(TRANSITION_TABLE)
    print("\n=== LaTeX Table ===")
    print(latex_table(TRANSITION_TABLE))

if __name__ == "__main__":
    main()
