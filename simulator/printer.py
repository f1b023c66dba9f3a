from itertools import groupby

from rich.console import Console

HORIZONTAL_BORDER_KNOT = "+"
HORIZONTAL_BORDER_PATTERN = "-"
VERTICAL_BORDER_PATTERN = "|"
PATH_SEPARATOR = "→"


def table_matrix(table):
    """Turn the transition table into rows of strings: a symbol header, then one row per state."""
    header = ["δ"]
    for _, symbol in table:
        if str(symbol) not in header[1:]:
            header.append(str(symbol))

    rows = [header]
    # consecutive entries share a state; the fixed table has three per state
    for state, entries in groupby(table.items(), key=lambda item: item[0][0]):
        rows.append([str(state)] + [transition.as_tuple() for _, transition in entries])
    return rows


def render_grid(matrix):
    if not matrix:
        return []
    columns = max(len(row) for row in matrix)
    width = max(len(cell) for row in matrix for cell in row)
    border = (HORIZONTAL_BORDER_KNOT + HORIZONTAL_BORDER_PATTERN * width) * columns + HORIZONTAL_BORDER_KNOT

    lines = [border]
    for row in matrix:
        cells = "".join(cell.rjust(width) + VERTICAL_BORDER_PATTERN for cell in row)
        lines.append(VERTICAL_BORDER_PATTERN + cells)
        lines.append(border)
    return lines


def state_line(label, state, accepting):
    annotation = "(accepting)" if accepting else ""
    return f"{label} TM state: {state} {annotation}"


class ConsolePrinter:
    """Writes the machine's progress to a rich console as plain text."""

    def __init__(self, console=None, show_transition_table=True):
        self.console = console or Console()
        self.show_transition_table = show_transition_table

    def line(self, text=""):
        self.console.print(text, markup=False, highlight=False, soft_wrap=True)

    def show_table(self, table):
        self.line("Transition table:")
        for row in render_grid(table_matrix(table)):
            self.line(row)

    def show_start(self, table, state, accepting=False):
        if self.show_transition_table:
            self.show_table(table)
        self.line(state_line("Current", state, accepting))

    def show_reading(self, symbol):
        self.line(f"Reading symbol: {symbol}")

    def show_transition(self, transition, accepting=False):
        self.line(state_line("Current", transition.next_state, accepting))
        self.line(f"Value written on tape: {transition.write}")
        self.line(f"Head direction of movement: {transition.direction}")

    def show_rejection(self, error):
        self.line(str(error))

    def show_final(self, states, accepting, final_value):
        self.line(f"State change path: {PATH_SEPARATOR.join(str(state) for state in states)}")
        self.line(state_line("Final", states[-1], accepting))
        if accepting:
            self.line(f"Final value: {final_value}")
