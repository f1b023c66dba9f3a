from datetime import datetime, timezone

from simulator.alphabet import INITIAL_STATE
from simulator.transition_table import TRANSITION_TABLE, is_accepting, lookup


class TuringMachine:
    """Write-only transducer driven by a fixed transition table.

    The head direction of every transition is reported but never acted on:
    writes are appended in order and the tape is read back reversed.
    """

    def __init__(self, reporter=None, run_logger=None, table=TRANSITION_TABLE):
        self.reporter = reporter
        self.run_logger = run_logger
        self.table = table
        self._states = [INITIAL_STATE]
        self._tape_writes = []
        self.finalized = False

    def __enter__(self):
        if self.reporter is not None:
            self.reporter.show_start(self.table, self.current_state, self.accepting)
        return self

    def __exit__(self, exc_type, exc, tb):
        self.finalize()
        return False

    @property
    def states(self):
        return tuple(self._states)

    @property
    def tape_writes(self):
        return tuple(self._tape_writes)

    @property
    def current_state(self):
        return self._states[-1]

    @property
    def accepting(self):
        return is_accepting(self.current_state)

    @property
    def halted(self):
        return not any(state == self.current_state for state, _ in self.table)

    @property
    def final_value(self):
        return "".join(str(symbol) for symbol in reversed(self._tape_writes))

    def step(self, symbol):
        if self.reporter is not None:
            self.reporter.show_reading(symbol)
        transition = lookup(self.current_state, symbol, self.table)
        if transition is None:
            return None
        self._tape_writes.append(transition.write)
        self._states.append(transition.next_state)
        if self.reporter is not None:
            self.reporter.show_transition(transition, accepting=is_accepting(transition.next_state))
        return transition

    def feed(self, symbols):
        for symbol in symbols:
            self.step(symbol)

    def finalize(self):
        """Emit the final report. Only the first call has any effect."""
        if self.finalized:
            return
        self.finalized = True
        if self.reporter is not None:
            self.reporter.show_final(self.states, self.accepting, self.final_value)
        if self.run_logger is not None:
            entry = self.summary()
            self.run_logger.log(entry)
            if entry["accepting"]:
                self.run_logger.log_accepted([entry])

    def summary(self):
        return {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "states": [state.name for state in self._states],
            "tape_writes": [symbol.name for symbol in self._tape_writes],
            "final_state": self.current_state.name,
            "accepting": self.accepting,
            "final_value": self.final_value if self.accepting else None,
        }
