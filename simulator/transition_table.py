from types import MappingProxyType
from typing import NamedTuple, Optional

from simulator.alphabet import ACCEPTING_STATES, Direction, State, Symbol


class Transition(NamedTuple):
    write: Symbol
    next_state: State
    direction: Direction

    def as_tuple(self):
        return ", ".join(str(part) for part in self)


def _build_table():
    Z, O, T, B = Symbol.ZERO, Symbol.ONE, Symbol.THETA, Symbol.BLANK
    q0, q1, q2, idle = State.Q0, State.Q1, State.Q2, State.IDLE
    L, N = Direction.L, Direction.N
    rows = {
        (q0, Z): Transition(Z, q1, L),
        (q0, O): Transition(O, q1, L),
        (q0, T): Transition(B, idle, N),
        (q1, Z): Transition(B, idle, N),
        (q1, O): Transition(B, idle, N),
        (q1, T): Transition(O, q2, L),
        (q2, Z): Transition(B, idle, N),
        (q2, O): Transition(B, idle, N),
        (q2, T): Transition(B, idle, N),
    }
    return MappingProxyType(rows)


# (state, symbol) -> (write, next state, direction); idle has no row
TRANSITION_TABLE = _build_table()


def lookup(state, symbol, table=TRANSITION_TABLE) -> Optional[Transition]:
    """Return the transition for (state, symbol), or None when the machine has nowhere to go."""
    return table.get((state, symbol))


def is_accepting(state) -> bool:
    return state in ACCEPTING_STATES
