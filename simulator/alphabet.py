from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple


class Symbol(Enum):
    ZERO = "0"
    ONE = "1"
    THETA = "Θ"   # end-of-input marker, typed as '#'
    BLANK = "-"   # only ever written, never parsed

    def __str__(self):
        return self.value


class State(Enum):
    Q0 = "q0"
    Q1 = "q1"
    Q2 = "q2"
    IDLE = "-"

    def __str__(self):
        return self.value


class Direction(Enum):
    L = "L"
    R = "R"
    N = "-"

    def __str__(self):
        return self.value


INITIAL_STATE = State.Q0
ACCEPTING_STATES = frozenset({State.Q2})

INPUT_CHARACTERS = {
    "0": Symbol.ZERO,
    "1": Symbol.ONE,
    "#": Symbol.THETA,
}


class SymbolNotAccepted(ValueError):
    """Raised when a character is not part of the machine's input alphabet."""

    def __init__(self, character):
        self.character = character
        super().__init__(f"TM doesn't accept symbol: {character}")


def parse_symbol(character: str) -> Symbol:
    try:
        return INPUT_CHARACTERS[character]
    except KeyError:
        raise SymbolNotAccepted(character) from None


@dataclass(frozen=True)
class ParsedLine:
    symbols: Tuple[Symbol, ...] = field(default_factory=tuple)
    rejected: Optional[SymbolNotAccepted] = None

    @property
    def ok(self):
        return self.rejected is None

    @property
    def empty(self):
        return self.ok and not self.symbols


def parse_line(text: str) -> ParsedLine:
    """Parse a whole input line, ignoring whitespace.

    Stops at the first unknown character. A rejected line carries no symbols,
    so nothing from it can reach the machine.
    """
    symbols = []
    for character in text:
        if character.isspace():
            continue
        try:
            symbols.append(parse_symbol(character))
        except SymbolNotAccepted as exc:
            return ParsedLine(rejected=exc)
    return ParsedLine(symbols=tuple(symbols))
