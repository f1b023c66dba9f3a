import io

import pytest
from rich.console import Console

from simulator.printer import ConsolePrinter


@pytest.fixture
def buffer():
    return io.StringIO()


@pytest.fixture
def console(buffer):
    return Console(file=buffer, width=200, color_system=None, force_terminal=False)


@pytest.fixture
def printer(console):
    return ConsolePrinter(console)


@pytest.fixture
def output(buffer):
    def lines():
        return buffer.getvalue().splitlines()
    return lines
