import io
import json

import pytest

import app
from simulator.alphabet import State
from simulator.turing_machine import TuringMachine
from simulator.printer import ConsolePrinter


def make_machine(console):
    return TuringMachine(reporter=ConsolePrinter(console))


def test_run_interactive_skips_empty_and_rejected_lines(console, buffer):
    machine = make_machine(console)
    stream = io.StringIO("   \n0x#\n0 #\n1#\n")
    symbols = app.run_interactive(machine, console, stream)
    assert len(symbols) == 2
    assert machine.states == (State.Q0, State.Q1, State.Q2)
    text = buffer.getvalue()
    assert text.count(app.PROMPT.rstrip()) == 3
    assert "TM doesn't accept symbol: x" in text
    # the fourth line is never read
    assert stream.readline() == "1#\n"


def test_rejected_line_leaves_machine_untouched(console):
    machine = make_machine(console)
    stream = io.StringIO("0x#\n#\n")
    app.run_interactive(machine, console, stream)
    assert machine.states == (State.Q0, State.IDLE)


def test_run_interactive_raises_on_eof(console):
    machine = make_machine(console)
    with pytest.raises(EOFError):
        app.run_interactive(machine, console, io.StringIO("x\n"))
    assert machine.states == (State.Q0,)


def test_run_once(console, buffer):
    machine = make_machine(console)
    assert not app.run_once(machine, "0x#", console)
    assert machine.states == (State.Q0,)
    assert app.run_once(machine, "0#", console)
    assert machine.accepting


def test_main_accepting_run(console, buffer, tmp_path):
    config_path = tmp_path / "config.json"
    config_path.write_text(json.dumps({"log_runs": True, "output_directory": str(tmp_path / "logs")}))
    status = app.main(["--config", str(config_path)], stream=io.StringIO("0#\n"), console=console)
    assert status == 0
    lines = [line.rstrip() for line in buffer.getvalue().splitlines()]
    assert lines[0] == "Transition table:"
    assert any(line.endswith("Reading symbol: 0") for line in lines)
    assert lines[-3:] == [
        "State change path: q0→q1→q2",
        "Final TM state: q2 (accepting)",
        "Final value: 10",
    ]
    logged = list((tmp_path / "logs").glob("tm_runs_*.jsonl"))
    assert len(logged) == 1
    entry = json.loads(logged[0].read_text(encoding="utf-8").splitlines()[0])
    assert entry["final_value"] == "10"
    assert list((tmp_path / "logs").glob("accepted_*.jsonl"))


def test_main_rejecting_run_has_no_final_value(console, buffer):
    status = app.main(["--no-log"], stream=io.StringIO("00#\n"), console=console)
    assert status == 0
    text = buffer.getvalue()
    assert "State change path: q0→q1→-" in text
    assert "Final value" not in text


def test_main_reports_on_eof(console, buffer):
    stream = io.StringIO("")
    status = app.main(["--no-log"], stream=stream, console=console)
    assert status == 1
    assert "State change path: q0" in buffer.getvalue()
    assert stream.closed


def test_main_input_flag(console, buffer):
    status = app.main(["--no-log", "--input", "1#"], console=console)
    assert status == 0
    assert buffer.getvalue().splitlines()[-1] == "Final value: 11"


def test_main_missing_config(console, buffer, tmp_path):
    status = app.main(["--config", str(tmp_path / "nope.json")], console=console)
    assert status == 2
    assert "Configuration file not found" in buffer.getvalue()


def test_main_latex(console, buffer):
    assert app.main(["--latex"], console=console) == 0
    assert buffer.getvalue().startswith(r"\begin{array}")


def test_main_writes_no_files_by_default(console, monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    status = app.main([], stream=io.StringIO("0#\n"), console=console)
    assert status == 0
    assert list(tmp_path.iterdir()) == []
