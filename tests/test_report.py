from conftest import R, S, V
from core.analysis.analyzer import analyze
from core.topology.circuit import Circuit
from inout.report import format_report


def test_report_sections(single_loop):
    text = format_report(single_loop, analyze(single_loop, "0"))
    assert text.splitlines()[0] == "Circuit Definition:"
    assert "A 9V DC source between node 1 (+) and 0 (-)." in text
    assert " - Node 0: 0.000 V" in text
    assert " - Node 1: 9.000 V" in text
    assert "- Voltage Source V1 (1-0): Current: -9.00 mA." in text
    assert "- Resistor R1 (1-0): Current: 9.00 mA. Power: 81.00 mW." in text
    assert "WARNING" not in text


def test_report_includes_warnings():
    comps = [V("V1", "1", "0", 9), S("S1", "1", "2", is_open=False), R("R1", "2", "0", 100, "1/2W")]
    text = format_report(comps, analyze(comps, "0"))
    assert "currently CLOSED" in text
    assert "WARNING: Thermal overload! Power (0.810W) > Rating (0.5W)" in text


def test_report_for_sample_circuit():
    circuit = Circuit.sample()
    text = format_report(circuit.components, circuit.analyze())
    assert " - Node 2: 4.154 V" in text
    assert " - Node 3: 2.769 V" in text
