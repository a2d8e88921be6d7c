import json
import logging
import subprocess
import sys
from pathlib import Path

import pytest
import simulator

ROOT = Path(__file__).resolve().parent.parent


@pytest.fixture(autouse=True)
def restore_root_logging():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    for handler in handlers:
        if handler not in root.handlers:
            root.addHandler(handler)
    root.setLevel(level)


def test_sample_report(capsys):
    assert simulator.main(["--sample"]) == 0
    out = capsys.readouterr().out
    assert "Node Voltages:" in out
    assert " - Node 2: 4.154 V" in out


def test_netlist_json(capsys):
    assert simulator.main(["--netlist", str(ROOT / "netlists" / "ladder.yaml"), "--json"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert [b["componentId"] for b in data["branchResults"]] == ["V1", "R1", "R2", "R3", "R4"]
    voltages = {nv["nodeId"]: nv["voltage"] for nv in data["nodeVoltages"]}
    assert voltages["0"] == 0.0
    assert voltages["3"] == pytest.approx(36 / 13)


def test_output_file(tmp_path):
    out = tmp_path / "result.json"
    assert simulator.main(["--netlist", str(ROOT / "netlists" / "switched_divider.yaml"),
                           "--json", "--output", str(out)]) == 0
    data = json.loads(out.read_text())
    voltages = {nv["nodeId"]: nv["voltage"] for nv in data["nodeVoltages"]}
    assert voltages["out"] == pytest.approx(6.0, abs=1e-3)


def test_bad_ground_exits_with_error(capsys):
    assert simulator.main(["--sample", "--ground", "5"]) == 1
    assert 'Ground node "5" not found' in capsys.readouterr().err


def test_bad_netlist_exits_with_error(tmp_path, capsys):
    bad = tmp_path / "bad.yaml"
    bad.write_text("components:\n  - {type: resistor, start: '1'}\n")
    assert simulator.main(["--netlist", str(bad)]) == 1
    assert "schema" in capsys.readouterr().err


def test_log_file(tmp_path):
    log_file = tmp_path / "dcsim.log"
    assert simulator.main(["--sample", "--verbose", "--log-file", str(log_file)]) == 0
    assert "Assembled MNA system" in log_file.read_text()


def test_requires_input():
    with pytest.raises(SystemExit) as info:
        simulator.main([])
    assert info.value.code == 2


def test_cli_smoke_subprocess():
    cmd = [sys.executable, str(ROOT / "simulator.py"), "--sample"]
    proc = subprocess.run(cmd, capture_output=True, text=True, cwd=ROOT)
    assert proc.returncode == 0, proc.stderr
    assert "Branch Analysis:" in proc.stdout
