"""
Tests for scripts/print_statement.py.
"""
import importlib.util
import json
import pytest
from pathlib import Path

SCRIPT = Path(__file__).parent.parent / 'scripts' / 'print_statement.py'


@pytest.fixture(scope="module")
def script():
    spec = importlib.util.spec_from_file_location("print_statement", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.fixture
def plays(tmp_path):
    path = tmp_path / "plays.json"
    path.write_text(json.dumps({
        "hamlet": {"name": "Hamlet", "type": "tragedy"},
        "cats": {"name": "Cats", "type": "musical"},
    }), encoding='utf-8')
    return path


def write_invoices(tmp_path, performances):
    path = tmp_path / "invoices.json"
    path.write_text(json.dumps([{"customer": "BigCo", "performances": performances}]), encoding='utf-8')
    return path


def test_prints_text_statement(script, plays, tmp_path, capsys):
    invoices = write_invoices(tmp_path, [{"playID": "hamlet", "audience": 55}])

    assert script.main(["--plays", str(plays), "--invoices", str(invoices)]) == 0
    out = capsys.readouterr().out
    assert "Statement for BigCo" in out
    assert "Hamlet: $650.00 (55 seats)" in out
    assert "You earned 25 credits" in out


def test_prints_json(script, plays, tmp_path, capsys):
    invoices = write_invoices(tmp_path, [{"playID": "hamlet", "audience": 35}])

    assert script.main(["--plays", str(plays), "--invoices", str(invoices), "--json"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data[0]["total_amount"] == 45000
    assert data[0]["total_credits"] == 5


def test_rate_overrides(script, plays, tmp_path, capsys):
    invoices = write_invoices(tmp_path, [{"playID": "hamlet", "audience": 10}])
    rates = tmp_path / "rates.json"
    rates.write_text(json.dumps({"pricing": {"tragedy": {"base_amount": 50000}}}), encoding='utf-8')

    args = ["--plays", str(plays), "--invoices", str(invoices), "--rates", str(rates), "--json"]
    assert script.main(args) == 0
    assert json.loads(capsys.readouterr().out)[0]["total_amount"] == 50000


@pytest.mark.parametrize("performance, message", [
    ({"playID": "lear", "audience": 10}, "unknown play: lear"),
    ({"playID": "cats", "audience": 10}, "unknown type: musical"),
])
def test_errors_exit_nonzero(script, plays, tmp_path, capsys, performance, message):
    invoices = write_invoices(tmp_path, [performance])

    assert script.main(["--plays", str(plays), "--invoices", str(invoices)]) == 1
    captured = capsys.readouterr()
    assert f"cannot produce statement: {message}" in captured.err
    assert "Statement for" not in captured.out


def test_unknown_genre_in_rates_exits_nonzero(script, plays, tmp_path, capsys):
    invoices = write_invoices(tmp_path, [{"playID": "hamlet", "audience": 10}])
    rates = tmp_path / "rates.json"
    rates.write_text(json.dumps({"pricing": {"opera": {"base_amount": 50000}}}), encoding='utf-8')

    args = ["--plays", str(plays), "--invoices", str(invoices), "--rates", str(rates)]
    assert script.main(args) == 1
    captured = capsys.readouterr()
    assert "cannot produce statement: unknown type: opera" in captured.err
    assert "Statement for" not in captured.out
