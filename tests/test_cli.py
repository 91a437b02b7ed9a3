"""Tests for the church-agenda command line."""

import pytest

from church_agenda import cli


@pytest.fixture(autouse=True)
def quiet_logging(monkeypatch):
    monkeypatch.setattr(cli, "configure_logging", lambda **kwargs: None)


def test_check_reports_conflict(patched_state, capsys):
    assert cli.main(["check", "hall", "2025-06-01", "19:00", "21:00"]) == 1
    out = capsys.readouterr().out
    assert "Service 2025-06-01 18:00-20:00" in out


def test_check_free_slot(patched_state, capsys):
    assert cli.main(["check", "hall", "2025-06-01", "20:00", "22:00"]) == 0
    assert "No conflicts." in capsys.readouterr().out


def test_check_edit_excludes_itself(patched_state):
    assert cli.main(["check", "hall", "2025-06-01", "18:30", "19:30", "--exclude", "evt-service"]) == 0


def test_check_rejects_reversed_times(patched_state, capsys):
    assert cli.main(["check", "hall", "2025-06-01", "21:00", "19:00"]) == 2
    assert "start must be before end" in capsys.readouterr().err


def test_check_rejects_equal_times(patched_state):
    assert cli.main(["check", "hall", "2025-06-01", "19:00", "19:00"]) == 2


def test_check_lookup_failure_exits_with_error(patched_state, monkeypatch, capsys):
    from .conftest import FakeEventRepository

    monkeypatch.setattr(patched_state.context, "events", FakeEventRepository(fail=True))
    assert cli.main(["check", "hall", "2025-06-01", "08:00", "09:00"]) == 2
    assert "Could not verify availability." in capsys.readouterr().err


def test_month_prints_grid(patched_state, capsys):
    assert cli.main(["month", "6", "2025"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Junho 2025")
    assert "2025-06-19  Corpus Christi" in out
    assert "2025-06-01  Service (18:00-20:00)" in out


def test_month_out_of_range():
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["month", "13", "2025"])
    assert excinfo.value.code == 2
