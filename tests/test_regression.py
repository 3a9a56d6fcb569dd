import pytest

import regression_suite
import run_regression
from regression_suite import SCENARIOS, run_all, select


@pytest.mark.parametrize("scenario", SCENARIOS, ids=lambda fn: fn.__name__)
def test_scenario(scenario):
    assert scenario() is True


def test_run_all_reports_every_scenario():
    results = run_all()
    assert [name for name, _, _ in results] == [fn.__name__ for fn in SCENARIOS]
    assert all(ok for _, ok, _ in results)


def test_select_by_name_fragment():
    chosen, unmatched = select(["knockout", "CRIT"])
    assert [fn.__name__ for fn in chosen] == [
        "scenario_critical_doubles_after_subtraction",
        "scenario_blocked_critical_logs_no_doubling",
        "scenario_knockout_ends_match_and_freezes_state",
    ]
    assert unmatched == []


def test_select_reports_unmatched_fragments():
    chosen, unmatched = select(["reset", "teleport"])
    assert [fn.__name__ for fn in chosen] == ["scenario_reset_is_idempotent"]
    assert unmatched == ["teleport"]


def test_runner_runs_only_the_chosen_scenarios(capsys):
    assert run_regression.main(["buff_table"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == ["PASS: scenario_buff_table", "All 1 scenarios passed."]


def test_runner_lists_and_rejects_unknown_names(capsys):
    assert run_regression.main(["--list"]) == 0
    listed = capsys.readouterr().out.split()
    assert listed == [fn.__name__ for fn in SCENARIOS]

    assert run_regression.main(["no_such_scenario"]) == 2
    assert "no_such_scenario" in capsys.readouterr().err


def test_runner_reports_failures(monkeypatch, capsys):
    def scenario_always_fails():
        raise AssertionError("broken on purpose")

    monkeypatch.setattr(regression_suite, "SCENARIOS", [scenario_always_fails])
    assert run_regression.main([]) == 1
    out = capsys.readouterr().out
    assert "FAIL: scenario_always_fails -> broken on purpose" in out
