from pathlib import Path

import sys

sys.path.append(str(Path(__file__).resolve().parents[1]))

from evaluation.harness import run_evaluation_suite, run_smoke_checks


def test_evaluation_scenarios_pass():
    results = run_evaluation_suite()
    assert results, "Expected evaluation scenarios to run"
    for result in results:
        assert result["passed"], f"Scenario {result['scenario']} failed checks: {result['checks']}"
        if result["response"]["outcome"] == "ok":
            assert result["outfit_count"] >= 1
        else:
            assert result["outfit_count"] == 0


def test_smoke_checks_report_every_scenario():
    lines = run_smoke_checks()
    assert len(lines) == len(run_evaluation_suite())
    assert all(line.endswith(": passed") for line in lines)
