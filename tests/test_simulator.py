import json

import pytest

from swisspairing.testing import (
    RandomTournamentSimulator,
    ResultPattern,
    ResultSimulator,
    SimulationConfig,
)
from swisspairing.testing.__main__ import main


@pytest.mark.parametrize("pattern", list(ResultPattern))
@pytest.mark.parametrize("num_competitors", [2, 7, 16])
def test_simulated_tournaments_keep_invariants(pattern, num_competitors):
    config = SimulationConfig(
        num_competitors=num_competitors, result_pattern=pattern, seed=123
    )
    simulator = RandomTournamentSimulator(config)
    tournament = simulator.run()

    assert tournament["report"].is_valid
    assert len(tournament["rounds"]) == simulator.engine.max_rounds
    assert simulator.engine.is_complete()
    positions = [entry.position for entry in tournament["standings"]]
    assert positions == list(range(1, num_competitors + 1))


def test_same_seed_same_tournament():
    config = SimulationConfig(num_competitors=12, draw_percentage=25, seed=7)
    first = RandomTournamentSimulator(config).run()
    second = RandomTournamentSimulator(config).run()
    assert first["standings"] == second["standings"]
    assert [r["pairings"] for r in first["rounds"]] == [
        r["pairings"] for r in second["rounds"]
    ]


def test_export_json_format():
    simulator = RandomTournamentSimulator(SimulationConfig(num_competitors=5, seed=1))
    tournament = simulator.run()
    data = json.loads(simulator.export_json_format(tournament))

    assert data["simulation_config"]["num_competitors"] == 5
    assert len(data["rounds"]) == 3
    assert data["integrity"]["violations"] == []
    assert len(data["engine"]["players"]) == 5


def test_cli_simulate_and_validate(tmp_path, capsys):
    engine_path = tmp_path / "engine.json"
    record_path = tmp_path / "record.json"

    assert main(
        [
            "simulate",
            "--competitors", "9",
            "--seed", "3",
            "--output", str(record_path),
            "--save-engine", str(engine_path),
        ]
    ) == 0
    assert record_path.exists()
    assert main(["validate", "--file", str(engine_path), "--detailed"]) == 0

    out = capsys.readouterr().out
    assert "Top Standings" in out
    assert "point_conservation" in out


def test_cli_validate_missing_file(tmp_path):
    assert main(["validate", "--file", str(tmp_path / "nope.json")]) == 1


def test_cli_benchmark():
    assert main(["benchmark", "--size", "6", "--iterations", "2"]) == 0


@pytest.mark.parametrize("draw_percentage, expect_draw", [(0, False), (100, True)])
def test_random_pattern_honours_draw_percentage(draw_percentage, expect_draw):
    simulator = ResultSimulator(
        SimulationConfig(
            num_competitors=2,
            result_pattern=ResultPattern.RANDOM,
            draw_percentage=draw_percentage,
            seed=5,
        )
    )
    seeds = {"a": 1, "b": 2}
    results = [simulator.simulate_result("a", "b", seeds) for _ in range(50)]
    assert all((result is None) == expect_draw for result in results)


@pytest.mark.parametrize("option", ["--iterations", "--size"])
def test_cli_benchmark_rejects_non_positive_counts(option):
    with pytest.raises(SystemExit):
        main(["benchmark", option, "0"])
