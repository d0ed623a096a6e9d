from swisspairing import SwissEngine
from swisspairing.models import EngineSnapshot, Pairing, PlayerState, StandingEntry
from swisspairing.validation import (
    CriterionStatus,
    Severity,
    create_integrity_checker,
)


def _snapshot(pairings, scores=None, results=None, current_round=None):
    scores = scores or {}
    players = [(pid, PlayerState(id=pid, score=scores.get(pid, 0.0))) for pid in "abcd"]
    return EngineSnapshot(
        players=players,
        pairings=pairings,
        current_round=current_round or max(p.round for p in pairings),
        max_rounds=3,
        results=results or [],
    )


def _entry(competitor_id, position):
    return StandingEntry(competitor_id, position, 0, 0, 0, 0.0, 0, 0.0, 0.0)


def test_clean_engine_passes_every_check():
    engine = SwissEngine(["a", "b", "c", "d", "e"])
    for round_number in range(1, engine.max_rounds + 1):
        for pairing in engine.generate_pairings(round_number):
            engine.record_result(pairing.player1, pairing.player2, pairing.player1)

    report = create_integrity_checker().validate_engine(engine)
    assert report.is_valid
    assert report.violations == []
    assert report.total_criteria == 5
    assert report.compliance_percentage == 100.0


def test_unflagged_repeat_is_an_error():
    checker = create_integrity_checker()
    result = checker.check_no_repeats(
        [Pairing("a", "b", 1), Pairing("c", "d", 1), Pairing("b", "a", 2)]
    )
    assert result.status == CriterionStatus.VIOLATION
    assert result.severity == Severity.ERROR


def test_flagged_rematch_is_a_warning():
    checker = create_integrity_checker()
    snapshot = _snapshot(
        [
            Pairing("a", "b", 1),
            Pairing("c", "d", 1),
            Pairing("a", "b", 2, is_rematch=True),
            Pairing("c", "d", 2, is_rematch=True),
        ]
    )
    report = checker.validate(snapshot)
    assert report.is_valid
    assert [w.criterion for w in report.warnings] == ["no_repeats"]


def test_missing_competitor_in_round():
    checker = create_integrity_checker()
    result = checker.check_single_appearance(
        [Pairing("a", "b", 1), Pairing("c", None, 1)], ["a", "b", "c", "d"]
    )
    assert result.status == CriterionStatus.VIOLATION
    assert result.details["rounds"][1]["missing"] == ["d"]


def test_bye_in_even_field():
    checker = create_integrity_checker()
    result = checker.check_bye_cardinality(
        [Pairing("a", "b", 1), Pairing("c", None, 1), Pairing("d", None, 1)], 4
    )
    assert result.status == CriterionStatus.VIOLATION


def test_points_without_results():
    checker = create_integrity_checker()
    snapshot = _snapshot([Pairing("a", "b", 1), Pairing("c", "d", 1)], scores={"a": 1.0})
    result = checker.check_point_conservation(snapshot)
    assert result.status == CriterionStatus.VIOLATION


def test_standings_positions_must_be_a_permutation():
    checker = create_integrity_checker()
    good = [_entry("a", 1), _entry("b", 2), _entry("c", 3)]
    bad = [_entry("a", 1), _entry("b", 1), _entry("c", 3)]
    assert checker.check_standings_permutation(good, 3).status == CriterionStatus.COMPLIANT
    assert checker.check_standings_permutation(bad, 3).status == CriterionStatus.VIOLATION
