from swisspairing.constants import DEFAULT_TIEBREAK_ORDER
from swisspairing.models.pairing import Pairing
from swisspairing.tournament.player_store import PlayerStore
from swisspairing.tournament.result_recorder import ResultRecorder
from swisspairing.tournament.standings import StandingsBuilder
from swisspairing.tournament.tiebreak_calculator import TiebreakCalculator


def _builder():
    return StandingsBuilder(TiebreakCalculator(), DEFAULT_TIEBREAK_ORDER)


def test_positions_are_sequential_without_shared_ranks():
    store = PlayerStore(["a", "b", "c", "d"])
    standings = _builder().build(store)
    assert [entry.position for entry in standings] == [1, 2, 3, 4]
    assert [entry.competitor_id for entry in standings] == ["a", "b", "c", "d"]


def test_entries_carry_record_and_tiebreaks():
    store = PlayerStore(["a", "b", "c"])
    recorder = ResultRecorder()
    recorder.record(Pairing("a", "b", 1), "a", store)
    recorder.record(Pairing("c", None, 1), None, store)

    by_id = {entry.competitor_id: entry for entry in _builder().build(store)}
    assert by_id["a"].points == 1.0
    assert by_id["a"].games_played == 1
    assert by_id["b"].losses == 1
    assert by_id["b"].buchholz == 1.0
    assert by_id["c"].byes == 1
    assert by_id["c"].sonneborn_berger == 1.0


def test_buchholz_breaks_score_ties():
    store = PlayerStore(["c", "a", "b", "d", "e"])
    recorder = ResultRecorder()
    recorder.record(Pairing("a", "b", 1), "a", store)
    recorder.record(Pairing("c", "d", 1), "c", store)
    recorder.record(Pairing("b", "e", 2), "b", store)

    standings = _builder().build(store)
    # a, b and c on 1 point; c beat the only opponent without points
    assert [entry.competitor_id for entry in standings[:3]] == ["a", "b", "c"]
    assert standings[2].buchholz == 0.0


def test_build_has_no_side_effects():
    store = PlayerStore(["a", "b"])
    ResultRecorder().record(Pairing("a", "b", 1), "b", store)
    before = [state.to_dict() for state in store]
    _builder().build(store)
    _builder().build(store)
    assert [state.to_dict() for state in store] == before
