import pytest

from swisspairing.constants import DEFAULT_TIEBREAK_ORDER
from swisspairing.exceptions import PairingExhaustedException
from swisspairing.models.pairing import Pairing
from swisspairing.tournament.pairing_engine import PairingEngine
from swisspairing.tournament.player_store import PlayerStore
from swisspairing.tournament.tiebreak_calculator import TiebreakCalculator


def _engine(allow_rematch=True):
    return PairingEngine(
        TiebreakCalculator(), DEFAULT_TIEBREAK_ORDER, allow_rematch=allow_rematch
    )


def _played(store, *pairs):
    for first, second in pairs:
        store.get(first).opponents.append(second)
        store.get(second).opponents.append(first)


def test_first_round_pairs_in_registration_order():
    store = PlayerStore(["a", "b", "c", "d", "e", "f", "g", "h"])
    pairings = _engine().pair_round(store, 1)
    assert [(p.player1, p.player2) for p in pairings] == [
        ("a", "b"),
        ("c", "d"),
        ("e", "f"),
        ("g", "h"),
    ]
    assert all(p.round == 1 for p in pairings)


def test_odd_field_gives_last_competitor_a_bye():
    store = PlayerStore(["a", "b", "c", "d", "e"])
    pairings = _engine().pair_round(store, 1)
    assert pairings[-1] == Pairing("e", None, 1)
    assert sum(1 for p in pairings if p.is_bye) == 1


def test_skips_previous_opponents():
    store = PlayerStore(["a", "b", "c", "d"])
    _played(store, ("a", "b"), ("c", "d"))
    pairings = _engine().pair_round(store, 2)
    assert [(p.player1, p.player2) for p in pairings] == [("a", "c"), ("b", "d")]
    assert not any(p.is_rematch for p in pairings)


def test_higher_score_is_paired_first():
    store = PlayerStore(["a", "b", "c", "d"])
    store.get("d").score = 2.0
    store.get("c").score = 1.0
    pairings = _engine().pair_round(store, 1)
    assert [(p.player1, p.player2) for p in pairings] == [("d", "c"), ("a", "b")]


def test_forced_rematch_is_flagged():
    store = PlayerStore(["a", "b", "c", "d"])
    _played(store, ("a", "b"), ("a", "c"), ("a", "d"))
    pairings = _engine().pair_round(store, 4)
    assert pairings[0] == Pairing("a", "b", 4, is_rematch=True)
    assert pairings[1] == Pairing("c", "d", 4)


def test_exhaustion_raises_when_rematches_disabled():
    store = PlayerStore(["a", "b", "c", "d"])
    _played(store, ("a", "b"), ("a", "c"), ("a", "d"))
    with pytest.raises(PairingExhaustedException) as excinfo:
        _engine(allow_rematch=False).pair_round(store, 4)
    assert excinfo.value.player_id == "a"
    assert excinfo.value.round_number == 4


def test_pair_round_does_not_touch_state():
    store = PlayerStore(["a", "b", "c"])
    before = [state.to_dict() for state in store]
    _engine().pair_round(store, 1)
    assert [state.to_dict() for state in store] == before


def test_pairing_is_deterministic():
    store = PlayerStore(["a", "b", "c", "d", "e", "f"])
    _played(store, ("a", "b"), ("c", "d"), ("e", "f"))
    store.get("a").score = 1.0
    store.get("d").score = 1.0
    store.get("e").score = 0.5
    store.get("f").score = 0.5
    assert _engine().pair_round(store, 2) == _engine().pair_round(store, 2)


def test_single_competitor_gets_bye():
    store = PlayerStore(["solo"])
    assert _engine().pair_round(store, 1) == [Pairing("solo", None, 1)]
