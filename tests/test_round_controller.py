import pytest

from swisspairing.exceptions import (
    InvalidConfigurationException,
    InvalidRoundException,
    RoundNotFoundException,
    TournamentStateException,
)
from swisspairing.models.pairing import Pairing
from swisspairing.tournament.round_controller import (
    RoundController,
    RoundState,
    default_max_rounds,
)


@pytest.mark.parametrize(
    "num_competitors, expected",
    [(1, 3), (8, 3), (9, 4), (16, 4), (17, 5), (32, 5), (33, 6), (64, 6), (65, 7), (500, 7)],
)
def test_default_max_rounds_brackets(num_competitors, expected):
    assert default_max_rounds(num_competitors) == expected


def test_explicit_max_rounds_overrides_table():
    assert RoundController(17, max_rounds=2).max_rounds == 2


def test_explicit_max_rounds_must_be_positive():
    with pytest.raises(InvalidConfigurationException):
        RoundController(8, max_rounds=0)


def test_completion_is_monotonic():
    controller = RoundController(4, max_rounds=3)
    seen = []
    for round_number in range(1, 4):
        seen.append(controller.is_complete())
        controller.log_round(round_number, [])
    seen.append(controller.is_complete())
    assert seen == [False, False, False, True]


def test_next_round_must_follow_current():
    controller = RoundController(4)
    with pytest.raises(InvalidRoundException):
        controller.check_next_round(2)
    controller.check_next_round(1)


def test_cannot_pair_past_max_rounds():
    controller = RoundController(4, max_rounds=1)
    controller.log_round(1, [])
    with pytest.raises(TournamentStateException):
        controller.check_next_round(2)


def test_outstanding_results_block_next_round():
    recorded = set()
    controller = RoundController(4, has_result=lambda p: p.key in recorded)
    pairings = [Pairing("a", "b", 1), Pairing("c", "d", 1)]
    controller.log_round(1, pairings)

    with pytest.raises(TournamentStateException):
        controller.check_next_round(2)
    controller.check_next_round(2, enforce_completion=False)

    recorded.update(p.key for p in pairings)
    controller.check_next_round(2)


def test_state_machine():
    recorded = set()
    controller = RoundController(2, max_rounds=1, has_result=lambda p: p.key in recorded)
    assert controller.state == RoundState.NOT_STARTED

    pairing = Pairing("a", "b", 1)
    controller.log_round(1, [pairing])
    assert controller.state == RoundState.IN_PROGRESS

    recorded.add(pairing.key)
    assert controller.state == RoundState.COMPLETE


def test_pairing_log_is_indexed_by_round():
    controller = RoundController(4)
    controller.log_round(1, [Pairing("a", "b", 1), Pairing("c", "d", 1)])
    controller.log_round(2, [Pairing("a", "c", 2), Pairing("b", "d", 2)])

    assert controller.pairings_for(2) == [Pairing("a", "c", 2), Pairing("b", "d", 2)]
    assert len(controller.pairing_log) == 4
    assert controller.find_pairing(2, "d", "b") == Pairing("b", "d", 2)
    assert controller.find_pairing(1, "a", "c") is None
    with pytest.raises(RoundNotFoundException):
        controller.pairings_for(3)
