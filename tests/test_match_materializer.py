from swisspairing.constants import BYE
from swisspairing.models.pairing import Pairing
from swisspairing.tournament.match_materializer import MatchMaterializer


def test_stations_rotate_and_bye_is_complete():
    pairings = [Pairing("a", "b", 1), Pairing("c", "d", 1), Pairing("e", None, 1)]
    matches = MatchMaterializer().pairings_to_matches(pairings, ["s1", "s2"], "chess")

    assert [m.station_id for m in matches] == ["s1", "s2", None]
    bye = matches[2]
    assert bye.team_a == "e"
    assert bye.team_b == BYE
    assert bye.is_bye
    assert bye.is_complete
    assert bye.winner == "e"
    assert bye.start_time is not None and bye.end_time is not None
    assert not matches[0].is_complete
    assert matches[0].winner is None
    assert all(m.game == "chess" for m in matches)


def test_bye_does_not_consume_a_station():
    pairings = [
        Pairing("a", "b", 2),
        Pairing("e", None, 2),
        Pairing("c", "d", 2),
        Pairing("f", "g", 2),
    ]
    matches = MatchMaterializer().pairings_to_matches(pairings, ["s1", "s2"])
    assert [m.station_id for m in matches] == ["s1", None, "s2", "s1"]
    assert [m.team_a for m in matches] == ["a", "e", "c", "f"]


def test_no_stations_means_no_assignment():
    pairings = [Pairing("a", "b", 1), Pairing("c", "d", 1)]
    matches = MatchMaterializer().pairings_to_matches(pairings, [])
    assert [m.station_id for m in matches] == [None, None]


def test_match_ids_are_fresh():
    pairings = [Pairing("a", "b", 1), Pairing("c", "d", 1)]
    materializer = MatchMaterializer()
    first = materializer.pairings_to_matches(pairings, ["s1"])
    second = materializer.pairings_to_matches(pairings, ["s1"])
    ids = {m.id for m in first + second}
    assert len(ids) == 4
