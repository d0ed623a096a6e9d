"""Standings table construction."""

# Swiss Pairing
# Copyright (C) 2025  Swiss Pairing developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

from typing import List, Sequence

from swisspairing.models.standing import StandingEntry
from swisspairing.tournament.ordering import cascade_sort, ranking_keys
from swisspairing.tournament.player_store import PlayerStore
from swisspairing.tournament.tiebreak_calculator import TiebreakCalculator


class StandingsBuilder:
    """Builds a ranked, positioned table of every competitor.

    Positions are always 1..N with no shared ranks; competitors tied on
    points and every tiebreak keep registration order.
    """

    def __init__(
        self, tiebreak_calculator: TiebreakCalculator, tiebreak_order: Sequence[str]
    ):
        self.tiebreak_calculator = tiebreak_calculator
        self.tiebreak_order = list(tiebreak_order)

    def build(self, store: PlayerStore) -> List[StandingEntry]:
        tiebreaks = self.tiebreak_calculator.calculate_all(store.as_dict())
        ordered = cascade_sort(store, ranking_keys(tiebreaks, self.tiebreak_order))

        return [
            StandingEntry(
                competitor_id=state.id,
                position=position,
                wins=state.wins,
                losses=state.losses,
                draws=state.draws,
                points=state.score,
                games_played=state.games_played,
                buchholz=tiebreaks[state.id].buchholz,
                sonneborn_berger=tiebreaks[state.id].sonneborn_berger,
                byes=state.byes,
            )
            for position, state in enumerate(ordered, start=1)
        ]
