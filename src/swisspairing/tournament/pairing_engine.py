"""Greedy Swiss pairing.

Competitors are walked in ranking order. Each unpaired competitor is matched
with the next unpaired competitor below them that they have not met yet.
This is a heuristic, not an optimal matching: an early greedy choice can
leave a later competitor with nobody new to play.
"""

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

from typing import List, Optional, Sequence, Set

from swisspairing.exceptions import PairingExhaustedException
from swisspairing.models.pairing import Pairing
from swisspairing.models.player_state import PlayerState
from swisspairing.tournament.ordering import cascade_sort, ranking_keys
from swisspairing.tournament.player_store import PlayerStore
from swisspairing.tournament.tiebreak_calculator import TiebreakCalculator
from swisspairing.type_hints import PlayerId, Ranking
from swisspairing.utils import setup_logger

logger = setup_logger(__name__)


class PairingEngine:
    """Produces one round's pairings from the current standings order.

    Args:
        tiebreak_calculator: Source of tiebreak values for ranking
        tiebreak_order: Tiebreaks applied after score, highest priority first
        allow_rematch: Fall back to a repeat pairing instead of raising
            ``PairingExhaustedException`` when a competitor has played
            everyone still available
    """

    def __init__(
        self,
        tiebreak_calculator: TiebreakCalculator,
        tiebreak_order: Sequence[str],
        allow_rematch: bool = True,
    ):
        self.tiebreak_calculator = tiebreak_calculator
        self.tiebreak_order = list(tiebreak_order)
        self.allow_rematch = allow_rematch

    def rank(self, store: PlayerStore) -> Ranking:
        """Order competitors by score, then the configured tiebreaks.

        Full ties keep registration order.
        """
        tiebreaks = self.tiebreak_calculator.calculate_all(store.as_dict())
        ordered = cascade_sort(store, ranking_keys(tiebreaks, self.tiebreak_order))
        return [state.id for state in ordered]

    def pair_round(self, store: PlayerStore, round_number: int) -> List[Pairing]:
        """Generate pairings for ``round_number``.

        Does not touch engine state; the caller logs the returned pairings.

        Args:
            store: Competitor states
            round_number: Round being paired

        Returns:
            Pairings in ranking order, with at most one bye (last)

        Raises:
            PairingExhaustedException: If rematches are disabled and a
                competitor has no unplayed opponent left
        """
        ranked = self.rank(store)
        unpaired: Set[PlayerId] = set(ranked)
        pairings: List[Pairing] = []

        for index, player_id in enumerate(ranked):
            if player_id not in unpaired:
                continue

            player = store.get(player_id)
            remaining = [pid for pid in ranked[index + 1 :] if pid in unpaired]

            opponent_id = self._first_new_opponent(player, remaining)
            if opponent_id is not None:
                pairings.append(Pairing(player_id, opponent_id, round_number))
                unpaired.difference_update((player_id, opponent_id))
                continue

            if not remaining:
                # Sole competitor left over in an odd field
                pairings.append(Pairing(player_id, None, round_number))
                unpaired.discard(player_id)
                logger.debug(f"Round {round_number}: bye for {player_id}")
                continue

            if not self.allow_rematch:
                logger.error(
                    f"Round {round_number}: {player_id} has played all of "
                    f"{remaining} and rematches are disabled"
                )
                raise PairingExhaustedException(player_id, round_number)

            opponent_id = remaining[0]
            logger.warning(
                f"Round {round_number}: forced rematch {player_id} vs {opponent_id}"
            )
            pairings.append(
                Pairing(player_id, opponent_id, round_number, is_rematch=True)
            )
            unpaired.difference_update((player_id, opponent_id))

        return pairings

    @staticmethod
    def _first_new_opponent(
        player: PlayerState, candidates: Sequence[PlayerId]
    ) -> Optional[PlayerId]:
        for candidate in candidates:
            if not player.has_played(candidate):
                return candidate
        return None
