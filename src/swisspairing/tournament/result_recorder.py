"""Result recording and validation for Swiss tournaments.

This module applies decided, drawn and bye outcomes to competitor state and
guarantees that each pairing is scored at most once.
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

from typing import Dict, Iterable, List, Optional

from swisspairing.constants import BYE_SCORE, DRAW_SCORE, WIN_SCORE
from swisspairing.exceptions import DuplicateResultException, InvalidResultException
from swisspairing.models.match_result import MatchResult
from swisspairing.models.pairing import Pairing
from swisspairing.tournament.player_store import PlayerStore
from swisspairing.type_hints import PairingKey, Winner
from swisspairing.utils import setup_logger

logger = setup_logger(__name__)


class ResultRecorder:
    """Handles recording and validating match results.

    This class is responsible for:
    - Validating the winner against the pairing
    - Updating competitor scores, counters and opponent history
    - Handling bye results
    - Rejecting a second result for the same pairing
    """

    def __init__(self) -> None:
        self._results: Dict[PairingKey, MatchResult] = {}

    def has_result(self, pairing: Pairing) -> bool:
        return pairing.key in self._results

    def results(self, round_number: Optional[int] = None) -> List[MatchResult]:
        """Recorded results in recording order, optionally for one round."""
        if round_number is None:
            return list(self._results.values())
        return [r for r in self._results.values() if r.round == round_number]

    def record(self, pairing: Pairing, winner: Winner, store: PlayerStore) -> MatchResult:
        """Apply the outcome of ``pairing`` to competitor state.

        Args:
            pairing: The scheduled pairing being scored
            winner: Winning competitor, or None for a draw. For a bye it must
                be None or the bye recipient.
            store: Competitor states to update

        Returns:
            The recorded result

        Raises:
            DuplicateResultException: If the pairing already has a result
            InvalidResultException: If ``winner`` is not part of the pairing
        """
        if self.has_result(pairing):
            logger.warning(
                f"Result for {pairing.player1} vs {pairing.player2} in round "
                f"{pairing.round} already recorded"
            )
            raise DuplicateResultException(
                f"Round {pairing.round} result for {pairing.player1} vs "
                f"{pairing.player2 or 'BYE'} already recorded"
            )

        self._validate_winner(pairing, winner)

        if pairing.is_bye:
            self._record_bye(pairing, store)
            result = MatchResult(pairing.round, pairing.player1, None, pairing.player1)
        else:
            self._record_game(pairing, winner, store)
            result = MatchResult(pairing.round, pairing.player1, pairing.player2, winner)

        self._results[pairing.key] = result
        return result

    def restore(self, results: Iterable[MatchResult]) -> None:
        """Replace the result log without touching competitor state."""
        self._results = {result.key: result for result in results}

    def _validate_winner(self, pairing: Pairing, winner: Winner) -> None:
        if winner is None:
            return
        if pairing.is_bye and winner != pairing.player1:
            logger.error(f"Bye winner {winner} is not {pairing.player1}")
            raise InvalidResultException(
                f"Bye in round {pairing.round} can only be won by {pairing.player1}"
            )
        if not pairing.involves(winner):
            logger.error(
                f"Winner {winner} not in pairing {pairing.player1} vs {pairing.player2}"
            )
            raise InvalidResultException(
                f"{winner} did not play in {pairing.player1} vs {pairing.player2}"
            )

    def _record_game(self, pairing: Pairing, winner: Winner, store: PlayerStore) -> None:
        """Record the result of a single game."""
        player1 = store.get(pairing.player1)
        player2 = store.get(pairing.player2)

        player1.opponents.append(player2.id)
        player2.opponents.append(player1.id)

        if winner is None:
            player1.score += DRAW_SCORE
            player2.score += DRAW_SCORE
            player1.draws += 1
            player2.draws += 1
            logger.debug(f"Recorded draw: {player1.id} vs {player2.id}")
            return

        loser = player2 if winner == player1.id else player1
        victor = player1 if loser is player2 else player2
        victor.score += WIN_SCORE
        victor.wins += 1
        loser.losses += 1
        logger.debug(f"Recorded: {victor.id} beat {loser.id}")

    def _record_bye(self, pairing: Pairing, store: PlayerStore) -> None:
        """Record a bye result for a competitor."""
        bye_player = store.get(pairing.player1)
        bye_player.score += BYE_SCORE
        bye_player.byes += 1
        bye_player.wins += 1
        logger.debug(f"Recorded bye for {bye_player.id} in round {pairing.round}")
