"""Round management for Swiss tournaments.

This module tracks round progression, derives the default round count from
the field size and keeps the per-round pairing log.
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

from enum import Enum
from typing import Callable, Dict, Iterable, List, Optional

from swisspairing.constants import MAX_DEFAULT_ROUNDS, ROUND_BRACKETS
from swisspairing.exceptions import (
    InvalidConfigurationException,
    InvalidRoundException,
    RoundNotFoundException,
    TournamentStateException,
)
from swisspairing.models.pairing import Pairing
from swisspairing.type_hints import MaybePlayerId, PlayerId, RoundNumber
from swisspairing.utils import setup_logger

logger = setup_logger(__name__)


def default_max_rounds(num_competitors: int) -> int:
    """Number of rounds for a field of ``num_competitors`` when none is given.

    >>> default_max_rounds(8)
    3
    >>> default_max_rounds(17)
    5
    """
    for upper_bound, rounds in ROUND_BRACKETS:
        if num_competitors <= upper_bound:
            return rounds
    return MAX_DEFAULT_ROUNDS


class RoundState(Enum):
    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    COMPLETE = "complete"


class RoundController:
    """Manages round progression for a tournament.

    This class is responsible for:
    - Tracking the current round (0 before the first pairing)
    - Validating which round may be paired next
    - Keeping the append-only pairing log, indexed by round
    - Answering completion queries

    Args:
        num_competitors: Field size, used to derive ``max_rounds``
        max_rounds: Explicit round count overriding the bracket table
        has_result: Predicate telling whether a pairing has been scored
    """

    def __init__(
        self,
        num_competitors: int,
        max_rounds: Optional[int] = None,
        has_result: Optional[Callable[[Pairing], bool]] = None,
    ):
        if max_rounds is None:
            max_rounds = default_max_rounds(num_competitors)
        elif max_rounds < 1:
            raise InvalidConfigurationException(
                f"max_rounds must be at least 1, got {max_rounds}"
            )

        self.max_rounds = max_rounds
        self.current_round = 0
        self._has_result = has_result or (lambda pairing: False)
        self._pairings_by_round: Dict[RoundNumber, List[Pairing]] = {}

    @property
    def pairing_log(self) -> List[Pairing]:
        """Every pairing generated so far, in round order."""
        return [
            pairing
            for round_number in sorted(self._pairings_by_round)
            for pairing in self._pairings_by_round[round_number]
        ]

    @property
    def state(self) -> RoundState:
        if self.current_round == 0:
            return RoundState.NOT_STARTED
        if self.is_complete() and self.is_round_recorded(self.current_round):
            return RoundState.COMPLETE
        return RoundState.IN_PROGRESS

    def is_complete(self) -> bool:
        return self.current_round >= self.max_rounds

    def has_round(self, round_number: RoundNumber) -> bool:
        return round_number in self._pairings_by_round

    def pairings_for(self, round_number: RoundNumber) -> List[Pairing]:
        """Get the pairings of a round that has already been generated.

        Raises:
            RoundNotFoundException: If the round has not been paired
        """
        try:
            return list(self._pairings_by_round[round_number])
        except KeyError:
            raise RoundNotFoundException(
                f"Round {round_number} has not been paired"
            ) from None

    def find_pairing(
        self, round_number: RoundNumber, player1: PlayerId, player2: MaybePlayerId
    ) -> Optional[Pairing]:
        """Find the pairing of ``player1`` and ``player2`` in a round, in either order."""
        for pairing in self._pairings_by_round.get(round_number, []):
            if pairing.matches(player1, player2):
                return pairing
        return None

    def outstanding_pairings(self, round_number: RoundNumber) -> List[Pairing]:
        """Pairings of a round that do not have a result yet."""
        return [
            pairing
            for pairing in self._pairings_by_round.get(round_number, [])
            if not self._has_result(pairing)
        ]

    def is_round_recorded(self, round_number: RoundNumber) -> bool:
        return self.has_round(round_number) and not self.outstanding_pairings(
            round_number
        )

    def check_next_round(
        self, round_number: RoundNumber, enforce_completion: bool = True
    ) -> None:
        """Validate that ``round_number`` may be paired now.

        Args:
            round_number: Round the caller wants to pair
            enforce_completion: Require every result of the current round first

        Raises:
            InvalidRoundException: If the round does not follow the current one
            TournamentStateException: If the tournament is over, or the
                current round still has unrecorded results
        """
        expected = self.current_round + 1
        if round_number != expected:
            logger.error(
                f"Cannot pair round {round_number}: next round is {expected}"
            )
            raise InvalidRoundException(
                f"Round {round_number} requested, expected round {expected}"
            )

        if round_number > self.max_rounds:
            logger.error(
                f"Cannot pair round {round_number}: tournament has "
                f"{self.max_rounds} rounds"
            )
            raise TournamentStateException(
                f"Tournament is complete after {self.max_rounds} rounds"
            )

        if enforce_completion and self.current_round > 0:
            outstanding = self.outstanding_pairings(self.current_round)
            if outstanding:
                logger.error(
                    f"Round {self.current_round} has {len(outstanding)} "
                    f"unrecorded results"
                )
                raise TournamentStateException(
                    f"Record all results of round {self.current_round} before "
                    f"pairing round {round_number}"
                )

    def log_round(self, round_number: RoundNumber, pairings: Iterable[Pairing]) -> None:
        """Append a round to the log and make it the current round."""
        self._pairings_by_round[round_number] = list(pairings)
        self.current_round = round_number
        logger.info(
            f"Round {round_number} of {self.max_rounds} paired "
            f"({len(self._pairings_by_round[round_number])} pairings)"
        )

    def restore(
        self, current_round: int, max_rounds: int, pairings: Iterable[Pairing]
    ) -> None:
        """Replace progression state with imported data."""
        by_round: Dict[RoundNumber, List[Pairing]] = {}
        for pairing in pairings:
            by_round.setdefault(pairing.round, []).append(pairing)

        self._pairings_by_round = by_round
        self.current_round = current_round
        self.max_rounds = max_rounds
