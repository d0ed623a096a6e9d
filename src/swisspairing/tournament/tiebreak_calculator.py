"""Tiebreak calculation for Swiss tournaments.

This module derives tiebreak values from competitor state on demand. Values
are never written back onto :class:`PlayerState`.
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

from dataclasses import dataclass
from typing import Dict, Mapping

from swisspairing.constants import (
    DRAW_SCORE,
    TB_BUCHHOLZ,
    TB_SONNEBORN_BERGER,
    TB_WINS,
    WIN_SCORE,
)
from swisspairing.models.player_state import PlayerState
from swisspairing.type_hints import PlayerId
from swisspairing.utils import setup_logger

logger = setup_logger(__name__)


@dataclass(frozen=True)
class Tiebreaks:
    """Read-only tiebreak values for one competitor at query time."""

    buchholz: float = 0.0
    sonneborn_berger: float = 0.0
    wins: float = 0.0

    def value(self, name: str) -> float:
        """Look up a tiebreak by its configuration key."""
        if name == TB_BUCHHOLZ:
            return self.buchholz
        if name == TB_SONNEBORN_BERGER:
            return self.sonneborn_berger
        if name == TB_WINS:
            return self.wins
        raise KeyError(f"Unknown tiebreak: {name}")


class TiebreakCalculator:
    """Calculates tiebreak scores for standings and pairing order.

    Implemented systems:

    - Buchholz: sum of the *current* scores of every opponent faced. Because
      scores are read at query time, a competitor's Buchholz keeps moving as
      former opponents play on.
    - Sonneborn-Berger (simplified): ``wins * 1 + draws * 0.5``. This is not
      the canonical opponent-weighted formula; it ranks by own results only.
    - Wins: number of rounds scored as a win, byes included.
    """

    def calculate_all(
        self, players: Mapping[PlayerId, PlayerState]
    ) -> Dict[PlayerId, Tiebreaks]:
        """Calculate tiebreaks for all competitors.

        Args:
            players: All competitor states (id -> PlayerState)

        Returns:
            A fresh mapping of id -> Tiebreaks
        """
        return {
            player_id: self.calculate(player, players)
            for player_id, player in players.items()
        }

    def calculate(
        self, player: PlayerState, players: Mapping[PlayerId, PlayerState]
    ) -> Tiebreaks:
        """Calculate all tiebreak values for a single competitor.

        Args:
            player: The competitor to calculate tiebreaks for
            players: All competitor states for opponent lookups
        """
        return Tiebreaks(
            buchholz=self.buchholz(player, players),
            sonneborn_berger=self.sonneborn_berger(player),
            wins=float(player.wins),
        )

    def buchholz(
        self, player: PlayerState, players: Mapping[PlayerId, PlayerState]
    ) -> float:
        """Sum of opponents' live scores.

        Opponents missing from ``players`` contribute nothing.
        """
        total = 0.0
        for opponent_id in player.opponents:
            opponent = players.get(opponent_id)
            if opponent is None:
                logger.warning(
                    f"Opponent {opponent_id} of {player.id} is not registered"
                )
                continue
            total += opponent.score
        return total

    def sonneborn_berger(self, player: PlayerState) -> float:
        """Simplified Sonneborn-Berger from the competitor's own record."""
        return player.wins * WIN_SCORE + player.draws * DRAW_SCORE
