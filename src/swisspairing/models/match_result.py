"""Match result data class."""

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
from typing import Any, Dict

from swisspairing.type_hints import MaybePlayerId, PairingKey, PlayerId, Winner


@dataclass(frozen=True)
class MatchResult:
    """Represents the recorded outcome of a single pairing.

    Attributes
    ----------
    round : int
        Round the pairing belongs to
    player1 : str
        First competitor of the pairing
    player2 : str or None
        Second competitor, ``None`` for a bye
    winner : str or None
        Winning competitor, ``None`` for a draw (or for a bye)
    """

    round: int
    player1: PlayerId
    player2: MaybePlayerId
    winner: Winner

    @property
    def is_bye(self) -> bool:
        return self.player2 is None

    @property
    def is_draw(self) -> bool:
        return not self.is_bye and self.winner is None

    @property
    def key(self) -> PairingKey:
        return (self.round, self.player1, self.player2)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize match result to dictionary."""
        return {
            "round": self.round,
            "player1": self.player1,
            "player2": self.player2,
            "winner": self.winner,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MatchResult":
        """Deserialize match result from dictionary."""
        player2 = data.get("player2")
        winner = data.get("winner")
        return cls(
            round=int(data["round"]),
            player1=str(data["player1"]),
            player2=str(player2) if player2 is not None else None,
            winner=str(winner) if winner is not None else None,
        )
