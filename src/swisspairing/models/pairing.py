"""Pairing data class."""

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
from typing import Any, Dict, Optional

from swisspairing.type_hints import MaybePlayerId, PairingKey, PlayerId, RoundNumber


@dataclass(frozen=True)
class Pairing:
    """Two competitors scheduled to meet in a round, or one competitor and a bye.

    Attributes
    ----------
    player1 : str
        Higher-ranked competitor at pairing time.
    player2 : str or None
        Opponent, or ``None`` when ``player1`` receives a bye.
    round : int
        Round the pairing belongs to.
    is_rematch : bool
        True when the pairing repeats an earlier game because no unplayed
        opponent was left.
    """

    player1: PlayerId
    player2: MaybePlayerId
    round: RoundNumber
    is_rematch: bool = False

    @property
    def is_bye(self) -> bool:
        return self.player2 is None

    @property
    def key(self) -> PairingKey:
        """Identity used to reject a second result for the same game."""
        return (self.round, self.player1, self.player2)

    def involves(self, player_id: PlayerId) -> bool:
        return player_id in (self.player1, self.player2)

    def matches(self, player1: PlayerId, player2: MaybePlayerId) -> bool:
        """Check whether the two ids name this pairing, in either order."""
        if self.is_bye or player2 is None:
            return self.player2 is None and player2 is None and player1 == self.player1
        return {player1, player2} == {self.player1, self.player2}

    def opponent_of(self, player_id: PlayerId) -> Optional[PlayerId]:
        if player_id == self.player1:
            return self.player2
        if player_id == self.player2:
            return self.player1
        raise ValueError(f"{player_id} is not part of this pairing")

    def to_dict(self) -> Dict[str, Any]:
        """Serialize pairing to dictionary."""
        return {
            "player1": self.player1,
            "player2": self.player2,
            "round": self.round,
            "is_rematch": self.is_rematch,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Pairing":
        """Deserialize pairing from dictionary."""
        player2 = data.get("player2")
        return cls(
            player1=str(data["player1"]),
            player2=str(player2) if player2 is not None else None,
            round=int(data["round"]),
            is_rematch=bool(data.get("is_rematch", False)),
        )
