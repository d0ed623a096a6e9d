"""Per-competitor tournament state."""

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

from dataclasses import dataclass, field
from typing import Any, Dict, List

from swisspairing.type_hints import PlayerId


@dataclass
class PlayerState:
    """Running record of one competitor.

    Tiebreak values are deliberately absent: they are derived on read by
    :class:`~swisspairing.tournament.tiebreak_calculator.TiebreakCalculator`.

    Attributes
    ----------
    id : str
        Opaque competitor identifier, unique within a tournament.
    score : float
        Cumulative points (1 per win or bye, 0.5 per draw).
    opponents : list of str
        Ids of opponents faced, in the order the games were recorded.
    byes : int
        Number of byes received.
    wins, losses, draws : int
        Game outcome counters. A bye counts as a win.
    """

    id: PlayerId
    score: float = 0.0
    opponents: List[PlayerId] = field(default_factory=list)
    byes: int = 0
    wins: int = 0
    losses: int = 0
    draws: int = 0

    @property
    def games_played(self) -> int:
        """Number of recorded outcomes, byes included."""
        return self.wins + self.losses + self.draws

    def has_played(self, opponent_id: PlayerId) -> bool:
        """Check whether this competitor already faced ``opponent_id``."""
        return opponent_id in self.opponents

    def copy(self) -> "PlayerState":
        """Return an independent copy safe to hand to callers."""
        return PlayerState(
            id=self.id,
            score=self.score,
            opponents=list(self.opponents),
            byes=self.byes,
            wins=self.wins,
            losses=self.losses,
            draws=self.draws,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize player state to dictionary."""
        return {
            "id": self.id,
            "score": self.score,
            "opponents": list(self.opponents),
            "byes": self.byes,
            "wins": self.wins,
            "losses": self.losses,
            "draws": self.draws,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PlayerState":
        """Deserialize player state from dictionary."""
        return cls(
            id=str(data["id"]),
            score=float(data.get("score", 0.0)),
            opponents=[str(opp) for opp in data.get("opponents", [])],
            byes=int(data.get("byes", 0)),
            wins=int(data.get("wins", 0)),
            losses=int(data.get("losses", 0)),
            draws=int(data.get("draws", 0)),
        )
