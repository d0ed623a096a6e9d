"""Standing entry data class."""

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

from dataclasses import asdict, dataclass
from typing import Any, Dict

from swisspairing.type_hints import PlayerId


@dataclass(frozen=True)
class StandingEntry:
    """One row of the standings table, rebuilt on every query.

    Attributes
    ----------
    competitor_id : str
        Competitor this row describes.
    position : int
        1-based rank. Tied competitors still get distinct positions.
    points : float
        Tournament score.
    """

    competitor_id: PlayerId
    position: int
    wins: int
    losses: int
    draws: int
    points: float
    games_played: int
    buchholz: float
    sonneborn_berger: float
    byes: int = 0

    def to_dict(self) -> Dict[str, Any]:
        """Serialize standing entry to dictionary."""
        return asdict(self)
