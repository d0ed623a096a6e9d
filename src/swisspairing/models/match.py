"""Match record handed to the system that runs and broadcasts games."""

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
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from dateutil.parser import isoparse

from swisspairing.constants import BYE
from swisspairing.type_hints import PlayerId


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _format_time(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value is not None else None


def _parse_time(value: Optional[str]) -> Optional[datetime]:
    return isoparse(value) if value else None


@dataclass
class Match:
    """Externally consumable match built from a pairing.

    Attributes
    ----------
    id : str
        Fresh unique identifier.
    round : int
        Round of the originating pairing.
    team_a : str
        First competitor.
    team_b : str
        Second competitor, or the ``BYE`` sentinel.
    station_id : str, optional
        Station the match is played on; byes have none.
    is_complete : bool
        Byes are created already complete.
    winner : str, optional
        Set for byes at creation, otherwise by whoever runs the match.
    game : str
        Game or event label supplied by the caller.
    """

    id: str
    round: int
    team_a: PlayerId
    team_b: str
    station_id: Optional[str] = None
    is_complete: bool = False
    winner: Optional[PlayerId] = None
    game: str = ""
    created_at: datetime = field(default_factory=utc_now)
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None

    @property
    def is_bye(self) -> bool:
        return self.team_b == BYE

    def to_dict(self) -> Dict[str, Any]:
        """Serialize match to dictionary with ISO-8601 timestamps."""
        return {
            "id": self.id,
            "round": self.round,
            "team_a": self.team_a,
            "team_b": self.team_b,
            "station_id": self.station_id,
            "is_complete": self.is_complete,
            "winner": self.winner,
            "game": self.game,
            "created_at": _format_time(self.created_at),
            "start_time": _format_time(self.start_time),
            "end_time": _format_time(self.end_time),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Match":
        """Deserialize match from dictionary."""
        return cls(
            id=data["id"],
            round=int(data["round"]),
            team_a=data["team_a"],
            team_b=data["team_b"],
            station_id=data.get("station_id"),
            is_complete=data.get("is_complete", False),
            winner=data.get("winner"),
            game=data.get("game", ""),
            created_at=_parse_time(data.get("created_at")) or utc_now(),
            start_time=_parse_time(data.get("start_time")),
            end_time=_parse_time(data.get("end_time")),
        )
