"""Registry of per-competitor state owned by one engine instance."""

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

from typing import Dict, Iterable, Iterator, List

from swisspairing.exceptions import (
    DuplicatePlayerException,
    InvalidConfigurationException,
    PlayerNotFoundException,
)
from swisspairing.models.player_state import PlayerState
from swisspairing.type_hints import PlayerId
from swisspairing.utils import setup_logger

logger = setup_logger(__name__)


class PlayerStore:
    """Holds exactly one :class:`PlayerState` per registered competitor.

    Iteration follows registration order, which is the seeding order used to
    break full ties.
    """

    def __init__(self, competitor_ids: Iterable[PlayerId]):
        self._players: Dict[PlayerId, PlayerState] = {}
        for competitor_id in competitor_ids:
            if competitor_id in self._players:
                logger.error(f"Duplicate competitor id: {competitor_id}")
                raise DuplicatePlayerException(
                    f"Competitor {competitor_id} registered twice"
                )
            self._players[competitor_id] = PlayerState(id=competitor_id)

        if not self._players:
            raise InvalidConfigurationException("At least one competitor is required")

    @classmethod
    def from_states(cls, states: Iterable[PlayerState]) -> "PlayerStore":
        """Rebuild a store from existing states, keeping their order."""
        states = list(states)
        store = cls(state.id for state in states)
        for state in states:
            store._players[state.id] = state.copy()
        return store

    def __len__(self) -> int:
        return len(self._players)

    def __iter__(self) -> Iterator[PlayerState]:
        return iter(self._players.values())

    def __contains__(self, player_id: object) -> bool:
        return player_id in self._players

    @property
    def ids(self) -> List[PlayerId]:
        return list(self._players)

    def get(self, player_id: PlayerId) -> PlayerState:
        """Look up a competitor's state.

        Raises:
            PlayerNotFoundException: If ``player_id`` is not registered
        """
        try:
            return self._players[player_id]
        except KeyError:
            raise PlayerNotFoundException(player_id) from None

    def require(self, *player_ids: PlayerId) -> None:
        """Raise ``PlayerNotFoundException`` for the first unknown id."""
        for player_id in player_ids:
            if player_id not in self._players:
                logger.error(f"Cannot find competitor: {player_id}")
                raise PlayerNotFoundException(player_id)

    def as_dict(self) -> Dict[PlayerId, PlayerState]:
        """Read-only view for tiebreak lookups. Callers must not mutate it."""
        return self._players
