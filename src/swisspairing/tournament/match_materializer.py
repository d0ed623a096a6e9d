"""Conversion of pairings into match records for external scheduling."""

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

from typing import Iterable, List, Optional, Sequence

from swisspairing.constants import BYE
from swisspairing.models.match import Match, utc_now
from swisspairing.models.pairing import Pairing
from swisspairing.utils import generate_id, setup_logger

logger = setup_logger(__name__)


class MatchMaterializer:
    """Builds :class:`Match` records from pairings.

    Byes become matches that are already complete and won by the bye
    recipient. Other matches get stations round-robin from the supplied list,
    in pairing order.
    """

    def pairings_to_matches(
        self,
        pairings: Iterable[Pairing],
        station_ids: Optional[Sequence[str]] = None,
        game: str = "",
    ) -> List[Match]:
        """Convert pairings to match records.

        Args:
            pairings: Pairings in display order
            station_ids: Stations to rotate through; empty means no stations
            game: Game or event label copied onto every match

        Returns:
            One match per pairing, same order
        """
        stations = list(station_ids or [])
        station_index = 0
        matches: List[Match] = []

        for pairing in pairings:
            if pairing.is_bye:
                now = utc_now()
                matches.append(
                    Match(
                        id=generate_id(),
                        round=pairing.round,
                        team_a=pairing.player1,
                        team_b=BYE,
                        is_complete=True,
                        winner=pairing.player1,
                        game=game,
                        created_at=now,
                        start_time=now,
                        end_time=now,
                    )
                )
                continue

            station_id = None
            if stations:
                station_id = stations[station_index % len(stations)]
                station_index += 1

            matches.append(
                Match(
                    id=generate_id(),
                    round=pairing.round,
                    team_a=pairing.player1,
                    team_b=pairing.player2,
                    station_id=station_id,
                    game=game,
                )
            )

        logger.debug(
            f"Materialized {len(matches)} matches onto {len(stations)} stations"
        )
        return matches
