"""Swiss Pairing: a Swiss-system pairing and standings engine.

Typical use::

    from swisspairing import SwissEngine

    engine = SwissEngine(["ann", "bob", "cid", "dee"])
    for pairing in engine.generate_pairings(1):
        engine.record_result(pairing.player1, pairing.player2, pairing.player1)
    print(engine.get_standings())
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

from swisspairing.exceptions import SwissPairingException
from swisspairing.models import (
    EngineConfig,
    EngineSnapshot,
    Match,
    MatchResult,
    Pairing,
    PlayerState,
    StandingEntry,
)
from swisspairing.tournament import RoundState, SwissEngine, default_max_rounds

__version__ = "1.0.0"

__all__ = [
    "SwissEngine",
    "EngineConfig",
    "EngineSnapshot",
    "Match",
    "MatchResult",
    "Pairing",
    "PlayerState",
    "RoundState",
    "StandingEntry",
    "SwissPairingException",
    "default_max_rounds",
]
