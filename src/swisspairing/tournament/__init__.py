"""Swiss tournament engine and its components.

This package splits the engine into small components with one job each,
coordinated by :class:`SwissEngine`.
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

from swisspairing.tournament.engine import SwissEngine
from swisspairing.tournament.match_materializer import MatchMaterializer
from swisspairing.tournament.ordering import SortKey, cascade_sort, ranking_keys
from swisspairing.tournament.pairing_engine import PairingEngine
from swisspairing.tournament.player_store import PlayerStore
from swisspairing.tournament.result_recorder import ResultRecorder
from swisspairing.tournament.round_controller import (
    RoundController,
    RoundState,
    default_max_rounds,
)
from swisspairing.tournament.standings import StandingsBuilder
from swisspairing.tournament.tiebreak_calculator import TiebreakCalculator, Tiebreaks

__all__ = [
    "SwissEngine",
    "MatchMaterializer",
    "PairingEngine",
    "PlayerStore",
    "ResultRecorder",
    "RoundController",
    "RoundState",
    "SortKey",
    "StandingsBuilder",
    "TiebreakCalculator",
    "Tiebreaks",
    "cascade_sort",
    "default_max_rounds",
    "ranking_keys",
]
