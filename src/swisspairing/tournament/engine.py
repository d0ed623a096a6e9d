"""Swiss tournament engine.

:class:`SwissEngine` owns all state of one tournament and routes every
mutation through its methods. Separate engines share nothing.
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

import dataclasses
import json
import threading
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Sequence, Union

from swisspairing.exceptions import (
    FileLoadException,
    FileSaveException,
    InvalidConfigurationException,
    InvalidResultException,
    InvalidSnapshotException,
)
from swisspairing.models.engine_config import EngineConfig
from swisspairing.models.match import Match
from swisspairing.models.match_result import MatchResult
from swisspairing.models.pairing import Pairing
from swisspairing.models.player_state import PlayerState
from swisspairing.models.snapshot import EngineSnapshot
from swisspairing.models.standing import StandingEntry
from swisspairing.tournament.match_materializer import MatchMaterializer
from swisspairing.tournament.pairing_engine import PairingEngine
from swisspairing.tournament.player_store import PlayerStore
from swisspairing.tournament.result_recorder import ResultRecorder
from swisspairing.tournament.round_controller import RoundController, RoundState
from swisspairing.tournament.standings import StandingsBuilder
from swisspairing.tournament.tiebreak_calculator import TiebreakCalculator
from swisspairing.type_hints import MaybePlayerId, PlayerId, Winner
from swisspairing.utils import setup_logger

logger = setup_logger(__name__)


class SwissEngine:
    """Main Swiss pairing and standings engine.

    This class coordinates all tournament operations through specialized
    components:
    - PairingEngine: ranks competitors and pairs the next round
    - ResultRecorder: validates and applies outcomes
    - StandingsBuilder: produces the ranked table
    - RoundController: round progression and the pairing log
    - MatchMaterializer: turns pairings into match records

    Mutating operations hold ``lock``, a re-entrant lock owned by this
    instance. Callers that need several calls to see one consistent state can
    hold it themselves::

        with engine.lock:
            standings = engine.get_standings()
            snapshot = engine.export_data()
    """

    def __init__(
        self,
        competitor_ids: Iterable[PlayerId],
        max_rounds: Optional[int] = None,
        config: Optional[EngineConfig] = None,
    ) -> None:
        """Initialize a new engine.

        Args
        ----
        competitor_ids: Competitors in seeding order
        max_rounds: Explicit round count, overriding ``config.max_rounds``
        config: Pairing and progression policy

        Raises
        ------
        DuplicatePlayerException: If a competitor id is given twice
        InvalidConfigurationException: If there are no competitors or the
            configuration is invalid
        """
        if config is None:
            config = EngineConfig()
        config = dataclasses.replace(
            config, tiebreak_order=list(config.tiebreak_order)
        )
        if max_rounds is not None:
            config.max_rounds = max_rounds
        config.validate()

        self.lock = threading.RLock()
        self.config = config
        self.players = PlayerStore(competitor_ids)
        self.tiebreak_calculator = TiebreakCalculator()
        self.result_recorder = ResultRecorder()
        self.match_materializer = MatchMaterializer()
        self.round_controller = RoundController(
            num_competitors=len(self.players),
            max_rounds=config.max_rounds,
            has_result=self.result_recorder.has_result,
        )
        self._build_rankers()

        logger.info(
            f"Swiss engine created with {len(self.players)} competitors, "
            f"{self.max_rounds} rounds"
        )

    def _build_rankers(self) -> None:
        self.pairing_engine = PairingEngine(
            self.tiebreak_calculator,
            self.config.tiebreak_order,
            allow_rematch=self.config.allow_rematch,
        )
        self.standings_builder = StandingsBuilder(
            self.tiebreak_calculator, self.config.tiebreak_order
        )

    # ========== Properties ==========

    @property
    def current_round(self) -> int:
        """Last round paired, 0 before the first round."""
        return self.round_controller.current_round

    @property
    def max_rounds(self) -> int:
        return self.round_controller.max_rounds

    @property
    def state(self) -> RoundState:
        with self.lock:
            return self.round_controller.state

    @property
    def competitor_ids(self) -> List[PlayerId]:
        return self.players.ids

    @property
    def pairing_log(self) -> List[Pairing]:
        """All pairings generated so far, in round order."""
        with self.lock:
            return self.round_controller.pairing_log

    def is_complete(self) -> bool:
        return self.round_controller.is_complete()

    # ========== Pairing ==========

    def generate_pairings(self, round_number: int) -> List[Pairing]:
        """Pair the next round.

        Requesting the current round again returns its existing pairings
        without re-pairing.

        Args:
            round_number: Round to pair, normally ``current_round + 1``

        Returns:
            Pairings in ranking order; a bye, if any, comes last

        Raises:
            InvalidRoundException: If the round skips ahead or goes back
            TournamentStateException: If all rounds are paired, or the current
                round has unrecorded results while completion is enforced
            PairingExhaustedException: If rematches are disabled and the greedy
                pass leaves a competitor without a new opponent
        """
        with self.lock:
            if round_number == self.current_round and round_number > 0:
                logger.info(f"Round {round_number} already paired")
                return self.round_controller.pairings_for(round_number)

            self.round_controller.check_next_round(
                round_number, self.config.enforce_round_completion
            )
            pairings = self.pairing_engine.pair_round(self.players, round_number)
            self.round_controller.log_round(round_number, pairings)
            return list(pairings)

    def get_round_pairings(self, round_number: int) -> List[Pairing]:
        """Get the pairings of an already generated round.

        Raises:
            RoundNotFoundException: If the round has not been paired
        """
        with self.lock:
            return self.round_controller.pairings_for(round_number)

    def pairings_to_matches(
        self,
        pairings: Iterable[Pairing],
        station_ids: Optional[Sequence[str]] = None,
        game: str = "",
    ) -> List[Match]:
        """Materialize pairings as match records. Engine state is not touched."""
        return self.match_materializer.pairings_to_matches(pairings, station_ids, game)

    # ========== Results ==========

    def record_result(
        self,
        player1: PlayerId,
        player2: MaybePlayerId,
        winner: Winner,
        round_number: Optional[int] = None,
    ) -> MatchResult:
        """Record the outcome of a scheduled pairing.

        Args:
            player1: One competitor of the pairing
            player2: The other competitor, or None for a bye
            winner: Winning competitor, or None for a draw
            round_number: Round of the pairing; defaults to the current round

        Returns:
            The recorded result

        Raises:
            PlayerNotFoundException: If a competitor is not registered
            InvalidResultException: If the pair was not scheduled in the round
                or the winner did not play in it
            DuplicateResultException: If the pairing already has a result
        """
        with self.lock:
            ids = [player1] if player2 is None else [player1, player2]
            if winner is not None:
                ids.append(winner)
            self.players.require(*ids)

            if round_number is None:
                round_number = self.current_round

            pairing = self.round_controller.find_pairing(
                round_number, player1, player2
            )
            if pairing is None:
                logger.error(
                    f"No pairing {player1} vs {player2 or 'BYE'} in round "
                    f"{round_number}"
                )
                raise InvalidResultException(
                    f"{player1} vs {player2 or 'BYE'} is not scheduled in round "
                    f"{round_number}"
                )

            result = self.result_recorder.record(pairing, winner, self.players)

            if self.round_controller.is_round_recorded(round_number):
                logger.info(f"All results for round {round_number} recorded")
            return result

    def get_results(self, round_number: Optional[int] = None) -> List[MatchResult]:
        with self.lock:
            return self.result_recorder.results(round_number)

    # ========== Standings ==========

    def get_standings(self) -> List[StandingEntry]:
        """Ranked table of every competitor with positions 1..N."""
        with self.lock:
            return self.standings_builder.build(self.players)

    def get_player_stats(self, player_id: PlayerId) -> PlayerState:
        """Copy of a competitor's state.

        Raises:
            PlayerNotFoundException: If the competitor is not registered
        """
        with self.lock:
            return self.players.get(player_id).copy()

    # ========== Serialization ==========

    def snapshot(self) -> EngineSnapshot:
        with self.lock:
            return EngineSnapshot(
                players=[(state.id, state.copy()) for state in self.players],
                pairings=self.round_controller.pairing_log,
                current_round=self.current_round,
                max_rounds=self.max_rounds,
                results=self.result_recorder.results(),
                config=dataclasses.replace(
                    self.config, tiebreak_order=list(self.config.tiebreak_order)
                ),
            )

    def export_data(self) -> Dict[str, Any]:
        """Serialize the engine for an external persistence layer."""
        return self.snapshot().to_dict()

    def import_data(self, data: Dict[str, Any]) -> None:
        """Replace all engine state with exported data.

        Nothing is merged; on error the current state is kept.

        Raises:
            InvalidSnapshotException: If the data is malformed
        """
        snapshot = EngineSnapshot.from_dict(data)
        with self.lock:
            self._apply_snapshot(snapshot)

    def _apply_snapshot(self, snapshot: EngineSnapshot) -> None:
        try:
            snapshot.config.validate()
        except InvalidConfigurationException as e:
            raise InvalidSnapshotException(f"Invalid engine config: {e}") from e

        self.players = PlayerStore.from_states(state for _, state in snapshot.players)
        self.config = snapshot.config
        self.result_recorder.restore(snapshot.results)
        self.round_controller.restore(
            snapshot.current_round, snapshot.max_rounds, snapshot.pairings
        )
        self._build_rankers()

        logger.info(
            f"Engine restored at round {snapshot.current_round} of "
            f"{snapshot.max_rounds} with {len(self.players)} competitors"
        )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SwissEngine":
        """Create an engine from exported data.

        Raises:
            InvalidSnapshotException: If the data is malformed
        """
        snapshot = EngineSnapshot.from_dict(data)
        engine = cls(
            [player_id for player_id, _ in snapshot.players],
            max_rounds=snapshot.max_rounds,
        )
        engine._apply_snapshot(snapshot)
        return engine

    def save(self, path: Union[str, Path]) -> None:
        """Write the engine snapshot to a JSON file.

        Raises:
            FileSaveException: If the file cannot be written
        """
        data = self.export_data()
        try:
            with open(path, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=4)
        except OSError as e:
            logger.error(f"Could not save engine to {path}: {e}")
            raise FileSaveException(f"Could not save engine to {path}: {e}") from e
        logger.info(f"Engine saved to {path}")

    @classmethod
    def load(cls, path: Union[str, Path]) -> "SwissEngine":
        """Create an engine from a JSON file written by :meth:`save`.

        Raises:
            FileLoadException: If the file cannot be read or is not JSON
            InvalidSnapshotException: If the content is not a valid snapshot
        """
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.error(f"Could not load engine from {path}: {e}")
            raise FileLoadException(f"Could not load engine from {path}: {e}") from e

        if not isinstance(data, dict):
            raise FileLoadException(f"{path} does not contain an engine snapshot")
        return cls.from_dict(data)
