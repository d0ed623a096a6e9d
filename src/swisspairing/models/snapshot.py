"""Engine state snapshot exchanged with an external persistence layer."""

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
from typing import Any, Dict, List, Tuple

from swisspairing.exceptions import InvalidSnapshotException
from swisspairing.models.engine_config import EngineConfig
from swisspairing.models.match_result import MatchResult
from swisspairing.models.pairing import Pairing
from swisspairing.models.player_state import PlayerState
from swisspairing.type_hints import PlayerId


@dataclass
class EngineSnapshot:
    """Everything needed to rebuild an engine.

    Attributes
    ----------
    players : list of (str, PlayerState)
        Competitors in registration order.
    pairings : list of Pairing
        Append-only pairing log across all rounds.
    current_round : int
        Last round paired, 0 before the first round.
    max_rounds : int
        Round count of the tournament.
    results : list of MatchResult
        Recorded outcomes, used to keep result recording idempotent.
    config : EngineConfig
        Pairing and progression policy.
    """

    players: List[Tuple[PlayerId, PlayerState]]
    pairings: List[Pairing]
    current_round: int
    max_rounds: int
    results: List[MatchResult] = field(default_factory=list)
    config: EngineConfig = field(default_factory=EngineConfig)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize snapshot to a JSON-compatible dictionary."""
        return {
            "players": [[pid, state.to_dict()] for pid, state in self.players],
            "pairings": [p.to_dict() for p in self.pairings],
            "current_round": self.current_round,
            "max_rounds": self.max_rounds,
            "results": [r.to_dict() for r in self.results],
            "config": self.config.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "EngineSnapshot":
        """Deserialize snapshot from dictionary.

        Raises:
            InvalidSnapshotException: If required keys are missing or malformed
        """
        try:
            players = []
            for entry in data["players"]:
                player_id, state_data = entry
                state = PlayerState.from_dict(state_data)
                if state.id != str(player_id):
                    raise InvalidSnapshotException(
                        f"Player entry {player_id} holds state for {state.id}"
                    )
                players.append((state.id, state))

            snapshot = cls(
                players=players,
                pairings=[Pairing.from_dict(p) for p in data["pairings"]],
                current_round=int(data["current_round"]),
                max_rounds=int(data["max_rounds"]),
                results=[MatchResult.from_dict(r) for r in data.get("results", [])],
                config=EngineConfig.from_dict(data.get("config", {})),
            )
        except (KeyError, TypeError, ValueError) as e:
            raise InvalidSnapshotException(f"Malformed engine snapshot: {e}") from e

        snapshot.validate()
        return snapshot

    def validate(self) -> None:
        """Check cross-references between players, pairings and results."""
        player_ids = [pid for pid, _ in self.players]
        if not player_ids:
            raise InvalidSnapshotException("Snapshot contains no players")
        if len(set(player_ids)) != len(player_ids):
            raise InvalidSnapshotException("Snapshot contains duplicate players")
        if self.max_rounds < 1:
            raise InvalidSnapshotException(f"Invalid max_rounds: {self.max_rounds}")
        if self.current_round < 0:
            raise InvalidSnapshotException(
                f"Invalid current_round: {self.current_round}"
            )
        if self.current_round > self.max_rounds:
            raise InvalidSnapshotException(
                f"current_round {self.current_round} exceeds "
                f"max_rounds {self.max_rounds}"
            )

        known = set(player_ids)
        for pairing in self.pairings:
            ids = [pairing.player1] + ([pairing.player2] if pairing.player2 else [])
            missing = [pid for pid in ids if pid not in known]
            if missing:
                raise InvalidSnapshotException(
                    f"Pairing in round {pairing.round} references unknown "
                    f"competitors: {missing}"
                )
            if not 1 <= pairing.round <= self.current_round:
                raise InvalidSnapshotException(
                    f"Pairing round {pairing.round} outside 1..{self.current_round}"
                )

        paired_rounds = {p.round for p in self.pairings}
        unpaired = [
            r for r in range(1, self.current_round + 1) if r not in paired_rounds
        ]
        if unpaired:
            raise InvalidSnapshotException(f"Rounds {unpaired} have no pairings")

        pairing_keys = {p.key for p in self.pairings}
        for result in self.results:
            if result.key not in pairing_keys:
                raise InvalidSnapshotException(
                    f"Result {result.key} does not match any pairing"
                )
