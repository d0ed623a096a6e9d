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
from typing import Any, Dict, List, Optional

from swisspairing.constants import DEFAULT_TIEBREAK_ORDER, SUPPORTED_TIEBREAKS
from swisspairing.exceptions import InvalidConfigurationException


@dataclass
class EngineConfig:
    """Engine configuration settings.

    Attributes
    ----------
    max_rounds : int, optional
        Explicit round count. When ``None`` it is derived from the field size.
    allow_rematch : bool
        Pair a competitor with a previous opponent when nobody else is left.
        When False the engine raises ``PairingExhaustedException`` instead.
    enforce_round_completion : bool
        Refuse to pair round r+1 while round r still has unrecorded results.
    tiebreak_order : list of str
        Tiebreak criteria applied after score, in priority order.
    """

    max_rounds: Optional[int] = None
    allow_rematch: bool = True
    enforce_round_completion: bool = True
    tiebreak_order: List[str] = field(
        default_factory=lambda: list(DEFAULT_TIEBREAK_ORDER)
    )

    def validate(self) -> None:
        """Raise ``InvalidConfigurationException`` on unusable settings."""
        for name in ("allow_rematch", "enforce_round_completion"):
            value = getattr(self, name)
            if not isinstance(value, bool):
                raise InvalidConfigurationException(
                    f"{name} must be a boolean, got {value!r}"
                )
        if self.max_rounds is not None and (
            isinstance(self.max_rounds, bool) or not isinstance(self.max_rounds, int)
        ):
            raise InvalidConfigurationException(
                f"max_rounds must be an integer, got {self.max_rounds!r}"
            )
        if self.max_rounds is not None and self.max_rounds < 1:
            raise InvalidConfigurationException(
                f"max_rounds must be at least 1, got {self.max_rounds}"
            )
        unknown = [tb for tb in self.tiebreak_order if tb not in SUPPORTED_TIEBREAKS]
        if unknown:
            raise InvalidConfigurationException(
                f"Unsupported tiebreaks: {', '.join(unknown)}"
            )
        if len(set(self.tiebreak_order)) != len(self.tiebreak_order):
            raise InvalidConfigurationException("Tiebreak order contains duplicates")

    def to_dict(self) -> Dict[str, Any]:
        """Serialize configuration to dictionary."""
        return {
            "max_rounds": self.max_rounds,
            "allow_rematch": self.allow_rematch,
            "enforce_round_completion": self.enforce_round_completion,
            "tiebreak_order": list(self.tiebreak_order),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "EngineConfig":
        """Deserialize configuration from dictionary."""
        return cls(
            max_rounds=data.get("max_rounds"),
            allow_rematch=data.get("allow_rematch", True),
            enforce_round_completion=data.get("enforce_round_completion", True),
            tiebreak_order=list(
                data.get("tiebreak_order", list(DEFAULT_TIEBREAK_ORDER))
            ),
        )
