"""Cascading comparator shared by pairing and standings.

Ranking is expressed as an ordered list of :class:`SortKey` values that are
applied lexicographically. The sort is stable, so competitors that tie on
every key keep the order in which they were supplied.
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

from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, List, Sequence, TypeVar

from swisspairing.models.player_state import PlayerState
from swisspairing.tournament.tiebreak_calculator import Tiebreaks
from swisspairing.type_hints import PlayerId

T = TypeVar("T")


@dataclass(frozen=True)
class SortKey:
    """One level of the cascade: how to extract a value and which way it sorts."""

    name: str
    extract: Callable[[Any], Any]
    descending: bool = True


def cascade_sort(items: Iterable[T], keys: Sequence[SortKey]) -> List[T]:
    """Sort ``items`` by ``keys`` in priority order.

    Applies one stable sort per key, least significant first, which yields the
    lexicographic order. ``reverse=True`` keeps equal elements in their
    original order, so direction does not break stability.
    """
    ordered = list(items)
    for key in reversed(keys):
        ordered.sort(key=key.extract, reverse=key.descending)
    return ordered


def ranking_keys(
    tiebreaks: Dict[PlayerId, Tiebreaks], tiebreak_order: Sequence[str]
) -> List[SortKey]:
    """Build the score-then-tiebreaks cascade for :class:`PlayerState` items.

    Args:
        tiebreaks: Tiebreak view for every competitor being ranked
        tiebreak_order: Tiebreak names applied after score, highest priority first

    Returns:
        Sort keys, all descending
    """
    keys = [SortKey("score", lambda state: state.score)]
    for name in tiebreak_order:
        keys.append(SortKey(name, _tiebreak_extractor(tiebreaks, name)))
    return keys


def _tiebreak_extractor(
    tiebreaks: Dict[PlayerId, Tiebreaks], name: str
) -> Callable[[PlayerState], float]:
    def extract(state: PlayerState) -> float:
        return tiebreaks[state.id].value(name)

    return extract
