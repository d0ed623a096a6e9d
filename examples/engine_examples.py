"""Example script demonstrating the Swiss pairing engine.

Shows the round loop an organizer runs, how pairings become station
assignments, and how engine state is handed to a persistence layer.
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

import random

from swisspairing import SwissEngine
from swisspairing.utils import configure_logging

TEAMS = ["Ravens", "Otters", "Lynx", "Herons", "Badgers", "Falcons", "Wolves"]


def example_round_loop():
    """Example: Pair, play and rank a full tournament."""

    print("\n" + "=" * 70)
    print("EXAMPLE 1: Round Loop")
    print("=" * 70 + "\n")

    engine = SwissEngine(TEAMS)
    rng = random.Random(2025)
    print(f"{len(TEAMS)} teams, {engine.max_rounds} rounds\n")

    while not engine.is_complete():
        round_number = engine.current_round + 1
        print(f"Round {round_number}:")
        for pairing in engine.generate_pairings(round_number):
            if pairing.is_bye:
                winner = None
                print(f"  {pairing.player1} has a bye")
            else:
                winner = rng.choice([pairing.player1, pairing.player2, None])
                print(f"  {pairing.player1} vs {pairing.player2}: {winner or 'draw'}")
            engine.record_result(pairing.player1, pairing.player2, winner)

    print("\nFinal standings:")
    for entry in engine.get_standings():
        print(
            f"  {entry.position}. {entry.competitor_id:10} {entry.points:.1f} pts "
            f"(W{entry.wins} D{entry.draws} L{entry.losses}, BH {entry.buchholz:.1f})"
        )


def example_station_assignment():
    """Example: Turn a round's pairings into match records."""

    print("\n" + "=" * 70)
    print("EXAMPLE 2: Station Assignment")
    print("=" * 70 + "\n")

    engine = SwissEngine(TEAMS)
    pairings = engine.generate_pairings(1)
    matches = engine.pairings_to_matches(pairings, ["Court A", "Court B"], "Volleyball")

    for match in matches:
        station = match.station_id or "-"
        state = "complete" if match.is_complete else "scheduled"
        print(f"  {match.team_a:10} vs {match.team_b:10} {station:8} {state}")


def example_persistence():
    """Example: Export and restore engine state."""

    print("\n" + "=" * 70)
    print("EXAMPLE 3: Export and Import")
    print("=" * 70 + "\n")

    engine = SwissEngine(TEAMS)
    for pairing in engine.generate_pairings(1):
        engine.record_result(pairing.player1, pairing.player2, pairing.player1)

    with engine.lock:
        data = engine.export_data()

    restored = SwissEngine.from_dict(data)
    print(f"Restored at round {restored.current_round} of {restored.max_rounds}")
    print(f"Next round pairings: {len(restored.generate_pairings(2))}")


def main():
    """Run all examples."""
    configure_logging("WARNING")

    example_round_loop()
    example_station_assignment()
    example_persistence()


if __name__ == "__main__":
    main()
