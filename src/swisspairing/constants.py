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

# --- Constants ---
SAVE_FILE_EXTENSION = ".json"

# Game outcome scores
WIN_SCORE = 1.0
DRAW_SCORE = 0.5
LOSS_SCORE = 0.0

# A bye is worth a full point
BYE_SCORE = WIN_SCORE

# Every pairing (decisive, drawn or bye) puts this many points into the field
POINTS_PER_PAIRING = 1.0

# Opponent slot of a materialized bye match
BYE = "BYE"

# Tiebreaker Keys
TB_BUCHHOLZ = "buchholz"
TB_SONNEBORN_BERGER = "sonneborn_berger"
TB_WINS = "wins"

# Default display names for tiebreaks
TIEBREAK_NAMES = {
    TB_BUCHHOLZ: "Buchholz",
    TB_SONNEBORN_BERGER: "Sonneborn-Berger",
    TB_WINS: "Number of Wins",
}

SUPPORTED_TIEBREAKS = tuple(TIEBREAK_NAMES)

# Order applied after score when ranking competitors
DEFAULT_TIEBREAK_ORDER = [
    TB_BUCHHOLZ,
    TB_SONNEBORN_BERGER,
]

# (max field size, rounds) brackets used when no round count is given
ROUND_BRACKETS = (
    (8, 3),
    (16, 4),
    (32, 5),
    (64, 6),
)
MAX_DEFAULT_ROUNDS = 7
