"""Type hints used in Swiss Pairing."""

from typing import List, Optional, Tuple

# Opaque competitor identifier
PlayerId = str
# 1-based round number, 0 before the first round
RoundNumber = int
# Second slot of a pairing, None marks a bye
MaybePlayerId = Optional[PlayerId]
# Winner of a game, None marks a draw
Winner = Optional[PlayerId]
# Identity of a pairing: (round, player1, player2)
PairingKey = Tuple[RoundNumber, PlayerId, MaybePlayerId]

# Ordered competitor ids, best first
Ranking = List[PlayerId]

#  LocalWords:  PairingKey
