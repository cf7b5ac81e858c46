"""Type hints used in Debate Tab."""

from typing import Literal

# Tournament format tags
TournamentFormat = Literal["BP", "WSDC", "AP"]
TwoTeamFormat = Literal["WSDC", "AP"]

# BP seat in a room
PositionBP = Literal[
    "opening_government",
    "opening_opposition",
    "closing_government",
    "closing_opposition",
]
# Two-team side in a room
Side = Literal["proposition", "opposition"]

PairingAlgorithm = Literal["random", "power-paired-fold", "power-paired-slide"]
RoundStatus = Literal["draft", "results"]
