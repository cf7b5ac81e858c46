"""Data models for Debate Tab."""

# Debate Tab
# Copyright (C) 2025  Debate Tab developers
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

from debatetab.models.ballot import BallotBP, BallotTwoTeam, TeamResultBP
from debatetab.models.pairing import (
    Ballot,
    Pairing,
    PairingBP,
    PairingTwoTeam,
    pairing_from_dict,
)
from debatetab.models.round import Round
from debatetab.models.team import (
    BreakCategory,
    Judge,
    Speaker,
    SpeakerCategory,
    Team,
)
from debatetab.models.tournament import Tournament
from debatetab.models.tournament_config import TournamentConfig

__all__ = [
    "Ballot",
    "BallotBP",
    "BallotTwoTeam",
    "BreakCategory",
    "Judge",
    "Pairing",
    "PairingBP",
    "PairingTwoTeam",
    "Round",
    "Speaker",
    "SpeakerCategory",
    "Team",
    "TeamResultBP",
    "Tournament",
    "TournamentConfig",
    "pairing_from_dict",
]
