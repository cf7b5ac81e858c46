"""Pairing data classes: one room of a draw.

A tournament uses exactly one of the two shapes, chosen by its format.
``PairingBP`` holds four teams and can only carry a ``BallotBP``;
``PairingTwoTeam`` holds two and can only carry a ``BallotTwoTeam``.
"""

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

from dataclasses import dataclass, field
from typing import Any, ClassVar, Dict, List, Optional, Tuple, Union

from debatetab.constants import (
    BP_POSITIONS,
    FORMAT_BP,
    FORMAT_WSDC,
    SIDE_OPPOSITION,
    SIDE_PROPOSITION,
    TWO_TEAM_SIDES,
)
from debatetab.models.ballot import BallotBP, BallotTwoTeam
from debatetab.models.team import Judge, Team
from debatetab.type_hints import TwoTeamFormat
from debatetab.utils import generate_id
from debatetab.utils.validation import require_field


class _PairingShell:
    """Behaviour shared by both pairing shapes.

    Subclasses define ``POSITIONS`` and the matching team fields, plus the
    common ``id``, ``round_id``, ``room``, ``judges`` and ``ballot`` fields.
    """

    POSITIONS: ClassVar[Tuple[str, ...]] = ()

    def team_at(self, position: str) -> Team:
        if position not in self.POSITIONS:
            raise KeyError(position)
        return getattr(self, position)

    def set_team(self, position: str, team: Team) -> None:
        if position not in self.POSITIONS:
            raise KeyError(position)
        setattr(self, position, team)

    def slots(self) -> List[Tuple[str, Team]]:
        """(position, team) for every seat, in speaking order."""
        return [(position, getattr(self, position)) for position in self.POSITIONS]

    @property
    def teams(self) -> List[Team]:
        return [team for _, team in self.slots()]

    def position_of(self, team_id: str) -> Optional[str]:
        for position, team in self.slots():
            if team.id == team_id:
                return position
        return None

    def has_judge(self, judge_id: str) -> bool:
        return any(judge.id == judge_id for judge in self.judges)

    @property
    def is_adjudicated(self) -> bool:
        return self.ballot is not None

    def _shell_to_dict(self) -> Dict[str, Any]:
        data = {
            "id": self.id,
            "format": self.format,
            "round_id": self.round_id,
            "room": self.room,
            "judges": [j.to_dict() for j in self.judges],
            "ballot": self.ballot.to_dict() if self.ballot is not None else None,
        }
        for position, team in self.slots():
            data[position] = team.to_dict()
        return data


@dataclass
class PairingBP(_PairingShell):
    """A British Parliamentary room."""

    POSITIONS: ClassVar[Tuple[str, ...]] = BP_POSITIONS
    format: ClassVar[str] = FORMAT_BP

    opening_government: Team
    opening_opposition: Team
    closing_government: Team
    closing_opposition: Team
    round_id: str = ""
    room: str = ""
    judges: List[Judge] = field(default_factory=list)
    ballot: Optional[BallotBP] = None
    id: str = field(default_factory=lambda: generate_id("Pairing"))

    def to_dict(self) -> Dict[str, Any]:
        """Serialize pairing to dictionary."""
        return self._shell_to_dict()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PairingBP":
        """Deserialize pairing from dictionary."""
        ballot = data.get("ballot")
        return cls(
            **{
                p: Team.from_dict(require_field(data, p, "Pairing"))
                for p in BP_POSITIONS
            },
            round_id=data.get("round_id", ""),
            room=data.get("room", ""),
            judges=[Judge.from_dict(j) for j in data.get("judges", [])],
            ballot=BallotBP.from_dict(ballot) if ballot else None,
            id=require_field(data, "id", "Pairing"),
        )


@dataclass
class PairingTwoTeam(_PairingShell):
    """A WSDC or AP room. ``format`` only labels which of the two it is."""

    POSITIONS: ClassVar[Tuple[str, ...]] = TWO_TEAM_SIDES

    proposition: Team
    opposition: Team
    format: TwoTeamFormat = FORMAT_WSDC
    round_id: str = ""
    room: str = ""
    judges: List[Judge] = field(default_factory=list)
    ballot: Optional[BallotTwoTeam] = None
    id: str = field(default_factory=lambda: generate_id("Pairing"))

    def winner_team(self) -> Optional[Team]:
        """Team on the winning side, or None before adjudication."""
        if self.ballot is None:
            return None
        if self.ballot.winner == SIDE_PROPOSITION:
            return self.proposition
        if self.ballot.winner == SIDE_OPPOSITION:
            return self.opposition
        return None

    def to_dict(self) -> Dict[str, Any]:
        """Serialize pairing to dictionary."""
        return self._shell_to_dict()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PairingTwoTeam":
        """Deserialize pairing from dictionary."""
        ballot = data.get("ballot")
        proposition = require_field(data, SIDE_PROPOSITION, "Pairing")
        opposition = require_field(data, SIDE_OPPOSITION, "Pairing")
        return cls(
            proposition=Team.from_dict(proposition),
            opposition=Team.from_dict(opposition),
            format=data.get("format", FORMAT_WSDC),
            round_id=data.get("round_id", ""),
            room=data.get("room", ""),
            judges=[Judge.from_dict(j) for j in data.get("judges", [])],
            ballot=BallotTwoTeam.from_dict(ballot) if ballot else None,
            id=require_field(data, "id", "Pairing"),
        )


Pairing = Union[PairingBP, PairingTwoTeam]
Ballot = Union[BallotBP, BallotTwoTeam]


def pairing_from_dict(
    data: Dict[str, Any], default_format: Optional[str] = None
) -> Pairing:
    """Deserialize either pairing shape, dispatching on its format tag.

    Records saved without a tag use ``default_format``, normally the
    owning tournament's format.
    """
    if isinstance(data, dict) and "format" not in data and default_format:
        data = dict(data, format=default_format)
    if isinstance(data, dict) and data.get("format") == FORMAT_BP:
        return PairingBP.from_dict(data)
    return PairingTwoTeam.from_dict(data)
