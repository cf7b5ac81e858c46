"""Data models for teams, speakers, judges and category tags."""

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
from typing import Any, Dict, List, Optional

from debatetab.utils import generate_id
from debatetab.utils.validation import require_field


@dataclass
class Speaker:
    """A single speaker on a team.

    Attributes
    ----------
    name : str
        Speaker's display name.
    id : str
        Stable identifier.
    category_ids : list of str
        Ids of the speaker categories (e.g. novice, ESL) the speaker belongs to.
    """

    name: str
    id: str = field(default_factory=lambda: generate_id("Speaker"))
    category_ids: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize speaker to dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "category_ids": list(self.category_ids),
        }

    @classmethod
    def from_dict(cls, data: Any) -> "Speaker":
        """Deserialize a speaker.

        Older records stored speakers as bare name strings; those are
        migrated to full records with a fresh id.
        """
        if isinstance(data, str):
            return cls(name=data)
        return cls(
            name=data.get("name", ""),
            id=data.get("id") or generate_id("Speaker"),
            category_ids=list(data.get("category_ids", [])),
        )


@dataclass
class Team:
    """A debating team.

    The cumulative counters are a cache of what the standings engine
    computes from ballots; which ones are meaningful depends on the format
    (``team_points`` for BP, ``wins`` for the two-team formats).

    Attributes
    ----------
    name : str
        Team name. May change; ``id`` may not.
    speakers : list of Speaker
        Speakers in speaking order (2 for BP, 3 for WSDC/AP).
    id : str
        Stable identifier.
    wins : int
        Rounds won (two-team formats).
    team_points : int
        BP team points.
    total_speaker_points : float
        Sum of all speaker scores on record.
    positions_spoken : list of str
        BP positions held in previous rounds, oldest first.
    break_category_ids : list of str
        Break categories the team is eligible for.
    """

    name: str
    speakers: List[Speaker] = field(default_factory=list)
    id: str = field(default_factory=lambda: generate_id("Team"))
    wins: int = 0
    team_points: int = 0
    total_speaker_points: float = 0.0
    positions_spoken: List[str] = field(default_factory=list)
    break_category_ids: List[str] = field(default_factory=list)

    @property
    def speaker_names(self) -> List[str]:
        return [speaker.name for speaker in self.speakers]

    def last_index_of_position(self, position: str) -> int:
        """Index of the most recent round the team held ``position``, or -1."""
        for index in range(len(self.positions_spoken) - 1, -1, -1):
            if self.positions_spoken[index] == position:
                return index
        return -1

    def to_dict(self) -> Dict[str, Any]:
        """Serialize team to dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "speakers": [s.to_dict() for s in self.speakers],
            "wins": self.wins,
            "team_points": self.team_points,
            "total_speaker_points": self.total_speaker_points,
            "positions_spoken": list(self.positions_spoken),
            "break_category_ids": list(self.break_category_ids),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Team":
        """Deserialize team from dictionary, defaulting absent counters."""
        return cls(
            name=data.get("name", ""),
            speakers=[Speaker.from_dict(s) for s in data.get("speakers", [])],
            id=require_field(data, "id", "Team"),
            wins=data.get("wins", 0),
            team_points=data.get("team_points", 0),
            total_speaker_points=data.get("total_speaker_points", 0.0),
            positions_spoken=list(data.get("positions_spoken", [])),
            break_category_ids=list(data.get("break_category_ids", [])),
        )


@dataclass
class Judge:
    """An adjudicator.

    Attributes
    ----------
    name : str
        Judge's display name.
    affiliation : str
        School or institution, used informally to avoid conflicts.
    id : str
        Stable identifier.
    rounds_judged : int
        Number of adjudicated rooms the judge sat on.
    """

    name: str
    affiliation: str = ""
    id: str = field(default_factory=lambda: generate_id("Judge"))
    rounds_judged: int = 0

    def to_dict(self) -> Dict[str, Any]:
        """Serialize judge to dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "affiliation": self.affiliation,
            "rounds_judged": self.rounds_judged,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Judge":
        """Deserialize judge from dictionary."""
        return cls(
            name=data.get("name", ""),
            affiliation=data.get("affiliation", ""),
            id=require_field(data, "id", "Judge"),
            rounds_judged=data.get("rounds_judged", 0),
        )


@dataclass
class BreakCategory:
    """A break category tag (e.g. Open, ESL)."""

    name: str
    id: str = field(default_factory=lambda: generate_id("BreakCategory"))

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "name": self.name}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BreakCategory":
        return cls(
            name=data.get("name", ""), id=require_field(data, "id", "Break category")
        )


@dataclass
class SpeakerCategory:
    """A speaker category tag (e.g. Novice)."""

    name: str
    id: str = field(default_factory=lambda: generate_id("SpeakerCategory"))

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "name": self.name}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SpeakerCategory":
        return cls(
            name=data.get("name", ""), id=require_field(data, "id", "Speaker category")
        )


def find_by_id(items: List[Any], item_id: Optional[str]) -> Optional[Any]:
    """Return the first item whose ``id`` equals ``item_id``."""
    for item in items:
        if item.id == item_id:
            return item
    return None
