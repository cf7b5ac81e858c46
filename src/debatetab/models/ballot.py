"""Ballot data classes for both room shapes."""

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

from debatetab.constants import BP_POINTS, SIDE_PROPOSITION
from debatetab.type_hints import Side
from debatetab.utils.validation import require_field


@dataclass
class TeamResultBP:
    """One team's line on a BP ballot.

    Attributes
    ----------
    team_id : str
        ID of the team.
    rank : int
        Finishing rank in the room, 1 (best) to 4.
    speaker_points : list of float
        Scores of the team's speakers, in speaking order.
    """

    team_id: str
    rank: int
    speaker_points: List[float] = field(default_factory=list)

    @property
    def team_points(self) -> int:
        """Team points earned by this rank."""
        return BP_POINTS[self.rank]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "team_id": self.team_id,
            "rank": self.rank,
            "speaker_points": list(self.speaker_points),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TeamResultBP":
        return cls(
            team_id=require_field(data, "team_id", "Ballot result"),
            rank=require_field(data, "rank", "Ballot result"),
            speaker_points=list(data.get("speaker_points", [])),
        )


@dataclass
class BallotBP:
    """Adjudication of a BP room: a rank and scores for each of the four teams."""

    ranks: List[TeamResultBP] = field(default_factory=list)
    chair_judge_id: Optional[str] = None

    def result_for(self, team_id: str) -> Optional[TeamResultBP]:
        for result in self.ranks:
            if result.team_id == team_id:
                return result
        return None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "ranks": [r.to_dict() for r in self.ranks],
            "chair_judge_id": self.chair_judge_id,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BallotBP":
        return cls(
            ranks=[TeamResultBP.from_dict(r) for r in data.get("ranks", [])],
            chair_judge_id=data.get("chair_judge_id"),
        )


@dataclass
class BallotTwoTeam:
    """Adjudication of a WSDC/AP room.

    Attributes
    ----------
    winner : str
        Winning side, ``"proposition"`` or ``"opposition"``.
    proposition_scores, opposition_scores : list of float
        Substantive speech scores per speaker.
    proposition_reply, opposition_reply : float
        Reply speech score of each side.
    chair_judge_id : str or None
        The chairing judge.
    """

    winner: Side
    proposition_scores: List[float] = field(default_factory=list)
    opposition_scores: List[float] = field(default_factory=list)
    proposition_reply: float = 0.0
    opposition_reply: float = 0.0
    chair_judge_id: Optional[str] = None

    def scores_for(self, side: str) -> List[float]:
        if side == SIDE_PROPOSITION:
            return self.proposition_scores
        return self.opposition_scores

    def reply_for(self, side: str) -> float:
        if side == SIDE_PROPOSITION:
            return self.proposition_reply
        return self.opposition_reply

    def to_dict(self) -> Dict[str, Any]:
        return {
            "winner": self.winner,
            "proposition_scores": list(self.proposition_scores),
            "opposition_scores": list(self.opposition_scores),
            "proposition_reply": self.proposition_reply,
            "opposition_reply": self.opposition_reply,
            "chair_judge_id": self.chair_judge_id,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BallotTwoTeam":
        return cls(
            winner=require_field(data, "winner", "Ballot"),
            proposition_scores=list(data.get("proposition_scores", [])),
            opposition_scores=list(data.get("opposition_scores", [])),
            proposition_reply=data.get("proposition_reply", 0.0),
            opposition_reply=data.get("opposition_reply", 0.0),
            chair_judge_id=data.get("chair_judge_id"),
        )
