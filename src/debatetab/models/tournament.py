"""The tournament record: the single owner of teams, judges and rounds.

Pairings hold copies of the teams and judges as they were when the draw
was made, so editing a team here does not rewrite past draws.
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

import copy
import json
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from debatetab.constants import FORMAT_BP, SPEAKERS_PER_TEAM
from debatetab.exceptions import (
    DuplicateJudgeException,
    DuplicateTeamException,
    InvalidTeamException,
    InvalidTournamentDataException,
)
from debatetab.models.pairing import Pairing
from debatetab.models.round import Round
from debatetab.models.team import (
    BreakCategory,
    Judge,
    Speaker,
    SpeakerCategory,
    Team,
    find_by_id,
)
from debatetab.models.tournament_config import TournamentConfig
from debatetab.utils import generate_id, setup_logger
from debatetab.utils.validation import validate_non_empty

logger = setup_logger(__name__)

_REQUIRED_KEYS = ("teams", "judges", "rounds")


@dataclass
class Tournament:
    """A debate tournament.

    Attributes
    ----------
    config : TournamentConfig
        Name, format and tab settings.
    teams : list of Team
        Registered teams, in registration order.
    judges : list of Judge
        Registered judges.
    rounds : list of Round
        Rounds in order; ``rounds[i].round_number`` is normally ``i + 1``.
    break_categories, speaker_categories : list
        Tags teams and speakers can be assigned to.
    id : str
        Stable identifier.
    """

    config: TournamentConfig = field(default_factory=TournamentConfig)
    teams: List[Team] = field(default_factory=list)
    judges: List[Judge] = field(default_factory=list)
    rounds: List[Round] = field(default_factory=list)
    break_categories: List[BreakCategory] = field(default_factory=list)
    speaker_categories: List[SpeakerCategory] = field(default_factory=list)
    id: str = field(default_factory=lambda: generate_id("Tournament"))

    # ========== Properties ==========

    @property
    def name(self) -> str:
        return self.config.name

    @name.setter
    def name(self, value: str) -> None:
        self.config.name = value

    @property
    def format(self) -> str:
        return self.config.format

    @property
    def is_bp(self) -> bool:
        return self.config.format == FORMAT_BP

    @property
    def speakers_per_team(self) -> int:
        return SPEAKERS_PER_TEAM[self.config.format]

    # ========== Team Management ==========

    def get_team(self, team_id: str) -> Optional[Team]:
        return find_by_id(self.teams, team_id)

    def teams_by_id(self) -> Dict[str, Team]:
        return {team.id: team for team in self.teams}

    def add_team(self, team: Team) -> Team:
        """Register a team.

        Args:
            team: The team to add

        Returns:
            The added team

        Raises:
            DuplicateTeamException: If a team with the same id exists
            InvalidTeamException: If the name is blank or the speaker count
                does not match the format
        """
        if self.get_team(team.id) is not None:
            raise DuplicateTeamException(f"Team id already registered: {team.id}")
        self._check_team(team)
        self.teams.append(team)
        logger.info("Added team: %s (%s)", team.name, team.id)
        return team

    def update_team(
        self,
        team_id: str,
        name: Optional[str] = None,
        speakers: Optional[List[Speaker]] = None,
        break_category_ids: Optional[List[str]] = None,
    ) -> bool:
        """Edit a team's descriptive fields; its id and counters are kept.

        Returns:
            True if updated, False if the team was not found
        """
        team = self.get_team(team_id)
        if team is None:
            return False

        candidate = copy.deepcopy(team)
        if name is not None:
            candidate.name = name
        if speakers is not None:
            candidate.speakers = list(speakers)
        if break_category_ids is not None:
            candidate.break_category_ids = list(break_category_ids)
        self._check_team(candidate)

        team.name = candidate.name
        team.speakers = candidate.speakers
        team.break_category_ids = candidate.break_category_ids
        logger.info("Updated team: %s (%s)", team.name, team.id)
        return True

    def remove_team(self, team_id: str) -> bool:
        """Remove a team. Past pairings keep their copy of it.

        Returns:
            True if removed, False if not found
        """
        team = self.get_team(team_id)
        if team is None:
            return False
        self.teams.remove(team)
        logger.info("Removed team: %s (%s)", team.name, team_id)
        return True

    def _check_team(self, team: Team) -> None:
        name_check = validate_non_empty(team.name, "Team name")
        if not name_check:
            raise InvalidTeamException(name_check.error_message)
        if len(team.speakers) != self.speakers_per_team:
            raise InvalidTeamException(
                f"{self.format} teams need {self.speakers_per_team} speakers, "
                f"{team.name} has {len(team.speakers)}"
            )
        for speaker in team.speakers:
            speaker_check = validate_non_empty(speaker.name, "Speaker name")
            if not speaker_check:
                raise InvalidTeamException(speaker_check.error_message)

    # ========== Judge Management ==========

    def get_judge(self, judge_id: str) -> Optional[Judge]:
        return find_by_id(self.judges, judge_id)

    def add_judge(self, judge: Judge) -> Judge:
        """Register a judge.

        Raises:
            DuplicateJudgeException: If a judge with the same id exists
        """
        if self.get_judge(judge.id) is not None:
            raise DuplicateJudgeException(f"Judge id already registered: {judge.id}")
        self.judges.append(judge)
        logger.info("Added judge: %s (%s)", judge.name, judge.id)
        return judge

    def remove_judge(self, judge_id: str) -> bool:
        judge = self.get_judge(judge_id)
        if judge is None:
            return False
        self.judges.remove(judge)
        logger.info("Removed judge: %s (%s)", judge.name, judge_id)
        return True

    # ========== Categories ==========

    def add_break_category(self, name: str) -> BreakCategory:
        category = BreakCategory(name=name)
        self.break_categories.append(category)
        return category

    def remove_break_category(self, category_id: str) -> bool:
        """Delete a break category and untag every team that carried it."""
        category = find_by_id(self.break_categories, category_id)
        if category is None:
            return False
        self.break_categories.remove(category)
        for team in self.teams:
            if category_id in team.break_category_ids:
                team.break_category_ids.remove(category_id)
        return True

    def add_speaker_category(self, name: str) -> SpeakerCategory:
        category = SpeakerCategory(name=name)
        self.speaker_categories.append(category)
        return category

    def remove_speaker_category(self, category_id: str) -> bool:
        """Delete a speaker category and untag every speaker that carried it."""
        category = find_by_id(self.speaker_categories, category_id)
        if category is None:
            return False
        self.speaker_categories.remove(category)
        for team in self.teams:
            for speaker in team.speakers:
                if category_id in speaker.category_ids:
                    speaker.category_ids.remove(category_id)
        return True

    # ========== Rounds ==========

    def get_round(self, round_id: str) -> Optional[Round]:
        return find_by_id(self.rounds, round_id)

    def find_pairing(self, pairing_id: str) -> Optional[Tuple[Round, Pairing]]:
        """Locate a pairing in any round.

        Returns:
            (round, pairing) for the first match, or None
        """
        for round_ in self.rounds:
            pairing = round_.find_pairing(pairing_id)
            if pairing is not None:
                return round_, pairing
        return None

    @property
    def next_round_number(self) -> int:
        return len(self.rounds) + 1

    # ========== Copying and Serialization ==========

    def copy(self) -> "Tournament":
        """Deep copy, sharing no mutable state with this tournament."""
        return copy.deepcopy(self)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize tournament to dictionary.

        Returns:
            Dictionary containing all tournament data
        """
        return {
            "id": self.id,
            "config": self.config.to_dict(),
            "teams": [t.to_dict() for t in self.teams],
            "judges": [j.to_dict() for j in self.judges],
            "rounds": [r.to_dict() for r in self.rounds],
            "break_categories": [c.to_dict() for c in self.break_categories],
            "speaker_categories": [c.to_dict() for c in self.speaker_categories],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Tournament":
        """Deserialize tournament from dictionary.

        Optional collections and counters missing from older records are
        filled with empty/zero defaults.

        Args:
            data: Dictionary containing tournament data

        Returns:
            Reconstructed Tournament object

        Raises:
            InvalidTournamentDataException: If required fields are missing
        """
        config_data = data.get("config", data)
        if "name" not in config_data:
            raise InvalidTournamentDataException("Tournament record has no name")
        for key in _REQUIRED_KEYS:
            if not isinstance(data.get(key), list):
                raise InvalidTournamentDataException(
                    f"Tournament record has no '{key}' list"
                )

        config = TournamentConfig.from_dict(config_data)
        tournament = cls(
            config=config,
            teams=[Team.from_dict(t) for t in data["teams"]],
            judges=[Judge.from_dict(j) for j in data["judges"]],
            rounds=[Round.from_dict(r, config.format) for r in data["rounds"]],
            break_categories=[
                BreakCategory.from_dict(c) for c in data.get("break_categories", [])
            ],
            speaker_categories=[
                SpeakerCategory.from_dict(c)
                for c in data.get("speaker_categories", [])
            ],
            id=data.get("id") or generate_id("Tournament"),
        )
        logger.info("Loaded tournament: %s", tournament.name)
        return tournament

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), indent=2)

    @classmethod
    def from_json(cls, text: str) -> "Tournament":
        """Parse a JSON document produced by ``to_json``.

        Raises:
            InvalidTournamentDataException: If the text is not a JSON object
                or lacks required fields
        """
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise InvalidTournamentDataException(
                f"Not a valid JSON tournament file: {e}"
            ) from e
        if not isinstance(data, dict):
            raise InvalidTournamentDataException("Tournament file must hold an object")
        return cls.from_dict(data)
