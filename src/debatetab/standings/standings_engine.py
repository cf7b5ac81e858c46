"""Team and speaker standings for debate tournaments.

This module reduces a tournament's rounds and ballots into ranked tables.
Everything here is a pure function of the tournament record: nothing is
written back, and the same record always yields the same tables.

Ballots are trusted. Ranks and scores are validated when a ballot is
recorded (see ``ResultRecorder``); handing this module a malformed ballot
produces a malformed table rather than an error.
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

import statistics
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from debatetab.constants import BP_POINTS, REPLY_SUFFIX
from debatetab.exceptions import DataInconsistencyException
from debatetab.models import PairingBP, PairingTwoTeam, Team, Tournament
from debatetab.utils import setup_logger

logger = setup_logger(__name__)


@dataclass
class TeamStanding:
    """One row of the team tab.

    ``team_points`` and ``std_dev`` are only meaningful for BP, ``wins``
    only for the two-team formats; the unused ones are reported as zero.
    """

    team: Team
    team_points: int = 0
    wins: int = 0
    total_speaker_points: float = 0.0
    std_dev: float = 0.0
    speaker_scores: List[float] = field(default_factory=list)

    @property
    def team_id(self) -> str:
        return self.team.id

    @property
    def name(self) -> str:
        return self.team.name


@dataclass
class SpeakerStanding:
    """One row of the speaker tab."""

    name: str
    team_name: str
    team_id: str
    scores: List[float] = field(default_factory=list)
    total: float = 0.0
    average: float = 0.0


@dataclass
class _TeamTally:
    team_points: int = 0
    wins: int = 0
    scores: List[float] = field(default_factory=list)


def calculate_mean(numbers: List[float]) -> float:
    """Arithmetic mean, 0 for an empty list."""
    if not numbers:
        return 0.0
    return statistics.fmean(numbers)


def calculate_std_dev(numbers: List[float]) -> float:
    """Population standard deviation, 0 for fewer than two values."""
    if len(numbers) < 2:
        return 0.0
    return statistics.pstdev(numbers)


class StandingsEngine:
    """Computes team and speaker standings.

    BP teams rank by team points (3/2/1/0 for 1st to 4th), then total
    speaker points, then lower standard deviation of speaker scores.
    WSDC/AP teams rank by wins, then total speaker points (replies
    included).

    In the default tolerant mode a ballot naming a team that is no longer
    in the tournament is skipped for that statistic. In strict mode it
    raises ``DataInconsistencyException``.
    """

    def __init__(self, strict: bool = False):
        self.strict = strict

    # ========== Team Standings ==========

    def compute_team_standings(self, tournament: Tournament) -> List[TeamStanding]:
        """Rank every team of the tournament, best first.

        Args:
            tournament: The tournament to tabulate

        Returns:
            One TeamStanding per team in ``tournament.teams``
        """
        if tournament.is_bp:
            return self._team_standings_bp(tournament)
        return self._team_standings_two_team(tournament)

    def _team_standings_bp(self, tournament: Tournament) -> List[TeamStanding]:
        tallies = {team.id: _TeamTally() for team in tournament.teams}

        for round_ in tournament.rounds:
            for pairing in round_.pairings:
                if not isinstance(pairing, PairingBP) or pairing.ballot is None:
                    continue
                for result in pairing.ballot.ranks:
                    tally = self._tally_for(
                        tallies, result.team_id, round_.round_number
                    )
                    if tally is None:
                        continue
                    tally.team_points += BP_POINTS[result.rank]
                    tally.scores.extend(result.speaker_points)

        standings = []
        for team in tournament.teams:
            tally = tallies[team.id]
            standings.append(
                TeamStanding(
                    team=team,
                    team_points=tally.team_points,
                    total_speaker_points=sum(tally.scores),
                    std_dev=calculate_std_dev(tally.scores),
                    speaker_scores=tally.scores,
                )
            )

        standings.sort(
            key=lambda s: (-s.team_points, -s.total_speaker_points, s.std_dev)
        )
        return standings

    def _team_standings_two_team(self, tournament: Tournament) -> List[TeamStanding]:
        tallies = {team.id: _TeamTally() for team in tournament.teams}

        for round_ in tournament.rounds:
            for pairing in round_.pairings:
                if not isinstance(pairing, PairingTwoTeam) or pairing.ballot is None:
                    continue
                ballot = pairing.ballot

                winner = pairing.winner_team()
                if winner is not None:
                    tally = self._tally_for(tallies, winner.id, round_.round_number)
                    if tally is not None:
                        tally.wins += 1

                for side, team in pairing.slots():
                    tally = self._tally_for(tallies, team.id, round_.round_number)
                    if tally is None:
                        continue
                    tally.scores.extend(ballot.scores_for(side))
                    tally.scores.append(ballot.reply_for(side))

        standings = []
        for team in tournament.teams:
            tally = tallies[team.id]
            standings.append(
                TeamStanding(
                    team=team,
                    wins=tally.wins,
                    total_speaker_points=sum(tally.scores),
                    speaker_scores=tally.scores,
                )
            )

        standings.sort(key=lambda s: (-s.wins, -s.total_speaker_points))
        return standings

    def _tally_for(
        self, tallies: Dict[str, _TeamTally], team_id: str, round_number: int
    ) -> Optional[_TeamTally]:
        tally = tallies.get(team_id)
        if tally is None:
            self._missing_team(team_id, round_number)
        return tally

    # ========== Speaker Standings ==========

    def compute_speaker_standings(
        self, tournament: Tournament
    ) -> List[SpeakerStanding]:
        """Rank every speaker who appears on a ballot, best first.

        Rows are keyed by (team id, speaker name). WSDC/AP teams also get
        a virtual "<first speaker> (Reply)" row holding their reply scores.
        Scores are appended in round order.
        """
        rows: Dict[Tuple[str, str], SpeakerStanding] = {}
        teams = tournament.teams_by_id()

        def add_score(team: Team, speaker_name: str, score: float) -> None:
            key = (team.id, speaker_name)
            row = rows.get(key)
            if row is None:
                row = SpeakerStanding(
                    name=speaker_name, team_name=team.name, team_id=team.id
                )
                rows[key] = row
            row.scores.append(score)

        for round_ in tournament.rounds:
            for pairing in round_.pairings:
                if pairing.ballot is None:
                    continue

                if isinstance(pairing, PairingBP):
                    for result in pairing.ballot.ranks:
                        team = teams.get(result.team_id)
                        if team is None:
                            self._missing_team(result.team_id, round_.round_number)
                            continue
                        for speaker, score in zip(team.speakers, result.speaker_points):
                            add_score(team, speaker.name, score)
                else:
                    for side, team in pairing.slots():
                        if team.id not in teams:
                            self._missing_team(team.id, round_.round_number)
                            continue
                        scores = pairing.ballot.scores_for(side)
                        for speaker, score in zip(team.speakers, scores):
                            add_score(team, speaker.name, score)
                        add_score(
                            team, reply_row_name(team), pairing.ballot.reply_for(side)
                        )

        standings = list(rows.values())
        for row in standings:
            row.total = sum(row.scores)
            row.average = calculate_mean(row.scores)

        standings.sort(key=lambda s: (-s.total, -s.average))
        return standings

    def _missing_team(self, team_id: str, round_number: int) -> None:
        message = f"Round {round_number} ballot references unknown team {team_id}"
        if self.strict:
            logger.error(message)
            raise DataInconsistencyException(message)
        logger.debug("%s; skipped", message)


def reply_row_name(team: Team) -> str:
    """Name of the virtual speaker row holding a team's reply scores."""
    if team.speakers:
        return f"{team.speakers[0].name} {REPLY_SUFFIX}"
    return REPLY_SUFFIX


# ========== Module-level API ==========


def _engine_for(tournament: Tournament, strict: Optional[bool]) -> StandingsEngine:
    return StandingsEngine(tournament.config.strict if strict is None else strict)


def compute_team_standings(
    tournament: Tournament, strict: Optional[bool] = None
) -> List[TeamStanding]:
    """Team tab, best first. ``strict`` defaults to the tournament config."""
    return _engine_for(tournament, strict).compute_team_standings(tournament)


def compute_speaker_standings(
    tournament: Tournament, strict: Optional[bool] = None
) -> List[SpeakerStanding]:
    """Speaker tab, best first. ``strict`` defaults to the tournament config."""
    return _engine_for(tournament, strict).compute_speaker_standings(tournament)


def team_rank_lookup(tournament: Tournament) -> Dict[str, int]:
    """Map each team id to its 1-based position in the team tab."""
    return {
        standing.team_id: rank
        for rank, standing in enumerate(compute_team_standings(tournament), start=1)
    }


def breaking_teams(
    tournament: Tournament, count: int, category_id: Optional[str] = None
) -> List[TeamStanding]:
    """Top ``count`` teams of the tab, optionally within one break category.

    Only selects the teams; building the elimination bracket is not done here.
    """
    standings = compute_team_standings(tournament)
    if category_id is not None:
        standings = [s for s in standings if category_id in s.team.break_category_ids]
    return standings[: max(count, 0)]
