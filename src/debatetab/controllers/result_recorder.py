"""Ballot recording and validation for tournaments.

This module handles recording ballots with proper validation and keeps the
cached team and judge counters in line with the ballots on record.
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

from typing import Dict

from debatetab.constants import TWO_TEAM_SIDES
from debatetab.exceptions import InvalidBallotException, PairingNotFoundException
from debatetab.models import (
    Ballot,
    BallotBP,
    BallotTwoTeam,
    Pairing,
    PairingBP,
    PairingTwoTeam,
    TeamResultBP,
    Tournament,
)
from debatetab.standings import compute_team_standings
from debatetab.utils import setup_logger
from debatetab.utils.validation import (
    validate_bp_ranks,
    validate_score_list,
    validate_speaker_score,
)

logger = setup_logger(__name__)


class ResultRecorder:
    """Handles recording and validating ballots.

    This class is responsible for:
    - Rejecting malformed ballots before they reach the standings engine
    - Defaulting the chair to the room's first judge
    - Refreshing team and judge counters after every change
    """

    def record_ballot(
        self, tournament: Tournament, pairing_id: str, ballot: Ballot
    ) -> Ballot:
        """Validate a ballot and attach it to its pairing.

        Args:
            tournament: The tournament holding the pairing
            pairing_id: ID of the adjudicated pairing
            ballot: The ballot to record; it is not modified

        Returns:
            The ballot as stored, with scores normalized to floats

        Raises:
            PairingNotFoundException: If no pairing has that id
            InvalidBallotException: If the ballot is malformed
        """
        located = tournament.find_pairing(pairing_id)
        if located is None:
            logger.error("Cannot record ballot: pairing %s does not exist", pairing_id)
            raise PairingNotFoundException(f"No pairing with id {pairing_id}")
        round_, pairing = located

        stored = self.validate_ballot(pairing, ballot)
        if stored.chair_judge_id is None and pairing.judges:
            stored.chair_judge_id = pairing.judges[0].id

        if pairing.ballot is not None:
            logger.warning(
                "Round %s %s already has a ballot, overwriting",
                round_.round_number,
                pairing.room,
            )
        pairing.ballot = stored
        self.refresh_counters(tournament)

        logger.info(
            "Recorded ballot for round %s %s", round_.round_number, pairing.room
        )
        return stored

    def clear_ballot(self, tournament: Tournament, pairing_id: str) -> bool:
        """Remove a pairing's ballot.

        Returns:
            True if a ballot was removed
        """
        located = tournament.find_pairing(pairing_id)
        if located is None or located[1].ballot is None:
            return False
        located[1].ballot = None
        self.refresh_counters(tournament)
        return True

    # ========== Validation ==========

    def validate_ballot(self, pairing: Pairing, ballot: Ballot) -> Ballot:
        """Check a ballot against its pairing.

        Returns:
            A new ballot with scores as floats

        Raises:
            InvalidBallotException: If the ballot is malformed or of the
                wrong shape for the pairing
        """
        if isinstance(pairing, PairingBP):
            if not isinstance(ballot, BallotBP):
                raise InvalidBallotException("A BP room needs a BP ballot")
            return self._validate_bp(pairing, ballot)
        if isinstance(pairing, PairingTwoTeam):
            if not isinstance(ballot, BallotTwoTeam):
                raise InvalidBallotException(
                    f"A {pairing.format} room needs a two-team ballot"
                )
            return self._validate_two_team(pairing, ballot)
        raise InvalidBallotException(f"Unknown pairing type: {type(pairing).__name__}")

    def _validate_bp(self, pairing: PairingBP, ballot: BallotBP) -> BallotBP:
        rank_check = validate_bp_ranks([r.rank for r in ballot.ranks])
        if not rank_check:
            raise InvalidBallotException(rank_check.error_message)

        room_teams = {team.id: team for team in pairing.teams}
        ballot_team_ids = [r.team_id for r in ballot.ranks]
        if sorted(ballot_team_ids) != sorted(room_teams):
            raise InvalidBallotException(
                "A BP ballot must rank each team of the room exactly once"
            )

        results = []
        for result in ballot.ranks:
            team = room_teams[result.team_id]
            scores = validate_score_list(
                result.speaker_points, len(team.speakers), f"Scores for {team.name}"
            )
            if not scores:
                raise InvalidBallotException(scores.error_message)
            results.append(
                TeamResultBP(
                    team_id=result.team_id,
                    rank=int(result.rank),
                    speaker_points=scores.sanitized_value,
                )
            )
        return BallotBP(ranks=results, chair_judge_id=ballot.chair_judge_id)

    def _validate_two_team(
        self, pairing: PairingTwoTeam, ballot: BallotTwoTeam
    ) -> BallotTwoTeam:
        if ballot.winner not in TWO_TEAM_SIDES:
            raise InvalidBallotException(f"Unknown winning side: {ballot.winner!r}")

        cleaned: Dict[str, object] = {}
        for side, team in pairing.slots():
            scores = validate_score_list(
                ballot.scores_for(side), len(team.speakers), f"{side} scores"
            )
            if not scores:
                raise InvalidBallotException(scores.error_message)
            reply = validate_speaker_score(ballot.reply_for(side))
            if not reply:
                raise InvalidBallotException(f"{side} reply: {reply.error_message}")
            cleaned[f"{side}_scores"] = scores.sanitized_value
            cleaned[f"{side}_reply"] = reply.sanitized_value

        return BallotTwoTeam(
            winner=ballot.winner, chair_judge_id=ballot.chair_judge_id, **cleaned
        )

    # ========== Counters ==========

    def refresh_counters(self, tournament: Tournament) -> None:
        """Recompute cached team and judge counters from the ballots."""
        for standing in compute_team_standings(tournament):
            team = standing.team
            team.wins = standing.wins
            team.team_points = standing.team_points
            team.total_speaker_points = standing.total_speaker_points

        judged: Dict[str, int] = {}
        for round_ in tournament.rounds:
            for pairing in round_.pairings:
                if pairing.ballot is None:
                    continue
                for judge in pairing.judges:
                    judged[judge.id] = judged.get(judge.id, 0) + 1
        for judge in tournament.judges:
            judge.rounds_judged = judged.get(judge.id, 0)
