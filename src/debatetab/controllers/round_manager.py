"""Round management for tournaments.

This module handles all round-related operations around the draw
generator: creating rounds, the draft/results lifecycle, and the position
bookkeeping BP draws depend on.
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

import random
from typing import List, Optional

from debatetab.constants import STATUS_RESULTS, TEAMS_PER_ROOM
from debatetab.draw import generate_draw
from debatetab.exceptions import RoundNotFoundException
from debatetab.models import Judge, PairingBP, Round, Tournament
from debatetab.utils import setup_logger

logger = setup_logger(__name__)


class RoundManager:
    """Manages round progression for one tournament.

    This class is responsible for:
    - Generating and appending new rounds
    - Recording BP seat history after each draw
    - Confirming draws and editing round metadata
    - Undoing a draft round
    """

    def __init__(self, tournament: Tournament, rng: Optional[random.Random] = None):
        """Initialize the round manager.

        Args:
            tournament: The tournament whose rounds are managed
            rng: Random source for shuffled draws
        """
        self.tournament = tournament
        self.rng = rng if rng is not None else random.Random()

    @property
    def current_round_number(self) -> int:
        """Number of the latest round, or 0 if no rounds have been created."""
        return len(self.tournament.rounds)

    @property
    def completed_rounds_count(self) -> int:
        """Number of rounds with a ballot in every room."""
        return sum(1 for round_ in self.tournament.rounds if round_.is_completed)

    def get_round(self, round_number: int) -> Optional[Round]:
        """Round by its 1-indexed position, or None if out of range."""
        if 1 <= round_number <= len(self.tournament.rounds):
            return self.tournament.rounds[round_number - 1]
        return None

    def _require_round(self, round_id: str) -> Round:
        round_ = self.tournament.get_round(round_id)
        if round_ is None:
            raise RoundNotFoundException(f"No round with id {round_id}")
        return round_

    # ========== Creation ==========

    def can_create_round(self) -> bool:
        """Whether there are enough teams to draw a single room."""
        return len(self.tournament.teams) >= TEAMS_PER_ROOM[self.tournament.format]

    def create_round(self, algorithm: Optional[str] = None) -> Round:
        """Generate the next round's draw and append it.

        Args:
            algorithm: Draw algorithm; the tournament's default if None

        Returns:
            The appended draft round

        Raises:
            InsufficientTeamsException: If there are too few teams
            UnsupportedAlgorithmException: If the algorithm is unknown
        """
        algorithm = algorithm or self.tournament.config.default_algorithm
        new_round = generate_draw(self.tournament, algorithm, rng=self.rng)
        self.tournament.rounds.append(new_round)
        self._record_positions(new_round)

        logger.info(
            "Created round %s with %s rooms",
            new_round.round_number,
            len(new_round.pairings),
        )
        return new_round

    def _record_positions(self, round_: Round) -> None:
        teams = self.tournament.teams_by_id()
        for pairing in round_.pairings:
            if not isinstance(pairing, PairingBP):
                continue
            for position, seated in pairing.slots():
                team = teams.get(seated.id)
                if team is not None:
                    team.positions_spoken.append(position)

    def undo_last_round(self) -> bool:
        """Remove the last round if it is still a draft.

        For BP the seat recorded for each team in that round is removed
        from its history.

        Returns:
            True if successful, False if no rounds or last round is confirmed
        """
        if not self.tournament.rounds:
            logger.warning("Cannot undo: no rounds exist")
            return False

        last_round = self.tournament.rounds[-1]
        if not last_round.is_draft:
            logger.warning("Cannot undo confirmed round %s", last_round.round_number)
            return False

        teams = self.tournament.teams_by_id()
        for pairing in last_round.pairings:
            if not isinstance(pairing, PairingBP):
                continue
            for seated in pairing.teams:
                team = teams.get(seated.id)
                if team is not None and team.positions_spoken:
                    team.positions_spoken.pop()

        self.tournament.rounds.pop()
        logger.info("Undid round %s", last_round.round_number)
        return True

    # ========== Lifecycle ==========

    def confirm_draw(self, round_id: str) -> Round:
        """Move a round from draft to results.

        Raises:
            RoundNotFoundException: If the round does not exist
        """
        round_ = self._require_round(round_id)
        round_.status = STATUS_RESULTS
        logger.info("Round %s draw confirmed", round_.round_number)
        return round_

    def set_motion(self, round_id: str, motion: str) -> Round:
        round_ = self._require_round(round_id)
        round_.motion = motion
        return round_

    def set_silent(self, round_id: str, is_silent: bool) -> Round:
        round_ = self._require_round(round_id)
        round_.is_silent = is_silent
        return round_

    def renumber_rounds(self) -> None:
        """Make every round's number match its position again."""
        for index, round_ in enumerate(self.tournament.rounds, start=1):
            round_.round_number = index

    # ========== Judges ==========

    def unassigned_judges(self) -> List[Judge]:
        """Judges not sitting in any room of a draft round."""
        assigned = {
            judge.id
            for round_ in self.tournament.rounds
            if round_.is_draft
            for pairing in round_.pairings
            for judge in pairing.judges
        }
        return [judge for judge in self.tournament.judges if judge.id not in assigned]
