"""Draw generation for British Parliamentary and two-team formats."""

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
import math
import random
from itertools import permutations
from typing import List, Optional, Sequence

from debatetab.constants import (
    ALGORITHM_RANDOM,
    ALGORITHM_SLIDE,
    BP_POSITIONS,
    DRAW_ALGORITHMS,
    STATUS_DRAFT,
    TEAMS_PER_ROOM,
)
from debatetab.exceptions import (
    InsufficientTeamsException,
    UnsupportedAlgorithmException,
)
from debatetab.models import PairingBP, PairingTwoTeam, Round, Team, Tournament
from debatetab.standings import compute_team_standings
from debatetab.type_hints import PairingAlgorithm
from debatetab.utils import generate_id, setup_logger

logger = setup_logger(__name__)


def room_label(index: int) -> str:
    """Display label of the ``index``-th room (0-based)."""
    return f"Room {index + 1}"


# ========== Team Ordering ==========


def shuffle_teams(teams: Sequence[Team], rng: random.Random) -> List[Team]:
    """Uniformly shuffled copy of ``teams`` (Fisher-Yates, via ``rng``)."""
    shuffled = list(teams)
    rng.shuffle(shuffled)
    return shuffled


def ranked_teams(tournament: Tournament) -> List[Team]:
    """Teams ordered by the current team standings, best first."""
    teams = tournament.teams_by_id()
    return [
        teams[standing.team_id]
        for standing in compute_team_standings(tournament)
        if standing.team_id in teams
    ]


def fold_order(ranked: Sequence[Team]) -> List[Team]:
    """Interleave the top half with the reversed bottom half.

    Consecutive pairs of the result are 1 v N, 2 v N-1, and so on. With an
    odd count the top half is one longer and its last team ends up unpaired.
    """
    half = math.ceil(len(ranked) / 2)
    top = list(ranked[:half])
    bottom = list(reversed(ranked[half:]))

    ordered = []
    for index, team in enumerate(top):
        ordered.append(team)
        if index < len(bottom):
            ordered.append(bottom[index])
    return ordered


# ========== BP Position Optimization ==========


def position_score(ordering: Sequence[Team]) -> int:
    """Cost of seating ``ordering`` in OG, OO, CG, CO order.

    Each team adds 1 + the index of the most recent round it held that
    seat, or 0 if it never has. Lower is better.
    """
    return sum(
        team.last_index_of_position(position) + 1
        for team, position in zip(ordering, BP_POSITIONS)
    )


def assign_bp_positions(room_teams: Sequence[Team]) -> List[Team]:
    """Seat four teams to spread position exposure across their history.

    All 24 orderings are tried in lexicographic order of the input slice;
    the first one with the minimum score wins.

    Args:
        room_teams: Exactly four teams

    Returns:
        The teams in OG, OO, CG, CO order
    """
    if len(room_teams) != len(BP_POSITIONS):
        raise ValueError(f"A BP room needs 4 teams, got {len(room_teams)}")

    best = list(room_teams)
    best_score = math.inf
    for ordering in permutations(room_teams):
        score = position_score(ordering)
        if score < best_score:
            best_score = score
            best = list(ordering)
    return best


# ========== Room Assembly ==========


def build_bp_pairings(
    teams: Sequence[Team], round_id: str, optimize_positions: bool
) -> List[PairingBP]:
    """Cut ``teams`` into consecutive rooms of four; leftovers sit out."""
    pairings = []
    for index in range(len(teams) // 4):
        room_teams = list(teams[index * 4 : index * 4 + 4])
        if optimize_positions:
            room_teams = assign_bp_positions(room_teams)
        seats = {
            position: copy.deepcopy(team)
            for position, team in zip(BP_POSITIONS, room_teams)
        }
        pairings.append(
            PairingBP(**seats, round_id=round_id, room=room_label(index))
        )
    return pairings


def build_two_team_pairings(
    teams: Sequence[Team], round_id: str, fmt: str
) -> List[PairingTwoTeam]:
    """Cut ``teams`` into consecutive pairs; first is proposition."""
    pairings = []
    for index in range(len(teams) // 2):
        proposition, opposition = teams[index * 2], teams[index * 2 + 1]
        pairings.append(
            PairingTwoTeam(
                proposition=copy.deepcopy(proposition),
                opposition=copy.deepcopy(opposition),
                format=fmt,
                round_id=round_id,
                room=room_label(index),
            )
        )
    return pairings


# ========== Draw Generation ==========


def generate_draw(
    tournament: Tournament,
    algorithm: PairingAlgorithm,
    rng: Optional[random.Random] = None,
) -> Round:
    """Produce a draft round for the tournament's next round number.

    The first round, and every ``random`` round, is drawn from a shuffle.
    Later power-paired rounds start from the current team standings. BP
    power-paired rooms are seated by ``assign_bp_positions``; two-team
    ``power-paired-fold`` pairs high against low and
    ``power-paired-slide`` pairs adjacent ranks.

    The tournament is not modified; the caller appends the round and, for
    BP, records each team's seat in its ``positions_spoken``.

    Args:
        tournament: The tournament to draw for
        algorithm: ``random``, ``power-paired-fold`` or ``power-paired-slide``
        rng: Random source for shuffling; a fresh ``random.Random`` if None

    Returns:
        The new round, with status ``draft`` and empty judge lists

    Raises:
        UnsupportedAlgorithmException: If ``algorithm`` is unknown
        InsufficientTeamsException: If the teams cannot fill one room
    """
    if algorithm not in DRAW_ALGORITHMS:
        raise UnsupportedAlgorithmException(
            f"Draw algorithm '{algorithm}' is not implemented"
        )

    required = TEAMS_PER_ROOM[tournament.format]
    if len(tournament.teams) < required:
        logger.error(
            "Cannot draw %s round with %s teams",
            tournament.format,
            len(tournament.teams),
        )
        raise InsufficientTeamsException(
            tournament.format, len(tournament.teams), required
        )

    rng = rng if rng is not None else random.Random()
    round_number = tournament.next_round_number
    round_id = generate_id("Round")
    is_ranked = round_number > 1 and algorithm != ALGORITHM_RANDOM

    if is_ranked:
        ordered = ranked_teams(tournament)
    else:
        ordered = shuffle_teams(tournament.teams, rng)

    if tournament.is_bp:
        # Slide is not a true BP slide: it seats teams within the same
        # pre-cut brackets of four as fold does.
        pairings = build_bp_pairings(
            ordered, round_id, optimize_positions=algorithm != ALGORITHM_RANDOM
        )
    else:
        if is_ranked and algorithm != ALGORITHM_SLIDE:
            ordered = fold_order(ordered)
        pairings = build_two_team_pairings(ordered, round_id, tournament.format)

    dropped = len(ordered) - len(pairings) * required
    logger.info(
        "Generated %s draw for round %s: %s rooms (%s), %s team(s) left out",
        tournament.format,
        round_number,
        len(pairings),
        algorithm,
        dropped,
    )

    return Round(
        round_number=round_number,
        id=round_id,
        motion="",
        pairings=pairings,
        is_silent=False,
        status=STATUS_DRAFT,
        pairing_algorithm=algorithm,
    )
