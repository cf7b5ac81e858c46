"""Manual edits to generated draws.

Every operation edits the tournament it is given in place and reports
whether anything changed. A source or target that cannot be found is a
no-op (logged at debug level), unless strict mode is on, in which case
``UnresolvedReferenceException`` is raised. Use ``apply_edit`` to work on
a copy and keep the original for undo.
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
from dataclasses import dataclass
from typing import Any, Callable, Optional

from debatetab.constants import BP_POSITIONS
from debatetab.exceptions import UnresolvedReferenceException
from debatetab.models import Pairing, PairingBP, Round, Tournament
from debatetab.type_hints import PositionBP
from debatetab.utils import setup_logger

logger = setup_logger(__name__)


@dataclass(frozen=True)
class PairingLocation:
    """Where a pairing lives: its round and its own id."""

    round_id: str
    pairing_id: str


@dataclass(frozen=True)
class TeamSlot:
    """A BP seat: a pairing location plus a position."""

    round_id: str
    pairing_id: str
    position: PositionBP


@dataclass
class TeamLocation:
    """A resolved team seat inside a tournament."""

    round: Round
    pairing: PairingBP
    position: PositionBP


def _unresolved(draft: Tournament, strict: Optional[bool], message: str) -> bool:
    if draft.config.strict if strict is None else strict:
        logger.error(message)
        raise UnresolvedReferenceException(message)
    logger.debug("%s; edit ignored", message)
    return False


def _resolve_pairing(draft: Tournament, round_id: str, pairing_id: str):
    round_ = draft.get_round(round_id)
    if round_ is None:
        return None, None
    return round_, round_.find_pairing(pairing_id)


def find_team_location(draft: Tournament, team_id: str) -> Optional[TeamLocation]:
    """First BP seat holding ``team_id``, scanning rounds then rooms in order."""
    for round_ in draft.rounds:
        for pairing in round_.pairings:
            if not isinstance(pairing, PairingBP):
                continue
            for position in BP_POSITIONS:
                if pairing.team_at(position).id == team_id:
                    return TeamLocation(round_, pairing, position)
    return None


# ========== Team Swap ==========


def swap_team(
    draft: Tournament,
    team_id: str,
    target: TeamSlot,
    strict: Optional[bool] = None,
) -> bool:
    """Swap a dragged team with whoever sits in ``target``.

    The dragged team's current seat is the first BP seat holding it. Only
    BP rooms support team swaps.

    Returns:
        True if the swap was applied
    """
    source = find_team_location(draft, team_id)
    if source is None:
        return _unresolved(draft, strict, f"Team {team_id} is not seated in any draw")

    _, target_pairing = _resolve_pairing(draft, target.round_id, target.pairing_id)
    if not isinstance(target_pairing, PairingBP):
        return _unresolved(
            draft, strict, f"No BP pairing {target.pairing_id} in {target.round_id}"
        )
    if target.position not in BP_POSITIONS:
        return _unresolved(draft, strict, f"Unknown BP position {target.position}")

    source_team = source.pairing.team_at(source.position)
    target_team = target_pairing.team_at(target.position)
    target_pairing.set_team(target.position, source_team)
    source.pairing.set_team(source.position, target_team)

    logger.info(
        "Swapped %s (%s %s) with %s (%s %s)",
        source_team.name,
        source.pairing.room,
        source.position,
        target_team.name,
        target_pairing.room,
        target.position,
    )
    return True


# ========== Judge Move ==========


def move_judge(
    draft: Tournament,
    judge_id: str,
    target: PairingLocation,
    source: Optional[PairingLocation] = None,
    strict: Optional[bool] = None,
) -> bool:
    """Move a judge from ``source`` (None = unassigned pool) onto ``target``.

    Only the declared source loses the judge; other rooms listing the same
    judge are left alone. Dropping a judge on a room that already lists
    them does not duplicate them.

    Returns:
        True if the target's judge list now holds the judge
    """
    _, target_pairing = _resolve_pairing(draft, target.round_id, target.pairing_id)
    if target_pairing is None:
        return _unresolved(
            draft, strict, f"No pairing {target.pairing_id} in {target.round_id}"
        )

    judge = draft.get_judge(judge_id)
    if judge is None:
        return _unresolved(draft, strict, f"Unknown judge {judge_id}")

    if source == target and target_pairing.has_judge(judge_id):
        return True

    if source is not None:
        _, source_pairing = _resolve_pairing(draft, source.round_id, source.pairing_id)
        if source_pairing is not None:
            source_pairing.judges = [
                j for j in source_pairing.judges if j.id != judge_id
            ]

    if not target_pairing.has_judge(judge_id):
        target_pairing.judges.append(copy.deepcopy(judge))
        logger.info("Assigned judge %s to %s", judge.name, target_pairing.room)
    return True


# ========== Reordering ==========


def reorder_round(
    draft: Tournament,
    round_id: str,
    target_index: int,
    strict: Optional[bool] = None,
) -> bool:
    """Move a round to ``target_index`` (an index in the list before removal).

    Round numbers are not touched.
    """
    source_index = next(
        (i for i, r in enumerate(draft.rounds) if r.id == round_id), None
    )
    if source_index is None:
        return _unresolved(draft, strict, f"Unknown round {round_id}")

    round_ = draft.rounds.pop(source_index)
    if source_index < target_index:
        target_index -= 1
    target_index = max(0, min(target_index, len(draft.rounds)))
    draft.rounds.insert(target_index, round_)
    return True


def reorder_pairing(
    draft: Tournament,
    pairing_id: str,
    source_round_id: str,
    target_round_id: str,
    target_index: int,
    strict: Optional[bool] = None,
) -> bool:
    """Move a pairing within its round or into another round.

    ``target_index`` is a position in the target round's list as it was
    before the move. Nothing is changed unless both rounds and the pairing
    resolve.
    """
    source_round = draft.get_round(source_round_id)
    target_round = draft.get_round(target_round_id)
    if source_round is None or target_round is None:
        return _unresolved(
            draft, strict, f"Unknown round {source_round_id} or {target_round_id}"
        )

    source_index = source_round.pairing_index(pairing_id)
    if source_index < 0:
        return _unresolved(
            draft, strict, f"No pairing {pairing_id} in round {source_round_id}"
        )

    pairing: Pairing = source_round.pairings.pop(source_index)
    if source_round is target_round and source_index < target_index:
        target_index -= 1
    target_index = max(0, min(target_index, len(target_round.pairings)))
    target_round.pairings.insert(target_index, pairing)
    pairing.round_id = target_round.id
    return True


# ========== Copy-on-edit ==========


def apply_edit(
    tournament: Tournament,
    operation: Callable[..., bool],
    *args: Any,
    **kwargs: Any,
) -> Tournament:
    """Run ``operation`` on a deep copy and return the copy.

    ``tournament`` itself is never modified, so discarding the result undoes
    the edit.

    Example:
        >>> edited = apply_edit(t, swap_team, team_id, TeamSlot(r, p, pos))
    """
    draft = tournament.copy()
    operation(draft, *args, **kwargs)
    return draft
