"""Draw generation and manual draw edits."""

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

from debatetab.draw.draw_generator import assign_bp_positions, generate_draw
from debatetab.draw.draw_mutator import (
    PairingLocation,
    TeamSlot,
    apply_edit,
    find_team_location,
    move_judge,
    reorder_pairing,
    reorder_round,
    swap_team,
)

__all__ = [
    "PairingLocation",
    "TeamSlot",
    "apply_edit",
    "assign_bp_positions",
    "find_team_location",
    "generate_draw",
    "move_judge",
    "reorder_pairing",
    "reorder_round",
    "swap_team",
]
