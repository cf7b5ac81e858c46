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

# --- Constants ---
# Tournament formats
FORMAT_BP = "BP"  # British Parliamentary, four teams per room
FORMAT_WSDC = "WSDC"  # World Schools, two teams per room
FORMAT_AP = "AP"  # Asian Parliamentary, two teams per room
TOURNAMENT_FORMATS = (FORMAT_BP, FORMAT_WSDC, FORMAT_AP)

FORMAT_NAMES = {
    FORMAT_BP: "British Parliamentary",
    FORMAT_WSDC: "World Schools",
    FORMAT_AP: "Asian Parliamentary",
}

# Speakers per team
SPEAKERS_PER_TEAM = {
    FORMAT_BP: 2,
    FORMAT_WSDC: 3,
    FORMAT_AP: 3,
}

# Teams needed to build a single room
TEAMS_PER_ROOM = {
    FORMAT_BP: 4,
    FORMAT_WSDC: 2,
    FORMAT_AP: 2,
}

# BP positions, in speaking order
POSITION_OG = "opening_government"
POSITION_OO = "opening_opposition"
POSITION_CG = "closing_government"
POSITION_CO = "closing_opposition"
BP_POSITIONS = (POSITION_OG, POSITION_OO, POSITION_CG, POSITION_CO)

# Two-team sides
SIDE_PROPOSITION = "proposition"
SIDE_OPPOSITION = "opposition"
TWO_TEAM_SIDES = (SIDE_PROPOSITION, SIDE_OPPOSITION)

POSITION_NAMES = {
    POSITION_OG: "Opening Government",
    POSITION_OO: "Opening Opposition",
    POSITION_CG: "Closing Government",
    POSITION_CO: "Closing Opposition",
    SIDE_PROPOSITION: "Proposition",
    SIDE_OPPOSITION: "Opposition",
}

# Draw algorithms
ALGORITHM_RANDOM = "random"
ALGORITHM_FOLD = "power-paired-fold"
ALGORITHM_SLIDE = "power-paired-slide"
DRAW_ALGORITHMS = (ALGORITHM_RANDOM, ALGORITHM_FOLD, ALGORITHM_SLIDE)
DEFAULT_ALGORITHM = ALGORITHM_FOLD

# Round statuses
STATUS_DRAFT = "draft"
STATUS_RESULTS = "results"

# BP team points awarded per rank
BP_POINTS = {1: 3, 2: 2, 3: 1, 4: 0}
BP_RANKS = (1, 2, 3, 4)

# Suffix of the virtual speaker row carrying reply speeches
REPLY_SUFFIX = "(Reply)"

DEFAULT_BREAK_AFTER_ROUND = 4
DEFAULT_TOURNAMENT_NAME = "Untitled Tournament"

# Logging
LOG_LEVEL_ENV_VAR = "DEBATETAB_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"
