"""Exceptions for use in Debate Tab"""

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


# ========== Base Application Exception ==========


class DebateTabException(Exception):
    """Base exception for all Debate Tab errors.

    All custom exceptions in the application should inherit from this class.
    This enables catching all application-specific errors with a single except clause.
    """

    pass


# ========== Draw Exceptions ==========


class DrawException(DebateTabException):
    """Base exception for draw generation errors."""

    pass


class InsufficientTeamsException(DrawException):
    """Raised when there are too few teams to fill a single room."""

    def __init__(self, fmt: str, team_count: int, required: int):
        self.format = fmt
        self.team_count = team_count
        self.required = required
        super().__init__(
            f"A {fmt} draw needs at least {required} teams, got {team_count}"
        )


class UnsupportedAlgorithmException(DrawException):
    """Raised when a draw is requested with an unknown algorithm."""

    pass


# ========== Ballot Exceptions ==========


class BallotException(DebateTabException):
    """Base exception for ballot recording errors."""

    pass


class InvalidBallotException(BallotException):
    """Raised when a ballot is malformed (ranks, scores or shape)."""

    pass


class PairingNotFoundException(BallotException):
    """Raised when a ballot targets a pairing that does not exist."""

    pass


# ========== Tournament Exceptions ==========


class TournamentException(DebateTabException):
    """Base exception for tournament-related errors."""

    pass


class DuplicateTeamException(TournamentException):
    """Raised when attempting to add a team whose id already exists."""

    pass


class DuplicateJudgeException(TournamentException):
    """Raised when attempting to add a judge whose id already exists."""

    pass


class InvalidTeamException(TournamentException):
    """Raised when a team does not fit the tournament format."""

    pass


class RoundNotFoundException(TournamentException):
    """Raised when a requested round does not exist."""

    pass


class InvalidTournamentDataException(TournamentException):
    """Raised when a serialized tournament is missing required fields."""

    pass


class DataInconsistencyException(TournamentException):
    """Raised in strict mode when a ballot references an unknown team."""

    pass


class UnresolvedReferenceException(TournamentException):
    """Raised in strict mode when an edit's source or target cannot be found."""

    pass
