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

from dataclasses import dataclass
from typing import Any, Dict

from debatetab.constants import (
    DEFAULT_ALGORITHM,
    DEFAULT_BREAK_AFTER_ROUND,
    DEFAULT_TOURNAMENT_NAME,
    FORMAT_BP,
    TOURNAMENT_FORMATS,
)
from debatetab.exceptions import InvalidTournamentDataException
from debatetab.type_hints import PairingAlgorithm, TournamentFormat


@dataclass
class TournamentConfig:
    """Tournament configuration settings.

    Attributes
    ----------
    name : str
        Tournament name.
    format : str
        One of ``"BP"``, ``"WSDC"`` or ``"AP"``. Fixed for the tournament's life.
    break_after_round : int
        Last preliminary round before the break.
    default_algorithm : str
        Draw algorithm offered by default when creating a round.
    strict : bool
        Raise on dangling references in standings and draw edits instead of
        skipping them.
    """

    name: str = DEFAULT_TOURNAMENT_NAME
    format: TournamentFormat = FORMAT_BP
    break_after_round: int = DEFAULT_BREAK_AFTER_ROUND
    default_algorithm: PairingAlgorithm = DEFAULT_ALGORITHM
    strict: bool = False

    def __post_init__(self) -> None:
        if self.format not in TOURNAMENT_FORMATS:
            raise InvalidTournamentDataException(
                f"Unknown tournament format: {self.format!r}"
            )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize configuration to dictionary."""
        return {
            "name": self.name,
            "format": self.format,
            "break_after_round": self.break_after_round,
            "default_algorithm": self.default_algorithm,
            "strict": self.strict,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TournamentConfig":
        """Deserialize configuration from dictionary."""
        return cls(
            name=data.get("name", DEFAULT_TOURNAMENT_NAME),
            format=data.get("format", FORMAT_BP),
            break_after_round=data.get("break_after_round", DEFAULT_BREAK_AFTER_ROUND),
            default_algorithm=data.get("default_algorithm", DEFAULT_ALGORITHM),
            strict=data.get("strict", False),
        )
