"""Data model for a tournament round."""

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

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from debatetab.constants import STATUS_DRAFT
from debatetab.models.pairing import Pairing, pairing_from_dict
from debatetab.type_hints import RoundStatus
from debatetab.utils import generate_id
from debatetab.utils.validation import require_field


@dataclass
class Round:
    """Container for all data related to a single tournament round.

    Attributes
    ----------
    round_number : int
        Round number (1-indexed).
    id : str
        Stable identifier.
    motion : str
        The motion debated, free text.
    pairings : list of Pairing
        Rooms of the draw, in display order.
    is_silent : bool
        Hide results from display; does not affect any computation.
    status : str
        ``"draft"`` while the draw may still be edited, ``"results"`` once confirmed.
    pairing_algorithm : str or None
        Algorithm the draw was generated with, kept for audit.
    """

    round_number: int
    id: str = field(default_factory=lambda: generate_id("Round"))
    motion: str = ""
    pairings: List[Pairing] = field(default_factory=list)
    is_silent: bool = False
    status: RoundStatus = STATUS_DRAFT
    pairing_algorithm: Optional[str] = None

    @property
    def is_draft(self) -> bool:
        return self.status == STATUS_DRAFT

    @property
    def is_completed(self) -> bool:
        """Whether every room of the round has a ballot."""
        return bool(self.pairings) and all(p.is_adjudicated for p in self.pairings)

    def find_pairing(self, pairing_id: str) -> Optional[Pairing]:
        for pairing in self.pairings:
            if pairing.id == pairing_id:
                return pairing
        return None

    def pairing_index(self, pairing_id: str) -> int:
        for index, pairing in enumerate(self.pairings):
            if pairing.id == pairing_id:
                return index
        return -1

    def to_dict(self) -> Dict[str, Any]:
        """Serialize round to dictionary."""
        return {
            "id": self.id,
            "round_number": self.round_number,
            "motion": self.motion,
            "pairings": [p.to_dict() for p in self.pairings],
            "is_silent": self.is_silent,
            "status": self.status,
            "pairing_algorithm": self.pairing_algorithm,
        }

    @classmethod
    def from_dict(
        cls, data: Dict[str, Any], tournament_format: Optional[str] = None
    ) -> "Round":
        """Deserialize round from dictionary.

        ``tournament_format`` is used for pairings saved without a format tag.
        """
        return cls(
            round_number=require_field(data, "round_number", "Round"),
            id=require_field(data, "id", "Round"),
            motion=data.get("motion", ""),
            pairings=[
                pairing_from_dict(p, tournament_format)
                for p in data.get("pairings", [])
            ],
            is_silent=data.get("is_silent", False),
            status=data.get("status", STATUS_DRAFT),
            pairing_algorithm=data.get("pairing_algorithm"),
        )
