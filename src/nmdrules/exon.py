########## LICENCE ##########
# nmdrules
# Copyright (C) 2024 Genome Research Ltd
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as
# published by the Free Software Foundation, either version 3 of the
# License, or (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU Affero General Public License for more details.
#
# You should have received a copy of the GNU Affero General Public License
# along with this program.  If not, see <https://www.gnu.org/licenses/>.
#############################

from __future__ import annotations

from dataclasses import dataclass

from .int_range import IntRange


@dataclass(slots=True, frozen=True)
class Exon(IntRange):
    """Exon span in coding sequence coordinates, ranked 5' to 3' along the transcript"""

    rank: int

    def __post_init__(self) -> None:
        if self.end < self.start:
            raise ValueError(f"Invalid exon range [{self.start}, {self.end}]!")
        if self.rank < 1:
            raise ValueError(f"Invalid exon rank: {self.rank}!")

    def __repr__(self) -> str:
        return f"EX{self.rank}[{self.start}, {self.end}]"

    @property
    def length(self) -> int:
        return len(self)

    @classmethod
    def from_cdna(cls, rank: int, cdna_start: int, cdna_end: int, coding_offset: int) -> Exon:
        """
        Convert transcript (cDNA) coordinates by subtracting the coding start offset

        Pass the cDNA position of the first coding base minus one as the
        offset for that base to map to coding sequence position 1, the frame
        in which stop codon positions are reported. Passing the cDNA coding
        start itself yields positions shifted back by one.
        """

        return cls(cdna_start - coding_offset, cdna_end - coding_offset, rank)
