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

from ..int_range import IntRange
from ..utils import is_iupac_dna


class DnaStr(str):
    """Upper case nucleotide sequence (IUPAC ambiguity codes allowed)"""

    def __new__(cls, s: str):
        return super().__new__(cls, s.upper())

    def __init__(self, s: str) -> None:
        if not is_iupac_dna(self):
            raise ValueError(f"Invalid DNA sequence: {s}!")
        super().__init__()

    @classmethod
    def parse(cls, s: str | None):
        return cls(s) if s else cls.empty()

    @classmethod
    def empty(cls):
        return cls('')

    def __add__(self, other) -> DnaStr:
        return DnaStr(str(self) + str(other))

    def slice(self, sl: slice) -> DnaStr:
        return DnaStr(self[sl])

    def substr(self, r: IntRange) -> DnaStr:
        """Extract a one-based inclusive range, truncated to the sequence"""

        return self.slice(r.to_slice(offset=1))

    def replace_substr(self, r: IntRange, alt: str) -> DnaStr:
        """Replace a one-based inclusive range (empty ranges insert)"""

        assert r.start >= 1 and r.end <= len(self)
        return DnaStr(f"{self[:r.start - 1]}{alt}{self[r.end:]}")

    def get_nt(self, pos: int) -> str | None:
        return self[pos - 1] if 1 <= pos <= len(self) else None

    def triplets(self) -> list[str]:
        """Complete triplets in frame zero (trailing partial codon dropped)"""

        return [self[i:i + 3] for i in range(0, len(self) - 2, 3)]
