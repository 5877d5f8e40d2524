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

from .constants import MET, STOP
from .errors import NoStopCodonFound
from .int_range import IntRange


@dataclass(slots=True, frozen=True)
class StopCodon:
    # Zero-based index of the stop symbol in the translated sequence
    aa_index: int

    @property
    def position(self) -> int:
        """One-based position of the last nucleotide of the stop codon"""

        return 3 * (self.aa_index + 1)

    def get_codon_range(self, codon_offset: int = 0) -> IntRange:
        """Range of the codon codon_offset codons upstream of the stop codon"""

        end = self.position - 3 * codon_offset
        return IntRange(end - 2, end)

    def get_met_distance(self, protein: str) -> int | None:
        """
        Distance in amino acids to the first methionine downstream

        The stop codon and the methionine are both counted.
        """

        met_index = protein.find(MET, self.aa_index)
        return met_index - self.aa_index + 1 if met_index != -1 else None


def locate_stop_codon(protein: str) -> StopCodon:
    aa_index = protein.find(STOP)
    if aa_index == -1:
        raise NoStopCodonFound("No stop codon found in the mutated sequence!")
    return StopCodon(aa_index)
