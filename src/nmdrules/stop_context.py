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

from .codon_table import CodonTable
from .constants import NO_FOURTH_LETTER, NO_MET
from .stop_codon import StopCodon
from .strings.dna_str import DnaStr
from .translator import translate_codon


@dataclass(slots=True, frozen=True)
class CodonInfo:
    codon: str
    aa_name: str

    def __str__(self) -> str:
        return f"{self.codon}({self.aa_name})"

    @classmethod
    def empty(cls) -> CodonInfo:
        return cls('', '')

    @classmethod
    def from_codon(cls, codon: str, codon_table: CodonTable) -> CodonInfo:
        aa = translate_codon(codon, codon_table)
        return cls(codon, codon_table.get_aa_name(aa) if aa else '')


def get_codon_info(seq: DnaStr, stop: StopCodon, codon_offset: int, codon_table: CodonTable) -> CodonInfo:
    r = stop.get_codon_range(codon_offset)
    if r.start < 1:
        return CodonInfo.empty()
    return CodonInfo.from_codon(seq.substr(r), codon_table)


@dataclass(slots=True, frozen=True)
class StopCodonContext:
    minus_2: CodonInfo
    minus_1: CodonInfo
    stop: CodonInfo
    fourth_letter: str

    # Distance in amino acids to the next methionine (stop codon included)
    met_distance: int | None

    @classmethod
    def from_seq(
        cls,
        seq: DnaStr,
        protein: str,
        stop: StopCodon,
        codon_table: CodonTable
    ) -> StopCodonContext:
        """
        Collect the context of a stop codon

        The sequence is the mutated coding sequence followed by the 3' UTR
        and the protein its translation.
        """

        return cls(
            minus_2=get_codon_info(seq, stop, 2, codon_table),
            minus_1=get_codon_info(seq, stop, 1, codon_table),
            stop=get_codon_info(seq, stop, 0, codon_table),
            fourth_letter=seq.get_nt(stop.position + 1) or NO_FOURTH_LETTER,
            met_distance=stop.get_met_distance(protein))

    @property
    def codon_context(self) -> str:
        return f"{self.minus_2}{self.minus_1}{self.stop}{self.fourth_letter}"

    @property
    def met_distance_label(self) -> str:
        return str(self.met_distance) if self.met_distance is not None else NO_MET

    def __str__(self) -> str:
        return f"{self.codon_context}:{self.met_distance_label}"
