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

from Bio.Data.CodonTable import unambiguous_dna_by_id
from Bio.Data.IUPACData import protein_letters_1to3

from .codon_table_row import CodonTableRow
from .constants import STOP, STOP_NAME, UNKNOWN_AA
from .errors import UnknownGeneticCode
from .strings.codon import Codon
from .strings.translation_symbol import TranslationSymbol
from .utils import has_duplicates

CodonToTransl = dict[str, TranslationSymbol]

AA_NAMES: dict[str, str] = {
    **protein_letters_1to3,
    STOP: STOP_NAME
}

UNKNOWN_SYMBOL = TranslationSymbol(UNKNOWN_AA)


def get_ncbi_rows(table_id: int) -> list[CodonTableRow]:
    try:
        ncbi_table = unambiguous_dna_by_id[table_id]
    except KeyError:
        raise UnknownGeneticCode(table_id)

    # Codons that may be read either as stop or sense keep the sense reading
    return [
        *[
            CodonTableRow(Codon(codon), TranslationSymbol(aa))
            for codon, aa in ncbi_table.forward_table.items()
        ],
        *[
            CodonTableRow(Codon(codon), TranslationSymbol(STOP))
            for codon in ncbi_table.stop_codons
            if codon not in ncbi_table.forward_table
        ]
    ]


def get_genetic_code_ids() -> list[int]:
    return sorted(unambiguous_dna_by_id.keys())


@dataclass(slots=True, frozen=True)
class CodonTable:
    table_id: int | None
    codon_to_aa: CodonToTransl

    @classmethod
    def from_list(cls, rows: list[CodonTableRow], table_id: int | None = None) -> CodonTable:
        if has_duplicates([r.codon for r in rows]):
            raise ValueError("Duplicate codons in codon table!")

        return cls(table_id, {r.codon: r.aa for r in rows})

    @classmethod
    def from_ncbi(cls, table_id: int) -> CodonTable:
        return cls.from_list(get_ncbi_rows(table_id), table_id=table_id)

    @property
    def stop_codons(self) -> list[str]:
        return sorted(
            codon
            for codon, aa in self.codon_to_aa.items()
            if aa.is_stop
        )

    @property
    def amino_acid_symbols(self) -> list[str]:
        return sorted(set(self.codon_to_aa.values()))

    def translate(self, codon: str) -> TranslationSymbol:
        """Translate a triplet, mapping unresolved codons to the unknown residue"""

        return self.codon_to_aa.get(codon.upper(), UNKNOWN_SYMBOL)

    def get_aa_name(self, aa: str) -> str:
        return AA_NAMES.get(aa, '')
