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

from .errors import UnresolvableEdit
from .hgvs import is_annotatable_hgvsp
from .int_range import IntRange
from .strings.dna_str import DnaStr


@dataclass(slots=True, frozen=True)
class VariantEdit:
    """
    Edit of a coding sequence

    Positions are one-based and inclusive; a pure insertion is represented
    by an empty range (end = start - 1) and a pure deletion by an empty
    alternate sequence.
    """

    cds_start: int | None
    cds_end: int | None
    alt: DnaStr = DnaStr.empty()

    @property
    def is_resolved(self) -> bool:
        return self.cds_start is not None and self.cds_end is not None

    @property
    def ref_length(self) -> int:
        return len(self.get_range())

    def get_range(self) -> IntRange:
        if self.cds_start is None or self.cds_end is None:
            raise UnresolvableEdit("Undefined coding sequence coordinates!")
        try:
            return IntRange(self.cds_start, self.cds_end)
        except ValueError:
            raise UnresolvableEdit(
                f"Invalid coding sequence coordinates: {self.cds_start}-{self.cds_end}!")

    def get_length_delta(self) -> int:
        return len(self.alt) - self.ref_length


def apply_edit(seq: DnaStr, edit: VariantEdit) -> DnaStr:
    r = edit.get_range()
    if r.start < 1 or r.end > len(seq):
        raise UnresolvableEdit(
            f"Edit {r.start}-{r.end} out of the coding sequence range (1-{len(seq)})!")

    return seq.replace_substr(r, edit.alt)


def get_mutated_sequence(cds_seq: DnaStr, utr_3_seq: DnaStr, edit: VariantEdit) -> DnaStr:
    """Apply the edit to the coding sequence and append the 3' UTR"""

    return apply_edit(cds_seq, edit) + utr_3_seq


@dataclass(slots=True, frozen=True)
class ProteinTruncatingVariant:
    hgvsp: str | None
    edit: VariantEdit

    @property
    def is_annotatable(self) -> bool:
        return is_annotatable_hgvsp(self.hgvsp) and self.edit.is_resolved
