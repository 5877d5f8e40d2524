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

from .codon_table import CodonTable
from .strings.dna_str import DnaStr


def translate(seq: DnaStr, codon_table: CodonTable) -> str:
    """
    Translate a sequence in frame zero

    A trailing partial codon is not translated; codons that do not resolve
    to exactly one entry of the table are translated to the unknown residue.
    """

    return ''.join(map(codon_table.translate, seq.triplets()))


def translate_codon(codon: str, codon_table: CodonTable) -> str:
    return codon_table.translate(codon) if len(codon) == 3 else ''
