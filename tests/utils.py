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

from nmdrules.exon import Exon
from nmdrules.strings.dna_str import DnaStr
from nmdrules.transcript import ExonMap, Transcript
from nmdrules.variant import ProteinTruncatingVariant, VariantEdit

# Frameshift fixture: a T inserted after position 24 shifts the frame from
#  codon 9 (GCG to TGC), reading 43 alanine codons before a TGA stop codon
#  ending at position 159, beyond the first 150 coding bases; the next
#  in-frame ATG is 573 amino acids downstream (stop codon included)
FS_PREFIX = 'ATG' + 'AAA' * 5 + 'GCCCTG'
FS_SUFFIX = 'GC' + 'GCC' * 43 + 'TGACCC' + 'GCC' * 570 + 'ATGTAA'
FS_CDS = FS_PREFIX + FS_SUFFIX
FS_EXONS = '1:1-100;2:101-700;3:701-%d' % len(FS_CDS)
FS_HGVSP = 'p.Ala9CysfsTer45'
FS_STOP_POSITION = 159
FS_ANNOTATION = 'noncanonical_NMD_escaping:first_150bp:GCC(Ala)GCC(Ala)TGA(Stop)C:573'


def get_exon_map(*ranges: tuple[int, int]) -> ExonMap:
    return ExonMap.from_list([
        Exon(start, end, rank)
        for rank, (start, end) in enumerate(ranges, start=1)
    ])


def get_transcript(cds_seq: str, *ranges: tuple[int, int], utr_3_seq: str = '', genetic_code: int | None = None) -> Transcript:
    return Transcript.build(
        'tx',
        list(get_exon_map(*ranges).exons),
        cds_seq,
        utr_3_seq=utr_3_seq,
        genetic_code=genetic_code)


def get_variant(hgvsp: str | None, start: int | None, end: int | None, alt: str = '') -> ProteinTruncatingVariant:
    return ProteinTruncatingVariant(hgvsp, VariantEdit(start, end, alt=DnaStr(alt)))


def get_fs_transcript() -> Transcript:
    return get_transcript(FS_CDS, (1, 100), (101, 700), (701, len(FS_CDS)))


def get_fs_variant() -> ProteinTruncatingVariant:
    return get_variant(FS_HGVSP, 25, 24, 'T')
