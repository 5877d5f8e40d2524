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

from contextlib import nullcontext

import pytest

from nmdrules.errors import InvalidTranscript
from nmdrules.exon import Exon
from nmdrules.transcript import ExonMap, Transcript

from .utils import get_exon_map


@pytest.mark.parametrize('start,end,rank,valid', [
    (1, 100, 1, True),
    (-20, 10, 1, True),
    (5, 5, 2, True),
    (10, 9, 1, False),
    (1, 100, 0, False)
])
def test_exon_init(start, end, rank, valid):
    with pytest.raises(ValueError) if not valid else nullcontext():
        Exon(start, end, rank)


@pytest.mark.parametrize('cdna_start,cdna_end,offset,exp', [
    (1, 100, 0, (1, 100)),
    (1, 100, 51, (-50, 49)),
    (101, 250, 51, (50, 199)),
    (52, 300, 51, (1, 249)),
    (52, 300, 52, (0, 248))
])
def test_exon_from_cdna(cdna_start, cdna_end, offset, exp):
    exon = Exon.from_cdna(3, cdna_start, cdna_end, offset)
    assert exon.to_tuple() == exp
    assert exon.rank == 3
    assert exon.length == cdna_end - cdna_start + 1


def test_exon_map_single_exon():
    exon_map = get_exon_map((1, 300))
    assert exon_map.exon_count == 1
    assert exon_map.intron_count == 0
    assert exon_map.last_exon == Exon(1, 300, 1)
    assert exon_map.penultimate_exon is None


def test_exon_map_sorted_by_rank():
    exon_map = ExonMap.from_list([
        Exon(201, 400, 3),
        Exon(1, 100, 1),
        Exon(101, 200, 2)
    ])
    assert [exon.rank for exon in exon_map.exons] == [1, 2, 3]
    assert exon_map.intron_count == 2
    assert exon_map.last_exon.rank == 3
    assert exon_map.penultimate_exon == Exon(101, 200, 2)


@pytest.mark.parametrize('pos,exp_rank', [
    (-5, None),
    (1, 1),
    (100, 1),
    (101, 2),
    (400, 3),
    (401, None)
])
def test_exon_map_get_exon_at(pos, exp_rank):
    exon_map = get_exon_map((1, 100), (101, 200), (201, 400))
    exon = exon_map.get_exon_at(pos)
    assert (exon.rank if exon else None) == exp_rank


@pytest.mark.parametrize('exons', [
    [],
    [Exon(1, 100, 1), Exon(101, 200, 1)]
])
def test_exon_map_invalid(exons):
    with pytest.raises(InvalidTranscript):
        ExonMap.from_list(exons)


@pytest.mark.parametrize('cds_seq,utr_3_seq,valid', [
    ('ATGTAA', None, True),
    ('atgtaa', 'ccn', True),
    ('ATGTAA', '', True),
    ('ATGXTAA', None, False),
    ('ATGTAA', 'C C', False)
])
def test_transcript_build(cds_seq, utr_3_seq, valid):
    with pytest.raises(InvalidTranscript) if not valid else nullcontext():
        transcript = Transcript.build('tx', [Exon(1, 6, 1)], cds_seq, utr_3_seq=utr_3_seq)
        assert transcript.cds_seq == cds_seq.upper()
        assert transcript.genetic_code is None
        assert transcript.is_intronless
