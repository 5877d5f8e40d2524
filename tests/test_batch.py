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

import pandas as pd
import pytest

from nmdrules.batch import OUTPUT_FIELDS, RECORD_FIELDS, AnnotationRecord, annotate_file, annotate_records, load_records
from nmdrules.config import AnnotatorConfig

from .utils import FS_ANNOTATION, FS_CDS, FS_EXONS, FS_HGVSP

config = AnnotatorConfig()

rows = [
    ['fs', FS_CDS, '', '', FS_EXONS, FS_HGVSP, '25', '24', 'T'],
    ['syn', FS_CDS, '', '1', FS_EXONS, 'p.Ter811=', '25', '24', 'T'],
    ['nocoord', FS_CDS, '', '', FS_EXONS, FS_HGVSP, '', '', 'T'],
    ['nostop', 'ATGAAAAAA', 'CC', '', '1:1-9', 'p.Lys2Ter', '4', '4', 'A'],
    ['badexon', 'ATGTAA', '', '', '1:1_6', 'p.Lys2Ter', '4', '4', 'A']
]


def write_tsv(fp, rows, header=RECORD_FIELDS):
    fp.write_text('\n'.join('\t'.join(r) for r in [header, *rows]) + '\n')


@pytest.mark.parametrize('exons,valid', [
    ('1:1-100;2:101-200', True),
    ('1:-50-100; 2:101-200;', True),
    ('1:1-100,2:101-200', False),
    ('', False)
])
def test_annotation_record_from_row(exons, valid):
    row = ['tx', 'ATGTAA', '', '', exons, 'p.Lys2Ter', '4', '6', 'TAA']
    if valid:
        record = AnnotationRecord.from_row(row)
        assert record.transcript.exon_map.exon_count == 2
        assert record.variant.edit.alt == 'TAA'
    else:
        with pytest.raises(ValueError):
            AnnotationRecord.from_row(row)


def test_load_records(tmp_path):
    fp = tmp_path / 'input.tsv'
    write_tsv(fp, rows)
    records = list(load_records(str(fp)))

    # The record with invalid exons is skipped
    assert [r.record_id for r in records] == ['fs', 'syn', 'nocoord', 'nostop']
    assert records[1].transcript.genetic_code == 1
    assert records[2].variant.edit.cds_start is None


def test_load_records_invalid_header(tmp_path):
    fp = tmp_path / 'input.tsv'
    write_tsv(fp, rows, header=RECORD_FIELDS[:-1])
    with pytest.raises(ValueError):
        list(load_records(str(fp)))


def test_annotate_records(tmp_path):
    fp = tmp_path / 'input.tsv'
    write_tsv(fp, rows)
    df = annotate_records(load_records(str(fp)), config)

    assert list(df.columns) == OUTPUT_FIELDS
    assert df.id.tolist() == ['fs', 'syn', 'nocoord', 'nostop']
    assert df.annotation.tolist() == [FS_ANNOTATION, '', '', '']
    assert df.nmd_prediction.tolist()[0] == 'noncanonical_NMD_escaping'
    assert df.rule.tolist()[0] == 'first_150bp'


def test_annotate_file(tmp_path):
    input_fp = tmp_path / 'input.tsv'
    output_fp = tmp_path / 'output.tsv'
    write_tsv(input_fp, rows[:2])

    annotate_file(str(input_fp), str(output_fp), config)

    df = pd.read_csv(output_fp, sep='\t', keep_default_na=False)
    assert df.annotation.tolist() == [FS_ANNOTATION, '']
