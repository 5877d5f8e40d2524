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

"""
Batch annotation of (transcript, variant) records from a TSV file
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Generator, Iterable

import pandas as pd

from .annotation import get_nmd_annotation
from .codon_table import CodonTable
from .config import AnnotatorConfig
from .errors import InvalidTranscript, NoStopCodonFound, UnknownGeneticCode, UnresolvableEdit
from .loaders.csv import load_csv
from .loaders.utils import parse_exons
from .strings.dna_str import DnaStr
from .transcript import Transcript
from .utils import parse_opt_int
from .variant import ProteinTruncatingVariant, VariantEdit

RECORD_FIELDS = [
    'id',
    'cds_seq',
    'utr_3_seq',
    'genetic_code',
    'exons',
    'hgvsp',
    'cds_start',
    'cds_end',
    'alt'
]

OUTPUT_FIELDS = [
    'id',
    'hgvsp',
    'nmd_prediction',
    'rule',
    'annotation'
]


@dataclass(slots=True, frozen=True)
class AnnotationRecord:
    record_id: str
    transcript: Transcript
    variant: ProteinTruncatingVariant

    @classmethod
    def from_row(cls, row: list[str]) -> AnnotationRecord:
        try:
            record_id, cds_seq, utr_3_seq, genetic_code, exons, hgvsp, cds_start, cds_end, alt = row
        except ValueError:
            raise ValueError("invalid number of columns")

        transcript = Transcript.build(
            record_id,
            parse_exons(exons),
            cds_seq,
            utr_3_seq=utr_3_seq,
            genetic_code=parse_opt_int(genetic_code))

        edit = VariantEdit(
            parse_opt_int(cds_start),
            parse_opt_int(cds_end),
            alt=DnaStr.parse(alt.strip()))

        return cls(record_id, transcript, ProteinTruncatingVariant(hgvsp or None, edit))


def load_records(fp: str) -> Generator[AnnotationRecord, None, None]:
    for i, row in enumerate(load_csv(fp, columns=RECORD_FIELDS, delimiter='\t'), start=2):
        try:
            yield AnnotationRecord.from_row(row)
        except ValueError as ex:
            logging.warning("Invalid record at line %d: %s (SKIPPED)." % (i, ex.args[0]))


def annotate_record(
    record: AnnotationRecord,
    config: AnnotatorConfig,
    codon_table: CodonTable | None = None
) -> dict[str, str]:
    d = {
        'id': record.record_id,
        'hgvsp': record.variant.hgvsp or '',
        'nmd_prediction': '',
        'rule': '',
        'annotation': ''
    }

    try:
        annotation = get_nmd_annotation(
            record.transcript, record.variant, config=config, codon_table=codon_table)

    except (NoStopCodonFound, UnresolvableEdit, InvalidTranscript, UnknownGeneticCode) as ex:
        logging.warning("Failed to annotate %s %s: %s (SKIPPED)." % (
            record.record_id, record.variant.hgvsp, ex.args[0]))
        return d

    if annotation is None:
        logging.debug("Variant %s %s not annotated." % (
            record.record_id, record.variant.hgvsp))
        return d

    d['nmd_prediction'] = annotation.prediction.value
    d['rule'] = annotation.rule_label
    d['annotation'] = str(annotation)
    return d


def annotate_records(
    records: Iterable[AnnotationRecord],
    config: AnnotatorConfig,
    codon_table: CodonTable | None = None
) -> pd.DataFrame:
    return pd.DataFrame.from_records([
        annotate_record(record, config, codon_table=codon_table)
        for record in records
    ], columns=OUTPUT_FIELDS)


def annotate_file(
    input_fp: str,
    output_fp: str,
    config: AnnotatorConfig,
    codon_table: CodonTable | None = None
) -> pd.DataFrame:
    df = annotate_records(load_records(input_fp), config, codon_table=codon_table)
    df.to_csv(output_fp, sep='\t', index=False)
    logging.info("Annotated %d out of %d records." % (
        (df.annotation != '').sum(), len(df)))
    return df
