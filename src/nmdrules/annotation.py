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
import logging

from .codon_table_loader import load_genetic_code
from .codon_table import CodonTable
from .config import AnnotatorConfig
from .enums import NMDPrediction, NMDRule
from .rules import RuleChecks
from .stop_codon import locate_stop_codon
from .stop_context import StopCodonContext
from .transcript import Transcript
from .translator import translate
from .variant import ProteinTruncatingVariant, get_mutated_sequence

ANNOTATION_KEY = 'NMDrules'
ANNOTATION_DESCRIPTION = (
    "Considering 5 rules for NMD prediction of stop gain variants "
    "(Ter in HGVSp notation) & their surrounding genomic context, "
    "Format: NMD_pred:rule_used:-2codon(-2aa)-1codon(-1aa)-stop_codon(Stop)"
    "fourth_letter:dist_next_Met")

DEFAULT_CONFIG = AnnotatorConfig()


@dataclass(slots=True, frozen=True)
class NMDAnnotation:
    rule: NMDRule | None
    checks: RuleChecks
    context: StopCodonContext

    @property
    def prediction(self) -> NMDPrediction:
        return self.rule.prediction if self.rule is not None else NMDPrediction.TRIGGERING

    @property
    def rule_label(self) -> str:
        return self.rule.value if self.rule is not None else ''

    def __str__(self) -> str:
        return f"{self.prediction.value}:{self.rule_label}:{self.context}"


def get_nmd_annotation(
    transcript: Transcript,
    variant: ProteinTruncatingVariant,
    config: AnnotatorConfig = DEFAULT_CONFIG,
    codon_table: CodonTable | None = None
) -> NMDAnnotation | None:
    """
    Predict whether the stop codon introduced by a variant triggers NMD

    Returns None when the variant is not annotated (no defined stop codon in
    the protein notation or undefined coding sequence coordinates).
    Raises NoStopCodonFound when the mutated sequence has no stop codon.
    """

    if not variant.is_annotatable:
        return None

    debug: bool = config.debug
    edit = variant.edit

    if debug:
        logging.info("Annotating %s %s..." % (transcript.transcript_id, variant.hgvsp))

    if codon_table is None:
        codon_table = load_genetic_code(transcript.genetic_code or config.genetic_code)

    # Apply the variant and translate the mutated sequence
    mseq = get_mutated_sequence(transcript.cds_seq, transcript.utr_3_seq, edit)
    protein = translate(mseq, codon_table)

    if debug:
        logging.info("Mutated protein: %s" % protein)

    stop = locate_stop_codon(protein)
    context = StopCodonContext.from_seq(mseq, protein, stop, codon_table)

    if debug:
        logging.info("Stop codon position: %d" % stop.position)
        logging.info("Mutated sequence: %s" % mseq)
        logging.info("Next Met distance (aa): %s" % context.met_distance_label)
        logging.info("Stop codon context: %s" % context.codon_context)
        transcript.exon_map.log_exons(transcript.transcript_id)

    assert edit.cds_end is not None
    checks = RuleChecks.evaluate(transcript.exon_map, stop.position, edit.cds_end, config)

    if debug:
        checks.log()

    return NMDAnnotation(checks.classify(), checks, context)


def annotate(
    transcript: Transcript,
    variant: ProteinTruncatingVariant,
    config: AnnotatorConfig = DEFAULT_CONFIG
) -> str | None:
    annotation = get_nmd_annotation(transcript, variant, config=config)
    return str(annotation) if annotation is not None else None
