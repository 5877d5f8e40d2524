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
Nonsense-mediated decay escape rules

The rules are evaluated in a fixed order and the first matching one
determines the prediction:

1. intronless transcript (canonical)
2. stop codon in the last exon (canonical)
3. stop codon within the last 50 bases of the penultimate exon (canonical)
4. variant within the first 150 coding bases (non-canonical)
5. stop codon in an exon longer than 407 bases (non-canonical)

Ref.:
- Lindeboom et al. 2019, Nature Genetics (doi:10.1038/s41588-019-0517-5)
"""

from __future__ import annotations

from dataclasses import dataclass
import logging

from .config import AnnotatorConfig
from .enums import NMDRule
from .int_range import IntRange
from .transcript import ExonMap


def get_penultimate_window(exon_map: ExonMap, length: int, clamp: bool = False) -> IntRange | None:
    """
    Get the window at the 3' end of the penultimate exon

    Unless clamped, the window is not restricted to the penultimate exon
    and may extend upstream of its start when the exon is shorter than the
    window.
    """

    exon = exon_map.penultimate_exon
    if exon is None:
        return None
    r = IntRange(exon.end - length, exon.end)
    return r.clamp_start(exon.start) if clamp else r


def is_in_large_exon(exon_map: ExonMap, pos: int, min_length: int) -> bool:
    exon = exon_map.get_exon_at(pos)
    return exon is not None and exon.length > min_length


@dataclass(slots=True, frozen=True)
class RuleChecks:
    intronless: bool
    last_exon: bool
    penultimate_exon_50bp: bool
    first_150bp: bool
    large_exon: bool

    @classmethod
    def evaluate(
        cls,
        exon_map: ExonMap,
        stop_position: int,
        variant_cds_end: int,
        config: AnnotatorConfig
    ) -> RuleChecks:
        """
        Evaluate all the rules

        All positions are coding sequence coordinates: the stop position is
        the last nucleotide of the new stop codon, while the first coding
        bases rule is evaluated on the end of the variant itself.
        """

        window = get_penultimate_window(
            exon_map,
            config.penultimate_window_length,
            clamp=config.clamp_penultimate_window)

        return cls(
            intronless=exon_map.intron_count == 0,
            last_exon=stop_position in exon_map.last_exon,
            penultimate_exon_50bp=window is not None and stop_position in window,
            first_150bp=variant_cds_end <= config.first_coding_bases_max_end,
            large_exon=is_in_large_exon(exon_map, stop_position, config.large_exon_length))

    def to_list(self) -> list[tuple[NMDRule, bool]]:
        return [
            (NMDRule.INTRONLESS, self.intronless),
            (NMDRule.LAST_EXON, self.last_exon),
            (NMDRule.PENULTIMATE_EXON_50BP, self.penultimate_exon_50bp),
            (NMDRule.FIRST_150BP, self.first_150bp),
            (NMDRule.LARGE_EXON, self.large_exon)
        ]

    def classify(self) -> NMDRule | None:
        """Get the first matching rule, if any (NMD triggering otherwise)"""

        for rule, matched in self.to_list():
            if matched:
                return rule
        return None

    def log(self) -> None:
        for rule, matched in self.to_list():
            logging.info("Rule %s: %s." % (rule.value, 'matched' if matched else 'not matched'))
