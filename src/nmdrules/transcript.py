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

from .errors import InvalidTranscript
from .exon import Exon
from .strings.dna_str import DnaStr
from .utils import has_duplicates


def sort_exons(exons: list[Exon]) -> tuple[Exon, ...]:
    if not exons:
        raise InvalidTranscript("No exons in transcript!")

    if has_duplicates([exon.rank for exon in exons]):
        raise InvalidTranscript("Duplicate exon ranks in transcript!")

    return tuple(sorted(exons, key=lambda exon: exon.rank))


@dataclass(slots=True, frozen=True)
class ExonMap:
    exons: tuple[Exon, ...]

    @classmethod
    def from_list(cls, exons: list[Exon]) -> ExonMap:
        return cls(sort_exons(exons))

    @property
    def exon_count(self) -> int:
        return len(self.exons)

    @property
    def intron_count(self) -> int:
        return self.exon_count - 1

    @property
    def last_exon(self) -> Exon:
        return self.exons[-1]

    @property
    def penultimate_exon(self) -> Exon | None:
        return self.exons[-2] if self.exon_count >= 2 else None

    def get_exon_at(self, pos: int) -> Exon | None:
        for exon in self.exons:
            if pos in exon:
                return exon
        return None

    def log_exons(self, label: str) -> None:
        for exon in self.exons:
            logging.info("%s\tEX%d\t%d\t%d\t%d" % (
                label, exon.rank, exon.start, exon.end, exon.length))


@dataclass(slots=True, frozen=True)
class Transcript:
    transcript_id: str
    exon_map: ExonMap

    # Coding sequence, from the start codon to the native stop codon
    cds_seq: DnaStr
    utr_3_seq: DnaStr = DnaStr.empty()
    # Genetic code table (the configured default if not set)
    genetic_code: int | None = None

    @classmethod
    def build(
        cls,
        transcript_id: str,
        exons: list[Exon],
        cds_seq: str,
        utr_3_seq: str | None = None,
        genetic_code: int | None = None
    ) -> Transcript:
        try:
            return cls(
                transcript_id,
                ExonMap.from_list(exons),
                DnaStr(cds_seq),
                utr_3_seq=DnaStr.parse(utr_3_seq),
                genetic_code=genetic_code)
        except InvalidTranscript:
            raise
        except ValueError as ex:
            raise InvalidTranscript(f"Invalid transcript {transcript_id}: {ex.args[0]}")

    @property
    def exons(self) -> tuple[Exon, ...]:
        return self.exon_map.exons

    @property
    def is_intronless(self) -> bool:
        return self.exon_map.intron_count == 0
