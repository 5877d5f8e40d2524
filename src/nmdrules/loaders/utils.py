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

import logging

from charset_normalizer import detect

from ..exon import Exon


def detect_encoding(fp: str):
    with open(fp, 'rb') as rfh:
        encoding = detect(rfh.read(10000))['encoding']
    logging.debug("File '%s' encoding: %s." % (fp, encoding))
    return encoding


def parse_list(s: str, delimiter: str = ',', n: int | None = None) -> list[str]:
    ls = [
        item for item in [
            raw.strip()
            for raw in s.split(delimiter)
        ]
        if item
    ]
    if n is not None and len(ls) != n:
        raise ValueError("Unexpected list length!")
    return ls


def parse_exon(s: str) -> Exon:
    """Parse an exon in the RANK:START-END format (coding sequence coordinates)"""

    try:
        rank, r = parse_list(s, delimiter=':', n=2)
        # Allow negative coordinates for untranslated exons
        start, sep, end = r[1:].partition('-')
        return Exon(int(r[0] + start), int(end), int(rank))
    except (ValueError, IndexError):
        raise ValueError(f"Invalid exon '{s}'!")


def parse_exons(s: str) -> list[Exon]:
    return list(map(parse_exon, parse_list(s, delimiter=';')))
