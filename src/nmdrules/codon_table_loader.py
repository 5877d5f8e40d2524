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

import csv
import logging
from functools import lru_cache

from .codon_table import CodonTable
from .codon_table_row import CodonTableRow
from .constants import STANDARD_GENETIC_CODE
from .strings.codon import Codon
from .strings.translation_symbol import TranslationSymbol
from .utils import is_dna


def _parse_codon(codon: str) -> Codon:
    if not (len(codon) == 3 and is_dna(codon.upper())):
        raise ValueError(f"invalid codon '{codon}'")
    return Codon(codon)


def _parse_aa(aa: str) -> TranslationSymbol:
    try:
        return TranslationSymbol(aa)
    except ValueError:
        raise ValueError(f"invalid amino acid code '{aa}'")


def _parse_codon_table_row(it) -> CodonTableRow:
    try:
        codon, aa = it
    except ValueError:
        raise ValueError("invalid number of columns")

    return CodonTableRow(_parse_codon(codon.strip()), _parse_aa(aa.strip()))


def load_codon_table_rows(fp: str) -> list[CodonTableRow]:
    try:
        with open(fp) as fh:
            return [
                _parse_codon_table_row(r)
                for r in csv.reader(fh)
                if r
            ]
    except ValueError as ex:
        raise ValueError(f"Invalid codon table format: {ex.args[0]}!")


def load_codon_table_file(fp: str) -> CodonTable:
    rows = load_codon_table_rows(fp)
    if len(rows) != 64:
        logging.warning("Codon table '%s' defines %d codons out of 64!" % (fp, len(rows)))
    return CodonTable.from_list(rows)


@lru_cache(maxsize=None)
def load_genetic_code(table_id: int = STANDARD_GENETIC_CODE) -> CodonTable:
    """Get the (shared, read-only) codon table for an NCBI genetic code"""

    logging.debug("Loading genetic code table %d..." % table_id)
    return CodonTable.from_ncbi(table_id)
