########## LICENCE ##########
# nmdrules
# Copyright (C) 2020, 2021, 2022, 2023, 2024 Genome Research Ltd
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
from typing import Generator

from .utils import detect_encoding


def get_table_format(delimiter: str) -> str:
    return 'TSV' if delimiter == '\t' else 'CSV'


def load_csv(fp: str, columns: list[str] | None = None, delimiter: str = ',') -> Generator[list[str], None, None]:
    """
    Validate header and parse the records of a CSV or TSV file as lists of strings

    Blank lines are skipped.
    """

    with open(fp, encoding=detect_encoding(fp)) as fh:
        reader = csv.reader(fh, delimiter=delimiter)

        # Validate header
        if columns is not None:
            header = [c.strip() for c in next(reader, [])]
            if header != columns:
                raise ValueError("Invalid %s header: expected columns %s!" % (
                    get_table_format(delimiter), ', '.join(columns)))

        # Load records
        for r in reader:
            if r and any(r):
                yield r
