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

import re

dna_re = re.compile('^[ACGT]*$')
iupac_dna_re = re.compile('^[ACGTRYSWKMBDHVN]*$')


def is_dna(s: str) -> bool:
    return dna_re.match(s) is not None


def is_iupac_dna(s: str) -> bool:
    return iupac_dna_re.match(s) is not None


def has_duplicates(items: list) -> bool:
    return len(set(items)) != len(items)


def parse_opt_int(s: str | None) -> int | None:
    """Parse an integer, mapping missing or blank values to None"""

    if s is None:
        return None
    s = s.strip()
    return int(s) if s else None
