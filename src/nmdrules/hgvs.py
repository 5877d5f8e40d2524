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
Protein-level HGVS notation filter

Only variants resulting in a defined stop codon are annotated, excluding
synonymous changes (e.g. p.Ter811=) and frameshifts where no downstream
stop codon is inferred (e.g. p.Ter257GlufsTer?).

Ref.:
- http://varnomen.hgvs.org/recommendations/protein/
"""

from .constants import HGVS_STOP

UNKNOWN_POSITION = '?'
SYNONYMOUS = '='


def is_annotatable_hgvsp(hgvsp: str | None) -> bool:
    return (
        hgvsp is not None and
        HGVS_STOP in hgvsp and
        UNKNOWN_POSITION not in hgvsp and
        SYNONYMOUS not in hgvsp
    )
