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

from enum import Enum


class NMDPrediction(str, Enum):
    CANONICAL_ESCAPING = 'canonical_NMD_escaping'
    NONCANONICAL_ESCAPING = 'noncanonical_NMD_escaping'
    TRIGGERING = 'putative_NMD_triggering'


class NMDRule(str, Enum):
    INTRONLESS = 'intronless'
    LAST_EXON = 'last_exon'
    PENULTIMATE_EXON_50BP = '50bp_penult_exon'
    FIRST_150BP = 'first_150bp'
    LARGE_EXON = 'lt_407bp_exon'

    @property
    def prediction(self) -> NMDPrediction:
        return (
            NMDPrediction.CANONICAL_ESCAPING if self in CANONICAL_RULES else
            NMDPrediction.NONCANONICAL_ESCAPING
        )


CANONICAL_RULES = frozenset([
    NMDRule.INTRONLESS,
    NMDRule.LAST_EXON,
    NMDRule.PENULTIMATE_EXON_50BP
])
