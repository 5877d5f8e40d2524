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

STOP = '*'
UNKNOWN_AA = 'X'
MET = 'M'

STOP_NAME = 'Stop'

# Sentinels used in the stop codon context
NO_FOURTH_LETTER = 'N'
NO_MET = 'NoMet'

STANDARD_GENETIC_CODE = 1

# Rule thresholds
DEFAULT_PENULTIMATE_WINDOW_LENGTH = 50
DEFAULT_FIRST_CODING_BASES_MAX_END = 151
DEFAULT_LARGE_EXON_LENGTH = 407

HGVS_STOP = 'Ter'
