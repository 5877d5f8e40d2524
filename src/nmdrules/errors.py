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


class InvalidConfig(Exception):
    pass


class UnknownGeneticCode(ValueError):
    def __init__(self, table_id: int) -> None:
        super().__init__(f"Unknown genetic code table: {table_id}!")
        self.table_id = table_id


class UnresolvableEdit(ValueError):
    pass


class InvalidTranscript(ValueError):
    pass


class NoStopCodonFound(Exception):
    """Raised when the mutated sequence translates without any stop codon"""

    pass
