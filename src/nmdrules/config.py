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

import json
import logging

from pydantic import BaseModel, Field, ValidationError

from .codon_table import get_genetic_code_ids
from .constants import (
    DEFAULT_FIRST_CODING_BASES_MAX_END,
    DEFAULT_LARGE_EXON_LENGTH,
    DEFAULT_PENULTIMATE_WINDOW_LENGTH,
    STANDARD_GENETIC_CODE
)
from .errors import InvalidConfig


class AnnotatorConfig(BaseModel):

    # Genetic code used when a transcript does not specify one
    genetic_code: int = Field(alias='geneticCode', default=STANDARD_GENETIC_CODE)

    # Rule thresholds
    penultimate_window_length: int = Field(
        alias='penultimateWindowLength', default=DEFAULT_PENULTIMATE_WINDOW_LENGTH)
    first_coding_bases_max_end: int = Field(
        alias='firstCodingBasesMaxEnd', default=DEFAULT_FIRST_CODING_BASES_MAX_END)
    large_exon_length: int = Field(
        alias='largeExonLength', default=DEFAULT_LARGE_EXON_LENGTH)

    # Restrict the penultimate exon window to the exon itself
    clamp_penultimate_window: bool = Field(alias='clampPenultimateWindow', default=False)

    # Log intermediate values
    debug: bool = Field(default=False)

    class Config:
        populate_by_name = True
        frozen = True

    def __init__(__pydantic_self__, **data) -> None:
        super().__init__(**data)
        if not __pydantic_self__.is_valid():
            raise InvalidConfig()

    def is_valid(self) -> bool:
        success: bool = True

        if self.genetic_code not in get_genetic_code_ids():
            logging.error("Unknown genetic code table: %d!" % self.genetic_code)
            success = False

        for value, label in [
            (self.penultimate_window_length, "penultimate exon window length"),
            (self.first_coding_bases_max_end, "first coding bases threshold"),
            (self.large_exon_length, "large exon length")
        ]:
            if value < 0:
                logging.error("Invalid %s: negative!" % label)
                success = False

        return success

    def write(self, fp: str) -> None:
        with open(fp, 'w') as fh:
            fh.write(self.model_dump_json(by_alias=True))


def load_config(fp: str) -> AnnotatorConfig:
    with open(fp) as fh:
        try:
            config_dict = json.load(fh)
        except json.JSONDecodeError:
            raise InvalidConfig("not a JSON!")

    if not isinstance(config_dict, dict):
        raise InvalidConfig("not a JSON object!")

    try:
        return AnnotatorConfig(**config_dict)
    except ValidationError as ex:
        raise InvalidConfig(str(ex))
