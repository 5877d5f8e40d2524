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

from collections.abc import Container
from dataclasses import dataclass, replace
from typing import Sized


@dataclass(slots=True, frozen=True)
class IntRange(Sized, Container):
    """
    One-based inclusive range of positions

    Positions may be zero or negative (e.g. coding sequence coordinates of
    untranslated exons). An empty range (end = start - 1) marks the
    insertion point immediately before start.
    """

    start: int
    end: int

    def __post_init__(self) -> None:
        if self.end < self.start - 1:
            raise ValueError(f"Invalid range [{self.start}, {self.end}]!")

    def __len__(self) -> int:
        return self.end - self.start + 1

    def __repr__(self) -> str:
        return f"[{self.start}, {self.end}]"

    def __contains__(self, x) -> bool:
        if isinstance(x, int):
            return self.start <= x <= self.end
        elif isinstance(x, IntRange):
            return x.start in self and x.end in self
        raise TypeError("Operand type not supported!")

    def clamp_start(self, start: int) -> IntRange:
        return replace(self, start=max(self.start, start))

    def to_slice(self, offset: int = 0) -> slice:
        return slice(self.start - offset, self.end - offset + 1)

    def to_tuple(self) -> tuple[int, int]:
        return self.start, self.end
