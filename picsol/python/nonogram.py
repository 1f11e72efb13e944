# Copyright 2010-2025 Google LLC
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""The nonogram to solve: board size and hints."""

import dataclasses

from picsol.python import errors
from picsol.python import hints


@dataclasses.dataclass(frozen=True)
class Nonogram:
    """A nonogram puzzle.

    Construction fails with InvalidNonogramError if the hint counts don't match
    the dimensions, and with InvalidHintError if a hint can't fit in its line.

    Attributes:
      name: A display name, may be empty.
      row_count: The number of rows, i.e. the length of a column.
      column_count: The number of columns, i.e. the length of a row.
      row_hints: One hint per row, from top to bottom.
      column_hints: One hint per column, from left to right.
    """

    name: str
    row_count: int
    column_count: int
    row_hints: hints.HintCollection
    column_hints: hints.HintCollection

    def __post_init__(self) -> None:
        if self.row_count <= 0 or self.column_count <= 0:
            raise errors.InvalidNonogramError(
                f"a nonogram needs at least one row and one column, got"
                f" {self.row_count}x{self.column_count}"
            )
        if len(self.row_hints) != self.row_count:
            raise errors.InvalidNonogramError(
                f"expected hints for {self.row_count} rows, but got"
                f" {len(self.row_hints)} instead"
            )
        if len(self.column_hints) != self.column_count:
            raise errors.InvalidNonogramError(
                f"expected hints for {self.column_count} columns, but got"
                f" {len(self.column_hints)} instead"
            )
        for hint in self.row_hints:
            hints.check_hint_fits(hint, self.column_count)
        for hint in self.column_hints:
            hints.check_hint_fits(hint, self.row_count)

    @classmethod
    def from_strings(
        cls, name: str, row_count: int, column_count: int, row_hints: str, column_hints: str
    ) -> "Nonogram":
        """Returns a nonogram whose hints use the HintCollection.from_string() format."""
        return cls(
            name=name,
            row_count=row_count,
            column_count=column_count,
            row_hints=hints.HintCollection.from_string(row_hints),
            column_hints=hints.HintCollection.from_string(column_hints),
        )

    def __str__(self) -> str:
        return f"{self.name} ({self.row_count}x{self.column_count})"
