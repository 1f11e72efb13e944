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

"""The output from solving a nonogram with solve.py."""

import dataclasses
import datetime
import enum
from typing import List, Tuple

import numpy as np

from picsol.python import nonogram


@enum.unique
class SolveStatus(enum.Enum):
    """The result of an attempt to solve a nonogram.

    Attributes:
      SUCCESS: Every line has exactly one permutation left, the grid is the
        solution.
      UNSOLVABLE: No grid satisfies all the hints, or deduction alone can't tell
        the remaining permutations apart.
      CANCELLED: The time limit was reached or the interrupter was triggered
        before the solver could conclude.
    """

    SUCCESS = enum.auto()
    UNSOLVABLE = enum.auto()
    CANCELLED = enum.auto()


class Grid:
    """An immutable snapshot of the cells of a nonogram, True meaning filled."""

    __slots__ = ("_tiles",)

    def __init__(self, tiles: np.ndarray) -> None:
        tiles = np.array(tiles, dtype=bool)
        if tiles.ndim != 2:
            raise ValueError(f"expected a 2D array of tiles, got shape {tiles.shape}")
        tiles.flags.writeable = False
        self._tiles = tiles

    @classmethod
    def empty(cls, row_count: int, column_count: int) -> "Grid":
        return cls(np.zeros((row_count, column_count), dtype=bool))

    @property
    def row_count(self) -> int:
        return self._tiles.shape[0]

    @property
    def column_count(self) -> int:
        return self._tiles.shape[1]

    def __getitem__(self, cell: Tuple[int, int]) -> bool:
        row, column = cell
        return bool(self._tiles[row, column])

    def row(self, index: int) -> np.ndarray:
        return self._tiles[index]

    def column(self, index: int) -> np.ndarray:
        return self._tiles[:, index]

    def to_numpy(self) -> np.ndarray:
        """Returns a read-only (row_count, column_count) boolean array."""
        return self._tiles

    def to_lists(self) -> List[List[bool]]:
        return self._tiles.tolist()

    def __eq__(self, other) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return np.array_equal(self._tiles, other._tiles)

    def __hash__(self) -> int:
        return hash((self._tiles.shape, self._tiles.tobytes()))

    def __repr__(self) -> str:
        rows = ["".join("1" if v else "0" for v in row) for row in self._tiles]
        return f"Grid({rows!r})"


@dataclasses.dataclass
class SolveStats:
    """Solve statistics.

    Attributes:
      solve_time: Elapsed wall clock time measured by the solver, i.e. the time to
        generate the permutations and step.
      step_count: The number of steps, see propagation.step().
      initial_row_permutations: The number of row permutations before any was
        removed.
      initial_column_permutations: The number of column permutations before any
        was removed.
    """

    solve_time: datetime.timedelta = datetime.timedelta()
    step_count: int = 0
    initial_row_permutations: int = 0
    initial_column_permutations: int = 0

    @property
    def initial_permutations(self) -> int:
        return self.initial_row_permutations + self.initial_column_permutations


@dataclasses.dataclass(frozen=True)
class SolveOutcome:
    """The result of solving a nonogram.

    Attributes:
      status: Whether the nonogram was solved.
      grid: The solution if status is SUCCESS. Otherwise a partial snapshot, the
        first remaining permutation of each row (empty rows when a row has no
        permutation left), that may be useful to find the error in the nonogram
        but must not be presented as a solution.
      nonogram: The solved nonogram.
      stats: Solve statistics.
    """

    status: SolveStatus
    grid: Grid
    nonogram: nonogram.Nonogram
    stats: SolveStats = dataclasses.field(default_factory=SolveStats)

    @property
    def is_solved(self) -> bool:
        return self.status == SolveStatus.SUCCESS
