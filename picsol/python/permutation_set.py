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

"""A container for the remaining permutations of every row, or every column.

For example, a hint of (1, 1) on a line of 4 cells starts with 3 permutations:
  ■ ∙ ■ ∙
  ■ ∙ ∙ ■
  ∙ ■ ∙ ■
The solver then removes the permutations that contradict the other axis. The
permutations of a line never come back once removed.
"""

from collections.abc import Callable, Iterable
from typing import List, Optional

import numpy as np

# Given the (count, line_length) permutations of a line, returns a boolean
# vector of count elements, True for the permutations to remove.
RemovalPredicate = Callable[[np.ndarray], np.ndarray]


class PermutationSet:
    """The candidate permutations of all the lines of one axis.

    The permutations of a line are stored as a 2D boolean array, one row per
    permutation, one column per cell.

    Thread-safety: set_patterns() may be called concurrently for different
    lines. All other methods must not be called concurrently.
    """

    def __init__(self, line_count: int, line_length: int) -> None:
        self._line_length = line_length
        self._lines: List[Optional[np.ndarray]] = [None] * line_count

    @property
    def line_count(self) -> int:
        """The number of lines, e.g. the number of rows for the row axis."""
        return len(self._lines)

    @property
    def line_length(self) -> int:
        """The number of cells of each line."""
        return self._line_length

    def patterns(self, index: int) -> np.ndarray:
        """Returns the live permutations of a line, empty if never populated."""
        line = self._lines[index]
        if line is None:
            line = np.zeros((0, self._line_length), dtype=bool)
            self._lines[index] = line
        return line

    def set_patterns(self, index: int, patterns: np.ndarray) -> None:
        """Sets the permutations of a line.

        Args:
          index: The line index.
          patterns: A (count, line_length) boolean array.

        Raises:
          ValueError: If the patterns don't have the line length.
        """
        patterns = np.asarray(patterns, dtype=bool)
        if patterns.ndim != 2 or patterns.shape[1] != self._line_length:
            raise ValueError(
                f"expected permutations of length {self._line_length}, got an"
                f" array of shape {patterns.shape}"
            )
        self._lines[index] = patterns

    def count(self, index: int) -> int:
        """Returns the number of live permutations of a line."""
        line = self._lines[index]
        return 0 if line is None else line.shape[0]

    def total_count(self) -> int:
        """Returns the number of live permutations of all lines."""
        return sum(self.count(i) for i in range(self.line_count))

    def counts(self) -> List[int]:
        """Returns the number of live permutations of each line."""
        return [self.count(i) for i in range(self.line_count)]

    def prune(self, index: int, predicate: RemovalPredicate) -> bool:
        """Removes the permutations of a line matching the predicate.

        Args:
          index: The line index.
          predicate: Returns True for each permutation to remove.

        Returns:
          True if at least one permutation was removed.
        """
        line = self.patterns(index)
        if line.shape[0] == 0:
            return False
        remove = predicate(line)
        if not remove.any():
            return False
        self._lines[index] = line[~remove]
        return True

    def first_patterns(self) -> Iterable[Optional[np.ndarray]]:
        """Yields the first live permutation of each line, None if there is none."""
        for index in range(self.line_count):
            line = self.patterns(index)
            yield line[0] if line.shape[0] else None
