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

"""The hints in the gutter of a nonogram.

Each row or column has a hint: the lengths of its runs of filled cells, in
order. An empty line has the hint (0,).

  Typical usage example:

  rows = hints.HintCollection.from_string("2 1,1 4 1")
  columns = hints.HintCollection.from_lists([[2], [1, 1], [1, 2], [2], []])
"""

from collections.abc import Iterable, Iterator, Sequence
import numbers
from typing import Tuple

from picsol.python import errors

Hint = Tuple[int, ...]


def normalize_hint(values: Iterable[int]) -> Hint:
    """Returns the hint as a tuple, with (0,) for an empty line.

    Args:
      values: The run lengths of a single line.

    Raises:
      InvalidHintError: If a run length is negative or not an integer, or if a 0
        is mixed with other run lengths.
    """
    hint = tuple(values)
    for value in hint:
        if isinstance(value, bool) or not isinstance(value, numbers.Integral):
            raise errors.InvalidHintError(f"hint values must be integers: {hint}")
        if value < 0:
            raise errors.InvalidHintError(f"hint values must be >= 0: {hint}")
    if not hint:
        return (0,)
    if len(hint) > 1 and 0 in hint:
        raise errors.InvalidHintError(f"a 0 hint must be alone: {hint}")
    return tuple(int(v) for v in hint)


def check_hint_fits(hint: Sequence[int], length: int) -> None:
    """Raises InvalidHintError if the hint can't fit in a line of that length.

    Every run needs its cells, and consecutive runs need at least one empty
    cell between them.

    Args:
      hint: The run lengths of a single line, (0,) for an empty line.
      length: The number of cells of the line.
    """
    if not hint:
        raise errors.InvalidHintError(
            "empty hint, even an empty line needs a hint with a single 0"
        )
    hint_sum = sum(hint)
    if hint_sum > length or hint_sum + len(hint) - 1 > length:
        raise errors.InvalidHintError(
            "a hint requires more space than there is. Length:"
            f" {length}, Hint Sum: {hint_sum}, Hint:"
            f" {','.join(str(v) for v in hint)}"
        )


class HintCollection(Sequence[Hint]):
    """The hints of all the rows, or all the columns, of a nonogram.

    Instances are immutable. Use the from_*() factories to build them.
    """

    __slots__ = ("_hints",)

    def __init__(self, hints: Iterable[Iterable[int]]) -> None:
        self._hints: Tuple[Hint, ...] = tuple(normalize_hint(h) for h in hints)

    @classmethod
    def from_string(cls, hint_string: str) -> "HintCollection":
        """Parses lines separated by spaces, run lengths separated by commas.

        For example "1 1,2 3" has 3 lines, with hints (1,), (1, 2) and (3,).

        Args:
          hint_string: The text to parse.

        Returns:
          The parsed hints.

        Raises:
          InvalidHintError: If a run length is not a non-negative integer.
        """
        hints = []
        for element in hint_string.split():
            try:
                hints.append([int(v) for v in element.split(",")])
            except ValueError:
                raise errors.InvalidHintError(
                    f"invalid hint {element!r} in {hint_string!r}"
                ) from None
        return cls(hints)

    @classmethod
    def from_lists(cls, hints: Iterable[Iterable[int]]) -> "HintCollection":
        """Returns the hints of nested lists, an empty list is an empty line."""
        return cls(hints)

    @classmethod
    def from_padded_rules(cls, rules: Iterable[Iterable[int]]) -> "HintCollection":
        """Returns the hints of a table of rules padded with leading zeros.

        This is the format of the nonogram_regular data files, where every rule
        has the same length, e.g. [0, 0, 1, 3] is the hint (1, 3) and [0, 0, 0, 0]
        an empty line.

        Args:
          rules: The padded rules, one per line.

        Returns:
          The hints without their padding.
        """
        return cls([v for v in rule if v != 0] for rule in rules)

    def max_hint_length(self) -> int:
        """Returns the number of runs of the longest hint, 0 if empty."""
        return max((len(h) for h in self._hints), default=0)

    def __getitem__(self, index):
        return self._hints[index]

    def __len__(self) -> int:
        return len(self._hints)

    def __iter__(self) -> Iterator[Hint]:
        return iter(self._hints)

    def __eq__(self, other) -> bool:
        if not isinstance(other, HintCollection):
            return NotImplemented
        return self._hints == other._hints

    def __hash__(self) -> int:
        return hash(self._hints)

    def __str__(self) -> str:
        return " ".join(",".join(str(v) for v in h) for h in self._hints)

    def __repr__(self) -> str:
        return f"HintCollection.from_string({str(self)!r})"
