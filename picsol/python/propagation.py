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

"""Removes the row and column permutations that contradict each other.

Let's take this 4x5 nonogram:
       1 1
     2 1 2 2 0
   2 ∙ ■ ■ ∙ ∙
 1 1 ■ ∙ ∙ ■ ∙
   4 ■ ■ ■ ■ ∙
   1 ∙ ∙ ■ ∙ ∙

Column 2 (hint 1,2) has a single permutation, [■ ∙ ■ ■], so its cells are known:
every row permutation whose cell 2 disagrees with it can go. Row 3 (hint 1)
keeps only [∙ ∙ ■ ∙ ∙] out of its 5 permutations. Column 4 (hint 0) has no
filled cell, so every row permutation with a filled last cell can go too.

More generally, for each line of the input axis we compute the cells that are
filled in all its permutations (must be on) and the cells that are empty in all
its permutations (must be off). Those cells cross the lines of the target axis,
and the target permutations that disagree with them are removed.

A step runs a pass with the columns as input and the rows as target, then a
pass with the rows as input and the columns as target. The solver steps until
nothing is removed anymore, a line has no permutation left (the nonogram is
unsolvable), or the solve is interrupted.
"""

import enum
from typing import Optional, Tuple

import numpy as np

from picsol.python import permutation_set
from picsol.python import solve_interrupter


@enum.unique
class StepResult(enum.Enum):
    """The result of a pass or a step.

    Attributes:
      KEEP_GOING: Permutations were removed, another step may remove more.
      FINISHED: No permutation was removed.
      UNSOLVABLE: A line of the target has no permutation left.
      CANCELLED: The interrupter was triggered.
    """

    KEEP_GOING = enum.auto()
    FINISHED = enum.auto()
    UNSOLVABLE = enum.auto()
    CANCELLED = enum.auto()


def forced_masks(patterns: np.ndarray, length: int) -> Tuple[np.ndarray, np.ndarray]:
    """Returns the (must_be_on, can_be_on) masks of a line's permutations.

    A cell must be on when it is filled in all the permutations, it can be on
    when it is filled in at least one of them. A cell that can't be on must be
    off.

    Args:
      patterns: The (count, length) permutations of a line.
      length: The line length, used when there is no permutation.
    """
    if patterns.shape[0] == 0:
        return np.ones(length, dtype=bool), np.zeros(length, dtype=bool)
    return patterns.all(axis=0), patterns.any(axis=0)


def remove_permutations(
    input_set: permutation_set.PermutationSet,
    target_set: permutation_set.PermutationSet,
    interrupter: Optional[solve_interrupter.SolveInterrupter] = None,
) -> StepResult:
    """Removes the target permutations contradicting the input permutations.

    The cell `i` of the target line `t` is the cell `t` of the input line `i`. A
    target permutation is removed if that cell is empty while input line `i`
    requires it filled, or filled while input line `i` requires it empty.

    The input set is not modified, so every target line is pruned against the
    same masks.

    Args:
      input_set: The axis used to find the known cells.
      target_set: The axis to remove permutations from.
      interrupter: Checked for each line.

    Returns:
      KEEP_GOING if permutations were removed, FINISHED if none was, UNSOLVABLE
      as soon as a target line has no permutation left, CANCELLED if the
      interrupter was triggered.
    """
    must_be_on = np.empty((input_set.line_count, target_set.line_count), dtype=bool)
    must_be_off = np.empty_like(must_be_on)
    for input_ix in range(input_set.line_count):
        if interrupter is not None and interrupter.interrupted:
            return StepResult.CANCELLED
        on, can_be_on = forced_masks(
            input_set.patterns(input_ix), target_set.line_count
        )
        must_be_on[input_ix] = on
        must_be_off[input_ix] = ~can_be_on

    keep_going = False
    for target_ix in range(target_set.line_count):
        if interrupter is not None and interrupter.interrupted:
            return StepResult.CANCELLED
        on = must_be_on[:, target_ix]
        off = must_be_off[:, target_ix]

        def contradicts(patterns: np.ndarray, on=on, off=off) -> np.ndarray:
            return ((on & ~patterns) | (off & patterns)).any(axis=1)

        if target_set.prune(target_ix, contradicts):
            keep_going = True
        if target_set.count(target_ix) == 0:
            return StepResult.UNSOLVABLE
    return StepResult.KEEP_GOING if keep_going else StepResult.FINISHED


def step(
    rows: permutation_set.PermutationSet,
    columns: permutation_set.PermutationSet,
    interrupter: Optional[solve_interrupter.SolveInterrupter] = None,
) -> StepResult:
    """Removes row permutations using the columns, then the other way around.

    The second pass only starts once the first one is complete, its masks are
    computed from the already pruned rows.

    Args:
      rows: The row permutations.
      columns: The column permutations.
      interrupter: Checked for each line.

    Returns:
      KEEP_GOING if either pass removed permutations, FINISHED if none did,
      UNSOLVABLE or CANCELLED as soon as a pass returns it.
    """
    first_pass = remove_permutations(columns, rows, interrupter)
    if first_pass in (StepResult.UNSOLVABLE, StepResult.CANCELLED):
        return first_pass
    if interrupter is not None and interrupter.interrupted:
        return StepResult.CANCELLED

    second_pass = remove_permutations(rows, columns, interrupter)
    if second_pass in (StepResult.UNSOLVABLE, StepResult.CANCELLED):
        return second_pass

    if StepResult.KEEP_GOING in (first_pass, second_pass):
        return StepResult.KEEP_GOING
    return StepResult.FINISHED
