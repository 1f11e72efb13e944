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

"""Generates all the permutations of a single row or column.

A permutation is one way to fill a line so that it matches its hint. Given a
length of 4 and a hint of (2,), the permutations are:
     ■ ■ ∙ ∙
     ∙ ■ ■ ∙
     ∙ ∙ ■ ■

For a hint of (1, 1), they are:
     ■ ∙ ■ ∙
     ■ ∙ ∙ ■
     ∙ ■ ∙ ■

Permutations are dense numpy boolean vectors, True meaning filled. They are
handed one by one to a sink, e.g. `list.append`, so that the caller decides how
to store them.

The cheap cases are tried first:
  * a hint summing to 0 has a single, empty, permutation;
  * a hint summing to the length has a single, full, permutation;
  * a hint whose runs and mandatory gaps fill the line has a single permutation;
  * a hint with a single run is shifted from left to right.
Everything else goes through expensive_permutations(), which may produce
millions of permutations.
"""

from collections.abc import Callable, Sequence
import math
from typing import List, Optional

import numpy as np

from picsol.python import hints
from picsol.python import solve_interrupter

PermutationSink = Callable[[np.ndarray], None]


def _is_interrupted(interrupter: Optional[solve_interrupter.SolveInterrupter]) -> bool:
    return interrupter is not None and interrupter.interrupted


def generate_permutations(
    hint: Sequence[int],
    length: int,
    sink: PermutationSink,
    interrupter: Optional[solve_interrupter.SolveInterrupter] = None,
) -> bool:
    """Hands every permutation of the hint on a line of that length to sink.

    Args:
      hint: The run lengths of the line, (0,) for an empty line.
      length: The number of cells of the line.
      sink: Called once per permutation with a new boolean vector of `length`
        elements. The sink owns the vector.
      interrupter: If set, it is checked after each permutation and generation
        stops as soon as it is triggered.

    Returns:
      False if the interrupter was triggered during the generation, True
      otherwise.

    Raises:
      InvalidHintError: If the hint is empty, has negative values, or doesn't fit.
    """
    hint = hints.normalize_hint(hint) if hint else ()
    hints.check_hint_fits(hint, length)
    hint_sum = sum(hint)

    if hint_sum == 0:
        sink(np.zeros(length, dtype=bool))
    elif hint_sum == length:
        sink(np.ones(length, dtype=bool))
    elif hint_sum + len(hint) - 1 == length:
        sink(filled_permutation_with_gaps(hint, length))
    elif len(hint) == 1:
        return simple_permutations(hint[0], length, sink, interrupter)
    else:
        return expensive_permutations(hint, length, sink, interrupter)
    return not _is_interrupted(interrupter)


def filled_permutation_with_gaps(hint: Sequence[int], length: int) -> np.ndarray:
    """Returns the single permutation of runs separated by exactly one gap.

    For example, a hint of (1, 2) on a length of 4 only has [■ ∙ ■ ■]. The caller
    must make sure that the hint fills the line.

    Args:
      hint: The run lengths.
      length: The number of cells of the line.

    Returns:
      The permutation.
    """
    permutation = np.zeros(length, dtype=bool)
    start = 0
    for run in hint:
        permutation[start : start + run] = True
        start += run + 1
    return permutation


def simple_permutations(
    run: int,
    length: int,
    sink: PermutationSink,
    interrupter: Optional[solve_interrupter.SolveInterrupter] = None,
) -> bool:
    """Shifts a single run from left to right.

    For example a run of 2 on a length of 4 gives:
      ■ ■ ∙ ∙
      ∙ ■ ■ ∙
      ∙ ∙ ■ ■

    Args:
      run: The length of the run.
      length: The number of cells of the line.
      sink: Called once per permutation.
      interrupter: Checked after each permutation.

    Returns:
      False if the interrupter was triggered, True otherwise.
    """
    for start in range(length - run + 1):
        permutation = np.zeros(length, dtype=bool)
        permutation[start : start + run] = True
        sink(permutation)
        if _is_interrupted(interrupter):
            return False
    return True


def expensive_permutations(
    hint: Sequence[int],
    length: int,
    sink: PermutationSink,
    interrupter: Optional[solve_interrupter.SolveInterrupter] = None,
) -> bool:
    """Creates all the permutations of a hint with several runs.

    This is the most expensive way to generate permutations, and it can result in
    millions of them. For example, a hint of (1, 2) on a length of 7 has 10:
      ■ ∙ ■ ■ ∙ ∙ ∙
      ■ ∙ ∙ ■ ■ ∙ ∙
      ■ ∙ ∙ ∙ ■ ■ ∙
      ■ ∙ ∙ ∙ ∙ ■ ■
      ∙ ■ ∙ ■ ■ ∙ ∙
      ∙ ■ ∙ ∙ ■ ■ ∙
      ∙ ■ ∙ ∙ ∙ ■ ■
      ∙ ∙ ■ ∙ ■ ■ ∙
      ∙ ∙ ■ ∙ ∙ ■ ■
      ∙ ∙ ∙ ■ ∙ ■ ■

    The slack is the number of empty cells beyond the mandatory gap between two
    runs. Each run picks how much of the remaining slack goes before it (before
    the first run, this is the left margin); whatever is left after the last run
    is the right margin. The run start offsets are accumulated while recursing,
    and a permutation is only allocated once every run is placed.

    Args:
      hint: The run lengths, all strictly positive.
      length: The number of cells of the line.
      sink: Called once per permutation.
      interrupter: Checked after each permutation; the recursion unwinds as soon
        as it is triggered.

    Returns:
      False if the interrupter was triggered, True otherwise.
    """
    slack = length - sum(hint) - (len(hint) - 1)
    starts: List[int] = []

    def place(run_index: int, position: int, remaining_slack: int) -> bool:
        """Places runs [run_index:] from position; False once interrupted."""
        if run_index == len(hint):
            permutation = np.zeros(length, dtype=bool)
            for run, start in zip(hint, starts):
                permutation[start : start + run] = True
            sink(permutation)
            return not _is_interrupted(interrupter)

        run = hint[run_index]
        for extra in range(remaining_slack + 1):
            start = position + extra
            starts.append(start)
            keep_going = place(run_index + 1, start + run + 1, remaining_slack - extra)
            starts.pop()
            if not keep_going:
                return False
        return True

    return place(0, 0, slack)


def count_permutations(hint: Sequence[int], length: int) -> int:
    """Returns the number of permutations of the hint on a line of that length.

    With n runs and s units of slack, this is the number of ways to split the
    slack into n + 1 margins, C(s + n, n).

    Args:
      hint: The run lengths of the line, (0,) for an empty line.
      length: The number of cells of the line.

    Raises:
      InvalidHintError: If the hint doesn't fit.
    """
    hints.check_hint_fits(hint, length)
    if sum(hint) == 0:
        return 1
    slack = length - sum(hint) - (len(hint) - 1)
    return math.comb(slack + len(hint), len(hint))
