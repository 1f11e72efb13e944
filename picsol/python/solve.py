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

"""Solves nonograms, as defined by Nonogram in nonogram.py.

This is a brute force solver, but it is fast enough for most common nonograms.
It first generates all the permutations of every row and every column, then
steps (see propagation.py) until each line has a single permutation left.

  Typical usage example:

  outcome = solve.solve(
      example_nonograms.chair(),
      params=parameters.SolveParameters(time_limit=datetime.timedelta(seconds=30)),
  )
  if outcome.is_solved:
    print(rendering.render_to_string(outcome))
"""

from concurrent import futures
import datetime
import time
from typing import Iterator, List, Optional, Tuple

from absl import logging
import numpy as np

from picsol.python import hints
from picsol.python import nonogram
from picsol.python import parameters
from picsol.python import permutation_set
from picsol.python import permutations
from picsol.python import propagation
from picsol.python import result
from picsol.python import solve_interrupter


class _LineBuffer:
    """Collects the permutations of a single line in fixed-size blocks.

    Memory grows with the permutations actually generated, a line with billions
    of permutations only allocates blocks until it is interrupted.
    """

    _BLOCK_SIZE = 4096

    def __init__(self, length: int) -> None:
        self._length = length
        self._blocks: List[np.ndarray] = []
        self._block_fill = 0

    def add(self, permutation: np.ndarray) -> None:
        if not self._blocks or self._block_fill == self._BLOCK_SIZE:
            self._blocks.append(
                np.empty((self._BLOCK_SIZE, self._length), dtype=bool)
            )
            self._block_fill = 0
        self._blocks[-1][self._block_fill] = permutation
        self._block_fill += 1

    def patterns(self) -> np.ndarray:
        """Returns the collected permutations as one (count, length) array."""
        if not self._blocks:
            return np.zeros((0, self._length), dtype=bool)
        last = self._blocks[-1][: self._block_fill]
        return np.concatenate(self._blocks[:-1] + [last])


class _SolverState:
    """The state of a single solve() call; nothing is shared between calls."""

    def __init__(
        self,
        puzzle: nonogram.Nonogram,
        params: parameters.SolveParameters,
        interrupter: solve_interrupter.SolveInterrupter,
    ) -> None:
        self.nonogram = puzzle
        self.params = params
        self.interrupter = interrupter
        self.rows = permutation_set.PermutationSet(
            puzzle.row_count, puzzle.column_count
        )
        self.columns = permutation_set.PermutationSet(
            puzzle.column_count, puzzle.row_count
        )
        self.stats = result.SolveStats()
        self._phase_start: Optional[float] = None

    def start_phase(self) -> None:
        self._phase_start = time.monotonic()

    def stop_phase(self) -> None:
        self.stats.solve_time += self._phase_elapsed()
        self._phase_start = None

    def _phase_elapsed(self) -> datetime.timedelta:
        if self._phase_start is None:
            return datetime.timedelta()
        return datetime.timedelta(seconds=time.monotonic() - self._phase_start)

    def has_hit_time_limit(self) -> bool:
        """True if the accumulated solve time reached the time limit."""
        time_limit = self.params.time_limit
        return time_limit is not None and self.stats.solve_time >= time_limit

    def will_hit_time_limit(self) -> bool:
        """Same as has_hit_time_limit(), including the running phase."""
        time_limit = self.params.time_limit
        return (
            time_limit is not None
            and self.stats.solve_time + self._phase_elapsed() >= time_limit
        )

    def check_time_limit(self) -> bool:
        """Triggers the interrupter on timeout; returns True if interrupted."""
        if self.will_hit_time_limit():
            self.interrupter.interrupt()
        return self.interrupter.interrupted

    def populate_permutations(self) -> bool:
        """Creates the row and column permutations.

        Returns:
          False if the solve was interrupted (or the time limit hit), True if
          every line has all its permutations.
        """
        self.start_phase()
        try:
            if self.params.use_multiple_cores:
                completed = self._populate_concurrently()
            else:
                completed = self._populate_sequentially()
        finally:
            self.stop_phase()
        self.stats.initial_row_permutations = self.rows.total_count()
        self.stats.initial_column_permutations = self.columns.total_count()
        return completed

    def _axes(self) -> Iterator[Tuple[permutation_set.PermutationSet, hints.HintCollection]]:
        yield self.rows, self.nonogram.row_hints
        yield self.columns, self.nonogram.column_hints

    def expected_permutations(self) -> Tuple[int, int]:
        """Returns the (row, column) permutation totals, without generating them."""
        row_total, column_total = (
            sum(
                permutations.count_permutations(hint, axis.line_length)
                for hint in axis_hints
            )
            for axis, axis_hints in self._axes()
        )
        return row_total, column_total

    def _populate_line(
        self,
        axis: permutation_set.PermutationSet,
        hint: hints.Hint,
        index: int,
    ) -> bool:
        buffer = _LineBuffer(axis.line_length)

        def add(permutation: np.ndarray) -> None:
            buffer.add(permutation)
            self.check_time_limit()

        completed = permutations.generate_permutations(
            hint, axis.line_length, add, self.interrupter
        )
        axis.set_patterns(index, buffer.patterns())
        return completed

    def _populate_sequentially(self) -> bool:
        for axis, axis_hints in self._axes():
            for index, hint in enumerate(axis_hints):
                completed = self._populate_line(axis, hint, index)
                if self.check_time_limit() or not completed:
                    return False
        return True

    def _populate_concurrently(self) -> bool:
        for axis, axis_hints in self._axes():
            with futures.ThreadPoolExecutor(
                max_workers=self.params.worker_count(),
                thread_name_prefix="picsol_permutations",
            ) as executor:
                pending: List[futures.Future] = [
                    executor.submit(self._populate_line, axis, hint, index)
                    for index, hint in enumerate(axis_hints)
                ]

                def cancel_pending() -> None:
                    for future in pending:
                        future.cancel()

                with self.interrupter.interruption_callback(cancel_pending):
                    done, _ = futures.wait(pending)
            # Raises the InvalidHintError of a worker, if any.
            completed = [f.result() for f in done if not f.cancelled()]
            if self.interrupter.interrupted or not all(completed):
                return False
        return True

    def materialize_grid(self) -> result.Grid:
        """Returns the first remaining permutation of each row."""
        tiles = np.zeros((self.nonogram.row_count, self.nonogram.column_count), bool)
        for row_ix, pattern in enumerate(self.rows.first_patterns()):
            if pattern is not None:
                tiles[row_ix] = pattern
        return result.Grid(tiles)

    def all_rows_collapsed(self) -> bool:
        return all(count == 1 for count in self.rows.counts())

    def outcome(self, status: result.SolveStatus) -> result.SolveOutcome:
        logging.vlog(
            1,
            "Nonogram %s: %s after %d steps in %s",
            self.nonogram,
            status.name,
            self.stats.step_count,
            self.stats.solve_time,
        )
        return result.SolveOutcome(
            status=status,
            grid=self.materialize_grid(),
            nonogram=self.nonogram,
            stats=self.stats,
        )


def solve(
    puzzle: nonogram.Nonogram,
    *,
    params: Optional[parameters.SolveParameters] = None,
    interrupter: Optional[solve_interrupter.SolveInterrupter] = None,
) -> result.SolveOutcome:
    """Tries to solve the nonogram.

    Thread-safety: solve() can be called concurrently on the same nonogram, each
    call owns its state. The interrupter can be triggered from any thread.

    Args:
      puzzle: The nonogram to solve.
      params: Configuration of the solve, see SolveParameters.
      interrupter: If you want to control cancellation yourself, pass in a
        SolveInterrupter and trigger it. Note that if a time limit is also set,
        the solver triggers the interrupter when the time limit expires.

    Returns:
      A SolveOutcome, although it may not be a successful one: unsolvable and
      cancelled solves are reported in its status.

    Raises:
      InvalidHintError: If a hint can't fit in its line.
    """
    params = params or parameters.SolveParameters()
    interrupter = interrupter or solve_interrupter.SolveInterrupter()
    state = _SolverState(puzzle, params, interrupter)

    if interrupter.interrupted:
        return state.outcome(result.SolveStatus.CANCELLED)

    if logging.vlog_is_on(1):
        logging.vlog(
            1,
            "Nonogram %s: generating %d row and %d column permutations",
            puzzle,
            *state.expected_permutations(),
        )
    if not state.populate_permutations():
        return state.outcome(result.SolveStatus.CANCELLED)
    logging.vlog(
        1,
        "Nonogram %s: %d row and %d column permutations",
        puzzle,
        state.stats.initial_row_permutations,
        state.stats.initial_column_permutations,
    )

    step_result = propagation.StepResult.KEEP_GOING
    while step_result == propagation.StepResult.KEEP_GOING:
        state.start_phase()
        step_result = propagation.step(state.rows, state.columns, interrupter)
        state.stop_phase()
        state.stats.step_count += 1
        logging.vlog(
            2,
            "Nonogram %s: step %d %s, %d row and %d column permutations left",
            puzzle,
            state.stats.step_count,
            step_result.name,
            state.rows.total_count(),
            state.columns.total_count(),
        )
        if step_result == propagation.StepResult.UNSOLVABLE:
            return state.outcome(result.SolveStatus.UNSOLVABLE)
        if state.has_hit_time_limit() or interrupter.interrupted:
            interrupter.interrupt()
            return state.outcome(result.SolveStatus.CANCELLED)

    if state.all_rows_collapsed():
        return state.outcome(result.SolveStatus.SUCCESS)
    return state.outcome(result.SolveStatus.UNSOLVABLE)
