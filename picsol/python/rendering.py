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

"""Renders a solve outcome as text.

The grid is printed with its hints in the gutters, column hints bottom aligned:
        1  1
     2  1  2  2  0
  2  ∙  ■  ■  ∙  ∙
1 1  ■  ∙  ∙  ■  ∙
  4  ■  ■  ■  ■  ∙
  1  ∙  ∙  ■  ∙  ∙
"""

import io

from picsol.python import nonogram
from picsol.python import result

FILLED = "■"
EMPTY = "∙"


def render_grid(puzzle: nonogram.Nonogram, grid: result.Grid) -> str:
    """Returns the grid with the hints of the nonogram in the gutters.

    Lines have no trailing whitespace, the last line does NOT end with a new
    line.

    Args:
      puzzle: The nonogram, for its hints.
      grid: The tiles to print.
    """
    row_gutters = [" ".join(str(v) for v in hint) for hint in puzzle.row_hints]
    gutter_width = max(len(g) for g in row_gutters)
    depth = puzzle.column_hints.max_hint_length()

    lines = []
    for level in range(depth):
        cells = []
        for hint in puzzle.column_hints:
            offset = level - (depth - len(hint))
            cells.append(f"{hint[offset]:>2} " if offset >= 0 else "   ")
        lines.append(" " * (gutter_width + 1) + "".join(cells))

    for row_ix, gutter in enumerate(row_gutters):
        cells = "".join(
            f" {FILLED if grid[row_ix, col] else EMPTY} "
            for col in range(grid.column_count)
        )
        lines.append(f"{gutter:>{gutter_width}} {cells}")
    return "\n".join(line.rstrip() for line in lines)


def render_to_string(outcome: result.SolveOutcome) -> str:
    """Returns a summary of the outcome, its statistics and its grid."""
    stats = outcome.stats
    buf = io.StringIO()
    buf.write(f"Nonogram '{outcome.nonogram.name}' Result: {outcome.status.name}.\n")
    buf.write(
        "Performance: Time taken:"
        f" {stats.solve_time.total_seconds() * 1000:.1f}ms, Steps:"
        f" {stats.step_count}, Initial Permutations:"
        f" {stats.initial_row_permutations} Row,"
        f" {stats.initial_column_permutations} Column,"
        f" {stats.initial_permutations} Total permutations.\n"
    )
    buf.write("\n")
    buf.write(render_grid(outcome.nonogram, outcome.grid))
    buf.write("\n")
    return buf.getvalue()
