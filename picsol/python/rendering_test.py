#!/usr/bin/env python3
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

import datetime

from absl.testing import absltest
import numpy as np

from picsol.python import example_nonograms
from picsol.python import rendering
from picsol.python import result

_DOC_EXAMPLE_GRID = np.array(
    [
        [0, 1, 1, 0, 0],
        [1, 0, 0, 1, 0],
        [1, 1, 1, 1, 0],
        [0, 0, 1, 0, 0],
    ],
    dtype=bool,
)

_DOC_EXAMPLE_TEXT = """\
        1  1
     2  1  2  2  0
  2  ∙  ■  ■  ∙  ∙
1 1  ■  ∙  ∙  ■  ∙
  4  ■  ■  ■  ■  ∙
  1  ∙  ∙  ■  ∙  ∙"""


class RenderGridTest(absltest.TestCase):

    def test_doc_example(self) -> None:
        self.assertEqual(
            rendering.render_grid(
                example_nonograms.code_doc_example(), result.Grid(_DOC_EXAMPLE_GRID)
            ),
            _DOC_EXAMPLE_TEXT,
        )

    def test_one_by_one(self) -> None:
        self.assertEqual(
            rendering.render_grid(
                example_nonograms.one_by_one(), result.Grid(np.ones((1, 1)))
            ),
            "   1\n1  ■",
        )

    def test_two_digit_hints(self) -> None:
        puzzle = example_nonograms.wikipedia_w()
        text = rendering.render_grid(puzzle, result.Grid.empty(20, 30))
        lines = text.split("\n")
        # Three levels of column hints, then one line per row.
        self.assertLen(lines, 3 + 20)
        self.assertEqual(lines[3], "8 7 5 7 " + " ∙ " * 29 + " ∙")
        for line in lines:
            self.assertEqual(line, line.rstrip())


class RenderToStringTest(absltest.TestCase):

    def test_summary(self) -> None:
        outcome = result.SolveOutcome(
            status=result.SolveStatus.SUCCESS,
            grid=result.Grid(_DOC_EXAMPLE_GRID),
            nonogram=example_nonograms.code_doc_example(),
            stats=result.SolveStats(
                solve_time=datetime.timedelta(milliseconds=12.3),
                step_count=3,
                initial_row_permutations=17,
                initial_column_permutations=11,
            ),
        )
        self.assertEqual(
            rendering.render_to_string(outcome),
            "Nonogram 'Solver Doc Example' Result: SUCCESS.\n"
            "Performance: Time taken: 12.3ms, Steps: 3, Initial Permutations:"
            " 17 Row, 11 Column, 28 Total permutations.\n"
            "\n"
            + _DOC_EXAMPLE_TEXT
            + "\n",
        )

    def test_cancelled(self) -> None:
        puzzle = example_nonograms.chair()
        outcome = result.SolveOutcome(
            status=result.SolveStatus.CANCELLED,
            grid=result.Grid.empty(5, 5),
            nonogram=puzzle,
        )
        self.assertStartsWith(
            rendering.render_to_string(outcome),
            "Nonogram 'Chair' Result: CANCELLED.\nPerformance: Time taken: 0.0ms,"
            " Steps: 0,",
        )


if __name__ == "__main__":
    absltest.main()
