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

"""A corpus of nonograms, used by the tests and the solve_examples sample."""

from typing import List

from picsol.python import hints
from picsol.python import nonogram


def code_doc_example() -> nonogram.Nonogram:
    """The 4x5 nonogram used in the documentation of propagation.py."""
    return nonogram.Nonogram(
        name="Solver Doc Example",
        row_count=4,
        column_count=5,
        row_hints=hints.HintCollection.from_lists([[2], [1, 1], [4], [1]]),
        column_hints=hints.HintCollection.from_lists(
            [[2], [1, 1], [1, 2], [2], [0]]
        ),
    )


def permutation_test() -> nonogram.Nonogram:
    return nonogram.Nonogram.from_strings("Permutation Test", 1, 4, "1,1", "1 0 0 1")


def chair() -> nonogram.Nonogram:
    return nonogram.Nonogram.from_strings(
        "Chair", 5, 5, "3 3 5 1,1,1 1,1,1", "5 3 5 1 3"
    )


def one_by_one() -> nonogram.Nonogram:
    return nonogram.Nonogram.from_strings("One by One", 1, 1, "1", "1")


def one_by_two() -> nonogram.Nonogram:
    return nonogram.Nonogram.from_strings("One by Two", 1, 2, "1", "0 1")


def one_by_two_flipped() -> nonogram.Nonogram:
    return nonogram.Nonogram.from_strings("One by Two Flipped", 2, 1, "1 0", "1")


def impossible() -> nonogram.Nonogram:
    """Each line fits, but the rows and columns contradict each other."""
    return nonogram.Nonogram.from_strings("Impossible", 2, 2, "2 1", "1 1")


def wikipedia_w() -> nonogram.Nonogram:
    # https://en.wikipedia.org/w/index.php?title=File:Nonogram.svg&oldid=791896154
    return nonogram.Nonogram.from_strings(
        "Wikipedia W",
        20,
        30,
        "8,7,5,7 5,4,3,3 3,3,2,3 4,3,2,2 3,3,2,2 3,4,2,2 4,5,2 3,5,1 4,3,2 3,4,2"
        " 4,4,2 3,6,2 3,2,3,1 4,3,4,2 3,2,3,2 6,5 4,5 3,3 3,3 1,1",
        "1 1 2 4 7 9 2,8 1,8 8 1,9 2,7 3,4 6,4 8,5 1,11 1,7 8 1,4,8 6,8 4,7 2,4"
        " 1,4 5 1,4 1,5 7 5 3 1 1",
    )


def many_gaps() -> nonogram.Nonogram:
    return nonogram.Nonogram.from_strings(
        "Many Gaps",
        15,
        15,
        "7 2,4 1,4 2,1,1,1 1,1,2 6,1,1 5,3 2,2,2 2,2,2 1,5 2,2,2 2,2,2 8 7 5",
        "2 1,1,1 3,1,1 2,1,1,2 1,2,5 1,1,4,4 1,4,2 1,1,3 2,2,4 2,4,2 1,1,2,1"
        " 2,2,1,2 2,6 1,7 3",
    )


def lambda_picture() -> nonogram.Nonogram:
    """The lambda picture, with zero padded rules."""
    # From http://twan.home.fmf.nl/blog/haskell/Nonograms.details
    return nonogram.Nonogram(
        name="Lambda",
        row_count=12,
        column_count=10,
        row_hints=hints.HintCollection.from_padded_rules(
            [
                [0, 0, 2],
                [0, 1, 2],
                [0, 1, 1],
                [0, 0, 2],
                [0, 0, 1],
                [0, 0, 3],
                [0, 0, 3],
                [0, 2, 2],
                [0, 2, 1],
                [2, 2, 1],
                [0, 2, 3],
                [0, 2, 2],
            ]
        ),
        column_hints=hints.HintCollection.from_padded_rules(
            [
                [2, 1],
                [1, 3],
                [2, 4],
                [3, 4],
                [0, 4],
                [0, 3],
                [0, 3],
                [0, 3],
                [0, 2],
                [0, 2],
            ]
        ),
    )


_SLOW_ROW_HINTS = (
    "3,2 10 11 2,3,3 2,1,2 1,1,2 1,1 1 1 1 1,9 2,13 4,16 6,19 6,21 5,23 7,25 7,26"
    " 10,11,14 7,3,12,15 6,2,28 3,28 4,12,15 21,1,1,1,1,1,1,1 20,1,1,1,1,1,1,1"
    " 21,1,1,1,1,1,1 34 6,21 2,1,7 16,9,2 2,5,3,6,14 1,4,2,1,1,4 10,17,7"
    " 4,7,3,1,7,6"
)


def _slow_column_hints(column_16: str) -> str:
    # The solvable and unsolvable variants only differ in column 16.
    return (
        "1,1 1,1,1 2,1,1 3,1,1 3,1,1 4,1,1 4,1,1 4,2,1 4,1,1 3,1,1 6,1,1 10,2,2"
        f" 4,6,2,3 5,4,1,3 4,5,4,1 4,4,3,1 {column_16} 5,1,1 5,1,1 6,1,1 7,1,1"
        " 8,1,2 8,4 9,1,1 10,1,1 11,2,2 12,2,2 14,2,2 15,1,1 15,1,1 16,1,1"
        " 2,10,5,1,2 2,17,1,2 2,12,3,2,1 2,8,8,1,2 3,8,4,2,1,1 3,18,2,1"
        " 4,13,2,2,1 27,1,2 3,13,3,1,2 3,19,1,2 3,13,3,1,1 3,19,3 4,12,3,1,1"
        " 3,18,1,2 2,11,3,1,1 15,2,1 8,2,1,1 6,1,1 4,1,1"
    )


def slow_unsolvable() -> nonogram.Nonogram:
    """About 4.6 million permutations, takes a while just to generate them."""
    return nonogram.Nonogram.from_strings(
        "Slow and Unsolvable", 34, 50, _SLOW_ROW_HINTS, _slow_column_hints("4,5,2,2")
    )


def slow_solvable() -> nonogram.Nonogram:
    return nonogram.Nonogram.from_strings(
        "Slow but Solvable", 34, 50, _SLOW_ROW_HINTS, _slow_column_hints("4,5,2,1")
    )


def all_nonograms() -> List[nonogram.Nonogram]:
    return [
        chair(),
        code_doc_example(),
        wikipedia_w(),
        permutation_test(),
        one_by_one(),
        one_by_two(),
        one_by_two_flipped(),
        impossible(),
        many_gaps(),
        lambda_picture(),
        slow_solvable(),
        slow_unsolvable(),
    ]
