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

import collections
import itertools
from typing import List, Sequence, Tuple

from absl.testing import absltest
from absl.testing import parameterized
import numpy as np

from picsol.python import errors
from picsol.python import permutations
from picsol.python import solve_interrupter


def _generate(hint: Sequence[int], length: int) -> List[str]:
    """Returns the permutations as strings like "0110", in generation order."""
    generated = []
    completed = permutations.generate_permutations(
        hint, length, lambda p: generated.append(p)
    )
    assert completed
    for permutation in generated:
        assert permutation.dtype == bool and permutation.shape == (length,)
    return ["".join("1" if v else "0" for v in p) for p in generated]


def _runs(cells: Tuple[bool, ...]) -> Tuple[int, ...]:
    """Returns the hint of a line, (0,) if empty."""
    runs = [len(list(g)) for filled, g in itertools.groupby(cells) if filled]
    return tuple(runs) or (0,)


class GeneratePermutationsTest(parameterized.TestCase):

    @parameterized.named_parameters(
        dict(testcase_name="empty_line", hint=(0,), length=3, expected=["000"]),
        dict(testcase_name="full_line", hint=(3,), length=3, expected=["111"]),
        dict(testcase_name="gaps_fill_line", hint=(1, 2), length=4, expected=["1011"]),
        dict(testcase_name="single", hint=(1,), length=1, expected=["1"]),
        dict(
            testcase_name="single_run", hint=(2,), length=4, expected=["1100", "0110", "0011"]
        ),
        dict(
            testcase_name="two_runs",
            hint=(1, 1),
            length=4,
            expected=["1010", "1001", "0101"],
        ),
    )
    def test_small_lines(self, hint, length, expected) -> None:
        self.assertEqual(_generate(hint, length), expected)

    def test_expensive_order(self) -> None:
        self.assertEqual(
            _generate((1, 2), 7),
            [
                "1011000",
                "1001100",
                "1000110",
                "1000011",
                "0101100",
                "0100110",
                "0100011",
                "0010110",
                "0010011",
                "0001011",
            ],
        )

    def test_matches_brute_force(self) -> None:
        for length in range(1, 13):
            expected = collections.defaultdict(set)
            for cells in itertools.product((False, True), repeat=length):
                expected[_runs(cells)].add(
                    "".join("1" if v else "0" for v in cells)
                )
            for hint, lines in expected.items():
                with self.subTest(hint=hint, length=length):
                    generated = _generate(hint, length)
                    self.assertLen(set(generated), len(generated))
                    self.assertSetEqual(set(generated), lines)
                    self.assertEqual(
                        permutations.count_permutations(hint, length), len(lines)
                    )

    @parameterized.named_parameters(
        dict(testcase_name="sum_too_large", hint=(5,), length=4),
        dict(testcase_name="gaps_too_large", hint=(2, 2), length=4),
        dict(testcase_name="empty_hint", hint=(), length=4),
        dict(testcase_name="negative", hint=(-1, 2), length=4),
    )
    def test_invalid_hint(self, hint, length) -> None:
        with self.assertRaises(errors.InvalidHintError):
            permutations.generate_permutations(hint, length, lambda p: None)

    def test_stops_when_interrupted(self) -> None:
        interrupter = solve_interrupter.SolveInterrupter()
        generated = []

        def sink(permutation: np.ndarray) -> None:
            generated.append(permutation)
            if len(generated) == 5:
                interrupter.interrupt()

        self.assertFalse(
            permutations.generate_permutations((1, 1, 1), 20, sink, interrupter)
        )
        self.assertLen(generated, 5)

    def test_single_run_stops_when_interrupted(self) -> None:
        interrupter = solve_interrupter.SolveInterrupter()
        generated = []

        def sink(permutation: np.ndarray) -> None:
            generated.append(permutation)
            interrupter.interrupt()

        self.assertFalse(
            permutations.generate_permutations((2,), 10, sink, interrupter)
        )
        self.assertLen(generated, 1)

    def test_not_interrupted(self) -> None:
        interrupter = solve_interrupter.SolveInterrupter()
        self.assertTrue(
            permutations.generate_permutations((2, 1), 6, lambda p: None, interrupter)
        )


class CountPermutationsTest(parameterized.TestCase):

    @parameterized.parameters(
        ((0,), 5, 1),
        ((5,), 5, 1),
        ((2,), 5, 4),
        ((1, 1), 5, 6),
        ((1, 2), 7, 10),
        ((1, 1, 1), 20, 816),
    )
    def test_count(self, hint, length, expected) -> None:
        self.assertEqual(permutations.count_permutations(hint, length), expected)

    def test_invalid_hint(self) -> None:
        with self.assertRaises(errors.InvalidHintError):
            permutations.count_permutations((3, 3), 6)


if __name__ == "__main__":
    absltest.main()
