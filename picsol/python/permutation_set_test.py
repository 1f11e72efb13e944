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

from absl.testing import absltest
import numpy as np

from picsol.python import permutation_set


def _patterns(*lines: str) -> np.ndarray:
    return np.array([[c == "1" for c in line] for line in lines], dtype=bool)


class PermutationSetTest(absltest.TestCase):

    def test_new_set_is_empty(self) -> None:
        permutations = permutation_set.PermutationSet(3, 4)
        self.assertEqual(permutations.line_count, 3)
        self.assertEqual(permutations.line_length, 4)
        self.assertEqual(permutations.counts(), [0, 0, 0])
        self.assertEqual(permutations.total_count(), 0)
        self.assertEqual(permutations.patterns(1).shape, (0, 4))

    def test_set_patterns(self) -> None:
        permutations = permutation_set.PermutationSet(2, 4)
        permutations.set_patterns(0, _patterns("1010", "1001", "0101"))
        permutations.set_patterns(1, _patterns("1111"))
        self.assertEqual(permutations.counts(), [3, 1])
        self.assertEqual(permutations.total_count(), 4)
        np.testing.assert_array_equal(
            permutations.patterns(1), _patterns("1111")
        )

    def test_set_patterns_wrong_length(self) -> None:
        permutations = permutation_set.PermutationSet(1, 4)
        with self.assertRaisesRegex(ValueError, "length 4"):
            permutations.set_patterns(0, _patterns("101"))
        with self.assertRaises(ValueError):
            permutations.set_patterns(0, np.zeros(4, dtype=bool))

    def test_prune(self) -> None:
        permutations = permutation_set.PermutationSet(1, 4)
        permutations.set_patterns(0, _patterns("1010", "1001", "0101"))
        # Removes the permutations with the last cell filled.
        self.assertTrue(permutations.prune(0, lambda p: p[:, 3]))
        np.testing.assert_array_equal(permutations.patterns(0), _patterns("1010"))

    def test_prune_nothing(self) -> None:
        permutations = permutation_set.PermutationSet(1, 4)
        permutations.set_patterns(0, _patterns("1010", "1001"))
        self.assertFalse(permutations.prune(0, lambda p: p[:, 1]))
        self.assertEqual(permutations.count(0), 2)

    def test_prune_everything(self) -> None:
        permutations = permutation_set.PermutationSet(1, 4)
        permutations.set_patterns(0, _patterns("1010", "1001"))
        self.assertTrue(permutations.prune(0, lambda p: p[:, 0]))
        self.assertEqual(permutations.count(0), 0)

    def test_prune_empty_line(self) -> None:
        permutations = permutation_set.PermutationSet(1, 4)
        self.assertFalse(
            permutations.prune(0, lambda p: np.ones(p.shape[0], dtype=bool))
        )

    def test_first_patterns(self) -> None:
        permutations = permutation_set.PermutationSet(2, 2)
        permutations.set_patterns(0, _patterns("01", "10"))
        first = list(permutations.first_patterns())
        np.testing.assert_array_equal(first[0], [False, True])
        self.assertIsNone(first[1])


if __name__ == "__main__":
    absltest.main()
