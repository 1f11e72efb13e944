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

"""Solves the example nonograms and prints the results.

  python -m picsol.samples.solve_examples --name=chair --time_limit=5
"""

from collections.abc import Sequence
import datetime

from absl import app
from absl import flags

from picsol.python import example_nonograms
from picsol.python import parameters
from picsol.python import rendering
from picsol.python import solve

_TIME_LIMIT = flags.DEFINE_float(
    "time_limit", 30.0, "Time limit per nonogram in seconds, 0 for no limit."
)
_USE_MULTIPLE_CORES = flags.DEFINE_bool(
    "use_multiple_cores",
    True,
    "Whether the permutations are generated concurrently.",
)
_NAME = flags.DEFINE_string(
    "name", "", "Only solve the nonograms whose name contains this text."
)


def main(argv: Sequence[str]) -> None:
    if len(argv) > 1:
        raise app.UsageError("Too many command-line arguments.")

    time_limit = None
    if _TIME_LIMIT.value > 0:
        time_limit = datetime.timedelta(seconds=_TIME_LIMIT.value)
    params = parameters.SolveParameters(
        time_limit=time_limit, use_multiple_cores=_USE_MULTIPLE_CORES.value
    )

    for puzzle in example_nonograms.all_nonograms():
        if _NAME.value.lower() not in puzzle.name.lower():
            continue
        outcome = solve.solve(puzzle, params=params)
        print(rendering.render_to_string(outcome))


if __name__ == "__main__":
    app.run(main)
