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

"""Configures the solving of a nonogram."""

import dataclasses
import datetime
import os
from typing import Optional


@dataclasses.dataclass
class SolveParameters:
    """Parameters to control a single solve.

    Attributes:
      time_limit: The maximum time the solver should spend on the nonogram, or if
        None, then the time limit is infinite. This value is not a hard limit,
        the solve time may slightly exceed it: the limit is checked after each
        generated permutation and after each step. A zero time limit always results in a cancelled solve.
      use_multiple_cores: If true, the permutations of the lines are generated
        concurrently. This does not change the outcome, only the wall clock time.
      max_workers: The maximum number of concurrent workers when
        use_multiple_cores is true. If None, the number of processors.
    """

    time_limit: Optional[datetime.timedelta] = None
    use_multiple_cores: bool = True
    max_workers: Optional[int] = None

    def __post_init__(self) -> None:
        if self.time_limit is not None and self.time_limit < datetime.timedelta():
            raise ValueError(f"time_limit must be >= 0, got {self.time_limit}")
        if self.max_workers is not None and self.max_workers < 1:
            raise ValueError(f"max_workers must be >= 1, got {self.max_workers}")

    def worker_count(self) -> int:
        """Returns the number of workers to use for permutation generation."""
        if not self.use_multiple_cores:
            return 1
        if self.max_workers is not None:
            return self.max_workers
        return os.cpu_count() or 1
