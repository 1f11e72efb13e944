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

"""Errors raised while building a nonogram.

Both errors derive from ValueError, the standard Python error for an invalid
argument. They are raised before any solving happens: an unsolvable or
cancelled solve is reported in the SolveOutcome, never as an exception.
"""


class InvalidHintError(ValueError):
    """A hint sequence is malformed or can't fit in its line."""


class InvalidNonogramError(ValueError):
    """The nonogram dimensions don't match its hints."""
