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

import threading

from absl.testing import absltest
from picsol.python import solve_interrupter


class SolveInterrupterTest(absltest.TestCase):

    def test_new_interrupter_is_not_interrupted(self) -> None:
        self.assertFalse(solve_interrupter.SolveInterrupter().interrupted)

    def test_interrupt_is_idempotent(self) -> None:
        calls = []
        interrupter = solve_interrupter.SolveInterrupter()
        with interrupter.interruption_callback(lambda: calls.append(1)):
            interrupter.interrupt()
            interrupter.interrupt()
        self.assertTrue(interrupter.interrupted)
        self.assertEqual(calls, [1])

    def test_interrupt_from_other_thread(self) -> None:
        interrupter = solve_interrupter.SolveInterrupter()
        called = threading.Event()
        with interrupter.interruption_callback(called.set):
            thread = threading.Thread(target=interrupter.interrupt)
            thread.start()
            thread.join()
            self.assertTrue(called.is_set())
        self.assertTrue(interrupter.interrupted)


class InterruptionCallbackTest(absltest.TestCase):

    def setUp(self) -> None:
        super().setUp()
        self.interrupter = solve_interrupter.SolveInterrupter()
        self.num_calls = 0

    def callback(self) -> None:
        self.num_calls += 1

    def test_called_on_interrupt(self) -> None:
        with self.interrupter.interruption_callback(self.callback):
            self.assertEqual(self.num_calls, 0)
            self.interrupter.interrupt()
            self.assertEqual(self.num_calls, 1)
        self.assertEqual(self.num_calls, 1)

    def test_called_immediately_if_already_interrupted(self) -> None:
        self.interrupter.interrupt()
        with self.interrupter.interruption_callback(self.callback):
            self.assertEqual(self.num_calls, 1)
        self.assertEqual(self.num_calls, 1)

    def test_not_called_after_exit(self) -> None:
        with self.interrupter.interruption_callback(self.callback):
            pass
        self.interrupter.interrupt()
        self.assertEqual(self.num_calls, 0)

    def test_error_in_callback_raised_on_exit(self) -> None:
        def failing_callback():
            self.callback()
            raise ValueError("error-in-callback")

        has_finished = False
        with self.assertRaises(solve_interrupter.CallbackError) as cm:
            with self.interrupter.interruption_callback(failing_callback):
                # interrupt() itself doesn't raise.
                self.interrupter.interrupt()
                has_finished = True
        self.assertIsInstance(cm.exception.__cause__, ValueError)
        self.assertEqual(str(cm.exception.__cause__), "error-in-callback")
        self.assertTrue(has_finished)
        self.assertEqual(self.num_calls, 1)

    def test_error_in_context_is_not_masked(self) -> None:
        def failing_callback():
            self.callback()
            raise ValueError("error-in-callback")

        with self.assertRaisesRegex(ValueError, "error-in-context"):
            with self.interrupter.interruption_callback(failing_callback):
                self.interrupter.interrupt()
                raise ValueError("error-in-context")
        self.assertEqual(self.num_calls, 1)


if __name__ == "__main__":
    absltest.main()
