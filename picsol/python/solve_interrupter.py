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

"""Python interrupter for solves."""

from collections.abc import Callable, Iterator
import contextlib
import itertools
import threading
from typing import Dict, Optional

from absl import logging


class CallbackError(Exception):
    """Exception raised when an interrupter callback fails.

    When using SolveInterrupter.interruption_callback(), this exception is raised
    when exiting the context manager if the callback failed. The error in the
    callback is the cause of this exception.
    """


class SolveInterrupter:
    """Interrupter used by the solver to know when it should interrupt the solve.

    Once triggered with interrupt(), an interrupter can't be reset. It can be
    triggered from any thread. The solver triggers it itself when the time limit
    is reached.

    Thread-safety: APIs on this class are safe to call concurrently from multiple
    threads.
    """

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._event = threading.Event()
        self._callbacks: Dict[int, Callable[[], None]] = {}
        self._next_callback_id = itertools.count()

    def interrupt(self) -> None:
        """Interrupts the solve as soon as possible.

        Once requested the interruption can't be reset. The user should use a new
        SolveInterrupter for later solves.

        It is safe to call this function multiple times. Only the first call will
        have visible effects; other calls will be ignored.
        """
        with self._lock:
            if self._event.is_set():
                return
            self._event.set()
            # Callbacks run under the lock so that none is pending once
            # interruption_callback() has unregistered it.
            for callback in list(self._callbacks.values()):
                callback()

    @property
    def interrupted(self) -> bool:
        """True if the solve interruption has been requested."""
        return self._event.is_set()

    @contextlib.contextmanager
    def interruption_callback(self, callback: Callable[[], None]) -> Iterator[None]:
        """Returns a context manager that (un)register the provided callback.

        The callback is immediately called if the interrupter has already been
        triggered. This is typically useful for a solver implementation so that it
        does not have to test `interrupted` to do the same thing it does in the
        callback. Simply registering the callback is enough.

        Exceptions raised in the callback are raised on exit from the context
        manager if no other error happens within the context. Else the exception is
        logged.

        Args:
          callback: The callback.

        Returns:
          A context manager.

        Raises:
          CallbackError: When exiting the context manager if an exception was raised
            in the callback.
        """
        callback_error: Optional[Exception] = None

        def protected_callback():
            """Calls callback() storing any exception in callback_error."""
            nonlocal callback_error
            try:
                callback()
            except Exception as e:  # pylint: disable=broad-exception-caught
                callback_error = e

        with self._lock:
            callback_id = next(self._next_callback_id)
            self._callbacks[callback_id] = protected_callback
            already_interrupted = self._event.is_set()
        if already_interrupted:
            protected_callback()

        no_exception_in_context = False
        try:
            yield
            no_exception_in_context = True
        finally:
            with self._lock:
                del self._callbacks[callback_id]
            if callback_error is not None:
                if no_exception_in_context:
                    raise CallbackError() from callback_error
                # We don't want the error in the context to be masked by an error in the
                # callback. We log it instead.
                logging.error(
                    "An exception occurred in callback but is masked by another"
                    " exception: %s",
                    repr(callback_error),
                )
