# Copyright 2025 The Sigstore Authors
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#      http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Deferred execution of synchronous primitives on the running event loop.

None of the primitives are computed concurrently: the asynchronous entry points
only move *when* the synchronous computation runs, not *how*. The work is
submitted to the caller's event loop and runs to completion in one step.
"""

import asyncio
from collections.abc import Callable
from typing import TypeVar


_T = TypeVar("_T")


def defer(func: Callable[..., _T], /, *args, **kwargs) -> asyncio.Future[_T]:
    """Schedules `func(*args, **kwargs)` on the running event loop.

    Args:
        func: The synchronous computation to run.
        *args: Positional arguments for `func`, already validated.
        **kwargs: Keyword arguments for `func`, already validated.

    Returns:
        A future resolved with the result of `func`, or failed with the
        exception it raised.

    Raises:
        RuntimeError: There is no running event loop.
    """
    loop = asyncio.get_running_loop()
    future = loop.create_future()

    def _run() -> None:
        # Scheduled work always runs to completion, even if the awaiting task
        # was cancelled in the meantime.
        try:
            result = func(*args, **kwargs)
        except Exception as e:
            if not future.cancelled():
                future.set_exception(e)
        else:
            if not future.cancelled():
                future.set_result(result)

    loop.call_soon(_run)
    return future
