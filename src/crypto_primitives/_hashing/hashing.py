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

"""Machinery for computing digests incrementally.

We define an abstract `HashAlgorithm` class which can be used in type
annotations and is at the root of the hash algorithms hierarchy. Algorithms are
immutable descriptors: all state of an ongoing computation lives in a
`HashSink`, obtained from `HashAlgorithm.new_sink()`.

One-shot hashing is exactly streaming hashing of a single chunk:

```python
>>> sink = memory.sha256.new_sink()
>>> sink.add(b"Test ")
>>> sink.add(b"string")
>>> sink.close_sync() == memory.sha256.hash_sync(b"Test string")
True
```
"""

import abc
import asyncio
import enum

from crypto_primitives import _deferred
from crypto_primitives import errors
from crypto_primitives._hashing import digest as digest_lib


class _State(enum.Enum):
    OPEN = enum.auto()
    # No more input is accepted, the digest has not been returned yet.
    FINISHED = enum.auto()
    # `close()` has been called, `close_sync()` is scheduled.
    CLOSING = enum.auto()
    CLOSED = enum.auto()


def _as_view(chunk: digest_lib.BytesLike) -> memoryview:
    try:
        return memoryview(chunk).cast("B")
    except TypeError:
        return memoryview(digest_lib.to_bytes(chunk))


class HashSink(metaclass=abc.ABCMeta):
    """A single-use accumulator of the bytes to be hashed.

    A sink is owned by exactly one caller for the duration of one computation
    and is not safe for simultaneous writers. Once `close_sync()` returned,
    every method raises `InvalidStateError`.

    Subclasses implement `_update` and `_finalize`; the lifecycle checks are
    handled here.
    """

    def __init__(self):
        self._state = _State.OPEN

    @property
    def is_closed(self) -> bool:
        """Whether the digest has already been returned."""
        return self._state is _State.CLOSED

    def add(self, chunk: digest_lib.BytesLike) -> None:
        """Appends `chunk` to the data to be hashed."""
        self._check_open()
        view = _as_view(chunk)
        self.add_slice(view, 0, len(view), False)

    def add_slice(
        self,
        chunk: digest_lib.BytesLike,
        start: int,
        end: int,
        is_last: bool = False,
    ) -> None:
        """Appends the window `chunk[start:end]` to the data to be hashed.

        The digest only depends on the concatenation of all windows, in call
        order, not on how the input was split.

        Args:
            chunk: The bytes to take the window from.
            start: Index of the first byte of the window.
            end: Index one past the last byte of the window.
            is_last: If set, this is the last input. The sink no longer accepts
              data afterwards, but `close_sync()` must still be called to
              obtain the digest.

        Raises:
            InvalidArgumentError: `chunk` is `None` or the window is outside of
              `chunk`.
            InvalidStateError: The sink no longer accepts input.
        """
        self._check_open()
        view = _as_view(chunk)
        if not 0 <= start <= end <= len(view):
            raise errors.InvalidArgumentError(
                f"Invalid window [{start}, {end}) for {len(view)} bytes"
            )

        if start != end:
            self._update(view[start:end])
        if is_last:
            self._state = _State.FINISHED

    def close_sync(self) -> digest_lib.Digest:
        """Computes the digest of all the data added to the sink.

        This is the terminal operation of the sink.

        Raises:
            InvalidStateError: The sink was already closed.
        """
        if self._state is _State.CLOSED:
            raise errors.InvalidStateError("Sink has already been closed")
        self._state = _State.CLOSED
        return digest_lib.Digest(self._finalize())

    def close(self) -> asyncio.Future[digest_lib.Digest]:
        """Asynchronous version of `close_sync()`.

        Input is no longer accepted once this returns. Must be called from a
        coroutine running in an event loop.
        """
        if self._state in (_State.CLOSING, _State.CLOSED):
            raise errors.InvalidStateError("Sink has already been closed")
        future = _deferred.defer(self.close_sync)
        self._state = _State.CLOSING
        return future

    def _check_open(self) -> None:
        if self._state is not _State.OPEN:
            raise errors.InvalidStateError(
                "Cannot add data to a sink which no longer accepts input"
            )

    @abc.abstractmethod
    def _update(self, data: memoryview) -> None:
        """Processes the next (non-empty) piece of input."""
        pass

    @abc.abstractmethod
    def _finalize(self) -> bytes:
        """Returns the raw digest of all processed input."""
        pass


class HashAlgorithm(metaclass=abc.ABCMeta):
    """Generic hash algorithm.

    Instances are immutable and hold no state of any computation, so a single
    instance can be shared by any number of concurrent callers.
    """

    @property
    @abc.abstractmethod
    def name(self) -> str:
        """The canonical name of the algorithm."""
        pass

    @property
    @abc.abstractmethod
    def hash_length(self) -> int:
        """The size, in bytes, of the digests produced by the algorithm."""
        pass

    @property
    @abc.abstractmethod
    def block_length(self) -> int:
        """The size, in bytes, of the internal block of the algorithm."""
        pass

    @abc.abstractmethod
    def new_sink(self) -> HashSink:
        """Returns a fresh sink to stream data to be hashed."""
        pass

    def hash_sync(self, data: digest_lib.BytesLike) -> digest_lib.Digest:
        """Computes the digest of `data`.

        Raises:
            InvalidArgumentError: `data` is `None`.
        """
        view = _as_view(data)
        sink = self.new_sink()
        sink.add(view)
        return sink.close_sync()

    def hash(
        self, data: digest_lib.BytesLike
    ) -> asyncio.Future[digest_lib.Digest]:
        """Asynchronous version of `hash_sync()`.

        Arguments are validated before the computation is scheduled. Must be
        called from a coroutine running in an event loop.

        Raises:
            InvalidArgumentError: `data` is `None`.
        """
        # Copy now, callers may reuse their buffer before the work runs.
        data = bytes(_as_view(data))
        return _deferred.defer(self.hash_sync, data)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"
