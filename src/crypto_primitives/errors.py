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

"""Typed errors raised by every primitive in the package.

Each error also derives from the closest builtin exception so that callers
which only know about `ValueError`, `RuntimeError` or `NotImplementedError`
keep working.
"""


class CryptoError(Exception):
    """Base class for all errors raised by `crypto_primitives`."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class InvalidArgumentError(CryptoError, ValueError):
    """A required input was missing or malformed.

    Always raised before any computation starts, so nothing is ever partially
    processed.
    """


class InvalidStateError(CryptoError, RuntimeError):
    """An operation was invoked on an object that can no longer perform it.

    For example, adding data to a hash sink that has already been closed.
    """


class NotSupportedError(CryptoError, NotImplementedError):
    """The algorithm is not available on this platform or build.

    This is a recoverable, feature-detectable failure: callers should catch it
    and pick a different algorithm or fail the higher level operation.
    """

    def __init__(self, algorithm: str, message: str | None = None) -> None:
        if message is None:
            message = f"Algorithm '{algorithm}' is not supported here"
        super().__init__(message)
        self.algorithm = algorithm
