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

"""Hash algorithms computing digests of in-memory data.

Example usage:
```python
>>> sink = sha256.new_sink()
>>> sink.add(b"abcd")
>>> sink.close_sync().digest_hex
'88d4266fd4e6338d13b845fcf289579d209c897823b9217da3e161936f031589'
```

Or, passing the data directly:
```python
>>> sha256.hash_sync(b"abcd").digest_hex
'88d4266fd4e6338d13b845fcf289579d209c897823b9217da3e161936f031589'
```
"""

from collections.abc import Callable
import hashlib
from typing import Protocol

import blake3 as blake3_lib
from typing_extensions import override

from crypto_primitives import errors
from crypto_primitives._hashing import hashing


class _HashObject(Protocol):
    """The `update`/`digest` interface shared by `hashlib` and `blake3`."""

    def update(self, data: memoryview, /) -> object: ...

    def digest(self) -> bytes: ...


class _StreamingSink(hashing.HashSink):
    """A sink forwarding every window to an incremental hash object."""

    def __init__(self, hasher: _HashObject):
        super().__init__()
        self._hasher = hasher

    @override
    def _update(self, data: memoryview) -> None:
        self._hasher.update(data)

    @override
    def _finalize(self) -> bytes:
        return self._hasher.digest()


class StreamingHashAlgorithm(hashing.HashAlgorithm):
    """A hash algorithm backed by an incremental hash object factory."""

    def __init__(
        self,
        name: str,
        factory: Callable[[], _HashObject],
        *,
        hash_length: int,
        block_length: int,
    ):
        """Initializes the descriptor.

        Args:
            name: The canonical name of the algorithm.
            factory: Returns a fresh object with `update` and `digest` methods.
            hash_length: The size, in bytes, of the produced digests.
            block_length: The size, in bytes, of the internal block.
        """
        self._name = name
        self._factory = factory
        self._hash_length = hash_length
        self._block_length = block_length

    @property
    @override
    def name(self) -> str:
        return self._name

    @property
    @override
    def hash_length(self) -> int:
        return self._hash_length

    @property
    @override
    def block_length(self) -> int:
        return self._block_length

    @override
    def new_sink(self) -> hashing.HashSink:
        return _StreamingSink(self._factory())


def _hashlib_algorithm(name: str, hash_length: int, block_length: int):
    return StreamingHashAlgorithm(
        name,
        lambda: hashlib.new(name),
        hash_length=hash_length,
        block_length=block_length,
    )


sha1 = _hashlib_algorithm("sha1", 20, 64)
sha224 = _hashlib_algorithm("sha224", 28, 64)
sha256 = _hashlib_algorithm("sha256", 32, 64)
sha384 = _hashlib_algorithm("sha384", 48, 128)
sha512 = _hashlib_algorithm("sha512", 64, 128)
sha3_224 = _hashlib_algorithm("sha3_224", 28, 144)
sha3_256 = _hashlib_algorithm("sha3_256", 32, 136)
sha3_384 = _hashlib_algorithm("sha3_384", 48, 104)
sha3_512 = _hashlib_algorithm("sha3_512", 64, 72)
blake2b = _hashlib_algorithm("blake2b", 64, 128)
blake2s = _hashlib_algorithm("blake2s", 32, 64)
blake3 = StreamingHashAlgorithm(
    "blake3", blake3_lib.blake3, hash_length=32, block_length=64
)


_ALGORITHMS: dict[str, hashing.HashAlgorithm] = {
    algorithm.name: algorithm
    for algorithm in (
        sha1,
        sha224,
        sha256,
        sha384,
        sha512,
        sha3_224,
        sha3_256,
        sha3_384,
        sha3_512,
        blake2b,
        blake2s,
        blake3,
    )
}


def available() -> list[str]:
    """Returns the names of all hash algorithms, sorted."""
    return sorted(_ALGORITHMS)


def get(name: str) -> hashing.HashAlgorithm:
    """Returns the hash algorithm with the given name.

    Raises:
        NotSupportedError: There is no algorithm named `name`.
    """
    try:
        return _ALGORITHMS[name]
    except KeyError:
        raise errors.NotSupportedError(name) from None
