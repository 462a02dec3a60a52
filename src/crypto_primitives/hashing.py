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

"""High level API for the hashing interface of `crypto_primitives` library.

Every hash algorithm is an immutable descriptor which can be used to hash data
in one call:

```python
digest = crypto_primitives.hashing.sha256.hash_sync(b"payload")
```

or incrementally, by streaming chunks into a sink:

```python
sink = crypto_primitives.hashing.sha256.new_sink()
for chunk in chunks:
    sink.add(chunk)
digest = sink.close_sync()
```

Both forms produce the same digest for the same bytes, regardless of how the
input is split. From a coroutine, `hash()` and `HashSink.close()` defer the
computation to the running event loop:

```python
digest = await crypto_primitives.hashing.blake3.hash(b"payload")
```

Digests compare in constant time, so they can be checked directly against
untrusted values.

The API defined here is stable and backwards compatible.
"""

from crypto_primitives._hashing import digest as _digest
from crypto_primitives._hashing import hashing as _hashing
from crypto_primitives._hashing import memory as _memory


Digest = _digest.Digest
HashAlgorithm = _hashing.HashAlgorithm
HashSink = _hashing.HashSink

sha1 = _memory.sha1
sha224 = _memory.sha224
sha256 = _memory.sha256
sha384 = _memory.sha384
sha512 = _memory.sha512
sha3_224 = _memory.sha3_224
sha3_256 = _memory.sha3_256
sha3_384 = _memory.sha3_384
sha3_512 = _memory.sha3_512
blake2b = _memory.blake2b
blake2s = _memory.blake2s
blake3 = _memory.blake3

get = _memory.get
available = _memory.available


def hash(data: _digest.BytesLike, algorithm: str = "sha256") -> Digest:
    """Hashes `data` with the algorithm called `algorithm`.

    Args:
        data: The bytes to hash.
        algorithm: The name of the hash algorithm. Defaults to SHA256.

    Returns:
        The digest of `data`.

    Raises:
        InvalidArgumentError: `data` is `None`.
        NotSupportedError: There is no algorithm named `algorithm`.
    """
    return get(algorithm).hash_sync(data)
