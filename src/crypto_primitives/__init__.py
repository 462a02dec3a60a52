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

"""Uniform interface over cryptographic primitives.

The API is split into 2 main components (and glue modules for configuration and
errors):

- `crypto_primitives.hashing`: hash algorithms (SHA-1, SHA-2, SHA-3, BLAKE2
  and BLAKE3). Every algorithm can hash data in one call or incrementally,
  through a sink which accepts the data in chunks. The result is a `Digest`,
  which compares in constant time.
- `crypto_primitives.asymmetric`: key exchange (ECDH) and signature (ECDSA)
  algorithms on the NIST curves. Each algorithm constant is resolved once, when
  the package is imported, either to an implementation from a provider or to an
  unsupported stand-in which fails every operation with `NotSupportedError`.

Every operation has a synchronous form (`hash_sync`, `sign_sync`, ...) and an
asynchronous form (`hash`, `sign`, ...) which defers the synchronous one to the
running event loop:

```python
digest = crypto_primitives.hashing.sha256.hash_sync(b"payload")

async def sign(payload):
    algorithm = crypto_primitives.asymmetric.ecdsa_p256_sha256
    key_pair = await algorithm.key_pair_generator.generate()
    return await algorithm.sign(payload, key_pair)
```

Errors are reported with the types in `crypto_primitives.errors`. Nothing is
retried and no algorithm is ever silently replaced with another one.
"""

from crypto_primitives import asymmetric
from crypto_primitives import config
from crypto_primitives import errors
from crypto_primitives import hashing


__version__ = "1.0.0"


__all__ = ["asymmetric", "config", "errors", "hashing"]
