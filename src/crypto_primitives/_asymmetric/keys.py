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

"""Opaque key material exchanged with asymmetric algorithms.

The encoding of the bytes is owned by the provider which produced them; this
module only defines the containers. Secret values compare in constant time and
never show up in `repr()`.
"""

import dataclasses

from crypto_primitives import _constant_time
from crypto_primitives._hashing import digest


@dataclasses.dataclass(frozen=True, eq=False, repr=False)
class _SecretBytes:
    """Bytes which must not leak through comparisons or logs."""

    data: bytes

    def __post_init__(self):
        object.__setattr__(self, "data", digest.to_bytes(self.data))

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return _constant_time.bytes_equal(self.data, other.data)

    def __hash__(self) -> int:
        return _constant_time.bytes_hash(self.data)

    def __bytes__(self) -> bytes:
        return self.data

    def __repr__(self) -> str:
        return f"{type(self).__name__}(...)"


class PrivateKey(_SecretBytes):
    """A private key, in the encoding of the provider that generated it."""


class SecretKey(_SecretBytes):
    """A secret derived by a key exchange."""


@dataclasses.dataclass(frozen=True)
class PublicKey:
    """A public key, in the encoding of the provider that generated it."""

    data: bytes

    def __post_init__(self):
        object.__setattr__(self, "data", digest.to_bytes(self.data))

    def __bytes__(self) -> bytes:
        return self.data


@dataclasses.dataclass(frozen=True)
class KeyPair:
    """A private key together with its public key."""

    private_key: PrivateKey
    public_key: PublicKey


@dataclasses.dataclass(frozen=True)
class Signature:
    """A signature, bundled with the public key needed to verify it."""

    data: bytes
    public_key: PublicKey

    def __post_init__(self):
        object.__setattr__(self, "data", digest.to_bytes(self.data))

    def __bytes__(self) -> bytes:
        return self.data
