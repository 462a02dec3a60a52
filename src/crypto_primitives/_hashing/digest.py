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

"""The value produced by every hash computation."""

from collections.abc import Iterable
import dataclasses

from crypto_primitives import _constant_time
from crypto_primitives import errors


BytesLike = bytes | bytearray | memoryview | Iterable[int]


def to_bytes(data: BytesLike) -> bytes:
    """Copies `data` into an immutable `bytes` object.

    Raises:
        InvalidArgumentError: `data` is `None` or not a sequence of bytes.
    """
    if data is None:
        raise errors.InvalidArgumentError("Expected bytes, got None")
    if isinstance(data, str):
        raise errors.InvalidArgumentError(
            "Expected bytes, got str. Encode text before hashing it."
        )
    if isinstance(data, int):
        # `bytes(n)` would silently build `n` zero bytes.
        raise errors.InvalidArgumentError("Expected bytes, got int")
    try:
        return bytes(data)
    except (TypeError, ValueError) as e:
        raise errors.InvalidArgumentError(
            f"Expected a sequence of bytes, got {type(data).__name__}"
        ) from e


@dataclasses.dataclass(frozen=True, eq=False, repr=False)
class Digest:
    """A digest computed by a `HashAlgorithm`.

    Digests are frequently compared against attacker influenced values (for
    example when checking a MAC), so both equality and hashing run in time
    independent of where two values first differ. The representation never
    includes the content.
    """

    digest_value: bytes

    def __post_init__(self):
        object.__setattr__(self, "digest_value", to_bytes(self.digest_value))

    @property
    def digest_hex(self) -> str:
        """Hexadecimal, human readable, equivalent of `digest`."""
        return self.digest_value.hex()

    @property
    def digest_size(self) -> int:
        """The size, in bytes, of the digest."""
        return len(self.digest_value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Digest):
            return NotImplemented
        return _constant_time.bytes_equal(self.digest_value, other.digest_value)

    def __hash__(self) -> int:
        return _constant_time.bytes_hash(self.digest_value)

    def __bytes__(self) -> bytes:
        return self.digest_value

    def __len__(self) -> int:
        return len(self.digest_value)

    def __repr__(self) -> str:
        return "Digest(...)"

    __str__ = __repr__
