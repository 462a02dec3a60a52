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

"""Comparison and hashing of secret-dependent byte strings.

Digests, MACs and shared secrets are routinely compared against attacker
controlled input. The helpers here never exit early on the first differing
byte, so the running time only depends on the lengths of the inputs.
"""

from cryptography.hazmat.primitives import constant_time


_HASH_SEED = 0x811C9DC5
_HASH_PRIME = 0x01000193
_HASH_MASK = 0xFFFFFFFF


def bytes_equal(a: bytes, b: bytes) -> bool:
    """Compares two byte strings in constant time.

    Strings of different lengths are never equal. The length check leaks only
    the lengths, which are public for every value compared here.
    """
    if len(a) != len(b):
        return False
    return constant_time.bytes_eq(a, b)


def bytes_hash(data: bytes) -> int:
    """Returns a 32-bit hash code folding every byte of `data`.

    The loop has no data dependent branches. Equal inputs always produce equal
    codes, which is what `__hash__` needs to agree with `bytes_equal`.
    """
    h = _HASH_SEED ^ len(data)
    for byte in data:
        h = ((h ^ byte) * _HASH_PRIME) & _HASH_MASK
    return h
