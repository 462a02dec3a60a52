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

import pytest

import crypto_primitives
from crypto_primitives import errors
from crypto_primitives import hashing


class TestHashingAPI:
    def test_hash_default_is_sha256(self):
        assert hashing.hash(b"Test string") == hashing.sha256.hash_sync(
            b"Test string"
        )

    def test_hash_named(self):
        digest = hashing.hash(b"", algorithm="blake3")
        assert digest == hashing.blake3.hash_sync(b"")

    def test_hash_unknown_algorithm(self):
        with pytest.raises(errors.NotSupportedError):
            hashing.hash(b"", algorithm="md4")

    def test_hash_none(self):
        with pytest.raises(errors.InvalidArgumentError):
            hashing.hash(None)

    def test_empty_input_has_full_length(self):
        digest = hashing.sha256.hash_sync(b"")
        assert hashing.sha256.hash_length == 32
        assert digest.digest_size == 32

    def test_types(self):
        assert isinstance(hashing.sha256, hashing.HashAlgorithm)
        assert isinstance(hashing.sha256.new_sink(), hashing.HashSink)
        assert isinstance(hashing.sha256.hash_sync(b""), hashing.Digest)

    def test_package_exports(self):
        assert crypto_primitives.hashing.sha256 is hashing.sha256
        assert crypto_primitives.__version__
