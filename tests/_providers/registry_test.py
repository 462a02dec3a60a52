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

import logging

import pytest

from crypto_primitives import config as config_lib
from crypto_primitives import errors
from crypto_primitives._asymmetric import algorithms
from tests import test_support


class TestRegistry:
    def test_names(self, fake_registry):
        assert fake_registry.names() == ["fake-kx", "fake-sig"]

    def test_resolve_registered_key_exchange(self, fake_registry):
        algorithm = fake_registry.resolve_key_exchange("fake-kx")
        assert isinstance(algorithm, algorithms.KeyExchangeAlgorithm)
        assert isinstance(algorithm.resolution, algorithms.Supported)
        assert algorithm.is_supported
        assert algorithm.name == "fake-kx"

    def test_resolve_registered_signature(self, fake_registry):
        algorithm = fake_registry.resolve_signature("fake-sig")
        assert isinstance(algorithm, algorithms.SignatureAlgorithm)
        assert algorithm.is_supported

    def test_resolve_unregistered(self, fake_registry):
        algorithm = fake_registry.resolve_signature("ecdsa-p256-sha256")
        assert algorithm.resolution == algorithms.Unsupported(
            "ecdsa-p256-sha256"
        )
        assert algorithm.key_pair_generator is None

    def test_kinds_are_separate(self, fake_registry):
        # A key exchange backend is never used to resolve a signature.
        assert not fake_registry.resolve_signature("fake-kx").is_supported
        assert not fake_registry.resolve_key_exchange("fake-sig").is_supported

    def test_resolve_disabled(self, fake_registry):
        config = config_lib.Config().set_disabled_algorithms(["fake-kx"])
        algorithm = fake_registry.resolve_key_exchange("fake-kx", config)
        assert algorithm.resolution == algorithms.Unsupported("fake-kx")
        with pytest.raises(errors.NotSupportedError):
            algorithm.shared_secret_sync(None, None)

    def test_register_twice_fails(self, fake_registry):
        with pytest.raises(errors.InvalidArgumentError):
            fake_registry.register_key_exchange(
                "fake-kx", test_support.FakeKeyExchange()
            )

    def test_logs_unsupported_resolution(self, fake_registry, caplog):
        with caplog.at_level(logging.INFO):
            fake_registry.resolve_key_exchange("ecdh-p256")
        assert "ecdh-p256" in caplog.text
