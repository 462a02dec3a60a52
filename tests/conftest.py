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

"""Test fixtures to share between tests. Not part of the public API."""

import pytest

from crypto_primitives._asymmetric import algorithms
from crypto_primitives._providers import openssl
from crypto_primitives._providers import registry as registry_lib
from tests import test_support


@pytest.fixture
def recording_algorithm():
    """A hash algorithm keeping track of the sinks it creates."""
    return test_support.RecordingAlgorithm()


@pytest.fixture
def openssl_registry():
    """A registry with the backends of the `cryptography` provider."""
    registry = registry_lib.Registry()
    openssl.register(registry)
    return registry


@pytest.fixture
def fake_registry():
    """A registry with fake backends, under fake names."""
    registry = registry_lib.Registry()
    registry.register_key_exchange("fake-kx", test_support.FakeKeyExchange())
    registry.register_signature("fake-sig", test_support.FakeSignature())
    return registry


@pytest.fixture
def unsupported_key_exchange():
    return algorithms.KeyExchangeAlgorithm(
        "ecdh-p256", algorithms.Unsupported("ecdh-p256")
    )


@pytest.fixture
def unsupported_signature():
    return algorithms.SignatureAlgorithm(
        "ecdsa-p256-sha256", algorithms.Unsupported("ecdsa-p256-sha256")
    )
