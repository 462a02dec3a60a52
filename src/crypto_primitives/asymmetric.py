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

"""High level API for key exchange and signature algorithms.

The algorithm constants in this module are resolved once, when the module is
first imported: each one is bound either to a provider implementation or to an
unsupported stand-in with the same interface. Code is therefore written once:

```python
algorithm = crypto_primitives.asymmetric.ecdsa_p256_sha256
try:
    key_pair = algorithm.key_pair_generator.generate_sync()
    signature = algorithm.sign_sync(b"payload", key_pair)
except crypto_primitives.errors.NotSupportedError:
    ...  # Pick another algorithm.
```

On an unsupported algorithm `key_pair_generator` is `None` and every operation
raises `NotSupportedError` (or, for the asynchronous operations, returns a
future failed with it). Use `is_supported` to check before calling.

Resolution honors `crypto_primitives.config.Config.from_env()`, so algorithms
can be disabled through the environment before the first import.
"""

from crypto_primitives import config as _config
from crypto_primitives._asymmetric import algorithms as _algorithms
from crypto_primitives._asymmetric import keys as _keys
from crypto_primitives._providers import openssl as _openssl
from crypto_primitives._providers import registry as _registry


KeyPairGenerator = _algorithms.KeyPairGenerator
KeyExchangeAlgorithm = _algorithms.KeyExchangeAlgorithm
SignatureAlgorithm = _algorithms.SignatureAlgorithm
KeyExchangeBackend = _algorithms.KeyExchangeBackend
SignatureBackend = _algorithms.SignatureBackend
Supported = _algorithms.Supported
Unsupported = _algorithms.Unsupported
Registry = _registry.Registry

KeyPair = _keys.KeyPair
PrivateKey = _keys.PrivateKey
PublicKey = _keys.PublicKey
SecretKey = _keys.SecretKey
Signature = _keys.Signature


# The registry holding every backend of the built-in providers.
default_registry = Registry()
_openssl.register(default_registry)


def resolve_key_exchange(
    name: str, config: _config.Config | None = None
) -> KeyExchangeAlgorithm:
    """Resolves a key exchange algorithm against `default_registry`.

    Unknown names resolve as unsupported.
    """
    return default_registry.resolve_key_exchange(name, config)


def resolve_signature(
    name: str, config: _config.Config | None = None
) -> SignatureAlgorithm:
    """Resolves a signature algorithm against `default_registry`.

    Unknown names resolve as unsupported.
    """
    return default_registry.resolve_signature(name, config)


_process_config = _config.Config.from_env()

ecdh_p256 = resolve_key_exchange("ecdh-p256", _process_config)
ecdh_p384 = resolve_key_exchange("ecdh-p384", _process_config)
ecdh_p521 = resolve_key_exchange("ecdh-p521", _process_config)

ecdsa_p256_sha256 = resolve_signature("ecdsa-p256-sha256", _process_config)
ecdsa_p384_sha256 = resolve_signature("ecdsa-p384-sha256", _process_config)
ecdsa_p521_sha256 = resolve_signature("ecdsa-p521-sha256", _process_config)
ecdsa_p384_sha384 = resolve_signature("ecdsa-p384-sha384", _process_config)
ecdsa_p521_sha512 = resolve_signature("ecdsa-p521-sha512", _process_config)
