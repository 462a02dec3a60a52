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

"""Registry of provider backends and resolution of algorithm descriptors.

Providers register a backend for every algorithm they can actually perform.
Resolution then binds a name to a `Supported` backend if one was registered
(and the algorithm is not disabled by configuration), or to `Unsupported`
otherwise. Resolution happens once; the returned descriptors are immutable.
"""

import logging

from crypto_primitives import config as config_lib
from crypto_primitives import errors
from crypto_primitives._asymmetric import algorithms


logger = logging.getLogger(__name__)


class Registry:
    """Backends registered by providers, keyed by algorithm name."""

    def __init__(self):
        self._key_exchange: dict[str, algorithms.KeyExchangeBackend] = {}
        self._signature: dict[str, algorithms.SignatureBackend] = {}

    def register_key_exchange(
        self, name: str, backend: algorithms.KeyExchangeBackend
    ) -> None:
        """Registers the backend of a key exchange algorithm.

        Raises:
            InvalidArgumentError: A backend is already registered for `name`.
        """
        self._register(self._key_exchange, name, backend)

    def register_signature(
        self, name: str, backend: algorithms.SignatureBackend
    ) -> None:
        """Registers the backend of a signature algorithm.

        Raises:
            InvalidArgumentError: A backend is already registered for `name`.
        """
        self._register(self._signature, name, backend)

    def _register(self, items: dict, name: str, backend: object) -> None:
        if name in items:
            raise errors.InvalidArgumentError(
                f"A backend for '{name}' is already registered"
            )
        logger.debug("Registered backend for %s", name)
        items[name] = backend

    def names(self) -> list[str]:
        """Returns the names of all algorithms with a registered backend."""
        return sorted([*self._key_exchange, *self._signature])

    def resolve_key_exchange(
        self, name: str, config: config_lib.Config | None = None
    ) -> algorithms.KeyExchangeAlgorithm:
        """Resolves the key exchange algorithm called `name`."""
        return algorithms.KeyExchangeAlgorithm(
            name, self._resolve(self._key_exchange, name, config)
        )

    def resolve_signature(
        self, name: str, config: config_lib.Config | None = None
    ) -> algorithms.SignatureAlgorithm:
        """Resolves the signature algorithm called `name`."""
        return algorithms.SignatureAlgorithm(
            name, self._resolve(self._signature, name, config)
        )

    def _resolve(
        self, items: dict, name: str, config: config_lib.Config | None
    ) -> algorithms.Supported | algorithms.Unsupported:
        if config is None:
            config = config_lib.Config()

        backend = items.get(name)
        if backend is None:
            logger.info("No provider for %s, resolved as unsupported", name)
            return algorithms.Unsupported(name)
        if config.is_disabled(name):
            logger.info("%s disabled by configuration", name)
            return algorithms.Unsupported(name)

        logger.debug("Resolved %s to %s", name, type(backend).__name__)
        return algorithms.Supported(backend)
