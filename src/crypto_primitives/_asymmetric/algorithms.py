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

"""Capability descriptors for key exchange and signature algorithms.

A descriptor carries the name of an algorithm and how it was resolved when the
process started: either `Supported`, wrapping a backend from a provider, or
`Unsupported`. Both resolutions expose the same interface, so calling code is
written once. On an unsupported algorithm every operation fails with
`NotSupportedError`, synchronously for the `*_sync` methods and as a failed
future for the asynchronous ones.

Backends are the boundary with providers. A provider which cannot perform an
algorithm must not register a backend for it.
"""

import abc
import asyncio
import dataclasses
from typing import Generic, NoReturn, TypeVar

from crypto_primitives import _deferred
from crypto_primitives import errors
from crypto_primitives._asymmetric import keys
from crypto_primitives._hashing import digest


class KeyPairGenerator(metaclass=abc.ABCMeta):
    """Generates key pairs for one algorithm."""

    @abc.abstractmethod
    def generate_sync(self) -> keys.KeyPair:
        """Generates a new random key pair."""
        pass

    def generate(self) -> asyncio.Future[keys.KeyPair]:
        """Asynchronous version of `generate_sync()`."""
        return _deferred.defer(self.generate_sync)


class KeyExchangeBackend(metaclass=abc.ABCMeta):
    """Provider implementation of a key exchange algorithm."""

    @property
    @abc.abstractmethod
    def key_pair_generator(self) -> KeyPairGenerator:
        pass

    @abc.abstractmethod
    def shared_secret_sync(
        self,
        local_private_key: keys.PrivateKey,
        remote_public_key: keys.PublicKey,
    ) -> keys.SecretKey:
        """Derives the shared secret.

        Arguments are already checked to be of the right type.

        Raises:
            InvalidArgumentError: The keys cannot be used with the algorithm.
        """
        pass


class SignatureBackend(metaclass=abc.ABCMeta):
    """Provider implementation of a signature algorithm."""

    @property
    @abc.abstractmethod
    def key_pair_generator(self) -> KeyPairGenerator:
        pass

    @abc.abstractmethod
    def sign_sync(self, data: bytes, key_pair: keys.KeyPair) -> keys.Signature:
        """Signs `data` with the private key of `key_pair`."""
        pass

    @abc.abstractmethod
    def verify_sync(self, data: bytes, signature: keys.Signature) -> bool:
        """Checks `signature` over `data`.

        Returns `False` for signatures which don't match, raises only when the
        signature cannot be interpreted at all.
        """
        pass


_B = TypeVar("_B")


@dataclasses.dataclass(frozen=True)
class Supported(Generic[_B]):
    """Resolution of an algorithm which a provider implements."""

    backend: _B


@dataclasses.dataclass(frozen=True)
class Unsupported:
    """Resolution of an algorithm which no provider implements.

    Every operation of such an algorithm fails with `NotSupportedError`: the
    synchronous ones raise it, the asynchronous ones return a future failed
    with it. Like every asynchronous entry point, the latter must be called
    with an event loop running, otherwise `RuntimeError` is raised.
    """

    name: str


def _check_type(value: object, expected: type, argument: str) -> None:
    if value is None:
        raise errors.InvalidArgumentError(f"Argument '{argument}' is required")
    if not isinstance(value, expected):
        raise errors.InvalidArgumentError(
            f"Argument '{argument}' must be a {expected.__name__}, "
            f"got {type(value).__name__}"
        )


def _check_keys(private_key: object, public_key: object) -> None:
    _check_type(private_key, keys.PrivateKey, "local_private_key")
    _check_type(public_key, keys.PublicKey, "remote_public_key")


def _check_key_pair(key_pair: object) -> None:
    _check_type(key_pair, keys.KeyPair, "key_pair")
    _check_type(key_pair.private_key, keys.PrivateKey, "key_pair.private_key")
    _check_type(key_pair.public_key, keys.PublicKey, "key_pair.public_key")


def _check_signature(signature: object) -> None:
    _check_type(signature, keys.Signature, "signature")
    _check_type(signature.public_key, keys.PublicKey, "signature.public_key")

@dataclasses.dataclass(frozen=True)
class _AsymmetricAlgorithm(Generic[_B]):
    name: str
    resolution: Supported[_B] | Unsupported

    @property
    def is_supported(self) -> bool:
        return isinstance(self.resolution, Supported)

    @property
    def key_pair_generator(self) -> KeyPairGenerator | None:
        """The key pair generator, or `None` if the algorithm is unsupported."""
        match self.resolution:
            case Supported(backend=backend):
                return backend.key_pair_generator
            case Unsupported():
                return None

    def _not_supported(self) -> NoReturn:
        raise errors.NotSupportedError(self.name)

    def _failed(self) -> asyncio.Future:
        return _deferred.defer(self._not_supported)


class KeyExchangeAlgorithm(_AsymmetricAlgorithm[KeyExchangeBackend]):
    """A key exchange algorithm, such as ECDH.

    Example:
    ```python
    async def agree():
        local = await ecdh_p256.key_pair_generator.generate()
        remote = await ecdh_p256.key_pair_generator.generate()
        return await ecdh_p256.secret_key(
            local_private_key=local.private_key,
            remote_public_key=remote.public_key,
        )
    ```
    """

    def shared_secret_sync(
        self,
        local_private_key: keys.PrivateKey,
        remote_public_key: keys.PublicKey,
    ) -> keys.SecretKey:
        """Derives the secret shared with the owner of `remote_public_key`.

        Raises:
            NotSupportedError: The algorithm is not available.
            InvalidArgumentError: A key is missing or unusable.
        """
        match self.resolution:
            case Unsupported():
                self._not_supported()
            case Supported(backend=backend):
                _check_keys(local_private_key, remote_public_key)
                return backend.shared_secret_sync(
                    local_private_key, remote_public_key
                )

    def secret_key(
        self,
        local_private_key: keys.PrivateKey,
        remote_public_key: keys.PublicKey,
    ) -> asyncio.Future[keys.SecretKey]:
        """Asynchronous version of `shared_secret_sync()`."""
        match self.resolution:
            case Unsupported():
                return self._failed()
            case Supported(backend=backend):
                _check_keys(local_private_key, remote_public_key)
                return _deferred.defer(
                    backend.shared_secret_sync,
                    local_private_key,
                    remote_public_key,
                )


class SignatureAlgorithm(_AsymmetricAlgorithm[SignatureBackend]):
    """A signature algorithm, such as ECDSA.

    Example:
    ```python
    key_pair = ecdsa_p256_sha256.key_pair_generator.generate_sync()
    signature = ecdsa_p256_sha256.sign_sync(b"payload", key_pair)
    assert ecdsa_p256_sha256.verify_sync(b"payload", signature)
    ```
    """

    def sign_sync(
        self, data: digest.BytesLike, key_pair: keys.KeyPair
    ) -> keys.Signature:
        """Signs `data` with `key_pair`.

        Raises:
            NotSupportedError: The algorithm is not available.
            InvalidArgumentError: An argument is missing or unusable.
        """
        match self.resolution:
            case Unsupported():
                self._not_supported()
            case Supported(backend=backend):
                data = digest.to_bytes(data)
                _check_key_pair(key_pair)
                return backend.sign_sync(data, key_pair)

    def sign(
        self, data: digest.BytesLike, key_pair: keys.KeyPair
    ) -> asyncio.Future[keys.Signature]:
        """Asynchronous version of `sign_sync()`."""
        match self.resolution:
            case Unsupported():
                return self._failed()
            case Supported(backend=backend):
                data = digest.to_bytes(data)
                _check_key_pair(key_pair)
                return _deferred.defer(backend.sign_sync, data, key_pair)

    def verify_sync(
        self, data: digest.BytesLike, signature: keys.Signature
    ) -> bool:
        """Checks that `signature` was produced over `data`.

        Raises:
            NotSupportedError: The algorithm is not available.
            InvalidArgumentError: An argument is missing or unusable.
        """
        match self.resolution:
            case Unsupported():
                self._not_supported()
            case Supported(backend=backend):
                data = digest.to_bytes(data)
                _check_signature(signature)
                return backend.verify_sync(data, signature)

    def verify(
        self, data: digest.BytesLike, signature: keys.Signature
    ) -> asyncio.Future[bool]:
        """Asynchronous version of `verify_sync()`."""
        match self.resolution:
            case Unsupported():
                return self._failed()
            case Supported(backend=backend):
                data = digest.to_bytes(data)
                _check_signature(signature)
                return _deferred.defer(backend.verify_sync, data, signature)
