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

"""Elliptic curve algorithms backed by the `cryptography` package.

We support the NIST curves P-256, P-384 and P-521, for ECDH key exchange and
ECDSA signatures. Every curve is probed first: if the OpenSSL build behind
`cryptography` cannot use a curve, no backend is registered for it and the
corresponding algorithms resolve as unsupported.

Keys are encoded as follows:
- private keys: the big-endian private scalar, padded to the curve size;
- public keys: the uncompressed X9.62 point;
- signatures: DER encoded `(r, s)`.
"""

import logging

from cryptography import exceptions
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ec
from typing_extensions import override

from crypto_primitives import errors
from crypto_primitives._asymmetric import algorithms
from crypto_primitives._asymmetric import keys
from crypto_primitives._providers import registry as registry_lib


logger = logging.getLogger(__name__)


# Curve name used in algorithm names, paired with the curve.
_CURVES: dict[str, ec.EllipticCurve] = {
    "p256": ec.SECP256R1(),
    "p384": ec.SECP384R1(),
    "p521": ec.SECP521R1(),
}


# (curve, hash) pairs for ECDSA. SHA-256 is paired with every curve; each curve
# is also paired with the hash matching its security level.
_SIGNATURE_HASHES: list[tuple[str, hashes.HashAlgorithm]] = [
    ("p256", hashes.SHA256()),
    ("p384", hashes.SHA256()),
    ("p521", hashes.SHA256()),
    ("p384", hashes.SHA384()),
    ("p521", hashes.SHA512()),
]


def key_exchange_name(curve_name: str) -> str:
    return f"ecdh-{curve_name}"


def signature_name(
    curve_name: str, hash_algorithm: hashes.HashAlgorithm
) -> str:
    return f"ecdsa-{curve_name}-{hash_algorithm.name}"


def _private_key_size(curve: ec.EllipticCurve) -> int:
    return (curve.key_size + 7) // 8


def _encode_public_key(public_key: ec.EllipticCurvePublicKey) -> keys.PublicKey:
    return keys.PublicKey(
        public_key.public_bytes(
            encoding=serialization.Encoding.X962,
            format=serialization.PublicFormat.UncompressedPoint,
        )
    )


def _encode_key_pair(private_key: ec.EllipticCurvePrivateKey) -> keys.KeyPair:
    private_value = private_key.private_numbers().private_value
    size = _private_key_size(private_key.curve)
    return keys.KeyPair(
        private_key=keys.PrivateKey(private_value.to_bytes(size, "big")),
        public_key=_encode_public_key(private_key.public_key()),
    )


def _load_private_key(
    curve: ec.EllipticCurve, private_key: keys.PrivateKey
) -> ec.EllipticCurvePrivateKey:
    if len(private_key.data) != _private_key_size(curve):
        raise errors.InvalidArgumentError(
            f"Private key is not a key for curve '{curve.name}'"
        )
    try:
        return ec.derive_private_key(
            int.from_bytes(private_key.data, "big"), curve
        )
    except ValueError as e:
        raise errors.InvalidArgumentError(
            f"Private key is not a key for curve '{curve.name}'"
        ) from e


def _load_public_key(
    curve: ec.EllipticCurve, public_key: keys.PublicKey
) -> ec.EllipticCurvePublicKey:
    try:
        return ec.EllipticCurvePublicKey.from_encoded_point(
            curve, public_key.data
        )
    except ValueError as e:
        raise errors.InvalidArgumentError(
            f"Public key is not a point on curve '{curve.name}'"
        ) from e


class KeyPairGenerator(algorithms.KeyPairGenerator):
    """Generates random key pairs on one curve."""

    def __init__(self, curve: ec.EllipticCurve):
        self._curve = curve

    @override
    def generate_sync(self) -> keys.KeyPair:
        return _encode_key_pair(ec.generate_private_key(self._curve))


class ECDH(algorithms.KeyExchangeBackend):
    """Elliptic curve Diffie-Hellman on one curve."""

    def __init__(self, curve: ec.EllipticCurve):
        self._curve = curve
        self._key_pair_generator = KeyPairGenerator(curve)

    @property
    @override
    def key_pair_generator(self) -> algorithms.KeyPairGenerator:
        return self._key_pair_generator

    @override
    def shared_secret_sync(
        self,
        local_private_key: keys.PrivateKey,
        remote_public_key: keys.PublicKey,
    ) -> keys.SecretKey:
        private_key = _load_private_key(self._curve, local_private_key)
        public_key = _load_public_key(self._curve, remote_public_key)
        return keys.SecretKey(private_key.exchange(ec.ECDH(), public_key))


class ECDSA(algorithms.SignatureBackend):
    """Elliptic curve signatures on one curve, over one hash algorithm."""

    def __init__(
        self, curve: ec.EllipticCurve, hash_algorithm: hashes.HashAlgorithm
    ):
        self._curve = curve
        self._hash_algorithm = hash_algorithm
        self._key_pair_generator = KeyPairGenerator(curve)

    @property
    @override
    def key_pair_generator(self) -> algorithms.KeyPairGenerator:
        return self._key_pair_generator

    @override
    def sign_sync(self, data: bytes, key_pair: keys.KeyPair) -> keys.Signature:
        private_key = _load_private_key(self._curve, key_pair.private_key)
        raw_signature = private_key.sign(data, ec.ECDSA(self._hash_algorithm))
        # The public key is derived again so that it always matches the key
        # which produced the signature.
        return keys.Signature(
            raw_signature, _encode_public_key(private_key.public_key())
        )

    @override
    def verify_sync(self, data: bytes, signature: keys.Signature) -> bool:
        public_key = _load_public_key(self._curve, signature.public_key)
        try:
            public_key.verify(
                signature.data, data, ec.ECDSA(self._hash_algorithm)
            )
        except exceptions.InvalidSignature:
            return False
        return True


def _is_curve_supported(curve: ec.EllipticCurve) -> bool:
    """Checks whether `cryptography` can use `curve`, by generating a key."""
    try:
        ec.generate_private_key(curve)
    except exceptions.UnsupportedAlgorithm:
        logger.debug("Curve %s is not supported by the backend", curve.name)
        return False
    return True


def register(registry: registry_lib.Registry) -> None:
    """Registers a backend for every algorithm usable on this platform."""
    supported = {
        curve_name: curve
        for curve_name, curve in _CURVES.items()
        if _is_curve_supported(curve)
    }

    for curve_name, curve in supported.items():
        registry.register_key_exchange(
            key_exchange_name(curve_name), ECDH(curve)
        )

    for curve_name, hash_algorithm in _SIGNATURE_HASHES:
        if curve_name not in supported:
            continue
        registry.register_signature(
            signature_name(curve_name, hash_algorithm),
            ECDSA(supported[curve_name], hash_algorithm),
        )
