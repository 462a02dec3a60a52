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

import statistics
import time

from crypto_primitives import _constant_time
from crypto_primitives._hashing import digest


class TestBytesEqual:
    def test_equal(self):
        assert _constant_time.bytes_equal(b"abc", b"abc")
        assert _constant_time.bytes_equal(b"", b"")

    def test_not_equal(self):
        assert not _constant_time.bytes_equal(b"abc", b"abd")
        assert not _constant_time.bytes_equal(b"abc", b"ab")
        assert not _constant_time.bytes_equal(b"", b"a")


class TestBytesHash:
    def test_equal_inputs_have_equal_hashes(self):
        assert _constant_time.bytes_hash(b"abc") == _constant_time.bytes_hash(
            bytes(bytearray(b"abc"))
        )

    def test_depends_on_content_and_length(self):
        hashes = {
            _constant_time.bytes_hash(data)
            for data in [b"", b"\x00", b"\x00\x00", b"a", b"b", b"ab", b"ba"]
        }
        assert len(hashes) == 7

    def test_fits_in_32_bits(self):
        assert 0 <= _constant_time.bytes_hash(bytes(range(256)) * 4) < 2**32


def _median_comparison_time(a, b, rounds=301, repeat=20):
    samples = []
    for _ in range(rounds):
        start = time.perf_counter_ns()
        for _ in range(repeat):
            _ = a == b
        samples.append(time.perf_counter_ns() - start)
    return statistics.median(samples)


class TestTiming:
    def test_time_does_not_depend_on_position_of_difference(self):
        size = 1 << 16
        reference = digest.Digest(b"\x00" * size)
        first_differs = digest.Digest(b"\x01" + b"\x00" * (size - 1))
        last_differs = digest.Digest(b"\x00" * (size - 1) + b"\x01")

        # Warm up caches before measuring.
        _median_comparison_time(reference, first_differs, rounds=11)
        _median_comparison_time(reference, last_differs, rounds=11)

        first = _median_comparison_time(reference, first_differs)
        last = _median_comparison_time(reference, last_differs)

        # A short-circuiting comparison is orders of magnitude faster when the
        # first byte differs. The bounds are loose to tolerate noisy machines.
        assert 0.5 < first / last < 2.0
