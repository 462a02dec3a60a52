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

"""Tests for the lifecycle shared by all sinks and algorithms."""

import asyncio
import hashlib

import pytest

from crypto_primitives import errors
from tests import test_support


_KNOWN_DIGEST = hashlib.sha256(test_support.KNOWN_TEXT).digest()


class TestHashSink:
    def test_add_forwards_whole_chunk(self, recording_algorithm):
        sink = recording_algorithm.new_sink()
        sink.add(b"abc")
        assert sink.windows == [b"abc"]

    def test_add_slice_forwards_window(self, recording_algorithm):
        sink = recording_algorithm.new_sink()
        sink.add_slice(b"0123456789", 2, 5)
        assert sink.windows == [b"234"]

    def test_empty_windows_are_skipped(self, recording_algorithm):
        sink = recording_algorithm.new_sink()
        sink.add(b"")
        sink.add_slice(b"abc", 1, 1)
        assert sink.windows == []

    def test_overlapping_windows_of_same_buffer(self, recording_algorithm):
        buffer = b"Test string"
        sink = recording_algorithm.new_sink()
        sink.add_slice(buffer, 0, 5)
        sink.add_slice(buffer, 5, len(buffer))
        assert sink.close_sync().digest_value == _KNOWN_DIGEST

    def test_accepts_list_of_ints(self, recording_algorithm):
        sink = recording_algorithm.new_sink()
        sink.add([1, 2, 3])
        sink.add_slice([4, 5, 6], 0, 2)
        assert sink.windows == [b"\x01\x02\x03", b"\x04\x05"]

    @pytest.mark.parametrize(
        "start,end", [(-1, 2), (2, 1), (0, 4), (4, 4)], ids=str
    )
    def test_invalid_window(self, recording_algorithm, start, end):
        sink = recording_algorithm.new_sink()
        with pytest.raises(errors.InvalidArgumentError):
            sink.add_slice(b"abc", start, end)

    def test_none_chunk(self, recording_algorithm):
        sink = recording_algorithm.new_sink()
        with pytest.raises(errors.InvalidArgumentError):
            sink.add(None)
        with pytest.raises(errors.InvalidArgumentError):
            sink.add_slice(None, 0, 0)

    def test_str_chunk(self, recording_algorithm):
        sink = recording_algorithm.new_sink()
        with pytest.raises(errors.InvalidArgumentError):
            sink.add("text")

    def test_add_after_close_fails(self, recording_algorithm):
        sink = recording_algorithm.new_sink()
        sink.close_sync()
        assert sink.is_closed
        with pytest.raises(errors.InvalidStateError):
            sink.add(b"abc")
        with pytest.raises(errors.InvalidStateError):
            sink.add_slice(b"abc", 0, 1)

    def test_closed_state_wins_over_invalid_arguments(
        self, recording_algorithm
    ):
        sink = recording_algorithm.new_sink()
        sink.close_sync()
        with pytest.raises(errors.InvalidStateError):
            sink.add(None)
        with pytest.raises(errors.InvalidStateError):
            sink.add_slice(None, 0, 0)
        with pytest.raises(errors.InvalidStateError):
            sink.add_slice(b"abc", 2, 1)

    def test_close_twice_fails(self, recording_algorithm):
        sink = recording_algorithm.new_sink()
        sink.close_sync()
        with pytest.raises(errors.InvalidStateError):
            sink.close_sync()

    def test_is_last_finalizes_input(self, recording_algorithm):
        sink = recording_algorithm.new_sink()
        sink.add_slice(test_support.KNOWN_TEXT, 0, 4, False)
        sink.add_slice(
            test_support.KNOWN_TEXT, 4, len(test_support.KNOWN_TEXT), True
        )
        with pytest.raises(errors.InvalidStateError):
            sink.add(b"more")
        assert not sink.is_closed
        assert sink.close_sync().digest_value == _KNOWN_DIGEST

    def test_close_async(self, recording_algorithm):
        sink = recording_algorithm.new_sink()
        sink.add(test_support.KNOWN_TEXT)
        result = test_support.run(sink.close)
        assert result.digest_value == _KNOWN_DIGEST
        assert sink.is_closed

    def test_close_async_is_deferred(self, recording_algorithm):
        async def _close_and_check():
            sink = recording_algorithm.new_sink()
            future = sink.close()
            assert not future.done()
            assert not sink.is_closed
            with pytest.raises(errors.InvalidStateError):
                sink.add(b"late data")
            with pytest.raises(errors.InvalidStateError):
                sink.close()
            return await future

        result = test_support.run(_close_and_check)
        assert result.digest_value == hashlib.sha256(b"").digest()

    def test_close_async_after_close_fails(self, recording_algorithm):
        sink = recording_algorithm.new_sink()
        sink.close_sync()
        with pytest.raises(errors.InvalidStateError):
            test_support.run(sink.close)

    def test_close_async_requires_running_loop(self, recording_algorithm):
        sink = recording_algorithm.new_sink()
        with pytest.raises(RuntimeError):
            sink.close()


class TestHashAlgorithm:
    def test_hash_sync_uses_a_single_chunk(self, recording_algorithm):
        result = recording_algorithm.hash_sync(test_support.KNOWN_TEXT)
        assert result.digest_value == _KNOWN_DIGEST
        assert len(recording_algorithm.sinks) == 1
        assert recording_algorithm.sinks[0].windows == [
            test_support.KNOWN_TEXT
        ]
        assert recording_algorithm.sinks[0].is_closed

    def test_hash_sync_none_fails_before_creating_a_sink(
        self, recording_algorithm
    ):
        with pytest.raises(errors.InvalidArgumentError):
            recording_algorithm.hash_sync(None)
        assert recording_algorithm.sinks == []

    def test_hash_none_fails_synchronously(self, recording_algorithm):
        async def _hash_none():
            recording_algorithm.hash(None)

        with pytest.raises(errors.InvalidArgumentError):
            test_support.run(_hash_none)
        assert recording_algorithm.sinks == []

    def test_hash_async_matches_sync(self, recording_algorithm):
        expected = recording_algorithm.hash_sync(test_support.KNOWN_TEXT)
        result = test_support.run(
            recording_algorithm.hash, test_support.KNOWN_TEXT
        )
        assert result == expected

    def test_hash_async_copies_input(self, recording_algorithm):
        async def _hash_then_mutate():
            buffer = bytearray(test_support.KNOWN_TEXT)
            future = recording_algorithm.hash(buffer)
            buffer[0] = 0
            return await future

        result = test_support.run(_hash_then_mutate)
        assert result.digest_value == _KNOWN_DIGEST

    def test_hash_async_runs_in_order(self, recording_algorithm):
        async def _hash_many():
            futures = [
                recording_algorithm.hash(bytes([i])) for i in range(5)
            ]
            return await asyncio.gather(*futures)

        results = test_support.run(_hash_many)
        assert [sink.windows for sink in recording_algorithm.sinks] == [
            [bytes([i])] for i in range(5)
        ]
        assert results == [
            recording_algorithm.hash_sync(bytes([i])) for i in range(5)
        ]

    def test_new_sink_is_fresh(self, recording_algorithm):
        sink1 = recording_algorithm.new_sink()
        sink2 = recording_algorithm.new_sink()
        sink1.add(b"only in the first sink")
        assert sink1 is not sink2
        assert sink2.close_sync().digest_value == hashlib.sha256(b"").digest()

    def test_repr(self, recording_algorithm):
        assert repr(recording_algorithm) == "RecordingAlgorithm('recording')"
