import threading

import pytest


class ByteSequence:

    """Random source replaying fixed bytes, reads short when exhausted."""

    def __init__(self, data):
        self._data = bytes(data)
        self.pos = 0

    def __call__(self, size: int) -> bytes:
        chunk = self._data[self.pos:self.pos + size]
        self.pos += len(chunk)
        return chunk


class CounterSource:

    """Deterministic random source: 1, 2, 3, ... (mod 256)."""

    def __init__(self):
        self._counter = 0
        self._lock = threading.Lock()

    def __call__(self, size: int) -> bytes:
        out = bytearray(size)
        with self._lock:
            for i in range(size):
                self._counter += 1
                out[i] = self._counter & 0xff
        return bytes(out)


@pytest.fixture
def byte_sequence():
    return ByteSequence


@pytest.fixture
def counter_source():
    return CounterSource()
