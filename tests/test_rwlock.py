from __future__ import annotations

import sys
import threading
from pathlib import Path

import pytest

# Makes the netadmin package importable when running tests from a checkout
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from netadmin.core.rwlock import RWLock  # noqa: E402


def test_readers_share_the_lock():
    lock = RWLock()
    barrier = threading.Barrier(3, timeout=5)

    def reader():
        with lock.read_locked():
            # all readers must be inside at once for the barrier to open
            barrier.wait()

    threads = [threading.Thread(target=reader) for _ in range(3)]
    for t in threads:
        t.start()
    for t in threads:
        t.join(timeout=5)
    assert not barrier.broken


def test_writer_waits_for_reader():
    lock = RWLock()
    acquired = threading.Event()

    def writer():
        with lock.write_locked():
            acquired.set()

    lock.acquire_read()
    t = threading.Thread(target=writer)
    t.start()
    assert not acquired.wait(timeout=0.2)
    lock.release_read()
    assert acquired.wait(timeout=5)
    t.join(timeout=5)


def test_waiting_writer_blocks_new_readers():
    lock = RWLock()
    order = []
    writer_started = threading.Event()

    def writer():
        writer_started.set()
        with lock.write_locked():
            order.append("writer")

    def reader():
        with lock.read_locked():
            order.append("reader")

    lock.acquire_read()
    w = threading.Thread(target=writer)
    w.start()
    writer_started.wait(timeout=5)
    # give the writer time to register as waiting
    threading.Event().wait(0.2)
    r = threading.Thread(target=reader)
    r.start()
    threading.Event().wait(0.2)
    assert order == []
    lock.release_read()
    w.join(timeout=5)
    r.join(timeout=5)
    assert order == ["writer", "reader"]


def test_unbalanced_release_raises():
    lock = RWLock()
    with pytest.raises(RuntimeError):
        lock.release_read()
    with pytest.raises(RuntimeError):
        lock.release_write()
