import threading

import pytest

from advcache.shutdown import Graceful, GracefulTimeoutError


def test_waits_for_workers_after_stop():
    stop = threading.Event()
    graceful = Graceful(stop)
    finished = []

    def worker():
        stop.wait()
        finished.append(True)
        graceful.done()

    graceful.add(2)
    threads = [threading.Thread(target=worker) for _ in range(2)]
    for thread in threads:
        thread.start()
    threading.Timer(0.05, stop.set).start()

    result = graceful.listen_cancel_and_await()
    assert result is None
    assert finished == [True, True]
    for thread in threads:
        thread.join()


def test_stop_event_is_set_on_cancel():
    stop = threading.Event()
    graceful = Graceful(stop)
    stop.set()
    graceful.listen_cancel_and_await()
    assert stop.is_set() is True


def test_timeout_when_worker_never_finishes():
    stop = threading.Event()
    graceful = Graceful(stop)
    graceful.set_graceful_timeout(0.05)
    graceful.add(1)
    stop.set()
    with pytest.raises(GracefulTimeoutError):
        graceful.listen_cancel_and_await()


def test_done_without_add_raises():
    graceful = Graceful(threading.Event())
    with pytest.raises(ValueError):
        graceful.done()