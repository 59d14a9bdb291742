"""Tests for RequestHandle cancellation semantics."""

import threading

from netkit.http.handle import RequestHandle
from netkit.http.result import Success


class RecordingToken:
    def __init__(self):
        self.cancel_calls = 0

    def cancel(self):
        self.cancel_calls += 1


class TestRequestHandle:
    """Tests for RequestHandle."""

    def test_unique_ids(self):
        ids = {RequestHandle(lambda result: None).id for _ in range(100)}
        assert len(ids) == 100

    def test_id_is_stable(self):
        handle = RequestHandle(lambda result: None)
        assert handle.id == handle.id

    def test_complete_delivers_once(self):
        received = []
        handle = RequestHandle(received.append)

        handle.complete(Success(b"a"))
        handle.complete(Success(b"b"))

        assert received == [Success(b"a")]
        assert handle.done
        assert not handle.cancelled

    def test_cancel_suppresses_delivery(self):
        received = []
        token = RecordingToken()
        handle = RequestHandle(received.append)
        handle.attach(token)

        handle.cancel()
        handle.complete(Success(b"late"))

        assert received == []
        assert handle.cancelled
        assert token.cancel_calls == 1

    def test_cancel_after_delivery_is_noop(self):
        received = []
        token = RecordingToken()
        handle = RequestHandle(received.append)
        handle.attach(token)

        handle.complete(Success(None))
        handle.cancel()

        assert received == [Success(None)]
        assert not handle.cancelled
        assert token.cancel_calls == 0

    def test_repeated_cancel(self):
        token = RecordingToken()
        handle = RequestHandle(lambda result: None)
        handle.attach(token)

        handle.cancel()
        handle.cancel()

        assert token.cancel_calls == 1

    def test_cancel_before_attach_cancels_token_on_attach(self):
        token = RecordingToken()
        handle = RequestHandle(lambda result: None)

        handle.cancel()
        handle.attach(token)

        assert token.cancel_calls == 1

    def test_race_has_single_outcome(self):
        """Test that racing completion and cancellation yields one observable outcome."""
        for _ in range(200):
            received = []
            handle = RequestHandle(received.append)
            handle.attach(RecordingToken())
            barrier = threading.Barrier(2)

            def deliver(handle=handle, barrier=barrier):
                barrier.wait()
                handle.complete(Success(b"x"))

            def cancel(handle=handle, barrier=barrier):
                barrier.wait()
                handle.cancel()

            threads = [threading.Thread(target=deliver), threading.Thread(target=cancel)]
            for thread in threads:
                thread.start()
            for thread in threads:
                thread.join()

            assert handle.done
            assert len(received) == (0 if handle.cancelled else 1)
