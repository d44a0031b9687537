"""Blocking message queue built on the head-add, tail-remove linked list."""

from __future__ import annotations

import enum
import logging
import threading

from mondrianhal.linked_list import LinkedList

_log = logging.getLogger("mondrianhal.msg_q")


class MsgQStatus(enum.IntEnum):
    """Result codes of message-queue operations."""

    SUCCESS = 0
    FAILURE_GENERAL = -1
    INVALID_PARAMETER = -2
    INVALID_HANDLE = -3
    UNAVAILABLE_RESOURCE = -4
    INSUFFICIENT_BUFFER = -5


class QueueUnblockedError(RuntimeError):
    """Raised when a queue that has been unblocked is used again."""

    status = MsgQStatus.UNAVAILABLE_RESOURCE


class MessageQueue:
    """Thread-safe FIFO queue; receivers block until a message arrives or the queue is unblocked."""

    def __init__(self):
        self._list = LinkedList()
        self._cond = threading.Condition()
        self._unblocked = False
        self._closed = False

    def _check_open(self):
        if self._closed:
            raise RuntimeError("message queue is closed")

    @property
    def unblocked(self):
        return self._unblocked

    def __len__(self):
        with self._cond:
            return len(self._list)

    def send(self, msg, dealloc=None):
        """Queue ``msg``; ``dealloc`` is called on it if the queue is flushed."""
        if msg is None:
            raise ValueError("message must not be None")
        with self._cond:
            self._check_open()
            if self._unblocked:
                _log.error("send: message queue has been unblocked")
                raise QueueUnblockedError("message queue has been unblocked")
            self._list.add(msg, dealloc)
            self._cond.notify()
        _log.debug("send: queued %r", msg)

    def receive(self):
        """Return the oldest message, waiting for one if the queue is empty.

        Raises QueueUnblockedError if the queue is unblocked before or while
        waiting and no message is left to hand out.
        """
        with self._cond:
            self._check_open()
            if self._unblocked:
                _log.error("receive: message queue has been unblocked")
                raise QueueUnblockedError("message queue has been unblocked")
            while self._list.is_empty() and not self._unblocked:
                self._cond.wait()
            if self._list.is_empty():
                raise QueueUnblockedError("message queue was unblocked while waiting")
            msg = self._list.remove()
        _log.debug("receive: got %r", msg)
        return msg

    def flush(self):
        """Remove every queued message, releasing each with its dealloc function."""
        with self._cond:
            self._check_open()
            self._list.flush()
        _log.debug("flush: message queue flushed")

    def unblock(self):
        """Stop the queue and wake every waiting receiver."""
        with self._cond:
            self._check_open()
            if self._unblocked:
                _log.error("unblock: message queue has been unblocked")
                raise QueueUnblockedError("message queue has already been unblocked")
            self._unblocked = True
            self._cond.notify_all()
        _log.debug("unblock: message queue unblocked")

    def close(self):
        """Release all queued messages and retire the queue."""
        with self._cond:
            if self._closed:
                return
            self._list.flush()
            self._unblocked = False
            self._closed = True

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()
        return False