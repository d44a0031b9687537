"""One-shot timers that call back after a delay unless stopped first."""

from __future__ import annotations

import enum
import errno
import logging
import threading

_log = logging.getLogger("mondrianhal.loc_timer")


class TimerState(enum.IntEnum):
    """Life cycle of a timer."""

    READY = 100
    WAITING = 101
    DONE = 102
    ABORT = 103


class LocTimer:
    """Calls ``callback(user_data, errno.ETIMEDOUT)`` once ``msec`` milliseconds pass.

    Stopping the timer before it fires cancels the call.
    """

    def __init__(self, msec, callback, user_data=None):
        if callback is None or not msec or msec < 0:
            _log.error("LocTimer: wrong parameters")
            raise ValueError("a callback and a positive delay are required")
        self.msec = int(msec)
        self.callback = callback
        self.user_data = user_data
        self._cond = threading.Condition()
        self._state = TimerState.READY
        self._thread = None

    @property
    def state(self):
        return self._state

    def start(self):
        """Start the timer thread; return the timer so it can be stopped later."""
        with self._cond:
            if self._thread is not None:
                raise RuntimeError("timer already started")
            self._thread = threading.Thread(target=self._run, name="loc_timer", daemon=True)
        self._thread.start()
        _log.debug("start: timer thread created, delay %d ms", self.msec)
        return self

    def _run(self):
        outcome = "cancelled"
        with self._cond:
            if self._state is TimerState.READY:
                self._state = TimerState.WAITING
                stopped = self._cond.wait_for(
                    lambda: self._state is TimerState.ABORT, timeout=self.msec / 1000.0
                )
                outcome = "stopped" if stopped else "timed out"
                self._state = TimerState.DONE
        _log.debug("loc_timer %s", outcome)
        if outcome == "timed out":
            self.callback(self.user_data, errno.ETIMEDOUT)

    def stop(self):
        """Cancel the timer if it has not fired yet."""
        with self._cond:
            if self._state in (TimerState.READY, TimerState.WAITING):
                self._state = TimerState.ABORT
                self._cond.notify_all()


def loc_timer_start(msec, callback, user_data=None):
    """Create and start a timer; the returned timer can be stopped."""
    return LocTimer(msec, callback, user_data).start()