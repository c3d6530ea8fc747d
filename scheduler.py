"""Virtual clock and interval timers.

Timers accumulate elapsed milliseconds handed in by the frame loop instead of
reading the wall clock, so tests can drive the game tick by tick.
"""

import heapq
import itertools


class IntervalTimer:
    """A repeating callback on the scheduler's clock."""

    def __init__(self, scheduler, period_ms, callback, name=None):
        if period_ms <= 0:
            raise ValueError(f"period_ms must be positive, got {period_ms}")
        self.scheduler = scheduler
        self.period_ms = period_ms
        self.callback = callback
        self.name = name or getattr(callback, '__name__', 'timer')
        self.next_due = None  # None while stopped
        self._entry = None  # seq of the live queue entry

    @property
    def running(self):
        return self.next_due is not None

    def start(self):
        """Start (or restart) the timer; the first firing is one period away."""
        self.next_due = self.scheduler.now + self.period_ms
        self.scheduler._push(self)

    def stop(self):
        """Stop firing. Stale queue entries are skipped lazily."""
        self.next_due = None
        self._entry = None

    def __repr__(self):
        return f"IntervalTimer({self.name!r}, period_ms={self.period_ms}, next_due={self.next_due})"


class Scheduler:
    """Runs due timers in time order as the clock advances."""

    def __init__(self):
        self.now = 0
        self.timers = []
        self._queue = []  # (due, seq, timer)
        self._seq = itertools.count()

    def every(self, period_ms, callback, name=None):
        """Register a stopped interval timer.

        Args:
            period_ms: Firing period in milliseconds
            callback: Zero-argument callable
            name: Label used in repr/logging

        Returns:
            The IntervalTimer; call start() to arm it
        """
        timer = IntervalTimer(self, period_ms, callback, name)
        self.timers.append(timer)
        return timer

    def _push(self, timer):
        seq = next(self._seq)
        timer._entry = seq
        heapq.heappush(self._queue, (timer.next_due, seq, timer))

    def advance(self, elapsed_ms):
        """Move the clock forward, firing every timer that comes due.

        Timers fire in due-time order; ties go to whichever was queued first.
        A callback may start or stop any timer, including its own.

        Returns:
            Number of callbacks fired
        """
        target = self.now + max(0, elapsed_ms)
        fired = 0

        while self._queue and self._queue[0][0] <= target:
            due, seq, timer = heapq.heappop(self._queue)
            # Entry left behind by stop() or a restart
            if timer._entry != seq:
                continue

            self.now = due
            timer.next_due = due + timer.period_ms
            self._push(timer)
            timer.callback()
            fired += 1

        self.now = target
        return fired

    def stop_all(self):
        for timer in self.timers:
            timer.stop()
