"""
Cancellable delayed tasks keyed by session.

Every delayed continuation in the interaction is registered under a key
(the session id). Cancelling a key drops every task still pending for it,
so nothing scheduled for an abandoned session can run later.
"""
import heapq
import itertools
import logging
from abc import ABC, abstractmethod
from datetime import datetime, timedelta, timezone
from typing import Callable, List, Optional

from apscheduler.jobstores.base import JobLookupError
from apscheduler.schedulers.background import BackgroundScheduler

logger = logging.getLogger(__name__)


class ScheduledTask:
    """Handle for one pending callback."""
    
    def __init__(self, name: str, key: str, callback: Callable[[], None], due: float):
        self.name = name
        self.key = key
        self.due = due
        self._callback = callback
        self._cancelled = False
        self._done = False
    
    @property
    def cancelled(self) -> bool:
        return self._cancelled
    
    @property
    def done(self) -> bool:
        return self._done
    
    @property
    def pending(self) -> bool:
        return not (self._cancelled or self._done)
    
    def cancel(self) -> bool:
        """
        Prevent the callback from running.
        
        :return: True if the task was still pending
        """
        if not self.pending:
            return False
        self._cancelled = True
        return True
    
    def run(self) -> None:
        if not self.pending:
            return
        self._done = True
        self._callback()
    
    def __repr__(self) -> str:
        state = "cancelled" if self._cancelled else "done" if self._done else "pending"
        return f"ScheduledTask(name={self.name!r}, key={self.key!r}, due={self.due}, {state})"


class Scheduler(ABC):
    """Protocol for delayed task execution."""
    
    @abstractmethod
    def schedule(self, delay: float, callback: Callable[[], None], key: str, name: str = "task") -> ScheduledTask:
        """
        Run callback after delay seconds unless cancelled first.
        
        :param delay: Seconds to wait
        :param callback: Zero-argument callable
        :param key: Grouping key used by cancel_all
        :param name: Label for logging and introspection
        :return: ScheduledTask handle
        """
        pass
    
    @abstractmethod
    def cancel_all(self, key: str) -> int:
        """
        Cancel every pending task registered under key.
        
        :return: Number of tasks cancelled
        """
        pass
    
    @abstractmethod
    def pending(self, key: Optional[str] = None) -> List[ScheduledTask]:
        """Pending tasks, optionally filtered by key."""
        pass


class BackgroundJobScheduler(Scheduler):
    """
    Wall-clock scheduler backed by an APScheduler BackgroundScheduler.
    
    Each task is a one-off 'date' job with id "<key>:<name>:<n>", so every
    job of a session shares the "<key>:" prefix. Callbacks run on the
    scheduler's worker threads; callers that share state with them must
    serialize access themselves.
    """
    
    def __init__(self, scheduler: Optional[BackgroundScheduler] = None):
        self._scheduler = scheduler or BackgroundScheduler(daemon=True)
        self._sequence = itertools.count()
        if not self._scheduler.running:
            self._scheduler.start()
    
    def schedule(self, delay: float, callback: Callable[[], None], key: str, name: str = "task") -> ScheduledTask:
        delay = max(0.0, delay)
        task = ScheduledTask(name=name, key=key, callback=callback, due=delay)
        job_id = f"{key}:{name}:{next(self._sequence)}"
        self._scheduler.add_job(
            self._fire,
            trigger="date",
            run_date=datetime.now(timezone.utc) + timedelta(seconds=delay),
            args=(task,),
            id=job_id,
            name=name,
            misfire_grace_time=None,
        )
        logger.debug(f"Scheduled job {job_id} in {delay}s")
        return task
    
    def cancel_all(self, key: str) -> int:
        prefix = f"{key}:"
        cancelled = 0
        for job in self._scheduler.get_jobs():
            if not job.id.startswith(prefix):
                continue
            try:
                self._scheduler.remove_job(job.id)
            except JobLookupError:
                # Already handed to a worker; the task flag below still stops it
                pass
            if job.args[0].cancel():
                cancelled += 1
        
        if cancelled:
            logger.debug(f"Cancelled {cancelled} job(s) for session {key}")
        return cancelled
    
    def pending(self, key: Optional[str] = None) -> List[ScheduledTask]:
        prefix = f"{key}:" if key is not None else ""
        return [
            job.args[0]
            for job in self._scheduler.get_jobs()
            if job.id.startswith(prefix) and job.args[0].pending
        ]
    
    def shutdown(self) -> None:
        """Cancel everything and stop the worker threads (used on process exit)."""
        for job in self._scheduler.get_jobs():
            job.args[0].cancel()
        self._scheduler.remove_all_jobs()
        if self._scheduler.running:
            self._scheduler.shutdown(wait=False)
    
    @staticmethod
    def _fire(task: ScheduledTask) -> None:
        try:
            task.run()
        except Exception as e:
            logger.error(f"Scheduled task {task.name} failed: {e}", exc_info=True)


class ManualScheduler(Scheduler):
    """
    Virtual-clock scheduler.
    
    Time only moves when advance() is called, and due callbacks run
    synchronously on the caller's thread in due order. Tasks scheduled by
    a callback run in the same advance() if they fall inside the window.
    
    Usage:
        scheduler = ManualScheduler()
        scheduler.schedule(1.0, callback, key="session")
        scheduler.advance(1.0)  # callback runs here
    """
    
    def __init__(self):
        self._now = 0.0
        self._queue: list = []
        self._sequence = itertools.count()
    
    @property
    def now(self) -> float:
        return self._now
    
    def schedule(self, delay: float, callback: Callable[[], None], key: str, name: str = "task") -> ScheduledTask:
        task = ScheduledTask(name=name, key=key, callback=callback, due=self._now + max(0.0, delay))
        heapq.heappush(self._queue, (task.due, next(self._sequence), task))
        logger.debug(f"Scheduled {name} at t={task.due} for session {key}")
        return task
    
    def cancel_all(self, key: str) -> int:
        cancelled = sum(1 for _, _, task in self._queue if task.key == key and task.cancel())
        self._queue = [entry for entry in self._queue if entry[2].pending]
        heapq.heapify(self._queue)
        return cancelled
    
    def pending(self, key: Optional[str] = None) -> List[ScheduledTask]:
        tasks = [task for _, _, task in sorted(self._queue) if task.pending]
        if key is not None:
            tasks = [task for task in tasks if task.key == key]
        return tasks
    
    def advance(self, seconds: float) -> int:
        """
        Move the clock forward, running every task that becomes due.
        
        :param seconds: Time to advance (must be >= 0)
        :return: Number of callbacks run
        """
        if seconds < 0:
            raise ValueError("cannot move the clock backwards")
        
        target = self._now + seconds
        ran = 0
        while self._queue and self._queue[0][0] <= target:
            due, _, task = heapq.heappop(self._queue)
            self._now = due
            if task.pending:
                task.run()
                ran += 1
        self._now = target
        return ran
    
    def run_all(self) -> int:
        """Advance until nothing is pending."""
        ran = 0
        while self._queue:
            ran += self.advance(max(0.0, self._queue[0][0] - self._now))
        return ran
