from .scheduler import Scheduler, ScheduledTask, BackgroundJobScheduler, ManualScheduler

__all__ = [
    "Scheduler",
    "ScheduledTask",
    "BackgroundJobScheduler",
    "ManualScheduler",
]
