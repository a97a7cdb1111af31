"""
Deferred callbacks for the opponent's reply.

The engine never sleeps: it asks a scheduler to run the reply later and
keeps the returned task so a reset can cancel it.
"""

from typing import Callable, List


class ScheduledTask:
    """Handle for a callback that runs once, later."""

    def __init__(self, callback: Callable[[], None], delay_ms: int):
        self.callback = callback
        self.delay_ms = delay_ms
        self.cancelled = False
        self.done = False

    @property
    def pending(self) -> bool:
        return not (self.cancelled or self.done)

    def run(self):
        """Run the callback unless cancelled or already run."""
        if not self.pending:
            return
        self.done = True
        self.callback()

    def cancel(self):
        self.cancelled = True


class Scheduler:
    """Base scheduler interface."""

    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> ScheduledTask:
        raise NotImplementedError


class ManualScheduler(Scheduler):
    """
    Queues tasks until run_pending() is called.
    Used by the console mode and the tests.
    """

    def __init__(self):
        self.tasks: List[ScheduledTask] = []

    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> ScheduledTask:
        task = ScheduledTask(callback, delay_ms)
        self.tasks.append(task)
        return task

    @property
    def pending_count(self) -> int:
        return sum(1 for task in self.tasks if task.pending)

    def run_pending(self) -> int:
        """
        Run every pending task in the order it was scheduled.

        Returns:
            How many callbacks actually ran.
        """
        tasks, self.tasks = self.tasks, []
        ran = 0
        for task in tasks:
            if task.pending:
                task.run()
                ran += 1
        return ran


class _TkTask(ScheduledTask):
    """ScheduledTask whose cancel also drops the Tk timer."""

    def __init__(self, root, callback: Callable[[], None], delay_ms: int):
        super().__init__(callback, delay_ms)
        self.root = root
        self.after_id = root.after(delay_ms, self.run)

    def cancel(self):
        if self.pending:
            self.root.after_cancel(self.after_id)
        super().cancel()


class TkScheduler(Scheduler):
    """Runs tasks on the Tk event loop with root.after()."""

    def __init__(self, root):
        self.root = root

    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> ScheduledTask:
        return _TkTask(self.root, callback, delay_ms)
