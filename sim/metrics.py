"""
RunMetrics: counters collected during one simulation run.
"""


class RunMetrics:
    """
    Tracks what happened during a run, for logging and reports.

    Attributes:
        ticks (int): Number of ticks simulated.
        released (int): Cars let through a green light.
        arrived (int): Cars that reached the end of a street and joined its queue.
        finished (int): Cars that completed their route (scoring or not).
        peak_queue (int): Longest street queue observed.
    """

    def __init__(self):
        """Initialize all counters to zero."""
        self.ticks = 0
        self.released = 0
        self.arrived = 0
        self.finished = 0
        self.peak_queue = 0

    def observe_queue(self, length: int):
        """Record a queue length, keeping the maximum."""
        if length > self.peak_queue:
            self.peak_queue = length

    def report(self) -> dict:
        """
        Return a snapshot of current metrics.

        Returns:
            dict: ``ticks``, ``released``, ``arrived``, ``finished`` and ``peak_queue``.
        """
        return {
            "ticks": self.ticks,
            "released": self.released,
            "arrived": self.arrived,
            "finished": self.finished,
            "peak_queue": self.peak_queue,
        }
