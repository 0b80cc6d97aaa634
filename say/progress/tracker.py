from say.progress.interval import Interval

DEFAULT_INTERVAL = 1


class Tracker:
    """Counts iterations and reports when the index lands on the interval."""
    def __init__(self, interval=DEFAULT_INTERVAL, index=0):
        self.interval = int(interval)
        if self.interval < 1:
            raise ValueError(f"interval must be >= 1, got {interval!r}")
        self.index = int(index)

    def call(self, fn, speaker=None):
        """Run `fn` with an Interval bound to this tracker and return its result."""
        interval = Interval(tracker=self, speaker=speaker)
        return fn(interval)

    def update(self, index):
        self.index = int(index)
        return self

    def increment(self):
        self.index += 1
        return self

    def tick(self):
        if self.index == 0:
            return False
        return self.index % self.interval == 0
