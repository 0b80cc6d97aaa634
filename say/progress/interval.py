class Interval:
    """Throttles progress output to the ticks of a Tracker.

    Off-tick calls write nothing; a callable passed as `fn` still runs so the
    wrapped work happens on every iteration.
    """
    def __init__(self, tracker=None, speaker=None):
        if tracker is None:
            from say.progress.tracker import Tracker
            tracker = Tracker()
        self.tracker = tracker
        self._speaker = speaker

    @property
    def speaker(self):
        if self._speaker is None:
            from say.say import default_say
            self._speaker = default_say()
        return self._speaker

    @property
    def index(self):
        return self.tracker.index

    def say(self, text=None, type=None, index=None, fn=None):
        if index is None:
            index = self.index
        if self.tracker.tick():
            if fn is not None:
                return self.speaker.progress(text, fn, index=index)
            return self.speaker.progress_line(text, type, index=index)
        if fn is not None:
            return fn(self)
        return None

    def update(self, index=None):
        if index is None:
            self.tracker.increment()
        else:
            self.tracker.update(index)
        return self
