import time

from .models import StatVector, Notification
from .classifier import classify, age_minutes
from .decay import replay
from .storage import SnapshotStore


class Pet:
    """
    Owns the single live StatVector. The scheduler and the action controller
    both hold a reference to the same Pet, so a reset that swaps the stats
    instance is seen by everyone.
    """
    def __init__(self, store=None, clock=time.time):
        self.store = store if store is not None else SnapshotStore()
        self.clock = clock
        self.stats = StatVector.fresh(self.clock())
        self._change_listeners = []
        self._message_listeners = []

    def subscribe(self, on_change=None, on_message=None):
        if on_change:
            self._change_listeners.append(on_change)
        if on_message:
            self._message_listeners.append(on_message)

    def load(self, now=None):
        """Loads the saved snapshot and catches up on elapsed real time."""
        now = self.clock() if now is None else now
        self.stats = replay(self.store.load(), now)
        return self.stats

    def reset(self, now=None):
        now = self.clock() if now is None else now
        self.store.clear()
        self.stats = StatVector.fresh(now)
        print("Pet reset to a fresh state.")

    def view(self, now=None):
        """Everything a renderer needs: the vitals plus derived labels."""
        now = self.clock() if now is None else now
        mood, condition = classify(self.stats)
        data = self.stats.to_snapshot()
        data.update(mood=mood, condition=condition, age_minutes=age_minutes(self.stats, now))
        return data

    def notify(self, message, emphasis=None):
        note = Notification(message, emphasis)
        for listener in self._message_listeners:
            listener(note)

    def commit(self):
        """Persist and push the current state to renderers. Called after every change."""
        self.store.save(self.stats)
        if self._change_listeners:
            view = self.view()
            for listener in self._change_listeners:
                listener(view)
