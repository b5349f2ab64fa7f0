import time
import pygame

from .constants import TICK_INTERVAL_MS, AUTO_WAKE_ENERGY
from .decay import advance, enforce_terminal
from .models import Emphasis

# Custom event posted by the pygame timer on every tick
TICK_EVENT = pygame.USEREVENT + 1


class Scheduler:
    """
    Drives live decay from a recurring pygame timer.

    The host loop forwards events to handle_event(); the timer itself is
    armed with pygame.time.set_timer, which keeps at most one timer per event
    type. start() still cancels first so a restart never doubles up.
    """
    def __init__(self, pet, interval_ms=TICK_INTERVAL_MS, set_timer=None):
        self.pet = pet
        self.interval_ms = interval_ms
        self._set_timer = set_timer or pygame.time.set_timer
        self.running = False

    def start(self):
        self.stop()
        self._set_timer(TICK_EVENT, self.interval_ms)
        self.running = True

    def stop(self):
        if not self.running:
            return
        self._set_timer(TICK_EVENT, 0)
        self.running = False

    def handle_event(self, event):
        if event.type == TICK_EVENT:
            self.tick()
            return True
        return False

    def tick(self, now=None):
        """One timer period. Returns False if the pet is paused and nothing happened."""
        s = self.pet.stats
        if s.paused:
            return False

        now = time.time() if now is None else now
        s = advance(s)
        s.last_tick_at = max(s.last_tick_at, now)
        self.pet.stats = s

        # Auto-wake if fully rested
        if s.is_sleeping and s.energy >= AUTO_WAKE_ENERGY:
            s.is_sleeping = False
            self.pet.notify("I feel rested!", Emphasis.POSITIVE)

        if enforce_terminal(s):
            print("Pet health reached 0; time paused until reset.")
            self.pet.notify("Oh no... I need a reset.")

        self.pet.commit()
        return True
