from .constants import (
    FEED_HUNGER, FEED_CLEAN_COST, FEED_ENERGY,
    PLAY_MIN_ENERGY, PLAY_ENERGY_COST, PLAY_HUNGER_COST, PLAY_CLEAN_COST, PLAY_HEALTH,
    HEAL_MIN_ENERGY, HEAL_HEALTH, HEAL_CLEAN, HEAL_ENERGY_COST,
)
from .models import Emphasis


class ActionController:
    """
    User-triggered operations on a Pet.

    Every action except toggle_pause() and reset() does nothing at all once
    health is 0. Refusals for lack of energy are not errors: they only post a
    message.
    """
    def __init__(self, pet):
        self.pet = pet

    @property
    def stats(self):
        return self.pet.stats

    def feed(self):
        s = self.stats
        if s.is_dead:
            return
        s.hunger -= FEED_HUNGER
        s.clean -= FEED_CLEAN_COST  # eating makes a little mess
        s.energy += FEED_ENERGY
        self._done("Yum! Thanks for feeding me", Emphasis.POSITIVE)

    def play(self):
        s = self.stats
        if s.is_dead:
            return
        if s.energy <= PLAY_MIN_ENERGY:
            self.pet.notify("Too tired to play... maybe let me sleep", Emphasis.NEGATIVE)
            return
        s.energy -= PLAY_ENERGY_COST
        s.hunger += PLAY_HUNGER_COST
        s.clean -= PLAY_CLEAN_COST
        s.health += PLAY_HEALTH
        self._done("That was fun!", Emphasis.POSITIVE)

    def toggle_sleep(self):
        s = self.stats
        if s.is_dead:
            return
        s.is_sleeping = not s.is_sleeping
        if s.is_sleeping:
            self._done("Zzz...")
        else:
            self._done("I'm awake!", Emphasis.POSITIVE)

    def heal(self):
        s = self.stats
        if s.is_dead:
            return
        if s.energy <= HEAL_MIN_ENERGY:
            self.pet.notify("Too tired to heal... sleep first", Emphasis.NEGATIVE)
            return
        s.health += HEAL_HEALTH
        s.clean += HEAL_CLEAN
        s.energy -= HEAL_ENERGY_COST
        self._done("Feeling better already", Emphasis.POSITIVE)

    def toggle_pause(self):
        # Allowed even at health 0
        s = self.stats
        s.paused = not s.paused
        self._done("Time paused" if s.paused else "Time resumed")

    def reset(self):
        self.pet.reset()
        self._done("Fresh start! Say hi")

    def _done(self, message, emphasis=None):
        self.stats.clamp_vitals()
        self.pet.notify(message, emphasis)
        self.pet.commit()
