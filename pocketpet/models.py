import math
from enum import Enum, auto
from dataclasses import dataclass, asdict
from typing import Optional

from .constants import (
    STAT_MIN, STAT_MAX,
    DEFAULT_HEALTH, DEFAULT_HUNGER, DEFAULT_ENERGY, DEFAULT_CLEAN,
)

VITALS = ("health", "hunger", "energy", "clean")
FLAGS = ("is_sleeping", "paused")
TIMESTAMPS = ("created_at", "last_tick_at")


def clamp(value, low=STAT_MIN, high=STAT_MAX):
    return max(low, min(high, value))


class Mood(str, Enum):
    """Display mood. Members compare equal to their label ('Happy' etc)."""
    HAPPY = "Happy"
    OKAY = "Okay"
    HUNGRY = "Hungry"
    SLEEPY = "Sleepy"
    SICK = "Sick"


class Emphasis(Enum):
    """Transient visual cue attached to a notification."""
    POSITIVE = auto()  # bounce
    NEGATIVE = auto()  # shake


@dataclass
class Notification:
    message: str
    emphasis: Optional[Emphasis] = None


@dataclass
class StatVector:
    """The pet's vitals plus lifecycle timestamps (epoch seconds)."""
    health: int = DEFAULT_HEALTH
    hunger: int = DEFAULT_HUNGER  # 0 = Full, 100 = Starving
    energy: int = DEFAULT_ENERGY
    clean: int = DEFAULT_CLEAN
    is_sleeping: bool = False
    paused: bool = False
    created_at: float = 0.0
    last_tick_at: float = 0.0

    @classmethod
    def fresh(cls, now):
        return cls(created_at=now, last_tick_at=now)

    @property
    def is_dead(self):
        return self.health <= 0

    def clamp_vitals(self):
        for name in VITALS:
            setattr(self, name, clamp(getattr(self, name)))
        return self

    def to_snapshot(self):
        return asdict(self)

    @classmethod
    def from_snapshot(cls, data, now):
        """
        Reconciles a decoded snapshot against fresh defaults, field by field.
        A field is taken from the snapshot only when it is present and of the
        expected kind; otherwise the default stays. Returns None if the
        snapshot is not a mapping at all.
        """
        if not isinstance(data, dict):
            return None

        stats = cls.fresh(now)
        for name in VITALS:
            value = data.get(name)
            if _is_number(value):
                setattr(stats, name, clamp(int(value)))
        for name in FLAGS:
            value = data.get(name)
            if isinstance(value, bool):
                setattr(stats, name, value)
        for name in TIMESTAMPS:
            value = data.get(name)
            if _is_number(value):
                # Saved in the future (clock skew): pull back to now
                setattr(stats, name, min(float(value), now))
        return stats


def _is_number(value):
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    try:
        return math.isfinite(float(value))
    except OverflowError:
        # int too large for a float
        return False
