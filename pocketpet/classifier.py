from .constants import (
    SICK_HEALTH, HUNGRY_HUNGER, TIRED_ENERGY, DIRTY_CLEAN,
    HAPPY_HEALTH, HAPPY_HUNGER, HAPPY_ENERGY,
)
from .models import Mood


def classify(s):
    """Maps vitals to (mood, condition). Rules are checked in priority order."""
    if s.is_sleeping:
        return Mood.SLEEPY, "Sleeping..."

    if s.health <= SICK_HEALTH:
        return Mood.SICK, "Needs care!"
    if s.hunger >= HUNGRY_HUNGER:
        return Mood.HUNGRY, "Feed me!"
    if s.energy <= TIRED_ENERGY:
        return Mood.SLEEPY, "Very tired"
    if s.clean <= DIRTY_CLEAN:
        return Mood.SICK, "Dirty & cranky"

    if s.health >= HAPPY_HEALTH and s.hunger <= HAPPY_HUNGER and s.energy >= HAPPY_ENERGY:
        return Mood.HAPPY, "Great"

    return Mood.OKAY, "Doing fine"


def age_minutes(s, now):
    return max(0, int((now - s.created_at) // 60))
