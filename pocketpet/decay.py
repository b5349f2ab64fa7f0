from dataclasses import replace

from .constants import (
    MAX_CATCHUP_MINUTES,
    SLEEP_HUNGER_GAIN, SLEEP_ENERGY_GAIN, SLEEP_CLEAN_LOSS, SLEEP_HEALTH_GAIN,
    AWAKE_HUNGER_GAIN, AWAKE_ENERGY_LOSS, AWAKE_CLEAN_LOSS,
    STARVING_HUNGER, STARVING_PENALTY, PECKISH_HUNGER, PECKISH_PENALTY,
    EXHAUSTED_ENERGY, EXHAUSTED_PENALTY, FILTHY_CLEAN, FILTHY_PENALTY,
)
from .models import StatVector, clamp


def advance(s: StatVector) -> StatVector:
    """Returns the state one tick later. Pure: the input is left untouched."""
    if s.is_sleeping:
        # Energy up faster, hunger up slower, health recovers
        return replace(
            s,
            hunger=clamp(s.hunger + SLEEP_HUNGER_GAIN),
            energy=clamp(s.energy + SLEEP_ENERGY_GAIN),
            clean=clamp(s.clean - SLEEP_CLEAN_LOSS),
            health=clamp(s.health + SLEEP_HEALTH_GAIN),
        )

    nxt = replace(
        s,
        hunger=clamp(s.hunger + AWAKE_HUNGER_GAIN),
        energy=clamp(s.energy - AWAKE_ENERGY_LOSS),
        clean=clamp(s.clean - AWAKE_CLEAN_LOSS),
    )

    # Penalties read the post-decay values and stack
    if nxt.hunger >= STARVING_HUNGER:
        nxt.health = clamp(nxt.health - STARVING_PENALTY)
    elif nxt.hunger >= PECKISH_HUNGER:
        nxt.health = clamp(nxt.health - PECKISH_PENALTY)
    if nxt.energy <= EXHAUSTED_ENERGY:
        nxt.health = clamp(nxt.health - EXHAUSTED_PENALTY)
    if nxt.clean <= FILTHY_CLEAN:
        nxt.health = clamp(nxt.health - FILTHY_PENALTY)

    return nxt


def enforce_terminal(s: StatVector) -> bool:
    """Latches the 'needs reset' condition in place. Returns True if it applies."""
    if s.health > 0:
        return False
    s.health = 0
    s.paused = True
    s.is_sleeping = False
    return True


def elapsed_ticks(last_tick_at, now):
    """Whole minutes since the last tick, capped for catch-up."""
    minutes = int((now - last_tick_at) // 60)
    return max(0, min(MAX_CATCHUP_MINUTES, minutes))


def replay(snapshot, now) -> StatVector:
    """
    Rebuilds the live state from a stored snapshot, simulating the ticks
    missed while the app was closed.

    Each whole minute of absence counts as one tick, up to
    MAX_CATCHUP_MINUTES. The replay runs whether or not the pet was paused.
    Snapshots that are missing or not a mapping give a fresh pet.
    """
    stats = StatVector.from_snapshot(snapshot, now)
    if stats is None:
        return StatVector.fresh(now)

    enforce_terminal(stats)
    for _ in range(elapsed_ticks(stats.last_tick_at, now)):
        stats = advance(stats)
    stats.last_tick_at = now
    enforce_terminal(stats)
    return stats
