import json

import pytest

from pocketpet.actions import ActionController
from pocketpet.models import StatVector, Emphasis
from pocketpet.pet_entity import Pet
from pocketpet.storage import SnapshotStore

NOW = 1_700_000_000.0


@pytest.fixture
def pet(tmp_path):
    p = Pet(SnapshotStore(str(tmp_path / "pet_save.json")), clock=lambda: NOW)
    p.messages = []
    p.views = []
    p.subscribe(on_change=p.views.append, on_message=p.messages.append)
    return p


def _vitals(s):
    return (s.health, s.hunger, s.energy, s.clean)


def test_feed(pet):
    pet.stats.hunger = 50
    ActionController(pet).feed()
    assert _vitals(pet.stats) == (100, 25, 85, 75)
    assert pet.messages[-1].emphasis == Emphasis.POSITIVE
    assert pet.views[-1]["hunger"] == 25


def test_feed_clamps(pet):
    pet.stats.energy = 98
    ActionController(pet).feed()
    assert pet.stats.hunger == 0
    assert pet.stats.energy == 100


def test_feed_persists_snapshot(pet):
    ActionController(pet).feed()
    with open(pet.store.path) as f:
        saved = json.load(f)
    assert saved["energy"] == 85


def test_play(pet):
    pet.stats.health = 90
    ActionController(pet).play()
    assert _vitals(pet.stats) == (93, 8, 62, 70)
    assert pet.messages[-1].message == "That was fun!"


def test_play_refused_when_tired(pet):
    pet.stats.energy = 10
    before = _vitals(pet.stats)
    ActionController(pet).play()
    assert _vitals(pet.stats) == before
    assert pet.messages[-1].emphasis == Emphasis.NEGATIVE
    assert "Too tired" in pet.messages[-1].message
    assert pet.views == []


def test_heal(pet):
    pet.stats.health = 40
    pet.stats.clean = 50
    ActionController(pet).heal()
    assert _vitals(pet.stats) == (58, 0, 70, 62)


def test_heal_refused_when_tired(pet):
    pet.stats.health = 40
    pet.stats.energy = 8
    ActionController(pet).heal()
    assert pet.stats.health == 40
    assert pet.messages[-1].emphasis == Emphasis.NEGATIVE


def test_toggle_sleep(pet):
    ctl = ActionController(pet)
    ctl.toggle_sleep()
    assert pet.stats.is_sleeping
    assert pet.messages[-1].emphasis is None
    ctl.toggle_sleep()
    assert not pet.stats.is_sleeping
    assert pet.messages[-1].emphasis == Emphasis.POSITIVE


def test_guarded_actions_inert_when_dead(pet):
    pet.stats.health = 0
    pet.stats.paused = True
    before = StatVector(**pet.stats.to_snapshot())
    ctl = ActionController(pet)
    for action in (ctl.feed, ctl.play, ctl.heal, ctl.toggle_sleep):
        action()
    assert pet.stats == before
    assert pet.messages == []


def test_pause_toggles_even_when_dead(pet):
    pet.stats.health = 0
    pet.stats.paused = True
    ctl = ActionController(pet)
    ctl.toggle_pause()
    assert not pet.stats.paused
    assert pet.messages[-1].message == "Time resumed"
    ctl.toggle_pause()
    assert pet.stats.paused


def test_sleep_and_pause_are_independent(pet):
    ctl = ActionController(pet)
    ctl.toggle_sleep()
    ctl.toggle_pause()
    assert pet.stats.is_sleeping and pet.stats.paused
    ctl.toggle_sleep()
    assert pet.stats.paused and not pet.stats.is_sleeping


def test_reset(pet):
    pet.stats = StatVector(health=0, hunger=99, energy=3, clean=1, is_sleeping=True,
                           paused=True, created_at=NOW - 3600, last_tick_at=NOW - 60)
    ActionController(pet).reset()
    s = pet.stats
    assert _vitals(s) == (100, 0, 80, 80)
    assert not s.is_sleeping and not s.paused
    assert s.created_at == s.last_tick_at == NOW
    assert pet.messages[-1].message == "Fresh start! Say hi"


def test_reset_discards_old_snapshot(pet):
    ctl = ActionController(pet)
    pet.stats.hunger = 70
    ctl.feed()
    ctl.reset()
    with open(pet.store.path) as f:
        saved = json.load(f)
    assert saved["hunger"] == 0
    assert saved["created_at"] == NOW
