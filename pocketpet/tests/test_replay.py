from pocketpet.decay import replay, advance
from pocketpet.models import StatVector

NOW = 1_700_000_000.0


def _snapshot(minutes_ago, **kw):
    data = StatVector(created_at=NOW - 7200, last_tick_at=NOW - minutes_ago * 60).to_snapshot()
    data.update(kw)
    return data


def test_missing_snapshot_gives_fresh_pet():
    s = replay(None, NOW)
    assert s == StatVector.fresh(NOW)


def test_non_mapping_snapshot_gives_fresh_pet():
    for bad in ([1, 2], "health", 42, True):
        assert replay(bad, NOW) == StatVector.fresh(NOW)


def test_under_a_minute_only_restamps():
    s = replay(_snapshot(0.5, hunger=10), NOW)
    assert (s.health, s.hunger, s.energy, s.clean) == (100, 10, 80, 80)
    assert s.last_tick_at == NOW


def test_one_tick_per_minute():
    s = replay(_snapshot(3), NOW)
    expected = StatVector()
    for _ in range(3):
        expected = advance(expected)
    assert (s.hunger, s.energy, s.clean) == (expected.hunger, expected.energy, expected.clean)
    assert s.hunger == 9


def test_replay_capped_at_sixty_minutes():
    capped = replay(_snapshot(60), NOW)
    long_gone = replay(_snapshot(60 * 24 * 7), NOW)
    assert capped == long_gone


def test_legacy_snapshot_falls_back_per_field():
    data = {"health": 55, "hunger": "lots", "energy": None, "is_sleeping": "yes",
            "paused": False, "last_tick_at": NOW, "mood": "Happy"}
    s = replay(data, NOW)
    assert s.health == 55
    assert s.hunger == 0
    assert s.energy == 80
    assert s.clean == 80
    assert s.is_sleeping is False
    assert s.created_at == NOW


def test_snapshot_values_are_clamped_and_truncated():
    s = replay({"health": 250, "hunger": -4, "energy": 33.9, "last_tick_at": NOW}, NOW)
    assert (s.health, s.hunger, s.energy) == (100, 0, 33)


def test_bools_and_nan_are_not_numbers():
    s = replay({"health": True, "clean": float("nan"), "last_tick_at": NOW}, NOW)
    assert s.health == 100
    assert s.clean == 80


def test_future_timestamps_pulled_back():
    s = replay(_snapshot(-30, created_at=NOW + 999), NOW)
    assert s.created_at == NOW
    assert s.last_tick_at == NOW
    assert s.hunger == 0


def test_replay_ignores_paused():
    s = replay(_snapshot(5, paused=True), NOW)
    assert s.paused
    assert s.hunger == 15


def test_pet_that_died_while_away_loads_paused():
    s = replay(_snapshot(60, health=5, hunger=90, energy=5, clean=5), NOW)
    assert s.health == 0
    assert s.paused
    assert not s.is_sleeping


def test_dead_sleeping_snapshot_stays_dead():
    s = replay(_snapshot(10, health=0, is_sleeping=True), NOW)
    assert s.health == 0
    assert not s.is_sleeping


def test_huge_json_integers_fall_back_to_defaults():
    s = replay({"health": 10 ** 400, "hunger": -(10 ** 400), "created_at": -(10 ** 400),
                "last_tick_at": 10 ** 400}, NOW)
    assert (s.health, s.hunger) == (100, 0)
    assert s.created_at == NOW
    assert s.last_tick_at == NOW
