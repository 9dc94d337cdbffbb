import pytest

from nukeshield.safety import (
    SAFETY_MODE_CONFIGS,
    SafetyMode,
    apply_threshold_multiplier,
    get_safety_mode_config,
    parse_safety_mode,
    should_auto_ban,
    should_auto_lockdown,
    should_freeze_actors,
    should_quarantine,
)


@pytest.mark.parametrize(
    "name, mode",
    [
        ("normal", SafetyMode.NORMAL),
        ("elevated", SafetyMode.ELEVATED),
        ("high", SafetyMode.HIGH),
        ("lockdown", SafetyMode.LOCKDOWN),
        ("emergency", SafetyMode.EMERGENCY),
    ],
)
def test_parse_and_str_round_trip(name, mode):
    assert parse_safety_mode(name) is mode
    assert str(mode) == name
    assert parse_safety_mode(str(mode)) is mode


@pytest.mark.parametrize("text", ["", "bogus", "NORMALISH", "HIGH"])
def test_parse_unknown_defaults_to_normal(text):
    assert parse_safety_mode(text) is SafetyMode.NORMAL


def test_every_mode_has_matching_config():
    for mode in SafetyMode:
        assert get_safety_mode_config(mode).mode is mode
    assert set(SAFETY_MODE_CONFIGS) == set(SafetyMode)


def test_multipliers_decrease_with_severity():
    multipliers = [get_safety_mode_config(m).threshold_multiplier for m in SafetyMode]
    assert multipliers == sorted(multipliers, reverse=True)
    assert get_safety_mode_config(SafetyMode.NORMAL).threshold_multiplier == 1.0


def test_unknown_mode_raises():
    with pytest.raises(ValueError):
        get_safety_mode_config(42)


def test_normal_mode_keeps_threshold():
    for base in (1, 5, 37, 1000):
        assert apply_threshold_multiplier(base, SafetyMode.NORMAL) == base


def test_threshold_never_below_one():
    for mode in SafetyMode:
        assert apply_threshold_multiplier(0, mode) == 1
        assert apply_threshold_multiplier(1, mode) == 1


@pytest.mark.parametrize("base", [2, 7, 15, 40, 250])
def test_multiplier_does_not_increase_threshold(base):
    results = [apply_threshold_multiplier(base, mode) for mode in SafetyMode]
    assert all(1 <= r <= base for r in results)
    assert results == sorted(results, reverse=True)


def test_multiplier_rejects_negative_base():
    with pytest.raises(ValueError):
        apply_threshold_multiplier(-1, SafetyMode.NORMAL)


def test_policy_flags():
    assert all(should_auto_ban(m) for m in SafetyMode)
    assert all(should_quarantine(m) for m in SafetyMode)
    assert all(should_freeze_actors(m) for m in SafetyMode)
    assert not should_auto_lockdown(SafetyMode.NORMAL)
    assert not should_auto_lockdown(SafetyMode.ELEVATED)
    assert should_auto_lockdown(SafetyMode.HIGH)
    assert should_auto_lockdown(SafetyMode.EMERGENCY)