"""Safety modes and the response policy attached to each of them."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from enum import IntEnum

_UINT32_MAX = 0xFFFFFFFF


class SafetyMode(IntEnum):
    """How aggressively a guild is protected, from normal to emergency."""

    NORMAL = 0
    ELEVATED = 1
    HIGH = 2
    LOCKDOWN = 3
    EMERGENCY = 4

    def __str__(self) -> str:
        return self.name.lower()


@dataclass(frozen=True)
class ModeConfig:
    """Response policy for one safety mode."""

    mode: SafetyMode
    auto_ban_enabled: bool
    auto_lockdown_enabled: bool
    quarantine_enabled: bool
    freeze_actors_enabled: bool
    threshold_multiplier: float
    response_delay_ms: int


SAFETY_MODE_CONFIGS: dict[SafetyMode, ModeConfig] = {
    SafetyMode.NORMAL: ModeConfig(
        mode=SafetyMode.NORMAL,
        auto_ban_enabled=True,
        auto_lockdown_enabled=False,
        quarantine_enabled=True,
        freeze_actors_enabled=True,
        threshold_multiplier=1.0,
        response_delay_ms=0,
    ),
    SafetyMode.ELEVATED: ModeConfig(
        mode=SafetyMode.ELEVATED,
        auto_ban_enabled=True,
        auto_lockdown_enabled=False,
        quarantine_enabled=True,
        freeze_actors_enabled=True,
        threshold_multiplier=0.8,
        response_delay_ms=0,
    ),
    SafetyMode.HIGH: ModeConfig(
        mode=SafetyMode.HIGH,
        auto_ban_enabled=True,
        auto_lockdown_enabled=True,
        quarantine_enabled=True,
        freeze_actors_enabled=True,
        threshold_multiplier=0.6,
        response_delay_ms=0,
    ),
    SafetyMode.LOCKDOWN: ModeConfig(
        mode=SafetyMode.LOCKDOWN,
        auto_ban_enabled=True,
        auto_lockdown_enabled=True,
        quarantine_enabled=True,
        freeze_actors_enabled=True,
        threshold_multiplier=0.4,
        response_delay_ms=0,
    ),
    SafetyMode.EMERGENCY: ModeConfig(
        mode=SafetyMode.EMERGENCY,
        auto_ban_enabled=True,
        auto_lockdown_enabled=True,
        quarantine_enabled=True,
        freeze_actors_enabled=True,
        threshold_multiplier=0.2,
        response_delay_ms=0,
    ),
}


def _f32(value: float) -> float:
    """Round a float to single precision."""
    return struct.unpack("<f", struct.pack("<f", value))[0]


def get_safety_mode_config(mode: SafetyMode | int) -> ModeConfig:
    """Return the policy for ``mode``; unknown modes raise ValueError."""
    return SAFETY_MODE_CONFIGS[SafetyMode(mode)]


def apply_threshold_multiplier(base: int, mode: SafetyMode | int) -> int:
    """Scale a threshold by the mode's multiplier, never going below one."""
    if not 0 <= base <= _UINT32_MAX:
        raise ValueError(f"threshold out of range: {base}")
    multiplier = get_safety_mode_config(mode).threshold_multiplier
    adjusted = _f32(_f32(float(base)) * _f32(multiplier))
    if adjusted < 1.0:
        adjusted = 1.0
    return min(int(adjusted), _UINT32_MAX)


def should_auto_ban(mode: SafetyMode | int) -> bool:
    return get_safety_mode_config(mode).auto_ban_enabled


def should_auto_lockdown(mode: SafetyMode | int) -> bool:
    return get_safety_mode_config(mode).auto_lockdown_enabled


def should_freeze_actors(mode: SafetyMode | int) -> bool:
    return get_safety_mode_config(mode).freeze_actors_enabled


def should_quarantine(mode: SafetyMode | int) -> bool:
    return get_safety_mode_config(mode).quarantine_enabled


def parse_safety_mode(text: str) -> SafetyMode:
    """Parse a mode name; anything unrecognised means normal."""
    try:
        return SafetyMode[text.upper()] if text == text.lower() else SafetyMode.NORMAL
    except KeyError:
        return SafetyMode.NORMAL