"""In-memory per-guild protection profiles."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field

from nukeshield.safety import SafetyMode
from nukeshield.thresholds import ThresholdMatrix


@dataclass
class GuildProfile:
    """Protection settings of a single guild."""

    guild_id: int
    name: str = ""
    member_count: int = 0
    enabled: bool = True
    safety_mode: SafetyMode = SafetyMode.NORMAL
    panic_mode: bool = False
    owner_id: int = 0
    whitelist: list[int] = field(default_factory=list)
    trusted_roles: list[int] = field(default_factory=list)
    custom_thresholds: ThresholdMatrix | None = None


class ProfileStore:
    """Thread-safe mapping of guild IDs to profiles."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._profiles: dict[int, GuildProfile] = {}

    def get(self, guild_id: int) -> GuildProfile:
        """Return the guild's profile, creating a default one if missing."""
        with self._lock:
            profile = self._profiles.get(guild_id)
        if profile is None:
            return self.get_or_create(guild_id)
        return profile

    def set(self, profile: GuildProfile) -> None:
        with self._lock:
            self._profiles[profile.guild_id] = profile

    def get_or_create(self, guild_id: int) -> GuildProfile:
        with self._lock:
            profile = self._profiles.get(guild_id)
            if profile is None:
                profile = GuildProfile(guild_id=guild_id)
                self._profiles[guild_id] = profile
            return profile

    def is_whitelisted(self, guild_id: int, user_id: int) -> bool:
        with self._lock:
            profile = self._profiles.get(guild_id)
            return profile is not None and user_id in profile.whitelist

    def add_whitelist(self, guild_id: int, user_id: int) -> None:
        with self._lock:
            profile = self._profiles.get(guild_id)
            if profile is None:
                self._profiles[guild_id] = GuildProfile(guild_id=guild_id, whitelist=[user_id])
            elif user_id not in profile.whitelist:
                profile.whitelist.append(user_id)

    def remove_whitelist(self, guild_id: int, user_id: int) -> None:
        with self._lock:
            profile = self._profiles.get(guild_id)
            if profile is not None and user_id in profile.whitelist:
                profile.whitelist.remove(user_id)

    def is_enabled(self, guild_id: int) -> bool:
        """Guilds without a profile count as enabled."""
        with self._lock:
            profile = self._profiles.get(guild_id)
            return True if profile is None else profile.enabled

    def set_enabled(self, guild_id: int, enabled: bool) -> None:
        with self._lock:
            profile = self._profiles.get(guild_id)
            if profile is None:
                self._profiles[guild_id] = GuildProfile(guild_id=guild_id, enabled=enabled)
            else:
                profile.enabled = enabled

    def set_panic_mode(self, guild_id: int, enabled: bool) -> None:
        with self._lock:
            profile = self._profiles.get(guild_id)
            if profile is None:
                self._profiles[guild_id] = GuildProfile(guild_id=guild_id, panic_mode=enabled)
            else:
                profile.panic_mode = enabled

    def is_panic_mode(self, guild_id: int) -> bool:
        with self._lock:
            profile = self._profiles.get(guild_id)
            return profile is not None and profile.panic_mode


_global_profiles: ProfileStore | None = None


def init_guild_profiles() -> ProfileStore:
    """Replace the shared profile store with an empty one."""
    global _global_profiles
    _global_profiles = ProfileStore()
    return _global_profiles


def get_profile_store() -> ProfileStore:
    """Return the shared profile store, creating it if needed."""
    if _global_profiles is None:
        return init_guild_profiles()
    return _global_profiles