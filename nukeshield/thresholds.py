"""Detection thresholds chosen by guild size, with per-guild overrides."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum


class GuildSizeCategory(IntEnum):
    """Coarse guild size buckets."""

    TINY = 0
    SMALL = 1
    MEDIUM = 2
    LARGE = 3
    HUGE = 4


@dataclass(frozen=True)
class ThresholdMatrix:
    """Per-action limits that trigger detection."""

    ban_threshold: int = 0
    kick_threshold: int = 0
    channel_threshold: int = 0
    role_threshold: int = 0
    webhook_threshold: int = 0
    perm_threshold: int = 0
    velocity_threshold: int = 0
    window_ms: int = 0


DEFAULT_THRESHOLD_MATRIX: dict[GuildSizeCategory, ThresholdMatrix] = {
    GuildSizeCategory.TINY: ThresholdMatrix(
        ban_threshold=3,
        kick_threshold=5,
        channel_threshold=1,
        role_threshold=1,
        webhook_threshold=5,
        perm_threshold=3,
        velocity_threshold=10,
        window_ms=100,
    ),
    GuildSizeCategory.SMALL: ThresholdMatrix(
        ban_threshold=5,
        kick_threshold=8,
        channel_threshold=1,
        role_threshold=1,
        webhook_threshold=8,
        perm_threshold=5,
        velocity_threshold=15,
        window_ms=100,
    ),
    GuildSizeCategory.MEDIUM: ThresholdMatrix(
        ban_threshold=7,
        kick_threshold=12,
        channel_threshold=5,
        role_threshold=5,
        webhook_threshold=10,
        perm_threshold=7,
        velocity_threshold=20,
        window_ms=150,
    ),
    GuildSizeCategory.LARGE: ThresholdMatrix(
        ban_threshold=10,
        kick_threshold=15,
        channel_threshold=7,
        role_threshold=7,
        webhook_threshold=15,
        perm_threshold=10,
        velocity_threshold=30,
        window_ms=200,
    ),
    GuildSizeCategory.HUGE: ThresholdMatrix(
        ban_threshold=15,
        kick_threshold=20,
        channel_threshold=10,
        role_threshold=10,
        webhook_threshold=20,
        perm_threshold=15,
        velocity_threshold=40,
        window_ms=250,
    ),
}


def get_threshold_matrix(category: GuildSizeCategory | int) -> ThresholdMatrix:
    """Return the default matrix of a size category."""
    return DEFAULT_THRESHOLD_MATRIX[GuildSizeCategory(category)]


def category_by_size(member_count: int) -> GuildSizeCategory:
    """Bucket a guild by its member count."""
    if member_count < 100:
        return GuildSizeCategory.TINY
    if member_count < 1000:
        return GuildSizeCategory.SMALL
    if member_count < 5000:
        return GuildSizeCategory.MEDIUM
    if member_count < 20000:
        return GuildSizeCategory.LARGE
    return GuildSizeCategory.HUGE


@dataclass
class ThresholdConfig:
    """Default matrices plus custom thresholds keyed by guild ID."""

    default_matrix: dict[GuildSizeCategory, ThresholdMatrix] = field(
        default_factory=lambda: dict(DEFAULT_THRESHOLD_MATRIX)
    )
    custom_guilds: dict[int, ThresholdMatrix] = field(default_factory=dict)

    def set_custom(self, guild_id: int, thresholds: ThresholdMatrix) -> None:
        self.custom_guilds[guild_id] = thresholds

    def for_guild(self, guild_id: int, member_count: int) -> ThresholdMatrix:
        """Custom thresholds if set, otherwise the size-based default."""
        custom = self.custom_guilds.get(guild_id)
        if custom is not None:
            return custom
        return self.default_matrix[category_by_size(member_count)]


_global_thresholds: ThresholdConfig | None = None


def init_thresholds() -> ThresholdConfig:
    """Replace the shared threshold configuration with a fresh one."""
    global _global_thresholds
    _global_thresholds = ThresholdConfig()
    return _global_thresholds


def get_thresholds() -> ThresholdConfig:
    """Return the shared threshold configuration, creating it if needed."""
    if _global_thresholds is None:
        return init_thresholds()
    return _global_thresholds


def set_custom_threshold(guild_id: int, thresholds: ThresholdMatrix) -> None:
    get_thresholds().set_custom(guild_id, thresholds)


def get_guild_thresholds(guild_id: int, member_count: int) -> ThresholdMatrix:
    return get_thresholds().for_guild(guild_id, member_count)