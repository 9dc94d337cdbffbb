import pytest

from nukeshield.thresholds import (
    DEFAULT_THRESHOLD_MATRIX,
    GuildSizeCategory,
    ThresholdConfig,
    ThresholdMatrix,
    category_by_size,
    get_guild_thresholds,
    get_threshold_matrix,
    get_thresholds,
    init_thresholds,
    set_custom_threshold,
)


@pytest.mark.parametrize(
    "members, category",
    [
        (0, GuildSizeCategory.TINY),
        (99, GuildSizeCategory.TINY),
        (100, GuildSizeCategory.SMALL),
        (999, GuildSizeCategory.SMALL),
        (1000, GuildSizeCategory.MEDIUM),
        (4999, GuildSizeCategory.MEDIUM),
        (5000, GuildSizeCategory.LARGE),
        (19999, GuildSizeCategory.LARGE),
        (20000, GuildSizeCategory.HUGE),
    ],
)
def test_category_boundaries(members, category):
    assert category_by_size(members) is category


def test_tiny_matrix_values():
    tiny = get_threshold_matrix(GuildSizeCategory.TINY)
    assert tiny.ban_threshold == 3
    assert tiny.channel_threshold == 1
    assert tiny.window_ms == 100


def test_huge_matrix_values():
    huge = get_threshold_matrix(GuildSizeCategory.HUGE)
    assert huge.ban_threshold == 15
    assert huge.velocity_threshold == 40
    assert huge.window_ms == 250


def test_thresholds_grow_with_size():
    bans = [get_threshold_matrix(c).ban_threshold for c in GuildSizeCategory]
    assert bans == sorted(bans)
    assert set(DEFAULT_THRESHOLD_MATRIX) == set(GuildSizeCategory)


def test_unknown_category_raises():
    with pytest.raises(ValueError):
        get_threshold_matrix(9)


def test_config_falls_back_to_size_default():
    cfg = ThresholdConfig()
    assert cfg.for_guild(123, 50) == DEFAULT_THRESHOLD_MATRIX[GuildSizeCategory.TINY]
    assert cfg.for_guild(123, 50000) == DEFAULT_THRESHOLD_MATRIX[GuildSizeCategory.HUGE]


def test_config_custom_overrides_default():
    cfg = ThresholdConfig()
    custom = ThresholdMatrix(ban_threshold=2, window_ms=42)
    cfg.set_custom(7, custom)
    assert cfg.for_guild(7, 100000) == custom
    assert cfg.for_guild(8, 100000) != custom


def test_global_thresholds_custom_and_reset():
    init_thresholds()
    custom = ThresholdMatrix(role_threshold=9)
    set_custom_threshold(11, custom)
    assert get_guild_thresholds(11, 0) == custom
    assert get_thresholds().custom_guilds == {11: custom}
    init_thresholds()
    assert get_guild_thresholds(11, 0) == DEFAULT_THRESHOLD_MATRIX[GuildSizeCategory.TINY]


def test_get_thresholds_returns_shared_instance():
    first = get_thresholds()
    assert get_thresholds() is first