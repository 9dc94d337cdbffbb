"""Application configuration loaded from a JSON file."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field, fields, is_dataclass, MISSING
from pathlib import Path
from typing import Any


class ConfigError(ValueError):
    """The configuration document has the wrong shape."""


@dataclass
class BotConfig:
    token: str = ""
    client_id: str = ""


@dataclass
class DetectionConfig:
    enabled: bool = False
    default_mode: str = ""
    threshold_file: str = ""
    guild_profiles: str = ""


@dataclass
class RuntimeConfig:
    disable_gc: bool = False
    cpu_isolation: bool = False
    correlator_cpu: int = 0
    ingest_cpu: int = 0
    decision_cpu: int = 0
    dispatcher_cpu: int = 0
    memory_lock: bool = False
    priority_rt: bool = False


@dataclass
class NetworkConfig:
    gateway_queues: int = 0
    http_pool_size: int = 0
    worker_count: int = 0
    api_base_url: str = ""


@dataclass
class ForensicsConfig:
    enabled: bool = False
    retention_days: int = 0
    audit_interval: int = field(default=0, metadata={"key": "audit_interval_ms"})
    snapshot_path: str = ""
    log_compression: bool = False


@dataclass
class HAConfig:
    enabled: bool = False
    cluster_nodes: list[str] = field(default_factory=list)
    replication_port: int = 0
    election_timeout: int = field(default=0, metadata={"key": "election_timeout_ms"})
    heartbeat_interval: int = field(default=0, metadata={"key": "heartbeat_interval_ms"})


@dataclass
class Config:
    bot: BotConfig = field(default_factory=BotConfig)
    detection: DetectionConfig = field(default_factory=DetectionConfig)
    runtime: RuntimeConfig = field(default_factory=RuntimeConfig)
    network: NetworkConfig = field(default_factory=NetworkConfig)
    forensics: ForensicsConfig = field(default_factory=ForensicsConfig)
    ha: HAConfig = field(default_factory=HAConfig)

    @classmethod
    def from_dict(cls, data: Any) -> "Config":
        """Build a config from decoded JSON; missing keys keep zero values."""
        return _build(cls, data, "config")


def _zero(f) -> Any:
    if f.default is not MISSING:
        return f.default
    return f.default_factory()


def _coerce(raw: Any, zero: Any, where: str) -> Any:
    if isinstance(zero, bool):
        if isinstance(raw, bool):
            return raw
        raise ConfigError(f"{where}: expected a boolean")
    if isinstance(zero, int):
        if isinstance(raw, int) and not isinstance(raw, bool):
            return raw
        raise ConfigError(f"{where}: expected an integer")
    if isinstance(zero, str):
        if isinstance(raw, str):
            return raw
        raise ConfigError(f"{where}: expected a string")
    if isinstance(zero, list):
        if isinstance(raw, list) and all(isinstance(item, str) for item in raw):
            return list(raw)
        raise ConfigError(f"{where}: expected a list of strings")
    raise ConfigError(f"{where}: unsupported field")


def _build(cls: type, data: Any, where: str) -> Any:
    if data is None:
        return cls()
    if not isinstance(data, dict):
        raise ConfigError(f"{where}: expected an object")
    values: dict[str, Any] = {}
    for f in fields(cls):
        key = f.metadata.get("key", f.name)
        raw = data.get(key)
        if raw is None:
            continue
        zero = _zero(f)
        if is_dataclass(zero):
            values[f.name] = _build(type(zero), raw, f"{where}.{key}")
        else:
            values[f.name] = _coerce(raw, zero, f"{where}.{key}")
    return cls(**values)


_loaded: Config | None = None


def load(path: str | os.PathLike[str]) -> Config:
    """Read a JSON config file and apply environment overrides.

    Raises OSError if the file cannot be read and ValueError if it is not a
    valid configuration document.
    """
    global _loaded
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    cfg = Config.from_dict(data)

    token = os.environ.get("DISCORD_TOKEN", "")
    if token:
        cfg.bot.token = token
    client_id = os.environ.get("CLIENT_ID", "")
    if client_id:
        cfg.bot.client_id = client_id

    _loaded = cfg
    return cfg


def load_or_default(path: str | os.PathLike[str]) -> Config:
    """Load the config file, falling back to defaults on any failure."""
    try:
        return load(path)
    except (OSError, ValueError):
        return default_config()


def default_config() -> Config:
    """Return the built-in defaults."""
    return Config(
        bot=BotConfig(),
        detection=DetectionConfig(enabled=True, default_mode="normal"),
        runtime=RuntimeConfig(
            disable_gc=True,
            cpu_isolation=True,
            correlator_cpu=1,
            ingest_cpu=2,
            decision_cpu=5,
            dispatcher_cpu=6,
            memory_lock=True,
            priority_rt=True,
        ),
        network=NetworkConfig(
            gateway_queues=4,
            http_pool_size=8,
            worker_count=8,
            api_base_url="https://discord.com/api/v10",
        ),
        forensics=ForensicsConfig(
            enabled=True,
            retention_days=90,
            audit_interval=5000,
            log_compression=True,
        ),
        ha=HAConfig(enabled=False, election_timeout=3000, heartbeat_interval=1000),
    )


def get_config() -> Config:
    """Return the last loaded config, or the defaults if none was loaded."""
    if _loaded is None:
        return default_config()
    return _loaded