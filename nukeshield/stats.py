"""Host, process and bot statistics, and their presentation as embeds."""

from __future__ import annotations

import gc
import os
import platform
import socket
import sys
import threading
import time
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any

import psutil

_UNIT = 1024
_UNIT_LETTERS = "KMGTPE"
_GOVERNOR_PATH = Path("/sys/devices/system/cpu/cpu0/cpufreq/scaling_governor")
_CMDLINE_PATH = Path("/proc/cmdline")
_CPUINFO_PATH = Path("/proc/cpuinfo")
_PROBE_ERRORS = (psutil.Error, OSError, NotImplementedError, AttributeError, RuntimeError)

_BOT_START = time.monotonic()


@dataclass
class SystemStats:
    """A snapshot of host, process and bot figures; durations are in seconds."""

    hostname: str = ""
    os: str = ""
    platform: str = ""
    architecture: str = ""
    uptime: float = 0.0
    boot_time: datetime | None = None

    cpu_model: str = ""
    cpu_cores: int = 0
    cpu_threads: int = 0
    cpu_usage: float = 0.0
    cpu_frequency: float = 0.0
    cpu_governor: str = ""
    cpu_isolation: str = ""

    total_memory: int = 0
    used_memory: int = 0
    free_memory: int = 0
    memory_percent: float = 0.0
    swap_total: int = 0
    swap_used: int = 0

    disk_total: int = 0
    disk_used: int = 0
    disk_free: int = 0
    disk_percent: float = 0.0

    network_sent: int = 0
    network_recv: int = 0
    network_connections: int = 0

    runtime_version: str = ""
    runtime_threads: int = 0
    process_rss: int = 0
    process_vms: int = 0
    gc_collections: int = 0

    bot_uptime: float = 0.0
    guilds: int = 0
    latency: float = 0.0
    extra: dict[str, Any] = field(default_factory=dict)


def _cpu_model() -> str:
    try:
        for line in _CPUINFO_PATH.read_text(errors="replace").splitlines():
            key, _, value = line.partition(":")
            if key.strip() == "model name":
                return value.strip()
    except OSError:
        pass
    return platform.processor()


def gather_system_stats(guilds: int, latency: float) -> SystemStats:
    """Collect a snapshot; figures that cannot be read are left at zero."""
    stats = SystemStats()

    stats.hostname = socket.gethostname()
    stats.os = platform.system().lower()
    stats.platform = platform.platform()
    stats.architecture = platform.machine()
    try:
        boot = psutil.boot_time()
        stats.boot_time = datetime.fromtimestamp(int(boot))
        stats.uptime = max(0.0, time.time() - boot)
    except _PROBE_ERRORS:
        pass

    stats.cpu_model = _cpu_model()
    try:
        stats.cpu_cores = psutil.cpu_count(logical=False) or 0
    except _PROBE_ERRORS:
        pass
    stats.cpu_threads = os.cpu_count() or 0

    try:
        stats.cpu_usage = float(psutil.cpu_percent(interval=1.0))
    except _PROBE_ERRORS:
        pass

    try:
        freq = psutil.cpu_freq()
        if freq is not None:
            stats.cpu_frequency = float(freq.current)
    except _PROBE_ERRORS:
        pass

    try:
        stats.cpu_governor = _GOVERNOR_PATH.read_text()
    except OSError:
        stats.cpu_governor = "unknown"

    try:
        cmdline = _CMDLINE_PATH.read_text()
        stats.cpu_isolation = "enabled" if "isolcpus" in cmdline else "disabled"
    except OSError:
        stats.cpu_isolation = "unknown"

    try:
        memory = psutil.virtual_memory()
        stats.total_memory = memory.total
        stats.used_memory = memory.used
        stats.free_memory = memory.free
        stats.memory_percent = memory.percent
    except _PROBE_ERRORS:
        pass

    try:
        swap = psutil.swap_memory()
        stats.swap_total = swap.total
        stats.swap_used = swap.used
    except _PROBE_ERRORS:
        pass

    try:
        disk = psutil.disk_usage("/")
        stats.disk_total = disk.total
        stats.disk_used = disk.used
        stats.disk_free = disk.free
        stats.disk_percent = disk.percent
    except _PROBE_ERRORS:
        pass

    try:
        net = psutil.net_io_counters(pernic=False)
        if net is not None:
            stats.network_sent = net.bytes_sent
            stats.network_recv = net.bytes_recv
    except _PROBE_ERRORS:
        pass

    try:
        stats.network_connections = len(psutil.net_connections(kind="all"))
    except _PROBE_ERRORS:
        pass

    stats.runtime_version = f"{platform.python_implementation()} {platform.python_version()}"
    stats.runtime_threads = threading.active_count()
    try:
        process_memory = psutil.Process().memory_info()
        stats.process_rss = process_memory.rss
        stats.process_vms = process_memory.vms
    except _PROBE_ERRORS:
        pass
    stats.gc_collections = sum(gen.get("collections", 0) for gen in gc.get_stats())

    stats.bot_uptime = time.monotonic() - _BOT_START
    stats.guilds = guilds
    stats.latency = latency
    stats.extra["executable"] = sys.executable
    return stats


def _timestamp() -> str:
    stamp = datetime.now().astimezone().isoformat(timespec="seconds")
    return stamp[:-6] + "Z" if stamp.endswith("+00:00") else stamp


def _field(name: str, value: str, inline: bool) -> dict[str, Any]:
    return {"name": name, "value": value, "inline": inline}


def stats_embeds(stats: SystemStats) -> list[dict[str, Any]]:
    """Render a snapshot as five embeds in the message embed shape."""
    main = {
        "title": "📊 VM & System Statistics",
        "color": 0x00BFFF,
        "fields": [
            _field(
                "🖥️ Host Information",
                f"**Hostname:** `{stats.hostname}`\n**OS:** `{stats.os}`\n"
                f"**Platform:** `{stats.platform}`\n**Architecture:** `{stats.architecture}`\n"
                f"**Uptime:** `{format_duration(stats.uptime)}`",
                False,
            )
        ],
        "timestamp": _timestamp(),
    }

    governor = trim_last(stats.cpu_governor) if stats.cpu_governor else ""
    cpu = {
        "title": "⚡ CPU Performance",
        "color": 0xFF8C00,
        "fields": [
            _field(
                "🔧 CPU Details",
                f"**Model:** `{truncate_string(stats.cpu_model, 40)}`\n"
                f"**Cores:** `{stats.cpu_cores}` physical\n"
                f"**Threads:** `{stats.cpu_threads}` logical\n"
                f"**Frequency:** `{stats.cpu_frequency:.2f} MHz`",
                True,
            ),
            _field(
                "📈 CPU Usage",
                f"**Current:** `{stats.cpu_usage:.2f}%`\n{progress_bar(stats.cpu_usage, 100)}",
                True,
            ),
            _field(
                "⚙️ Optimization",
                f"**Governor:** `{governor}`\n**CPU Isolation:** `{stats.cpu_isolation}`",
                False,
            ),
        ],
    }

    memory = {
        "title": "💾 Memory Statistics",
        "color": 0x9370DB,
        "fields": [
            _field(
                "🗂️ RAM Usage",
                f"**Total:** `{format_bytes(stats.total_memory)}`\n"
                f"**Used:** `{format_bytes(stats.used_memory)}`\n"
                f"**Free:** `{format_bytes(stats.free_memory)}`\n"
                f"**Usage:** `{stats.memory_percent:.2f}%`\n"
                f"{progress_bar(stats.memory_percent, 100)}",
                True,
            ),
            _field(
                "💿 Swap Memory",
                f"**Total:** `{format_bytes(stats.swap_total)}`\n"
                f"**Used:** `{format_bytes(stats.swap_used)}`",
                True,
            ),
        ],
    }

    disk_net = {
        "title": "💽 Storage & Network",
        "color": 0x32CD32,
        "fields": [
            _field(
                "📀 Disk Usage",
                f"**Total:** `{format_bytes(stats.disk_total)}`\n"
                f"**Used:** `{format_bytes(stats.disk_used)}`\n"
                f"**Free:** `{format_bytes(stats.disk_free)}`\n"
                f"**Usage:** `{stats.disk_percent:.2f}%`\n"
                f"{progress_bar(stats.disk_percent, 100)}",
                False,
            ),
            _field(
                "🌐 Network I/O",
                f"**Sent:** `{format_bytes(stats.network_sent)}`\n"
                f"**Received:** `{format_bytes(stats.network_recv)}`\n"
                f"**Connections:** `{stats.network_connections}`",
                False,
            ),
        ],
    }

    latency_ms = int(stats.latency * 1000)
    latency_us = int(stats.latency * 1_000_000)
    bot = {
        "title": "🤖 Bot & Runtime Statistics",
        "color": 0xFF1493,
        "fields": [
            _field(
                "🚀 Bot Status",
                f"**Uptime:** `{format_duration(stats.bot_uptime)}`\n"
                f"**Guilds:** `{stats.guilds}`\n"
                f"**Latency:** `{latency_ms}ms` ({latency_us}µs)",
                True,
            ),
            _field(
                "🐍 Runtime",
                f"**Version:** `{stats.runtime_version}`\n"
                f"**Threads:** `{stats.runtime_threads}`\n"
                f"**GC Cycles:** `{stats.gc_collections}`",
                True,
            ),
            _field(
                "🧠 Process Memory",
                f"**Resident:** `{format_bytes(stats.process_rss)}`\n"
                f"**Virtual:** `{format_bytes(stats.process_vms)}`",
                False,
            ),
        ],
        "footer": {"text": "Ultra-Low-Latency Antinuke Engine | Target: 100-300ns detection"},
    }

    return [main, cpu, memory, disk_net, bot]


def format_bytes(count: int) -> str:
    """Human-readable size in binary units, two decimals above one KiB."""
    if count < 0:
        raise ValueError(f"byte count cannot be negative: {count}")
    if count < _UNIT:
        return f"{count} B"
    div, exp = _UNIT, 0
    n = count // _UNIT
    while n >= _UNIT:
        div *= _UNIT
        exp += 1
        n //= _UNIT
    return f"{count / div:.2f} {_UNIT_LETTERS[exp]}B"


def _trunc_mod(a: int, b: int) -> int:
    return a - b * int(a / b)


def format_duration(seconds: float) -> str:
    """Days, hours and minutes, dropping leading zero units."""
    hours_total = seconds / 3600
    days = int(hours_total / 24)
    hours = _trunc_mod(int(hours_total), 24)
    minutes = _trunc_mod(int(seconds / 60), 60)
    if days > 0:
        return f"{days}d {hours}h {minutes}m"
    if hours > 0:
        return f"{hours}h {minutes}m"
    return f"{minutes}m"


def progress_bar(value: float, maximum: float) -> str:
    """A ten-cell bar in backticks, one filled cell per ten percent."""
    percent = (value / maximum) * 100
    filled = int(percent / 10)
    empty = 10 - filled
    return "`" + "█" * filled + "░" * empty + "`"


def truncate_string(text: str, max_len: int) -> str:
    """Cut ``text`` to ``max_len`` characters, ending in an ellipsis if cut."""
    if len(text) <= max_len:
        return text
    if max_len < 3:
        raise ValueError(f"max_len too small to truncate: {max_len}")
    return text[: max_len - 3] + "..."


def trim_last(text: str) -> str:
    """Drop the final character; an empty string raises ValueError."""
    if not text:
        raise ValueError("cannot trim an empty string")
    return text[:-1]