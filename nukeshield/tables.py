"""Per-guild counter, threshold and velocity tables and their reset cycle."""

from __future__ import annotations

import logging
import threading
import time
from dataclasses import dataclass, field, replace

logger = logging.getLogger(__name__)

TABLE_SIZE = 8192
_INDEX_MASK = TABLE_SIZE - 1
_UINT32_MASK = 0xFFFFFFFF
_NANOS_PER_SECOND = 1_000_000_000


@dataclass
class CounterSet:
    """Action counts tracked for one slot."""

    ban_count: int = 0
    kick_count: int = 0
    channel_delete: int = 0
    role_delete: int = 0
    webhook_create: int = 0
    perm_change: int = 0


class CounterArray:
    """Fixed table of counter sets; indices wrap modulo the table size."""

    def __init__(self) -> None:
        self._slots = [CounterSet() for _ in range(TABLE_SIZE)]

    def get(self, index: int) -> CounterSet:
        return self._slots[index & _INDEX_MASK]

    def reset(self, index: int) -> None:
        self._slots[index & _INDEX_MASK] = CounterSet()

    def reset_all(self) -> None:
        self._slots = [CounterSet() for _ in range(TABLE_SIZE)]

    def __len__(self) -> int:
        return TABLE_SIZE

    def __iter__(self):
        return iter(self._slots)


_global_counters: CounterArray | None = None


def init_counters() -> CounterArray:
    global _global_counters
    _global_counters = CounterArray()
    return _global_counters


def get_counters() -> CounterArray:
    if _global_counters is None:
        return init_counters()
    return _global_counters


@dataclass
class ThresholdSet:
    """Limits applied to one slot."""

    ban_threshold: int = 0
    channel_threshold: int = 0
    role_threshold: int = 0
    webhook_threshold: int = 0
    velocity_threshold: int = 0
    multi_actor_threshold: int = 0


DEFAULT_THRESHOLDS = ThresholdSet(
    ban_threshold=5,
    channel_threshold=3,
    role_threshold=3,
    webhook_threshold=10,
    velocity_threshold=15,
    multi_actor_threshold=50,
)


class ThresholdTable:
    """Fixed table of threshold sets, each starting at the defaults."""

    def __init__(self) -> None:
        self._slots = [replace(DEFAULT_THRESHOLDS) for _ in range(TABLE_SIZE)]

    def get(self, index: int) -> ThresholdSet:
        return self._slots[index & _INDEX_MASK]

    def set(self, index: int, thresholds: ThresholdSet) -> None:
        self._slots[index & _INDEX_MASK] = replace(thresholds)

    def __len__(self) -> int:
        return TABLE_SIZE

    def __iter__(self):
        return iter(self._slots)


_global_threshold_table: ThresholdTable | None = None


def init_threshold_table() -> ThresholdTable:
    global _global_threshold_table
    _global_threshold_table = ThresholdTable()
    return _global_threshold_table


def get_threshold_table() -> ThresholdTable:
    if _global_threshold_table is None:
        return init_threshold_table()
    return _global_threshold_table


@dataclass
class VelocityTracker:
    """Last observed count and time, and the rate derived from them."""

    last_count: int = 0
    last_time: int = 0
    velocity: int = 0


class VelocityTable:
    """Per-slot event rate in events per second."""

    def __init__(self) -> None:
        self._slots = [VelocityTracker() for _ in range(TABLE_SIZE)]

    def update(self, index: int, current_count: int, current_time: int) -> int:
        """Record a count at ``current_time`` (nanoseconds) and return the rate.

        The first sample of a slot only sets the baseline and returns 0.
        A non-advancing clock keeps the previous rate.
        """
        tracker = self._slots[index & _INDEX_MASK]
        if tracker.last_time == 0:
            tracker.last_count = current_count
            tracker.last_time = current_time
            tracker.velocity = 0
            return 0

        delta_count = (current_count - tracker.last_count) & _UINT32_MASK
        delta_time = current_time - tracker.last_time
        if delta_time > 0:
            tracker.velocity = ((delta_count * _NANOS_PER_SECOND) // delta_time) & _UINT32_MASK

        tracker.last_count = current_count
        tracker.last_time = current_time
        return tracker.velocity

    def get(self, index: int) -> int:
        return self._slots[index & _INDEX_MASK].velocity

    def reset(self, index: int) -> None:
        self._slots[index & _INDEX_MASK] = VelocityTracker()

    def __len__(self) -> int:
        return TABLE_SIZE


_global_velocity: VelocityTable | None = None


def init_velocity() -> VelocityTable:
    global _global_velocity
    _global_velocity = VelocityTable()
    return _global_velocity


def get_velocity() -> VelocityTable:
    if _global_velocity is None:
        return init_velocity()
    return _global_velocity


@dataclass
class HotEvent:
    type: int = 0
    priority: int = 0
    flags: int = 0
    guild_idx: int = 0
    actor_idx: int = 0
    target_id: int = 0
    metadata: int = 0
    timestamp: int = 0


@dataclass
class HotCounters:
    count: int = 0
    last_time: int = 0
    velocity: int = 0
    reserved: int = 0


@dataclass
class FastPathData:
    """Working state of one event on the detection fast path."""

    event: HotEvent = field(default_factory=HotEvent)
    counters: HotCounters = field(default_factory=HotCounters)
    thresholds: ThresholdSet = field(default_factory=ThresholdSet)
    trigger_mask: int = 0

    def reset(self) -> None:
        """Clear event, counters and triggers; thresholds are kept."""
        self.event = HotEvent()
        self.counters = HotCounters()
        self.trigger_mask = 0

    def set_trigger(self, flag: int) -> None:
        self.trigger_mask = (self.trigger_mask | flag) & _UINT32_MASK

    def has_trigger(self) -> bool:
        return self.trigger_mask != 0

    def trigger_count(self) -> int:
        return bin(self.trigger_mask).count("1")


class ResetManager:
    """Periodically clears counters and velocity trackers."""

    def __init__(
        self,
        interval: float,
        counters: CounterArray | None = None,
        velocity: VelocityTable | None = None,
    ) -> None:
        self.interval = interval
        self._counters = counters
        self._velocity = velocity
        self._last_reset = time.monotonic()
        self._stop = threading.Event()
        self._thread: threading.Thread | None = None

    @property
    def counters(self) -> CounterArray:
        return self._counters if self._counters is not None else get_counters()

    @property
    def velocity(self) -> VelocityTable:
        return self._velocity if self._velocity is not None else get_velocity()

    def should_reset(self) -> bool:
        return time.monotonic() - self._last_reset >= self.interval

    def reset_counters(self) -> None:
        self.counters.reset_all()
        velocity = self.velocity
        for index in range(TABLE_SIZE):
            velocity.reset(index)
        self._last_reset = time.monotonic()
        logger.info("Counters reset complete")

    def partial_reset(self, guild_index: int) -> None:
        self.counters.reset(guild_index)
        self.velocity.reset(guild_index)

    def start(self) -> None:
        """Run the reset cycle in a daemon thread."""
        if self._thread is not None and self._thread.is_alive():
            return
        self._stop.clear()
        self._thread = threading.Thread(target=self._loop, name="reset-manager", daemon=True)
        self._thread.start()

    def stop(self) -> None:
        self._stop.set()
        if self._thread is not None:
            self._thread.join()
            self._thread = None

    def _loop(self) -> None:
        while not self._stop.wait(self.interval):
            if self.should_reset():
                self.reset_counters()


def prepare_tables() -> tuple[CounterArray, ThresholdTable, VelocityTable]:
    """Create fresh counter, threshold and velocity tables."""
    counters = init_counters()
    thresholds = init_threshold_table()
    velocity = init_velocity()
    logger.info("Correlator tables prepared")
    return counters, thresholds, velocity