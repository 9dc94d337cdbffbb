# nukeshield

nukeshield is the detection and configuration core of an anti-nuke guard for
chat servers ("guilds"). It provides the parts that decide when an actor is
doing too much, too fast. It also keeps per-guild protection settings in
memory.

## Modules

- **`nukeshield.safety`**: graded safety modes.
  - `SafetyMode` has the levels `NORMAL`, `ELEVATED`, `HIGH`, `LOCKDOWN` and `EMERGENCY`.
  - Each mode has a `ModeConfig`, which holds a threshold multiplier and the auto-ban, lockdown, quarantine and freeze flags.
  - `apply_threshold_multiplier(base, mode)` scales a limit. The result is never below one.
  - `parse_safety_mode(text)` turns a lower-case name into a mode. Any other text gives `NORMAL`.
- **`nukeshield.thresholds`**: default limits by guild size.
  - `category_by_size` maps a member count to a `GuildSizeCategory`.
  - `get_threshold_matrix` returns the default `ThresholdMatrix` for a category.
  - `ThresholdConfig` adds custom limits per guild. Use it through `set_custom_threshold` and `get_guild_thresholds`.
- **`nukeshield.profiles`**: `ProfileStore`, a thread-safe in-memory map from guild ID to `GuildProfile`.
  - Each profile holds the whitelist, panic mode, the enabled flag and the owner ID.
  - `get_profile_store()` returns the shared store.
- **`nukeshield.settings`**: the application configuration, read from JSON.
  - `load(path)` reads the file. Non-empty `DISCORD_TOKEN` and `CLIENT_ID` environment variables override the file's values.
  - `load_or_default(path)` returns `default_config()` when the file cannot be read or parsed.
  - A document with the wrong shape raises `ConfigError`.
- **`nukeshield.alert_queue`**: `AlertQueue`, a bounded FIFO ring of `Alert` records.
  - The capacity is rounded up to a power of two, with a minimum of 16384.
  - One slot always stays free.
  - `enqueue` returns `False` when the queue is full. `dequeue` returns `None` when it is empty.
- **`nukeshield.branchless`**: comparison and selection helpers on unsigned 32-bit integers, such as `branchless_greater`, `branchless_min` and `branchless_select`.
- **`nukeshield.tables`**: fixed 8192-slot tables. An index wraps modulo the table size.
  - `CounterArray` holds action counters.
  - `ThresholdTable` holds per-slot limits. Every slot starts at `DEFAULT_THRESHOLDS`.
  - `VelocityTable` holds event rates in events per second.
  - `FastPathData` holds trigger bookkeeping.
  - `ResetManager` clears the counters and velocity trackers on an interval, in a daemon thread.
- **`nukeshield.command_spec`**: `all_commands()` returns the slash-command definitions, in registration order. The commands are `antinuke`, `set`, `setpunishment`, `panic`, `logs`, `status`, `ping` and `stats`. Call `to_dict()` on each one to get its registration payload.
- **`nukeshield.stats`**: statistics on the host and the process.
  - `gather_system_stats(guilds, latency)` collects host, process and bot figures with psutil into a `SystemStats`. Figures that cannot be read stay at zero.
  - `stats_embeds(stats)` renders a snapshot as five embed dictionaries.
  - The formatting helpers are `format_bytes`, `format_duration`, `progress_bar`, `truncate_string` and `trim_last`.

## Installing

```
pip install .
pip install ".[test]"   # with the test dependencies
```

## Examples

This example picks a ban limit for a guild of 250 members in high safety mode:

```python
from nukeshield.safety import SafetyMode, apply_threshold_multiplier
from nukeshield.thresholds import category_by_size, get_threshold_matrix

matrix = get_threshold_matrix(category_by_size(250))
ban_limit = apply_threshold_multiplier(matrix.ban_threshold, SafetyMode.HIGH)
```

This example works with the shared profile store:

```python
from nukeshield.profiles import get_profile_store

profiles = get_profile_store()
profiles.add_whitelist(1234, 5678)
profiles.set_panic_mode(1234, True)
assert profiles.is_whitelisted(1234, 5678)
assert profiles.is_panic_mode(1234)
```

This example passes an alert through the queue and measures a rate:

```python
from nukeshield.alert_queue import AlertQueue
from nukeshield.tables import VelocityTable

queue = AlertQueue(1024)
alert = queue.get()
alert.guild_id, alert.actor_id = 1234, 5678
queue.enqueue(alert)
print(queue.dequeue())

rates = VelocityTable()
rates.update(0, 0, 1_000_000_000)          # first sample sets the baseline
print(rates.update(0, 5, 2_000_000_000))   # 5 events per second
```

This example reads the settings file, or falls back to the defaults:

```python
from nukeshield.settings import load_or_default

cfg = load_or_default("config.json")
print(cfg.network.worker_count)
```

## What it does not do

The package has no storage layer. Guild configuration, event limits,
whitelists and ban records live only in the in-memory `ProfileStore`. Nothing
is written to or read back from a database.

It does not connect to a chat service and does not run a bot. `command_spec`
describes the commands, but nothing here handles them. Nothing consumes the
alert queue or carries out punishments.

It provides no command-line program.

## Running the tests

```
pytest
```