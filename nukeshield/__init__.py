"""Detection and configuration core for a chat-server anti-nuke guard: safety modes, thresholds, guild profiles, settings, alert queues, per-guild tables, command definitions and system statistics."""

__version__ = "0.1.0"