"""Definitions of the slash commands the bot registers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Any


class OptionType(IntEnum):
    """Application command option types."""

    SUB_COMMAND = 1
    SUB_COMMAND_GROUP = 2
    STRING = 3
    INTEGER = 4
    BOOLEAN = 5
    USER = 6
    CHANNEL = 7
    ROLE = 8


@dataclass(frozen=True)
class Choice:
    """A fixed value the user can pick for an option."""

    name: str
    value: str | int

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "value": self.value}


@dataclass(frozen=True)
class CommandOption:
    """An option, subcommand or subcommand group of a command."""

    name: str
    description: str
    type: OptionType
    required: bool = False
    options: tuple["CommandOption", ...] = ()
    choices: tuple[Choice, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        """Serialise to the registration payload shape."""
        data: dict[str, Any] = {
            "type": int(self.type),
            "name": self.name,
            "description": self.description,
            "required": self.required,
        }
        if self.options:
            data["options"] = [option.to_dict() for option in self.options]
        if self.choices:
            data["choices"] = [choice.to_dict() for choice in self.choices]
        return data


@dataclass(frozen=True)
class ApplicationCommand:
    """A top-level slash command."""

    name: str
    description: str
    options: tuple[CommandOption, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        """Serialise to the registration payload shape."""
        data: dict[str, Any] = {"name": self.name, "description": self.description}
        if self.options:
            data["options"] = [option.to_dict() for option in self.options]
        return data


def _whitelist_target_options(verb: str) -> tuple[CommandOption, ...]:
    return (
        CommandOption("user", f"User to {verb}", OptionType.USER),
        CommandOption("role", f"Role to {verb}", OptionType.ROLE),
    )


def all_commands() -> list[ApplicationCommand]:
    """Every command the bot registers, in registration order."""
    return [
        ApplicationCommand(
            "antinuke",
            "Manage anti-nuke system",
            (
                CommandOption(
                    "enable", "Enable anti-nuke protection events", OptionType.SUB_COMMAND
                ),
                CommandOption(
                    "disable", "Disable anti-nuke protection events", OptionType.SUB_COMMAND
                ),
                CommandOption(
                    "whitelist",
                    "Manage whitelist",
                    OptionType.SUB_COMMAND_GROUP,
                    options=(
                        CommandOption(
                            "add",
                            "Add user/role to whitelist",
                            OptionType.SUB_COMMAND,
                            options=(
                                CommandOption("user", "User to whitelist", OptionType.USER),
                                CommandOption("role", "Role to whitelist", OptionType.ROLE),
                            ),
                        ),
                        CommandOption(
                            "remove",
                            "Remove user/role from whitelist",
                            OptionType.SUB_COMMAND,
                            options=_whitelist_target_options("remove from whitelist"),
                        ),
                        CommandOption(
                            "view",
                            "View all whitelisted users and roles",
                            OptionType.SUB_COMMAND,
                        ),
                    ),
                ),
            ),
        ),
        ApplicationCommand(
            "set",
            "Configure settings",
            (
                CommandOption(
                    "limit",
                    "Set rate limits for an event",
                    OptionType.SUB_COMMAND,
                    options=(
                        CommandOption(
                            "action", "The event to configure", OptionType.STRING, required=True
                        ),
                        CommandOption(
                            "limit", "Max actions allowed", OptionType.INTEGER, required=True
                        ),
                        CommandOption(
                            "time", "Time window in seconds (default 10s)", OptionType.INTEGER
                        ),
                    ),
                ),
            ),
        ),
        ApplicationCommand(
            "setpunishment",
            "Set punishment for an event",
            (
                CommandOption(
                    "action", "The event to configure", OptionType.STRING, required=True
                ),
                CommandOption(
                    "punishment",
                    "Punishment type",
                    OptionType.STRING,
                    required=True,
                    choices=(
                        Choice("Ban", "ban"),
                        Choice("Kick", "kick"),
                        Choice("Timeout", "timeout"),
                    ),
                ),
            ),
        ),
        ApplicationCommand(
            "panic",
            "Toggle panic mode (lockdown)",
            (
                CommandOption(
                    "enable", "Enable/Disable panic mode", OptionType.BOOLEAN, required=True
                ),
            ),
        ),
        ApplicationCommand(
            "logs",
            "Configure logging",
            (
                CommandOption(
                    "enable",
                    "Set log channel",
                    OptionType.SUB_COMMAND,
                    options=(
                        CommandOption(
                            "channel",
                            "Channel to send logs to",
                            OptionType.CHANNEL,
                            required=True,
                        ),
                    ),
                ),
            ),
        ),
        ApplicationCommand("status", "Show system status"),
        ApplicationCommand("ping", "Check Discord API latency and connection quality"),
        ApplicationCommand("stats", "Show comprehensive VM and system statistics"),
    ]