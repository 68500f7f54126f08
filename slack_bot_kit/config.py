"""
Runtime configuration, read from the environment.
"""

import os
from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class SlackConfig:
    """Configuration for a Slack bot.

    Required:
        bot_token: Bot OAuth token (SLACK_BOT_TOKEN)
        app_token: App-level token for Socket Mode (SLACK_APP_TOKEN)

    Optional:
        app_id: Slack app id (SLACK_APP_ID)
        bot_name: Display name used in status and diagnostic messages
        version: Version string
        status_channel: Channel ID for online/shutdown messages
        diagnostic_commands: Dot-commands that reply with diagnostic info.
            Matching is by prefix, so a plugin command such as ".statusx"
            also triggers ".status"; pass [] to turn diagnostics off.
    """

    bot_token: str
    app_token: str
    app_id: str = ""
    bot_name: str = "Slack Bot"
    version: str = "0.0.0"
    status_channel: Optional[str] = None
    diagnostic_commands: List[str] = field(
        default_factory=lambda: ["status", "version", "ping"]
    )

    @classmethod
    def from_env(cls, **overrides) -> "SlackConfig":
        """Build a config from SLACK_* env vars; explicit overrides win."""
        values = {
            "bot_token": os.environ.get("SLACK_BOT_TOKEN"),
            "app_token": os.environ.get("SLACK_APP_TOKEN"),
            "app_id": os.environ.get("SLACK_APP_ID", ""),
        }
        values.update({key: value for key, value in overrides.items() if value is not None})

        if not values["bot_token"] or not values["app_token"]:
            raise ValueError("Missing SLACK_BOT_TOKEN or SLACK_APP_TOKEN")

        return cls(**values)
