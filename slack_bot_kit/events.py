"""
Inbound event helpers - bot identity and the self-filter accessors.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass
class BotIdentity:
    """The bot's own ids, filled in from auth.test."""
    id: str = ""
    user: str = ""
    user_id: str = ""

    @property
    def loaded(self) -> bool:
        return bool(self.id or self.user_id)


class InboundEvent:
    """Read-only accessor over a raw Slack event payload."""

    def __init__(self, payload: Dict[str, Any]):
        self.payload = payload

    @property
    def text(self) -> Optional[str]:
        return self.payload.get("text")

    @property
    def message(self) -> Dict[str, Any]:
        return self.payload.get("message") or {}

    def source_bot_id(self) -> Optional[str]:
        """bot_id, falling back to message.bot_id."""
        return self.payload.get("bot_id") or self.message.get("bot_id")

    def source_user_id(self) -> Optional[str]:
        """user_id, then user, then message.user."""
        return (
            self.payload.get("user_id")
            or self.payload.get("user")
            or self.message.get("user")
        )

    def is_from(self, identity: BotIdentity) -> bool:
        """True when the event was produced by the given bot.

        Empty identity fields never match, so events seen before auth.test
        completes are not filtered.
        """
        bot_id = self.source_bot_id()
        if identity.id and bot_id == identity.id:
            return True
        user_id = self.source_user_id()
        return bool(identity.user_id) and user_id == identity.user_id
