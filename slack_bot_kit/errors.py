"""
Exceptions raised by slack-bot-kit.
"""

from typing import Any, Optional


class SlackKitError(Exception):
    """Base class for slack-bot-kit errors."""


class DeliveryError(SlackKitError):
    """The platform accepted the call but reported a logical error."""

    def __init__(self, error: Any, response: Optional[Any] = None):
        super().__init__(f"Slack API error: {error}")
        self.error = error
        self.response = response


class MetadataDecodeError(SlackKitError, ValueError):
    """A view's private_metadata is present but is not valid JSON."""

    def __init__(self, raw: str):
        super().__init__(f"Invalid private_metadata: {raw!r}")
        self.raw = raw
