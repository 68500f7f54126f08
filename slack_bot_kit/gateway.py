"""
MessageGateway - message posting, error reporting, file download and the
bot's own identity.
"""

import logging
from typing import Any, Dict, Optional

import httpx
from slack_sdk import WebClient
from slack_sdk.errors import SlackApiError

from .errors import DeliveryError
from .events import BotIdentity, InboundEvent

logger = logging.getLogger(__name__)

ERROR_ICON = ":x:"


def _check_result(result):
    error = result.get("error")
    if error:
        raise DeliveryError(error, response=result)
    return result


class MessageGateway:
    """Thin wrappers over chat.postMessage / chat.update for a WebClient."""

    def __init__(self, client: WebClient, identity: Optional[BotIdentity] = None):
        self.client = client
        self.identity = identity if identity is not None else BotIdentity()

    def load_identity(self) -> BotIdentity:
        """Populate the bot identity from auth.test. Failures are logged."""
        try:
            data = self.client.auth_test()
        except Exception as e:
            logger.error(f"Error calling auth.test: {e}", exc_info=True)
            return self.identity

        self.identity.id = data.get("bot_id") or ""
        self.identity.user = data.get("user") or ""
        self.identity.user_id = data.get("user_id") or ""
        logger.debug(f"Bot identity loaded: {self.identity}")
        return self.identity

    def is_from_bot(self, event: Dict[str, Any]) -> bool:
        return InboundEvent(event).is_from(self.identity)

    def post_message(self, **kwargs):
        """
        Post a message via chat.postMessage.

        Raises:
            DeliveryError: The response carries an error
        """
        try:
            result = self.client.chat_postMessage(**kwargs)
        except SlackApiError as e:
            raise DeliveryError(e.response.get("error"), response=e.response) from e
        return _check_result(result)

    def update_message(self, **kwargs):
        """
        Edit a message via chat.update.

        Raises:
            DeliveryError: The response carries an error
        """
        try:
            result = self.client.chat_update(**kwargs)
        except SlackApiError as e:
            raise DeliveryError(e.response.get("error"), response=e.response) from e
        return _check_result(result)

    def post_error(self, channel: str, error: Any, thread_ts: Optional[str] = None):
        """
        Post an error as a message marked with :x:.

        Failures are logged, never raised. Returns the response or None.
        """
        payload: Dict[str, Any] = {
            "channel": channel,
            "text": str(error),
            "icon_emoji": ERROR_ICON,
        }
        if thread_ts:
            payload["thread_ts"] = thread_ts

        try:
            return self.post_message(**payload)
        except Exception as e:
            logger.error(f"Error posting error: {e}", exc_info=True, extra={"channel": channel})
        return None

    def get_file(self, url: str, timeout: float = 10.0) -> bytes:
        """
        Download a private file using the bot token.

        Raises:
            httpx.HTTPStatusError: Non-2xx response
            httpx.RequestError: Network failure
        """
        with httpx.Client(timeout=timeout) as client:
            response = client.get(
                url,
                headers={"Authorization": f"Bearer {self.client.token}"},
            )
            response.raise_for_status()
            return response.content
