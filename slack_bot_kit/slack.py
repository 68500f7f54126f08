"""
Slack - facade tying message posting, dot-commands, modals and option
lists to one WebClient and event source.
"""

import argparse
import logging
import os
from typing import Any, Dict, List, Optional, Union

from slack_sdk import WebClient

from . import inputs
from .commands import CommandDispatcher, DotCommand, Handler
from .events import BotIdentity
from .gateway import MessageGateway
from .modals import ModalManager
from .options import OptionRegistry

logger = logging.getLogger(__name__)


def supports_subscription(source: Any) -> bool:
    """True when source exposes an event(name) registration hook, like a Bolt App."""
    return callable(getattr(source, "event", None))


class Slack:
    """
    Convenience layer over a Slack WebClient.

    The instance owns its bot identity, command table and option registry;
    nothing is shared between instances.

    Usage:
        app = App(token=SLACK_BOT_TOKEN)
        slack = Slack(app.client, events=app, interactions=app)

        def hello(event):
            slack.post_message(channel=event["channel"], text="hi")

        slack.dot_command("hello", hello)
    """

    def __init__(
        self,
        client: WebClient,
        events: Any = None,
        interactions: Any = None,
        app_id: Optional[str] = None,
    ):
        self.client = client
        self.interactions = interactions
        self.app_id = app_id if app_id is not None else os.environ.get("SLACK_APP_ID", "")

        self.bot = BotIdentity()
        self.gateway = MessageGateway(client, self.bot)
        self.commands = CommandDispatcher()
        self.modals = ModalManager(client)
        self.options = OptionRegistry()

        self.events = None
        if events is not None:
            if supports_subscription(events):
                self.events = events
                events.event("message")(self.handle_message)
            else:
                logger.warning(f"Event source {events!r} does not support subscription")

        self.gateway.load_identity()

    def handle_message(self, event: Dict[str, Any]) -> int:
        """Drop the bot's own messages, then dispatch dot-commands."""
        if self.gateway.is_from_bot(event):
            return 0
        return self.commands.dispatch(event)

    def dot_command(
        self,
        command: Union[str, Dict[str, Any]],
        handler: Handler,
        parser: Optional[argparse.ArgumentParser] = None,
    ) -> DotCommand:
        return self.commands.register(command, handler, parser=parser)

    def post_message(self, **kwargs):
        return self.gateway.post_message(**kwargs)

    def update_message(self, **kwargs):
        return self.gateway.update_message(**kwargs)

    def post_error(self, channel: str, error: Any, thread_ts: Optional[str] = None):
        return self.gateway.post_error(channel, error, thread_ts=thread_ts)

    def get_file(self, url: str) -> bytes:
        return self.gateway.get_file(url)

    def store_options(self, id: str, options: List[Dict]) -> None:
        self.options.store(id, options)

    def get_options(self, id: str) -> Optional[List[Dict]]:
        return self.options.get(id)

    def get_selected_option(self, view, block_id, action_id=inputs.DEFAULT_SELECT_ACTION_ID):
        return inputs.get_selected_option(view, block_id, action_id)

    def get_selected_options(self, view, block_id, action_id=inputs.DEFAULT_SELECT_ACTION_ID):
        return inputs.get_selected_options(view, block_id, action_id)

    def get_plain_text_value(self, view, block_id, action_id):
        return inputs.get_plain_text_value(view, block_id, action_id)
