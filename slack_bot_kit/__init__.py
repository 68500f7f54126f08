"""
slack-bot-kit: Convenience layer over Slack Bolt - dot-commands, modals,
Block Kit builders and message helpers.

Usage:
    from slack_bot_kit import SlackBotRunner, SlackConfig, PluginInfo, blocks

    def greet(slack):
        def hello(event):
            slack.post_message(
                channel=event["channel"],
                blocks=[blocks.section(text=f"Hi {event['args'].name}")],
            )

        parser = argparse.ArgumentParser()
        parser.add_argument("name")
        slack.dot_command({"command": "hello", "parser": parser}, hello)
        return PluginInfo(name="greet", description="Says hello", version="1.0.0")

    SlackBotRunner(SlackConfig.from_env(), plugins=[greet]).start()
"""

from . import blocks
from .commands import CommandDispatcher, DotCommand
from .config import SlackConfig
from .errors import DeliveryError, MetadataDecodeError, SlackKitError
from .events import BotIdentity, InboundEvent
from .gateway import MessageGateway
from .inputs import get_plain_text_value, get_selected_option, get_selected_options
from .modals import ApiPush, ModalManager, ResponseActionPush
from .options import OptionRegistry
from .runner import PluginInfo, SlackBotRunner
from .slack import Slack

__all__ = [
    "Slack",
    "SlackBotRunner",
    "SlackConfig",
    "PluginInfo",
    "blocks",
    "CommandDispatcher",
    "DotCommand",
    "MessageGateway",
    "ModalManager",
    "ResponseActionPush",
    "ApiPush",
    "OptionRegistry",
    "BotIdentity",
    "InboundEvent",
    "get_selected_option",
    "get_selected_options",
    "get_plain_text_value",
    "SlackKitError",
    "DeliveryError",
    "MetadataDecodeError",
]
__version__ = "0.1.0"
