"""
SlackBotRunner - wires a Bolt app, the Slack facade and plugins, then runs
Socket Mode.
"""

import logging
import signal
import sys
import time
from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional

from slack_bolt import App
from slack_bolt.adapter.socket_mode import SocketModeHandler

from .config import SlackConfig
from .slack import Slack

logger = logging.getLogger(__name__)


@dataclass
class PluginInfo:
    """What a plugin reports about itself once installed."""
    name: str
    description: str
    version: str


Plugin = Callable[[Slack], PluginInfo]


class SlackBotRunner:
    """
    Runs a Slack bot built from plugins.

    A plugin is a callable that receives the Slack facade, registers its
    dot-commands and interaction handlers, and returns its PluginInfo.

        def echo_plugin(slack):
            slack.dot_command("echo", lambda e: slack.post_message(
                channel=e["channel"], text=e["text"][len(".echo"):].strip()))
            return PluginInfo("echo", "Repeats text", "1.0.0")

        SlackBotRunner(SlackConfig.from_env(), plugins=[echo_plugin]).start()
    """

    def __init__(
        self,
        config: SlackConfig,
        plugins: Iterable[Plugin] = (),
        app: Optional[App] = None,
    ):
        self.config = config
        self.plugins = list(plugins)
        self.app = app if app is not None else App(token=config.bot_token)
        self.slack = Slack(
            self.app.client,
            events=self.app,
            interactions=self.app,
            app_id=config.app_id,
        )
        self.loaded: List[PluginInfo] = []
        self._start_time = 0.0

        self.load_plugins()
        self._register_diagnostics()

    def load_plugins(self) -> List[PluginInfo]:
        """Install each plugin. A plugin that raises is logged and skipped."""
        for plugin in self.plugins:
            try:
                info = plugin(self.slack)
            except Exception as e:
                logger.error(f"Error loading plugin {plugin!r}: {e}", exc_info=True)
                continue
            self.loaded.append(info)
            logger.info(f"Loaded plugin {info.name} v{info.version}")
        return self.loaded

    def _register_diagnostics(self):
        for command in self.config.diagnostic_commands:
            self.slack.dot_command(command, self._handle_diagnostics)

    def _handle_diagnostics(self, event):
        self.slack.post_message(
            channel=event.get("channel"),
            text=self._get_diagnostic_info(),
            thread_ts=event.get("thread_ts") or event.get("ts"),
        )

    def _get_diagnostic_info(self) -> str:
        """Generate diagnostic information."""
        uptime_seconds = int(time.time() - self._start_time) if self._start_time else 0
        hours, remainder = divmod(uptime_seconds, 3600)
        minutes, seconds = divmod(remainder, 60)
        uptime_str = f"{hours}h {minutes}m {seconds}s"
        plugins = ", ".join(f"{p.name} v{p.version}" for p in self.loaded) or "none"

        return f"""*{self.config.bot_name} Diagnostics*

:robot_face: *Version:* {self.config.version}
:clock1: *Uptime:* {uptime_str}
:jigsaw: *Plugins:* {plugins}
"""

    def _post_status(self, message: str):
        """Post to status channel if configured."""
        if not self.config.status_channel:
            return
        try:
            self.slack.post_message(channel=self.config.status_channel, text=message)
        except Exception as e:
            logger.error(f"Error posting status message: {e}")

    def _shutdown_handler(self, signum, frame):
        """Graceful shutdown."""
        logger.info("Shutdown signal received...")
        self._post_status(
            f":warning: {self.config.bot_name} v{self.config.version} is shutting down..."
        )
        sys.exit(0)

    def start(self):
        """Start the bot in Socket Mode."""
        signal.signal(signal.SIGTERM, self._shutdown_handler)
        signal.signal(signal.SIGINT, self._shutdown_handler)

        self._start_time = time.time()

        logger.info(f"Starting {self.config.bot_name} v{self.config.version}...")
        self._post_status(
            f":white_check_mark: {self.config.bot_name} v{self.config.version} is online!"
        )

        handler = SocketModeHandler(self.app, self.config.app_token)
        handler.start()
