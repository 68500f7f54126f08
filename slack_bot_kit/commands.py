"""
Dot-commands - ".name args" text commands dispatched from message events.
"""

import argparse
import logging
import shlex
import threading
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Union

logger = logging.getLogger(__name__)

Handler = Callable[[Dict[str, Any]], Any]


def normalize_command(command: str) -> str:
    """Prefix a bare command token with "."."""
    if not command.startswith("."):
        return f".{command}"
    return command


def split_words(text: str) -> List[str]:
    """Shell-style split; an unbalanced quote falls back to whitespace splitting."""
    try:
        return shlex.split(text)
    except ValueError as e:
        logger.debug(f"Falling back to whitespace split for {text!r}: {e}")
        return text.split()


@dataclass
class DotCommand:
    """A registered command name, its optional argument parser and handler."""
    name: str
    handler: Handler
    parser: Optional[argparse.ArgumentParser] = None

    def parse_args(self, text: str) -> argparse.Namespace:
        """Shell-split the text after the command name and parse it.

        Parse failures behave as the parser is configured to (argparse exits
        with usage by default).
        """
        tokens = split_words(text[len(self.name):])
        self.parser.prog = self.name
        return self.parser.parse_args(tokens)

    def __call__(self, event: Dict[str, Any]) -> Any:
        if self.parser is not None:
            event["args"] = self.parse_args(event["text"])
        return self.handler(event)


class CommandDispatcher:
    """
    Matches message text against registered dot-commands.

    Matching is a plain prefix test in registration order and is not
    exclusive: with ".a" and ".ab" registered, ".ab x" fires both, and
    ".fooo" fires ".foo".
    """

    def __init__(self):
        self._commands: Dict[str, List[DotCommand]] = {}
        self._lock = threading.Lock()

    @property
    def names(self) -> List[str]:
        return list(self._commands)

    def register(
        self,
        command: Union[str, Dict[str, Any]],
        handler: Handler,
        parser: Optional[argparse.ArgumentParser] = None,
    ) -> DotCommand:
        """
        Register a handler for a dot-command.

        Args:
            command: Command token ("foo" or ".foo"), or a dict with
                "command" and optional "parser" keys
            handler: Called with the event dict; event["args"] holds the
                parsed arguments when a parser is set
            parser: Optional argparse parser for the text after the name
        """
        if isinstance(command, dict):
            parser = command.get("parser", parser)
            command = command["command"]

        registration = DotCommand(
            name=normalize_command(command), handler=handler, parser=parser
        )
        with self._lock:
            self._commands.setdefault(registration.name, []).append(registration)
        logger.debug(f"Registered dot-command {registration.name}")
        return registration

    def match(self, text: str) -> List[DotCommand]:
        """Registrations whose name prefixes text, in registration order."""
        with self._lock:
            return [
                registration
                for name, registrations in self._commands.items()
                if text.startswith(name)
                for registration in registrations
            ]

    def dispatch(self, event: Dict[str, Any]) -> int:
        """
        Trim event["text"] and fire every matching command.

        Returns:
            Number of handlers invoked
        """
        text = event.get("text")
        if not text:
            return 0

        text = text.strip()
        event["text"] = text
        matched = self.match(text)
        for registration in matched:
            logger.debug(f"Dispatching {registration.name}", extra={"channel": event.get("channel")})
            registration(event)
        return len(matched)
