"""
ModalManager - open, push and update Slack modals.

A modal's private_metadata carries JSON-encoded state between interactions;
the manager owns reading and rewriting it.
"""

import asyncio
import inspect
import json
import logging
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Dict, Mapping, Optional, Union

from slack_sdk import WebClient

from . import blocks
from .errors import MetadataDecodeError

logger = logging.getLogger(__name__)

# Fields views.update accepts; anything else on a live view is dropped.
UPDATABLE_VIEW_FIELDS = (
    "type",
    "blocks",
    "callback_id",
    "close",
    "submit",
    "title",
    "clear_on_close",
    "notify_on_close",
    "private_metadata",
)

RESPONSE_ACTION = "responseAction"
API = "api"


@dataclass
class ResponseActionPush:
    """Push by returning a response_action payload from the interaction request."""
    modal: Dict[str, Any]


@dataclass
class ApiPush:
    """Push through the views.push API call."""
    modal: Dict[str, Any]
    trigger_id: str
    extra: Dict[str, Any] = field(default_factory=dict)


PushRequest = Union[ResponseActionPush, ApiPush]


def to_view(modal: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Expand a simplified modal into a full view payload.

    title, submit and close may be plain strings; they are wrapped as
    plain_text objects, and omitted when empty.
    """
    view = dict(modal)
    view["type"] = "modal"
    for key in ("title", "submit", "close"):
        value = view.pop(key, None)
        if value:
            view[key] = blocks.plain_text(value) if isinstance(value, str) else value
    return view


def get_metadata(view: Mapping[str, Any]) -> Any:
    """Decoded private_metadata, {} when absent."""
    raw = view.get("private_metadata")
    if not raw:
        return {}
    try:
        return json.loads(raw)
    except json.JSONDecodeError as e:
        raise MetadataDecodeError(raw) from e


def update_metadata(view: Dict[str, Any], mutator: Callable[[Any], Any]) -> Any:
    """
    Read-modify-persist the view's metadata.

    mutator changes the decoded metadata in place; its return value is
    ignored, except that an awaitable result (an async mutator) is run to
    completion first. The re-encoded metadata is written back onto the view.
    """
    metadata = get_metadata(view)
    result = mutator(metadata)
    if inspect.isawaitable(result):
        asyncio.run(_wait_for(result))
    view["private_metadata"] = json.dumps(metadata)
    return metadata


async def _wait_for(awaitable: Awaitable) -> Any:
    return await awaitable


def _as_push_request(options: Union[PushRequest, Mapping[str, Any]]) -> Optional[PushRequest]:
    if isinstance(options, (ResponseActionPush, ApiPush)):
        return options

    options = dict(options)
    method = options.pop("pushMethod", None) or options.pop("push_method", None)
    modal = options.pop("modal", None)
    if modal is None:
        return None
    if method == RESPONSE_ACTION:
        return ResponseActionPush(modal=modal)
    if method == API:
        return ApiPush(modal=modal, trigger_id=options.pop("trigger_id", None), extra=options)
    return None


class ModalManager:
    """Modal operations over a WebClient.

    open, API push and update are best-effort: failures are logged and
    None is returned, so callers must check the result.
    """

    def __init__(self, client: WebClient):
        self.client = client

    to_view = staticmethod(to_view)
    get_metadata = staticmethod(get_metadata)
    update_metadata = staticmethod(update_metadata)

    def open(self, trigger_id: str, modal: Mapping[str, Any], **kwargs):
        """Open a new modal. Returns the API response, or None on failure."""
        try:
            return self.client.views_open(
                trigger_id=trigger_id, view=to_view(modal), **kwargs
            )
        except Exception as e:
            logger.error(
                f"Error opening modal: {e}", exc_info=True, extra={"trigger_id": trigger_id}
            )
        return None

    def push(self, options: Union[PushRequest, Mapping[str, Any]]):
        """
        Push a modal onto the modal stack.

        ResponseActionPush returns the {"response_action": "push", "view": ...}
        body to send back as the interaction response; no API call is made.
        ApiPush calls views.push and returns its response, or None on failure.
        """
        request = _as_push_request(options)

        if isinstance(request, ResponseActionPush):
            return {"response_action": "push", "view": to_view(request.modal)}

        if isinstance(request, ApiPush):
            try:
                return self.client.views_push(
                    trigger_id=request.trigger_id,
                    view=to_view(request.modal),
                    **request.extra,
                )
            except Exception as e:
                logger.error(
                    f"Error pushing modal: {e}",
                    exc_info=True,
                    extra={"trigger_id": request.trigger_id},
                )
            return None

        logger.warning(f"Unknown push method or missing modal in {options!r}")
        return None

    def update(self, view: Dict[str, Any], action: Callable[[Dict[str, Any], Any], Any]):
        """
        Update an existing modal.

        Args:
            view: The live view, including its "id"
            action: Called with (view, metadata); may change either in place

        Returns:
            The views.update response, or None on failure
        """
        try:
            update_metadata(view, lambda metadata: action(view, metadata))
            payload = {
                key: view[key]
                for key in UPDATABLE_VIEW_FIELDS
                if view.get(key) is not None
            }
            return self.client.views_update(view_id=view["id"], view=payload)
        except Exception as e:
            logger.error(
                f"Error updating modal: {e}", exc_info=True, extra={"view_id": view.get("id")}
            )
        return None
