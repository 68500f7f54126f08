"""
Block Kit builders - pure functions returning Slack UI payload dicts.

Keys whose value is None are left out of the payload.
"""

from typing import Any, Dict, List, Optional

DEFAULT_SELECT_ACTION_ID = "selection"
DEFAULT_RADIO_ACTION_ID = "radioButtons"


def _compact(payload: Dict[str, Any]) -> Dict[str, Any]:
    return {key: value for key, value in payload.items() if value is not None}


def plain_text(text: str) -> Dict[str, Any]:
    return {"type": "plain_text", "text": text, "emoji": True}


def markdown(text: str) -> Dict[str, Any]:
    return {"type": "mrkdwn", "text": text}


def option(label: str, value: Any) -> Dict[str, Any]:
    """Select/radio option; value is always sent as a string."""
    return {"text": plain_text(label), "value": f"{value}"}


def section(
    text: Optional[str] = None,
    block_id: Optional[str] = None,
    fields: Optional[List[Dict]] = None,
    accessory: Optional[Dict] = None,
    markdown_text: bool = False,
) -> Dict[str, Any]:
    """
    Section block.

    Args:
        text: Block text, rendered as plain text unless markdown_text is set
        block_id: Optional block id
        fields: Text objects rendered in two columns
        accessory: Element shown beside the text
        markdown_text: Render text as mrkdwn
    """
    rendered = None
    if text:
        rendered = markdown(text) if markdown_text else plain_text(text)
    return _compact({
        "type": "section",
        "block_id": block_id,
        "accessory": accessory,
        "fields": fields,
        "text": rendered,
    })


def input_block(
    block_id: str,
    label: str,
    element: Dict[str, Any],
    optional: Optional[bool] = None,
) -> Dict[str, Any]:
    return _compact({
        "type": "input",
        "block_id": block_id,
        "element": element,
        "label": plain_text(label),
        "optional": optional,
    })


def external_select(
    placeholder: Optional[str] = None,
    action_id: Optional[str] = None,
    multi: bool = False,
    min_length: Optional[int] = None,
) -> Dict[str, Any]:
    """Select whose options are served by the app's options endpoint."""
    return _compact({
        "type": "multi_external_select" if multi else "external_select",
        "action_id": action_id or DEFAULT_SELECT_ACTION_ID,
        "placeholder": plain_text(placeholder) if placeholder else None,
        "min_query_length": min_length,
    })


def static_select(
    options: List[Dict],
    action_id: Optional[str] = None,
    placeholder: Optional[str] = None,
    initial_option: Optional[Dict] = None,
    multi: bool = False,
) -> Dict[str, Any]:
    payload = {
        "action_id": action_id or DEFAULT_SELECT_ACTION_ID,
        "options": options,
        "placeholder": plain_text(placeholder) if placeholder else None,
    }
    if multi:
        payload["type"] = "multi_static_select"
        payload["initial_options"] = [initial_option] if initial_option else None
    else:
        payload["type"] = "static_select"
        payload["initial_option"] = initial_option
    return _compact(payload)


def button(
    text: str,
    action_id: Optional[str] = None,
    value: Optional[str] = None,
    style: Optional[str] = None,
    url: Optional[str] = None,
) -> Dict[str, Any]:
    """Button element. style is "primary" or "danger"."""
    return _compact({
        "type": "button",
        "action_id": action_id,
        "style": style,
        "text": plain_text(text),
        "value": value,
        "url": url,
    })


def radio_buttons(
    block_id: str,
    label: str,
    options: List[Dict],
    action_id: Optional[str] = None,
) -> Dict[str, Any]:
    """Input block wrapping a radio_buttons element."""
    return {
        "type": "input",
        "block_id": block_id,
        "label": plain_text(label),
        "element": {
            "type": "radio_buttons",
            "action_id": action_id or DEFAULT_RADIO_ACTION_ID,
            "options": options,
        },
    }


def divider() -> Dict[str, Any]:
    return {"type": "divider"}


def header(text: str, block_id: Optional[str] = None) -> Dict[str, Any]:
    return _compact({
        "type": "header",
        "block_id": block_id,
        "text": plain_text(text),
    })


def actions(block_id: str, elements: List[Dict]) -> Dict[str, Any]:
    return {"type": "actions", "block_id": block_id, "elements": elements}


def plain_text_input(action_id: str, multiline: Optional[bool] = None) -> Dict[str, Any]:
    return _compact({
        "type": "plain_text_input",
        "action_id": action_id,
        "multiline": multiline,
    })
