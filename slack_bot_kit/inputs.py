"""
Readers for values submitted through a modal's input blocks.
"""

from typing import Any, Dict, List, Optional

from .blocks import DEFAULT_SELECT_ACTION_ID


def get_view_input(view: Dict[str, Any], block_id: str, action_id: str) -> Optional[Dict]:
    """Raw state entry at view.state.values[block_id][action_id], or None."""
    values = (view.get("state") or {}).get("values") or {}
    block = values.get(block_id)
    if not block:
        return None
    return block.get(action_id)


def get_selected_option(
    view: Dict[str, Any],
    block_id: str,
    action_id: str = DEFAULT_SELECT_ACTION_ID,
) -> Optional[str]:
    state = get_view_input(view, block_id, action_id)
    selected = (state or {}).get("selected_option")
    if not selected:
        return None
    return selected.get("value")


def get_selected_options(
    view: Dict[str, Any],
    block_id: str,
    action_id: str = DEFAULT_SELECT_ACTION_ID,
) -> List[str]:
    state = get_view_input(view, block_id, action_id)
    selected = (state or {}).get("selected_options") or []
    return [o.get("value") for o in selected]


def get_plain_text_value(view: Dict[str, Any], block_id: str, action_id: str) -> Optional[str]:
    state = get_view_input(view, block_id, action_id)
    return (state or {}).get("value")
