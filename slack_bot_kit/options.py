"""
OptionRegistry - in-memory option lists backing external select menus.
"""

import threading
from typing import Dict, List, Optional


class OptionRegistry:
    """Maps an id to the ordered list of options to offer for it.

    Entries never expire; callers reuse ids to bound growth.
    """

    def __init__(self):
        self._options: Dict[str, List[Dict]] = {}
        self._lock = threading.Lock()

    def store(self, id: str, options: List[Dict]) -> None:
        with self._lock:
            self._options[id] = options

    def get(self, id: str) -> Optional[List[Dict]]:
        with self._lock:
            return self._options.get(id)

    def __contains__(self, id: str) -> bool:
        return id in self._options

    def __len__(self) -> int:
        return len(self._options)
