# src/jamfusage/core/scope.py
from __future__ import annotations
from typing import Any, Dict, List, Optional


def _names(items: List[Any]) -> List[str]:
    out = []
    for it in items:
        if isinstance(it, dict):
            out.append(str(it.get("name") if it.get("name") is not None else ""))
        else:
            out.append(str(it))
    return out

def summarize(scope: Optional[Dict[str, Any]]) -> str:
    """
    Flatten a Jamf scope block into one line, keeping the block's key order:
      {"all_computers": True, "computer_groups": [], "buildings": [{"name": "HQ"}]}
      -> "all_computers, buildings: [HQ]"
    False flags, empty lists and nested blocks (limitations/exclusions) are skipped.
    An empty scope gives "" (fetched but empty), never None.
    """
    tokens: List[str] = []
    for key, value in (scope or {}).items():
        if isinstance(value, bool):
            if value:
                tokens.append(key)
        elif isinstance(value, list) and value:
            tokens.append(f"{key}: [{', '.join(_names(value))}]")
    return ", ".join(tokens)
