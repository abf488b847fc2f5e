"""Structural safety checks over a parsed JSON tree.

Guards against deeply nested payloads and against keys that name
prototype-chain members (``__proto__`` and friends). The walk only looks at
plain dicts and lists, so it behaves the same whatever produced the tree.
"""

from __future__ import annotations

import json
from typing import Any

__all__ = [
    "RESERVED_KEYS",
    "get_json_size",
    "get_object_depth",
    "has_reserved_keys",
    "is_depth_safe",
    "is_structure_safe",
]

RESERVED_KEYS = frozenset({"__proto__", "constructor", "prototype"})


def _is_container(value: Any) -> bool:
    return isinstance(value, (dict, list))


def get_json_size(data: Any) -> int:
    """Return the UTF-8 byte size of *data* serialized as compact JSON.

    Raises:
        TypeError: If *data* holds a value JSON cannot represent.
        ValueError: If *data* contains a circular reference.
    """
    encoded = json.dumps(data, ensure_ascii=False, separators=(",", ":"))
    return len(encoded.encode("utf-8"))


def get_object_depth(data: Any, current_depth: int = 0) -> int:
    """Return the deepest dict/list nesting level below *data*.

    The root container is depth 0; every nested container adds one.
    """
    if not _is_container(data):
        return current_depth

    values = data.values() if isinstance(data, dict) else data
    max_depth = current_depth
    for value in values:
        if _is_container(value):
            max_depth = max(max_depth, get_object_depth(value, current_depth + 1))
    return max_depth


def is_depth_safe(data: Any, max_depth: int) -> bool:
    """Return True if no container sits deeper than *max_depth*.

    Walks iteratively and stops at the first violation, so hostile payloads
    cannot exhaust the interpreter stack.
    """
    if not _is_container(data):
        return True
    stack: list[tuple[Any, int]] = [(data, 0)]
    while stack:
        node, depth = stack.pop()
        if depth > max_depth:
            return False
        children = node.values() if isinstance(node, dict) else node
        stack.extend((child, depth + 1) for child in children if _is_container(child))
    return True


def has_reserved_keys(data: Any) -> bool:
    """Return True if any dict in the tree uses a key from RESERVED_KEYS."""
    stack: list[Any] = [data]
    while stack:
        node = stack.pop()
        if isinstance(node, dict):
            if any(key in RESERVED_KEYS for key in node):
                return True
            stack.extend(node.values())
        elif isinstance(node, list):
            stack.extend(node)
    return False


def is_structure_safe(data: Any, max_depth: int) -> bool:
    """Return True if *data* is within *max_depth* and has no reserved keys."""
    return is_depth_safe(data, max_depth) and not has_reserved_keys(data)
