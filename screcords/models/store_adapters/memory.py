from typing import Any, Dict, List, Optional

from screcords.business_logic.tree_text import CLOSE, OPEN, leaf_token
from screcords.models.store_adapter import StoreAdapter
from screcords.models.store_config import StoreConfig

INDENT = "  "


def render_value(value: Any, depth: int = 0) -> List[str]:
    """
    Render a Python structure the way scutil prints it.

    The first returned line carries no key; the caller prefixes it
    (``Key : <dictionary> {``).
    """
    pad = INDENT * depth
    if isinstance(value, dict):
        lines = ["<dictionary> {"]
        for key, item in value.items():
            child = render_value(item, depth + 1)
            lines.append(f"{pad}{INDENT}{key} : {child[0]}")
            lines.extend(child[1:])
        lines.append(f"{pad}}}")
        return lines
    if isinstance(value, (list, tuple)):
        lines = ["<array> {"]
        for index, item in enumerate(value):
            child = render_value(item, depth + 1)
            lines.append(f"{pad}{INDENT}{index} : {child[0]}")
            lines.extend(child[1:])
        lines.append(f"{pad}}}")
        return lines
    return [render_scalar(value)]


def render_scalar(value: Any) -> str:
    if isinstance(value, bool):
        return "TRUE" if value else "FALSE"
    if isinstance(value, (bytes, bytearray)):
        return f"<data> 0x{bytes(value).hex()}"
    if value is None:
        return ""
    return str(value)


def single_line(text: str) -> str:
    """Records are line oriented, so line breaks inside keys and values are escaped."""
    return text.replace("\r", "\\r").replace("\n", "\\n")


def tree_tokens(value: Any) -> List[str]:
    """
    Canonical tree tokens for a Python structure, without a text round trip.

    Keys and values are taken as they are, so braces or colons inside them
    stay part of the leaf. The first token carries no key.
    """
    if isinstance(value, dict):
        items = ((str(key), item) for key, item in value.items())
        tokens = ["<dictionary>", OPEN]
    elif isinstance(value, (list, tuple)):
        items = ((str(index), item) for index, item in enumerate(value))
        tokens = ["<array>", OPEN]
    else:
        return [single_line(render_scalar(value))]

    for key, item in items:
        child = tree_tokens(item)
        tokens.append(leaf_token(single_line(key), child[0]))
        tokens.extend(child[1:])
    tokens.append(CLOSE)
    return tokens


class MemoryAdapter(StoreAdapter):
    """In-process store holding subkeys as Python structures, in insertion order."""

    def __init__(self, config: Optional[StoreConfig] = None, data: Optional[Dict[str, Any]] = None) -> None:
        if data is None and config is not None:
            data = config.data
        self.data: Dict[str, Any] = dict(data or {})

    def list_subkeys(self) -> List[str]:
        return list(self.data.keys())

    def show(self, subkey: str) -> Optional[str]:
        if subkey not in self.data:
            return None
        return "\n".join(render_value(self.data[subkey])) + "\n"

    def show_tree(self, subkey: str) -> Optional[List[str]]:
        if subkey not in self.data:
            return None
        return tree_tokens(self.data[subkey])
