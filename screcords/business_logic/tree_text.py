import re
import sys
from typing import List, Optional

from screcords.models.store_adapter import StoreAdapter
from screcords.utils.exceptions import MalformedTreeError, StoreUnavailableError

OPEN = "{"
CLOSE = "}"
KIND_TAG = ":"

_BRACES = re.compile(r"\s*([{}])\s*")
_KEY_VALUE = re.compile(r"^([^:]*?)\s*:\s*(.*)$")


def leaf_token(key: str, value: str) -> str:
    return f"{key} : {value}".strip()


def split_leaf(token: str) -> Optional[tuple[str, str]]:
    """Split a canonical `key : value` token. Returns None for tokens without a key."""
    if " : " in token:
        key, _, value = token.partition(" : ")
        return key, value
    if token == ":":
        return "", ""
    if token.startswith(": "):
        return "", token[2:]
    if token.endswith(" :"):
        return token[:-2], ""
    return None


def normalize_dump(text: Optional[str]) -> List[str]:
    """
    Turn a raw subkey dump into canonical tree notation.

    Every `{` and `}` gets a line of its own, `key : value` lines get exactly
    one space on each side of the first colon, lines are stripped and blank
    lines dropped.
    """
    if not text:
        return []

    tokens = []
    for raw_line in text.splitlines():
        for piece in _BRACES.split(raw_line.strip()):
            piece = piece.strip()
            if not piece:
                continue
            if piece in (OPEN, CLOSE):
                tokens.append(piece)
                continue
            match = _KEY_VALUE.match(piece)
            tokens.append(leaf_token(match.group(1), match.group(2)) if match else piece)
    return tokens


def check_balance(tokens: List[str], subkey: Optional[str] = None) -> None:
    """Raise MalformedTreeError unless every `{` has a matching `}`."""
    depth = 0
    for position, token in enumerate(tokens):
        if token == OPEN:
            depth += 1
        elif token == CLOSE:
            depth -= 1
            if depth < 0:
                raise MalformedTreeError(
                    f"Unexpected '}}' at token {position} of subkey '{subkey}'", subkey=subkey
                )
    if depth:
        raise MalformedTreeError(f"{depth} unclosed '{{' in subkey '{subkey}'", subkey=subkey)


def split_kind_tag(subkey: str) -> tuple[str, Optional[str]]:
    """'State:/Network/Global/IPv4' -> ('State', '/Network/Global/IPv4'); 'com.apple.smb' -> ('com.apple.smb', None)"""
    if KIND_TAG not in subkey:
        return subkey, None
    root, rest = subkey.split(KIND_TAG, 1)
    return root, rest


def fetch_tree(adapter: StoreAdapter, subkey: str) -> List[str]:
    """
    Fetch one subkey and return its canonical tree notation.

    Structured adapters hand over tokens directly; text dumps are normalized.
    The dump's root value is keyed by the subkey name. A kind tagged subkey
    (`Setup:/Network/Global/IPv4`) is wrapped in a synthetic dictionary named
    after the tag so its records read `Setup,/Network/Global/IPv4,...`.
    """
    if not subkey or not subkey.strip():
        return []

    try:
        tokens = adapter.show_tree(subkey)
        if tokens is None:
            tokens = normalize_dump(adapter.show(subkey))
    except StoreUnavailableError as e:
        print(f"⚠️ [TreeFetcher] Store unavailable while fetching '{subkey}': {e}", file=sys.stderr)
        return []

    tokens = list(tokens)
    if not tokens:
        return []

    root, rest = split_kind_tag(subkey)
    root_key = root if rest is None else rest
    if tokens[0] in (OPEN, CLOSE):
        # bare `{` without a type placeholder
        tokens.insert(0, leaf_token(root_key, "<dictionary>"))
    else:
        tokens[0] = leaf_token(root_key, tokens[0])

    if rest is not None:
        tokens = [leaf_token(root, "<dictionary>"), OPEN] + tokens + [CLOSE]

    check_balance(tokens, subkey)
    return tokens
