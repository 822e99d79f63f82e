from typing import Iterable, Optional

from screcords.business_logic.tree_text import KIND_TAG
from screcords.settings import DEFAULT_SEPARATOR


def to_record_form(subkey: str, separator: str = DEFAULT_SEPARATOR) -> str:
    """'State:/Network/Global/IPv4' -> 'State,/Network/Global/IPv4'"""
    return subkey.replace(KIND_TAG, separator, 1)


def to_subkey_form(candidate: str, separator: str = DEFAULT_SEPARATOR) -> str:
    """'State,/Network/Global/IPv4' -> 'State:/Network/Global/IPv4'"""
    return candidate.replace(separator, KIND_TAG, 1)


def resolve_subkey(
        record: str,
        subkeys: Iterable[str],
        separator: str = DEFAULT_SEPARATOR,
        strict: bool = False,
) -> Optional[str]:
    """
    Find the subkey a flat record (or a prefix of one) belongs to.

    Drops trailing segments one at a time until the remaining prefix is found
    among the subkeys, then returns that prefix in subkey form.

    By default a prefix matches when it is contained in any subkey name, so
    `State,/Network/Interface/en1` resolves even though only
    `State:/Network/Interface/en1/IPv4` exists. With ``strict`` the prefix must
    equal a subkey name.
    """
    if not record or not record.strip():
        return None

    known = [to_record_form(subkey, separator) for subkey in subkeys]
    if not known:
        return None

    segments = record.split(separator)
    for count in range(len(segments), 0, -1):
        candidate = separator.join(segments[:count])
        if strict:
            matched = candidate in known
        else:
            matched = any(candidate in subkey for subkey in known)
        if matched:
            return to_subkey_form(candidate, separator)

    return None
