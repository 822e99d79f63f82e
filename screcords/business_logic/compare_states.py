from typing import Any, Dict, Iterable, Union

from screcords.settings import DEFAULT_SEPARATOR


def records_to_state(records: Iterable[str], separator: str = DEFAULT_SEPARATOR) -> Dict[str, str]:
    """
    Split flat records into {path: value} at the last separator.

    `State,/Network/Global/IPv4,PrimaryInterface,en1` -> {'State,/Network/Global/IPv4,PrimaryInterface': 'en1'}
    A record without a separator is kept as a path with an empty value.
    """
    state = {}
    for record in records:
        record = record.rstrip("\r\n")
        if not record:
            continue
        path, sep, value = record.rpartition(separator)
        if not sep:
            path, value = record, ""
        state[path] = value
    return state


def compare_states(
        current_data: Union[Iterable[str], Dict[str, Any]],
        old_data: Union[Iterable[str], Dict[str, Any]],
        separator: str = DEFAULT_SEPARATOR,
) -> Dict[str, Dict[str, Any]]:
    """
    Compare two snapshots and return deleted, added, changed, and unchanged items.

    Args:
        current_data: The current snapshot (flat records or an already split {path: value} dict)
        old_data: The previous snapshot (flat records or an already split {path: value} dict)

    Returns:
        Dictionary with 'deleted', 'added', 'changed', and 'unchanged' keys.
    """
    if not isinstance(current_data, dict):
        current_data = records_to_state(current_data or [], separator)
    if not isinstance(old_data, dict):
        old_data = records_to_state(old_data or [], separator)

    deleted = {}
    added = {}
    changed = {}
    unchanged = {}

    # Find deleted keys (in old but not in current)
    for key in old_data:
        if key not in current_data:
            deleted[key] = old_data[key]

    # Find added, changed, and unchanged keys
    for key in current_data:
        if key not in old_data:
            added[key] = current_data[key]
        elif current_data[key] != old_data[key]:
            changed[key] = {'old': old_data[key], 'new': current_data[key]}
        else:
            unchanged[key] = current_data[key]

    return {
        'deleted': deleted,
        'added': added,
        'changed': changed,
        'unchanged': unchanged
    }
