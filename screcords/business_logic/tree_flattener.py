import re
from typing import Iterable, Iterator, List

from screcords.business_logic.tree_text import CLOSE, OPEN, check_balance, split_leaf
from screcords.settings import DEFAULT_SEPARATOR

# <dictionary>, <array> ... announce a nested block on the next line
_PLACEHOLDER = re.compile(r"<[^<>]*>")


def is_placeholder(value: str) -> bool:
    return bool(_PLACEHOLDER.fullmatch(value))


def flatten_tree(tokens: Iterable[str], separator: str = DEFAULT_SEPARATOR) -> Iterator[str]:
    """
    Flatten canonical tree notation into one record per leaf.

    Walks the tokens once, keeping the keys of the open blocks on a path stack:

        A : <array>          ->  (pending key A)
        {                    ->  path [A]
        0 : x                ->  A,0,x
        }                    ->  path []

    Array indices and dictionary keys are both just path segments. The braces
    are checked before the first record, so an unbalanced tree raises
    MalformedTreeError without yielding anything.
    """
    tokens = list(tokens)
    check_balance(tokens)

    path: List[str] = []
    pending_key = ""

    for token in tokens:
        if token == OPEN:
            path.append(pending_key)
            pending_key = ""
            continue

        if token == CLOSE:
            path.pop()
            continue

        leaf = split_leaf(token)
        if leaf is None:
            yield separator.join(path + [token])
            continue

        key, value = leaf
        if is_placeholder(value):
            pending_key = key
            continue

        yield separator.join(path + [key, value])
