from typing import Iterable, Iterator

from screcords.business_logic.tree_flattener import flatten_tree
from screcords.pipeline.core import Transform
from screcords.settings import DEFAULT_SEPARATOR


class Flattenizer(Transform):
    def __init__(self, separator: str = DEFAULT_SEPARATOR):
        self.separator = separator

    def process(self, tokens: Iterable[str]) -> Iterator[str]:
        if not tokens:
            return iter(())

        return flatten_tree(tokens, separator=self.separator)
