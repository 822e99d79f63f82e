from typing import List

from screcords.business_logic.tree_text import fetch_tree
from screcords.models.store_adapter import StoreAdapter
from screcords.pipeline.core import Transform


class TreeFetcher(Transform):
    """
    Fetches a subkey and normalizes it into canonical tree notation.
    """
    def __init__(self, adapter: StoreAdapter):
        self.adapter = adapter

    def process(self, subkey: str) -> List[str]:
        return fetch_tree(self.adapter, subkey)
