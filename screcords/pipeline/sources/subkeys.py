import sys
from typing import Iterator

from screcords.models.store_adapter import StoreAdapter
from screcords.pipeline.core import Source
from screcords.utils.exceptions import StoreUnavailableError


class SubkeySource(Source):
    def __init__(self, adapter: StoreAdapter):
        """
        Args:
            adapter: Store to enumerate. Every read() queries it again.
        """
        self.adapter = adapter

    def read(self) -> Iterator[str]:
        """
        Yields subkey identifiers in the store's own order.
        An unreachable or not yet populated store yields nothing.
        """
        try:
            subkeys = self.adapter.list_subkeys()
        except StoreUnavailableError as e:
            print(f"⚠️ [SubkeySource] Store unavailable, no subkeys listed: {e}", file=sys.stderr)
            return

        for subkey in subkeys:
            if subkey:
                yield subkey
