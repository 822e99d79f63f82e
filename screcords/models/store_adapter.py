from abc import abstractmethod
from typing import Iterable, List, Optional

from screcords.utils.interfaces.ifactory import IFactory


class StoreAdapter(IFactory):
    """Read-only access to a hierarchical configuration store."""

    @classmethod
    def load_module(cls, name: str):
        from screcords.models import store_adapters
        cls._load_class_from_package_module(
            module_name=name,
            package_module=store_adapters
        )

    @classmethod
    def from_config(cls, config) -> "StoreAdapter":
        """Build the adapter named by ``config.adapter`` (a StoreConfig)."""
        return cls.create(config.adapter, config)

    @abstractmethod
    def list_subkeys(self) -> Iterable[str]:
        """Return the raw top-level subkey identifiers, in store order."""
        pass

    @abstractmethod
    def show(self, subkey: str) -> Optional[str]:
        """Return the raw textual dump of one subkey, or None when it does not exist."""
        pass

    def show_tree(self, subkey: str) -> Optional[List[str]]:
        """
        Canonical tree tokens built straight from structured data.

        Adapters that only have the textual dump return None and the dump
        goes through normalization instead.
        """
        return None
