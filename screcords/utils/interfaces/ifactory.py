import sys
from abc import ABC
from typing import Dict, Type, List
from types import ModuleType


class IFactory(ABC):
    # Registry to hold subclass references
    _registry: Dict[str, Type] = {}

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)

        # 1. Reset registry if this is a Base Class (like StoreAdapter)
        if IFactory in cls.__bases__:
            cls._registry = {}
            return

        # 2. Skip abstract helpers
        if ABC in cls.__bases__:
            return

        # 3. Register the Child Class (Plugin)
        # Key = filename (e.g., 'screcords.models.store_adapters.scutil' -> 'scutil')
        key = cls.__module__.rsplit('.', 1)[-1]

        if key in cls._registry and cls._registry[key] != cls:
            print(f"Warning: Overwriting registry key '{key}' with {cls.__name__}", file=sys.stderr)

        cls._registry[key] = cls

    @classmethod
    def create(cls, name: str, *args, **kwargs):
        # 1. Lazy Load Module if needed
        if name not in cls._registry:
            try:
                cls.load_module(name)
            except ImportError as e:
                print(f"[Factory] Warning: Could not load module '{name}': {e}", file=sys.stderr)

        # 2. Get the specific class (e.g. ScutilAdapter)
        target_cls = cls._registry.get(name)
        if not target_cls:
            available = list(cls._registry.keys())
            raise ValueError(f"Class '{name}' not found in registry. Available: {available}")

        return target_cls(*args, **kwargs)

    @classmethod
    def load_module(cls, name: str):
        """
        Override this in the base class (e.g., StoreAdapter) to define
        where to look for plugins/subclasses.
        """
        pass

    @classmethod
    def get_registry_keys(cls) -> List[str]:
        """
        Returns a list of all currently registered keys.
        """
        return list(cls._registry.keys())

    @staticmethod
    def _load_class_from_package_module(module_name: str, package_module: ModuleType) -> None:
        from screcords.utils.class_loader import load_class_from_package_module
        load_class_from_package_module(module_name, package_module)
