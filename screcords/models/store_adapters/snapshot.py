import json
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from screcords.models.store_adapters.memory import MemoryAdapter
from screcords.models.store_config import StoreConfig


def load_snapshot(path: Union[str, Path]) -> Dict[str, Any]:
    """
    Load a ``{subkey: structure}`` mapping from a JSON or YAML file.

    Raises:
        FileNotFoundError: If the snapshot file doesn't exist
        ValueError: If the file does not hold a mapping
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Snapshot file not found: {path}")

    with open(path, 'r', encoding='utf-8') as f:
        if path.suffix.lower() in ('.yaml', '.yml'):
            data = yaml.safe_load(f)
        else:
            data = json.load(f)

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Snapshot {path} must map subkeys to values, got {type(data).__name__}")
    return data


class SnapshotAdapter(MemoryAdapter):
    """Store contents read from a JSON/YAML file captured earlier."""

    def __init__(self, config: Optional[StoreConfig] = None, path: Union[str, Path, None] = None) -> None:
        path = path if path is not None else (config.path if config else None)
        if path is None:
            raise ValueError("SnapshotAdapter needs a snapshot path")
        self.path = Path(path)
        super().__init__(data=load_snapshot(self.path))
