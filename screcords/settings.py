import json
from pathlib import Path
from typing import List, Union

import yaml
from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from screcords.models.store_config import StoreConfig

DEFAULT_SEPARATOR = ","


class Settings(BaseModel):
    stores: List[StoreConfig]
    separator: str = DEFAULT_SEPARATOR
    strict_resolution: bool = False

    model_config = ConfigDict(
        extra="ignore",
        validate_default=True,
    )

    @field_validator("separator")
    @classmethod
    def validate_separator(cls, v: str) -> str:
        # ':' is the kind tag delimiter of subkey names
        if len(v) != 1 or v == ":" or v.isspace():
            raise ValueError(f"separator must be a single non-blank character other than ':', got {v!r}")
        return v

    @model_validator(mode='after')
    def validate_unique_store_names(self) -> 'Settings':
        names = [store.name for store in self.stores]
        duplicates = sorted({name for name in names if names.count(name) > 1})
        if duplicates:
            raise ValueError(f"Duplicate store names: {duplicates}")
        return self

    def get_store(self, name: str) -> StoreConfig:
        for store in self.stores:
            if store.name == name:
                return store
        raise KeyError(name)


def load_config(path: Union[str, Path] = "config.json") -> dict:
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    with path.open(encoding="utf-8") as f:
        if path.suffix.lower() in (".yaml", ".yml"):
            cfg = yaml.safe_load(f)
        else:
            cfg = json.load(f)

    return cfg or {}
