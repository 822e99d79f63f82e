from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class StoreConfig(BaseModel):
    """
    One configured configuration store.

    Example JSON:
    {
        "name": "local",
        "adapter": "scutil",
        "command": "/usr/sbin/scutil",
        "timeout": 10
    }

    Or an offline snapshot:
    {
        "name": "office-wifi",
        "adapter": "snapshot",
        "path": "snapshots/office-wifi.yaml"
    }
    """
    name: str
    adapter: str = Field(default="scutil", description="Registered store adapter module name")

    # scutil
    command: str = Field(default="scutil", description="Path or name of the scutil binary")
    timeout: Optional[float] = Field(default=None, gt=0, description="Seconds to wait for one query")

    # snapshot / memory
    path: Optional[Path] = Field(default=None, description="JSON or YAML snapshot file")
    data: Optional[Dict[str, Any]] = Field(default=None, description="Inline subkey structures")

    model_config = ConfigDict(
        extra="ignore",         # ignore unknown fields
        validate_default=True,  # validate defaults
    )

    @field_validator("name", "adapter")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be blank")
        return v.strip()

    @model_validator(mode='after')
    def validate_adapter_source(self) -> 'StoreConfig':
        """
        A snapshot store needs a file to read from.
        """
        if self.adapter == "snapshot" and self.path is None:
            raise ValueError(
                f"Configuration Error: store '{self.name}' uses the 'snapshot' adapter "
                f"but no 'path' was given."
            )
        return self
