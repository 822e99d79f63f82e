from enum import Enum, auto
from dataclasses import dataclass, field
from typing import Any, Dict


class RowKind(Enum):
    """
    Represents how a record changed between two snapshots.
    """
    INSERT = auto()  # Record path only in the current snapshot
    UPDATE = auto()  # Same path, different value
    DELETE = auto()  # Record path only in the previous snapshot


@dataclass
class PipelineRow:
    """
    Represents a single flat record change.
    """
    key: str                    # e.g., "State,/Network/Interface/en1/IPv4,Addresses,0"
    value: Any                  # e.g., "192.168.0.4" (previous value for DELETE)
    kind: RowKind               # INSERT, UPDATE, or DELETE
    metadata: Dict[str, Any] = field(default_factory=dict)  # Context (store, snapshot labels)
