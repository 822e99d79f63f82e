from typing import Any, Dict, Iterable, List, Optional

from screcords.business_logic.compare_states import compare_states
from screcords.pipeline.core import Transform
from screcords.pipeline.pipeline_row import PipelineRow, RowKind
from screcords.settings import DEFAULT_SEPARATOR


class DiffExploder(Transform):
    """
    Compares Previous vs Current snapshot and emits a stream of PipelineRows.
    """
    def __init__(self, separator: str = DEFAULT_SEPARATOR):
        self.separator = separator

    def process(
            self,
            current: Iterable[str],
            previous: Iterable[str],
            metadata: Optional[Dict[str, Any]] = None,
    ) -> List[PipelineRow]:
        metadata = metadata or {}
        rows = []

        diff = compare_states(current_data=current, old_data=previous, separator=self.separator)

        # 1. RowKind.INSERT
        for key, value in diff['added'].items():
            rows.append(PipelineRow(key=key, value=value, kind=RowKind.INSERT, metadata=metadata))

        # 2. RowKind.UPDATE
        # diff['changed'] structure: { key: {'old': val, 'new': val} }
        for key, change in diff['changed'].items():
            rows.append(PipelineRow(
                key=key,
                value=change['new'],
                kind=RowKind.UPDATE,
                metadata={**metadata, 'old': change['old']}
            ))

        # 3. RowKind.DELETE
        for key, value in diff['deleted'].items():
            rows.append(PipelineRow(key=key, value=value, kind=RowKind.DELETE, metadata=metadata))

        return rows
