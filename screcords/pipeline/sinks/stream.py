from typing import TextIO

from screcords.pipeline.core import Sink
from screcords.pipeline.pipeline_row import PipelineRow, RowKind
from screcords.settings import DEFAULT_SEPARATOR

DIFF_MARKERS = {
    RowKind.INSERT: "+",
    RowKind.UPDATE: "~",
    RowKind.DELETE: "-",
}


class LineSink(Sink):
    def __init__(self, stream: TextIO):
        """
        Args:
            stream: Text stream receiving one record per line. Lines are written
                as they arrive so a downstream filter sees them immediately.
        """
        self.stream = stream
        self.count = 0

    def write(self, record: str) -> None:
        self.stream.write(record + "\n")
        self.count += 1

    def flush(self) -> None:
        self.stream.flush()


class DiffSink(LineSink):
    """Writes PipelineRows as `+ path,value`, `~ path,value` or `- path,value`."""

    def __init__(self, stream: TextIO, separator: str = DEFAULT_SEPARATOR):
        super().__init__(stream)
        self.separator = separator

    def write(self, row: PipelineRow) -> None:
        super().write(f"{DIFF_MARKERS[row.kind]} {row.key}{self.separator}{row.value}")
