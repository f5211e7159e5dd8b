"""
Base class for report encoders.
"""

import io
import logging
from abc import ABC, abstractmethod
from typing import Any, List, Optional, Union

from run_reporter.core.errors import EncodingError, SinkWriteError
from run_reporter.core.logging import get_logger
from run_reporter.reporting.models import ResultModel


class Reporter(ABC):
    """
    Render a ``ResultModel`` into one output format.

    Subclasses implement ``render``; ``report`` takes care of writing the
    rendered document to a sink. The whole document is rendered and encoded
    before the first write, so an encoding failure never leaves partial
    output behind. Reporters hold no per-call state and may be shared
    between threads.
    """

    #: Short format name used by the registry
    format_name: str = ""
    #: File extension used when writing reports to disk
    extension: str = "txt"

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or get_logger(__name__)

    @abstractmethod
    def render(self, model: ResultModel) -> str:
        """Return the complete rendered document."""

    def report(self, sink: Any, model: ResultModel) -> None:
        """
        Write the rendering of ``model`` to ``sink``.

        Args:
            sink: Text stream (``io.TextIOBase``) or any object with a
                ``write(bytes)`` method
            model: Result model to render

        Raises:
            EncodingError: The model cannot be represented in this format
            SinkWriteError: Writing to or flushing the sink failed
        """
        try:
            document = self.render(model)
        except EncodingError:
            raise
        except (TypeError, ValueError) as e:
            raise EncodingError(f"Failed to encode {self.format_name} report: {e}") from e

        text_sink = isinstance(sink, io.TextIOBase)
        chunks = self._encode_chunks(document, text_sink)

        written = 0
        for chunk in chunks:
            self._write_chunk(sink, chunk)
            written += len(chunk)

        flush = getattr(sink, "flush", None)
        if callable(flush):
            try:
                flush()
            except (OSError, ValueError) as e:
                raise SinkWriteError(f"Failed to flush {self.format_name} report: {e}") from e

        self.logger.debug(
            "Rendered %s report for '%s' (%d tests, %d %s)",
            self.format_name, model.summary.suite_name, model.summary.total_count,
            written, "chars" if text_sink else "bytes",
        )

    def _encode_chunks(self, document: str, text_sink: bool) -> List[Union[str, bytes]]:
        """Split the document into lines, encoding them for byte sinks."""
        lines = document.splitlines(keepends=True)
        if text_sink:
            return lines
        try:
            return [line.encode("utf-8") for line in lines]
        except UnicodeEncodeError as e:
            raise EncodingError(f"{self.format_name} report is not valid UTF-8: {e}") from e

    def _write_chunk(self, sink: Any, chunk: Union[str, bytes]) -> None:
        """Write one chunk, re-writing the remainder after a short write."""
        view = chunk if isinstance(chunk, str) else memoryview(chunk)
        while view:
            try:
                count = sink.write(view)
            except (OSError, ValueError) as e:
                raise SinkWriteError(f"Failed to write {self.format_name} report: {e}") from e
            if count is None or count >= len(view):
                return
            if count <= 0:
                raise SinkWriteError(f"Sink accepted no data while writing {self.format_name} report")
            view = view[count:]
