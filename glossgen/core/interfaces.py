"""
Core interfaces for the glossary generator.

Record sources feed ``(term, definition)`` pairs in; page sinks take
rendered pages out. Progress callbacks observe a generation run.
"""
from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import Any, Dict, Iterator, Tuple
import logging

from .exceptions import PageWriteError, error_context
from .models import GenerationJob, RenderedPage


logger = logging.getLogger(__name__)


# ============================================================================
# RECORD SOURCE INTERFACE
# ============================================================================

class IRecordSource(ABC):
    """Interface for sources of glossary records."""

    @abstractmethod
    def records(self) -> Iterator[Tuple[str, str]]:
        """Yield ``(term, definition)`` pairs until the source is exhausted."""
        pass

    def get_source_info(self) -> Dict[str, Any]:
        """Get source information."""
        return {'source_class': self.__class__.__name__}


# ============================================================================
# PAGE SINK INTERFACE
# ============================================================================

class IPageSink(ABC):
    """
    Interface for page sinks.

    ``open`` returns a handle scoped to one page; ``write`` appends text to
    it and ``close`` releases it. Use ``page()`` to guarantee the handle is
    closed on every exit path.
    """

    @abstractmethod
    def open(self, name: str) -> Any:
        """Open a page for writing and return its handle."""
        pass

    @abstractmethod
    def write(self, handle: Any, text: str) -> None:
        """Append text to an open page."""
        pass

    @abstractmethod
    def close(self, handle: Any) -> None:
        """Close a page handle."""
        pass

    @contextmanager
    def page(self, name: str):
        """
        Open ``name`` and yield a writer function; the handle is always closed.

        Raises:
            PageWriteError: If opening, writing or closing fails
        """
        with error_context("opening page", PageWriteError, logger, page=name):
            handle = self.open(name)
        try:
            with error_context("writing page", PageWriteError, logger, page=name):
                yield lambda text: self.write(handle, text)
        finally:
            with error_context("closing page", PageWriteError, logger, page=name):
                self.close(handle)

    def write_page(self, page: RenderedPage) -> None:
        """Write a whole rendered page in one open/write/close cycle."""
        with self.page(page.name) as write:
            write(page.body)

    def get_sink_info(self) -> Dict[str, Any]:
        """Get sink information."""
        return {'sink_class': self.__class__.__name__}


# ============================================================================
# PROGRESS CALLBACK INTERFACE
# ============================================================================

class IProgressCallback(ABC):
    """Interface for progress callbacks."""

    @abstractmethod
    def on_start(self, job: GenerationJob) -> None:
        """Called when page generation starts."""
        pass

    @abstractmethod
    def on_page_written(self, job: GenerationJob, page: RenderedPage) -> None:
        """Called after each page is written to the sink."""
        pass

    @abstractmethod
    def on_complete(self, job: GenerationJob) -> None:
        """Called when generation completes."""
        pass

    @abstractmethod
    def on_error(self, job: GenerationJob, error: Exception) -> None:
        """Called when generation fails."""
        pass


class NullProgressCallback(IProgressCallback):
    """Progress callback that ignores every event."""

    def on_start(self, job: GenerationJob) -> None:
        pass

    def on_page_written(self, job: GenerationJob, page: RenderedPage) -> None:
        pass

    def on_complete(self, job: GenerationJob) -> None:
        pass

    def on_error(self, job: GenerationJob, error: Exception) -> None:
        pass
