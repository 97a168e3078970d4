"""
Page sinks: where rendered pages are written.
"""
from pathlib import Path
from typing import Dict, List, Optional
import io
import logging

from ..core.interfaces import IPageSink
from ..core.exceptions import PageWriteError


logger = logging.getLogger(__name__)


class FilePageSink(IPageSink):
    """Writes each page to a file under ``output_dir``."""

    def __init__(self, output_dir: Path = Path("."), encoding: str = "utf-8"):
        self.output_dir = Path(output_dir)
        self.encoding = encoding

    def _resolve_page_path(self, name: str) -> Path:
        """
        Resolve a page name inside the output directory.

        Raises:
            PageWriteError: If the name is empty or escapes the output directory
        """
        if not name:
            raise PageWriteError("Page name cannot be empty", page=name)

        dangerous_chars = ['\0', '\n', '\r']
        for char in dangerous_chars:
            if char in name:
                raise PageWriteError(f"Invalid character in page name: {char!r}", page=name)

        root = self.output_dir.resolve()
        path = (root / name).resolve()
        if path != root and root not in path.parents:
            raise PageWriteError(f"Page path escapes output directory: {name}", page=name)
        return path

    def open(self, name: str):
        path = self._resolve_page_path(name)
        path.parent.mkdir(parents=True, exist_ok=True)
        logger.debug(f"Writing {path}")
        return open(path, 'w', encoding=self.encoding, newline='')

    def write(self, handle, text: str) -> None:
        handle.write(text)

    def close(self, handle) -> None:
        handle.close()

    def get_sink_info(self):
        info = super().get_sink_info()
        info.update({'output_dir': str(self.output_dir), 'encoding': self.encoding})
        return info


class MemoryPageSink(IPageSink):
    """Keeps pages in memory; used for previews and tests."""

    def __init__(self):
        self.pages: Dict[str, str] = {}
        self.order: List[str] = []
        self._open: Dict[int, str] = {}

    def open(self, name: str):
        if name in self.pages:
            raise PageWriteError(f"Page already written: {name}", page=name)
        handle = io.StringIO()
        self._open[id(handle)] = name
        return handle

    def write(self, handle, text: str) -> None:
        handle.write(text)

    def close(self, handle) -> None:
        name = self._open.pop(id(handle), None)
        if name is not None:
            self.pages[name] = handle.getvalue()
            self.order.append(name)
        handle.close()

    @property
    def open_handles(self) -> int:
        return len(self._open)

    def get(self, name: str) -> Optional[str]:
        return self.pages.get(name)
