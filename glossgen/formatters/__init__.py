"""Page rendering and page sinks."""
from .html_renderer import HtmlPageRenderer
from .page_sink import FilePageSink, MemoryPageSink

__all__ = ["HtmlPageRenderer", "FilePageSink", "MemoryPageSink"]
