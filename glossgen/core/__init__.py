"""
Core glossary system: tokenizer, glossary index, cross-linker and pipeline.
"""
from .exceptions import (
    GlossarySystemError,
    GlossaryError,
    DuplicateTermError,
    InvalidTermError,
    TermNotFoundError,
    GlossaryFrozenError,
    ParserError,
    RecordReadError,
    OutputError,
    PageWriteError,
    PipelineError,
    ConfigurationError,
    InvalidConfigError,
)
from .models import (
    Token,
    TokenKind,
    RenderedPage,
    DuplicatePolicy,
    GenerationJob,
    GenerationStatus,
    page_name_for,
)
from .tokenizer import SeparatorClassifier, Tokenizer, next_token, iter_tokens
from .glossary_index import GlossaryIndex
from .cross_linker import CrossLinker
from .interfaces import IRecordSource, IPageSink, IProgressCallback, NullProgressCallback
from .pipeline import GlossaryPipeline

__all__ = [
    # Exceptions
    "GlossarySystemError", "GlossaryError", "DuplicateTermError", "InvalidTermError",
    "TermNotFoundError", "GlossaryFrozenError", "ParserError", "RecordReadError",
    "OutputError", "PageWriteError", "PipelineError", "ConfigurationError",
    "InvalidConfigError",
    # Models
    "Token", "TokenKind", "RenderedPage", "DuplicatePolicy", "GenerationJob",
    "GenerationStatus", "page_name_for",
    # Components
    "SeparatorClassifier", "Tokenizer", "next_token", "iter_tokens",
    "GlossaryIndex", "CrossLinker",
    "IRecordSource", "IPageSink", "IProgressCallback", "NullProgressCallback",
    "GlossaryPipeline",
]
