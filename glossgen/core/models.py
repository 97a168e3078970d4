"""
Core Data Models
================

Tokens, rendered pages and run statistics shared by the tokenizer,
cross-linker, renderer and pipeline.
"""
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import List, Optional


# ============================================================================
# CONSTANTS
# ============================================================================

DEFAULT_SEPARATORS = " \t,"
DEFAULT_INDEX_NAME = "index.html"
DEFAULT_INDEX_TITLE = "Glossary"
PAGE_EXTENSION = ".html"


# ============================================================================
# ENUMS
# ============================================================================

class TokenKind(Enum):
    """Classification of a token."""
    WORD = "word"
    SEPARATOR = "separator"


class DuplicatePolicy(Enum):
    """What to do when a term appears more than once in the input."""
    REJECT = "reject"
    FIRST_WINS = "first_wins"
    LAST_WINS = "last_wins"

    @classmethod
    def from_value(cls, value) -> 'DuplicatePolicy':
        """Accept an enum member or its string value."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower().replace('-', '_'))
        except ValueError:
            choices = ', '.join(p.value for p in cls)
            raise ValueError(f"Unknown duplicate policy: {value!r} (expected one of {choices})")


class GenerationStatus(Enum):
    """Generation job status."""
    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    FAILED = "failed"


# ============================================================================
# TOKENS AND PAGES
# ============================================================================

@dataclass(frozen=True)
class Token:
    """A maximal run of word or separator characters within a text."""
    text: str
    kind: TokenKind
    start: int = 0

    def __post_init__(self):
        if not self.text:
            raise ValueError("Token text cannot be empty")

    @property
    def end(self) -> int:
        return self.start + len(self.text)

    @property
    def is_word(self) -> bool:
        return self.kind is TokenKind.WORD

    @property
    def is_separator(self) -> bool:
        return self.kind is TokenKind.SEPARATOR

    def __len__(self) -> int:
        return len(self.text)


@dataclass(frozen=True)
class RenderedPage:
    """A generated page: sink name plus its full text."""
    name: str
    body: str


def page_name_for(term: str) -> str:
    """Page name of a term, e.g. ``map`` -> ``map.html``."""
    return f"{term}{PAGE_EXTENSION}"


# ============================================================================
# JOB
# ============================================================================

@dataclass
class GenerationJob:
    """Statistics for one glossary generation run."""
    job_id: str
    index_name: str
    status: GenerationStatus = GenerationStatus.PENDING
    total_terms: int = 0
    pages_written: int = 0
    links_created: int = 0
    terms: List[str] = field(default_factory=list)
    written_pages: List[str] = field(default_factory=list)
    started_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None
    error: Optional[str] = None

    @property
    def duration(self) -> float:
        """Run duration in seconds."""
        if not self.started_at:
            return 0.0
        end = self.completed_at or datetime.now()
        return (end - self.started_at).total_seconds()

    @property
    def progress_percentage(self) -> float:
        # term pages plus the index page
        total = self.total_terms + 1
        return min(100.0, self.pages_written / total * 100)
