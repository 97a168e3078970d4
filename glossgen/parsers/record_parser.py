"""
Line-oriented glossary record parser.

Format: a term line, then one or more non-empty definition lines, ended by a
blank line or end of input; repeated until end of input. Definition lines are
joined with single spaces.
"""
from pathlib import Path
from typing import Iterable, Iterator, List, Tuple
import io
import logging

from ..core.interfaces import IRecordSource
from ..core.exceptions import RecordReadError, wrap_error


logger = logging.getLogger(__name__)


def join_definition(lines: List[str], trailing_space: bool = False) -> str:
    """
    Join definition lines with single spaces.

    With ``trailing_space`` every line is followed by a space, including the
    last one (``"a b "`` instead of ``"a b"``).
    """
    if trailing_space:
        return ''.join(f"{line} " for line in lines)
    return ' '.join(lines)


def parse_records(lines: Iterable[str], trailing_space: bool = False) -> Iterator[Tuple[str, str]]:
    """
    Parse ``(term, definition)`` records from lines of text.

    Blank lines between records are skipped. A term at end of input with no
    definition lines gets an empty definition.
    """
    term = None
    parts: List[str] = []

    for raw in lines:
        line = raw.rstrip('\r\n')
        if term is None:
            if not line:
                continue
            term = line
            parts = []
        elif line:
            parts.append(line)
        else:
            yield term, join_definition(parts, trailing_space)
            term = None

    if term is not None:
        if not parts:
            logger.debug(f"Term '{term}' at end of input has no definition")
        yield term, join_definition(parts, trailing_space)


class TextRecordSource(IRecordSource):
    """Record source over an in-memory sequence of lines (or an open stream)."""

    def __init__(self, lines: Iterable[str], trailing_space: bool = False):
        self._lines = lines
        self.trailing_space = trailing_space

    @classmethod
    def from_string(cls, text: str, trailing_space: bool = False) -> 'TextRecordSource':
        return cls(io.StringIO(text, newline='').readlines(), trailing_space)

    def records(self) -> Iterator[Tuple[str, str]]:
        return parse_records(self._lines, self.trailing_space)


class FileRecordSource(IRecordSource):
    """Record source reading a terms file; the file is open only while iterating."""

    def __init__(self, path: Path, encoding: str = "utf-8", trailing_space: bool = False):
        self.path = Path(path)
        self.encoding = encoding
        self.trailing_space = trailing_space

    def records(self) -> Iterator[Tuple[str, str]]:
        """
        Yield records from the file.

        Raises:
            RecordReadError: If the file cannot be opened or decoded
        """
        try:
            f = open(self.path, 'r', encoding=self.encoding, newline='')
        except OSError as e:
            raise wrap_error(e, RecordReadError, "Cannot open terms file", path=str(self.path))

        logger.info(f"Reading terms from {self.path}")
        with f:
            try:
                yield from parse_records(f, self.trailing_space)
            except (OSError, UnicodeDecodeError) as e:
                raise wrap_error(e, RecordReadError, "Cannot read terms file", path=str(self.path))

    def get_source_info(self):
        info = super().get_source_info()
        info.update({'path': str(self.path), 'encoding': self.encoding})
        return info
