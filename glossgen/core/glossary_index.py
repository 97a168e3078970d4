"""
Glossary index: term -> definition mapping plus insertion-ordered term list.
"""
import logging
from typing import Dict, Iterable, Iterator, List, Tuple

from .exceptions import (
    DuplicateTermError, InvalidTermError, TermNotFoundError, GlossaryFrozenError
)
from .models import DuplicatePolicy


logger = logging.getLogger(__name__)


class GlossaryIndex:
    """
    Ordered, deduplicated collection of glossary terms.

    Every term in the ordered sequence has exactly one entry in the mapping
    and vice versa. Once frozen, the index is read-only.
    """

    def __init__(self, duplicate_policy: DuplicatePolicy = DuplicatePolicy.REJECT):
        self.duplicate_policy = DuplicatePolicy.from_value(duplicate_policy)
        self._definitions: Dict[str, str] = {}
        self._order: List[str] = []
        self._frozen = False
        self._term_set = frozenset()

    @classmethod
    def from_records(
        cls,
        records: Iterable[Tuple[str, str]],
        duplicate_policy: DuplicatePolicy = DuplicatePolicy.REJECT,
        freeze: bool = True
    ) -> 'GlossaryIndex':
        """Build an index from ``(term, definition)`` pairs."""
        index = cls(duplicate_policy)
        for term, definition in records:
            index.add(term, definition)
        if freeze:
            index.freeze()
        return index

    def add(self, term: str, definition: str) -> bool:
        """
        Add a term.

        Returns:
            True if the stored definition changed

        Raises:
            InvalidTermError: If term is empty
            DuplicateTermError: If term exists and policy is REJECT
            GlossaryFrozenError: If the index is frozen
        """
        if self._frozen:
            raise GlossaryFrozenError("Cannot add terms to a frozen index", term=term)
        if not term:
            raise InvalidTermError("Term cannot be empty", term=term)

        if term in self._definitions:
            if self.duplicate_policy is DuplicatePolicy.REJECT:
                raise DuplicateTermError(f"Duplicate term: {term}", term=term)
            if self.duplicate_policy is DuplicatePolicy.FIRST_WINS:
                logger.warning(f"Ignoring duplicate definition for '{term}' (first wins)")
                return False
            logger.warning(f"Replacing definition for '{term}' (last wins)")
            self._definitions[term] = definition
            return True

        self._definitions[term] = definition
        self._order.append(term)
        logger.debug(f"Added term '{term}' ({len(definition)} chars)")
        return True

    def freeze(self) -> 'GlossaryIndex':
        """Snapshot the term set and reject further additions."""
        self._frozen = True
        self._term_set = frozenset(self._order)
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    @property
    def terms(self) -> Tuple[str, ...]:
        """Terms in insertion order."""
        return tuple(self._order)

    @property
    def term_set(self) -> frozenset:
        """Immutable snapshot of the known terms."""
        if self._frozen:
            return self._term_set
        return frozenset(self._order)

    def sorted_terms(self) -> List[str]:
        """Terms in ordinal (code-point) order; insertion order is untouched."""
        return sorted(self._order)

    def definition_of(self, term: str) -> str:
        try:
            return self._definitions[term]
        except KeyError:
            raise TermNotFoundError(f"Unknown term: {term}", term=term) from None

    def items(self) -> Iterator[Tuple[str, str]]:
        for term in self._order:
            yield term, self._definitions[term]

    def __contains__(self, term) -> bool:
        return term in self._definitions

    def __len__(self) -> int:
        return len(self._order)

    def __iter__(self) -> Iterator[str]:
        return iter(self._order)

    def __repr__(self) -> str:
        return f"GlossaryIndex(terms={len(self)}, policy={self.duplicate_policy.value})"
