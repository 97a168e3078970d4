"""
Cross-linker: turns a definition into HTML where every token that exactly
matches a glossary term becomes a link to that term's page.
"""
import logging
from typing import List

from .glossary_index import GlossaryIndex
from .models import page_name_for
from .tokenizer import Tokenizer


logger = logging.getLogger(__name__)


def anchor(term: str) -> str:
    """Anchor element pointing at a term's page."""
    return f'<a href="{page_name_for(term)}">{term}</a>'


class CrossLinker:
    """Renders definitions with links to other terms of the same index."""

    def __init__(self, index: GlossaryIndex, tokenizer: Tokenizer = None):
        self.index = index
        self.tokenizer = tokenizer or Tokenizer()
        self.last_link_count = 0

    def render(self, term: str) -> str:
        """
        Render the definition of ``term``.

        Raises:
            TermNotFoundError: If term is not in the index
        """
        return self.render_text(self.index.definition_of(term))

    def render_text(self, text: str) -> str:
        """Link every exactly-matching term in ``text``; other tokens pass through."""
        terms = self.index.term_set
        parts: List[str] = []
        links = 0

        for token in self.tokenizer.tokens(text):
            if token.text in terms:
                parts.append(anchor(token.text))
                links += 1
            else:
                parts.append(token.text)

        self.last_link_count = links
        return ''.join(parts)
