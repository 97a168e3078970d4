"""
HTML page renderer.

Composes the glossary index page and one page per term. Markup is emitted
one element per line; definition bodies come from the cross-linker and are
inserted unescaped.
"""
from typing import Iterable, List
import logging
import os

from ..core.cross_linker import CrossLinker, anchor
from ..core.models import (
    RenderedPage, page_name_for, DEFAULT_INDEX_NAME, DEFAULT_INDEX_TITLE
)


logger = logging.getLogger(__name__)


def _lines(*lines: str) -> str:
    return ''.join(f"{line}\n" for line in lines)


def index_link_text(index_name: str) -> str:
    """Visible text of the back-link: index page name without its extension."""
    return os.path.splitext(index_name)[0]


class HtmlPageRenderer:
    """Renders index and term pages for one glossary."""

    def __init__(
        self,
        cross_linker: CrossLinker,
        index_name: str = DEFAULT_INDEX_NAME,
        title: str = DEFAULT_INDEX_TITLE,
        heading_color: str = "red"
    ):
        self.cross_linker = cross_linker
        self.index_name = index_name
        self.title = title
        self.heading_color = heading_color

    @property
    def index(self):
        return self.cross_linker.index

    def render_index(self, terms: Iterable[str] = None) -> RenderedPage:
        """
        Render the index page.

        Args:
            terms: Terms to list; defaults to the index's sorted terms
        """
        if terms is None:
            terms = self.index.sorted_terms()

        entries: List[str] = []
        for term in terms:
            entries.append(_lines("<li>", anchor(term), "</li>"))

        body = (
            _lines(
                "<html>",
                "<head>",
                f"<title>{self.title}</title>",
                "</head>",
                "<body>",
                f"<h2>{self.title}</h2>",
                "<hr>",
                "<h3>Index</h3>",
                "<ul>",
            )
            + ''.join(entries)
            + _lines("</ul>", "</body>", "</html>")
        )
        return RenderedPage(self.index_name, body)

    def render_term(self, term: str) -> RenderedPage:
        """
        Render the page of one term.

        Raises:
            TermNotFoundError: If term is not in the index
        """
        definition = self.cross_linker.render(term)

        body = (
            _lines(
                "<html>",
                "<head>",
                f"<title>{term}</title>",
                "</head>",
                "<body>",
                "<h2>",
                "<b>",
                "<i>",
                f'<font color="{self.heading_color}">{term}</font>',
                "</i>",
                "</b>",
                "</h2>",
                "<blockquote>",
            )
            + definition
            + _lines(
                "</blockquote>",
                "<hr>",
                "<p>",
                "Return to ",
                f'<a href="{self.index_name}">{index_link_text(self.index_name)}</a>',
                ".",
                "</p>",
                "</body>",
                "</html>",
            )
        )
        return RenderedPage(page_name_for(term), body)
