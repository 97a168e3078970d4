"""
Unit tests for HtmlPageRenderer.
"""
import pytest

from glossgen.core.cross_linker import CrossLinker
from glossgen.core.glossary_index import GlossaryIndex
from glossgen.formatters.html_renderer import HtmlPageRenderer, index_link_text


class TestIndexPage:
    """Index page rendering."""

    def test_exact_markup(self, sample_linker):
        page = HtmlPageRenderer(sample_linker, index_name="glossary.html").render_index()
        assert page.name == "glossary.html"
        assert page.body == (
            "<html>\n"
            "<head>\n"
            "<title>Glossary</title>\n"
            "</head>\n"
            "<body>\n"
            "<h2>Glossary</h2>\n"
            "<hr>\n"
            "<h3>Index</h3>\n"
            "<ul>\n"
            "<li>\n"
            '<a href="key.html">key</a>\n'
            "</li>\n"
            "<li>\n"
            '<a href="map.html">map</a>\n'
            "</li>\n"
            "</ul>\n"
            "</body>\n"
            "</html>\n"
        )

    def test_key_listed_before_map(self, sample_linker):
        body = HtmlPageRenderer(sample_linker).render_index().body
        assert body.index('href="key.html"') < body.index('href="map.html"')

    def test_one_link_per_term(self):
        terms = ["b", "a", "C", "d"]
        index = GlossaryIndex.from_records([(t, "") for t in terms])
        body = HtmlPageRenderer(CrossLinker(index)).render_index().body
        for term in terms:
            assert body.count(f'<a href="{term}.html">{term}</a>') == 1

    def test_custom_title(self, sample_linker):
        body = HtmlPageRenderer(sample_linker, title="Terms").render_index().body
        assert "<title>Terms</title>" in body
        assert "<h2>Terms</h2>" in body


class TestTermPage:
    """Term page rendering."""

    def test_exact_markup(self, sample_linker):
        page = HtmlPageRenderer(sample_linker, index_name="index.html").render_term("key")
        assert page.name == "key.html"
        assert page.body == (
            "<html>\n"
            "<head>\n"
            "<title>key</title>\n"
            "</head>\n"
            "<body>\n"
            "<h2>\n"
            "<b>\n"
            "<i>\n"
            '<font color="red">key</font>\n'
            "</i>\n"
            "</b>\n"
            "</h2>\n"
            "<blockquote>\n"
            'an index into a <a href="map.html">map</a></blockquote>\n'
            "<hr>\n"
            "<p>\n"
            "Return to \n"
            '<a href="index.html">index</a>\n'
            ".\n"
            "</p>\n"
            "</body>\n"
            "</html>\n"
        )

    def test_map_page_links_key(self, sample_linker):
        body = HtmlPageRenderer(sample_linker).render_term("map").body
        assert '<a href="key.html">key</a>' in body

    def test_back_link_uses_index_name(self, sample_linker):
        renderer = HtmlPageRenderer(sample_linker, index_name="glossary.htm")
        for term in ("map", "key"):
            assert '<a href="glossary.htm">glossary</a>' in renderer.render_term(term).body

    def test_empty_definition(self):
        index = GlossaryIndex.from_records([("void", "")])
        body = HtmlPageRenderer(CrossLinker(index)).render_term("void").body
        assert "<blockquote>\n</blockquote>\n" in body

    def test_heading_color(self, sample_linker):
        body = HtmlPageRenderer(sample_linker, heading_color="blue").render_term("map").body
        assert '<font color="blue">map</font>' in body


@pytest.mark.parametrize("name, expected", [
    ("index.html", "index"),
    ("glossary.htm", "glossary"),
    ("noext", "noext"),
    ("my.glossary.html", "my.glossary"),
])
def test_index_link_text(name, expected):
    assert index_link_text(name) == expected
