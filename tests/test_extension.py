"""
Python-Markdown extension tests

Renders markdown end to end and inspects the HTML with BeautifulSoup, so
attribute order and serializer whitespace do not matter.
"""

from xml.etree import ElementTree as ET

import markdown
import pytest
from bs4 import BeautifulSoup

from flexigraph.lib.extension import (
    FlexigraphExtension,
    FlexigraphTreeprocessor,
    containerItems_extract,
    inlineItems_extract,
)
from flexigraph.models.nodes import InlineNode, TextFragment


README = (
    "~> Standard flexible paragraph\n"
    "=:a:> Alert paragraph justified in a wrapper\n"
    "~:s> Success paragraph aligned left\n"
    "=|> Centered paragraph in a wrapper\n"
)

BAD_USAGE = (
    "-> content\n"
    "\n"
    "~_> content\n"
    "~ç> content\n"
    "~A> content\n"
    "\n"
    "~dg::> content\n"
    "~::dg> content\n"
    "\n"
    "~:::> content\n"
    "~::|> content\n"
    "~|::> content\n"
)


def render(text, **config):
    html = markdown.markdown(text, extensions=[FlexigraphExtension(**config)])
    return BeautifulSoup(html, "html.parser")


def classes(tag):
    return tag.get("class", [])


class TestNoMarkers:
    def test_bad_usage_stays_plain(self):
        soup = render(BAD_USAGE)
        paragraphs = soup.find_all("p")

        assert len(paragraphs) == 4
        for paragraph in paragraphs:
            assert paragraph.attrs == {}
        assert paragraphs[0].get_text() == "-> content"
        assert "~A> content" in paragraphs[1].get_text()
        assert "~|::> content" in paragraphs[3].get_text()

    def test_plain_markdown_unchanged(self):
        text = "# Title\n\nSome *plain* text.\n"
        expected = markdown.markdown(text)

        assert markdown.markdown(text, extensions=[FlexigraphExtension()]) == expected


class TestDefaultOptions:
    def test_readme_example(self):
        soup = render(README)
        top = [tag for tag in soup.children if getattr(tag, "name", None)]

        assert [tag.name for tag in top] == ["p", "div", "p", "div"]

        assert classes(top[0]) == ["flexible-paragraph"]
        assert top[0].get("style") is None
        assert top[0].get_text() == "Standard flexible paragraph"

        assert classes(top[1]) == ["flexible-paragraph-wrapper"]
        alert = top[1].find("p")
        assert classes(alert) == [
            "flexible-paragraph", "flexiparaph-alert", "flexiparaph-align-justify",
        ]
        assert alert["style"] == "text-align:justify"
        assert alert.get_text() == "Alert paragraph justified in a wrapper"

        assert classes(top[2]) == [
            "flexible-paragraph", "flexiparaph-success", "flexiparaph-align-left",
        ]
        assert top[2]["style"] == "text-align:left"

        centered = top[3].find("p")
        assert classes(centered) == ["flexible-paragraph", "flexiparaph-align-center"]
        assert centered["style"] == "text-align:center"

    def test_inline_nodes_kept(self):
        soup = render("**bold** with\n~w:> hello *warning*\n")
        first, second = soup.find_all("p")

        assert first.attrs == {}
        assert first.strong.get_text() == "bold"
        assert first.get_text() == "bold with"

        assert classes(second) == [
            "flexible-paragraph", "flexiparaph-warning", "flexiparaph-align-right",
        ]
        assert second.em.get_text() == "warning"
        assert second.get_text() == "hello warning"

    def test_marker_mid_sentence(self):
        soup = render("abc *em* ~w|> hello\n")
        first, second = soup.find_all("p")

        assert first.get_text() == "abc em"
        assert classes(second)[-1] == "flexiparaph-align-center"
        assert second.get_text() == "hello"

    def test_blockquote_paragraph(self):
        soup = render("> ~:s:> quoted\n")
        paragraph = soup.blockquote.find("p")

        assert "flexiparaph-success" in classes(paragraph)
        assert paragraph["style"] == "text-align:justify"

    def test_loose_list_paragraph(self):
        soup = render("- ~e> first\n\n- second\n")
        paragraphs = soup.find_all("li")[0].find_all("p")

        assert classes(paragraphs[0]) == ["flexible-paragraph", "flexiparaph-error"]

    def test_separate_paragraphs(self):
        soup = render("~w> one\n\n~s> two\n")
        paragraphs = soup.find_all("p")

        assert [classes(p)[1] for p in paragraphs] == [
            "flexiparaph-warning", "flexiparaph-success",
        ]


class TestTightContainers:
    """List items and definitions whose content is not wrapped in <p>"""

    def test_tight_list_item(self):
        soup = render("- ~w> tight item\n- two\n")
        first, second = soup.find_all("li")

        paragraph = first.find("p")
        assert classes(paragraph) == ["flexible-paragraph", "flexiparaph-warning"]
        assert paragraph.get_text() == "tight item"
        assert "~w>" not in first.get_text()

        assert second.find("p") is None
        assert second.get_text() == "two"

    def test_tight_list_item_wrapper(self):
        soup = render("- => x\n")
        wrapper = soup.li.find("div")

        assert classes(wrapper) == ["flexible-paragraph-wrapper"]
        assert wrapper.p.get_text() == "x"

    def test_nested_list_kept(self):
        soup = render("- ~s> parent\n    - child\n")
        outer = soup.find("li")
        children = [tag.name for tag in outer.children if getattr(tag, "name", None)]

        assert children == ["p", "ul"]
        assert "flexiparaph-success" in classes(outer.p)
        assert outer.ul.li.get_text() == "child"

    def test_inline_nodes_in_list_item(self):
        soup = render("- *a* ~w> b\n")
        first, second = soup.li.find_all("p")

        assert first.em.get_text() == "a"
        assert first.attrs == {}
        assert classes(second)[-1] == "flexiparaph-warning"
        assert second.get_text() == "b"

    def test_definition(self):
        html = markdown.markdown("Term\n: ~w> def\n", extensions=["def_list", FlexigraphExtension()])
        soup = BeautifulSoup(html, "html.parser")

        assert classes(soup.dd.p) == ["flexible-paragraph", "flexiparaph-warning"]
        assert soup.dd.p.get_text() == "def"

    def test_rewritten_count(self):
        extension = FlexigraphExtension()
        markdown.Markdown(extensions=[extension]).convert("- ~> a\n- b\n- ~> c\n")

        assert extension.processor.rewritten == 2


class TestConfiguredOptions:
    def test_literal_options(self):
        def paragraph_properties(alignment, classifications):
            return {"title": classifications, "dummy": "", "className": None}

        def wrapper_properties(alignment, classifications):
            return {"data-alignment": alignment, "data-classifications": classifications}

        soup = render(
            README,
            dictionary={"s": "solid"},
            paragraph_class_name="custom-paragraph",
            paragraph_classification_prefix="paraflex",
            paragraph_properties=paragraph_properties,
            wrapper_tag_name="section",
            wrapper_class_name="custom-paragraph-wrapper",
            wrapper_properties=wrapper_properties,
        )
        sections = soup.find_all("section")

        assert len(sections) == 2
        assert sections[0]["data-alignment"] == "justify"
        assert sections[0]["data-classifications"] == "alert"
        assert sections[1].get("data-classifications") is None
        assert sections[0].p["title"] == "alert"
        assert "dummy" not in sections[0].p.attrs

        solid = soup.find("p", class_="paraflex-solid")
        assert classes(solid) == ["custom-paragraph", "paraflex-solid", "paraflex-align-left"]
        assert solid["title"] == "solid"

    def test_computed_options(self):
        soup = render(
            README,
            dictionary={"s": "solid"},
            paragraph_class_name=lambda alignment, classifications: [
                f"remark-{'-'.join(classifications) or 'plain'}-paragraph", alignment or "",
            ],
            paragraph_classification_prefix="",
            wrapper_tag_name=lambda alignment, classifications: (
                "aside" if "alert" in classifications else "div"
            ),
        )

        aside = soup.find("aside")
        assert classes(aside.p) == ["remark-alert-paragraph", "justify"]
        assert classes(soup.find("p")) == ["remark-plain-paragraph"]
        assert soup.find("div").p["style"] == "text-align:center"

    def test_extension_by_module_name(self):
        html = markdown.markdown(
            "=:> wrapped\n",
            extensions=["flexigraph.lib.extension"],
            extension_configs={"flexigraph.lib.extension": {"wrapper_tag_name": "section"}},
        )
        soup = BeautifulSoup(html, "html.parser")

        assert soup.section is not None
        assert soup.section.p["style"] == "text-align:left"

    def test_rewritten_count(self):
        extension = FlexigraphExtension()
        md = markdown.Markdown(extensions=[extension])
        md.convert("~> a\n~> b\n\nplain\n\nx ~> c\n")

        assert extension.processor.rewritten == 2

    def test_invalid_dictionary(self):
        with pytest.raises(ValueError):
            markdown.markdown("~> a", extensions=[FlexigraphExtension(dictionary={"A": "bad"})])


class TestInlineItems:
    def test_paragraph_items(self):
        paragraph = ET.fromstring("<p>abc <em>it</em> ~w|> hello</p>")
        items = inlineItems_extract(paragraph)

        assert items[0] == TextFragment("abc ")
        assert isinstance(items[1], InlineNode)
        assert items[1].node.tag == "em"
        assert items[2] == TextFragment(" ~w|> hello")

    def test_not_a_paragraph(self):
        assert inlineItems_extract(ET.fromstring("<h1>~> x</h1>")) is None

    def test_treeprocessor_default_options(self):
        root = ET.fromstring("<div><p>~:> x</p><pre>~> y</pre></div>")
        FlexigraphTreeprocessor().run(root)

        assert root[0].get("style") == "text-align:left"
        assert root[1].text == "~> y"

    def test_container_items_stop_at_block(self):
        item = ET.fromstring("<li>~s> a <em>b</em> c<ul><li>d</li></ul></li>")
        items = containerItems_extract(item, lambda tag: tag == "ul")

        assert items[0] == TextFragment("~s> a ")
        assert items[1].node.tag == "em"
        assert items[2] == TextFragment(" c")
        assert len(items) == 3

    def test_container_items_other_tags(self):
        assert containerItems_extract(ET.fromstring("<p>~> x</p>"), lambda tag: False) is None
        assert containerItems_extract(ET.fromstring("<li><p>x</p></li>"), lambda tag: tag == "p") is None

    def test_treeprocessor_tight_item_without_markdown(self):
        root = ET.fromstring("<div><ul><li>=:> x<ol><li>y</li></ol></li></ul></div>")
        FlexigraphTreeprocessor().run(root)

        item = root[0][0]
        assert item.text is None
        assert [child.tag for child in item] == ["div", "ol"]
        assert item[0][0].get("style") == "text-align:left"
        assert item[0][0].text == "x"
