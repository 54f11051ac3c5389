from quickrules.models.page import Page, PageFlags, PageOrigin, TitleDisplay
from quickrules.models.source import SourceNode


def test_page_defaults_and_with_order():
    page = Page(name="Hope", content_html="<p>h</p>")

    assert page.title_display == TitleDisplay(show=False, level=1)
    assert page.flags == PageFlags(origin=PageOrigin.RULE, source_tag=None, order=None)

    ordered = page.with_order(7)
    assert ordered.order == 7
    assert page.order is None
    assert ordered.name == page.name


def test_source_node_find_first_walks_descendants():
    bold = SourceNode(tag="b", inner_text="Bold")
    node = SourceNode(
        tag="blockquote",
        children=(SourceNode(tag="p", children=(SourceNode(tag="", inner_text="text"), bold)),),
    )

    assert node.find_first("strong", "b") is bold
    assert node.find_first("em") is None
    assert node.children[0].children[0].tag == ""
