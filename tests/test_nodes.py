from quickrules.ingest.nodes import BlockKind, classify, heading_level, parse_markup
from quickrules.models.source import SourceNode


def test_parse_markup_returns_top_level_elements():
    nodes = parse_markup("<h2>Title</h2>\n<p>Some <em>text</em></p>\n<ul><li>One</li></ul>")

    assert [node.tag for node in nodes] == ["h2", "p", "ul"]
    assert nodes[0].heading_level == 2
    assert nodes[0].outer_html == "<h2>Title</h2>"
    assert nodes[1].inner_html == "Some <em>text</em>"
    assert nodes[1].inner_text == "Some text"
    assert nodes[2].children[0].tag == "li"


def test_parse_markup_reads_body_of_full_document():
    nodes = parse_markup("<html><head><title>x</title></head><body><p>a</p></body></html>")

    assert [node.tag for node in nodes] == ["p"]


def test_parse_markup_handles_empty_input():
    assert parse_markup("") == []


def test_heading_level_matches_h1_to_h6_only():
    assert heading_level("h1") == 1
    assert heading_level("H6") == 6
    assert heading_level("h7") == 0
    assert heading_level("header") == 0
    assert heading_level(None) == 0


def test_classify_kinds():
    heading, callout, plain_quote, listing, para = parse_markup(
        "<h3>Rolls</h3>"
        "<blockquote><p>Optional Rule: Fate</p></blockquote>"
        "<blockquote><p>Just a quote</p></blockquote>"
        "<ol><li>a</li></ol>"
        "<p>text</p>"
    )

    assert classify(heading).kind is BlockKind.HEADING
    assert classify(heading).level == 3
    assert classify(callout).kind is BlockKind.CALLOUT
    assert classify(plain_quote).kind is BlockKind.PLAIN
    assert classify(listing).kind is BlockKind.LIST
    assert classify(para).kind is BlockKind.PLAIN


def test_callout_marker_is_case_sensitive():
    (quote,) = parse_markup("<blockquote>optional rule: lower case</blockquote>")

    assert classify(quote).kind is BlockKind.PLAIN
    assert classify(quote, marker="optional rule").kind is BlockKind.CALLOUT


def test_node_without_tag_is_plain():
    assert classify(SourceNode(tag="", inner_text="loose")).kind is BlockKind.PLAIN


def test_inner_text_breaks_lines_like_rendered_text():
    (quote,) = parse_markup("<blockquote><p>First</p><p>Second<br>line</p></blockquote>")

    assert quote.inner_text == "\nFirst\n\nSecond\nline\n"
