from quickrules.ingest.context import ContextAccumulator
from quickrules.models.source import SourceNode


def _node(tag: str, html: str, level: int = 0) -> SourceNode:
    return SourceNode(tag=tag, heading_level=level, outer_html=html)


def test_context_tracks_h2_and_h3_buffers():
    acc = ContextAccumulator()
    acc.advance(_node("h2", "<h2>A</h2>", 2), 2)
    acc.advance(_node("p", "<p>x</p>"), 0)

    assert acc.context_for(2) == ""
    assert acc.context_for(3) == '<div class="dh-context-group"><h2>A</h2><p>x</p></div>'

    acc.advance(_node("h3", "<h3>B</h3>", 3), 3)
    acc.advance(_node("p", "<p>y</p>"), 0)

    assert acc.buffer.level2 == "<h2>A</h2><p>x</p>"
    assert acc.context_for(4) == (
        '<div class="dh-context-group"><h2>A</h2><p>x</p></div>'
        '<div class="dh-context-group"><h3>B</h3><p>y</p></div>'
    )


def test_new_h2_resets_h3_and_remembers_prior_buffer():
    acc = ContextAccumulator()
    acc.advance(_node("h2", "<h2>A</h2>", 2), 2)
    acc.advance(_node("h3", "<h3>B</h3>", 3), 3)
    acc.advance(_node("h2", "<h2>C</h2>", 2), 2)

    assert acc.buffer.level3 == ""
    assert acc.buffer.level2 == "<h2>C</h2>"
    assert acc.buffer.prior_level2 == "<h2>A</h2>"


def test_h1_clears_everything():
    acc = ContextAccumulator()
    acc.advance(_node("h2", "<h2>A</h2>", 2), 2)
    acc.advance(_node("h3", "<h3>B</h3>", 3), 3)
    acc.advance(_node("h1", "<h1>New</h1>", 1), 1)

    assert acc.context_for(3) == ""
    assert acc.context_for(4) == ""


def test_plain_nodes_before_any_heading_are_discarded():
    acc = ContextAccumulator()
    acc.advance(_node("p", "<p>intro</p>"), 0)

    assert acc.buffer.level2 == ""
    assert acc.buffer.level3 == ""


def test_deep_headings_leave_buffers_alone():
    acc = ContextAccumulator(group_class="ctx")
    acc.advance(_node("h2", "<h2>A</h2>", 2), 2)
    acc.advance(_node("h5", "<h5>E</h5>", 5), 5)

    assert acc.context_for(3) == '<div class="ctx"><h2>A</h2></div>'
