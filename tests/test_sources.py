import json

import pytest

from quickrules.ingest.sources import (
    DirectorySource,
    JournalExportSource,
    SourceNotFound,
    StaticSource,
    open_source,
)
from quickrules.models.source import SourceDocument


def _write_export(path, payload):
    path.write_text(json.dumps(payload), encoding="utf-8")


@pytest.mark.asyncio
async def test_directory_source_lists_sorted_html_files(tmp_path):
    (tmp_path / "02-combat.html").write_text("<h2>Attack</h2>", encoding="utf-8")
    (tmp_path / "01_core_rules.html").write_text("<p>Intro</p>", encoding="utf-8")
    (tmp_path / "notes.txt").write_text("skip", encoding="utf-8")

    source = DirectorySource(tmp_path)
    ids = await source.document_ids()

    assert ids == ["01_core_rules.html", "02-combat.html"]
    doc = await source.load(ids[1])
    assert doc == SourceDocument(title="02 combat", raw_markup="<h2>Attack</h2>")


@pytest.mark.asyncio
async def test_directory_source_missing_root(tmp_path):
    source = DirectorySource(tmp_path / "missing")

    with pytest.raises(SourceNotFound):
        await source.document_ids()
    with pytest.raises(SourceNotFound):
        await DirectorySource(tmp_path).load("absent.html")


@pytest.mark.asyncio
async def test_journal_export_uses_text_pages_in_sort_order(tmp_path):
    export = tmp_path / "srd.json"
    _write_export(
        export,
        [
            {"_id": "other", "name": "Other", "pages": []},
            {
                "_id": "srd",
                "name": "Daggerheart SRD",
                "pages": [
                    {"_id": "p2", "name": "Combat", "type": "text", "sort": 200, "text": {"content": "<h2>A</h2>"}},
                    {"_id": "img", "name": "Map", "type": "image", "sort": 50},
                    {"_id": "p1", "name": "Introduction", "type": "text", "sort": 100, "text": {"content": "<p>i</p>"}},
                    {"_id": "p3", "name": "Blank", "type": "text", "sort": 300, "text": {"content": ""}},
                ],
            },
        ],
    )

    source = JournalExportSource(export, journal="Daggerheart SRD")
    ids = await source.document_ids()

    assert ids == ["p1", "p2"]
    assert (await source.load("p2")).title == "Combat"
    with pytest.raises(SourceNotFound):
        await source.load("p3")


@pytest.mark.asyncio
async def test_journal_export_missing_journal(tmp_path):
    export = tmp_path / "srd.json"
    _write_export(export, [{"_id": "a", "pages": []}, {"_id": "b", "pages": []}])

    with pytest.raises(SourceNotFound):
        await JournalExportSource(export).document_ids()
    with pytest.raises(SourceNotFound):
        await JournalExportSource(export, journal="zzz").document_ids()
    with pytest.raises(SourceNotFound):
        await JournalExportSource(tmp_path / "nope.json").document_ids()


@pytest.mark.asyncio
async def test_static_source_and_open_source(tmp_path):
    source = StaticSource([SourceDocument(title="A", raw_markup="<p>a</p>")])

    assert await source.document_ids() == ["0"]
    with pytest.raises(SourceNotFound):
        await source.load("5")

    assert isinstance(open_source(tmp_path / "x.json"), JournalExportSource)
    html = tmp_path / "single.html"
    html.write_text("<p>x</p>", encoding="utf-8")
    single = open_source(html)
    assert await single.document_ids() == ["single.html"]
