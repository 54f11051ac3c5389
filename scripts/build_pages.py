from __future__ import annotations

import argparse
import asyncio
from pathlib import Path

from dotenv import load_dotenv

from quickrules.config_loader import load_config
from quickrules.ingest import RebuildPipeline, open_source
from quickrules.models.page import BuildMode
from quickrules.store import MemoryPageStore, SQLitePageConfig, SQLitePageStore


def parse_args() -> argparse.Namespace:
    if Path(".env").exists():
        load_dotenv(".env", override=False)
    parser = argparse.ArgumentParser(description="Split rulebook sub-documents into quick-reference pages.")
    parser.add_argument("source", type=Path, help="Journal export (.json), HTML file, or directory of HTML files")
    parser.add_argument(
        "--journal",
        default=None,
        help="Journal id or name to use when the export holds several journals.",
    )
    parser.add_argument(
        "--pattern",
        default="**/*.html",
        help="Glob pattern for directory sources (default: **/*.html).",
    )
    parser.add_argument(
        "--mode",
        choices=[mode.value for mode in BuildMode],
        default=BuildMode.ALL.value,
        help="Target collection to rebuild (default: all).",
    )
    parser.add_argument(
        "--sqlite-db",
        type=Path,
        default=Path("artifacts/quickrules.db"),
        help="SQLite page store path (default: artifacts/quickrules.db)",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Optional YAML/TOML/JSON file overriding acronyms, minor words, markers and collection names.",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Segment and report without touching the page store.",
    )
    return parser.parse_args()


async def run(args: argparse.Namespace) -> None:
    if not args.source.exists():
        raise FileNotFoundError(f"Source path not found: {args.source}")

    config = load_config(args.config)
    source = open_source(args.source, journal=args.journal, pattern=args.pattern)

    sqlite_store = None
    if args.dry_run:
        store = MemoryPageStore()
    else:
        sqlite_store = SQLitePageStore(SQLitePageConfig(db_path=args.sqlite_db, batch_size=config.batch_size))
        sqlite_store.initialize()
        store = sqlite_store

    try:
        result = await RebuildPipeline(store, config=config).rebuild(source, args.mode)
    finally:
        if sqlite_store is not None:
            sqlite_store.close()

    print(
        "Build complete" if not result.skipped else "Build skipped",
        {
            "collection": result.collection_key,
            "documents": result.documents_processed,
            "failed": result.documents_failed,
            "pages": result.pages_written,
            "sqlite_db": None if args.dry_run else str(args.sqlite_db),
            "warnings": result.warnings,
        },
    )


def main() -> None:
    asyncio.run(run(parse_args()))


if __name__ == "__main__":
    main()
