from __future__ import annotations

from typing import Iterator

from fastapi import APIRouter, Depends, HTTPException, Query

from quickrules.config_loader import load_config
from quickrules.ingest.pipeline import RebuildPipeline
from quickrules.ingest.sources import open_source
from quickrules.models.configs import QuickRulesConfig
from quickrules.settings import Settings, get_settings
from quickrules.store.sqlite import SQLitePageConfig, SQLitePageStore
from .models import (
    PageDetail,
    PageListResponse,
    RebuildResponse,
    page_detail,
    page_summary,
)


router = APIRouter(prefix="/api", tags=["pages"])


def get_config(settings: Settings = Depends(get_settings)) -> QuickRulesConfig:
    return load_config(settings.config_path)


def get_page_store(
    settings: Settings = Depends(get_settings),
    config: QuickRulesConfig = Depends(get_config),
) -> Iterator[SQLitePageStore]:
    store = SQLitePageStore(SQLitePageConfig(db_path=settings.sqlite_db_path, batch_size=config.batch_size))
    store.initialize()
    try:
        yield store
    finally:
        store.close()


def _collection(config: QuickRulesConfig, mode: str) -> str:
    try:
        return config.collection_for(mode)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc


@router.post("/rebuild", response_model=RebuildResponse)
async def rebuild(
    mode: str = Query(default="all"),
    settings: Settings = Depends(get_settings),
    config: QuickRulesConfig = Depends(get_config),
    store: SQLitePageStore = Depends(get_page_store),
) -> RebuildResponse:
    _collection(config, mode)
    source = open_source(settings.source_path, journal=settings.journal, pattern=settings.source_pattern)
    result = await RebuildPipeline(store, config=config).rebuild(source, mode)
    return RebuildResponse(
        collection=result.collection_key,
        documents_processed=result.documents_processed,
        documents_failed=result.documents_failed,
        pages_written=result.pages_written,
        skipped=result.skipped,
        warnings=list(result.warnings),
    )


@router.get("/pages", response_model=PageListResponse)
def list_pages(
    mode: str = Query(default="all"),
    config: QuickRulesConfig = Depends(get_config),
    store: SQLitePageStore = Depends(get_page_store),
) -> PageListResponse:
    collection = _collection(config, mode)
    items = [page_summary(page) for page in store.fetch_pages(collection)]
    return PageListResponse(collection=collection, items=items)


@router.get("/pages/{order}", response_model=PageDetail)
def get_page(
    order: int,
    mode: str = Query(default="all"),
    config: QuickRulesConfig = Depends(get_config),
    store: SQLitePageStore = Depends(get_page_store),
) -> PageDetail:
    collection = _collection(config, mode)
    page = store.fetch_page(collection, order)
    if page is None:
        raise HTTPException(status_code=404, detail=f"Page {order} not found in '{collection}'")
    return page_detail(page)


@router.get("/search", response_model=PageListResponse)
def search_pages(
    q: str = Query(..., min_length=1),
    mode: str = Query(default="all"),
    limit: int = Query(default=20, ge=1, le=200),
    config: QuickRulesConfig = Depends(get_config),
    store: SQLitePageStore = Depends(get_page_store),
) -> PageListResponse:
    collection = _collection(config, mode)
    items = [page_summary(page) for page in store.search(collection, q, limit=limit)]
    return PageListResponse(collection=collection, items=items)


__all__ = ["router", "get_config", "get_page_store"]
