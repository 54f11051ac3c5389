from __future__ import annotations

from fastapi import FastAPI

from .router import router as pages_router

app = FastAPI(title="QuickRules API", version="0.1.0")
app.include_router(pages_router)


@app.get("/api/healthz")
async def healthz() -> dict[str, str]:
    return {"status": "ok"}


__all__ = ["app"]
