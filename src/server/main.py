"""FastAPI application exposing refile operations over a workspace."""

from __future__ import annotations

from fastapi import FastAPI

from server.routers import refile

app = FastAPI(
    title="norgrefile",
    description="Move Norg headings and list items between workspace documents.",
)
app.include_router(refile.router)


@app.get("/health")
async def health() -> dict[str, str]:
    """Liveness probe."""
    return {"status": "ok"}
