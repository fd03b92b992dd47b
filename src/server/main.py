"""FastAPI application serving the daemon tools."""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from server.routers import mcp_router, validate_router
from server.server_config import APP_NAME, APP_VERSION, CORS_HEADERS, CORS_METHODS, CORS_ORIGINS

app = FastAPI(title=APP_NAME, version=APP_VERSION)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_methods=CORS_METHODS,
    allow_headers=CORS_HEADERS,
)


@app.get("/health")
async def health_check() -> dict[str, str]:
    return {"status": "ok", "service": APP_NAME, "version": APP_VERSION}


app.include_router(mcp_router)
app.include_router(validate_router)
