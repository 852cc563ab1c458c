"""blogmark: safe HTML rendering for plain-text blog posts."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import HTTPException

from blogmark.api.router import api_router
from blogmark.config import settings
from blogmark.content import render_response

logging.basicConfig(level=settings.log_level.upper())
logger = logging.getLogger("blogmark")

app = FastAPI(
    title="blogmark",
    description="Blog post markup renderer",
    version="0.1.0",
)

app.include_router(api_router)


@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException):
    return render_response(
        request,
        {"error": exc.detail},
        status_code=exc.status_code,
        headers=exc.headers,
    )


@app.get("/health")
async def health():
    return {"status": "ok"}


def main():
    import uvicorn

    logger.info("Starting blogmark on %s:%d", settings.host, settings.port)
    uvicorn.run(
        "blogmark.main:app",
        host=settings.host,
        port=settings.port,
    )


if __name__ == "__main__":
    main()
