"""Admin preview: render a draft post the way the public blog will show it."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Request
from pydantic import ValidationError

from blogmark.auth import AdminEmail
from blogmark.config import settings
from blogmark.content import parse_body, render_response
from blogmark.excerpt import excerpt
from blogmark.md_render import parse, render_blocks
from blogmark.models import ErrorResponse, PreviewRequest, RenderedPost

logger = logging.getLogger("blogmark.preview")

router = APIRouter()


def render_post(title: str, content: str, excerpt_length: int | None = None) -> RenderedPost:
    """Render a post body to an HTML fragment plus its listing excerpt."""
    if excerpt_length is None:
        excerpt_length = settings.excerpt_length
    blocks = parse(content)
    logger.debug("Rendered %d blocks for %r", len(blocks), title)
    return RenderedPost(
        title=title,
        html=render_blocks(blocks),
        excerpt=excerpt(content, excerpt_length),
    )


@router.post(
    "/v1/preview",
    response_model=RenderedPost,
    responses={400: {"model": ErrorResponse}, 403: {"model": ErrorResponse}},
)
async def preview_post(request: Request, _: str = AdminEmail):
    """Render a draft. Accepts JSON or markdown with a `title` in the frontmatter."""
    body = await parse_body(request)
    try:
        req = PreviewRequest(**body)
    except ValidationError as e:
        detail = e.errors()[0]["msg"] if e.errors() else None
        return render_response(
            request,
            {"error": "Invalid request body", "detail": detail},
            status_code=400,
        )
    return render_response(request, render_post(req.title, req.content))
