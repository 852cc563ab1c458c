"""Content negotiation: accept markdown (with YAML frontmatter) or JSON, answer JSON or HTML."""

from __future__ import annotations

import html
import json
import re

import frontmatter
from fastapi import HTTPException, Request, Response
from pydantic import BaseModel

_CSS = """\
  body { font-family: Georgia, serif; max-width: 720px; margin: 24px auto;
         padding: 0 16px; color: #222; line-height: 1.6; }
  h1 { font-size: 20pt; margin-bottom: 4px; }
  h2 { font-size: 14pt; margin: 18px 0 6px 0; }
  pre { background: #f0ede4; padding: 12px; border-radius: 6px; overflow-x: auto; }
  code { background: #f0ede4; padding: 1px 4px; border-radius: 3px; }
  pre code { background: none; padding: 0; }
  .excerpt { color: #666; font-style: italic; }
  .error { color: #cc3300; }
"""

_FM_BOUNDARY = re.compile(r"^-{3,}\s*$")


def _markdown_body(text: str) -> str:
    """Return the text after the closing frontmatter line, whitespace intact."""
    lines = text.split("\n")
    start = next((i for i, line in enumerate(lines) if line.strip()), 0)
    if not _FM_BOUNDARY.match(lines[start]):
        return text
    for i, line in enumerate(lines[start + 1 :], start=start + 1):
        if _FM_BOUNDARY.match(line):
            return "\n".join(lines[i + 1 :])
    return text


async def parse_body(request: Request) -> dict:
    """Parse request body as JSON or markdown with YAML frontmatter."""
    content_type = request.headers.get("content-type", "")
    raw = await request.body()
    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise HTTPException(status_code=400, detail="Body must be UTF-8") from e

    if not text.strip():
        return {}

    if "application/json" in content_type:
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise HTTPException(status_code=400, detail=f"Invalid JSON: {e.msg}") from e
        if not isinstance(data, dict):
            raise HTTPException(status_code=400, detail="JSON body must be an object")
        return data

    # Parse as markdown with optional YAML frontmatter; the body is the post content
    try:
        post = frontmatter.loads(text)
    except Exception as e:
        raise HTTPException(status_code=400, detail="Invalid frontmatter") from e
    result = dict(post.metadata)
    result["content"] = _markdown_body(text) if post.metadata else text
    return result


def wants_json(request: Request) -> bool:
    accept = request.headers.get("accept", "")
    return "application/json" in accept


def render_page(title: str, body: str) -> str:
    """Wrap an already-safe HTML fragment in a minimal standalone page."""
    return f"""\
<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<meta name="viewport" content="width=device-width, initial-scale=1">
<title>{html.escape(title)}</title>
<style>{_CSS}</style>
</head>
<body>
<h1>{html.escape(title)}</h1>
{body}
</body>
</html>"""


def render_response(
    request: Request,
    data: dict | BaseModel,
    status_code: int = 200,
    headers: dict | None = None,
) -> Response:
    """Return JSON or an HTML page based on Accept header."""
    if isinstance(data, BaseModel):
        data = data.model_dump(mode="json")

    if wants_json(request):
        return Response(
            content=json.dumps(data, indent=2),
            status_code=status_code,
            media_type="application/json",
            headers=headers,
        )

    if "error" in data:
        page = render_page("Error", f'<p class="error">{html.escape(str(data["error"]))}</p>')
    else:
        body = f'<p class="excerpt">{html.escape(data.get("excerpt", ""))}</p>\n{data.get("html", "")}'
        page = render_page(data.get("title", ""), body)

    return Response(
        content=page,
        status_code=status_code,
        media_type="text/html",
        headers=headers,
    )
