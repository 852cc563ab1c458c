"""Tests for the admin preview endpoint: JSON and markdown bodies, JSON and HTML answers."""

from __future__ import annotations

from blogmark.api.preview import render_post
from blogmark.md_render import md_to_html


def test_render_post():
    post = render_post("Hello", "# Hi\n\nThe quick brown fox jumps", excerpt_length=10)
    assert post.title == "Hello"
    assert post.html == "<h2>Hi</h2>\n<p>The quick brown fox jumps</p>\n"
    assert post.excerpt == "# Hi\n\nThe..."


async def test_preview_json(client, admin_headers):
    resp = await client.post(
        "/v1/preview",
        json={"title": "Post", "content": "- one\n- two\n\nAfter.\n"},
        headers=admin_headers,
    )
    assert resp.status_code == 200
    data = resp.json()
    assert data["title"] == "Post"
    assert data["html"] == "<ul><li>one</li><li>two</li></ul>\n<p>After.</p>\n"
    assert data["excerpt"] == "- one\n- two\n\nAfter."


async def test_preview_markdown_with_frontmatter(client, admin_headers):
    body = "---\ntitle: From frontmatter\n---\nSome **bold** text\n"
    resp = await client.post(
        "/v1/preview",
        content=body.encode(),
        headers={**admin_headers, "Content-Type": "text/markdown"},
    )
    assert resp.status_code == 200
    data = resp.json()
    assert data["title"] == "From frontmatter"
    assert data["html"] == "<p>Some <strong>bold</strong> text</p>\n"


async def test_preview_markdown_body_keeps_leading_code_indent(client, admin_headers):
    body = "---\ntitle: T\n---\n    code line\n    more\n"
    resp = await client.post(
        "/v1/preview",
        content=body.encode(),
        headers={**admin_headers, "Content-Type": "text/markdown"},
    )
    assert resp.status_code == 200
    data = resp.json()
    assert data["html"] == md_to_html("    code line\n    more\n")
    assert data["html"] == "<pre><code>code line\nmore\n</code></pre>\n"
    assert data["excerpt"] == "code line\n    more"


async def test_preview_markdown_without_frontmatter_is_all_content(client, admin_headers):
    resp = await client.post(
        "/v1/preview",
        content=b"    x = 1\n",
        headers={**admin_headers, "Content-Type": "text/markdown"},
    )
    # No title anywhere, so the body alone fails validation
    assert resp.status_code == 400
    assert resp.json()["error"] == "Invalid request body"


async def test_preview_rejects_non_utf8_body(client, admin_headers):
    resp = await client.post(
        "/v1/preview",
        content=b"\xff\xfe{",
        headers={**admin_headers, "Content-Type": "application/json"},
    )
    assert resp.status_code == 400
    assert resp.json() == {"error": "Body must be UTF-8"}


async def test_preview_html_page(client):
    resp = await client.post(
        "/v1/preview",
        json={"title": "<Tom & Jerry>", "content": "Hello <world>"},
        headers={"X-ExeDev-Email": "editor@example.com"},
    )
    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("text/html")
    assert "<h1>&lt;Tom &amp; Jerry&gt;</h1>" in resp.text
    assert "<p>Hello &lt;world&gt;</p>" in resp.text
    assert '<p class="excerpt">Hello &lt;world&gt;</p>' in resp.text


async def test_preview_missing_title(client, admin_headers):
    resp = await client.post("/v1/preview", json={"content": "x"}, headers=admin_headers)
    assert resp.status_code == 400
    assert resp.json()["error"] == "Invalid request body"


async def test_preview_blank_title(client, admin_headers):
    resp = await client.post(
        "/v1/preview", json={"title": "   ", "content": "x"}, headers=admin_headers
    )
    assert resp.status_code == 400


async def test_preview_content_too_long(client, admin_headers, admin_settings, monkeypatch):
    monkeypatch.setattr(admin_settings, "max_content_length", 5)
    resp = await client.post(
        "/v1/preview", json={"title": "T", "content": "too long"}, headers=admin_headers
    )
    assert resp.status_code == 400
    assert "exceeds 5" in resp.json()["detail"]


async def test_preview_invalid_json(client, admin_headers):
    resp = await client.post(
        "/v1/preview",
        content=b"{not json",
        headers={**admin_headers, "Content-Type": "application/json"},
    )
    assert resp.status_code == 400
    assert resp.json()["error"].startswith("Invalid JSON")


async def test_preview_empty_content_renders_empty_fragment(client, admin_headers):
    resp = await client.post(
        "/v1/preview", json={"title": "Empty", "content": ""}, headers=admin_headers
    )
    assert resp.status_code == 200
    assert resp.json()["html"] == ""
    assert resp.json()["excerpt"] == ""


async def test_health(client):
    resp = await client.get("/health")
    assert resp.json() == {"status": "ok"}
