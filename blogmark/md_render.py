"""Line-oriented markup-to-HTML renderer for blog post bodies."""

from __future__ import annotations

import html
from dataclasses import dataclass

from blogmark.inline import format_inline

CODE_INDENT = "    "
HEADER_PREFIXES = ("## ", "# ")
LIST_PREFIX = "- "


@dataclass(frozen=True)
class Paragraph:
    text: str


@dataclass(frozen=True)
class Header:
    text: str


@dataclass(frozen=True)
class CodeBlock:
    lines: tuple[str, ...]


@dataclass(frozen=True)
class BulletList:
    items: tuple[str, ...]


BlockNode = Paragraph | Header | CodeBlock | BulletList


def escape(text: str) -> str:
    """Escape &, <, > and double quotes."""
    return html.escape(text, quote=False).replace('"', "&quot;")


def parse(content: str) -> list[BlockNode]:
    """Split a post body into block nodes, top to bottom."""
    blocks: list[BlockNode] = []
    paragraph: list[str] = []
    items: list[str] | None = None
    code: list[str] | None = None

    def flush_paragraph() -> None:
        if paragraph:
            blocks.append(Paragraph(" ".join(paragraph)))
            paragraph.clear()

    def close_list() -> None:
        nonlocal items
        if items is not None:
            blocks.append(BulletList(tuple(items)))
            items = None

    for line in content.split("\n"):
        line = line.removesuffix("\r")

        # Code blocks
        if code is not None:
            if line.startswith(CODE_INDENT):
                code.append(line[len(CODE_INDENT) :])
                continue
            blocks.append(CodeBlock(tuple(code)))
            code = None
        elif line.startswith(CODE_INDENT):
            flush_paragraph()
            close_list()
            code = [line[len(CODE_INDENT) :]]
            continue

        stripped = line.strip()

        if not stripped:
            flush_paragraph()
            close_list()
            continue

        # Headings: both levels collapse to one
        prefix = next((p for p in HEADER_PREFIXES if stripped.startswith(p)), None)
        if prefix is not None:
            flush_paragraph()
            close_list()
            blocks.append(Header(stripped[len(prefix) :]))
        elif stripped.startswith(LIST_PREFIX):
            flush_paragraph()
            if items is None:
                items = []
            items.append(stripped[len(LIST_PREFIX) :])
        else:
            close_list()
            paragraph.append(stripped)

    if code is not None:
        blocks.append(CodeBlock(tuple(code)))
    close_list()
    flush_paragraph()
    return blocks


def _span(text: str) -> str:
    return format_inline(escape(text))


def render_block(node: BlockNode) -> str:
    """Render one block node to HTML."""
    if isinstance(node, Paragraph):
        return f"<p>{_span(node.text)}</p>"
    if isinstance(node, Header):
        return f"<h2>{_span(node.text)}</h2>"
    if isinstance(node, BulletList):
        return "<ul>" + "".join(f"<li>{_span(item)}</li>" for item in node.items) + "</ul>"
    body = "".join(escape(line) + "\n" for line in node.lines)
    return f"<pre><code>{body}</code></pre>"


def render_blocks(nodes: list[BlockNode]) -> str:
    """Render nodes in order, each followed by a newline."""
    return "".join(render_block(node) + "\n" for node in nodes)


def md_to_html(md: str) -> str:
    """Convert a post body to an HTML fragment. Handles headings, lists, code blocks, bold, code."""
    return render_blocks(parse(md))
