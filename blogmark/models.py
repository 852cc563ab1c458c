"""Pydantic models for request/response schemas."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator


class PreviewRequest(BaseModel):
    title: str = Field(min_length=1, max_length=500, description="Post title")
    content: str = Field(default="", description="Post body in blog markup")

    @field_validator("title")
    @classmethod
    def strip_title(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Title is required")
        return v

    @field_validator("content")
    @classmethod
    def limit_content(cls, v: str) -> str:
        from blogmark.config import settings

        if len(v) > settings.max_content_length:
            raise ValueError(f"Content exceeds {settings.max_content_length} characters")
        return v


class RenderedPost(BaseModel):
    title: str
    html: str = Field(description="Safe HTML fragment of the post body")
    excerpt: str = Field(description="Plain-text summary, not HTML-escaped")


class ErrorResponse(BaseModel):
    error: str
    detail: str | None = None
