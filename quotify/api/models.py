"""Pydantic response models for the quotify API."""

from __future__ import annotations

from pydantic import BaseModel


class QuoteOut(BaseModel):
    text: str
    author: str


class PositionOut(BaseModel):
    """Cursor state; previous/next flags drive button enabling in the widget."""
    index: int
    total: int
    has_previous: bool
    has_next: bool


class QuoteView(PositionOut):
    """Body returned by load / current / next / previous."""
    quote: QuoteOut


class ShareOut(BaseModel):
    clipboard_text: str
    tweet_url: str
