"""Pydantic models for the chat sample page."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field


class Citation(BaseModel):
    """A search document the model grounded its answer on."""

    content: str = ""
    url: Optional[str] = None
    title: Optional[str] = None
    filepath: Optional[str] = None


class ChatAnswer(BaseModel):
    """Result of one chat completion against the search-augmented deployment."""

    system_message: str
    user_message: str
    completion: str = Field(default="", description="Raw Markdown returned by the model")
    intent: Optional[str] = None
    citations: List[Citation] = Field(default_factory=list)
