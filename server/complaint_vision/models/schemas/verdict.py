"""Relevance verdict models (the two response shapes)."""

from typing import Literal

from pydantic import BaseModel


class IrrelevantVerdict(BaseModel):
    is_relevant: Literal[False] = False
    reason: str


class RelevantVerdict(BaseModel):
    is_relevant: Literal[True] = True
    description: str
