"""Prompt templates."""

from .prompts_manager import PromptsManager, get_prompts_manager

__all__ = ["PromptsManager", "get_prompts_manager"]
