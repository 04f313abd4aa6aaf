"""AI model adapters."""

from .language import QwenVisionAdapter, PromptWrapper, extract_verdict

__all__ = ["QwenVisionAdapter", "PromptWrapper", "extract_verdict"]
