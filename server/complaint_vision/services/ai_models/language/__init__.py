"""Vision-language model adapters."""

from .qwen_adapter import QwenVisionAdapter
from .prompt_wrapper import PromptWrapper
from .verdict_extractor import ExtractedVerdict, extract_verdict

__all__ = ["QwenVisionAdapter", "PromptWrapper", "ExtractedVerdict", "extract_verdict"]
