import logging
from typing import Optional

from .prompts import PromptsManager, get_prompts_manager

logger = logging.getLogger(__name__)

# Used when the YAML template is unavailable; wording matches prompts/complaint_analysis.yaml
DEFAULT_TEMPLATE = """
You are an AI assistant for "Nagar Rakshak", a civic issue reporting app.
Analyze the provided image for a complaint about "{issue_type}".
Determine if the image is genuinely relevant.
If relevant, provide a concise 2-line description of the problem's severity and genuineness.

Respond ONLY in JSON:
1. For irrelevant images:
{{"is_relevant": false, "reason": "Image does not appear to be related."}}

2. For relevant images:
{{"is_relevant": true, "description": "YOUR_DESCRIPTION_HERE"}}
"""


class PromptWrapper:
    """Builds the instruction prompt sent alongside the complaint image."""

    def __init__(
        self,
        prompts_manager: Optional[PromptsManager] = None,
        prompts_scene: str = "complaint_analysis",
        prompts_template: str = "default",
    ):
        self.prompts_manager = prompts_manager or get_prompts_manager()
        self.prompts_scene = prompts_scene
        self.prompts_template = prompts_template

    def build_prompt(self, issue_type: str) -> str:
        prompt = self.prompts_manager.format_prompt(
            scene=self.prompts_scene,
            template_name=self.prompts_template,
            issue_type=issue_type,
        )

        if not prompt:
            logger.warning(
                f"Prompt template not found (scene={self.prompts_scene}, "
                f"template={self.prompts_template}), using built-in template"
            )
            prompt = DEFAULT_TEMPLATE.format(issue_type=issue_type)

        return prompt
