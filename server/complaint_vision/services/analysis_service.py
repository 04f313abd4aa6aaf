"""
Complaint image analysis service
validate -> build prompt -> call model -> extract verdict
"""

import json
import logging
from typing import Union

from ..core.errors import RelayError
from ..models.schemas.analysis import AnalysisRequest
from .ai_models.language.base import BaseVisionLanguageModel
from .ai_models.language.prompt_wrapper import PromptWrapper
from .ai_models.language.verdict_extractor import ExtractedVerdict, extract_verdict

logger = logging.getLogger(__name__)


class AnalysisService:
    """Runs one complaint image through the vision model and returns one verdict."""

    def __init__(self, language_model: BaseVisionLanguageModel, prompt_wrapper: PromptWrapper):
        self.language_model = language_model
        self.prompt_wrapper = prompt_wrapper

    async def analyze(self, raw_body: Union[bytes, str]) -> ExtractedVerdict:
        """
        Analyze a raw JSON request body.

        Raises:
            ValueError: body is not valid JSON
            RelayError: input, configuration or upstream failure
        """
        body = json.loads(raw_body)
        request = AnalysisRequest.from_body(body)
        prompt = self.prompt_wrapper.build_prompt(request.issue_type)
        raw_text = await self.language_model.analyze_image(prompt, request.image_payload)
        return extract_verdict(raw_text)

    async def handle(self, raw_body: Union[bytes, str]) -> ExtractedVerdict:
        """Same as analyze() but every failure becomes an Irrelevant verdict."""
        try:
            return await self.analyze(raw_body)
        except RelayError as e:
            if e.status_code >= 500:
                logger.error(f"Analysis failed ({e.status_code}): {e.reason}")
            else:
                logger.info(f"Rejected request: {e.reason}")
            return ExtractedVerdict(e.to_verdict(), e.status_code)
        except Exception as e:
            logger.error(f"Error in complaint image analysis: {e}", exc_info=True)
            return ExtractedVerdict(RelayError().to_verdict(), RelayError.status_code)
