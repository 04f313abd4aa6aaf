"""
Qwen vision-language adapter (OpenAI-compatible chat completions).
Defaults to the OpenRouter endpoint; any OpenAI-compatible proxy works.
"""

import asyncio
import logging
import time
from typing import Any, Dict

import requests

from ....core.config import ProviderConfig
from ....core.errors import MisconfiguredError, UpstreamError
from .base import BaseVisionLanguageModel

logger = logging.getLogger(__name__)

ERROR_BODY_LOG_LIMIT = 500


class QwenVisionAdapter(BaseVisionLanguageModel):
    """
    Calls a Qwen VL model through an OpenAI-compatible endpoint.
    The provider config (including the API key) is passed in explicitly at startup.
    """

    def __init__(self, config: ProviderConfig):
        self.config = config
        self.model_name = config.MODEL_NAME
        self.base_url = config.BASE_URL
        self.api_key = config.API_KEY

    @property
    def is_configured(self) -> bool:
        return bool((self.api_key or "").strip())

    async def analyze_image(self, prompt: str, image_base64: str) -> str:
        if not self.is_configured:
            # Never send an unauthenticated request upstream
            logger.error("OPENROUTER_API_KEY is not set, refusing to call provider")
            raise MisconfiguredError()

        logger.info(f"Calling provider: base_url={self.base_url}, model={self.model_name}")
        logger.info(f"Image data length: {len(image_base64)}")

        call_start_time = time.time()
        loop = asyncio.get_event_loop()
        text = await loop.run_in_executor(None, self._call_api_sync, prompt, image_base64)
        logger.info(f"Provider call finished in {time.time() - call_start_time:.2f}s")
        return text

    def build_payload(self, prompt: str, image_base64: str) -> Dict[str, Any]:
        return {
            "model": self.model_name,
            "messages": [
                {
                    "role": "user",
                    "content": [
                        {"type": "text", "text": prompt},
                        {
                            "type": "image_url",
                            "image_url": {"url": f"data:image/jpeg;base64,{image_base64}"},
                        },
                    ],
                },
            ],
        }

    def build_headers(self) -> Dict[str, str]:
        return {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self.api_key}",
            "HTTP-Referer": self.config.REFERER,
            "X-Title": self.config.TITLE,
        }

    def _call_api_sync(self, prompt: str, image_base64: str) -> str:
        url = f"{self.base_url.rstrip('/')}/v1/chat/completions"

        # (connect, read): reading a vision completion takes much longer than connecting
        timeout_tuple = (self.config.CONNECT_TIMEOUT, self.config.RESPONSE_TIMEOUT)

        resp = requests.post(
            url,
            json=self.build_payload(prompt, image_base64),
            headers=self.build_headers(),
            timeout=timeout_tuple,
        )
        logger.info(f"Response status: {resp.status_code}")

        if not resp.ok:
            logger.error(f"Provider API error: {resp.status_code} {resp.reason}")
            logger.error(f"Error body: {(resp.text or '')[:ERROR_BODY_LOG_LIMIT]}")
            raise UpstreamError(resp.reason or str(resp.status_code), upstream_status=resp.status_code)

        data = resp.json()
        logger.debug(f"API response: {str(data)[:ERROR_BODY_LOG_LIMIT]}")
        return self.extract_content(data)

    @staticmethod
    def extract_content(data: Any) -> str:
        """Text of choices[0].message.content, or "" when there is none."""
        if not isinstance(data, dict):
            return ""
        choices = data.get("choices") or [{}]
        choice = choices[0] if isinstance(choices, list) and isinstance(choices[0], dict) else {}
        message = choice.get("message") or {}
        content = message.get("content", "") if isinstance(message, dict) else ""
        if not isinstance(content, str):
            return ""
        return content or ""
