"""Vision-language model base class."""

from abc import ABC, abstractmethod


class BaseVisionLanguageModel(ABC):
    """Common interface for multimodal completion backends."""

    @abstractmethod
    async def analyze_image(self, prompt: str, image_base64: str) -> str:
        """
        Send one prompt plus one image and return the raw reply text.

        Args:
            prompt: instruction text
            image_base64: base64 image payload without a data-URI header

        Returns:
            Raw text of the first completion choice, or "" if there is none
        """
        raise NotImplementedError
