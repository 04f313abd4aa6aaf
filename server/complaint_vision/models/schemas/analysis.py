"""Complaint image analysis request model."""

import re
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from ...core.errors import InputError

_DATA_URI_PREFIX = re.compile(r"^data:image/\w+;base64,", re.ASCII)

IMAGE_INVALID_REASON = "Image data is missing or invalid."
ISSUE_TYPE_REQUIRED_REASON = "Issue type is required."


class AnalysisRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    image_data: str = Field(..., alias="imageData")
    issue_type: str = Field(..., alias="issueType")

    @property
    def image_payload(self) -> str:
        """Base64 payload with any data-URI header removed."""
        return _DATA_URI_PREFIX.sub("", self.image_data, count=1)

    @classmethod
    def from_body(cls, body: Any) -> "AnalysisRequest":
        """Validate a decoded JSON body.

        Raises InputError for the first missing or mistyped field; image data
        is checked before issue type. A body that is not a JSON object has
        neither field.
        """
        if not isinstance(body, dict):
            body = {}

        image_data = body.get("imageData")
        if not image_data or not isinstance(image_data, str):
            raise InputError(IMAGE_INVALID_REASON)

        issue_type = body.get("issueType")
        if not issue_type or not isinstance(issue_type, str):
            raise InputError(ISSUE_TYPE_REQUIRED_REASON)

        return cls(image_data=image_data, issue_type=issue_type)

