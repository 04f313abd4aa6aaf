"""Relay error taxonomy.

Every error carries the HTTP status and the caller-facing reason so the
top-level handler can turn it into an Irrelevant-shaped verdict.
"""

from typing import Optional

from ..models.schemas.verdict import IrrelevantVerdict

INTERNAL_ERROR_REASON = "An internal server error occurred."
MISCONFIGURED_REASON = "Service is misconfigured. Please contact the administrator."
EMPTY_RESPONSE_REASON = "AI response was empty. Please upload a clear image."


class RelayError(Exception):
    status_code: int = 500
    reason: str = INTERNAL_ERROR_REASON

    def __init__(self, reason: Optional[str] = None, status_code: Optional[int] = None):
        if reason is not None:
            self.reason = reason
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.reason)

    def to_verdict(self) -> dict:
        return IrrelevantVerdict(reason=self.reason).model_dump()


class InputError(RelayError):
    """Missing or mistyped request field."""
    status_code = 400


class UpstreamError(RelayError):
    """Provider answered with a non-success HTTP status."""

    def __init__(self, status_text: str, upstream_status: Optional[int] = None):
        self.upstream_status = upstream_status
        super().__init__(f"API Error: {status_text}. Please try again.")


class EmptyResponseError(RelayError):
    reason = EMPTY_RESPONSE_REASON


class MisconfiguredError(RelayError):
    """Required configuration (the upstream credential) is missing."""
    reason = MISCONFIGURED_REASON
