"""
Verdict extraction from free-form model replies.

Models wrap JSON in prose, markdown fences or preambles, so the reply is never
trusted to be pure JSON. The fallback ladder:

1. empty reply                 -> Irrelevant, status 500
2. no "{...}" span in reply    -> Relevant, description = whole trimmed reply
3. "{...}" span decodes        -> decoded object, passed through unchanged
4. "{...}" span does not decode -> same as 2

Extraction never raises.
"""

import json
import logging
import math
import re
from typing import Any, Dict, NamedTuple

from ....core.errors import EmptyResponseError
from ....models.schemas.verdict import RelevantVerdict

logger = logging.getLogger(__name__)

# Greedy: first "{" through last "}", nested braces are not balanced
_BRACE_SPAN = re.compile(r"\{.*\}", re.DOTALL)

LOG_TEXT_LIMIT = 500


class ExtractedVerdict(NamedTuple):
    body: Dict[str, Any]
    status_code: int = 200


def capture_braces(text: str):
    """Substring from the first "{" to the last "}", or None."""
    match = _BRACE_SPAN.search(text or "")
    return match.group(0) if match else None


def _reject_constant(name):
    # NaN and Infinity are not JSON and cannot be sent back to the caller
    raise ValueError(f"invalid JSON constant {name}")


def _finite_float(literal):
    value = float(literal)
    if math.isinf(value):
        raise ValueError(f"number out of range: {literal}")
    return value


def _describe(text: str) -> ExtractedVerdict:
    return ExtractedVerdict(RelevantVerdict(description=text.strip()).model_dump())


def extract_verdict(raw_text: str) -> ExtractedVerdict:
    # Only a truly empty reply counts; whitespace falls through to the description path
    if not raw_text:
        logger.error("AI response was empty")
        return ExtractedVerdict(EmptyResponseError().to_verdict(), EmptyResponseError.status_code)

    logger.info(f"AI text extracted: {raw_text[:LOG_TEXT_LIMIT]}")

    candidate = capture_braces(raw_text)
    if candidate is None:
        logger.warning("No JSON object in AI response, treating reply as description")
        return _describe(raw_text)

    try:
        parsed = json.loads(candidate, parse_constant=_reject_constant, parse_float=_finite_float)
    except (ValueError, RecursionError) as e:
        logger.warning(f"Could not decode JSON in AI response ({e}), treating reply as description")
        return _describe(raw_text)

    return ExtractedVerdict(parsed)
